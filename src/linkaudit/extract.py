"""Extraction of hrefs and ids from HTML documents.

Parsing is delegated to BeautifulSoup with the ``html.parser`` backend. Only
``<a href>`` links are collected; ids come from any element.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from linkaudit.errors import DocumentReadError
from linkaudit.types import DocumentInfo

logger = logging.getLogger(__name__)


def is_external_href(href: str) -> bool:
    """Return True when ``href`` parses as an absolute URL.

    An href with a scheme (``https:``, ``mailto:``) or a network location
    (``//cdn.example.org/x.js``) is external. Hrefs that cannot be parsed at
    all are treated as external too: they are not filesystem links.
    """

    try:
        parts = urlsplit(href)
    except ValueError:
        return True
    return bool(parts.scheme or parts.netloc)


def extract_document(text: str) -> DocumentInfo:
    """Parse HTML text into a ``DocumentInfo``."""

    soup = BeautifulSoup(text, "html.parser")

    relative: list[str] = []
    external: list[str] = []
    for anchor in soup.find_all("a", href=True):
        href = str(anchor["href"]).strip()
        if is_external_href(href):
            external.append(href)
        else:
            relative.append(href)

    ids = frozenset(str(el["id"]) for el in soup.find_all(id=True))
    return DocumentInfo(
        relative_hrefs=tuple(relative),
        external_hrefs=tuple(external),
        ids=ids,
    )


def read_document(path: Path) -> DocumentInfo:
    """Read ``path`` as UTF-8 and extract it.

    Raises:
        DocumentReadError: if the file cannot be read or is not valid UTF-8
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(path, exc) from exc
    info = extract_document(text)
    logger.debug(
        "Extracted %s: %d relative, %d external hrefs, %d ids",
        path,
        len(info.relative_hrefs),
        len(info.external_hrefs),
        len(info.ids),
    )
    return info


__all__ = ["extract_document", "is_external_href", "read_document"]
