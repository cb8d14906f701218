"""Splitting and resolution of link targets."""

from __future__ import annotations

import re
from urllib.parse import unquote

from linkaudit.paths import join_path, normalize_path, parent_dir
from linkaudit.types import LinkReference

_ESCAPED_HASH = re.compile("%23", re.IGNORECASE)


def parse_link(raw: object) -> LinkReference:
    """Split ``raw`` on its first ``#`` into a ``LinkReference``.

    Raises:
        LinkParseError: if ``raw`` is not representable as UTF-8 text
    """

    return LinkReference.parse(raw)


def _unquote_path(path: str) -> str:
    # %23 stays escaped: a decoded "#" would read as a fragment separator
    return "%23".join(unquote(part) for part in _ESCAPED_HASH.split(path))


def resolve_href(source: str, href: str) -> LinkReference:
    """Resolve a relative ``href`` found in the document at ``source``.

    The href is joined to the directory of ``source`` (a leading ``/`` means
    the scan root) and normalized. A query string is dropped and
    percent-escapes in the path are decoded, as a web server would, except
    ``%23``. An href with an empty path (``"#top"``) targets ``source`` itself.
    """

    raw = parse_link(href)
    path = _unquote_path(raw.path.partition("?")[0])
    target = source if not path else join_path(parent_dir(source), path)
    return LinkReference(path=normalize_path(target), fragment=raw.fragment)


__all__ = ["parse_link", "resolve_href"]
