from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from linkaudit.types import LinkReference, MissingLink

if TYPE_CHECKING:  # pragma: no cover - typing
    from linkaudit.corpus import CorpusIndex

logger = logging.getLogger(__name__)


def exists_on_disk(link: LinkReference, base: Path) -> bool:
    """Return True if the link path is a regular file under ``base``.

    Lets assets that are not corpus members (images, PDFs, ...) pass. The
    fragment is not checked here; callers must not probe links that resolve
    to indexed documents.
    """

    if not link.path:
        return False
    return (base / link.path).is_file()


def filter_unresolved(
    missing: Iterable[MissingLink],
    base: Path | None,
    index: CorpusIndex | None = None,
) -> list[MissingLink]:
    """Drop links whose target exists on disk; sort the rest by source and href.

    With ``base`` set to None nothing is probed and every link is kept. Links
    whose path resolves to a document in ``index`` are always kept: they are
    missing because of their fragment, not their file.
    """

    failures: list[MissingLink] = []
    for item in missing:
        in_corpus = index is not None and index.lookup(item.link.path) is not None
        if base is not None and not in_corpus and exists_on_disk(item.link, base):
            logger.debug("%s exists under %s; not reported", item.link.path, base)
            continue
        failures.append(item)
    failures.sort(key=lambda item: (item.source, item.href))
    return failures


def format_failure(item: MissingLink, base: Path) -> str:
    return f"Missing {item.link} (linked as {item.href!r} from {item.source}, base {base})"


__all__ = ["exists_on_disk", "filter_unresolved", "format_failure"]
