"""In-memory index of a site tree and the dead-link resolver.

The index is built once (``CorpusIndex.build``) and only read afterwards.
Keys are forward-slash paths relative to the scanned root, without a leading
separator, so a normalized link path can be looked up directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import suppress
from pathlib import Path

from linkaudit.extract import extract_document, read_document
from linkaudit.links import resolve_href
from linkaudit.paths import join_path
from linkaudit.types import DocumentInfo, LinkReference, MissingLink
from linkaudit.walk import iter_html_files

logger = logging.getLogger(__name__)

INDEX_DOCUMENT = "index.html"

ProgressCallback = Callable[[str, dict[str, int | str]], None] | None


def _safe_emit(on_progress: ProgressCallback, event: str, payload: dict[str, int | str]) -> None:
    if on_progress is None:
        return
    with suppress(Exception):
        on_progress(event, payload)


def _read_all(files: list[tuple[str, Path]], workers: int) -> Iterator[DocumentInfo]:
    paths = [path for _, path in files]
    if workers <= 1 or len(paths) <= 1:
        for path in paths:
            yield read_document(path)
        return
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # map() yields in input order
        yield from pool.map(read_document, paths)


class CorpusIndex:
    """Mapping of relative document path to its extracted ``DocumentInfo``."""

    def __init__(self, documents: Mapping[str, DocumentInfo] | None = None) -> None:
        self._documents: dict[str, DocumentInfo] = dict(documents or {})

    @classmethod
    def build(
        cls,
        roots: Sequence[Path],
        *,
        workers: int = 1,
        on_progress: ProgressCallback = None,
    ) -> CorpusIndex:
        """Walk every root and index each ``.html`` file found.

        Files are parsed independently (concurrently when ``workers > 1``) and
        merged into the index on the calling thread in walk order. When two
        roots produce the same relative path the later one wins.

        Raises:
            WalkError: if a directory cannot be traversed
            DocumentReadError: if a discovered file cannot be read as text
        """

        if workers < 1:
            raise ValueError("workers must be >= 1")

        documents: dict[str, DocumentInfo] = {}
        for root in roots:
            files = list(iter_html_files(Path(root)))
            _safe_emit(on_progress, "scan:start", {"root": str(root), "documents": len(files)})

            for (key, path), info in zip(files, _read_all(files, workers), strict=True):
                if key in documents:
                    logger.debug("Duplicate document %s from %s replaces earlier entry", key, root)
                documents[key] = info
                _safe_emit(on_progress, "document:indexed", {"path": str(path)})

            logger.info("Indexed %d HTML documents under %s", len(files), root)
            _safe_emit(on_progress, "scan:finalized", {"root": str(root), "documents": len(files)})

        return cls(documents)

    @classmethod
    def from_documents(cls, pairs: Iterable[tuple[str, str]]) -> CorpusIndex:
        """Build an index from ``(relative_path, html_text)`` pairs."""

        return cls({key: extract_document(text) for key, text in pairs})

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        return key in self._documents

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def get(self, key: str) -> DocumentInfo | None:
        return self._documents.get(key)

    def lookup(self, path: str) -> DocumentInfo | None:
        """Find the document served for ``path``, falling back to its index.html."""

        info = self._documents.get(path)
        if info is None:
            info = self._documents.get(join_path(path, INDEX_DOCUMENT))
        return info

    def contains(self, link: LinkReference) -> bool:
        """Return True if ``link`` resolves to an indexed document (and anchor)."""

        info = self.lookup(link.path)
        if info is None:
            return False
        if link.fragment is None:
            return True
        return link.fragment in info.ids

    def iter_missing(self) -> Iterator[MissingLink]:
        """Yield every relative link in the corpus that does not resolve."""

        for source, info in self._documents.items():
            for href in info.relative_hrefs:
                link = resolve_href(source, href)
                if not self.contains(link):
                    yield MissingLink(source=source, href=href, link=link)

    def missing_links(self) -> list[LinkReference]:
        """Return the unresolved links of the whole corpus, in no particular order."""

        missing = [item.link for item in self.iter_missing()]
        logger.info("Found %d unresolved links in %d documents", len(missing), len(self))
        return missing


__all__ = ["INDEX_DOCUMENT", "CorpusIndex"]
