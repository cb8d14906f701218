from __future__ import annotations

import os
from dataclasses import dataclass

from linkaudit.errors import LinkParseError


def _as_text(raw: object) -> str:
    if isinstance(raw, bytes):
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LinkParseError(raw, exc) from exc
    if isinstance(raw, os.PathLike):
        raw = os.fspath(raw)
    if not isinstance(raw, str):
        raise LinkParseError(raw, TypeError(f"expected text, got {type(raw).__name__}"))
    try:
        # Lone surrogates come from undecodable filenames (surrogateescape)
        raw.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise LinkParseError(raw, exc) from exc
    return raw


@dataclass(frozen=True)
class DocumentInfo:
    """The parts of an HTML document the link audit cares about.

    - relative_hrefs: ``<a href>`` values without a URL scheme, in document order
    - external_hrefs: ``<a href>`` values that parse as absolute URLs
    - ids: every ``id`` attribute found on any element
    """

    relative_hrefs: tuple[str, ...] = ()
    external_hrefs: tuple[str, ...] = ()
    ids: frozenset[str] = frozenset()


@dataclass(frozen=True)
class LinkReference:
    """A link target split into a path and an optional ``#fragment``.

    - path: everything before the first ``#``; never contains ``#``
    - fragment: everything after the first ``#``, or None when empty or absent
    """

    path: str
    fragment: str | None = None

    @classmethod
    def parse(cls, raw: object) -> LinkReference:
        """Split ``raw`` on its first ``#``.

        Everything after the first ``#`` is the fragment, further ``#``
        characters included. An empty fragment (``"foo#"``) becomes ``None``.

        Raises:
            LinkParseError: if ``raw`` is not representable as UTF-8 text
        """

        text = _as_text(raw)
        path, sep, fragment = text.partition("#")
        if not sep or not fragment:
            return cls(path=path, fragment=None)
        return cls(path=path, fragment=fragment)

    def __str__(self) -> str:
        if self.fragment is None:
            return self.path
        return f"{self.path}#{self.fragment}"


@dataclass(frozen=True)
class MissingLink:
    """A relative link that did not resolve.

    - source: corpus key of the document containing the link
    - href: the raw href text as written in that document
    - link: the resolved target that was looked up
    """

    source: str
    href: str
    link: LinkReference
