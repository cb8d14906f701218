from __future__ import annotations

import os

_SEP = "/"


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Lexically clean a slash-separated path into an index key.

    ``.`` segments are dropped, ``..`` pops the previous real segment and is
    discarded when there is nothing left to pop. A leading root separator is
    stripped so ``/about.html`` and ``about.html`` compare equal. No
    filesystem access, symlinks are not followed.
    """

    text = os.fspath(path)
    if not isinstance(path, str) and os.sep != _SEP:
        text = text.replace(os.sep, _SEP)
    segments: list[str] = []
    for part in text.split(_SEP):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return _SEP.join(segments)


def join_path(directory: str, target: str) -> str:
    """Join ``target`` onto ``directory``; a rooted target replaces it."""

    if target.startswith(_SEP) or not directory:
        return target
    return f"{directory.rstrip(_SEP)}{_SEP}{target}"


def parent_dir(path: str) -> str:
    head, _, _ = path.rpartition(_SEP)
    return head


__all__ = ["join_path", "normalize_path", "parent_dir"]
