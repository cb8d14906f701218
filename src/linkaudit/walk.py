from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from linkaudit.errors import WalkError

HTML_SUFFIX = ".html"


def iter_html_files(root: Path) -> Iterator[tuple[str, Path]]:
    """Yield ``(relative_key, absolute_path)`` for every ``.html`` file under root.

    Keys use forward slashes and are relative to ``root``. Directories and
    files are visited in sorted order so repeated walks agree. Symlinked
    directories are not followed.

    Raises:
        WalkError: if any directory cannot be listed
    """

    def _onerror(exc: OSError) -> None:
        raise WalkError(exc.filename or root, exc) from exc

    if not root.is_dir():
        raise WalkError(root, NotADirectoryError(f"not a directory: {root}"))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        dirnames.sort()
        current = Path(dirpath)
        for name in sorted(filenames):
            path = current / name
            if path.suffix != HTML_SUFFIX or not path.is_file():
                continue
            yield path.relative_to(root).as_posix(), path


__all__ = ["HTML_SUFFIX", "iter_html_files"]
