"""Fatal error taxonomy for link audits.

Every error here means the corpus cannot be trusted: the run stops instead of
producing a partial report. Broken links themselves are never raised, they are
ordinary audit output.
"""

from __future__ import annotations

from pathlib import Path


class LinkAuditError(RuntimeError):
    """Base class for errors that abort an audit."""


class WalkError(LinkAuditError):
    """Directory traversal failed (permissions, entry removed mid-walk, ...)."""

    def __init__(self, path: Path | str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"Failed to walk directory {self.path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class DocumentReadError(LinkAuditError):
    """A discovered HTML file could not be read as UTF-8 text."""

    def __init__(self, path: Path | str, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        message = f"Failed to read document {self.path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class LinkParseError(LinkAuditError):
    """A link target is not representable as text."""

    def __init__(self, raw: object, cause: Exception | None = None) -> None:
        self.raw = raw
        self.cause = cause
        message = f"Invalid link path {raw!r}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


__all__ = [
    "DocumentReadError",
    "LinkAuditError",
    "LinkParseError",
    "WalkError",
]
