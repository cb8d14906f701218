"""Audit options for linkaudit runs.

All configuration comes from the command line; there are no config files or
environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class AuditOptions:
    """Configuration for a single audit run."""

    # Directories whose HTML files form the corpus
    roots: list[Path] = field(default_factory=list)

    # Unresolved targets that exist as files under this directory are not reported
    base: Path = field(default_factory=Path.cwd)

    # Threads used to parse documents while building the index
    workers: int = 1

    # Probe the filesystem under ``base`` before reporting a link
    check_filesystem: bool = True

    @classmethod
    def from_cli(
        cls,
        *,
        directories: list[Path] | None = None,
        base: Path | None = None,
        workers: int = 1,
        check_filesystem: bool = True,
    ) -> AuditOptions:
        """Build AuditOptions from CLI argument values.

        Missing directories and base default to the current working directory.

        Raises:
            ValueError: If any argument has an invalid value
        """
        if workers < 1:
            raise ValueError(f"Invalid workers count {workers}. Must be >= 1")

        cwd = Path.cwd()
        roots = list(directories) if directories else [cwd]
        return cls(
            roots=roots,
            base=base if base is not None else cwd,
            workers=workers,
            check_filesystem=check_filesystem,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging."""
        return {
            "roots": [str(root) for root in self.roots],
            "base": str(self.base),
            "workers": self.workers,
            "check_filesystem": self.check_filesystem,
        }


__all__ = ["AuditOptions"]
