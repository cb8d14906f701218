from __future__ import annotations

from io import StringIO

from rich.console import Console

from linkaudit.ui.progress import ProgressReporter


def _reporter() -> ProgressReporter:
    return ProgressReporter(Console(file=StringIO(), force_terminal=False))


def test_progress_scan_flow() -> None:
    with _reporter() as pr:
        pr.emit("scan:start", {"root": "site", "documents": 2})
        assert "documents" in pr._tasks
        assert pr._totals.get("documents") == 2
        pr.emit("document:indexed", {"path": "site/a.html"})
        pr.emit("document:indexed", {"path": "site/b.html"})
        pr.emit("scan:finalized", {"root": "site", "documents": 2})
        assert "documents" not in pr._tasks


def test_progress_multiple_roots_replace_task() -> None:
    with _reporter() as pr:
        pr.emit("scan:start", {"root": "one", "documents": 1})
        first = pr._tasks["documents"]
        pr.emit("scan:start", {"root": "two", "documents": 3})
        assert pr._tasks["documents"] != first
        assert pr._totals["documents"] == 3


def test_progress_resolve_flow() -> None:
    with _reporter() as pr:
        pr.emit("resolve:start", {"documents": 4})
        assert "resolve" in pr._tasks
        assert "resolve" not in pr._totals
        [task] = pr.progress.tasks
        assert task.description == "Resolving links in 4 documents"
        pr.emit("resolve:finalized", {"missing": 0})
        assert "resolve" not in pr._tasks


def test_progress_ignores_unknown_events() -> None:
    with _reporter() as pr:
        pr.emit("document:indexed", {"path": "x"})
        pr.emit("something:else", {})
        assert pr._tasks == {}
