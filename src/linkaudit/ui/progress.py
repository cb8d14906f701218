"""Rich progress display for audit runs.

``ProgressReporter.emit`` is shaped like the ``on_progress`` callbacks used by
``CorpusIndex.build``, so it can be passed straight through.
"""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressReporter:
    def __init__(self, console: Console | None = None, *, transient: bool = True) -> None:
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
            transient=transient,
        )
        self._tasks: dict[str, TaskID] = {}
        self._totals: dict[str, int] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def add_step(self, description: str, total: int | None = None) -> TaskID:
        return self.progress.add_task(description, total=total)

    def finish_task(self, task_id: TaskID) -> None:
        task = self.progress.tasks[self.progress.task_ids.index(task_id)]
        if task.total is not None:
            self.progress.update(task_id, completed=task.total)
        self.progress.remove_task(task_id)

    def _finish(self, name: str) -> None:
        task_id = self._tasks.pop(name, None)
        self._totals.pop(name, None)
        if task_id is not None:
            self.finish_task(task_id)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "scan:start":
            self._finish("documents")
            total = int(payload.get("documents", 0))
            self._totals["documents"] = total
            self._tasks["documents"] = self.add_step(f"Indexing {payload.get('root', '')}", total)
        elif event == "document:indexed":
            task_id = self._tasks.get("documents")
            if task_id is not None:
                self.progress.advance(task_id)
        elif event == "scan:finalized":
            self._finish("documents")
        elif event == "resolve:start":
            documents = payload.get("documents", 0)
            self._tasks["resolve"] = self.add_step(f"Resolving links in {documents} documents")
        elif event == "resolve:finalized":
            self._finish("resolve")


__all__ = ["ProgressReporter"]
