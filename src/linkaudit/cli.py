"""CLI interface for linkaudit."""

import logging
from contextlib import nullcontext
from pathlib import Path
from typing import Annotated

import typer

from linkaudit import __version__
from linkaudit.corpus import CorpusIndex
from linkaudit.errors import LinkAuditError
from linkaudit.logs import setup_logging
from linkaudit.options import AuditOptions
from linkaudit.report import filter_unresolved, format_failure
from linkaudit.ui.progress import ProgressReporter

logger = logging.getLogger(__name__)

EXIT_BROKEN_LINKS = 1
EXIT_FATAL = 2

app = typer.Typer(
    name="linkaudit",
    help="Find dead relative links in static HTML site trees.",
    no_args_is_help=True,
)


@app.command()
def check(
    directories: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Directories to scan for HTML files (default: current directory)",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
        ),
    ] = None,
    base: Annotated[
        Path | None,
        typer.Option(
            "--base",
            "-b",
            help="Directory under which non-HTML targets are checked (default: current directory)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    workers: Annotated[
        int,
        typer.Option("--workers", help="Threads used to parse documents (default: 1)"),
    ] = 1,
    filesystem: Annotated[
        bool,
        typer.Option(
            "--filesystem/--no-filesystem",
            help="Accept targets that exist as plain files under --base (default: yes)",
        ),
    ] = True,
    progress: Annotated[
        bool,
        typer.Option("--progress/--no-progress", help="Show a progress display on stderr"),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """
    Report relative links that do not resolve inside the scanned directories.

    Every <a href> without a URL scheme is resolved against the directory of
    the page containing it. A link to a directory resolves through its
    index.html, and a #fragment must match an element id in the target page.

    Examples:

        # Scan the current directory
        linkaudit check

        # Scan a build output, probing assets relative to it
        linkaudit check site/ --base site/
    """
    setup_logging(verbose)

    try:
        options = AuditOptions.from_cli(
            directories=directories,
            base=base,
            workers=workers,
            check_filesystem=filesystem,
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_FATAL) from exc

    logger.debug("Audit options: %s", options.to_dict())

    reporter = ProgressReporter() if progress else None
    try:
        with reporter or nullcontext():
            on_progress = reporter.emit if reporter is not None else None
            index = CorpusIndex.build(options.roots, workers=options.workers, on_progress=on_progress)
            if reporter is not None:
                reporter.emit("resolve:start", {"documents": len(index)})
            missing = list(index.iter_missing())
            if reporter is not None:
                reporter.emit("resolve:finalized", {"missing": len(missing)})
    except LinkAuditError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_FATAL) from exc

    failures = filter_unresolved(
        missing, options.base if options.check_filesystem else None, index
    )
    for item in failures:
        typer.echo(format_failure(item, options.base))

    if failures:
        typer.echo(f"\n❌ {len(failures)} broken link(s) in {len(index)} document(s)")
        raise typer.Exit(EXIT_BROKEN_LINKS)
    typer.echo(f"✅ No broken links in {len(index)} document(s)")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"linkaudit version {__version__}")


def version_callback(value: bool) -> None:
    """Version callback for --version flag."""
    if value:
        typer.echo(f"linkaudit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """
    linkaudit - Find dead relative links in static HTML site trees.

    Scans directories of generated or hand-written HTML and reports every
    relative link whose target page, directory index or #fragment id does not
    exist.

    The check command does the work; see its --help for options.
    """
    pass


if __name__ == "__main__":  # pragma: no cover - executed only via `python -m`
    app()
