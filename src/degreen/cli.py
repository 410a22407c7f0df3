from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import ABOUT, AFTER_HELP, APP_NAME, VERSION, Settings
from .errors import DegreenError
from .models import Notice, NoticeKind, RunReport
from .runner import run

app = typer.Typer(
    name=APP_NAME,
    help=ABOUT,
    epilog=AFTER_HELP,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _print_notice(notice: Notice) -> None:
    if notice.kind == NoticeKind.SKIPPED:
        err_console.print(f"[yellow]warning:[/yellow] {escape(notice.message)}")
        return
    console.print(escape(notice.message))


def _print_summary(report: RunReport) -> None:
    console.print(
        f"stripped={len(report.stripped)} "
        f"kept={len(report.kept)} "
        f"skipped={len(report.skipped)}"
    )
    for outcome in report.roots:
        if not outcome.complete:
            console.print(f"incomplete: {escape(str(outcome.path))}")


def _is_posix() -> bool:
    return os.name == "posix"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.command()
def main(
    files: list[Path] = typer.Argument(
        ...,
        metavar="FILE...",
        help="Files (or, with --recursive, directories) to degreen",
        show_default=False,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip entries that cannot be listed or stat-ed instead of aborting",
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Run recursively over the contents of directories",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Remove the execute bits from files that are not ELF binaries or scripts."""
    if not _is_posix():
        err_console.print(f"[red]error:[/red] {APP_NAME} only runs on unix systems")
        raise typer.Exit(1)

    settings = Settings(
        force=force,
        recursive=recursive,
        verbose=verbose,
        paths=tuple(files),
    )
    try:
        report = run(settings, notify=_print_notice)
    except DegreenError as exc:
        err_console.print(f"[red]error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if verbose:
        _print_summary(report)


if __name__ == "__main__":
    app()
