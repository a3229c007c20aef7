"""stackblitz-zip CLI.

Commands:
- zip <url> [output]    download a project as <id>.zip
- clone <url> [output]  write a project's files into <id>/
- parse <url>           print the project identifier

<url> may also be a bare project identifier.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from stackblitz_zip import config
from stackblitz_zip.api import clone_project, download_archive
from stackblitz_zip.errors import StackBlitzZipError
from stackblitz_zip.types import DownloadOptions
from stackblitz_zip.url import resolve_project_id

app = typer.Typer(add_completion=False, help="Download StackBlitz projects as zips or directories")
console = Console()

_TIMEOUT = typer.Option(config.DEFAULT_TIMEOUT, "--timeout", help="Request deadline in seconds")
_MAX_FILE = typer.Option(
    config.DEFAULT_MAX_FILE_SIZE, "--max-file-size", help="Per-file limit in bytes"
)
_MAX_TOTAL = typer.Option(
    config.DEFAULT_MAX_TOTAL_SIZE, "--max-total-size", help="Whole-project limit in bytes"
)
_VERBOSE = typer.Option(True, "--verbose/--quiet", help="Log fetch and file diagnostics")


def _fail(exc: Exception) -> typer.Exit:
    rprint(f"[red]Error:[/red] {exc}")
    return typer.Exit(code=1)


def _build_options(
    source: str, output: str | None, timeout: float, max_file: int, max_total: int, verbose: bool
) -> DownloadOptions:
    return DownloadOptions(
        project_id=resolve_project_id(source),
        output_path=Path(output) if output else None,
        timeout=timeout,
        max_file_size=max_file,
        max_total_size=max_total,
        verbose=verbose,
    )


@app.command("zip")
def zip_(
    source: str = typer.Argument(..., help="StackBlitz edit URL or project id"),
    output: str | None = typer.Argument(None, help="Zip path (defaults to <project-id>.zip)"),
    timeout: float = _TIMEOUT,
    max_file_size: int = _MAX_FILE,
    max_total_size: int = _MAX_TOTAL,
    verbose: bool = _VERBOSE,
) -> None:
    try:
        opts = _build_options(source, output, timeout, max_file_size, max_total_size, verbose)
        artifact = download_archive(opts)
        target = opts.output_path or Path.cwd() / artifact.filename
        artifact.write_to(target)
    except (StackBlitzZipError, ValueError, OSError) as exc:
        raise _fail(exc) from exc

    table = Table(title=f"Archive: {artifact.filename}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("path", str(target))
    table.add_row("files", str(len(artifact.names)))
    table.add_row("bytes", str(len(artifact.data)))
    table.add_row("sha256", artifact.sha256)
    console.print(table)
    rprint(f"[green]Project downloaded to:[/green] {target}")


@app.command()
def clone(
    source: str = typer.Argument(..., help="StackBlitz edit URL or project id"),
    output: str | None = typer.Argument(None, help="Directory (defaults to <project-id>/)"),
    timeout: float = _TIMEOUT,
    max_file_size: int = _MAX_FILE,
    max_total_size: int = _MAX_TOTAL,
    verbose: bool = _VERBOSE,
) -> None:
    try:
        opts = _build_options(source, output, timeout, max_file_size, max_total_size, verbose)
        root = clone_project(opts)
    except (StackBlitzZipError, ValueError, OSError) as exc:
        raise _fail(exc) from exc
    rprint(f"[green]Project cloned to:[/green] {root}")


@app.command()
def parse(url: str = typer.Argument(..., help="StackBlitz edit URL")) -> None:
    try:
        project_id = resolve_project_id(url)
    except StackBlitzZipError as exc:
        raise _fail(exc) from exc
    print(project_id)


if __name__ == "__main__":
    app()
