"""
Command-line interface for docfrag.

Scans local source files for ``DocSection`` markers and prints the extracted
code fragments as a table or as JSON ready for a persistence or eventing
collaborator.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from returns.result import Failure, Success
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..app import config
from ..batch import BatchScan, SourceFile, scan_many
from ..events import CodeFragmentEvent, FunctionMode
from ..languages import LanguageTag, comment_prefix, extensions_for
from ..utils import collect_source_paths, read_source
from .args import create_scan_config
from .config import OutputFormat, ScanConfig

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="docfrag",
    help="Extract DocSection code fragments from source files",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(verbose: bool) -> None:
    """Route package logging to stderr through rich, leaving other handlers alone."""
    package_logger = logging.getLogger(__package__.partition(".")[0])
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=False,
                rich_tracebacks=True,
                markup=False,
            )
        )
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _load_sources(scan_config: ScanConfig) -> tuple[list[SourceFile], list[str]]:
    sources: list[SourceFile] = []
    read_errors: list[str] = []
    for path in collect_source_paths(scan_config.paths):
        match read_source(path, scan_config.encoding):
            case Success(source):
                sources.append(source)
            case Failure(message):
                logger.warning("Could not read %s", path)
                read_errors.append(message)
    return sources, read_errors


def _preview(content: str, show_content: bool) -> str:
    lines = content.splitlines()
    if show_content or len(lines) <= config.CONTENT_PREVIEW_LINES:
        return content
    return "\n".join([*lines[: config.CONTENT_PREVIEW_LINES], "…"])


def _print_table(batch: BatchScan, show_content: bool) -> None:
    table = Table(title="Code fragments", show_lines=show_content)
    table.add_column("File", style="cyan")
    table.add_column("Identifier", style="bold green")
    table.add_column("Language", style="magenta")
    table.add_column("Content")

    for code_file in batch.code_files:
        for fragment in code_file.code_fragments:
            table.add_row(
                Text(code_file.file_path),
                Text(fragment.identifier),
                fragment.language.value,
                Text(_preview(fragment.content, show_content)),
            )

    console.print(table)
    console.print(
        f"[bold]{len(batch.fragments)}[/bold] fragment(s) in "
        f"[bold]{len(batch.code_files)}[/bold] file(s)"
    )


def _print_json(batch: BatchScan, event_mode: FunctionMode | None) -> None:
    if event_mode is not None:
        payload = CodeFragmentEvent.from_code_files(event_mode, batch.code_files).model_dump(
            mode="json", by_alias=True
        )
    else:
        payload = [f.model_dump(mode="json", by_alias=True) for f in batch.code_files]
    typer.echo(json.dumps(payload, indent=config.JSON_INDENT, ensure_ascii=False))


def _print_failures(batch: BatchScan, read_errors: list[str]) -> None:
    for message in read_errors:
        err_console.print(Text(f"❌ Could not read {message}", style="red"))
    for error in batch.failures:
        err_console.print(Text(f"❌ {error.kind.value}: {error}", style="red"))


@app.command()
def scan(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files or directories to scan", metavar="PATH..."),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the scanned files as JSON"),
    ] = False,
    event_mode: Annotated[
        FunctionMode | None,
        typer.Option(
            "--event",
            help="Print a code-fragment event of the given mode instead of the files",
            case_sensitive=False,
        ),
    ] = None,
    encoding: Annotated[
        str,
        typer.Option("--encoding", "-e", help="Encoding of the source files"),
    ] = config.DEFAULT_SOURCE_ENCODING,
    max_workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-w",
            help="Number of files scanned in parallel",
            envvar=f"{config.ENV_PREFIX}WORKERS",
        ),
    ] = config.DEFAULT_MAX_WORKERS,
    show_content: Annotated[
        bool,
        typer.Option("--content", "-c", help="Show full fragment content in the table"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """
    Extract the code fragments of the given files.

    Directories are searched recursively for files with a registered
    extension. Files whose markers are malformed are reported and skipped;
    the exit code is 1 when any file failed.
    """
    _configure_logging(verbose)
    scan_config = create_scan_config(
        paths=paths,
        encoding=encoding,
        max_workers=max_workers,
        as_json=as_json,
        event_mode=event_mode,
        show_content=show_content,
    )

    sources, read_errors = _load_sources(scan_config)
    batch = scan_many(sources, max_workers=scan_config.max_workers)

    if scan_config.output is OutputFormat.JSON:
        _print_json(batch, scan_config.event_mode)
    else:
        _print_table(batch, scan_config.show_content)

    if read_errors or not batch.succeeded:
        _print_failures(batch, read_errors)
        raise typer.Exit(code=1)


@app.command()
def languages() -> None:
    """List the supported languages, their extensions and comment prefixes."""
    table = Table(title="Supported languages")
    table.add_column("Language", style="magenta")
    table.add_column("Extensions", style="cyan")
    table.add_column("Comment prefix", style="green")

    for tag in LanguageTag:
        table.add_row(tag.value, ", ".join(extensions_for(tag)), comment_prefix(tag).value)

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel(
            f"[bold blue]docfrag[/bold blue]\n\n"
            f"Version: [green]{__version__}[/green]\n"
            f"Python: [yellow]{sys.version.split()[0]}[/yellow]",
            title="About",
            border_style="blue",
        )
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
