"""CLI entry point for parsing files, scanning libraries and ordering chapters."""

from __future__ import annotations

import importlib
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any, NoReturn

import structlog
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:  # pragma: no cover - typing only
    import typer
    from typer import Typer as TyperType
else:  # pragma: no cover - runtime fallback for typing
    typer = importlib.import_module("typer")
    TyperType = Any

from tomescan.core.config import resolve_library_type
from tomescan.core.dispatcher import dispatch
from tomescan.core.errors import TomescanError
from tomescan.core.ordering import order
from tomescan.core.paths import directory_name, normalize_path
from tomescan.core.scanner import scan
from tomescan.models.schemas import ChapterOrderingUnit, LibraryType, ScanResult

app: TyperType = typer.Typer(help="Parse media filenames into series metadata.")

LibraryTypeOption = Annotated[
    str | None,
    typer.Option(
        "--library-type",
        "-t",
        help="Library type (manga, comic, comicvine, book, lightnovel, image).",
    ),
]
FolderOption = Annotated[
    str | None,
    typer.Option("--folder", help="Series folder (defaults to the file's folder)."),
]
RootOption = Annotated[
    str | None,
    typer.Option("--root", help="Library root (defaults to the series folder)."),
]
WorkersOption = Annotated[
    int | None,
    typer.Option("--workers", help="Worker threads used for parsing."),
]
JsonFlag = Annotated[
    bool,
    typer.Option("--json", help="Emit JSON instead of a table."),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log scan events to stderr."),
]


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _fail(exc: TomescanError) -> NoReturn:
    typer.secho(str(exc), err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1) from exc


def _resolve_type(value: str | None) -> LibraryType:
    try:
        return resolve_library_type(value)
    except TomescanError as exc:
        _fail(exc)


def parse_file(
    path: Annotated[str, typer.Argument(help="File to parse.")],
    library_type: LibraryTypeOption = None,
    folder: FolderOption = None,
    root: RootOption = None,
) -> None:
    """Parse a single file path and print the result as JSON."""

    resolved_type = _resolve_type(library_type)
    series_folder = folder or directory_name(normalize_path(path))
    library_root = root or series_folder

    info = dispatch(path, series_folder, library_root, resolved_type)
    if info is None:
        typer.secho(f"skipped: {path}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=2)

    typer.echo(json.dumps(info.model_dump(mode="json"), indent=2, sort_keys=True))


def scan_library(
    root: Annotated[Path, typer.Argument(help="Library root to scan.")],
    library_type: LibraryTypeOption = None,
    workers: WorkersOption = None,
    json_output: JsonFlag = False,
    verbose: VerboseFlag = False,
) -> None:
    """Scan a library root and print every parsed file."""

    _configure_logging(verbose)
    resolved_type = _resolve_type(library_type)
    try:
        result = scan(root, resolved_type, workers=workers)
    except TomescanError as exc:
        _fail(exc)

    if json_output:
        typer.echo(result.model_dump_json(indent=2))
        return

    Console().print(_result_table(result))
    typer.secho(
        f"parsed: {result.parsed_count}  skipped: {result.skipped_count}",
        fg=typer.colors.GREEN,
    )


def order_chapters(
    source: Annotated[
        Path, typer.Argument(help="JSON file holding a list of chapter ordering units.")
    ],
) -> None:
    """Print the reading order of chapters described in a JSON file."""

    adapter = TypeAdapter(list[ChapterOrderingUnit])
    try:
        units = adapter.validate_json(source.read_bytes())
    except (OSError, ValidationError) as exc:
        typer.secho(f"Cannot read chapters: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(order(units)))


def _result_table(result: ScanResult) -> Table:
    table = Table(title=escape(f"{result.root_path} ({result.library_type.value})"))
    table.add_column("File")
    table.add_column("Series")
    table.add_column("Volume")
    table.add_column("Chapter")
    table.add_column("Special")

    for item in result.files:
        if item.info is None:
            table.add_row(escape(item.path.name), "[dim]skipped[/dim]", "", "", "")
            continue
        info = item.info
        volume = info.volumes
        if info.is_special_volume:
            volume = "special"
        elif info.is_loose_leaf:
            volume = "-"
        chapter = "-" if info.has_default_chapter else info.chapters
        table.add_row(
            escape(item.path.name),
            escape(info.series),
            volume,
            chapter,
            "yes" if info.is_special else "",
        )
    return table


def run_cli(args: Sequence[str] | None = None) -> None:
    app(args=args)


app.command("parse")(parse_file)
app.command("scan")(scan_library)
app.command("order")(order_chapters)
