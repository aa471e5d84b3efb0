"""CLI principal (Typer).

Contrato de salida:
- stdout solo lleva JSON (resultado del registry o sobre de error
  `{"items": [{"title": "Error", ...}]}`), así que es seguro usarla en pipes
  y script filters.
- Logs y mensajes para humanos van a stderr.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from typer.core import TyperCommand, TyperGroup

from adapters.json_exporter import dumps_pretty, write_json_to_file
from cli import doctor
from cli.ui_components import build_sources_table
from core.app_logging import init_logging
from core.config import AppSettings
from core.domain.models import Feedback, SearchRequest, SearchSource
from core.errors import ExportError, PkgSearchError, UnsupportedSourceError
from core.services.search_service import run_search, search_all


class _SourceGroup(TyperGroup):
    """Grupo cuyo error de comando desconocido lista las fuentes soportadas."""

    def resolve_command(self, ctx: click.Context, args: list[str]) -> Any:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as exc:
            name = args[0] if args else ""
            if not name or name.startswith("-") or name in self.commands:
                raise
            raise click.UsageError(str(UnsupportedSourceError(name)), ctx) from exc


class _SourceCommand(TyperCommand):
    """Comando de búsqueda: si falta QUERY, el error recuerda las fuentes."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.MissingParameter as exc:
            supported = ", ".join(f"'{s}'" for s in SearchSource.names())
            raise click.MissingParameter(
                message=f"Supported sources are {supported}",
                ctx=exc.ctx,
                param=exc.param,
                param_hint=exc.param_hint,
                param_type=exc.param_type,
            ) from exc


app = typer.Typer(
    cls=_SourceGroup,
    no_args_is_help=True,
    help=(
        "Search package registries from the terminal. "
        f"Supported sources: {', '.join(SearchSource.names())}."
    ),
)
app.add_typer(doctor.app, name="doctor")

_err_console = Console(stderr=True)


def _output_option() -> Any:
    return typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the JSON to this file.",
        dir_okay=False,
    )


def _emit(fetch: Callable[[], Awaitable[Any]], output: Path | None) -> None:
    """Ejecuta la búsqueda, imprime el JSON y opcionalmente lo guarda.

    Un fallo de búsqueda se imprime como sobre de error y sale con código 0.
    """

    try:
        data: Any = asyncio.run(fetch())
    except (PkgSearchError, ValidationError) as exc:
        data = Feedback.from_error(exc)

    typer.echo(dumps_pretty(data))

    if output is not None:
        try:
            write_json_to_file(data, output)
        except ExportError as exc:
            _err_console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=1) from exc


def _search(output: Path | None, **fields: Any) -> None:
    settings = AppSettings()

    async def fetch() -> Any:
        request = SearchRequest(**fields)
        result = await run_search(request, settings=settings)
        return result.payload

    _emit(fetch, output)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Debug logging on stderr.",
    ),
) -> None:
    init_logging("DEBUG" if verbose else None, force=True)


@app.command(cls=_SourceCommand)
def crates(
    query: str = typer.Argument(..., help="Search text."),
    page: int | None = typer.Option(None, "--page", min=1, help="Page number (default 1)."),
    per_page: int | None = typer.Option(
        None, "--per-page", min=1, max=100, help="Results per page (default 10)."
    ),
    output: Path | None = _output_option(),
) -> None:
    """Search crates on crates.io."""

    _search(output, source=SearchSource.CRATES, query=query, page=page, per_page=per_page)


@app.command(cls=_SourceCommand)
def npm(
    query: str = typer.Argument(..., help="Search text."),
    size: int | None = typer.Option(
        None, "--size", min=1, max=250, help="Number of results (default 25)."
    ),
    output: Path | None = _output_option(),
) -> None:
    """Search npm packages through npms.io."""

    _search(output, source=SearchSource.NPM, query=query, per_page=size)


@app.command(cls=_SourceCommand)
def jsdelivr(
    query: str = typer.Argument(..., help="Search text."),
    page: int | None = typer.Option(None, "--page", min=0, help="Zero-based page (default 0)."),
    output: Path | None = _output_option(),
) -> None:
    """Search npm packages on jsDelivr's index."""

    _search(output, source=SearchSource.JSDELIVR, query=query, page=page)


@app.command(cls=_SourceCommand)
def docker(
    query: str = typer.Argument(..., help="Search text."),
    page: int | None = typer.Option(None, "--page", min=1, help="Page number (default 1)."),
    output: Path | None = _output_option(),
) -> None:
    """Search images on Docker Hub."""

    _search(output, source=SearchSource.DOCKER, query=query, page=page)


@app.command(name="all", cls=_SourceCommand)
def all_sources(
    query: str = typer.Argument(..., help="Search text."),
    source: list[SearchSource] | None = typer.Option(
        None,
        "--source",
        "-s",
        help="Restrict to these sources (repeatable).",
    ),
    output: Path | None = _output_option(),
) -> None:
    """Search every registry concurrently; prints one JSON object keyed by source."""

    settings = AppSettings()

    async def fetch() -> Any:
        return await search_all(query, sources=source or None, settings=settings)

    _emit(fetch, output)


@app.command()
def sources() -> None:
    """List supported registries and the endpoints in use."""

    Console().print(build_sources_table(AppSettings()))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
