"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import time

import httpx
import typer
from rich.console import Console

from cli.ui_components import build_doctor_table, source_endpoints
from core.config import AppSettings, write_user_env_vars
from core.domain.models import SearchRequest, SearchSource
from core.errors import PkgSearchError
from core.services.search_service import get_searcher

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_source(
    source: SearchSource,
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    """Run a one-result search against a registry, report its HTTP status and time it."""

    searcher = get_searcher(source, settings)
    client = searcher.build_client(SearchRequest(source=source, query="http", per_page=1))
    started = time.perf_counter()
    try:
        response = await client.fetch(searcher.endpoint, settings=settings, transport=transport)
    except PkgSearchError as exc:
        return False, str(exc)
    elapsed_ms = (time.perf_counter() - started) * 1000
    return response.is_success, f"HTTP {response.status_code}, {elapsed_ms:.0f} ms"


async def _check_all(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[tuple[bool, str]]:
    checks = (_check_source(s, settings, transport=transport) for s in SearchSource)
    return list(await asyncio.gather(*checks))


@app.command()
def run() -> None:
    """Show effective configuration and check connectivity to every registry."""

    settings = AppSettings()
    table = build_doctor_table()

    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g} s")

    endpoints = source_endpoints(settings)
    checks = asyncio.run(_check_all(settings))
    for source, (ok, detail) in zip(SearchSource, checks):
        table.add_row(
            source.value,
            "OK" if ok else "FAIL",
            f"{endpoints[source]} ({detail})",
        )

    _console.print(table)

    if not all(ok for ok, _ in checks):
        _console.print(
            "\n[yellow]Note:[/yellow] failing registries still answer with an error envelope "
            "on stdout; check proxies or raise PKGSEARCH_HTTP_TIMEOUT_SECONDS."
        )


@app.command()
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()
    user_agent = typer.prompt(
        "User-Agent",
        default=current.user_agent,
        show_default=True,
    ).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=current.http_timeout_seconds,
        type=float,
        show_default=True,
    )

    if not user_agent:
        raise typer.BadParameter("User-Agent is required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be greater than 0")

    env_path = write_user_env_vars(
        {
            "PKGSEARCH_USER_AGENT": user_agent,
            "PKGSEARCH_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
