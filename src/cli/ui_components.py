"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos (sources, doctor).
"""

from __future__ import annotations

from rich.table import Table

from core.config import AppSettings
from core.domain.models import SearchSource


def source_endpoints(settings: AppSettings) -> dict[SearchSource, str]:
    return {
        SearchSource.CRATES: f"{settings.crates_base_url}crates",
        SearchSource.NPM: settings.npm_base_url,
        SearchSource.JSDELIVR: settings.jsdelivr_base_url,
        SearchSource.DOCKER: settings.docker_base_url,
    }


_REGISTRY_LABELS: dict[SearchSource, str] = {
    SearchSource.CRATES: "crates.io",
    SearchSource.NPM: "npm (npms.io)",
    SearchSource.JSDELIVR: "npm (jsDelivr / Algolia)",
    SearchSource.DOCKER: "Docker Hub",
}


def build_sources_table(settings: AppSettings) -> Table:
    table = Table(title="Sources")
    table.add_column("Source", style="cyan", no_wrap=True)
    table.add_column("Registry", style="white")
    table.add_column("Endpoint", style="magenta")
    for source, endpoint in source_endpoints(settings).items():
        table.add_row(source.value, _REGISTRY_LABELS[source], endpoint)
    return table


def build_doctor_table() -> Table:
    table = Table(title="pkgsearch Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
