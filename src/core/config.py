"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/registries) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pkgsearch"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pkgsearch"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pkgsearch"
    return Path.home() / ".config" / "pkgsearch"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pkgsearch user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PKGSEARCH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="my_crawler (help@my_crawler.com)",
        min_length=1,
        description="User-Agent enviado a los registries (crates.io lo exige).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (stderr).",
    )

    # crates.io
    crates_base_url: str = Field(
        default="https://crates.io/api/v1/",
        min_length=8,
        description="Base URL de la API de crates.io.",
    )
    crates_per_page: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Resultados por página en crates.io.",
    )

    # npm (npms.io)
    npm_base_url: str = Field(
        default="https://api.npms.io/v2/search/",
        min_length=8,
        description="Endpoint de búsqueda de npms.io.",
    )
    npm_size: int = Field(
        default=25,
        ge=1,
        le=250,
        description="Número de resultados pedidos a npms.io.",
    )

    # jsDelivr (índice Algolia npm-search)
    jsdelivr_base_url: str = Field(
        default="https://ofcncog2cu-dsn.algolia.net/1/indexes/npm-search/query",
        min_length=8,
        description="Endpoint Algolia usado por jsDelivr.",
    )
    jsdelivr_hits_per_page: int = Field(
        default=25,
        ge=1,
        le=1000,
        description="Hits por página en el índice de jsDelivr.",
    )
    algolia_app_id: str = Field(
        default="OFCNCOG2CU",
        min_length=1,
        description="Application id de Algolia (público, solo lectura).",
    )
    algolia_api_key: str = Field(
        default="f54e21fa3a2a0160595bb058179bfb1e",
        min_length=1,
        description="Search key de Algolia (pública, solo lectura).",
    )
    algolia_agent: str = Field(
        default="Algolia for JavaScript (3.35.1); Browser (lite)",
        min_length=1,
        description="Valor de `x-algolia-agent`.",
    )

    # Docker Hub
    docker_base_url: str = Field(
        default="https://index.docker.io/v1/search",
        min_length=8,
        description="Endpoint de búsqueda (v1) de Docker Hub.",
    )
