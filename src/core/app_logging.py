"""Logging de la aplicación.

Por qué stderr + Rich:
- stdout queda reservado para el JSON de resultados (pipelines, script filters).
- RichHandler da trazas legibles en terminal sin formatter propio.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "pkgsearch"
_initialized = False


def init_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configura el logger raíz del proyecto (idempotente salvo `force`)."""

    global _initialized
    if _initialized and not force:
        return

    if level is None:
        from core.config import AppSettings

        level = AppSettings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger(_LOGGER_NAME)
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Logger hijo de `pkgsearch` (p.ej. `pkgsearch.adapters.api_client`)."""

    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
