"""Errores del dominio.

Los adaptadores envuelven fallos de `httpx`/JSON en estas excepciones para que
la CLI y los servicios no dependan de detalles de transporte.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import SearchSource


class PkgSearchError(Exception):
    """Base de todos los errores de pkgsearch."""


class SourceRequestError(PkgSearchError):
    def __init__(self, source_url: str, reason: str) -> None:
        self.source_url = source_url
        self.reason = reason
        super().__init__(f"Request to {source_url} failed: {reason}")


class InvalidResponseError(PkgSearchError):
    def __init__(self, source_url: str, status_code: int) -> None:
        self.source_url = source_url
        self.status_code = status_code
        super().__init__(f"{source_url} returned a non-JSON body (HTTP {status_code})")


class UnsupportedSourceError(PkgSearchError):
    def __init__(self, name: str) -> None:
        self.name = name
        supported = ", ".join(f"'{s}'" for s in SearchSource.names())
        super().__init__(f"Unsupported source: {name}. Supported sources are {supported}")


class ExportError(PkgSearchError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write {self.path}: {reason}")
