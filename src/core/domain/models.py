"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Cada registry devuelve su propio JSON; aquí solo envolvemos la carga útil
  cruda con el contexto de la búsqueda.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SearchSource(str, Enum):
    """Registries soportados."""

    CRATES = "crates"
    NPM = "npm"
    JSDELIVR = "jsdelivr"
    DOCKER = "docker"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


class SearchRequest(BaseModel):
    """Parámetros de una búsqueda contra un registry.

    `per_page` se traduce a `per_page` (crates) o `size` (npm); las fuentes
    con tamaño de página fijo lo ignoran.
    """

    source: SearchSource = Field(
        ...,
        description="Registry consultado.",
    )
    query: str = Field(
        default="",
        description="Texto de búsqueda. Vacío => listado por defecto del registry.",
    )
    page: int | None = Field(
        default=None,
        ge=0,
        description="Página solicitada (None => default de la fuente).",
    )
    per_page: int | None = Field(
        default=None,
        ge=1,
        description="Resultados por página (None => default de la fuente).",
    )


class SearchResult(BaseModel):
    """Resultado crudo de un registry.

    Por qué `payload` es `Any`:
    - crates.io, npms.io, Algolia y Docker Hub no comparten esquema; la CLI
      imprime el JSON tal cual lo devuelve la fuente.
    """

    source: SearchSource
    query: str
    payload: Any = Field(
        default=None,
        description="JSON decodificado devuelto por el registry.",
    )
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de la respuesta (UTC).",
    )


class FeedbackItem(BaseModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(default="")


class Feedback(BaseModel):
    """Sobre JSON estilo script-filter (`{"items": [...]}`).

    Se usa para reportar errores por stdout sin romper a los consumidores
    que esperan JSON.
    """

    items: list[FeedbackItem] = Field(default_factory=list)

    @classmethod
    def from_error(cls, error: BaseException) -> "Feedback":
        return cls(items=[FeedbackItem(title="Error", subtitle=str(error))])
