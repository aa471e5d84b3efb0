"""Contratos de búsqueda en registries.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que cada registry (crates.io, npms.io, ...) sea intercambiable
  y testeable sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.domain.models import SearchRequest, SearchResult, SearchSource

if TYPE_CHECKING:
    from adapters.api_client import ApiClient


@runtime_checkable
class RegistrySearcher(Protocol):
    """Contrato mínimo para un módulo de búsqueda.

    Reglas de diseño:
    - `search` es asíncrono porque hace I/O (HTTP).
    - Devuelve el JSON del registry sin transformar, envuelto en `SearchResult`.
    """

    source: SearchSource
    endpoint: str

    def build_client(self, request: SearchRequest) -> ApiClient:
        """Prepara el `ApiClient` (base URL + params) para `request`."""

        ...

    async def search(self, request: SearchRequest) -> SearchResult:
        """Consulta el registry y devuelve el resultado crudo."""

        ...
