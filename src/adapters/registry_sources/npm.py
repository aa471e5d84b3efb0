"""Registry: npm (vía npms.io).

npms.io expone `GET /v2/search?q=&size=` con scoring propio
(quality/popularity/maintenance). No pagina por número de página.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.api_client import ApiClient, ApiClientBuilder
from core.config import AppSettings
from core.domain.models import SearchRequest, SearchResult, SearchSource
from core.interfaces.searcher import RegistrySearcher


class NpmSearcher(RegistrySearcher):
    source = SearchSource.NPM
    endpoint = ""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def build_client(self, request: SearchRequest) -> ApiClient:
        size = request.per_page or self._settings.npm_size
        return (
            ApiClientBuilder(self._settings.npm_base_url, self._settings.user_agent)
            .set_param("q", request.query)
            .set_param("size", size)
            .build()
        )

    async def search(self, request: SearchRequest) -> SearchResult:
        payload = await self.build_client(request).get(
            self.endpoint,
            settings=self._settings,
            transport=self._transport,
        )
        return SearchResult(source=self.source, query=request.query, payload=payload)


async def search_npm(
    query: str | None = None,
    size: int | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Busca paquetes npm en npms.io y devuelve el JSON crudo."""

    request = SearchRequest(source=SearchSource.NPM, query=query or "", per_page=size)
    result = await NpmSearcher(settings, transport=transport).search(request)
    return result.payload
