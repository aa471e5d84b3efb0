"""Registry: jsDelivr (índice Algolia `npm-search`).

Es el mismo índice que usa la web de jsDelivr. Las credenciales de Algolia son
públicas y de solo lectura; viajan como query params (no headers) igual que
en el cliente "lite" del navegador.

Notas:
- `page` empieza en 0 (convención Algolia).
- `attributesToHighlight` vacío evita `_highlightResult` en cada hit.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.api_client import ApiClient, ApiClientBuilder
from core.config import AppSettings
from core.domain.models import SearchRequest, SearchResult, SearchSource
from core.interfaces.searcher import RegistrySearcher

RETRIEVED_ATTRIBUTES = "name,version,description,homepage"


class JsDelivrSearcher(RegistrySearcher):
    source = SearchSource.JSDELIVR
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
        s = self._settings
        page = 0 if request.page is None else request.page
        return (
            ApiClientBuilder(s.jsdelivr_base_url, s.user_agent)
            .set_param("query", request.query)
            .set_param("page", page)
            .set_param("hitsPerPage", s.jsdelivr_hits_per_page)
            .set_param("attributesToRetrieve", RETRIEVED_ATTRIBUTES)
            .set_param("attributesToHighlight", "")
            .set_param("x-algolia-agent", s.algolia_agent)
            .set_param("x-algolia-application-id", s.algolia_app_id)
            .set_param("x-algolia-api-key", s.algolia_api_key)
            .build()
        )

    async def search(self, request: SearchRequest) -> SearchResult:
        payload = await self.build_client(request).get(
            self.endpoint,
            settings=self._settings,
            transport=self._transport,
        )
        return SearchResult(source=self.source, query=request.query, payload=payload)


async def search_jsdelivr(
    query: str | None = None,
    page: int | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Busca paquetes en el índice de jsDelivr y devuelve el JSON crudo."""

    request = SearchRequest(source=SearchSource.JSDELIVR, query=query or "", page=page)
    result = await JsDelivrSearcher(settings, transport=transport).search(request)
    return result.payload
