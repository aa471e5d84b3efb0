"""Registry: crates.io.

API pública `GET /api/v1/crates?q=&page=&per_page=`.
crates.io rechaza peticiones sin User-Agent identificable.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.api_client import ApiClient, ApiClientBuilder
from core.config import AppSettings
from core.domain.models import SearchRequest, SearchResult, SearchSource
from core.interfaces.searcher import RegistrySearcher


class CratesSearcher(RegistrySearcher):
    source = SearchSource.CRATES
    endpoint = "crates"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def build_client(self, request: SearchRequest) -> ApiClient:
        page = 1 if request.page is None else request.page
        per_page = request.per_page or self._settings.crates_per_page
        return (
            ApiClientBuilder(self._settings.crates_base_url, self._settings.user_agent)
            .set_param("page", page)
            .set_param("per_page", per_page)
            .set_param("q", request.query)
            .build()
        )

    async def search(self, request: SearchRequest) -> SearchResult:
        payload = await self.build_client(request).get(
            self.endpoint,
            settings=self._settings,
            transport=self._transport,
        )
        return SearchResult(source=self.source, query=request.query, payload=payload)


async def search_crates(
    query: str | None = None,
    page: int | None = None,
    per_page: int | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Busca crates en crates.io y devuelve el JSON crudo."""

    request = SearchRequest(
        source=SearchSource.CRATES,
        query=query or "",
        page=page,
        per_page=per_page,
    )
    result = await CratesSearcher(settings, transport=transport).search(request)
    return result.payload
