"""Registry: Docker Hub.

Usa el endpoint v1 `GET /v1/search?q=&page=` (el mismo que `docker search`).
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.api_client import ApiClient, ApiClientBuilder
from core.config import AppSettings
from core.domain.models import SearchRequest, SearchResult, SearchSource
from core.interfaces.searcher import RegistrySearcher


class DockerSearcher(RegistrySearcher):
    source = SearchSource.DOCKER
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
        page = 1 if request.page is None else request.page
        return (
            ApiClientBuilder(self._settings.docker_base_url, self._settings.user_agent)
            .set_param("q", request.query)
            .set_param("page", page)
            .build()
        )

    async def search(self, request: SearchRequest) -> SearchResult:
        payload = await self.build_client(request).get(
            self.endpoint,
            settings=self._settings,
            transport=self._transport,
        )
        return SearchResult(source=self.source, query=request.query, payload=payload)


async def search_docker(
    query: str | None = None,
    page: int | None = None,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Busca imágenes en Docker Hub y devuelve el JSON crudo."""

    request = SearchRequest(source=SearchSource.DOCKER, query=query or "", page=page)
    result = await DockerSearcher(settings, transport=transport).search(request)
    return result.payload
