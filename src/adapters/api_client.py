"""Cliente mínimo para APIs JSON de búsqueda.

Idea:
- Cada registry es "base URL + endpoint + query params + User-Agent".
- El builder permite encadenar `set_param` antes de lanzar la petición.

Errores:
- Fallos de red => `SourceRequestError`.
- Cuerpo no JSON => `InvalidResponseError`.
- Respuestas no-2xx con JSON se devuelven tal cual (los registries describen
  el error dentro del propio JSON).
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from adapters.http_client import build_async_client
from core.app_logging import get_logger
from core.config import AppSettings
from core.errors import InvalidResponseError, SourceRequestError

logger = get_logger(__name__)


class ApiClient:
    """Cliente HTTP de una sola base URL."""

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        params: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.user_agent = user_agent
        self.params: dict[str, str] = dict(params or {})

    def set_param(self, key: str, value: object) -> "ApiClient":
        self.params[key] = str(value)
        return self

    def url_for(self, endpoint: str) -> str:
        # Concatenación literal: `base_url` ya trae (o no) la barra final.
        return f"{self.base_url}{endpoint}"

    async def fetch(
        self,
        endpoint: str = "",
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> httpx.Response:
        """Hace el GET y devuelve la respuesta sin decodificar (cualquier status)."""

        url = self.url_for(endpoint)
        logger.debug("GET %s params=%s", url, self.params)

        try:
            async with build_async_client(
                settings,
                extra_headers={"User-Agent": self.user_agent},
                transport=transport,
            ) as client:
                response = await client.get(url, params=self.params)
        except httpx.HTTPError as exc:
            raise SourceRequestError(url, str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.warning("%s answered HTTP %s", url, response.status_code)
        return response

    async def get(
        self,
        endpoint: str = "",
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Any:
        """Hace un GET y devuelve el JSON decodificado."""

        response = await self.fetch(endpoint, settings=settings, transport=transport)
        url = self.url_for(endpoint)
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidResponseError(url, response.status_code) from exc


class ApiClientBuilder:
    """Builder de `ApiClient`."""

    def __init__(self, base_url: str, user_agent: str) -> None:
        self._base_url = base_url
        self._user_agent = user_agent
        self._params: dict[str, str] = {}

    def set_param(self, key: str, value: object) -> "ApiClientBuilder":
        self._params[key] = str(value)
        return self

    def build(self) -> ApiClient:
        return ApiClient(self._base_url, self._user_agent, self._params)
