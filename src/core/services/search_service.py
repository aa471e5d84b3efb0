"""Orquestación de búsquedas.

La CLI delega aquí la resolución de fuentes y el fan-out concurrente, lo que
hace el flujo reutilizable desde otros entry-points (scripts, tests) y deja
los side-effects (imprimir, escribir ficheros) fuera de la lógica.
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable

import httpx
from pydantic import ValidationError

from adapters.registry_sources import (
    CratesSearcher,
    DockerSearcher,
    JsDelivrSearcher,
    NpmSearcher,
)
from core.app_logging import get_logger
from core.config import AppSettings
from core.domain.models import Feedback, SearchRequest, SearchResult, SearchSource
from core.errors import PkgSearchError, UnsupportedSourceError
from core.interfaces.searcher import RegistrySearcher

logger = get_logger(__name__)

_SEARCHERS: dict[SearchSource, type] = {
    SearchSource.CRATES: CratesSearcher,
    SearchSource.NPM: NpmSearcher,
    SearchSource.JSDELIVR: JsDelivrSearcher,
    SearchSource.DOCKER: DockerSearcher,
}


def resolve_source(source: SearchSource | str) -> SearchSource:
    if isinstance(source, SearchSource):
        return source
    try:
        return SearchSource(source.strip().lower())
    except ValueError:
        raise UnsupportedSourceError(source) from None


def get_searcher(
    source: SearchSource | str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RegistrySearcher:
    searcher_cls = _SEARCHERS[resolve_source(source)]
    return searcher_cls(settings, transport=transport)


async def run_search(
    request: SearchRequest,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SearchResult:
    """Ejecuta una búsqueda; los errores (`PkgSearchError`) se propagan."""

    searcher = get_searcher(request.source, settings, transport=transport)
    logger.info("searching %s for %r", request.source.value, request.query)
    return await searcher.search(request)


async def search_all(
    query: str,
    *,
    sources: Iterable[SearchSource | str] | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """Busca en varias fuentes a la vez.

    Una fuente que falla no tumba a las demás: su entrada contiene el sobre
    `Feedback` con el error en lugar del payload. El orden de las claves sigue
    el de `SearchSource`.
    """

    settings = settings or AppSettings()
    if sources is None:
        selected = list(SearchSource)
    else:
        wanted = {resolve_source(s) for s in sources}
        selected = [s for s in SearchSource if s in wanted]

    async def safe_search(source: SearchSource) -> Any:
        try:
            request = SearchRequest(source=source, query=query)
            result = await run_search(request, settings=settings, transport=transport)
        except (PkgSearchError, ValidationError) as exc:
            logger.warning("%s failed: %s", source.value, exc)
            return Feedback.from_error(exc).model_dump(mode="json")
        return result.payload

    payloads = await asyncio.gather(*(safe_search(source) for source in selected))
    return {source.value: payload for source, payload in zip(selected, payloads)}
