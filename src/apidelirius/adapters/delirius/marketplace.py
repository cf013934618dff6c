"""Operaciones: registros de paquetes, tiendas de apps y bases de películas."""

from __future__ import annotations

import httpx

from apidelirius.adapters.delirius.media import DEFAULT_LIMIT
from apidelirius.adapters.endpoints import ENDPOINTS
from apidelirius.adapters.fetch import fetch
from apidelirius.core.config import DeliriusSettings
from apidelirius.core.domain.models import AppStoreResponse, MovieResponse, NPMResponse


async def search_npmjs(
    query: str,
    limit: int = DEFAULT_LIMIT,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> NPMResponse:
    """Busca paquetes en npm.

    Ejemplo:
        packages = await search_npmjs("axios", 20)
    """

    return await fetch(
        ENDPOINTS["search_npmjs"],
        {"q": query, "limit": limit},
        client=client,
        settings=settings,
    )


async def search_app_store(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> AppStoreResponse | None:
    return await fetch(ENDPOINTS["search_app_store"], {"q": query}, client=client, settings=settings)


async def search_movie(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> MovieResponse:
    return await fetch(ENDPOINTS["search_movie"], {"query": query}, client=client, settings=settings)
