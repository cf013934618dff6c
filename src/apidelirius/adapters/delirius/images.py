"""Operaciones: imágenes y búsqueda web."""

from __future__ import annotations

import httpx

from apidelirius.adapters.endpoints import ENDPOINTS
from apidelirius.adapters.fetch import fetch
from apidelirius.core.config import DeliriusSettings
from apidelirius.core.domain.models import (
    BingImageResponse,
    BingSearchResponse,
    GImageResponse,
    GoogleSearchResponse,
    PinterestImageResponse,
    Rule34Response,
)


async def search_pokemon(
    text: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> bytes:
    """Imagen de una carta Pokémon (bytes crudos, sin decodificar)."""

    return await fetch(ENDPOINTS["search_pokemon"], {"text": text}, client=client, settings=settings)


async def search_pinterest(
    text: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> list[PinterestImageResponse] | None:
    """Busca imágenes en Pinterest.

    Única operación que no falla: cualquier error se registra en el logger y
    se devuelve `None`, indistinguible de "sin resultados".
    """

    return await fetch(ENDPOINTS["search_pinterest"], {"text": text}, client=client, settings=settings)


async def search_rule34(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> Rule34Response | None:
    return await fetch(ENDPOINTS["search_rule34"], {"query": query}, client=client, settings=settings)


async def search_google_image(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> GImageResponse:
    return await fetch(ENDPOINTS["search_google_image"], {"query": query}, client=client, settings=settings)


async def search_google(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> GoogleSearchResponse:
    """Búsqueda web en Google.

    Ejemplo:
        result = await search_google("Momo twice")
    """

    return await fetch(ENDPOINTS["search_google"], {"query": query}, client=client, settings=settings)


async def search_bing(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> BingSearchResponse:
    return await fetch(ENDPOINTS["search_bing"], {"query": query}, client=client, settings=settings)


async def search_bing_image(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> list[BingImageResponse]:
    """Imágenes de Bing: devuelve directamente la lista `results` del cuerpo."""

    return await fetch(ENDPOINTS["search_bing_image"], {"query": query}, client=client, settings=settings)
