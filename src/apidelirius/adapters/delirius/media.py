"""Operaciones: música, letras, vídeo y GIFs.

Cada función es una fila de `ENDPOINTS` con firma tipada; el trabajo real lo
hace `apidelirius.adapters.fetch.fetch`.
"""

from __future__ import annotations

import httpx

from apidelirius.adapters.endpoints import ENDPOINTS
from apidelirius.adapters.fetch import fetch
from apidelirius.core.config import DeliriusSettings
from apidelirius.core.domain.models import (
    AppleMusicResponse,
    DeezerResponse,
    GeniusSong,
    LyricsResponse,
    SoundCloudResponse,
    SpotifySearchResponse,
    TenorResponse,
    TikTokSearchResponse,
    TrackResponse,
    YouTubeVideo,
)

DEFAULT_LIMIT = 20


async def genius_search(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> list[GeniusSong]:
    """Busca canciones en Genius.

    Ejemplo:
        songs = await genius_search("Taylor Swift Love Story")
    """

    return await fetch(ENDPOINTS["genius_search"], {"q": query}, client=client, settings=settings)


async def search_lyrics(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> LyricsResponse:
    """Letra de una canción a partir de su URL de Genius (la URL va percent-encoded)."""

    return await fetch(ENDPOINTS["search_lyrics"], {"url": url}, client=client, settings=settings)


async def search_tiktok(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> TikTokSearchResponse:
    return await fetch(ENDPOINTS["search_tiktok"], {"query": query}, client=client, settings=settings)


async def search_youtube(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> list[YouTubeVideo]:
    return await fetch(ENDPOINTS["search_youtube"], {"q": query}, client=client, settings=settings)


async def search_spotify(
    query: str,
    limit: int = DEFAULT_LIMIT,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> SpotifySearchResponse:
    """Busca pistas en Spotify.

    `limit` se interpola tal cual en la URL (por defecto 20).
    """

    return await fetch(
        ENDPOINTS["search_spotify"],
        {"q": query, "limit": limit},
        client=client,
        settings=settings,
    )


async def search_tracks(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> list[TrackResponse] | None:
    """Busca pistas (YouTube Music). `None` si el servicio responde `null`."""

    return await fetch(ENDPOINTS["search_tracks"], {"q": query}, client=client, settings=settings)


async def search_apple_music(
    text: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> list[AppleMusicResponse] | None:
    return await fetch(ENDPOINTS["search_apple_music"], {"text": text}, client=client, settings=settings)


async def soundcloud_search(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> SoundCloudResponse:
    return await fetch(ENDPOINTS["soundcloud_search"], {"q": query}, client=client, settings=settings)


async def deezer_search(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> DeezerResponse:
    """Busca pistas en Deezer.

    Ejemplo:
        result = await deezer_search("Feel special")
    """

    return await fetch(ENDPOINTS["deezer_search"], {"q": query}, client=client, settings=settings)


async def tenor_search(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> TenorResponse:
    """Busca GIFs en Tenor."""

    return await fetch(ENDPOINTS["tenor_search"], {"q": query}, client=client, settings=settings)
