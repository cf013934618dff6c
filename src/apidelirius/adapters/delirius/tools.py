"""Operaciones: herramientas (URLs, traducción, emojis, perfiles, noticias).

Todas usan la política "wrap": si el fallo trae un mensaje de texto plano se
levanta `DeliriusError(mensaje)`; cualquier otro fallo se propaga tal cual.
"""

from __future__ import annotations

import httpx

from apidelirius.adapters.endpoints import ENDPOINTS
from apidelirius.adapters.fetch import fetch
from apidelirius.core.config import DeliriusSettings
from apidelirius.core.domain.models import (
    ChannelInfoResponse,
    CountryResponse,
    EmojiInfoResponse,
    HTMLExtractResponse,
    MixedEmojiResponse,
    MojitoResponse,
    NoticiasResponse,
    SimiResponse,
    TikTokStalkResponse,
    TranslationResponse,
    URLCheckResponse,
)

DEFAULT_NEWS_LANGUAGE = "es"
DEFAULT_NEWS_COUNTRY = "PE"


async def check_url(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> URLCheckResponse:
    """Comprueba si una URL responde. La URL se interpola sin encoding."""

    return await fetch(ENDPOINTS["check_url"], {"url": url}, client=client, settings=settings)


async def extract_html(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> HTMLExtractResponse:
    """HTML crudo de una URL (ver `HTMLExtractResponse.page_metadata`)."""

    return await fetch(ENDPOINTS["extract_html"], {"url": url}, client=client, settings=settings)


async def translate(
    text: str,
    language: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> TranslationResponse:
    """Traduce `text` al idioma `language` (p.ej. "en").

    Solo el texto va percent-encoded; el código de idioma se interpola tal cual.
    """

    return await fetch(
        ENDPOINTS["translate"],
        {"text": text, "language": language},
        client=client,
        settings=settings,
    )


async def emojito(
    emoji: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> MojitoResponse | None:
    """Arte ASCII de un emoji."""

    return await fetch(ENDPOINTS["emojito"], {"emoji": emoji}, client=client, settings=settings)


async def simisimi(
    text: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> SimiResponse:
    return await fetch(ENDPOINTS["simisimi"], {"text": text}, client=client, settings=settings)


async def google_news(
    language: str = DEFAULT_NEWS_LANGUAGE,
    country: str = DEFAULT_NEWS_COUNTRY,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> NoticiasResponse:
    """Titulares de Google News.

    Por defecto noticias en español de Perú; p.ej. `google_news("en", "US")`.
    """

    return await fetch(
        ENDPOINTS["google_news"],
        {"language": language, "country": country},
        client=client,
        settings=settings,
    )


async def tiktok_stalk(
    username: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> TikTokStalkResponse:
    """Perfil público de TikTok para `username`."""

    return await fetch(ENDPOINTS["tiktok_stalk"], {"q": username}, client=client, settings=settings)


async def emoji_mix(
    emoji1: str,
    emoji2: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> MixedEmojiResponse | None:
    """Imagen combinada de dos emojis."""

    return await fetch(
        ENDPOINTS["emoji_mix"],
        {"emoji1": emoji1, "emoji2": emoji2},
        client=client,
        settings=settings,
    )


async def telegram_stalk_channel(
    channel: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> ChannelInfoResponse:
    return await fetch(
        ENDPOINTS["telegram_stalk_channel"],
        {"channel": channel},
        client=client,
        settings=settings,
    )


async def emoji(
    text: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> EmojiInfoResponse:
    """Metadata de un emoji (nombre, código, etc.)."""

    return await fetch(ENDPOINTS["emoji"], {"text": text}, client=client, settings=settings)


async def country_emoji(
    phone_number: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> CountryResponse:
    """País (con bandera) de un número de teléfono, p.ej. "+34 613 28 81 16"."""

    return await fetch(
        ENDPOINTS["country_emoji"],
        {"text": phone_number},
        client=client,
        settings=settings,
    )
