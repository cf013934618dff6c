"""Tabla de endpoints (data-driven).

Idea:
- En vez de repetir 31 veces el mismo cuerpo "GET + decode", cada operación
  es una fila: host, path, parámetros, forma de respuesta y política de error.
- El motor genérico vive en `apidelirius.adapters.fetch`.

Importante:
- El percent-encoding es un atributo *por parámetro*. Algunos endpoints
  interpolan el texto tal cual (incluidos `&`, `=`, `/`); se conserva así.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote

from apidelirius.core.config import DeliriusSettings
from apidelirius.core.domain.models import (
    AppleMusicResponse,
    AppStoreResponse,
    BingImageResponse,
    BingSearchResponse,
    ChannelInfoResponse,
    CountryResponse,
    DeezerResponse,
    EmojiInfoResponse,
    GeniusSong,
    GImageResponse,
    GoogleSearchResponse,
    HTMLExtractResponse,
    LyricsResponse,
    MixedEmojiResponse,
    MojitoResponse,
    MovieResponse,
    NoticiasResponse,
    NPMResponse,
    PinterestImageResponse,
    Rule34Response,
    SimiResponse,
    SoundCloudResponse,
    SpotifySearchResponse,
    TenorResponse,
    TikTokSearchResponse,
    TikTokStalkResponse,
    TrackResponse,
    TranslationResponse,
    URLCheckResponse,
    YouTubeVideo,
)

# Caracteres que `encodeURIComponent` deja sin escapar.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class ErrorPolicy(str, Enum):
    """Qué hace una operación cuando la llamada falla."""

    PROPAGATE = "propagate"
    WRAP = "wrap"
    SUPPRESS = "suppress"


@dataclass(frozen=True)
class QueryParam:
    name: str
    encode: bool = False


@dataclass(frozen=True)
class Endpoint:
    name: str
    host: str
    path: str
    params: tuple[QueryParam, ...]
    shape: Any
    policy: ErrorPolicy = ErrorPolicy.PROPAGATE
    binary: bool = False
    unwrap: str | None = None
    description: str = ""
    # Prefijo del log cuando la política es SUPPRESS.
    failure_label: str | None = None

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params)


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(endpoint: Endpoint, values: dict[str, object], settings: DeliriusSettings) -> str:
    """Construye `<host><path>?p1=v1&p2=v2` respetando el flag de encoding."""

    missing = [name for name in endpoint.param_names if name not in values]
    if missing:
        raise TypeError(f"{endpoint.name}: missing parameter(s) {', '.join(missing)}")

    parts: list[str] = []
    for param in endpoint.params:
        raw = _render(values[param.name])
        value = encode_uri_component(raw) if param.encode else raw
        parts.append(f"{param.name}={value}")
    return f"{settings.host_for(endpoint.host)}{endpoint.path}?{'&'.join(parts)}"


def _q(name: str, *, encode: bool = False) -> QueryParam:
    return QueryParam(name=name, encode=encode)


_WRAP = ErrorPolicy.WRAP

ENDPOINTS: dict[str, Endpoint] = {
    e.name: e
    for e in (
        # Música / vídeo
        Endpoint("genius_search", "delirios", "/search/genius", (_q("q"),), list[GeniusSong],
                 description="Genius track search"),
        Endpoint("search_lyrics", "delirios", "/search/lyrics", (_q("url", encode=True),), LyricsResponse,
                 description="Lyrics for a Genius URL"),
        Endpoint("search_tiktok", "koyeb", "/api/tiktoksearch", (_q("query", encode=True),),
                 TikTokSearchResponse, description="TikTok video search"),
        Endpoint("search_youtube", "oficial", "/api/ytsearch", (_q("q", encode=True),), list[YouTubeVideo],
                 description="YouTube video search"),
        Endpoint("search_spotify", "delirios", "/search/spotify", (_q("q"), _q("limit")),
                 SpotifySearchResponse, description="Spotify track search"),
        Endpoint("search_tracks", "koyeb", "/api/searchtrack", (_q("q"),), list[TrackResponse],
                 description="YouTube Music track search"),
        Endpoint("search_apple_music", "delirios", "/search/applemusic", (_q("text"),),
                 list[AppleMusicResponse], description="Apple Music search"),
        Endpoint("soundcloud_search", "oficial", "/api/soundcloud", (_q("q"),), SoundCloudResponse,
                 description="SoundCloud track search"),
        Endpoint("deezer_search", "delirios", "/search/deezer", (_q("q"),), DeezerResponse,
                 description="Deezer track search"),
        Endpoint("tenor_search", "delirios", "/search/tenor", (_q("q"),), TenorResponse,
                 description="Tenor GIF search"),
        # Imágenes / web
        Endpoint("search_pokemon", "delirios", "/search/pokecard", (_q("text"),), bytes, binary=True,
                 description="Pokémon card image (binary)"),
        Endpoint("search_pinterest", "delirios", "/search/pinterest", (_q("text"),),
                 list[PinterestImageResponse], policy=ErrorPolicy.SUPPRESS,
                 description="Pinterest image search",
                 failure_label="Error searching for Pinterest images"),
        Endpoint("search_rule34", "oficial", "/api/rule34", (_q("query"),), Rule34Response, policy=_WRAP,
                 description="Rule34 image search"),
        Endpoint("search_google_image", "delirios", "/search/gimage", (_q("query"),), GImageResponse,
                 policy=_WRAP, description="Google image search"),
        Endpoint("search_google", "delirios", "/search/googlesearch", (_q("query"),), GoogleSearchResponse,
                 policy=_WRAP, description="Google web search"),
        Endpoint("search_bing", "oficial", "/api/bingsearch", (_q("query"),), BingSearchResponse,
                 description="Bing web search"),
        Endpoint("search_bing_image", "oficial", "/api/bingimage", (_q("query"),), list[BingImageResponse],
                 policy=_WRAP, unwrap="results", description="Bing image search"),
        # Marketplaces
        Endpoint("search_movie", "oficial", "/api/movie", (_q("query"),), MovieResponse, policy=_WRAP,
                 description="Movie database search"),
        Endpoint("search_npmjs", "delirios", "/search/npm", (_q("q"), _q("limit")), NPMResponse,
                 description="npm registry search"),
        Endpoint("search_app_store", "delirios", "/search/appstore", (_q("q"),), AppStoreResponse,
                 description="App Store search"),
        # Herramientas
        Endpoint("check_url", "delirios", "/tools/checkurl", (_q("url"),), URLCheckResponse, policy=_WRAP,
                 description="URL reachability check"),
        Endpoint("extract_html", "delirios", "/tools/htmlextract", (_q("url"),), HTMLExtractResponse,
                 policy=_WRAP, description="Raw HTML of a URL"),
        Endpoint("translate", "delirios", "/tools/translate", (_q("text", encode=True), _q("language")),
                 TranslationResponse, policy=_WRAP, description="Text translation"),
        Endpoint("emojito", "delirios", "/tools/mojito", (_q("emoji", encode=True),), MojitoResponse,
                 policy=_WRAP, description="ASCII art for an emoji"),
        Endpoint("simisimi", "koyeb", "/api/simi", (_q("text"),), SimiResponse, policy=_WRAP,
                 description="SimSimi chat-bot reply"),
        Endpoint("google_news", "koyeb", "/api/noticias", (_q("language"), _q("country")), NoticiasResponse,
                 policy=_WRAP, description="Google News headlines"),
        Endpoint("tiktok_stalk", "delirios", "/tools/tiktokstalk", (_q("q", encode=True),),
                 TikTokStalkResponse, policy=_WRAP, description="TikTok profile lookup"),
        Endpoint("emoji_mix", "delirios", "/tools/mixed",
                 (_q("emoji1", encode=True), _q("emoji2", encode=True)), MixedEmojiResponse, policy=_WRAP,
                 description="Emoji Kitchen mix of two emojis"),
        Endpoint("telegram_stalk_channel", "delirios", "/tools/channelstalk", (_q("channel"),),
                 ChannelInfoResponse, policy=_WRAP, description="Telegram channel metadata"),
        Endpoint("emoji", "koyeb", "/api/emoji", (_q("text", encode=True),), EmojiInfoResponse, policy=_WRAP,
                 description="Emoji metadata"),
        Endpoint("country_emoji", "oficial", "/api/country", (_q("text", encode=True),), CountryResponse,
                 policy=_WRAP, description="Country of a phone number"),
    )
}
