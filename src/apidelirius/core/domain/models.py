"""Formas de respuesta de la API Delirius (Pydantic v2).

Por qué Pydantic aquí:
- Documenta el contrato JSON de cada servicio remoto en un solo sitio.
- Comprueba solo la forma (objeto o lista, y objetos anidados): todos los
  campos son opcionales, las claves desconocidas se conservan como extras y
  los valores escalares se devuelven tal cual llegan.

Nota:
- `model_dump(by_alias=True, exclude_unset=True)` reproduce el cuerpo recibido.
- Estos modelos describen *qué* devuelve cada endpoint, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from apidelirius.core.html_metadata import extract_html_metadata

# Hoja JSON (texto, número, bool o null). El servicio no respeta los tipos que
# documenta, así que no se valida ni se convierte.
JSONValue = Any


class DeliriusModel(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Vuelve a la forma JSON recibida (claves remotas, sin defaults)."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class DeliriusEnvelope(DeliriusModel):
    """Envoltorio común `{creator, status, data}` de la mayoría de endpoints."""

    creator: JSONValue = Field(
        default=None,
        description="Autor de la API (firma fija del servicio).",
    )
    status: JSONValue = Field(
        default=None,
        description="Éxito según el servicio (bool o código numérico).",
    )


# --- Música / letras -------------------------------------------------------


class GeniusArtist(DeliriusModel):
    name: JSONValue = None
    url: JSONValue = None
    avatar: JSONValue = None
    verified: JSONValue = None


class GeniusSong(DeliriusModel):
    title: JSONValue = None
    full_title: JSONValue = Field(default=None, alias="fullTitle")
    url: JSONValue = None
    thumbnail: JSONValue = None
    image: JSONValue = None
    id: JSONValue = None
    endpoint: JSONValue = None
    instrumental: JSONValue = None
    publish: JSONValue = None
    artist: GeniusArtist | None = None


class LyricsResponse(DeliriusModel):
    lyrics: JSONValue = None


class SpotifyTrack(DeliriusModel):
    id: JSONValue = None
    title: JSONValue = None
    artist: JSONValue = None
    album: JSONValue = None
    duration: JSONValue = None
    popularity: JSONValue = None
    publish: JSONValue = None
    url: JSONValue = None
    image: JSONValue = None


class SpotifySearchResponse(DeliriusEnvelope):
    data: list[SpotifyTrack] | None = None


class TrackDuration(DeliriusModel):
    seconds: JSONValue = None
    label: JSONValue = None


class TrackResponse(DeliriusModel):
    """Resultado de `searchtrack` (YouTube Music)."""

    is_yt_music: JSONValue = Field(default=None, alias="isYtMusic")
    title: JSONValue = None
    artist: JSONValue = None
    id: JSONValue = None
    url: JSONValue = None
    album: JSONValue = None
    duration: TrackDuration | None = None
    image: JSONValue = None


class AppleMusicResponse(DeliriusModel):
    title: JSONValue = None
    url: JSONValue = None
    artists: JSONValue = None
    type: JSONValue = None
    image: JSONValue = None


class SoundCloudTrack(DeliriusModel):
    title: JSONValue = None
    genre: JSONValue = None
    duration: JSONValue = None
    likes: JSONValue = None
    play: JSONValue = None
    comments: JSONValue = None
    id: JSONValue = None
    created: JSONValue = None
    link: JSONValue = None


class SoundCloudResponse(DeliriusEnvelope):
    data: list[SoundCloudTrack] | None = None


class DeezerTrack(DeliriusModel):
    id: JSONValue = None
    title: JSONValue = None
    artist: JSONValue = None
    duration: JSONValue = None
    rank: JSONValue = None
    preview: JSONValue = None
    image: JSONValue = None
    url: JSONValue = None
    explicit_lyrics: JSONValue = None


class DeezerResponse(DeliriusEnvelope):
    data: list[DeezerTrack] | None = None


# --- Vídeo -----------------------------------------------------------------


class TikTokAuthor(DeliriusModel):
    id: JSONValue = None
    username: JSONValue = None
    nickname: JSONValue = None
    avatar: JSONValue = None


class TikTokMusic(DeliriusModel):
    id: JSONValue = None
    title: JSONValue = None
    play: JSONValue = None
    author: JSONValue = None


class TikTokVideo(DeliriusModel):
    id: JSONValue = None
    title: JSONValue = None
    region: JSONValue = None
    hd: JSONValue = None
    duration: JSONValue = None
    play: JSONValue = None
    # El servicio escribe "coment" (sic).
    coment: JSONValue = None
    share: JSONValue = None
    like: JSONValue = None
    download: JSONValue = None
    publish: JSONValue = None
    url: JSONValue = None
    author: TikTokAuthor | None = None
    music: TikTokMusic | None = None


class TikTokSearchResponse(DeliriusEnvelope):
    meta: list[TikTokVideo] | None = None


class YouTubeDuration(DeliriusModel):
    seconds: JSONValue = None
    timestamp: JSONValue = None


class YouTubeAuthor(DeliriusModel):
    name: JSONValue = None
    url: JSONValue = None


class YouTubeVideo(DeliriusModel):
    type: JSONValue = None
    video_id: JSONValue = Field(default=None, alias="videoId")
    url: JSONValue = None
    title: JSONValue = None
    description: JSONValue = None
    image: JSONValue = None
    thumbnail: JSONValue = None
    seconds: JSONValue = None
    timestamp: JSONValue = None
    duration: YouTubeDuration | None = None
    ago: JSONValue = None
    views: JSONValue = None
    author: YouTubeAuthor | None = None


class TenorGIF(DeliriusModel):
    title: JSONValue = None
    created: JSONValue = None
    mp4: JSONValue = None
    gif: JSONValue = None


class TenorResponse(DeliriusEnvelope):
    data: list[TenorGIF] | None = None


# --- Imágenes / búsqueda web -----------------------------------------------


class PinterestMedia(DeliriusModel):
    width: JSONValue = None
    height: JSONValue = None
    url: JSONValue = None


class PinterestImageResponse(DeliriusModel):
    title: JSONValue = None
    media: PinterestMedia | None = None
    created_at: JSONValue = None
    id: JSONValue = None
    domain: JSONValue = None
    username_avatar: JSONValue = Field(default=None, alias="usernameAvatar")
    id_user: JSONValue = Field(default=None, alias="idUser")
    fullname: JSONValue = None
    username: JSONValue = None
    seguidores: JSONValue = None
    description_image: JSONValue = Field(default=None, alias="descriptionImage")


class Rule34Response(DeliriusEnvelope):
    images: list[JSONValue] | None = None


class GImageWebsite(DeliriusModel):
    domain: JSONValue = None
    url: JSONValue = None


class GImageOrigin(DeliriusModel):
    title: JSONValue = None
    website: GImageWebsite | None = None


class GImageResult(DeliriusModel):
    url: JSONValue = None
    width: JSONValue = None
    height: JSONValue = None
    preview: JSONValue = None
    origin: GImageOrigin | None = None


class GImageResponse(DeliriusEnvelope):
    data: list[GImageResult] | None = None


class GoogleSearchResult(DeliriusModel):
    title: JSONValue = None
    url: JSONValue = None
    description: JSONValue = None


class GoogleSearchResponse(DeliriusEnvelope):
    data: list[GoogleSearchResult] | None = None


class BingSearchResult(DeliriusModel):
    title: JSONValue = None
    url: JSONValue = None
    description: JSONValue = None


class BingSearchResponse(DeliriusModel):
    curr_href: JSONValue = Field(default=None, alias="currHref")
    results: list[BingSearchResult] | None = None


class BingImageResponse(DeliriusModel):
    thumbnail: JSONValue = None
    source: JSONValue = None
    direct: JSONValue = None
    description: JSONValue = None
    title: JSONValue = None


# --- Marketplaces ----------------------------------------------------------


class MovieData(DeliriusModel):
    adult: JSONValue = None
    genre_ids: list[JSONValue] | None = None
    id: JSONValue = None
    original_language: JSONValue = None
    original_title: JSONValue = None
    overview: JSONValue = None
    popularity: JSONValue = None
    release_date: JSONValue = None
    title: JSONValue = None
    video: JSONValue = None
    vote_average: JSONValue = None
    vote_count: JSONValue = None
    image: JSONValue = None


class MovieResponse(DeliriusEnvelope):
    data: list[MovieData] | None = None


class NPMEmail(DeliriusModel):
    name: JSONValue = None
    gmail: JSONValue = None


class NPMMaintainer(DeliriusModel):
    username: JSONValue = None
    email: JSONValue = None


class NPMPackage(DeliriusModel):
    package: JSONValue = None
    author: JSONValue = None
    email: NPMEmail | None = None
    publish: JSONValue = None
    version: JSONValue = None
    description: JSONValue = None
    keywords: list[JSONValue] | None = None
    url: JSONValue = None
    maintainers: list[NPMMaintainer] | None = None


class NPMResponse(DeliriusEnvelope):
    total: JSONValue = None
    limit: JSONValue = None
    results: list[NPMPackage] | None = None


class AppStoreApp(DeliriusModel):
    id: JSONValue = None
    title: JSONValue = None
    url: JSONValue = None
    image: JSONValue = None
    genre: list[JSONValue] | None = None
    rating: JSONValue = None
    size: JSONValue = None
    released: JSONValue = None
    updated: JSONValue = None
    version: JSONValue = None
    price: JSONValue = None
    currency: JSONValue = None
    developer: JSONValue = None
    score: JSONValue = None
    reviews: JSONValue = None
    current_version_score: JSONValue = Field(default=None, alias="currentVersionScore")
    screenshots: list[JSONValue] | None = None
    current_version_reviews: JSONValue = Field(default=None, alias="currentVersionReviews")
    website: JSONValue = None


class AppStoreResponse(DeliriusEnvelope):
    data: list[AppStoreApp] | None = None


# --- Herramientas ----------------------------------------------------------
#
# Estos endpoints no publican contrato: solo fijamos el envoltorio y el resto
# de claves se conserva como extras.


class URLCheckResponse(DeliriusEnvelope):
    data: Any = None


class HTMLExtractResponse(DeliriusEnvelope):
    html: JSONValue = None
    data: Any = None

    def page_metadata(self, *, base_url: str | None = None) -> dict[str, Any]:
        """Extrae title/meta_description/og_image del HTML devuelto."""

        html = self.html if isinstance(self.html, str) else self.data
        if not isinstance(html, str):
            return {}
        return extract_html_metadata(html=html, base_url=base_url)


class TranslationResponse(DeliriusEnvelope):
    data: Any = None


class MojitoResponse(DeliriusEnvelope):
    data: Any = None


class SimiResponse(DeliriusEnvelope):
    data: Any = None


class NoticiasResponse(DeliriusEnvelope):
    data: Any = None


class TikTokStalkResponse(DeliriusEnvelope):
    users: Any = None
    stats: Any = None


class MixedEmojiResponse(DeliriusEnvelope):
    data: Any = None


class ChannelInfoResponse(DeliriusEnvelope):
    data: Any = None


class EmojiInfoResponse(DeliriusEnvelope):
    data: Any = None


class CountryResponse(DeliriusEnvelope):
    data: Any = None
