"""Operaciones de la API Delirius (una función por endpoint).

Por qué un paquete:
- Agrupa operaciones por dominio (media, imágenes, marketplaces, herramientas).
- `OPERATIONS` mapea el nombre de cada fila de `ENDPOINTS` a su función.
"""

from apidelirius.adapters.delirius.images import (
    search_bing,
    search_bing_image,
    search_google,
    search_google_image,
    search_pinterest,
    search_pokemon,
    search_rule34,
)
from apidelirius.adapters.delirius.marketplace import (
    search_app_store,
    search_movie,
    search_npmjs,
)
from apidelirius.adapters.delirius.media import (
    deezer_search,
    genius_search,
    search_apple_music,
    search_lyrics,
    search_spotify,
    search_tiktok,
    search_tracks,
    search_youtube,
    soundcloud_search,
    tenor_search,
)
from apidelirius.adapters.delirius.tools import (
    check_url,
    country_emoji,
    emoji,
    emoji_mix,
    emojito,
    extract_html,
    google_news,
    simisimi,
    telegram_stalk_channel,
    tiktok_stalk,
    translate,
)

OPERATIONS = {
    func.__name__: func
    for func in (
        genius_search,
        search_lyrics,
        search_tiktok,
        search_youtube,
        search_spotify,
        search_tracks,
        search_pokemon,
        search_pinterest,
        search_apple_music,
        search_rule34,
        search_google_image,
        search_google,
        search_movie,
        search_bing,
        search_bing_image,
        soundcloud_search,
        deezer_search,
        tenor_search,
        search_npmjs,
        search_app_store,
        check_url,
        extract_html,
        translate,
        emojito,
        simisimi,
        google_news,
        tiktok_stalk,
        emoji_mix,
        telegram_stalk_channel,
        emoji,
        country_emoji,
    )
}

__all__ = [
	"OPERATIONS",
	"check_url",
	"country_emoji",
	"deezer_search",
	"emoji",
	"emoji_mix",
	"emojito",
	"extract_html",
	"genius_search",
	"google_news",
	"search_app_store",
	"search_apple_music",
	"search_bing",
	"search_bing_image",
	"search_google",
	"search_google_image",
	"search_lyrics",
	"search_movie",
	"search_npmjs",
	"search_pinterest",
	"search_pokemon",
	"search_rule34",
	"search_spotify",
	"search_tiktok",
	"search_tracks",
	"search_youtube",
	"simisimi",
	"soundcloud_search",
	"telegram_stalk_channel",
	"tenor_search",
	"tiktok_stalk",
	"translate",
]
