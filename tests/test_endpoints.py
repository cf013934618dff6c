"""Tests for the endpoint table and URL construction."""

import httpx
import pytest

import apidelirius
from apidelirius.adapters.delirius import OPERATIONS
from apidelirius.adapters.endpoints import (
    ENDPOINTS,
    Endpoint,
    ErrorPolicy,
    QueryParam,
    build_url,
    encode_uri_component,
)

DELIRIOS = "https://delirios-api-delta.vercel.app"
KOYEB = "https://controlled-gae-deliriusapi.koyeb.app"
OFICIAL = "https://delirius-api-oficial.vercel.app"


# (operation, args, kwargs, expected URL as sent on the wire)
URL_CASES = [
    ("genius_search", ("Taylor Swift",), {}, f"{DELIRIOS}/search/genius?q=Taylor%20Swift"),
    (
        "search_lyrics",
        ("https://genius.com/Taylor-swift-love-story-lyrics",),
        {},
        f"{DELIRIOS}/search/lyrics?url=https%3A%2F%2Fgenius.com%2FTaylor-swift-love-story-lyrics",
    ),
    ("search_tiktok", ("#dance",), {}, f"{KOYEB}/api/tiktoksearch?query=%23dance"),
    ("search_youtube", ("funny cats",), {}, f"{OFICIAL}/api/ytsearch?q=funny%20cats"),
    ("search_spotify", ("Twice",), {}, f"{DELIRIOS}/search/spotify?q=Twice&limit=20"),
    ("search_spotify", ("Twice", 5), {}, f"{DELIRIOS}/search/spotify?q=Twice&limit=5"),
    ("search_tracks", ("Love",), {}, f"{KOYEB}/api/searchtrack?q=Love"),
    ("search_pokemon", ("Pikachu",), {}, f"{DELIRIOS}/search/pokecard?text=Pikachu"),
    ("search_pinterest", ("travel",), {}, f"{DELIRIOS}/search/pinterest?text=travel"),
    ("search_apple_music", ("Twice",), {}, f"{DELIRIOS}/search/applemusic?text=Twice"),
    ("search_rule34", ("pokemon",), {}, f"{OFICIAL}/api/rule34?query=pokemon"),
    ("search_google_image", ("cats",), {}, f"{DELIRIOS}/search/gimage?query=cats"),
    ("search_google", ("Momo",), {}, f"{DELIRIOS}/search/googlesearch?query=Momo"),
    ("search_movie", ("blackpink",), {}, f"{OFICIAL}/api/movie?query=blackpink"),
    ("search_bing", ("blackpink",), {}, f"{OFICIAL}/api/bingsearch?query=blackpink"),
    ("search_bing_image", ("Nayeon",), {}, f"{OFICIAL}/api/bingimage?query=Nayeon"),
    ("soundcloud_search", ("lofi",), {}, f"{OFICIAL}/api/soundcloud?q=lofi"),
    ("deezer_search", ("Feel",), {}, f"{DELIRIOS}/search/deezer?q=Feel"),
    ("tenor_search", ("Nayeon",), {}, f"{DELIRIOS}/search/tenor?q=Nayeon"),
    ("search_npmjs", ("axios",), {}, f"{DELIRIOS}/search/npm?q=axios&limit=20"),
    ("search_npmjs", ("axios",), {"limit": 3}, f"{DELIRIOS}/search/npm?q=axios&limit=3"),
    ("search_app_store", ("WhatsApp",), {}, f"{DELIRIOS}/search/appstore?q=WhatsApp"),
    (
        "check_url",
        ("https://example.com/docs",),
        {},
        f"{DELIRIOS}/tools/checkurl?url=https://example.com/docs",
    ),
    (
        "extract_html",
        ("https://example.com/",),
        {},
        f"{DELIRIOS}/tools/htmlextract?url=https://example.com/",
    ),
    (
        "translate",
        ("Hola, mundo", "en"),
        {},
        f"{DELIRIOS}/tools/translate?text=Hola%2C%20mundo&language=en",
    ),
    ("emojito", ("\U0001F600",), {}, f"{DELIRIOS}/tools/mojito?emoji=%F0%9F%98%80"),
    ("simisimi", ("Hola",), {}, f"{KOYEB}/api/simi?text=Hola"),
    ("google_news", (), {}, f"{KOYEB}/api/noticias?language=es&country=PE"),
    ("google_news", ("en", "US"), {}, f"{KOYEB}/api/noticias?language=en&country=US"),
    (
        "tiktok_stalk",
        ("twice_tiktok_official",),
        {},
        f"{DELIRIOS}/tools/tiktokstalk?q=twice_tiktok_official",
    ),
    (
        "emoji_mix",
        ("\U0001F61D", "\U0001F60A"),
        {},
        f"{DELIRIOS}/tools/mixed?emoji1=%F0%9F%98%9D&emoji2=%F0%9F%98%8A",
    ),
    ("telegram_stalk_channel", ("deliriuus",), {}, f"{DELIRIOS}/tools/channelstalk?channel=deliriuus"),
    ("emoji", ("\U0001F601",), {}, f"{KOYEB}/api/emoji?text=%F0%9F%98%81"),
    (
        "country_emoji",
        ("+34 613 28 81 16",),
        {},
        f"{OFICIAL}/api/country?text=%2B34%20613%2028%2081%2016",
    ),
]


class TestEndpointTable:
    """Tests for the ENDPOINTS table itself."""

    def test_every_endpoint_has_an_operation(self):
        """Every table row is exposed as a function and vice versa."""
        assert set(ENDPOINTS) == set(OPERATIONS)
        assert len(OPERATIONS) == 31

    def test_operations_exported_from_package(self):
        """All operations are importable from the top-level package."""
        for name in OPERATIONS:
            assert getattr(apidelirius, name) is OPERATIONS[name]

    def test_only_pinterest_suppresses(self):
        """Exactly one operation swallows failures."""
        suppressing = [e.name for e in ENDPOINTS.values() if e.policy is ErrorPolicy.SUPPRESS]
        assert suppressing == ["search_pinterest"]

    def test_only_pokemon_is_binary(self):
        """Only the card image endpoint returns raw bytes."""
        assert [e.name for e in ENDPOINTS.values() if e.binary] == ["search_pokemon"]

    def test_wrap_policy_assignment(self):
        """The wrap policy covers the tool endpoints and a handful of searches."""
        wrapped = {e.name for e in ENDPOINTS.values() if e.policy is ErrorPolicy.WRAP}
        assert {"search_rule34", "search_google", "search_movie", "translate", "country_emoji"} <= wrapped
        assert "search_bing" not in wrapped
        assert "genius_search" not in wrapped

    def test_hosts_are_known_keys(self, settings):
        """Every row points at one of the configured hosts."""
        for endpoint in ENDPOINTS.values():
            assert settings.host_for(endpoint.host).startswith("https://")


class TestBuildUrl:
    """Tests for build_url and the encoding flag."""

    def test_encode_uri_component_matches_javascript(self):
        """Reserved characters are escaped, the JS-safe set is kept."""
        assert encode_uri_component("a b&c=d/e?f#g") == "a%20b%26c%3Dd%2Fe%3Ff%23g"
        assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"
        assert encode_uri_component("ñ") == "%C3%B1"

    def test_raw_parameter_is_not_encoded(self, settings):
        """Raw parameters are interpolated verbatim, reserved characters included."""
        url = build_url(ENDPOINTS["search_google"], {"query": "a&b=c"}, settings)
        assert url == f"{DELIRIOS}/search/googlesearch?query=a&b=c"

    def test_encoded_parameter(self, settings):
        """Encoded parameters go through encodeURIComponent rules."""
        url = build_url(ENDPOINTS["search_youtube"], {"q": "a&b=c"}, settings)
        assert url == f"{OFICIAL}/api/ytsearch?q=a%26b%3Dc"

    def test_numbers_rendered_verbatim(self, settings):
        """Numeric values are embedded with str()."""
        url = build_url(ENDPOINTS["search_npmjs"], {"q": "x", "limit": 50}, settings)
        assert url.endswith("?q=x&limit=50")

    def test_missing_parameter(self, settings):
        """A missing value is a programming error, not a remote failure."""
        with pytest.raises(TypeError, match="language"):
            build_url(ENDPOINTS["translate"], {"text": "hola"}, settings)

    def test_custom_host(self, settings):
        """Host overrides from settings are honoured."""
        custom = settings.model_copy(update={"koyeb_host": "https://mirror.example"})
        url = build_url(ENDPOINTS["simisimi"], {"text": "hi"}, custom)
        assert url == "https://mirror.example/api/simi?text=hi"

    def test_custom_endpoint(self, settings):
        """build_url works for any Endpoint row."""
        endpoint = Endpoint(
            name="demo",
            host="delirios",
            path="/demo",
            params=(QueryParam("a"), QueryParam("b", encode=True)),
            shape=dict,
        )
        assert build_url(endpoint, {"a": "x y", "b": "x y"}, settings) == f"{DELIRIOS}/demo?a=x y&b=x%20y"


class TestRequestUrls:
    """Each operation sends exactly one GET to its documented URL."""

    @pytest.mark.parametrize(
        ("operation", "args", "kwargs", "expected"),
        URL_CASES,
        ids=[f"{case[0]}-{i}" for i, case in enumerate(URL_CASES)],
    )
    def test_request_url(self, api, operation, args, kwargs, expected):
        """The wire URL matches the template with per-operation encoding."""
        api.respond_with(
            lambda request: httpx.Response(200, content=b"[]")
            if ENDPOINTS[operation].binary
            else httpx.Response(200, json=[] if operation in _LIST_OPS else {})
        )

        api.call(OPERATIONS[operation], *args, **kwargs)

        assert len(api.requests) == 1
        assert api.requests[0].method == "GET"
        assert api.requests[0].content == b""
        assert api.last_url == expected


_LIST_OPS = {
    "genius_search",
    "search_youtube",
    "search_tracks",
    "search_pinterest",
    "search_apple_music",
}
