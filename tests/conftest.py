"""Pytest configuration and shared fixtures.

`MockAPI` stands in for the remote Delirius hosts: it records every request
and answers through an `httpx.MockTransport`, so no test touches the network.
"""

import asyncio
from typing import Any, Callable

import httpx
import pytest

from apidelirius.core.config import DeliriusSettings


class MockAPI:
    """Programmable fake for the Delirius hosts."""

    def __init__(self, settings: DeliriusSettings) -> None:
        self.settings = settings
        self.requests: list[httpx.Request] = []
        self.clients: list[httpx.AsyncClient] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    # ------------------------------------------------------------------
    # Responses
    # ------------------------------------------------------------------

    def respond_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler

    def json(self, body: Any, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(status_code, json=body)

    def text(self, body: str, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(
            status_code, text=body, headers={"content-type": "text/plain"}
        )

    def content(self, body: bytes, status_code: int = 200) -> None:
        self._handler = lambda request: httpx.Response(
            status_code, content=body, headers={"content-type": "image/png"}
        )

    def fail(self, error: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise error

        self._handler = _raise

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    def _dispatch(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._dispatch)

    def client(self) -> httpx.AsyncClient:
        client = httpx.AsyncClient(transport=self.transport())
        self.clients.append(client)
        return client

    def build_client(self, settings: DeliriusSettings | None = None, **kwargs: Any) -> httpx.AsyncClient:
        """Drop-in replacement for `build_async_client`."""
        return self.client()

    def call(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run an operation against the fake with an injected client."""

        async def _run() -> Any:
            async with self.client() as client:
                return await func(*args, client=client, settings=self.settings, **kwargs)

        return asyncio.run(_run())

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


@pytest.fixture
def settings(monkeypatch) -> DeliriusSettings:
    """Settings with default hosts, ignoring any local .env or env vars."""
    for key in ("DELIRIOS_HOST", "KOYEB_HOST", "OFICIAL_HOST", "USER_AGENT", "HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(f"APIDELIRIUS_{key}", raising=False)
    return DeliriusSettings(_env_file=None)


@pytest.fixture
def api(settings) -> MockAPI:
    """A fresh fake API per test."""
    return MockAPI(settings)


@pytest.fixture
def patched_clients(monkeypatch, api: MockAPI) -> MockAPI:
    """Route internally-built clients (no `client=` argument) through the fake."""
    monkeypatch.setattr("apidelirius.adapters.fetch.build_async_client", api.build_client)
    monkeypatch.setattr("apidelirius.cli.doctor.build_async_client", api.build_client)
    monkeypatch.setattr(
        "apidelirius.adapters.fetch.DeliriusSettings",
        lambda: api.settings,
    )
    return api
