"""Wrapper de httpx.

Por qué un builder:
- Estandariza timeout, redirecciones y User-Agent opcional para todas las operaciones.
- Facilita testeo: las operaciones aceptan un `httpx.AsyncClient` ya construido
  (p.ej. con `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from apidelirius.core.config import DeliriusSettings


def build_async_client(
    settings: DeliriusSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` para una única llamada.

    Sin headers propios por defecto: la API no requiere auth ni Accept especial.
    """

    settings = settings or DeliriusSettings()
    headers: dict[str, str] = {}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )
