"""Motor genérico "GET templado + decode".

Todas las operaciones pasan por `fetch`: construye la URL desde la tabla de
endpoints, hace un único GET, decodifica y aplica la política de error de la
fila. Sin reintentos, caché ni estado compartido entre llamadas.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter

from apidelirius.adapters.endpoints import Endpoint, ErrorPolicy, build_url
from apidelirius.adapters.http_client import build_async_client
from apidelirius.core.config import DeliriusSettings
from apidelirius.core.errors import DeliriusError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def plain_text_message(response: httpx.Response) -> str | None:
    """Devuelve el mensaje si el cuerpo de error es texto plano (o un string JSON)."""

    text = response.text.strip()
    if not text:
        return None
    try:
        payload = json.loads(text)
    except ValueError:
        return text
    return payload if isinstance(payload, str) else None


def decode(endpoint: Endpoint, response: httpx.Response) -> Any:
    if endpoint.binary:
        return response.content

    payload = response.json()
    if endpoint.unwrap is not None:
        if not isinstance(payload, dict):
            raise ValueError(f"{endpoint.name}: expected a JSON object with '{endpoint.unwrap}'")
        payload = payload.get(endpoint.unwrap)
    if payload is None:
        return None
    return _adapter(endpoint.shape).validate_python(payload)


async def _get(endpoint: Endpoint, url: str, client: httpx.AsyncClient) -> Any:
    response = await client.get(url)
    response.raise_for_status()
    return decode(endpoint, response)


async def _send(
    endpoint: Endpoint,
    url: str,
    *,
    client: httpx.AsyncClient | None,
    settings: DeliriusSettings,
) -> Any:
    if client is not None:
        return await _get(endpoint, url, client)
    async with build_async_client(settings) as own_client:
        return await _get(endpoint, url, own_client)


async def fetch(
    endpoint: Endpoint,
    values: dict[str, object],
    *,
    client: httpx.AsyncClient | None = None,
    settings: DeliriusSettings | None = None,
) -> Any:
    """Ejecuta una operación de la tabla.

    - `client`: se reutiliza y no se cierra. Sin él, se crea uno por llamada.
    - La política de error es fija por endpoint (ver `ErrorPolicy`).
    """

    settings = settings or DeliriusSettings()
    url = build_url(endpoint, values, settings)
    logger.debug("GET %s (%s)", url, endpoint.name)

    if endpoint.policy is ErrorPolicy.SUPPRESS:
        try:
            return await _send(endpoint, url, client=client, settings=settings)
        except (httpx.HTTPError, ValueError) as exc:
            label = endpoint.failure_label or f"Error calling {endpoint.description or endpoint.name}"
            logger.error("%s: %s", label, exc)
            return None

    if endpoint.policy is ErrorPolicy.WRAP:
        try:
            return await _send(endpoint, url, client=client, settings=settings)
        except httpx.HTTPStatusError as exc:
            message = plain_text_message(exc.response)
            if message is None:
                raise
            raise DeliriusError(
                message,
                status_code=exc.response.status_code,
                url=url,
            ) from exc

    return await _send(endpoint, url, client=client, settings=settings)
