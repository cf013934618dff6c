"""Errores del cliente.

Solo existe un tipo propio: el resto de fallos (transporte, status, decode) se
propagan tal cual los levanta httpx/pydantic.
"""

from __future__ import annotations


class DeliriusError(Exception):
    """Fallo de una operación cuyo payload era un mensaje de texto plano."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url
