"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar las operaciones.
- Los hosts de la API son configuración estática: se leen, nunca se mutan.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DELIRIOS_HOST = "https://delirios-api-delta.vercel.app"
KOYEB_HOST = "https://controlled-gae-deliriusapi.koyeb.app"
OFICIAL_HOST = "https://delirius-api-oficial.vercel.app"

APP_DIR_NAME = "apidelirius"
USER_ENV_HEADER = "# apidelirius user config (.env)\n"


def get_user_config_dir() -> Path:
    """Carpeta donde `doctor setup-hosts` guarda los hosts del usuario."""

    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or Path.home()
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: Mapping[str, str | None], *, env_path: Path | None = None) -> Path:
    """Fusiona `values` con el .env de usuario y lo reescribe ordenado.

    Las claves ya presentes se conservan; un valor `None` no pisa nada.
    """

    env_path = env_path or get_user_env_file()
    merged = dotenv_values(env_path) if env_path.exists() else {}
    merged.update({key: value for key, value in values.items() if value is not None})

    env_path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{key}={value}\n" for key, value in sorted(merged.items()) if value is not None)
    env_path.write_text(USER_ENV_HEADER + body, encoding="utf-8")
    return env_path


class DeliriusSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para operaciones y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="APIDELIRIUS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    delirios_host: str = Field(
        default=DELIRIOS_HOST,
        min_length=8,
        description="Host de la API principal (search/* y tools/*).",
    )
    koyeb_host: str = Field(
        default=KOYEB_HOST,
        min_length=8,
        description="Host espejo en Koyeb (api/*).",
    )
    oficial_host: str = Field(
        default=OFICIAL_HOST,
        min_length=8,
        description="Host oficial en Vercel (api/*).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str | None = Field(
        default=None,
        description="User-Agent opcional; si no se define se usa el de httpx.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones HTTP.",
    )

    @field_validator("delirios_host", "koyeb_host", "oficial_host")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    def host_for(self, key: str) -> str:
        """Resuelve la clave de host de una operación (`delirios`, `koyeb`, `oficial`)."""

        try:
            return getattr(self, f"{key}_host")
        except AttributeError:
            raise KeyError(f"unknown host key: {key!r}") from None

    def hosts(self) -> dict[str, str]:
        return {
            "delirios": self.delirios_host,
            "koyeb": self.koyeb_host,
            "oficial": self.oficial_host,
        }
