"""Tests for settings and the user .env helpers."""

import asyncio

import httpx
import pytest
from pydantic import ValidationError

from apidelirius.adapters.http_client import build_async_client
from apidelirius.core.config import (
    DELIRIOS_HOST,
    KOYEB_HOST,
    OFICIAL_HOST,
    DeliriusSettings,
    get_user_config_dir,
    write_user_env_vars,
)


class TestDeliriusSettings:
    """Tests for DeliriusSettings."""

    def test_defaults(self, settings):
        assert settings.hosts() == {
            "delirios": DELIRIOS_HOST,
            "koyeb": KOYEB_HOST,
            "oficial": OFICIAL_HOST,
        }
        assert settings.http_timeout_seconds == 20.0
        assert settings.user_agent is None
        assert settings.follow_redirects is True

    def test_env_override(self, monkeypatch):
        """Hosts come from APIDELIRIUS_* env vars; trailing slashes are dropped."""
        monkeypatch.setenv("APIDELIRIUS_KOYEB_HOST", "https://mirror.example/")
        monkeypatch.setenv("APIDELIRIUS_HTTP_TIMEOUT_SECONDS", "3.5")

        settings = DeliriusSettings(_env_file=None)

        assert settings.host_for("koyeb") == "https://mirror.example"
        assert settings.http_timeout_seconds == 3.5

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("APIDELIRIUS_OFICIAL_HOST", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("APIDELIRIUS_OFICIAL_HOST=https://oficial.local\n", encoding="utf-8")

        settings = DeliriusSettings(_env_file=env_file)

        assert settings.oficial_host == "https://oficial.local"

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            DeliriusSettings(_env_file=None, http_timeout_seconds=0)

    def test_unknown_host_key(self, settings):
        with pytest.raises(KeyError):
            settings.host_for("github")


class TestUserEnv:
    """Tests for the per-user .env writer."""

    def test_write_and_merge(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"
        env_path.parent.mkdir()
        env_path.write_text("# old\nAPIDELIRIUS_KOYEB_HOST='https://old'\nOTHER=1\n", encoding="utf-8")

        written = write_user_env_vars({"APIDELIRIUS_KOYEB_HOST": "https://new"}, env_path=env_path)

        assert written == env_path
        assert env_path.read_text(encoding="utf-8").splitlines() == [
            "# apidelirius user config (.env)",
            "APIDELIRIUS_KOYEB_HOST=https://new",
            "OTHER=1",
        ]

    def test_creates_parent_dirs(self, tmp_path):
        env_path = tmp_path / "a" / "b" / ".env"
        write_user_env_vars({"X": "1"}, env_path=env_path)
        assert env_path.exists()

    def test_xdg_config_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr("sys.platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_user_config_dir() == tmp_path / "apidelirius"


class TestBuildAsyncClient:
    """Tests for the httpx client builder."""

    def test_no_custom_headers_by_default(self, settings):
        client = build_async_client(settings)
        try:
            assert client.headers["user-agent"].startswith("python-httpx/")
            assert client.timeout == httpx.Timeout(20.0)
            assert client.follow_redirects is True
        finally:
            asyncio.run(client.aclose())

    def test_user_agent_from_settings(self, settings):
        custom = settings.model_copy(update={"user_agent": "my-bot/1.0"})
        client = build_async_client(custom)
        try:
            assert client.headers["user-agent"] == "my-bot/1.0"
        finally:
            asyncio.run(client.aclose())
