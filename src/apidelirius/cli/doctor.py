"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console

from apidelirius.adapters.http_client import build_async_client
from apidelirius.cli.ui_components import build_doctor_table
from apidelirius.core.config import DeliriusSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and host configuration.")

_console = Console()


async def _check_http(url: str, settings: DeliriusSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


async def _check_hosts(settings: DeliriusSettings) -> list[tuple[str, str, bool, str]]:
    hosts = settings.hosts()
    results = await asyncio.gather(*(_check_http(url, settings) for url in hosts.values()))
    return [(key, url, ok, detail) for (key, url), (ok, detail) in zip(hosts.items(), results)]


@app.command()
def run() -> None:
    """Check connectivity to every configured API host."""

    settings = DeliriusSettings()
    table = build_doctor_table()

    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK" if settings.user_agent else "DEFAULT", settings.user_agent or "httpx")

    failed = False
    for key, url, ok, detail in asyncio.run(_check_hosts(settings)):
        failed = failed or not ok
        table.add_row(f"Host {key}", "OK" if ok else "FAIL", f"{url} ({detail})")

    _console.print(table)

    if failed:
        _console.print(
            "\n[yellow]Note:[/yellow] unreachable hosts can be overridden with "
            "`apidelirius doctor setup-hosts` or APIDELIRIUS_<KEY>_HOST env vars."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-hosts")
def setup_hosts() -> None:
    """Interactive host setup (stores overrides in the user config .env)."""

    settings = DeliriusSettings()
    values: dict[str, str] = {}
    for key, current in settings.hosts().items():
        value = typer.prompt(f"{key} host", default=current, show_default=True).strip()
        if not value.startswith(("http://", "https://")):
            raise typer.BadParameter(f"{key} host must start with http:// or https://")
        values[f"APIDELIRIUS_{key.upper()}_HOST"] = value.rstrip("/")

    env_path = write_user_env_vars(values, env_path=get_user_env_file())
    _console.print(f"[green]Saved host config to:[/green] {env_path}")
