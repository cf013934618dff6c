"""CLI principal.

Por qué existe:
- Permite probar cualquier operación desde la terminal sin escribir código.
- Los argumentos posicionales se mapean, en orden, a los parámetros de la
  operación; los que falten al final toman su valor por defecto.
"""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
from pathlib import Path
from typing import Any, Callable

import httpx
import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from apidelirius.adapters.delirius import OPERATIONS
from apidelirius.adapters.endpoints import ENDPOINTS
from apidelirius.cli import doctor
from apidelirius.cli.ui_components import build_operations_table, print_banner
from apidelirius.core.domain.models import DeliriusModel
from apidelirius.core.errors import DeliriusError

app = typer.Typer(no_args_is_help=True, help="Command line client for the Delirius API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def bind_arguments(func: Callable[..., Any], args: list[str]) -> list[Any]:
    """Convierte argumentos de texto en los parámetros posicionales de `func`."""

    params = [
        p
        for p in inspect.signature(func).parameters.values()
        if p.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD
    ]
    if len(args) > len(params):
        raise typer.BadParameter(
            f"{func.__name__} takes at most {len(params)} argument(s), got {len(args)}"
        )

    bound: list[Any] = []
    for param, raw in zip(params, args):
        if isinstance(param.default, int) and not isinstance(param.default, bool):
            try:
                bound.append(int(raw))
            except ValueError:
                raise typer.BadParameter(f"{param.name} must be an integer, got {raw!r}") from None
        else:
            bound.append(raw)

    missing = [p.name for p in params[len(args):] if p.default is inspect.Parameter.empty]
    if missing:
        raise typer.BadParameter(f"{func.__name__}: missing argument(s) {', '.join(missing)}")
    return bound


def to_jsonable(value: Any) -> Any:
    if isinstance(value, DeliriusModel):
        return value.to_json_dict()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (DEBUG)."),
) -> None:
    configure_logging(verbose)


@app.command(name="list")
def list_operations() -> None:
    """Show every available operation."""

    print_banner(_console)
    _console.print(build_operations_table(ENDPOINTS))


@app.command()
def call(
    operation: str = typer.Argument(..., help="Operation name (see `apidelirius list`)."),
    args: list[str] = typer.Argument(None, help="Positional arguments for the operation."),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to a file (required for binary results).",
    ),
) -> None:
    """Run one operation and print its JSON result."""

    func = OPERATIONS.get(operation)
    if func is None:
        raise typer.BadParameter(f"unknown operation: {operation}", param_hint="OPERATION")

    positional = bind_arguments(func, args or [])
    try:
        result = asyncio.run(func(*positional))
    except DeliriusError as exc:
        _err_console.print(f"[red]{operation} failed:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc
    except (httpx.HTTPError, ValidationError, ValueError) as exc:
        _err_console.print(f"[red]{operation} failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if isinstance(result, bytes):
        if output is None:
            raise typer.BadParameter("binary result, use --output PATH", param_hint="--output")
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(result)
        _console.print(f"[green]Saved {len(result)} bytes to:[/green] {output}")
        return

    payload = to_jsonable(result)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
        _console.print(f"[green]Saved JSON to:[/green] {output}")
        return

    _console.print_json(data=payload)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
