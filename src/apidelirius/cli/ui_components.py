"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `list` y `doctor`.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from apidelirius.adapters.endpoints import Endpoint


def print_banner(console: Console) -> None:
    """Imprime el banner; solo en comandos interactivos (no en `call`, que emite JSON)."""

    title = Text("apidelirius", style="bold cyan")
    subtitle = Text("Búsqueda • Música • Herramientas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_operations_table(endpoints: Mapping[str, Endpoint]) -> Table:
    table = Table(title="Delirius operations")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Endpoint", style="magenta")
    table.add_column("Params", style="white")
    table.add_column("Errors", style="yellow")
    table.add_column("Description", style="dim")

    for name in sorted(endpoints):
        endpoint = endpoints[name]
        params = ", ".join(f"{p.name}*" if p.encode else p.name for p in endpoint.params)
        table.add_row(
            name,
            f"{endpoint.host}{endpoint.path}",
            params,
            endpoint.policy.value,
            endpoint.description,
        )
    return table


def build_doctor_table() -> Table:
    table = Table(title="apidelirius doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
