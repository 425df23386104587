"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El core emite líneas planas; aquí se decide cómo se pintan.
"""

from __future__ import annotations

from typing import Callable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Solo tiene sentido en terminal interactiva; la CLI no lo muestra cuando
    stdout es un pipe.
    """

    title = Text("Pokedex", style="bold red")
    subtitle = Text("Location areas • PokeAPI • type 'help'", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="red", padding=(1, 4)))


def line_printer(console: Console) -> Callable[[str], None]:
    """Devuelve un `emit` que escribe cada línea tal cual (sin markup ni emoji)."""

    def emit(line: str) -> None:
        console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)

    return emit


def build_doctor_table() -> Table:
    table = Table(title="Pokedex Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
