"""Registro de comandos del REPL.

El registro es data pura: nombre -> (descripción, acción). Las acciones
reciben la sesión como parámetro en vez de capturarla, así el registro se
puede construir e inspeccionar sin sesión. `exit` no termina el proceso:
devuelve `CommandOutcome.EXIT` y el driver del loop decide.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

if TYPE_CHECKING:
    from core.services.session import PokedexSession

UNKNOWN_COMMAND_MESSAGE = "Unknown command. Type 'help' for a list of commands."
NO_PREVIOUS_PAGE_MESSAGE = "No previous page available."
NO_NEXT_PAGE_MESSAGE = "No next page available."


class CommandOutcome(str, Enum):
    """Resultado etiquetado de una acción."""

    CONTINUE = "continue"
    EXIT = "exit"


CommandAction = Callable[["PokedexSession"], CommandOutcome]


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    action: CommandAction


def command_help(session: PokedexSession) -> CommandOutcome:
    session.emit("")
    session.emit("Welcome to the Pokedex!")
    session.emit("Usage:")
    session.emit("")
    for command in session.registry.values():
        session.emit(f"{command.name}: {command.description}")
    session.emit("")
    return CommandOutcome.CONTINUE


def command_exit(session: PokedexSession) -> CommandOutcome:
    return CommandOutcome.EXIT


def command_map(session: PokedexSession) -> CommandOutcome:
    """Avanza una página (la primera vez, pide la URL base)."""

    if session.page_loaded and session.cursor.next_url is None:
        session.emit(NO_NEXT_PAGE_MESSAGE)
        return CommandOutcome.CONTINUE

    session.show_page(session.cursor.next_url or session.base_url)
    return CommandOutcome.CONTINUE


def command_mapb(session: PokedexSession) -> CommandOutcome:
    """Retrocede una página; en la primera solo informa (sin fetch)."""

    if session.cursor.previous_url is None:
        session.emit(NO_PREVIOUS_PAGE_MESSAGE)
        return CommandOutcome.CONTINUE

    session.show_page(session.cursor.previous_url)
    return CommandOutcome.CONTINUE


def build_registry() -> Mapping[str, Command]:
    """Construye el registro (solo lectura). El orden es el de `help`."""

    commands = (
        Command("help", "Displays a help message", command_help),
        Command("exit", "Exit the Pokedex", command_exit),
        Command("map", "Display the next 20 location areas", command_map),
        Command("mapb", "Display the previous 20 location areas", command_mapb),
    )
    return MappingProxyType({command.name: command for command in commands})


def lookup(registry: Mapping[str, Command], name: str) -> Command | None:
    """Búsqueda exacta (case-sensitive, sin strip)."""

    return registry.get(name)
