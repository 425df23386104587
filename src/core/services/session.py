"""Sesión del Pokedex y loop del REPL.

Este módulo no imprime directamente ni lee de stdin: recibe un `emit`
(salida línea a línea) y un `read_line` (entrada). La CLI los conecta a
Rich; los tests, a listas en memoria.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping

from core.config import DEFAULT_LOCATION_AREA_URL, DEFAULT_PROMPT
from core.domain.errors import PokedexError
from core.domain.models import LocationPage, PaginationCursor
from core.interfaces.location_source import LocationSource
from core.services.commands import (
    UNKNOWN_COMMAND_MESSAGE,
    Command,
    CommandOutcome,
    build_registry,
    lookup,
)

logger = logging.getLogger(__name__)


@dataclass
class PokedexSession:
    """Estado de una sesión interactiva.

    El cursor pertenece en exclusiva a la sesión. `page_loaded` distingue
    "nada cargado aún" de "estamos en la última página" (ambos con
    `next_url is None`).
    """

    source: LocationSource
    emit: Callable[[str], None] = print
    base_url: str = DEFAULT_LOCATION_AREA_URL
    cursor: PaginationCursor = field(default_factory=PaginationCursor)
    registry: Mapping[str, Command] = field(default_factory=build_registry)
    page_loaded: bool = False

    def show_page(self, url: str) -> LocationPage:
        """Descarga `url`, imprime los nombres y mueve el cursor.

        Si la descarga falla, el cursor queda intacto.
        """

        page = self.source.fetch_page(url)
        for area in page.results:
            self.emit(area.name)
        self.cursor.advance_to(page)
        self.page_loaded = True
        logger.debug(
            "Cursor moved: next=%s previous=%s",
            self.cursor.next_url,
            self.cursor.previous_url,
        )
        return page

    def dispatch(self, line: str) -> CommandOutcome:
        command = lookup(self.registry, line)
        if command is None:
            self.emit(UNKNOWN_COMMAND_MESSAGE)
            return CommandOutcome.CONTINUE
        return command.action(self)


def run_repl(
    session: PokedexSession,
    read_line: Callable[[str], str],
    *,
    prompt: str = DEFAULT_PROMPT,
) -> int:
    """Loop síncrono: leer -> despachar -> ejecutar. Devuelve el exit code.

    Termina con `exit` o al agotarse la entrada (EOF / Ctrl-C). Un fallo
    leyendo la entrada corta el loop y se reporta una sola vez al final.
    """

    read_error: OSError | None = None
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            break
        except OSError as exc:
            read_error = exc
            break

        try:
            outcome = session.dispatch(line)
        except PokedexError as exc:
            session.emit(f"Error: {exc}")
            continue

        if outcome is CommandOutcome.EXIT:
            return 0

    if read_error is not None:
        session.emit(f"Error reading input: {read_error}")
    return 0
