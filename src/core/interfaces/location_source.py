"""Contrato de la fuente de páginas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La sesión depende de esta abstracción; el adaptador HTTP real y los fakes
  de tests son intercambiables.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import LocationPage


@runtime_checkable
class LocationSource(Protocol):
    """Contrato mínimo para obtener una página del listado.

    Reglas de diseño:
    - `fetch_page` es síncrono: el REPL bloquea hasta que termina.
    - Solo lanza `NetworkError` o `DecodeError` (de `core.domain.errors`).
    """

    def fetch_page(self, url: str) -> LocationPage:
        """Descarga y decodifica la página en `url`."""

        ...
