"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La respuesta de la API se valida en el borde: si la forma no coincide,
  el adaptador lo detecta antes de que la sesión toque el cursor.
- El cursor valida sus asignaciones, así que nunca guarda algo que no sea
  una URL (str) o `None`.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class LocationArea(BaseModel):
    """Una entrada del listado `location-area`."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        ...,
        description="Nombre de la location-area (p.ej. 'canalave-city-area').",
    )
    url: str | None = Field(
        default=None,
        description="URL del recurso detallado, si la API la incluye.",
    )


class LocationPage(BaseModel):
    """Una página del listado tal como la devuelve la API.

    Es transitoria: se imprimen los nombres, se copian `next`/`previous`
    al cursor y se descarta.
    """

    model_config = ConfigDict(extra="ignore")

    results: list[LocationArea] = Field(
        ...,
        description="Resultados de la página, en el orden de la respuesta.",
    )
    next: str | None = Field(
        default=None,
        description="URL absoluta de la página siguiente (None en la última).",
    )
    previous: str | None = Field(
        default=None,
        description="URL absoluta de la página anterior (None en la primera).",
    )
    count: int | None = Field(
        default=None,
        description="Total de location-areas reportado por la API (informativo).",
    )

    def names(self) -> list[str]:
        return [area.name for area in self.results]


class PaginationCursor(BaseModel):
    """Par de URLs para pedir la página siguiente/anterior.

    - `previous_url is None` significa "primera página".
    - `next_url is None` significa "última página" (o nada cargado aún).
    """

    model_config = ConfigDict(validate_assignment=True)

    next_url: str | None = Field(default=None)
    previous_url: str | None = Field(default=None)

    def advance_to(self, page: LocationPage) -> None:
        """Copia los enlaces de `page` tal cual, incluidos los ausentes."""

        self.next_url = page.next
        self.previous_url = page.previous
