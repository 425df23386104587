"""Errores del dominio.

Por qué una jerarquía propia:
- La sesión y el REPL solo conocen `PokedexError`; los adaptadores traducen
  excepciones de httpx/pydantic en el borde.
"""

from __future__ import annotations


class PokedexError(Exception):
    """Error recuperable de un comando; el REPL lo imprime y sigue."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.url = url

    def __str__(self) -> str:
        return self.message


class NetworkError(PokedexError):
    """Fallo de transporte (conexión, timeout, DNS) o status HTTP no-2xx."""


class DecodeError(PokedexError):
    """Cuerpo que no es JSON válido o no tiene la forma de una página."""
