"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la sesión lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOCATION_AREA_URL = "https://pokeapi.co/api/v2/location-area/"
DEFAULT_PROMPT = "Pokedex > "

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pokedex"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pokedex"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pokedex"
    return Path.home() / ".config" / "pokedex"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Sin entorno definido, los defaults reproducen el comportamiento clásico
      del Pokedex (PokeAPI pública, prompt `Pokedex > `).
    """

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default=DEFAULT_LOCATION_AREA_URL,
        min_length=8,
        description="URL del listado de location-areas (primera página).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="pokedex-cli/0.1",
        min_length=1,
        description="User-Agent enviado a la API.",
    )
    prompt: str = Field(
        default=DEFAULT_PROMPT,
        description="Prompt mostrado por el REPL antes de cada línea.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging (se escribe en stderr).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
