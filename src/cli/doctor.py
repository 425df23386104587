"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.pokeapi import PokeAPILocationSource
from cli.ui_components import build_doctor_table
from core.config import AppSettings, get_user_env_file
from core.domain.errors import PokedexError

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        with PokeAPILocationSource(settings) as source:
            page = source.fetch_page(settings.api_base_url)
    except PokedexError as exc:
        return False, str(exc)
    return True, f"{len(page.results)} location areas on the first page"


def doctor(ctx: typer.Context) -> None:
    """Show the effective configuration and probe the PokeAPI listing."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()

    table = build_doctor_table()
    table.add_row("Base URL", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level)

    env_file = get_user_env_file()
    if env_file.exists():
        table.add_row("User config", "OK", str(env_file))
    else:
        table.add_row("User config", "OPTIONAL", f"{env_file} (not found, using defaults)")

    ok_api, detail_api = _check_api(settings)
    table.add_row("PokeAPI connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)
