"""Entry point de la CLI (Typer).

- `pokedex`         -> REPL interactivo (help, exit, map, mapb)
- `pokedex doctor`  -> diagnóstico de config y conectividad
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.pokeapi import PokeAPILocationSource
from cli.doctor import doctor
from cli.ui_components import line_printer, print_banner
from core.config import AppSettings
from core.services.session import PokedexSession, run_repl

app = typer.Typer(
    help="Pokedex: browse PokeAPI location areas from an interactive prompt.",
    add_completion=False,
)
app.command(name="doctor")(doctor)


def configure_logging(level: str) -> None:
    """Logs a stderr vía Rich, para no mezclarse con la salida del REPL."""

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def start_repl(settings: AppSettings, console: Console) -> int:
    if console.is_terminal:
        print_banner(console)

    with PokeAPILocationSource(settings) as source:
        session = PokedexSession(
            source=source,
            emit=line_printer(console),
            base_url=settings.api_base_url,
        )
        return run_repl(
            session,
            lambda prompt: console.input(prompt, markup=False, emoji=False),
            prompt=settings.prompt,
        )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override POKEDEX_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    ),
) -> None:
    """Start the interactive Pokedex prompt."""

    try:
        settings = AppSettings(log_level=log_level) if log_level else AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=start_repl(settings, Console()))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
