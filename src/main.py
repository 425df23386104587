"""Script de ejecución desde `src/` (`python -m main`)."""

from __future__ import annotations

import sys

# El banner usa "•"; las consolas cp1252 de Windows no lo pueden codificar.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
