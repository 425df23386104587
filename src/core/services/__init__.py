"""Servicios del Core (sesión, registro de comandos, loop del REPL)."""
