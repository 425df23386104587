"""Core del Pokedex: dominio, contratos, configuración y servicios."""
