"""
Infrastructure layer.

Adapters behind the application ports: local storage substrates and stores,
the TMDB catalog client, env-driven settings and wiring (`bootstrap`).
"""

__all__ = [
    "bootstrap",
    "catalog",
    "config",
    "persistence",
]
