"""Movie catalog adapters (TMDB)."""

from infrastructure.catalog.tmdb_client import TMDBCatalogClient

__all__ = ["TMDBCatalogClient"]
