from __future__ import annotations

import logging
from typing import List

from application.ports.movie_catalog_port import MovieCatalogPort
from application.ports.watchlist_store_port import WatchlistStorePort
from domain.catalog import MovieRecord

logger = logging.getLogger(__name__)


class WatchlistMoviesService:
    """Resolves a user's stored watchlist ids into catalog records."""

    def __init__(self, *, store: WatchlistStorePort, catalog: MovieCatalogPort) -> None:
        self._store = store
        self._catalog = catalog

    async def load(self, user_email: str) -> List[MovieRecord]:
        movie_ids = self._store.get(user_email)
        if not movie_ids:
            return []
        movies = await self._catalog.get_movies_by_ids(movie_ids)
        if len(movies) < len(movie_ids):
            logger.warning(
                "Loaded %s of %s watchlist movies for %s", len(movies), len(movie_ids), user_email
            )
        return movies
