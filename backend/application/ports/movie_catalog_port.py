from __future__ import annotations

from typing import Iterable, List, Protocol

from domain.catalog import MovieRecord, SearchResponse


class MovieCatalogPort(Protocol):
    async def search_movies(self, query: str, page: int = 1) -> SearchResponse:
        ...

    async def get_movie_details(self, movie_id: int) -> MovieRecord:
        ...

    async def get_popular_movies(self, page: int = 1) -> SearchResponse:
        ...

    async def get_movies_by_ids(self, movie_ids: Iterable[int]) -> List[MovieRecord]:
        """Fetch each id independently; ids that fail are left out."""
        ...

    async def close(self) -> None:
        ...
