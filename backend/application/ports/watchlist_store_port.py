from __future__ import annotations

from typing import Iterable, List, Protocol

from domain.watchlist import ToggleResult


class WatchlistStorePort(Protocol):
    def get(self, user_email: str) -> List[int]:
        ...

    def set(self, user_email: str, movie_ids: Iterable[int]) -> None:
        ...

    def add(self, user_email: str, movie_id: int) -> List[int]:
        ...

    def remove(self, user_email: str, movie_id: int) -> List[int]:
        ...

    def contains(self, user_email: str, movie_id: int) -> bool:
        ...

    def toggle(self, user_email: str, movie_id: int) -> ToggleResult:
        """Flip membership from a single read of the stored list."""
        ...

    def clear(self, user_email: str) -> None:
        ...
