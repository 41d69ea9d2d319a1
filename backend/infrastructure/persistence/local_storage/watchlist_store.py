from __future__ import annotations

import logging
from typing import Iterable, List

from application.ports.watchlist_store_port import WatchlistStorePort
from domain.watchlist import ToggleResult, coerce_movie_ids, dedupe_movie_ids, watchlist_key
from infrastructure.persistence.local_storage.json_store import JsonKeyValueStore

logger = logging.getLogger(__name__)


class LocalWatchlistStore(WatchlistStorePort):
    """Per-user, duplicate-free list of movie ids kept in local storage.

    Keyed by `watchlist.<lower-cased email>`; the whole list is read and
    written as one JSON array.
    """

    def __init__(self, store: JsonKeyValueStore) -> None:
        self._store = store

    def get(self, user_email: str) -> List[int]:
        stored = self._store.read(watchlist_key(user_email), expect=list, default=None)
        if not stored:
            return []
        return coerce_movie_ids(stored)

    def set(self, user_email: str, movie_ids: Iterable[int]) -> None:
        self._store.write(watchlist_key(user_email), dedupe_movie_ids(movie_ids))

    def add(self, user_email: str, movie_id: int) -> List[int]:
        current = self.get(user_email)
        if movie_id in current:
            return current
        updated = dedupe_movie_ids(current + [movie_id])
        self.set(user_email, updated)
        return updated

    def remove(self, user_email: str, movie_id: int) -> List[int]:
        updated = dedupe_movie_ids(i for i in self.get(user_email) if i != movie_id)
        self.set(user_email, updated)
        return updated

    def contains(self, user_email: str, movie_id: int) -> bool:
        return movie_id in self.get(user_email)

    def toggle(self, user_email: str, movie_id: int) -> ToggleResult:
        current = self.get(user_email)
        is_added = movie_id not in current
        if is_added:
            updated = dedupe_movie_ids(current + [movie_id])
        else:
            updated = dedupe_movie_ids(i for i in current if i != movie_id)
        self.set(user_email, updated)
        logger.debug("watchlist toggle user=%s movie_id=%s added=%s", user_email, movie_id, is_added)
        return ToggleResult(watchlist=updated, is_added=is_added)

    def clear(self, user_email: str) -> None:
        self._store.remove(watchlist_key(user_email))
