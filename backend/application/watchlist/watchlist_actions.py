from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from application.ports.watchlist_store_port import WatchlistStorePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WatchlistNotice:
    """User-facing confirmation for a toggle (e.g. a toast)."""

    movie_id: int
    is_added: bool
    title: str
    description: str


class WatchlistActions:
    """Watchlist state for the signed-in user, as used by the heart control.

    Holds an in-memory copy of the user's list that is refreshed from every
    toggle result, so membership checks do not hit storage.
    """

    def __init__(self, *, store: WatchlistStorePort, user_email: Optional[str]) -> None:
        self._store = store
        self._user_email = user_email or None
        self._watchlist: List[int] = []
        self.reload()

    @property
    def user_email(self) -> Optional[str]:
        return self._user_email

    @property
    def watchlist(self) -> List[int]:
        return list(self._watchlist)

    def reload(self) -> List[int]:
        self._watchlist = self._store.get(self._user_email) if self._user_email else []
        return self.watchlist

    def set_user(self, user_email: Optional[str]) -> None:
        if (user_email or None) == self._user_email:
            return
        self._user_email = user_email or None
        self.reload()

    def is_in_watchlist(self, movie_id: int) -> bool:
        return movie_id in self._watchlist

    def toggle_movie(self, movie_id: int, movie_title: str) -> Optional[WatchlistNotice]:
        """Flip one movie; returns None (and does nothing) when nobody is signed in."""
        if not self._user_email:
            return None

        result = self._store.toggle(self._user_email, movie_id)
        self._watchlist = list(result.watchlist)

        action = "Added to" if result.is_added else "Removed from"
        verb = "added" if result.is_added else "removed"
        return WatchlistNotice(
            movie_id=movie_id,
            is_added=result.is_added,
            title=f"{action} watchlist",
            description=f"{movie_title} has been {verb}.",
        )
