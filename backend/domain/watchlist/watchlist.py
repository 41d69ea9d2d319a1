from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of flipping one movie in a user's watchlist."""

    watchlist: list[int] = field(default_factory=list)
    is_added: bool = False


def is_movie_id(value: Any) -> bool:
    # bool is an int subclass; JSON true/false are not movie ids.
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_movie_ids(values: Iterable[Any]) -> list[int]:
    """Keep only integer movie ids (stored lists may hold anything)."""
    return [v for v in values if is_movie_id(v)]


def dedupe_movie_ids(movie_ids: Iterable[int]) -> list[int]:
    """Drop repeated ids, keeping the first occurrence of each."""
    seen: set[int] = set()
    out: list[int] = []
    for movie_id in movie_ids:
        if movie_id in seen:
            continue
        seen.add(movie_id)
        out.append(movie_id)
    return out


def watchlist_key(user_email: str) -> str:
    """Storage key suffix for a user's list; emails compare case-insensitively."""
    return f"watchlist.{(user_email or '').lower()}"
