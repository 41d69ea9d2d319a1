from domain.watchlist.watchlist import (
    ToggleResult,
    coerce_movie_ids,
    dedupe_movie_ids,
    is_movie_id,
    watchlist_key,
)

__all__ = [
    "ToggleResult",
    "coerce_movie_ids",
    "dedupe_movie_ids",
    "is_movie_id",
    "watchlist_key",
]
