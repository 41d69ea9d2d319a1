from __future__ import annotations

from typing import Iterable, Optional

from domain.catalog.movie import MovieRecord

DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
PLACEHOLDER_IMAGE = "/placeholder.svg"
IMAGE_SIZES = ("w300", "w500", "original")
UNKNOWN_GENRE = "Unknown"

GENRE_MAP: dict[int, str] = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Sci-Fi",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}


def get_image_url(
    path: Optional[str],
    size: str = "w500",
    *,
    base_url: str = DEFAULT_IMAGE_BASE_URL,
) -> str:
    """Build a TMDB image URL; a missing path maps to the placeholder asset."""
    if size not in IMAGE_SIZES:
        raise ValueError(f"unsupported image size {size!r}, expected one of {IMAGE_SIZES}")
    if not path:
        return PLACEHOLDER_IMAGE
    return f"{base_url.rstrip('/')}/{size}{path}"


def get_genre_names(genre_ids: Iterable[int]) -> list[str]:
    return [GENRE_MAP.get(genre_id, UNKNOWN_GENRE) for genre_id in genre_ids]


def get_movie_genre_names(movie: MovieRecord) -> list[str]:
    """Genre names for a movie, preferring names embedded by the detail endpoint."""
    if movie.genres:
        return [g.name for g in movie.genres]
    return get_genre_names(movie.genre_ids or [])


def get_release_year(movie: MovieRecord) -> Optional[int]:
    release_date = (movie.release_date or "").strip()
    if len(release_date) < 4:
        return None
    try:
        return int(release_date[:4])
    except ValueError:
        return None
