from domain.catalog.helpers import (
    GENRE_MAP,
    PLACEHOLDER_IMAGE,
    get_genre_names,
    get_image_url,
    get_movie_genre_names,
    get_release_year,
)
from domain.catalog.movie import Genre, MovieRecord, SearchResponse

__all__ = [
    "GENRE_MAP",
    "Genre",
    "MovieRecord",
    "PLACEHOLDER_IMAGE",
    "SearchResponse",
    "get_genre_names",
    "get_image_url",
    "get_movie_genre_names",
    "get_release_year",
]
