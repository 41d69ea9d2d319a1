from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Genre(BaseModel):
    id: int
    name: str


class MovieRecord(BaseModel):
    """A TMDB movie as returned by search, popular and detail endpoints."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    overview: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: str = ""
    vote_average: float = 0.0
    # Search/popular results carry ids; detail payloads embed genres.
    genre_ids: Optional[List[int]] = None
    genres: Optional[List[Genre]] = None
    runtime: Optional[int] = None
    tagline: Optional[str] = None
    homepage: Optional[str] = None
    status: Optional[str] = None
    budget: Optional[int] = None
    revenue: Optional[int] = None


class SearchResponse(BaseModel):
    """One page of movie results."""

    model_config = ConfigDict(extra="ignore")

    page: int = 1
    results: List[MovieRecord] = []
    total_pages: int = 0
    total_results: int = 0

    @classmethod
    def empty(cls) -> "SearchResponse":
        return cls(page=1, results=[], total_pages=0, total_results=0)
