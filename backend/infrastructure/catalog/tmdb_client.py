"""
TMDB API HTTP client for the movie catalog.

Async (aiohttp) client with a lazily created shared session. Unlike a
best-effort enrichment client, failures are surfaced to the caller:

- missing credentials -> ConfigurationError, before any request
- non-2xx responses   -> RemoteServiceError carrying the HTTP status
- transport/timeouts  -> RemoteServiceError with status=None

There is no retry. The batch lookup is the one place that tolerates failures:
ids that cannot be fetched are logged and left out of the result.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from application.ports.movie_catalog_port import MovieCatalogPort
from domain.catalog import MovieRecord, SearchResponse
from domain.catalog.helpers import DEFAULT_IMAGE_BASE_URL, get_image_url
from domain.errors import ConfigurationError, RemoteServiceError
from infrastructure.config.settings import (
    TMDB_API_KEY,
    TMDB_API_TOKEN,
    TMDB_BASE_URL,
    TMDB_IMAGE_BASE_URL,
    TMDB_LANGUAGE,
    TMDB_TIMEOUT_S,
)

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_NOT_CONFIGURED = "TMDB API key is not configured. Please set TMDB_API_KEY (or TMDB_API_TOKEN) in .env"


class TMDBCatalogClient(MovieCatalogPort):
    """Async HTTP client for the TMDB movie endpoints.

    Attributes:
        _base_url: TMDB API base URL
        _image_base_url: TMDB image CDN base URL
        _api_key: v3 api key, sent as the `api_key` query param
        _api_token: v4 read token, sent as a bearer header (preferred)
        _language: `language` param sent with every request
        _timeout_s: Total request timeout in seconds
        _session: aiohttp ClientSession (lazily initialized)
        _owns_session: Whether close() should close _session
        _lock: Async lock guarding session creation
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        image_base_url: str | None = None,
        api_key: str | None = None,
        api_token: str | None = None,
        language: str | None = None,
        timeout_s: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._base_url = (base_url or TMDB_BASE_URL or "").rstrip("/")
        self._image_base_url = (image_base_url or TMDB_IMAGE_BASE_URL or DEFAULT_IMAGE_BASE_URL).rstrip("/")
        self._api_key = (api_key if api_key is not None else TMDB_API_KEY or "").strip()
        self._api_token = (api_token if api_token is not None else TMDB_API_TOKEN or "").strip()
        self._language = language or TMDB_LANGUAGE or "en-US"
        self._timeout_s = float(timeout_s or TMDB_TIMEOUT_S or 10.0)
        self._session = session
        self._owns_session = session is None
        self._lock = asyncio.Lock()

    async def __aenter__(self) -> "TMDBCatalogClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    @property
    def configured(self) -> bool:
        return bool(self._api_key or self._api_token)

    def _ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError(_NOT_CONFIGURED)

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    def _auth_params(self) -> dict[str, str]:
        """v3 auth via api_key query param (used when bearer token is absent)."""
        if self._api_token:
            return {}
        if self._api_key:
            return {"api_key": self._api_key}
        return {}

    def image_url(self, path: str | None, size: str = "w500") -> str:
        return get_image_url(path, size, base_url=self._image_base_url)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is not None and not self._session.closed:
            return self._session

        async with self._lock:
            # Double-check after acquiring lock
            if self._session is not None and not self._session.closed:
                return self._session

            timeout = aiohttp.ClientTimeout(total=self._timeout_s)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
            return self._session

    async def _get_json(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        query: dict[str, Any] = {"language": self._language}
        query.update(params or {})
        query.update(self._auth_params())

        logger.debug("TMDB request url=%s params=%s", url, {k: v for k, v in query.items() if k != "api_key"})

        session = await self._get_session()
        try:
            async with session.get(url, params=query, headers=self._headers()) as resp:
                if resp.status < 200 or resp.status >= 300:
                    reason = str(getattr(resp, "reason", "") or "")
                    logger.error("TMDB request %s failed (%s %s)", path, resp.status, reason)
                    raise RemoteServiceError(
                        f"TMDB API error: {resp.status} {reason}".strip(),
                        status=resp.status,
                        reason=reason,
                    )
                data = await resp.json(content_type=None)
        except asyncio.TimeoutError as exc:
            logger.error("TMDB request %s timed out after %ss", path, self._timeout_s)
            raise RemoteServiceError(f"TMDB API timeout after {self._timeout_s}s") from exc
        except aiohttp.ClientError as exc:
            logger.error("TMDB request %s failed: %s", path, exc)
            raise RemoteServiceError(f"TMDB API request failed: {exc}") from exc
        except ValueError as exc:
            logger.error("TMDB request %s returned invalid JSON: %s", path, exc)
            raise RemoteServiceError(f"TMDB API returned invalid JSON for {path}") from exc

        if not isinstance(data, dict):
            raise RemoteServiceError(f"TMDB API returned an unexpected payload for {path}")
        return data

    @staticmethod
    def _parse(model: type[_ModelT], data: dict[str, Any], path: str) -> _ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.error("TMDB payload for %s does not match %s: %s", path, model.__name__, exc)
            raise RemoteServiceError(f"TMDB API returned an unexpected payload for {path}") from exc

    async def search_movies(self, query: str, page: int = 1) -> SearchResponse:
        """Search movies by title; a blank query returns an empty page without a request."""
        self._ensure_configured()
        if not (query or "").strip():
            return SearchResponse.empty()

        data = await self._get_json("/search/movie", {"query": query, "page": int(page)})
        return self._parse(SearchResponse, data, "/search/movie")

    async def get_movie_details(self, movie_id: int) -> MovieRecord:
        self._ensure_configured()
        path = f"/movie/{int(movie_id)}"
        data = await self._get_json(path)
        return self._parse(MovieRecord, data, path)

    async def get_popular_movies(self, page: int = 1) -> SearchResponse:
        self._ensure_configured()
        data = await self._get_json("/movie/popular", {"page": int(page)})
        return self._parse(SearchResponse, data, "/movie/popular")

    async def get_movies_by_ids(self, movie_ids: Iterable[int]) -> list[MovieRecord]:
        """Fetch details for each id concurrently, keeping input order.

        Ids whose lookup fails are dropped (and logged) instead of failing the batch.
        """
        self._ensure_configured()
        ids = list(movie_ids)
        if not ids:
            return []

        results = await asyncio.gather(
            *(self.get_movie_details(movie_id) for movie_id in ids),
            return_exceptions=True,
        )

        movies: list[MovieRecord] = []
        for movie_id, result in zip(ids, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning("Skipping movie id=%s in batch lookup: %s", movie_id, result)
                continue
            movies.append(result)
        return movies

    async def close(self) -> None:
        """Close the session this client created; an injected session is left to its owner."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
        self._owns_session = True
