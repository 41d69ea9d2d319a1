from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from application.ports.key_value_storage_port import KeyValueStoragePort
from infrastructure.config.settings import STORAGE_BACKEND, STORAGE_NAMESPACE, STORAGE_PATH
from infrastructure.persistence.local_storage import (
    InMemoryKeyValueStorage,
    JsonFileKeyValueStorage,
    JsonKeyValueStore,
    LocalAuthStore,
    LocalWatchlistStore,
)

logger = logging.getLogger(__name__)


def build_storage(backend: Optional[str] = None) -> Optional[KeyValueStoragePort]:
    """Pick the storage substrate; `none` yields no substrate (all no-ops)."""
    backend = (backend or STORAGE_BACKEND or "file").strip().lower()
    if backend == "memory":
        return InMemoryKeyValueStorage()
    if backend == "none":
        return None
    return JsonFileKeyValueStorage(STORAGE_PATH)


@lru_cache(maxsize=1)
def get_json_store() -> JsonKeyValueStore:
    storage = build_storage()
    if storage is None:
        logger.info("No local storage substrate configured; persistence is disabled")
    return JsonKeyValueStore(storage, namespace=STORAGE_NAMESPACE)


@lru_cache(maxsize=1)
def get_watchlist_store() -> LocalWatchlistStore:
    return LocalWatchlistStore(get_json_store())


@lru_cache(maxsize=1)
def get_auth_store() -> LocalAuthStore:
    return LocalAuthStore(get_json_store())


def build_catalog_client():
    """A new TMDB client; the caller owns it and must `close()` it."""
    from infrastructure.catalog.tmdb_client import TMDBCatalogClient

    return TMDBCatalogClient()
