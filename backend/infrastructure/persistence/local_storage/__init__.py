from infrastructure.persistence.local_storage.auth_store import LocalAuthStore
from infrastructure.persistence.local_storage.json_file_storage import JsonFileKeyValueStorage
from infrastructure.persistence.local_storage.json_store import JsonKeyValueStore
from infrastructure.persistence.local_storage.memory_storage import InMemoryKeyValueStorage
from infrastructure.persistence.local_storage.watchlist_store import LocalWatchlistStore

__all__ = [
    "InMemoryKeyValueStorage",
    "JsonFileKeyValueStorage",
    "JsonKeyValueStore",
    "LocalAuthStore",
    "LocalWatchlistStore",
]
