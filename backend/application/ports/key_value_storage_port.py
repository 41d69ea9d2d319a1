from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStoragePort(Protocol):
    """Synchronous string key-value substrate (the local storage of one device)."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...
