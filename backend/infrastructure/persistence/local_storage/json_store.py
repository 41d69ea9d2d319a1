"""
Fail-soft JSON persistence over a key-value storage substrate.

Reads never raise: a missing key, unparsable JSON or a value of the wrong
shape all come back as the caller's default (corruption is logged). Writes
and removals log substrate failures instead of propagating them, so broken
local state can never block the caller.

When no substrate is given (`storage=None`) every operation is a no-op that
returns the default, which lets the same stores run headless.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Tuple, Type, Union

from application.ports.key_value_storage_port import KeyValueStoragePort
from domain.errors import CorruptLocalState

logger = logging.getLogger(__name__)

_Expect = Union[Type[Any], Tuple[Type[Any], ...], None]


class JsonKeyValueStore:
    def __init__(self, storage: Optional[KeyValueStoragePort], *, namespace: str = "movieTrack") -> None:
        self._storage = storage
        self._namespace = (namespace or "").strip().rstrip(".")

    @property
    def available(self) -> bool:
        return self._storage is not None

    def full_key(self, key: str) -> str:
        if not self._namespace:
            return key
        return f"{self._namespace}.{key}"

    def _decode(self, key: str, raw: str, expect: _Expect) -> Any:
        try:
            value = json.loads(raw)
        except ValueError as exc:
            raise CorruptLocalState(key, f"invalid JSON ({exc})") from exc
        if expect is not None and not isinstance(value, expect):
            raise CorruptLocalState(key, f"unexpected shape {type(value).__name__}")
        return value

    def read(self, key: str, *, expect: _Expect = None, default: Any = None) -> Any:
        if self._storage is None:
            return default
        full_key = self.full_key(key)
        try:
            raw = self._storage.get_item(full_key)
        except Exception:
            logger.exception("Error reading local storage key %s", full_key)
            return default
        if not raw:
            return default
        try:
            return self._decode(full_key, raw, expect)
        except CorruptLocalState as exc:
            logger.warning("%s; using default", exc)
            return default

    def write(self, key: str, value: Any) -> None:
        if self._storage is None:
            return
        full_key = self.full_key(key)
        try:
            self._storage.set_item(full_key, json.dumps(value, ensure_ascii=False))
        except Exception:
            logger.exception("Error saving local storage key %s", full_key)

    def remove(self, key: str) -> None:
        if self._storage is None:
            return
        full_key = self.full_key(key)
        try:
            self._storage.remove_item(full_key)
        except Exception:
            logger.exception("Error removing local storage key %s", full_key)
