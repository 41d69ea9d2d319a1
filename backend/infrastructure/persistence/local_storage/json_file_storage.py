from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from application.ports.key_value_storage_port import KeyValueStoragePort

logger = logging.getLogger(__name__)


class JsonFileKeyValueStorage(KeyValueStoragePort):
    """Local storage kept in one JSON object file: {key: raw string value}.

    Every call re-reads the file and every write rewrites it whole, so two
    processes sharing the file are last-write-wins.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except (OSError, ValueError) as exc:
            logger.warning("Local storage file %s is unreadable, treating as empty: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local storage file %s does not hold an object, treating as empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, items: Dict[str, str]) -> None:
        # Write a sibling temp file and swap it in, so a failed write never
        # truncates the keys already on disk.
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as file:
                json.dump(items, file, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = str(value)
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key not in items:
            return
        del items[key]
        self._save(items)

    def clear(self) -> None:
        if self._path.exists():
            self._save({})
