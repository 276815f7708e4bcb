from __future__ import annotations

import json
from pathlib import Path

from loguru import logger


class LocalStorage:
    """File-backed key/value store, the client-side counterpart of browser localStorage.

    Built with ``directory=None`` it models an environment without storage:
    reads return None and writes are silently dropped.
    """

    FILE_NAME = "local_storage.json"

    def __init__(self, directory: Path | None) -> None:
        self.directory = directory
        self.path = directory / self.FILE_NAME if directory is not None else None

    @property
    def available(self) -> bool:
        return self.path is not None

    def _load(self) -> dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning(f"Ignoring unreadable storage file {self.path}")
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: dict[str, str]) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.path is None:
            return
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        if self.path is None:
            return
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)
