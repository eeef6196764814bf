"""Tiny key-value stores used to persist the high score."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String-keyed integer storage; subclasses provide the backend."""

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int: ...

    @abstractmethod
    def set_int(self, key: str, value: int) -> None: ...


class MemoryStore(KeyValueStore):
    """Dict-backed store, handy for tests and headless runs."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self._values: dict[str, int] = dict(initial or {})

    def get_int(self, key: str, default: int = 0) -> int:
        return self._values.get(key, default)

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)


class FileStore(KeyValueStore):
    """Keep one small text file per key inside ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.txt"

    def get_int(self, key: str, default: int = 0) -> int:
        path = self._path(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return default
        try:
            return max(0, int(text.strip() or default))
        except ValueError:
            logger.warning("Ignoring malformed value in %s: %r", path, text)
            return default

    def set_int(self, key: str, value: int) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write %s: %s", path, exc)
