"""
Local key/value storage for client-side state.
Each key holds one serialized string, written in full on every save.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r'[^A-Za-z0-9._-]')


class LocalStorage(ABC):
    """Minimal string key/value store, modelled on browser localStorage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass


class MemoryStorage(LocalStorage):
    """In-process storage; state lives as long as the instance."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self):
        return list(self._items.keys())


class JsonFileStorage(LocalStorage):
    """Stores each key as <directory>/<key>.json"""

    def __init__(self, directory):
        self.directory = Path(directory)

    def _file_for(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._file_for(key)
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except (IOError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s from %s: %s", key, path, e)
            return None

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._file_for(key)
        tmp_path = path.with_suffix('.json.tmp')
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(value)
        tmp_path.replace(path)

    def remove_item(self, key: str) -> None:
        path = self._file_for(key)
        if path.exists():
            path.unlink()


def load_json_list(storage: LocalStorage, key: str) -> list:
    """
    Load a JSON array stored under key.

    Missing, unparseable or non-array data yields an empty list; the failure is
    logged and never raised.
    """
    raw = storage.get_item(key)
    if raw is None:
        return []
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, TypeError, ValueError) as e:
        logger.error("Failed to load %s from storage: %s", key, e)
        return []
    if not isinstance(parsed, list):
        logger.error("Failed to load %s from storage: expected a list, got %s", key, type(parsed).__name__)
        return []
    return parsed


def save_json(storage: LocalStorage, key: str, value) -> bool:
    """Write value under key as JSON. Returns False (and logs) if the write failed."""
    try:
        storage.set_item(key, json.dumps(value, ensure_ascii=False))
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error("Failed to save %s to storage: %s", key, e)
        return False
