"""
Favorites Backend
Toggle-set of favorite tool paths, kept in the order they were added
"""

import logging
from typing import Any, Dict, List, Optional

from api.storage import LocalStorage, load_json_list, save_json

logger = logging.getLogger(__name__)

FAVORITES_KEY = 'dev-tools-favorites'


class FavoritesManager:
    """
    Durable set of favorite tool paths.

    Unbounded by default. With a limit, adding past it drops the oldest
    favorites first.
    """

    def __init__(self, storage: LocalStorage, limit: Optional[int] = None):
        if storage is None:
            raise ValueError("FavoritesManager requires a storage backend")
        self.storage = storage
        self.limit = limit
        self._paths: List[str] = self._load()

    def _load(self) -> List[str]:
        paths: List[str] = []
        for entry in load_json_list(self.storage, FAVORITES_KEY):
            if not isinstance(entry, str) or not entry:
                logger.warning("Dropping malformed favorite entry %r", entry)
                continue
            if entry not in paths:
                paths.append(entry)
        return paths

    def _save(self) -> None:
        save_json(self.storage, FAVORITES_KEY, self._paths)

    @property
    def favorites(self) -> List[str]:
        return list(self._paths)

    def is_favorite(self, path: str) -> bool:
        return path in self._paths

    def add(self, path: str) -> None:
        if path in self._paths:
            return
        self._paths.append(path)
        if self.limit is not None and len(self._paths) > self.limit:
            self._paths = self._paths[len(self._paths) - self.limit:]
        self._save()

    def remove(self, path: str) -> None:
        if path not in self._paths:
            return
        self._paths = [fav for fav in self._paths if fav != path]
        self._save()

    def toggle(self, path: str) -> bool:
        """Flip favorite status; returns the new status"""
        if self.is_favorite(path):
            self.remove(path)
            return False
        self.add(path)
        return self.is_favorite(path)

    def clear(self) -> None:
        self._paths = []
        self._save()

    def get_stats(self) -> Dict[str, Any]:
        return {'count': len(self._paths), 'limit': self.limit}
