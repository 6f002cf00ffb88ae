#!/usr/bin/env python3
"""
History API Backend
Tracks recently visited tools with a size cap and a maximum age
"""

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from api.storage import LocalStorage, load_json_list, save_json

logger = logging.getLogger(__name__)

HISTORY_KEY = 'dev-tools-history'
MAX_HISTORY_ITEMS = 10
MAX_HISTORY_AGE_DAYS = 30
DAY_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class HistoryItem:
    path: str
    name: str
    icon: str
    timestamp: int  # epoch milliseconds

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HistoryItem':
        timestamp = data['timestamp']
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError(f"invalid timestamp: {timestamp!r}")
        if not math.isfinite(timestamp):
            raise ValueError(f"non-finite timestamp: {timestamp!r}")
        if not isinstance(data['path'], str) or not data['path']:
            raise ValueError(f"invalid path: {data['path']!r}")
        return cls(
            path=data['path'],
            name=str(data.get('name', '')),
            icon=str(data.get('icon', '')),
            timestamp=int(timestamp),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'name': self.name,
            'icon': self.icon,
            'timestamp': self.timestamp,
        }


class HistoryManager:
    """
    Most-recent-first log of visited tools, unique by path.

    Entries older than the retention window are dropped when the store loads;
    the log is capped after every insert. Every mutation rewrites the whole log.
    """

    def __init__(self, storage: LocalStorage, limit: int = MAX_HISTORY_ITEMS,
                 max_age_days: int = MAX_HISTORY_AGE_DAYS,
                 clock: Callable[[], int] = now_ms):
        if storage is None:
            raise ValueError("HistoryManager requires a storage backend")
        self.storage = storage
        self.limit = limit
        self.max_age_days = max_age_days
        self.clock = clock
        self._items: List[HistoryItem] = self._load()

    def _load(self) -> List[HistoryItem]:
        items = []
        for entry in load_json_list(self.storage, HISTORY_KEY):
            try:
                items.append(HistoryItem.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Dropping malformed history entry %r: %s", entry, e)

        # Filter out items older than the retention window
        cutoff = self.clock() - self.max_age_days * DAY_MS

        # Stored log is most recent first; the first entry for a path wins
        seen = set()
        fresh = []
        for item in items:
            if item.timestamp <= cutoff or item.path in seen:
                continue
            seen.add(item.path)
            fresh.append(item)
        return fresh[:self.limit]

    def _save(self) -> None:
        save_json(self.storage, HISTORY_KEY, [item.to_dict() for item in self._items])

    @property
    def recent_tools(self) -> List[HistoryItem]:
        return list(self._items)

    def get_recent(self, limit: Optional[int] = None) -> List[HistoryItem]:
        if limit:
            return self._items[:limit]
        return list(self._items)

    def record(self, path: str, name: str, icon: str) -> HistoryItem:
        """Move (or add) a tool to the front of the history"""
        # Remove existing entry if present
        remaining = [item for item in self._items if item.path != path]

        entry = HistoryItem(path=path, name=name, icon=icon, timestamp=self.clock())

        # Keep only the most recent entries
        self._items = ([entry] + remaining)[:self.limit]
        self._save()
        return entry

    def clear(self) -> None:
        self._items = []
        self._save()

    def get_stats(self) -> Dict[str, Any]:
        return {
            'count': len(self._items),
            'limit': self.limit,
            'max_age_days': self.max_age_days,
            'last_updated': self._items[0].timestamp if self._items else None
        }

    def to_list(self) -> List[Dict[str, Any]]:
        now = self.clock()
        return [
            {**item.to_dict(), 'formatted_date': format_age(item.timestamp, now)}
            for item in self._items
        ]


def format_age(timestamp_ms: int, now: Optional[int] = None) -> str:
    """Format an epoch-millisecond timestamp relative to now"""
    now = now_ms() if now is None else now
    seconds = max(0, (now - timestamp_ms) // 1000)
    days = seconds // 86400

    if days > 0:
        return f"{days} day{'s' if days > 1 else ''} ago"
    elif seconds > 3600:
        hours = seconds // 3600
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    elif seconds > 60:
        minutes = seconds // 60
        return f"{minutes} minute{'s' if minutes > 1 else ''} ago"
    else:
        return "Just now"


def validate_tool_path(path: Any) -> bool:
    """Validate tool path format"""
    if not isinstance(path, str) or not path.startswith('/'):
        return False

    # Allow alphanumeric, hyphens, underscores and the leading slash
    allowed_chars = set('abcdefghijklmnopqrstuvwxyz0123456789-_/')
    return len(path) > 1 and all(c.lower() in allowed_chars for c in path)


def sanitize_data(data: Any, max_size: int = 2048) -> str:
    """Sanitize and validate free-text input"""
    if not isinstance(data, str):
        data = str(data)

    if len(data) > max_size:
        raise ValueError(f"Data too large. Maximum size: {max_size} characters")

    return data
