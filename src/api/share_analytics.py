"""
Share Analytics Backend
Append-only log of share actions, plus the per-tool share prompt cooldown
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from api.history import now_ms
from api.storage import LocalStorage, load_json_list, save_json

logger = logging.getLogger(__name__)

SHARE_ANALYTICS_KEY = 'share-analytics'
SHARE_COOLDOWN_PREFIX = 'share-cooldown-'
MAX_SHARE_EVENTS = 100
SHARE_COOLDOWN_SECONDS = 30


@dataclass(frozen=True)
class ShareEvent:
    tool_name: str
    platform: str
    timestamp: int  # epoch milliseconds
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShareEvent':
        timestamp = data['timestamp']
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError(f"invalid timestamp: {timestamp!r}")
        if not math.isfinite(timestamp):
            raise ValueError(f"non-finite timestamp: {timestamp!r}")
        return cls(
            tool_name=str(data['toolName']),
            platform=str(data['platform']),
            timestamp=int(timestamp),
            url=str(data.get('url', '')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'toolName': self.tool_name,
            'platform': self.platform,
            'timestamp': self.timestamp,
            'url': self.url,
        }


class ShareAnalyticsManager:
    """
    Capped log of share events, oldest first.

    Repeated shares are all recorded. No aggregation happens here; stats()
    returns the log as stored.
    """

    def __init__(self, storage: LocalStorage, limit: int = MAX_SHARE_EVENTS,
                 clock: Callable[[], int] = now_ms):
        if storage is None:
            raise ValueError("ShareAnalyticsManager requires a storage backend")
        self.storage = storage
        self.limit = limit
        self.clock = clock
        self._events: List[ShareEvent] = self._load()

    def _load(self) -> List[ShareEvent]:
        events = []
        for entry in load_json_list(self.storage, SHARE_ANALYTICS_KEY):
            try:
                events.append(ShareEvent.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Dropping malformed share event %r: %s", entry, e)
        return events[-self.limit:] if len(events) > self.limit else events

    def record(self, tool_name: str, platform: str, url: str) -> ShareEvent:
        event = ShareEvent(tool_name=tool_name, platform=platform, timestamp=self.clock(), url=url)
        self._events.append(event)

        # Keep only the most recent events
        if len(self._events) > self.limit:
            del self._events[:len(self._events) - self.limit]

        save_json(self.storage, SHARE_ANALYTICS_KEY, [e.to_dict() for e in self._events])
        return event

    def stats(self) -> List[ShareEvent]:
        return list(self._events)


def share_cooldown_key(tool_name: str) -> str:
    return SHARE_COOLDOWN_PREFIX + re.sub(r'\s+', '-', tool_name).lower()


class ShareTrigger:
    """
    Decides whether to offer the share prompt for a tool.

    The prompt is offered again only once the cooldown has passed since it
    was last dismissed for that tool.
    """

    def __init__(self, storage: LocalStorage, cooldown_seconds: int = SHARE_COOLDOWN_SECONDS,
                 clock: Callable[[], int] = now_ms):
        if storage is None:
            raise ValueError("ShareTrigger requires a storage backend")
        self.storage = storage
        self.cooldown_ms = cooldown_seconds * 1000
        self.clock = clock

    def last_dismissed(self, tool_name: str) -> int:
        raw = self.storage.get_item(share_cooldown_key(tool_name))
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring corrupt share cooldown for %s: %r", tool_name, raw)
            return 0

    def should_prompt(self, tool_name: str) -> bool:
        return self.clock() - self.last_dismissed(tool_name) > self.cooldown_ms

    def dismiss(self, tool_name: str) -> None:
        try:
            self.storage.set_item(share_cooldown_key(tool_name), str(self.clock()))
        except OSError as e:
            logger.error("Failed to save share cooldown for %s: %s", tool_name, e)
