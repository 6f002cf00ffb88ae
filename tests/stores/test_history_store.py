#!/usr/bin/env python3
"""
Tests for the recently-visited tools history
"""

import json

import pytest

from conftest import FakeClock, FIXED_NOW_MS
from api.history import (HistoryManager, HistoryItem, HISTORY_KEY, DAY_MS, format_age,
                         validate_tool_path, sanitize_data)
from api.storage import MemoryStorage


class TestHistoryRecording:
    """Insert, move-to-front and eviction by size"""

    def setup_method(self):
        self.clock = FakeClock()
        self.storage = MemoryStorage()
        self.history = HistoryManager(self.storage, clock=self.clock)

    def visit(self, n):
        self.clock.advance(1000)
        return self.history.record(f"/tool-{n}", f"Tool {n}", "🔧")

    def test_starts_empty(self):
        assert self.history.recent_tools == []

    def test_most_recent_first(self):
        self.visit(1)
        self.visit(2)
        assert [item.path for item in self.history.recent_tools] == ["/tool-2", "/tool-1"]

    def test_eleven_distinct_paths_keep_ten_most_recent(self):
        for n in range(11):
            self.visit(n)

        paths = [item.path for item in self.history.recent_tools]
        assert len(paths) == 10
        assert paths == [f"/tool-{n}" for n in range(10, 0, -1)]
        assert "/tool-0" not in paths

    def test_revisit_moves_to_front_without_growing(self):
        for n in range(3):
            self.visit(n)
        self.visit(0)

        paths = [item.path for item in self.history.recent_tools]
        assert paths == ["/tool-0", "/tool-2", "/tool-1"]

    def test_revisit_refreshes_timestamp(self):
        first = self.visit(0)
        self.visit(1)
        again = self.visit(0)
        assert again.timestamp > first.timestamp
        assert self.history.recent_tools[0].timestamp == again.timestamp

    def test_revisit_when_full_keeps_ten(self):
        for n in range(10):
            self.visit(n)
        self.visit(3)
        paths = [item.path for item in self.history.recent_tools]
        assert len(paths) == 10
        assert paths[0] == "/tool-3"
        assert paths.count("/tool-3") == 1

    def test_every_mutation_is_persisted(self):
        self.visit(1)
        stored = json.loads(self.storage.get_item(HISTORY_KEY))
        assert stored == [{"path": "/tool-1", "name": "Tool 1", "icon": "🔧",
                           "timestamp": FIXED_NOW_MS + 1000}]

    def test_clear_is_immediate_and_durable(self):
        self.visit(1)
        self.history.clear()
        assert self.history.recent_tools == []
        assert json.loads(self.storage.get_item(HISTORY_KEY)) == []
        assert HistoryManager(self.storage, clock=self.clock).recent_tools == []

    def test_reload_from_storage(self):
        self.visit(1)
        self.visit(2)
        reloaded = HistoryManager(self.storage, clock=self.clock)
        assert reloaded.recent_tools == self.history.recent_tools

    def test_get_recent_limit(self):
        for n in range(6):
            self.visit(n)
        assert [item.path for item in self.history.get_recent(2)] == ["/tool-5", "/tool-4"]
        assert len(self.history.get_recent()) == 6

    def test_custom_limit(self):
        history = HistoryManager(MemoryStorage(), limit=3, clock=self.clock)
        for n in range(5):
            history.record(f"/tool-{n}", "Tool", "")
        assert [item.path for item in history.recent_tools] == ["/tool-4", "/tool-3", "/tool-2"]

    def test_stats(self):
        self.visit(1)
        stats = self.history.get_stats()
        assert stats["count"] == 1
        assert stats["limit"] == 10
        assert stats["max_age_days"] == 30
        assert stats["last_updated"] == FIXED_NOW_MS + 1000

    def test_storage_is_required(self):
        with pytest.raises(ValueError):
            HistoryManager(None)


class TestHistoryAging:
    """Entries older than the retention window disappear on load"""

    def seed(self, *ages_in_days):
        storage = MemoryStorage()
        items = [
            {"path": f"/aged-{days}", "name": f"Aged {days}", "icon": "",
             "timestamp": FIXED_NOW_MS - days * DAY_MS}
            for days in ages_in_days
        ]
        storage.set_item(HISTORY_KEY, json.dumps(items))
        return storage

    def test_31_days_dropped_29_kept(self):
        storage = self.seed(29, 31)
        history = HistoryManager(storage, clock=FakeClock())
        assert [item.path for item in history.recent_tools] == ["/aged-29"]

    def test_expiry_becomes_permanent_on_next_write(self):
        storage = self.seed(29, 31)
        history = HistoryManager(storage, clock=FakeClock())
        history.record("/new", "New", "")

        stored = [entry["path"] for entry in json.loads(storage.get_item(HISTORY_KEY))]
        assert stored == ["/new", "/aged-29"]

    def test_load_does_not_write(self):
        storage = self.seed(31)
        HistoryManager(storage, clock=FakeClock())
        assert len(json.loads(storage.get_item(HISTORY_KEY))) == 1


class TestHistoryCorruption:
    """Corrupt persisted data degrades to an empty history"""

    @pytest.mark.parametrize("blob", ["not json at all", "{\"path\": \"/x\"}", "42", "null", "[1, 2", ""])
    def test_garbage_yields_empty_history(self, blob):
        storage = MemoryStorage({HISTORY_KEY: blob})
        history = HistoryManager(storage, clock=FakeClock())
        assert history.recent_tools == []

    def test_malformed_entries_are_dropped(self):
        items = [
            {"path": "/good", "name": "Good", "icon": "", "timestamp": FIXED_NOW_MS},
            {"name": "no path", "timestamp": FIXED_NOW_MS},
            {"path": "/bad-ts", "timestamp": "yesterday"},
            "just a string",
        ]
        storage = MemoryStorage({HISTORY_KEY: json.dumps(items)})
        history = HistoryManager(storage, clock=FakeClock())
        assert [item.path for item in history.recent_tools] == ["/good"]

    def test_corrupt_history_can_still_record(self):
        storage = MemoryStorage({HISTORY_KEY: "%%%"})
        history = HistoryManager(storage, clock=FakeClock())
        history.record("/json", "JSON Formatter", "📋")
        assert [item.path for item in history.recent_tools] == ["/json"]

    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_timestamp_is_dropped(self, literal):
        blob = '[{"path": "/a", "timestamp": %s}, {"path": "/b", "timestamp": %d}]' % (literal, FIXED_NOW_MS)
        history = HistoryManager(MemoryStorage({HISTORY_KEY: blob}), clock=FakeClock())
        assert [item.path for item in history.recent_tools] == ["/b"]

    def test_duplicate_paths_collapse_to_most_recent(self):
        items = [{"path": "/a", "name": "A", "icon": "", "timestamp": FIXED_NOW_MS - n} for n in range(3)]
        storage = MemoryStorage({HISTORY_KEY: json.dumps(items)})
        history = HistoryManager(storage, clock=FakeClock())
        assert len(history.recent_tools) == 1
        assert history.recent_tools[0].timestamp == FIXED_NOW_MS

    def test_oversized_log_is_capped_on_load(self):
        items = [{"path": "/a", "name": "A", "icon": "", "timestamp": FIXED_NOW_MS}] * 3
        items += [{"path": f"/t{n}", "name": f"T{n}", "icon": "", "timestamp": FIXED_NOW_MS - 1 - n}
                  for n in range(12)]
        storage = MemoryStorage({HISTORY_KEY: json.dumps(items)})
        paths = [item.path for item in HistoryManager(storage, clock=FakeClock()).recent_tools]
        assert len(paths) == len(set(paths)) == 10
        assert paths[:3] == ["/a", "/t0", "/t1"]


class TestHistoryHelpers:

    def test_history_item_roundtrip_fields(self):
        item = HistoryItem.from_dict({"path": "/json", "name": "JSON", "icon": "📋", "timestamp": 5.0})
        assert item.timestamp == 5
        assert item.to_dict()["path"] == "/json"

    @pytest.mark.parametrize("delta_ms,expected", [
        (0, "Just now"),
        (5 * 60 * 1000, "5 minutes ago"),
        (2 * 60 * 60 * 1000 + 1000, "2 hours ago"),
        (DAY_MS, "1 day ago"),
        (3 * DAY_MS, "3 days ago"),
    ])
    def test_format_age(self, delta_ms, expected):
        assert format_age(FIXED_NOW_MS - delta_ms, FIXED_NOW_MS) == expected

    @pytest.mark.parametrize("path,valid", [
        ("/json", True),
        ("/css-formatter", True),
        ("json", False),
        ("/", False),
        ("/../etc", False),
        (None, False),
        (42, False),
    ])
    def test_validate_tool_path(self, path, valid):
        assert validate_tool_path(path) is valid

    def test_sanitize_data(self):
        assert sanitize_data(123) == "123"
        with pytest.raises(ValueError):
            sanitize_data("x" * 10, max_size=5)
