#!/usr/bin/env python3
"""
Tests for the weighted fuzzy search index
"""

import pytest

from conftest import make_tool
from discovery import SearchIndex, DEFAULT_KEYS
from discovery.index import EPSILON, field_norm, normalize_query


class TestSearchIndex:
    """Matching, scoring and match-span reporting"""

    def setup_method(self):
        self.tools = [
            make_tool("Base32 Encoder", "/base32", popularity=2),
            make_tool("Base64 Encoder/Decoder", "/base64", popularity=5,
                      keywords=("base64", "binary")),
            make_tool("Color Picker", "/color", category="Design", popularity=4,
                      description="Pick colors", tags=("design",), keywords=("rgb",)),
        ]
        self.index = SearchIndex(self.tools)

    def test_default_weights(self):
        assert dict(DEFAULT_KEYS) == {'name': 0.4, 'description': 0.3, 'tags': 0.2, 'keywords': 0.1}
        assert sum(weight for _, weight in self.index.keys) == pytest.approx(1.0)

    def test_unrelated_tools_are_excluded(self):
        paths = [hit.tool.path for hit in self.index.search("base")]
        assert set(paths) == {"/base32", "/base64"}

    def test_exact_name_match_scores_near_zero(self):
        for hit in self.index.search("base"):
            assert 0.0 <= hit.score < 0.01

    def test_additional_matching_fields_improve_score(self):
        hits = {hit.tool.path: hit for hit in self.index.search("base")}
        # /base64 also matches on its keyword
        assert hits["/base64"].score < hits["/base32"].score
        assert {m.field for m in hits["/base64"].matches} == {"name", "keywords"}

    def test_match_spans_point_into_field_value(self):
        hit = next(hit for hit in self.index.search("base") if hit.tool.path == "/base32")
        span = hit.matches[0]
        assert span.field == "name"
        assert span.value == "Base32 Encoder"
        assert span.text.lower() == "base"
        assert span.end - span.start == 4

    def test_case_and_whitespace_insensitive(self):
        plain = [(h.tool.path, h.score) for h in self.index.search("base")]
        noisy = [(h.tool.path, h.score) for h in self.index.search("  BASE  ")]
        assert plain == noisy

    def test_typo_still_matches(self):
        paths = [hit.tool.path for hit in self.index.search("colr")]
        assert paths == ["/color"]

    def test_single_character_query_matches_nothing(self):
        assert self.index.search("b") == []

    def test_blank_query_matches_nothing(self):
        assert self.index.search("") == []
        assert self.index.search("   ") == []

    def test_nonsense_query_matches_nothing(self):
        assert self.index.search("zzzzzz") == []

    def test_hits_ordered_by_score(self):
        scores = [hit.score for hit in self.index.search("base")]
        assert scores == sorted(scores)

    def test_very_long_query(self):
        assert self.index.search("x" * 5000) == []

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            SearchIndex(self.tools, threshold=1.5)

    def test_stricter_threshold_rejects_typos(self):
        strict = SearchIndex(self.tools, threshold=0.0)
        assert strict.search("colr") == []
        assert [hit.tool.path for hit in strict.search("color")] == ["/color"]


class TestHelpers:
    def test_field_norm(self):
        assert field_norm("json") == 1.0
        assert field_norm("JSON Formatter") == 0.707
        assert field_norm("") == 1.0

    def test_normalize_query(self):
        assert normalize_query("  JSON   Formatter ") == "json formatter"

    def test_epsilon_is_positive(self):
        assert 0 < EPSILON < 1e-15
