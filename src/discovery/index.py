"""
Weighted multi-field fuzzy index over the flattened tool catalog.

Each field value is aligned against the query with rapidfuzz; a value counts
as a match when its normalized distance is within the threshold and the
aligned run is at least ``min_match_length`` characters long. Per-value
distances are combined into one tool score the way weighted fuzzy search
libraries do it: a product of ``distance ** (weight * field_norm)`` over every
matching value, so strong name matches dominate and additional matching
fields only ever improve the score.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from rapidfuzz import fuzz

from .models import MatchSpan, Tool

# Smallest positive distance; keeps exact matches from collapsing the product to zero
EPSILON = 2.220446049250313e-16

DEFAULT_KEYS: Tuple[Tuple[str, float], ...] = (
    ('name', 0.4),
    ('description', 0.3),
    ('tags', 0.2),
    ('keywords', 0.1),
)


@dataclass(frozen=True)
class IndexHit:
    """A tool that matched a query, with its catalog position."""
    position: int
    tool: Tool
    score: float
    matches: Tuple[MatchSpan, ...]


@dataclass(frozen=True)
class _FieldValue:
    field: str
    value: str
    folded: str
    weight: float
    norm: float


def field_norm(value: str) -> float:
    """Length norm: values with more tokens weigh less per match."""
    tokens = len(value.split()) or 1
    return round(1 / math.sqrt(tokens), 3)


def normalize_query(query: str) -> str:
    return ' '.join(query.split()).lower()


class SearchIndex:
    """
    Immutable fuzzy index. Safe to share across queries once built.
    """

    def __init__(self, tools: Sequence[Tool],
                 keys: Sequence[Tuple[str, float]] = DEFAULT_KEYS,
                 threshold: float = 0.4,
                 min_match_length: int = 2):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within 0..1, got {threshold}")

        total_weight = sum(weight for _, weight in keys)
        if total_weight <= 0:
            raise ValueError("field weights must sum to a positive total")

        self.tools = tuple(tools)
        self.keys = tuple((name, weight / total_weight) for name, weight in keys)
        self.threshold = threshold
        self.min_match_length = max(1, min_match_length)
        self._records = tuple(self._build_record(tool) for tool in self.tools)

    def _build_record(self, tool: Tool) -> Tuple[_FieldValue, ...]:
        values = []
        for name, weight in self.keys:
            raw = getattr(tool, name, None)
            if raw is None:
                continue
            items = (raw,) if isinstance(raw, str) else tuple(raw)
            for item in items:
                if not item:
                    continue
                values.append(_FieldValue(
                    field=name,
                    value=item,
                    folded=item.lower(),
                    weight=weight,
                    norm=field_norm(item),
                ))
        return tuple(values)

    def __len__(self) -> int:
        return len(self.tools)

    def _align(self, pattern: str, value: _FieldValue) -> Optional[Tuple[float, int, int]]:
        """Return (distance, start, end) of the best alignment, or None if it does not match."""
        if len(pattern) <= len(value.folded):
            alignment = fuzz.partial_ratio_alignment(pattern, value.folded)
            if alignment is None:
                return None
            similarity = alignment.score
            start, end = alignment.dest_start, alignment.dest_end
        else:
            similarity = fuzz.ratio(pattern, value.folded)
            start, end = 0, len(value.folded)

        distance = 1.0 - similarity / 100.0
        if distance > self.threshold or end - start < self.min_match_length:
            return None
        return distance, start, end

    def search(self, query: str) -> List[IndexHit]:
        """
        Match the query against every tool.

        Returns hits ordered by score, ties in catalog order. Tools with no
        matching field are left out. A blank query matches nothing.
        """
        pattern = normalize_query(query)
        if len(pattern) < self.min_match_length:
            return []

        hits = []
        for position, (tool, record) in enumerate(zip(self.tools, self._records)):
            score = 1.0
            matches = []
            for value in record:
                aligned = self._align(pattern, value)
                if aligned is None:
                    continue
                distance, start, end = aligned
                score *= max(distance, EPSILON) ** (value.weight * value.norm)
                matches.append(MatchSpan(field=value.field, value=value.value, start=start, end=end))
            if matches:
                hits.append(IndexHit(position=position, tool=tool, score=score, matches=tuple(matches)))

        hits.sort(key=lambda hit: (hit.score, hit.position))
        return hits
