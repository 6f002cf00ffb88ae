"""
Query execution and ordering of search results.
"""

import functools
import logging
from typing import Callable, List, Sequence

from .catalog import Catalog
from .index import SearchIndex
from .models import SearchResult

logger = logging.getLogger(__name__)

DEFAULT_DEADBAND = 0.1


def compare_results(a: SearchResult, b: SearchResult, deadband: float = DEFAULT_DEADBAND) -> int:
    """
    Order two results: a clearly better fuzzy score wins, otherwise popularity.

    Scores within the deadband of each other (or missing on either side) are
    treated as equivalent and the more popular tool goes first. Returns 0 for
    remaining ties so a stable sort keeps matcher order.
    """
    if a.score is not None and b.score is not None:
        if abs(a.score - b.score) > deadband:
            return -1 if a.score < b.score else 1
    return b.popularity - a.popularity


def sort_results(results: Sequence[SearchResult], deadband: float = DEFAULT_DEADBAND) -> List[SearchResult]:
    key: Callable = functools.cmp_to_key(lambda a, b: compare_results(a, b, deadband))
    return sorted(results, key=key)


class RankingEngine:
    """Runs queries against a SearchIndex and orders the hits."""

    def __init__(self, catalog: Catalog, index: SearchIndex, deadband: float = DEFAULT_DEADBAND):
        self.catalog = catalog
        self.index = index
        self.deadband = deadband

    def rank(self, query: str) -> List[SearchResult]:
        """
        Return ranked results for a query.

        An empty or whitespace-only query yields every tool in catalog order
        with no score. Any other input runs the fuzzy matcher; unmatched tools
        are excluded.
        """
        if not query or not query.strip():
            return [
                SearchResult(tool=tool, category_description=self.catalog.category_description(tool.category))
                for tool in self.catalog.tools
            ]

        hits = self.index.search(query)
        results = [
            SearchResult(
                tool=hit.tool,
                category_description=self.catalog.category_description(hit.tool.category),
                score=hit.score,
                matches=list(hit.matches),
            )
            for hit in hits
        ]
        logger.debug("Query %r matched %d of %d tools", query, len(results), len(self.catalog))
        return sort_results(results, self.deadband)
