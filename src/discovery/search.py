"""
Tool search facade: holds the current query and exposes ranked and grouped results.
"""

from typing import Iterable, List, Optional

from .catalog import Catalog
from .grouping import group_results
from .index import DEFAULT_KEYS, SearchIndex
from .models import ResultGroup, SearchResult
from .ranking import RankingEngine


class ToolSearch:
    """
    Owns the search index and ranking engine for one catalog.

    The index is built once at construction; the catalog is static so it is
    never rebuilt. set_query() recomputes both result views.
    """

    def __init__(self, catalog: Catalog, settings=None, index: Optional[SearchIndex] = None):
        if catalog is None:
            raise ValueError("ToolSearch requires a catalog")

        threshold = settings.search_threshold if settings else 0.4
        min_match_length = settings.min_match_length if settings else 2
        deadband = settings.score_deadband if settings else 0.1

        self.catalog = catalog
        self.index = index or SearchIndex(catalog.tools, DEFAULT_KEYS, threshold, min_match_length)
        self.engine = RankingEngine(catalog, self.index, deadband)

        self._query = ''
        self._results: List[SearchResult] = self.engine.rank('')

    @property
    def query(self) -> str:
        return self._query

    @property
    def search_results(self) -> List[SearchResult]:
        return list(self._results)

    @property
    def grouped_results(self) -> List[ResultGroup]:
        return self.group(self._results)

    def set_query(self, query: Optional[str]) -> List[SearchResult]:
        self._query = query or ''
        self._results = self.engine.rank(self._query)
        return self.search_results

    def search(self, query: Optional[str], favorites: Optional[Iterable[str]] = None) -> List[SearchResult]:
        """Rank without touching the current query; optionally keep only favorite paths"""
        results = self.engine.rank(query or '')
        if favorites is not None:
            wanted = set(favorites)
            results = [result for result in results if result.path in wanted]
        return results

    def group(self, results: Iterable[SearchResult]) -> List[ResultGroup]:
        return group_results(list(results), self.catalog)
