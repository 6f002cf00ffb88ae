"""
Tool discovery package: catalog, fuzzy index, ranking and result grouping.
"""

from .exceptions import DiscoveryError, CatalogError
from .models import Tool, Category, MatchSpan, SearchResult, ResultGroup
from .catalog import Catalog, load_default_catalog
from .index import SearchIndex, IndexHit, DEFAULT_KEYS
from .ranking import RankingEngine, compare_results, sort_results
from .grouping import group_results
from .search import ToolSearch

__all__ = [
    # Exceptions
    'DiscoveryError', 'CatalogError',

    # Data model
    'Tool', 'Category', 'MatchSpan', 'SearchResult', 'ResultGroup',

    # Engine
    'Catalog', 'load_default_catalog', 'SearchIndex', 'IndexHit', 'DEFAULT_KEYS',
    'RankingEngine', 'compare_results', 'sort_results', 'group_results', 'ToolSearch'
]
