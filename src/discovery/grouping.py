"""
Reshape a ranked result list into per-category buckets for display.
"""

from typing import Dict, List, Sequence

from .catalog import Catalog
from .models import ResultGroup, SearchResult


def group_results(results: Sequence[SearchResult], catalog: Catalog) -> List[ResultGroup]:
    """
    Bucket results by category in first-seen order, preserving rank order within
    each bucket. Categories without results are not emitted.
    """
    groups: Dict[str, ResultGroup] = {}
    for result in results:
        title = result.category
        if title not in groups:
            groups[title] = ResultGroup(title=title, description=catalog.category_description(title))
        groups[title].tools.append(result)
    return list(groups.values())
