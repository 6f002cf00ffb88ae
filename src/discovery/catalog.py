"""
Static, immutable registry of cataloged tools grouped into categories.
"""

from typing import Any, Dict, Iterable, List, Optional

from .exceptions import CatalogError
from .models import COMPLEXITY_LEVELS, Category, Tool

HOME_BREADCRUMB = {'label': 'Developer Tools', 'path': '/'}


class Catalog:
    """
    Read-only tool registry.

    Validates on construction that every tool path is unique, every tool's
    category resolves to exactly one category, popularity is 1..5 and
    complexity is a known level. Built once at process start.
    """

    def __init__(self, categories: Iterable[Category]):
        self._categories = tuple(categories)
        self._by_title: Dict[str, Category] = {}
        self._by_path: Dict[str, Tool] = {}

        for category in self._categories:
            if category.title in self._by_title:
                raise CatalogError(f"Duplicate category title: {category.title}")
            self._by_title[category.title] = category

        for category in self._categories:
            for tool in category.tools:
                self._validate_tool(tool, category)
                self._by_path[tool.path] = tool

        self._tools = tuple(tool for category in self._categories for tool in category.tools)

    def _validate_tool(self, tool: Tool, category: Category) -> None:
        if tool.path in self._by_path:
            raise CatalogError(f"Duplicate tool path: {tool.path}")
        if tool.category not in self._by_title:
            raise CatalogError(f"Tool {tool.path} references unknown category: {tool.category}")
        if tool.category != category.title:
            raise CatalogError(f"Tool {tool.path} is declared under {category.title} "
                               f"but belongs to {tool.category}")
        if not isinstance(tool.popularity, int) or not 1 <= tool.popularity <= 5:
            raise CatalogError(f"Tool {tool.path} has popularity outside 1..5: {tool.popularity}")
        if tool.complexity not in COMPLEXITY_LEVELS:
            raise CatalogError(f"Tool {tool.path} has unknown complexity: {tool.complexity}")

    @classmethod
    def from_config(cls, categories: List[Dict[str, Any]]) -> 'Catalog':
        """Build a catalog from the declarative category list in config.tools"""
        return cls(
            Category(
                title=entry['title'],
                description=entry.get('description', ''),
                tools=tuple(Tool.from_dict(tool) for tool in entry.get('tools', [])),
            )
            for entry in categories
        )

    @property
    def categories(self) -> tuple:
        return self._categories

    @property
    def tools(self) -> tuple:
        """All tools, flattened in catalog order."""
        return self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, path: str) -> bool:
        return path in self._by_path

    def get_tool(self, path: str) -> Optional[Tool]:
        return self._by_path.get(path)

    def get_category(self, title: str) -> Optional[Category]:
        return self._by_title.get(title)

    def category_description(self, title: str) -> str:
        category = self._by_title.get(title)
        return category.description if category else ''

    def breadcrumbs(self, path: str) -> List[Dict[str, str]]:
        """Navigation trail for a page: home first, then the tool if cataloged"""
        trail = [dict(HOME_BREADCRUMB)]
        tool = self._by_path.get(path)
        if path != '/' and tool:
            trail.append({'label': tool.name, 'path': tool.path})
        return trail

    def to_list(self) -> List[Dict[str, Any]]:
        return [category.to_dict() for category in self._categories]


def load_default_catalog() -> Catalog:
    from config.tools import TOOL_CATEGORIES
    return Catalog.from_config(TOOL_CATEGORIES)
