"""
Data model for the tool catalog and search results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

COMPLEXITY_LEVELS = ('Easy', 'Medium', 'Hard')


@dataclass(frozen=True)
class Tool:
    """A cataloged utility. Immutable, defined at build time."""
    name: str
    path: str
    icon: str
    category: str
    description: str
    tags: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    popularity: int = 1
    complexity: str = 'Easy'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Tool':
        return cls(
            name=data['name'],
            path=data['path'],
            icon=data.get('icon', ''),
            category=data['category'],
            description=data.get('description', ''),
            tags=tuple(data.get('tags', ())),
            keywords=tuple(data.get('keywords', ())),
            popularity=data.get('popularity', 1),
            complexity=data.get('complexity', 'Easy'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'path': self.path,
            'icon': self.icon,
            'category': self.category,
            'description': self.description,
            'tags': list(self.tags),
            'keywords': list(self.keywords),
            'popularity': self.popularity,
            'complexity': self.complexity,
        }


@dataclass(frozen=True)
class Category:
    """Named group of tools; tool order is display order."""
    title: str
    description: str
    tools: Tuple[Tool, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'tools': [tool.to_dict() for tool in self.tools],
        }


@dataclass(frozen=True)
class MatchSpan:
    """Where a query matched inside one field value. Used for highlighting only."""
    field: str
    value: str
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.value[self.start:self.end]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.field,
            'value': self.value,
            'start': self.start,
            'end': self.end,
            'text': self.text,
        }


@dataclass
class SearchResult:
    """
    A tool decorated with its match quality for one query.

    score is None when no relevance was computed (empty query); otherwise lower
    is better, 0.0 exact and 1.0 unrelated.
    """
    tool: Tool
    category_description: str = ''
    score: Optional[float] = None
    matches: Optional[List[MatchSpan]] = None

    @property
    def path(self) -> str:
        return self.tool.path

    @property
    def name(self) -> str:
        return self.tool.name

    @property
    def category(self) -> str:
        return self.tool.category

    @property
    def popularity(self) -> int:
        return self.tool.popularity

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses. Absent score stays absent."""
        result = self.tool.to_dict()
        result['categoryTitle'] = self.tool.category
        result['categoryDescription'] = self.category_description
        if self.score is not None:
            result['score'] = self.score
        if self.matches is not None:
            result['matches'] = [match.to_dict() for match in self.matches]
        return result


@dataclass
class ResultGroup:
    """Ranked results belonging to one category."""
    title: str
    description: str = ''
    tools: List[SearchResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'tools': [result.to_dict() for result in self.tools],
        }
