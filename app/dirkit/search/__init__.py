"""Name search over directory trees."""

from dirkit.search.engine import FolderSearchEngine
from dirkit.search.query import SearchQuery, SearchQueryBuilder

__all__ = [
    "FolderSearchEngine",
    "SearchQuery",
    "SearchQueryBuilder",
]
