"""Name search over a walked directory tree.

Runs the walker below a query's root and matches the final path
segment of every successfully visited entry. Failed entries are never
matched.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from dirkit.search.query import SearchQuery
from dirkit.walker.engine import iter_tree

logger = logging.getLogger(__name__)


class FolderSearchEngine:
    """Searches a directory tree for entries whose name matches a query.

    The engine holds a query and never modifies it, so repeated searches
    on the same engine are independent of each other.

    Example:
        >>> engine = FolderSearchEngine(SearchQuery(root_path=Path("/srv"), key="log"))
        >>> engine.search()
        [PosixPath('/srv/app/log'), PosixPath('/srv/app/log.1')]
    """

    def __init__(self, query: SearchQuery) -> None:
        """Initialize the FolderSearchEngine.

        Args:
            query: Query describing where and what to search for.
        """
        self._query = query

    @property
    def query(self) -> SearchQuery:
        """The query this engine runs."""
        return self._query

    def search(self, show_hidden: bool = False) -> list[Path]:
        """Collect every matching entry.

        Args:
            show_hidden: If True, hidden entries are searched too.

        Returns:
            Matching paths in walk order (directories after their children).

        Raises:
            StructuralWalkError: If the query root is missing or not a directory.
        """
        matches = list(self._iter_matches(show_hidden))
        logger.debug(
            "Search for %r under %s found %d match(es)",
            self._query.key,
            self._query.root_path,
            len(matches),
        )
        return matches

    def contains(self, show_hidden: bool = False) -> bool:
        """Check if at least one entry matches, stopping at the first hit.

        Args:
            show_hidden: If True, hidden entries are searched too.

        Returns:
            True if any visited entry matches.

        Raises:
            StructuralWalkError: If the query root is missing or not a directory.
        """
        return next(self._iter_matches(show_hidden), None) is not None

    def _iter_matches(self, show_hidden: bool) -> Iterator[Path]:
        """Yield matching paths lazily as the walk proceeds."""
        for event in iter_tree(self._query.root_path, show_hidden=show_hidden):
            if event.ok and self._query.matches(event.path.name):
                yield event.path
