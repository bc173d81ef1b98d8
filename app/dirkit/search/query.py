"""Search query configuration.

A SearchQuery is immutable. It can be built directly with keyword
arguments or step by step with SearchQueryBuilder.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """Name search configuration.

    Attributes:
        root_path: Directory to search below.
        key: Name (or name fragment) to look for.
        exact_match: If True, the whole final path segment must equal the
            key; otherwise the key only has to be contained in it.
        case_sensitive: If False, both sides are case-folded before comparing.
    """

    root_path: Path
    key: str
    exact_match: bool = False
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        """Validate query data after initialization."""
        if not self.key:
            msg = "Search key cannot be empty"
            raise ValueError(msg)
        if not isinstance(self.root_path, Path):
            object.__setattr__(self, "root_path", Path(self.root_path))

    def matches(self, name: str) -> bool:
        """Check if a final path segment matches this query.

        Args:
            name: Final path segment to test.

        Returns:
            True if the name matches under this query's policy.
        """
        key = self.key
        if not self.case_sensitive:
            name = name.casefold()
            key = key.casefold()

        if self.exact_match:
            return name == key
        return key in name


class SearchQueryBuilder:
    """Fluent builder for SearchQuery.

    Defaults to substring matching and case-sensitive comparison.

    Example:
        >>> query = (
        ...     SearchQueryBuilder("/srv/docs", "readme")
        ...     .with_case_sensitive(False)
        ...     .build()
        ... )
    """

    def __init__(self, root_path: str | os.PathLike[str], key: str) -> None:
        self._query = SearchQuery(root_path=Path(root_path), key=key)

    def with_root_path(self, root_path: str | os.PathLike[str]) -> "SearchQueryBuilder":
        """Set the directory to search below."""
        self._query = replace(self._query, root_path=Path(root_path))
        return self

    def with_key(self, key: str) -> "SearchQueryBuilder":
        """Set the name to look for."""
        self._query = replace(self._query, key=key)
        return self

    def with_exact_match(self, exact_match: bool = True) -> "SearchQueryBuilder":
        """Set whether the whole name must equal the key."""
        self._query = replace(self._query, exact_match=exact_match)
        return self

    def with_case_sensitive(self, case_sensitive: bool = True) -> "SearchQueryBuilder":
        """Set whether comparison is case-sensitive."""
        self._query = replace(self._query, case_sensitive=case_sensitive)
        return self

    def build(self) -> SearchQuery:
        """Return the configured query."""
        return self._query
