"""Unit tests for SearchQuery and SearchQueryBuilder."""

from pathlib import Path

import pytest
from dirkit.search.query import SearchQuery, SearchQueryBuilder


class TestSearchQuery:
    """Tests for SearchQuery."""

    def test_defaults(self) -> None:
        """Queries default to substring, case-sensitive matching."""
        query = SearchQuery(root_path=Path("/srv"), key="log")

        assert query.exact_match is False
        assert query.case_sensitive is True

    def test_empty_key_rejected(self) -> None:
        """An empty key is invalid."""
        with pytest.raises(ValueError, match="empty"):
            SearchQuery(root_path=Path("/srv"), key="")

    def test_string_root_is_coerced(self) -> None:
        """A string root is stored as a Path."""
        query = SearchQuery(root_path="/srv", key="x")  # type: ignore[arg-type]

        assert query.root_path == Path("/srv")

    def test_is_immutable(self) -> None:
        """Queries cannot be changed after creation."""
        query = SearchQuery(root_path=Path("/srv"), key="x")

        with pytest.raises(AttributeError):
            query.key = "y"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("name", "exact", "case_sensitive", "expected"),
        [
            ("readme.txt", False, True, True),
            ("README.md", False, True, False),
            ("README.md", False, False, True),
            ("readme", True, True, True),
            ("readme.txt", True, True, False),
            ("README", True, False, True),
            ("README.md", True, False, False),
        ],
    )
    def test_matches(self, name: str, exact: bool, case_sensitive: bool, expected: bool) -> None:
        """Matching follows the exact and case policies."""
        query = SearchQuery(
            root_path=Path("/srv"), key="readme", exact_match=exact, case_sensitive=case_sensitive
        )

        assert query.matches(name) is expected

    def test_exact_ignore_case_compares_whole_segment(self) -> None:
        """An exact match never ignores the extension."""
        query = SearchQuery(
            root_path=Path("/srv"), key="README", exact_match=True, case_sensitive=False
        )

        assert query.matches("readme.txt") is False
        assert query.matches("readme") is True

    def test_case_folding_handles_special_cases(self) -> None:
        """Case-insensitive comparison folds beyond simple lowercasing."""
        query = SearchQuery(root_path=Path("/srv"), key="STRASSE", case_sensitive=False)

        assert query.matches("straße") is True

    def test_matching_leaves_key_untouched(self) -> None:
        """Case-insensitive matching does not alter the stored key."""
        query = SearchQuery(root_path=Path("/srv"), key="ReadMe", case_sensitive=False)

        query.matches("readme")

        assert query.key == "ReadMe"


class TestSearchQueryBuilder:
    """Tests for SearchQueryBuilder."""

    def test_builder_defaults(self) -> None:
        """A bare builder produces the default query."""
        query = SearchQueryBuilder("/srv", "log").build()

        assert query == SearchQuery(root_path=Path("/srv"), key="log")

    def test_fluent_chain(self) -> None:
        """Each setter returns the builder and updates one field."""
        query = (
            SearchQueryBuilder("/srv", "log")
            .with_root_path("/var")
            .with_key("syslog")
            .with_exact_match()
            .with_case_sensitive(False)
            .build()
        )

        assert query.root_path == Path("/var")
        assert query.key == "syslog"
        assert query.exact_match is True
        assert query.case_sensitive is False

    def test_built_query_not_changed_by_later_setters(self) -> None:
        """A built query is a snapshot of the builder state."""
        builder = SearchQueryBuilder("/srv", "log")
        first = builder.build()

        builder.with_exact_match(True)

        assert first.exact_match is False
        assert builder.build().exact_match is True

    def test_empty_key_rejected_by_builder(self) -> None:
        """Setting an empty key fails immediately."""
        with pytest.raises(ValueError):
            SearchQueryBuilder("/srv", "log").with_key("")
