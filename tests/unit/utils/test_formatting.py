"""Unit tests for formatting helpers."""

import pytest
from dirkit.utils.formatting import create_table, format_size, print_error, print_success


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "0 B"),
            (0, "0 B"),
            (512, "512 B"),
            (1536, "1.5 KB"),
            (5 * 1024 * 1024, "5.0 MB"),
            (3 * 1024**3, "3.0 GB"),
            (2 * 1024**4, "2.0 TB"),
        ],
    )
    def test_format_size(self, size: int | None, expected: str) -> None:
        """Sizes are scaled to the largest fitting unit."""
        assert format_size(size) == expected


class TestCreateTable:
    """Tests for create_table."""

    def test_table_has_title_and_no_columns(self) -> None:
        """Tables are created empty with the given title."""
        table = create_table("Results")

        assert table.title == "Results"
        assert table.columns == []
        assert table.show_header is True


class TestPrintHelpers:
    """Tests for the message helpers."""

    def test_success_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Success messages are written to stdout."""
        print_success("done")

        assert "done" in capsys.readouterr().out

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Error messages are written to stderr with a prefix."""
        print_error("broken")

        assert "Error: broken" in capsys.readouterr().err
