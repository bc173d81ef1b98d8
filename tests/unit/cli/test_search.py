"""Unit tests for the search command."""

from pathlib import Path

from dirkit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestSearchCommand:
    """Tests for dirkit search."""

    def test_lists_matches(self, sample_tree: Path) -> None:
        """Matching paths are printed with a count."""
        result = runner.invoke(app, ["search", str(sample_tree), "readme", "--ignore-case"])

        assert result.exit_code == 0
        assert str(sample_tree / "README.md") in result.stdout
        assert str(sample_tree / "docs" / "readme.txt") in result.stdout
        assert "2 match(es)" in result.stdout

    def test_exact_match(self, sample_tree: Path) -> None:
        """--exact requires the whole name."""
        result = runner.invoke(app, ["search", str(sample_tree), "docs", "--exact"])

        assert result.exit_code == 0
        assert "1 match(es)" in result.stdout

    def test_no_match_exits_1(self, sample_tree: Path) -> None:
        """No match exits with code 1."""
        result = runner.invoke(
            app, ["search", str(sample_tree), "README", "--exact", "--ignore-case"]
        )

        assert result.exit_code == 1
        assert "No entries matching" in result.stdout

    def test_first_only_reports_existence(self, sample_tree: Path) -> None:
        """--first reports a hit without listing paths."""
        result = runner.invoke(app, ["search", str(sample_tree), "txt", "--first"])

        assert result.exit_code == 0
        assert "Found an entry matching 'txt'" in result.stdout
        assert "match(es)" not in result.stdout

    def test_config_defaults_apply(self, sample_tree: Path, tmp_path: Path) -> None:
        """Search defaults come from the config when flags are absent."""
        config_path = tmp_path / "config.toml"
        config_path.write_text("[search]\ncase_sensitive = false\n")

        result = runner.invoke(
            app, ["--config", str(config_path), "search", str(sample_tree), "README"]
        )

        assert result.exit_code == 0
        assert "2 match(es)" in result.stdout

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root exits with an error."""
        result = runner.invoke(app, ["search", str(tmp_path / "gone"), "x"])

        assert result.exit_code == 1
        assert "does not exist" in result.output
