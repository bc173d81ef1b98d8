"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for walking and searching.

    Layout::

        tree/
            README.md          (12 bytes)
            notes.txt          (5 bytes)
            .secret            (hidden, 3 bytes)
            docs/
                guide.txt      (20 bytes)
                readme.txt     (0 bytes)
            .cache/            (hidden)
                blob.bin       (4 bytes)
            empty/
    """
    root = tmp_path / "tree"
    root.mkdir()
    (root / "README.md").write_text("# Sample doc")
    (root / "notes.txt").write_text("hello")
    (root / ".secret").write_text("key")

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.txt").write_text("a" * 20)
    (docs / "readme.txt").write_text("")

    cache = root / ".cache"
    cache.mkdir()
    (cache / "blob.bin").write_bytes(b"\x00\x01\x02\x03")

    (root / "empty").mkdir()
    return root
