"""Unit tests for FileEntity.

Tests binding, renaming, re-binding, deletion and lock probing.
"""

import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from dirkit.entities.file import FileEntity
from dirkit.errors import PathNotFoundError, WrongKindError


class TestBinding:
    """Tests for binding a FileEntity to a path."""

    def test_binds_existing_file(self, sample_tree: Path) -> None:
        """Binding reads the snapshot and keeps an absolute path."""
        entity = FileEntity(sample_tree / "notes.txt")

        assert entity.path == sample_tree / "notes.txt"
        assert entity.attributes.size == 5
        assert entity.exists() is True

    def test_binding_directory_fails(self, sample_tree: Path) -> None:
        """A directory cannot be bound as a file."""
        with pytest.raises(WrongKindError):
            FileEntity(sample_tree / "docs")

    def test_binding_missing_fails(self, tmp_path: Path) -> None:
        """A missing path cannot be bound."""
        with pytest.raises(PathNotFoundError):
            FileEntity(tmp_path / "missing")

    def test_snapshot_is_not_refreshed_automatically(self, sample_tree: Path) -> None:
        """Attributes reflect the bind time until re-bound."""
        entity = FileEntity(sample_tree / "notes.txt")
        (sample_tree / "notes.txt").write_text("much longer now")

        assert entity.attributes.size == 5
        entity.rebind(entity.path)
        assert entity.attributes.size == 15

    def test_repr_shows_path(self, sample_tree: Path) -> None:
        """repr names the class and the bound path."""
        entity = FileEntity(sample_tree / "notes.txt")
        assert repr(entity) == f"FileEntity({str(sample_tree / 'notes.txt')!r})"


class TestIsEmpty:
    """Tests for FileEntity.is_empty."""

    def test_empty_file(self, sample_tree: Path) -> None:
        """A zero-byte file is empty."""
        assert FileEntity(sample_tree / "docs" / "readme.txt").is_empty() is True

    def test_non_empty_file(self, sample_tree: Path) -> None:
        """A file with content is not empty."""
        assert FileEntity(sample_tree / "notes.txt").is_empty() is False


class TestRename:
    """Tests for FileEntity.rename."""

    def test_rename_rebinds(self, sample_tree: Path) -> None:
        """A successful rename moves the file and refreshes the snapshot."""
        entity = FileEntity(sample_tree / "notes.txt")

        assert entity.rename("renamed.md") is True

        assert entity.path == sample_tree / "renamed.md"
        assert entity.attributes.name == "renamed.md"
        assert entity.attributes.extension == "md"
        assert not (sample_tree / "notes.txt").exists()

    def test_rename_onto_existing_fails(self, sample_tree: Path) -> None:
        """An existing sibling is never overwritten."""
        entity = FileEntity(sample_tree / "notes.txt")

        assert entity.rename("README.md") is False

        assert entity.path == sample_tree / "notes.txt"
        assert (sample_tree / "README.md").read_text() == "# Sample doc"

    @pytest.mark.parametrize("bad_name", ["", ".", "..", "sub/name"])
    def test_rename_rejects_invalid_names(self, sample_tree: Path, bad_name: str) -> None:
        """Names that are not a single path segment are rejected."""
        entity = FileEntity(sample_tree / "notes.txt")

        assert entity.rename(bad_name) is False
        assert entity.path == sample_tree / "notes.txt"

    def test_rename_os_failure_keeps_binding(self, sample_tree: Path) -> None:
        """An OS-level failure returns False and leaves the entity as it was."""
        entity = FileEntity(sample_tree / "notes.txt")
        before = entity.attributes

        with patch("dirkit.entities.base.os.rename", side_effect=PermissionError(13, "denied")):
            assert entity.rename("other.txt") is False

        assert entity.path == sample_tree / "notes.txt"
        assert entity.attributes is before

    def test_unreadable_renamed_file_is_moved_back(
        self, sample_tree: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """If the renamed file cannot be read back, the rename is undone."""
        entity = FileEntity(sample_tree / "notes.txt")
        before = entity.attributes

        with (
            caplog.at_level(logging.WARNING, logger="dirkit"),
            patch(
                "dirkit.entities.attributes.detect_type",
                side_effect=PermissionError(13, "denied"),
            ),
        ):
            assert entity.rename("b.txt") is False

        assert entity.path == sample_tree / "notes.txt"
        assert entity.attributes is before
        assert entity.exists()
        assert (sample_tree / "notes.txt").read_text() == "hello"
        assert not (sample_tree / "b.txt").exists()
        assert "cannot re-read" in caplog.text

    def test_rename_logs_at_info(self, sample_tree: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Successful renames are logged."""
        entity = FileEntity(sample_tree / "notes.txt")

        with caplog.at_level(logging.INFO, logger="dirkit"):
            entity.rename("n2.txt")

        assert "Renamed" in caplog.text


class TestRebind:
    """Tests for FileEntity.rebind."""

    def test_rebind_to_other_file(self, sample_tree: Path) -> None:
        """Re-binding switches path and attributes."""
        entity = FileEntity(sample_tree / "notes.txt")

        entity.rebind(sample_tree / "docs" / "guide.txt")

        assert entity.path == sample_tree / "docs" / "guide.txt"
        assert entity.attributes.size == 20

    def test_failed_rebind_keeps_previous_state(self, sample_tree: Path) -> None:
        """A failed re-bind leaves path and attributes unchanged."""
        entity = FileEntity(sample_tree / "notes.txt")
        before = entity.attributes

        with pytest.raises(WrongKindError):
            entity.rebind(sample_tree / "docs")

        assert entity.path == sample_tree / "notes.txt"
        assert entity.attributes is before


class TestDelete:
    """Tests for FileEntity.delete."""

    def test_delete_removes_file(self, sample_tree: Path) -> None:
        """Deleting returns True once the file is gone."""
        entity = FileEntity(sample_tree / "notes.txt")

        assert entity.delete() is True

        assert not (sample_tree / "notes.txt").exists()
        assert entity.exists() is False

    def test_delete_missing_returns_false(self, sample_tree: Path) -> None:
        """Deleting a file that vanished returns False."""
        entity = FileEntity(sample_tree / "notes.txt")
        (sample_tree / "notes.txt").unlink()

        assert entity.delete() is False

    def test_delete_failure_returns_false(self, sample_tree: Path) -> None:
        """An OS failure during delete returns False and keeps the file."""
        entity = FileEntity(sample_tree / "notes.txt")

        with patch.object(Path, "unlink", side_effect=PermissionError(13, "denied")):
            assert entity.delete() is False

        assert (sample_tree / "notes.txt").exists()


class TestIsLocked:
    """Tests for FileEntity.is_locked."""

    def test_free_file_is_not_locked(self, sample_tree: Path) -> None:
        """A file nobody holds is reported free and left in place."""
        entity = FileEntity(sample_tree / "notes.txt")

        assert entity.is_locked() is False

        assert (sample_tree / "notes.txt").read_text() == "hello"
        assert not list(sample_tree.glob("*.lockprobe"))

    @pytest.mark.skipif(sys.platform == "win32", reason="uses fcntl.flock")
    def test_file_with_held_lock_is_locked(self, sample_tree: Path) -> None:
        """An exclusive lock held on another descriptor is detected."""
        import fcntl

        entity = FileEntity(sample_tree / "notes.txt")

        with open(sample_tree / "notes.txt", "rb") as holder:
            fcntl.flock(holder.fileno(), fcntl.LOCK_EX)
            try:
                assert entity.is_locked() is True
            finally:
                fcntl.flock(holder.fileno(), fcntl.LOCK_UN)

        assert entity.is_locked() is False

    def test_unopenable_file_is_locked(self, sample_tree: Path) -> None:
        """A file that cannot be opened for writing counts as locked."""
        entity = FileEntity(sample_tree / "notes.txt")

        with patch("builtins.open", side_effect=PermissionError(13, "denied")):
            assert entity.is_locked() is True

    def test_rename_probe_failure_is_locked(self, sample_tree: Path) -> None:
        """A file that cannot be renamed counts as locked."""
        entity = FileEntity(sample_tree / "notes.txt")

        with patch("dirkit.entities.file.os.rename", side_effect=PermissionError(13, "denied")):
            assert entity.is_locked() is True

        assert (sample_tree / "notes.txt").exists()

    def test_restore_failure_is_logged(
        self, sample_tree: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A failed restore after the probe rename reports locked and logs an error."""
        entity = FileEntity(sample_tree / "notes.txt")
        real_rename = os.rename
        calls: list[tuple[object, object]] = []

        def rename_once(src: object, dst: object) -> None:
            calls.append((src, dst))
            if len(calls) == 1:
                real_rename(src, dst)
                return
            raise PermissionError(13, "denied")

        with (
            caplog.at_level(logging.ERROR, logger="dirkit"),
            patch("dirkit.entities.file.os.rename", side_effect=rename_once),
        ):
            assert entity.is_locked() is True

        assert "Cannot restore" in caplog.text
        # Put the file back for cleanliness
        real_rename(calls[0][1], calls[0][0])
