"""
Tests for backup directory scanning.
"""

from pathlib import Path

import pytest

from getrepos.backup_dir import list_entry_names
from getrepos.errors import BackupDirectoryError


def test_lists_files_and_directories(tmp_path: Path) -> None:
    """Test every immediate entry is listed, files included."""
    (tmp_path / "repo-b").mkdir()
    (tmp_path / "repo-a").mkdir()
    (tmp_path / "notes.txt").write_text("x")

    assert list_entry_names(tmp_path) == ["notes.txt", "repo-a", "repo-b"]


def test_does_not_recurse(tmp_path: Path) -> None:
    """Test nested entries are not listed."""
    (tmp_path / "repo" / "nested").mkdir(parents=True)

    assert list_entry_names(tmp_path) == ["repo"]


def test_empty_directory(tmp_path: Path) -> None:
    """Test an empty directory gives no names."""
    assert list_entry_names(tmp_path) == []


def test_missing_directory(tmp_path: Path) -> None:
    """Test an unreadable directory raises BackupDirectoryError."""
    with pytest.raises(BackupDirectoryError, match="Cannot read backup directory"):
        list_entry_names(tmp_path / "missing")


def test_path_is_a_file(tmp_path: Path) -> None:
    """Test a file path is not a backup directory."""
    target = tmp_path / "file"
    target.write_text("x")

    with pytest.raises(BackupDirectoryError):
        list_entry_names(target)
