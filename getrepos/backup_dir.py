"""
Local backup directory scanning.

Every immediate entry counts as an existing backup, files included.
"""

import os
from pathlib import Path

from .errors import BackupDirectoryError


def list_entry_names(path: Path) -> list[str]:
    """
    List the names of the immediate entries of the backup directory.

    Args:
        path: Backup directory

    Returns:
        Entry names sorted by name

    Raises:
        BackupDirectoryError: If the directory cannot be read
    """
    try:
        return sorted(os.listdir(path))
    except OSError as e:
        raise BackupDirectoryError(f"Cannot read backup directory {path}: {e}") from e
