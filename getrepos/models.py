"""
Data models for get-repos.

"In the end, it's all just data. But organized data? That's a backup."
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


DEFAULT_GITHUB_HOST = "github.com"


class AccountMode(str, Enum):
    """Which listing endpoint the run enumerates."""

    PERSONAL = "personal"
    ORG = "org"


@dataclass
class Repository:
    """
    Represents a GitHub repository.

    Only ``name``, ``owner`` and ``full_name`` drive the backup; the rest is
    kept for display.
    """

    name: str
    full_name: str
    owner: str
    private: bool = False
    fork: bool = False
    archived: bool = False


@dataclass
class Config:
    """
    Configuration for a backup run.

    "Configuration is just organized paranoia."
    """

    # Authentication
    token: str

    # Destination
    backup_dir: Path

    # Org mode only: visibility types to list, in order
    types: list[str] = field(default_factory=list)

    # Organization login, empty string selects personal mode
    affiliation: str = ""

    # GitHub Enterprise support
    github_host: str = DEFAULT_GITHUB_HOST

    # Execution options
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize configuration."""
        # Ensure backup_dir is a Path object
        if not isinstance(self.backup_dir, Path):
            self.backup_dir = Path(self.backup_dir)

        # Expand user home directory
        self.backup_dir = self.backup_dir.expanduser()

        if not self.github_host:
            self.github_host = DEFAULT_GITHUB_HOST

    @property
    def mode(self) -> AccountMode:
        """Personal mode unless an organization is configured."""
        return AccountMode.ORG if self.affiliation else AccountMode.PERSONAL


@dataclass
class BackupSummary:
    """
    Summary of a full backup run.

    "Numbers don't lie. Unless they're in a database."
    """

    local_entries: int = 0
    discovered: int = 0
    to_clone: int = 0
    cloned: int = 0
    updated: int = 0
    dry_run: bool = False
