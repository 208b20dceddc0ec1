"""
get-repos - Back up every GitHub repository you own, or your organization owns.

"In a world of ephemeral clouds, be the one with local backups."
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .models import AccountMode, BackupSummary, Config, Repository

__all__ = [
    "AccountMode",
    "BackupSummary",
    "Config",
    "Repository",
    "__version__",
]
