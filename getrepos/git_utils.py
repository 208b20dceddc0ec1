"""
Git operations wrapper using subprocess.

"Every git command is a leap of faith. Make backups."
"""

import subprocess
from pathlib import Path

from .errors import GitError
from .models import DEFAULT_GITHUB_HOST, Repository
from .rich_utils import mask_credentials

__all__ = ["GitError", "GitOperations"]


class GitOperations:
    """
    Wrapper for Git subprocess operations.

    Commands run without a timeout; a failing command raises GitError.
    """

    GIT = "git"

    @staticmethod
    def build_clone_url(repo: Repository, token: str, host: str = DEFAULT_GITHUB_HOST) -> str:
        """
        Build an HTTPS clone URL carrying the owner login and token as credentials.

        https://<owner>:<token>@github.com/<owner>/<name>
        """
        return f"https://{repo.owner}:{token}@{host}/{repo.full_name}"

    @staticmethod
    def _run(cmd: list[str], cwd: Path) -> None:
        """Run a git command in ``cwd``, raising GitError on any failure."""
        try:
            subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
            raise GitError(
                f"'{mask_credentials(' '.join(cmd))}' failed in {cwd}: {mask_credentials(error_msg)}"
            ) from e
        except OSError as e:
            # Spawn failure: git missing, or cwd not a directory
            raise GitError(f"Could not run {cmd[0]} in {cwd}: {e}") from e

    @staticmethod
    def clone(url: str, cwd: Path) -> None:
        """
        Clone ``url`` into a new directory under ``cwd``.

        Git picks the directory name from the URL.
        """
        GitOperations._run([GitOperations.GIT, "clone", url], cwd=cwd)

    @staticmethod
    def fetch(path: Path) -> None:
        """Fetch updates from the default remote of the repository at ``path``."""
        GitOperations._run([GitOperations.GIT, "fetch"], cwd=path)
