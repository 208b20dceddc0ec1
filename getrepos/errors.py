"""
Error hierarchy for get-repos.

Library code raises these; only the CLI turns them into an exit status.
"""


class GetReposError(Exception):
    """Base error for a failed backup run."""

    exit_code = 1


class ConfigError(GetReposError):
    """Configuration file missing or malformed."""

    exit_code = 3


class BackupDirectoryError(GetReposError):
    """Backup directory could not be read."""

    exit_code = 4


class GitHubAPIError(GetReposError):
    """GitHub API error."""

    exit_code = 5

    def __init__(self, message: str, partial: list | None = None) -> None:
        super().__init__(message)
        # Repositories accumulated before the failing request
        self.partial = list(partial) if partial else []


class RateLimitError(GitHubAPIError):
    """Rate limit exceeded error."""

    pass


class GitError(GetReposError):
    """Git operation error."""

    exit_code = 6


class PhaseError(GetReposError):
    """
    A clone or update phase stopped at its first failing repository.

    ``processed`` is the number of items that completed before the failure.
    """

    exit_code = 6

    def __init__(self, phase: str, processed: int, item: str, reason: str) -> None:
        super().__init__(f"{phase} failed on '{item}' after {processed} processed: {reason}")
        self.phase = phase
        self.processed = processed
        self.item = item
        self.reason = reason
