"""
Backup orchestration: scan, list, diff, clone, fetch.

"Every journey begins with a single API call."
"""

from .backup_dir import list_entry_names
from .errors import GitError, PhaseError
from .git_utils import GitOperations
from .github_api import GitHubAPIClient
from .models import BackupSummary, Config, Repository
from .planner import get_repos_to_clone
from .rich_utils import (
    console,
    format_action,
    format_repo_name,
    format_repo_tags,
    print_header,
    print_list,
    print_warning,
)


class BackupOrchestrator:
    """
    Orchestrates a backup run.

    Everything runs sequentially. Each phase stops at its first failing
    repository and raises PhaseError with the count completed so far.
    """

    def __init__(
        self,
        config: Config,
        api_client: GitHubAPIClient | None = None,
        git_ops: GitOperations | None = None,
    ) -> None:
        """Initialize the orchestrator."""
        self.config = config
        self.api_client = api_client
        self.git_ops = git_ops or GitOperations()

    def run(self) -> BackupSummary:
        """
        Run the whole pipeline.

        Raises:
            BackupDirectoryError: If the backup directory cannot be read
            GitHubAPIError: If listing repositories fails
            PhaseError: If a clone or fetch fails
        """
        summary = BackupSummary(dry_run=self.config.dry_run)

        # Get all existing repos in backup directory
        local_names = self.scan_backup_dir()
        summary.local_entries = len(local_names)
        console.print("Current Directory Contents:")
        print_list(local_names)

        if not self.config.token:
            print_warning("No token configured; the API will only show public repositories.")

        # Get all repos from GitHub
        repos = self.discover()
        summary.discovered = len(repos)
        console.print(f"Number of repositories to process: {len(repos)}")

        repos_to_clone = get_repos_to_clone(local_names, repos)
        summary.to_clone = len(repos_to_clone)
        console.print(f"Number of repositories to clone: {len(repos_to_clone)}")

        summary.cloned = self.clone_missing(repos_to_clone)
        console.print(f"Number of repositories cloned: {summary.cloned}")

        summary.updated = self.update_all(pending=[repo.name for repo in repos_to_clone])
        console.print(f"Number of repositories updated: {summary.updated}")

        return summary

    def scan_backup_dir(self) -> list[str]:
        """Read the backup directory listing."""
        print_header(f"Reading backup directory: {self.config.backup_dir}")
        return list_entry_names(self.config.backup_dir)

    def discover(self) -> list[Repository]:
        """List remote repositories, reusing the injected client if there is one."""
        if self.api_client is not None:
            return self.api_client.get_repositories()

        with GitHubAPIClient(self.config) as client:
            return client.get_repositories()

    def clone_missing(self, repos: list[Repository]) -> int:
        """
        Clone each repository into the backup directory, in order.

        Returns:
            Number of repositories cloned

        Raises:
            PhaseError: On the first failed clone; later repositories are not attempted
        """
        print_header(f"Cloning all non-cached repos, number to process: {len(repos)}")
        processed = 0

        for repo in repos:
            if self.config.dry_run:
                console.print(
                    f"{format_action('dry-run')} {format_action('clone')} "
                    f"{format_repo_name(repo.full_name)}{self._tags(repo)}"
                )
                processed += 1
                continue

            console.print(f"==> Processing: {format_repo_name(repo.name)}{self._tags(repo)}")
            url = self.git_ops.build_clone_url(repo, self.config.token, self.config.github_host)
            try:
                self.git_ops.clone(url, cwd=self.config.backup_dir)
            except GitError as e:
                raise PhaseError("clone", processed, repo.full_name, str(e)) from e
            processed += 1

        return processed

    @staticmethod
    def _tags(repo: Repository) -> str:
        return format_repo_tags(private=repo.private, fork=repo.fork, archived=repo.archived)

    def update_all(self, pending: list[str] | None = None) -> int:
        """
        Run ``git fetch`` in every entry of the backup directory.

        The directory is listed again here, so repositories cloned earlier in
        the run are fetched too.
        In a dry run nothing was cloned, so the names in ``pending`` are
        added to the listing to report the would-be total.

        Returns:
            Number of entries fetched

        Raises:
            BackupDirectoryError: If the directory cannot be read
            PhaseError: On the first failed fetch
        """
        entries = list_entry_names(self.config.backup_dir)
        if self.config.dry_run and pending:
            entries = sorted(set(entries).union(pending))
        print_header(f"Updating all cached repos, number to process: {len(entries)}")
        processed = 0

        for name in entries:
            if self.config.dry_run:
                console.print(f"{format_action('dry-run')} {format_action('fetch')} {format_repo_name(name)}")
                processed += 1
                continue

            console.print(f"==> Processing: {format_repo_name(name)}")
            try:
                self.git_ops.fetch(self.config.backup_dir / name)
            except GitError as e:
                raise PhaseError("update", processed, name, str(e)) from e
            processed += 1

        return processed
