"""
GitHub API client with pagination support.

"The API is just a door. Your token is the key. Don't lose it."
"""

from datetime import datetime
from typing import Any

import requests

from . import __version__
from .errors import GitHubAPIError, RateLimitError
from .models import DEFAULT_GITHUB_HOST, AccountMode, Config, Repository
from .rich_utils import console, print_header

__all__ = ["GitHubAPIClient", "GitHubAPIError", "RateLimitError"]


class GitHubAPIClient:
    """
    GitHub REST API v3 client.

    One HTTP session is opened per client and reused for every page.
    """

    PER_PAGE = 100  # Maximum allowed by GitHub
    TIMEOUT = 30

    def __init__(self, config: Config, session: requests.Session | None = None) -> None:
        """Initialize the GitHub API client."""
        self.config = config
        self.session = session or requests.Session()

        # Support GitHub Enterprise with custom hostname
        if config.github_host and config.github_host != DEFAULT_GITHUB_HOST:
            self.base_url = f"https://{config.github_host}/api/v3"
        else:
            self.base_url = "https://api.github.com"

        # Set up authentication headers
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"get-repos/{__version__}",
        }

        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"

        self.session.headers.update(headers)

    def __enter__(self) -> "GitHubAPIClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close session."""
        self.close()

    def close(self) -> None:
        """Close the HTTP session and release resources."""
        if self.session:
            self.session.close()

    def get_repositories(self) -> list[Repository]:
        """
        Fetch all repositories for the configured account.

        Personal mode lists repositories owned by the authenticated user. Org
        mode lists the organization's repositories once per configured type and
        concatenates the results in type order, duplicates included.

        Raises:
            GitHubAPIError: On the first failing request, with everything
                gathered so far in ``partial``
        """
        if self.config.mode == AccountMode.PERSONAL:
            return self.list_personal_repositories()

        print_header("Reading ORG Github Repos", subtitle=self.config.affiliation)
        repos: list[Repository] = []
        for repo_type in self.config.types:
            try:
                repos.extend(self.list_org_repositories(self.config.affiliation, repo_type, announce=False))
            except GitHubAPIError as e:
                raise type(e)(str(e), partial=repos + e.partial) from e
        return repos

    def list_personal_repositories(self) -> list[Repository]:
        """List every repository owned by the authenticated user."""
        print_header("Reading PERSONAL Github Repos")
        return self._paginate("/user/repos", {"affiliation": "owner"})

    def list_org_repositories(self, org: str, repo_type: str, announce: bool = True) -> list[Repository]:
        """
        List an organization's repositories of one type.

        Args:
            org: Organization login
            repo_type: Repository type filter (e.g. "public", "internal", "private")
            announce: Print a section header first
        """
        if announce:
            print_header("Reading ORG Github Repos", subtitle=org)
        console.print(f"   [dim]Type: {repo_type}[/dim]")
        return self._paginate(f"/orgs/{org}/repos", {"type": repo_type})

    def _paginate(self, endpoint: str, params: dict[str, str]) -> list[Repository]:
        """
        Request pages 1, 2, ... until one comes back empty.

        "Pagination is just recursion with extra steps."
        """
        repos: list[Repository] = []
        page = 1

        while True:
            query = {**params, "per_page": str(self.PER_PAGE), "page": str(page)}
            try:
                data = self._get_json(f"{self.base_url}{endpoint}", query)
                if not isinstance(data, list):
                    raise GitHubAPIError(f"Unexpected response from {endpoint}: expected a list")
                page_repos = self._parse_repositories(data)
            except GitHubAPIError as e:
                raise type(e)(str(e), partial=repos) from e

            if not page_repos:
                break

            console.print(f"   [dim]📦 Page {page}: {len(page_repos)} repos[/dim]")
            repos.extend(page_repos)
            page += 1

        return repos

    def _get_json(self, url: str, params: dict[str, str]) -> Any:
        """
        Make one API request and decode the JSON body.

        No retries: every failure is reported to the caller.
        """
        try:
            response = self.session.get(url, params=params, timeout=self.TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise self._http_error(e) from e
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"Network error: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON from {url}: {e}") from e

    def _http_error(self, error: requests.exceptions.HTTPError) -> GitHubAPIError:
        """Translate an HTTP error status into a GitHubAPIError."""
        response = error.response
        status = response.status_code if response is not None else None

        if status == 401:
            return GitHubAPIError("Authentication failed. Check the token in your credentials file.")
        if status == 404:
            if self.config.mode == AccountMode.ORG:
                return GitHubAPIError(
                    f"Organization '{self.config.affiliation}' not found. Check the 'org' setting."
                )
            return GitHubAPIError(f"Not found: {response.url}")
        if status == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
            reset_timestamp = response.headers.get("X-RateLimit-Reset", "0")

            # Format reset time
            try:
                reset_str = datetime.fromtimestamp(int(reset_timestamp)).strftime("%Y-%m-%d %H:%M:%S")
            except (ValueError, OSError):
                reset_str = "unknown"

            return RateLimitError(f"GitHub API rate limit exceeded. Limit resets at: {reset_str}")
        if status == 403:
            return GitHubAPIError(f"Access forbidden: {error}")
        return GitHubAPIError(f"GitHub API error: {error}")

    def _parse_repositories(self, data: list[dict]) -> list[Repository]:
        """Parse repository data from API response."""
        repos = []
        try:
            for item in data:
                repo = Repository(
                    name=item["name"],
                    full_name=item["full_name"],
                    owner=item["owner"]["login"],
                    private=item.get("private", False),
                    fork=item.get("fork", False),
                    archived=item.get("archived", False),
                )
                repos.append(repo)
        except (KeyError, TypeError) as e:
            raise GitHubAPIError(f"Malformed repository record in API response: {e}") from e
        return repos
