"""
Decide which remote repositories still need a first clone.
"""

from collections.abc import Iterable

from .models import Repository


def get_repos_to_clone(local_names: Iterable[str], repos: list[Repository]) -> list[Repository]:
    """
    Return the repositories whose name matches no local entry.

    Matching is exact and case-sensitive. The API order of ``repos`` is kept
    and nothing is deduplicated.
    """
    present = set(local_names)
    return [repo for repo in repos if repo.name not in present]
