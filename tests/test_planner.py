"""
Tests for choosing which repositories to clone.
"""

from getrepos.models import Repository
from getrepos.planner import get_repos_to_clone


def make_repo(name: str, owner: str = "owner") -> Repository:
    return Repository(name=name, full_name=f"{owner}/{name}", owner=owner)


def test_basic_difference() -> None:
    """Test local ["a", "b"] and remote [a, c] leaves only c."""
    repos = [make_repo("a"), make_repo("c")]

    assert get_repos_to_clone(["a", "b"], repos) == [make_repo("c")]


def test_preserves_api_order() -> None:
    """Test the result keeps the remote order, unsorted."""
    repos = [make_repo("zeta"), make_repo("alpha"), make_repo("mid")]

    result = get_repos_to_clone(["mid"], repos)

    assert [r.name for r in result] == ["zeta", "alpha"]


def test_match_is_case_sensitive() -> None:
    """Test names are compared exactly."""
    result = get_repos_to_clone(["Repo"], [make_repo("repo")])

    assert [r.name for r in result] == ["repo"]


def test_name_collision_across_owners() -> None:
    """Test a local name matches repos of any owner."""
    repos = [make_repo("tools", "alice"), make_repo("tools", "bob")]

    assert get_repos_to_clone(["tools"], repos) == []


def test_no_remote_repositories() -> None:
    """Test nothing to clone when nothing is listed."""
    assert get_repos_to_clone(["a"], []) == []


def test_empty_backup_dir_clones_everything() -> None:
    """Test an empty listing keeps every repo."""
    repos = [make_repo("a"), make_repo("b")]

    assert get_repos_to_clone([], repos) == repos


def test_duplicates_in_input_are_kept_not_added() -> None:
    """Test duplicated remote entries stay duplicated, nothing is added."""
    repos = [make_repo("x"), make_repo("y"), make_repo("x")]

    result = get_repos_to_clone(["y"], repos)

    assert [r.name for r in result] == ["x", "x"]


def test_matches_linear_scan_definition() -> None:
    """Test the result equals the filter definition over a mixed case."""
    local = ["b", "d", "f", "README.md"]
    repos = [make_repo(n) for n in ["a", "b", "c", "d", "e", "f", "g"]]

    expected = [r for r in repos if r.name not in local]

    assert get_repos_to_clone(local, repos) == expected
