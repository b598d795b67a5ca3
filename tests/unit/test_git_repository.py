"""Unit tests for the Git repository accessor."""

import tempfile
from pathlib import Path

import pytest

from gitrelnotes.errors import CommitLookupFailedError, RepositoryUnavailableError
from gitrelnotes.extraction import GitRepository


def test_repository_initialization(test_repo):
    """Test opening a valid repository."""
    repo_path, _ = test_repo
    repository = GitRepository(repo_path)

    assert repository.repo is not None
    assert repository.has_commits()


def test_repository_missing_path():
    """Test opening a path that does not exist."""
    with pytest.raises(RepositoryUnavailableError, match="does not exist"):
        GitRepository(Path("/nonexistent/path"))


def test_repository_not_a_git_repo():
    """Test opening a plain directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(RepositoryUnavailableError, match="Not a git repository"):
            GitRepository(Path(tmpdir))


def test_repository_from_subdirectory(test_repo):
    """Test that a directory inside the work tree resolves to the repository."""
    repo_path, hashes = test_repo
    subdir = repo_path / "docs"
    subdir.mkdir()

    repository = GitRepository(subdir)

    assert repository.list_recent(1)[0].hash == hashes[-1]


def test_list_recent_newest_first(test_repo):
    """Test listing recent commits."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    commits = repository.list_recent(10)

    assert [c.hash for c in commits] == list(reversed(hashes))
    assert commits[0].subject == "Add CSV export"
    assert commits[-1].subject == "Initial commit"


def test_list_recent_max_count(test_repo):
    """Test that max_count bounds the result."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    commits = repository.list_recent(2)

    assert [c.hash for c in commits] == [hashes[3], hashes[2]]


def test_list_recent_empty_repository(empty_repo):
    """Test listing commits in a repository without history."""
    repository = GitRepository(empty_repo)

    assert not repository.has_commits()
    assert repository.list_recent(5) == []


def test_commit_record_fields(test_repo):
    """Test that commit records carry all metadata."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    commit = repository.get_commit(hashes[3])

    assert commit.hash == hashes[3]
    assert commit.short_hash == hashes[3][:8]
    assert commit.subject == "Add CSV export"
    assert commit.message == "Add CSV export\n\nUsers can export reports."
    assert commit.author_name == "Test User"
    assert commit.author_email == "test@example.com"
    assert commit.authored_at.year == 2024
    assert commit.authored_at.day == 4


def test_get_commit_short_hash(test_repo):
    """Test resolving an abbreviated hash."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    assert repository.get_commit(hashes[1][:8]).hash == hashes[1]


def test_get_commit_invalid(test_repo):
    """Test resolving an unknown revision."""
    repo_path, _ = test_repo
    repository = GitRepository(repo_path)

    with pytest.raises(CommitLookupFailedError, match="Commit not found"):
        repository.get_commit("invalid_hash_123")


def test_list_range_inclusive(test_repo):
    """Test that both endpoints are part of the range."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    commits = repository.list_range(hashes[1], hashes[2])

    assert [c.hash for c in commits] == [hashes[2], hashes[1]]


def test_list_range_from_root(test_repo):
    """Test a range starting at the root commit."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    commits = repository.list_range(hashes[0], hashes[3])

    assert [c.hash for c in commits] == list(reversed(hashes))


def test_is_ancestor(test_repo):
    """Test ancestry checks."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    assert repository.is_ancestor(hashes[0], hashes[3])
    assert not repository.is_ancestor(hashes[3], hashes[0])


def test_show_includes_stat_and_patch(test_repo):
    """Test git show output for a commit."""
    repo_path, hashes = test_repo
    repository = GitRepository(repo_path)

    output = repository.show(hashes[2])

    assert "Fix: Update hello message" in output
    assert "main.py" in output
    assert "+    print('Hello, release notes!')" in output
    assert "AuthorDate:" in output


def test_show_invalid_hash(test_repo):
    """Test git show with an unknown hash."""
    repo_path, _ = test_repo
    repository = GitRepository(repo_path)

    with pytest.raises(CommitLookupFailedError, match="Failed to show commit"):
        repository.show("0" * 40)
