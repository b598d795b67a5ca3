"""Shared fixtures: throwaway Git repositories."""

import tempfile
from pathlib import Path

import git
import pytest


def _commit(repo: git.Repo, repo_path: Path, file_name: str, content: str, message: str, day: int) -> str:
    (repo_path / file_name).write_text(content)
    repo.index.add([file_name])
    # Git internal date format: 2024-01-<day> 10:00:00 UTC
    timestamp = f"{1704103200 + (day - 1) * 86400} +0000"
    commit = repo.index.commit(message, author_date=timestamp, commit_date=timestamp)
    return commit.hexsha


@pytest.fixture
def test_repo():
    """Create a temporary Git repository with four linear commits.

    Yields (repo_path, hashes) where hashes are ordered oldest to newest.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        repo = git.Repo.init(repo_path)

        # Configure git
        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()

        hashes = [
            _commit(repo, repo_path, "README.md", "# Test Project\n", "Initial commit", 1),
            _commit(repo, repo_path, "main.py", "def hello():\n    print('Hello, World!')\n", "Add main.py", 2),
            _commit(repo, repo_path, "main.py", "def hello():\n    print('Hello, release notes!')\n", "Fix: Update hello message", 3),
            _commit(repo, repo_path, "export.py", "def export_csv(rows):\n    return rows\n", "Add CSV export\n\nUsers can export reports.", 4),
        ]

        yield repo_path, hashes


@pytest.fixture
def empty_repo():
    """Create a temporary Git repository without any commits."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        git.Repo.init(repo_path)
        yield repo_path


@pytest.fixture
def diverged_repo():
    """Create a repository whose two branches fork after the first commit.

    Yields (repo_path, base, main_tip, side_tip). The side tip is authored
    after the main tip.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        repo = git.Repo.init(repo_path)

        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()

        base = _commit(repo, repo_path, "README.md", "# Test Project\n", "base", 1)
        main_tip = _commit(repo, repo_path, "main.py", "print('main')\n", "older on main", 2)

        repo.create_head("side", base).checkout()
        side_tip = _commit(repo, repo_path, "side.py", "print('side')\n", "newer on side", 3)

        yield repo_path, base, main_tip, side_tip
