"""Git repository access."""

from pathlib import Path
from typing import List

import git
import structlog
from git import Commit, Repo

from gitrelnotes.errors import CommitLookupFailedError, RepositoryUnavailableError
from gitrelnotes.models import CommitRecord

logger = structlog.get_logger(__name__)

SHORT_HASH_LENGTH = 8


class GitRepository:
    """Read-only queries against a Git working directory.

    Every call goes straight to Git; nothing is cached between calls.
    """

    def __init__(self, repo_path: Path) -> None:
        """Open the repository containing ``repo_path``.

        Args:
            repo_path: Repository root or any directory inside it

        Raises:
            RepositoryUnavailableError: If the path is missing or not a Git repository
        """
        self.repo_path = Path(repo_path)
        if not self.repo_path.exists():
            raise RepositoryUnavailableError(f"Repository path does not exist: {self.repo_path}")

        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryUnavailableError(f"Not a git repository: {self.repo_path}") from e

    def has_commits(self) -> bool:
        """Whether HEAD points at a commit (False for a freshly initialised repo)."""
        return self.repo.head.is_valid()

    def list_recent(self, max_count: int) -> List[CommitRecord]:
        """List up to ``max_count`` commits reachable from HEAD, newest first.

        Raises:
            CommitLookupFailedError: If git log fails
        """
        if not self.has_commits():
            return []

        try:
            commits = [
                self._to_record(commit)
                for commit in self.repo.iter_commits("HEAD", max_count=max_count)
            ]
        except (git.exc.GitCommandError, ValueError) as e:
            raise CommitLookupFailedError(f"Failed to get git history: {e}") from e

        logger.debug("listed_recent_commits", requested=max_count, found=len(commits))
        return commits

    def list_range(self, older: str, newer: str) -> List[CommitRecord]:
        """List commits from ``older`` to ``newer``, both inclusive, newest first.

        Args:
            older: Start of the span
            newer: End of the span

        Raises:
            CommitLookupFailedError: If either endpoint cannot be resolved or git log fails
        """
        start = self._resolve(older)
        end = self._resolve(newer)

        # Excluding the parents of the start commit keeps it in the span.
        rev = [end.hexsha] + [f"^{parent.hexsha}" for parent in start.parents]
        try:
            commits = [self._to_record(commit) for commit in self.repo.iter_commits(rev)]
        except (git.exc.GitCommandError, ValueError) as e:
            raise CommitLookupFailedError(
                f"Failed to get git history between {older} and {newer}: {e}"
            ) from e

        logger.debug(
            "listed_commit_range",
            older=start.hexsha[:SHORT_HASH_LENGTH],
            newer=end.hexsha[:SHORT_HASH_LENGTH],
            found=len(commits),
        )
        return commits

    def get_commit(self, rev: str) -> CommitRecord:
        """Resolve a revision (full or short hash, branch, tag) to a commit.

        Raises:
            CommitLookupFailedError: If the revision does not name a commit
        """
        return self._to_record(self._resolve(rev))

    def is_ancestor(self, ancestor: str, descendant: str) -> bool:
        """Whether ``ancestor`` is reachable from ``descendant``.

        Raises:
            CommitLookupFailedError: If git merge-base fails
        """
        try:
            return self.repo.is_ancestor(ancestor, descendant)
        except git.exc.GitCommandError as e:
            raise CommitLookupFailedError(
                f"Failed to compare commits {ancestor} and {descendant}: {e}"
            ) from e

    def show(self, commit_hash: str) -> str:
        """Return the stat and patch output of ``git show`` for one commit.

        Raises:
            CommitLookupFailedError: If git show fails
        """
        try:
            return self.repo.git.show(commit_hash, "--stat", "--format=fuller", "--patch")
        except git.exc.GitCommandError as e:
            raise CommitLookupFailedError(f"Failed to show commit {commit_hash}: {e}") from e

    def _resolve(self, rev: str) -> Commit:
        try:
            return self.repo.commit(rev)
        except (git.exc.BadName, git.exc.BadObject, ValueError) as e:
            raise CommitLookupFailedError(f"Commit not found: {rev}") from e

    @staticmethod
    def _to_record(commit: Commit) -> CommitRecord:
        """Convert a GitPython Commit into a CommitRecord."""
        message = commit.message
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        message = message.strip()

        return CommitRecord(
            hash=commit.hexsha,
            short_hash=commit.hexsha[:SHORT_HASH_LENGTH],
            authored_at=commit.authored_datetime,
            subject=message.split("\n")[0] if message else "",
            message=message,
            author_name=commit.author.name or "",
            author_email=commit.author.email or "",
        )
