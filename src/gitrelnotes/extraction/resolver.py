"""Resolve selection criteria into an ordered list of commits."""

from typing import Tuple

import structlog

from gitrelnotes.errors import EmptyHistoryError, EmptyRangeError, IncompleteRangeError
from gitrelnotes.extraction.git_repository import GitRepository
from gitrelnotes.models import (
    CommitRange,
    CommitRecord,
    CommitSelection,
    LastCommits,
    SelectionCriteria,
)

logger = structlog.get_logger(__name__)


class CommitRangeResolver:
    """Turns ``LastCommits`` or ``CommitRange`` criteria into a CommitSelection."""

    def __init__(self, repository: GitRepository) -> None:
        self.repository = repository

    def resolve(self, criteria: SelectionCriteria) -> CommitSelection:
        """Resolve criteria against the repository.

        Last-N selections are newest first. Range selections are oldest first,
        starting at the older endpoint and ending at the newer one.

        Raises:
            IncompleteRangeError: If a range is missing an endpoint
            EmptyHistoryError: If the repository has no commits (last mode)
            EmptyRangeError: If the range covers no commits
            CommitLookupFailedError: If Git cannot resolve the request
        """
        if isinstance(criteria, CommitRange):
            return self._resolve_range(criteria)
        if isinstance(criteria, LastCommits):
            return self._resolve_last(criteria)
        raise TypeError(f"Unsupported selection criteria: {criteria!r}")

    def _resolve_last(self, criteria: LastCommits) -> CommitSelection:
        commits = self.repository.list_recent(criteria.count)
        if not commits:
            raise EmptyHistoryError("No commits found in repository history")

        logger.info("commits_resolved", mode="last", requested=criteria.count, count=len(commits))
        return CommitSelection(mode="last", commits=commits)

    def _resolve_range(self, criteria: CommitRange) -> CommitSelection:
        if not criteria.from_commit or not criteria.to_commit:
            raise IncompleteRangeError(
                "Both from_commit and to_commit must be provided when using a commit range"
            )

        if not self.repository.has_commits():
            raise EmptyRangeError(
                f"No commits found between {criteria.from_commit} and {criteria.to_commit}"
            )

        start = self.repository.get_commit(criteria.from_commit)
        end = self.repository.get_commit(criteria.to_commit)
        older, newer, swapped = self._order_endpoints(start, end)

        if swapped:
            logger.warning(
                "commit_range_reversed",
                from_commit=start.short_hash,
                to_commit=end.short_hash,
            )

        commits = self.repository.list_range(older.hash, newer.hash)
        if not commits:
            raise EmptyRangeError(
                f"No commits found between {older.short_hash} and {newer.short_hash}"
            )

        # git log is newest first; the span reads oldest to newest.
        commits.reverse()

        logger.info(
            "commits_resolved",
            mode="range",
            older=older.short_hash,
            newer=newer.short_hash,
            count=len(commits),
        )
        return CommitSelection(mode="range", commits=commits, swapped=swapped)

    def _order_endpoints(
        self, start: CommitRecord, end: CommitRecord
    ) -> Tuple[CommitRecord, CommitRecord, bool]:
        """Return ``(older, newer, swapped)`` for two range endpoints.

        Raises:
            EmptyRangeError: If neither endpoint is an ancestor of the other
        """
        if start.hash == end.hash:
            return start, end, False

        if self.repository.is_ancestor(end.hash, start.hash):
            return end, start, True
        if self.repository.is_ancestor(start.hash, end.hash):
            return start, end, False

        # Diverged branches or unrelated histories have no span containing both.
        raise EmptyRangeError(
            f"Commits {start.short_hash} and {end.short_hash} are not on one line of history"
        )
