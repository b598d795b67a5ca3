"""Per-commit detail extraction with a character budget."""

from typing import Callable, List, Optional, Tuple

import structlog

from gitrelnotes.errors import CommitLookupFailedError
from gitrelnotes.extraction.git_repository import GitRepository
from gitrelnotes.models import CommitDetailBlob, CommitRecord, CommitSelection

logger = structlog.get_logger(__name__)

MAX_COMMIT_DIFF_CHARS = 3000
TRUNCATION_MARKER = "\n...[truncated]\n"

ProgressCallback = Callable[[int, int, CommitRecord], None]


def truncate_diff(text: str, max_chars: int = MAX_COMMIT_DIFF_CHARS) -> Tuple[str, bool]:
    """Cut ``text`` to ``max_chars`` and append the truncation marker.

    Args:
        text: Raw git show output
        max_chars: Character budget

    Returns:
        Tuple of (bounded text, whether it was truncated)
    """
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars] + TRUNCATION_MARKER, True


class CommitDetailExtractor:
    """Fetches ``git show`` output for each selected commit."""

    def __init__(
        self,
        repository: GitRepository,
        max_chars: int = MAX_COMMIT_DIFF_CHARS,
    ) -> None:
        """Initialize the extractor.

        Args:
            repository: Repository to query
            max_chars: Character budget per commit
        """
        self.repository = repository
        self.max_chars = max_chars

    def extract(
        self,
        selection: CommitSelection,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[CommitDetailBlob]:
        """Build one detail blob per commit, in selection order.

        Commits whose details cannot be fetched are skipped with a warning.

        Args:
            selection: Commits to describe
            on_progress: Called with (1-based index, total, commit) before each fetch

        Returns:
            List of CommitDetailBlob objects

        Raises:
            CommitLookupFailedError: If no commit could be described at all
        """
        blobs = []
        total = len(selection.commits)

        for index, commit in enumerate(selection.commits, start=1):
            if on_progress:
                on_progress(index, total, commit)

            try:
                raw = self.repository.show(commit.hash)
            except CommitLookupFailedError as e:
                logger.warning("commit_details_skipped", commit=commit.short_hash, error=str(e))
                continue

            text, truncated = truncate_diff(raw, self.max_chars)
            if truncated:
                logger.debug(
                    "commit_details_truncated",
                    commit=commit.short_hash,
                    original_length=len(raw),
                )
            blobs.append(CommitDetailBlob(commit=commit, text=text, truncated=truncated))

        if not blobs:
            raise CommitLookupFailedError(
                f"Failed to get details for any of the {total} selected commits"
            )

        logger.info("commit_details_extracted", count=len(blobs), skipped=total - len(blobs))
        return blobs
