"""Commit selection and detail extraction from Git."""

from gitrelnotes.extraction.details import (
    MAX_COMMIT_DIFF_CHARS,
    TRUNCATION_MARKER,
    CommitDetailExtractor,
    truncate_diff,
)
from gitrelnotes.extraction.git_repository import GitRepository
from gitrelnotes.extraction.resolver import CommitRangeResolver

__all__ = [
    "GitRepository",
    "CommitRangeResolver",
    "CommitDetailExtractor",
    "truncate_diff",
    "MAX_COMMIT_DIFF_CHARS",
    "TRUNCATION_MARKER",
]
