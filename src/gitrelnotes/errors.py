"""Exceptions raised by the release notes pipeline."""


class ReleaseNotesError(Exception):
    """Base class for all release notes failures."""


class RepositoryUnavailableError(ReleaseNotesError):
    """The target path is not a usable Git repository."""


class CommitLookupFailedError(ReleaseNotesError):
    """A Git query (log, show, rev-parse) failed."""


class EmptyHistoryError(ReleaseNotesError):
    """The repository has no commits to summarize."""


class EmptyRangeError(ReleaseNotesError):
    """A commit range resolved to zero commits."""


class IncompleteRangeError(ReleaseNotesError):
    """Only one endpoint of a commit range was supplied."""


class CompletionFailedError(ReleaseNotesError):
    """The completion backend failed to open or finish the stream."""


class EmptyCompletionError(ReleaseNotesError):
    """The model returned no usable text."""
