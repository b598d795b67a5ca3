"""Data models for commit selection and release notes drafting."""

from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gitrelnotes.errors import IncompleteRangeError


class CommitRecord(BaseModel):
    """Identity and metadata for a single Git commit."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "hash": "3f2c9a1be07d4c5e8a6b1d2f0e9c8b7a6d5e4f3a",
                "short_hash": "3f2c9a1b",
                "authored_at": "2024-01-15T10:30:00+01:00",
                "subject": "Add CSV export to the reports page",
                "message": "Add CSV export to the reports page\n\nCloses #42",
                "author_name": "Jane Doe",
                "author_email": "jane@example.com",
            }
        },
    )

    hash: str = Field(..., description="Full commit SHA hash")
    short_hash: str = Field(..., description="Abbreviated hash shown to users (8 chars)")
    authored_at: datetime = Field(..., description="Author-supplied timestamp")
    subject: str = Field(..., description="First line of the commit message")
    message: str = Field("", description="Full commit message")
    author_name: str = Field(..., description="Author name")
    author_email: str = Field(..., description="Author email")


class CommitDetailBlob(BaseModel):
    """Stat and patch text of one commit, bounded to a character budget."""

    model_config = ConfigDict(frozen=True)

    commit: CommitRecord = Field(..., description="Commit the text was produced from")
    text: str = Field(..., description="git show output, possibly truncated")
    truncated: bool = Field(False, description="Whether the source text exceeded the budget")


class LastCommits(BaseModel):
    """Select the most recent ``count`` commits from HEAD."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["last"] = "last"
    count: int = Field(5, gt=0, description="Number of commits to summarize")


class CommitRange(BaseModel):
    """Select every commit between two endpoints, both inclusive."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["range"] = "range"
    from_commit: str = Field(..., description="Older endpoint (start of the span)")
    to_commit: str = Field(..., description="Newer endpoint (end of the span)")


SelectionCriteria = Union[LastCommits, CommitRange]


def criteria_from_options(
    count: Optional[int] = None,
    from_commit: Optional[str] = None,
    to_commit: Optional[str] = None,
) -> SelectionCriteria:
    """Build selection criteria from optional command-line style values.

    A range wins when both endpoints are given; otherwise the last ``count``
    commits are selected (5 when no count is given).

    Raises:
        IncompleteRangeError: If exactly one range endpoint is supplied
    """
    if from_commit and to_commit:
        return CommitRange(from_commit=from_commit, to_commit=to_commit)
    if from_commit or to_commit:
        raise IncompleteRangeError(
            "Both from_commit and to_commit must be provided when using a commit range"
        )
    if count is None:
        return LastCommits()
    return LastCommits(count=count)


class CommitSelection(BaseModel):
    """Resolved, ordered commits chosen for one run."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["last", "range"] = Field(..., description="Selection mode that produced it")
    commits: List[CommitRecord] = Field(..., min_length=1, description="Selected commits in order")
    swapped: bool = Field(False, description="Whether reversed range endpoints were swapped")

    def __len__(self) -> int:
        return len(self.commits)

    def describe(self) -> str:
        """Short human-readable description, e.g. ``last 5``."""
        if self.mode == "range":
            return f"between {self.commits[0].short_hash} and {self.commits[-1].short_hash}"
        return f"last {len(self.commits)}"


class ReleaseNotesDraft:
    """Append-only accumulator for streamed completion fragments."""

    def __init__(self) -> None:
        self._fragments: List[str] = []

    def append(self, fragment: str) -> None:
        self._fragments.append(fragment)

    @property
    def fragments(self) -> List[str]:
        return list(self._fragments)

    @property
    def text(self) -> str:
        return "".join(self._fragments)

    def is_empty(self) -> bool:
        return not self.text.strip()
