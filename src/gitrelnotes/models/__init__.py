"""Data models for commit selection and configuration."""

from gitrelnotes.models.commit import (
    CommitDetailBlob,
    CommitRange,
    CommitRecord,
    CommitSelection,
    LastCommits,
    ReleaseNotesDraft,
    SelectionCriteria,
    criteria_from_options,
)
from gitrelnotes.models.config import GenerationConfig, LLMConfig, Settings

__all__ = [
    "CommitRecord",
    "CommitDetailBlob",
    "CommitSelection",
    "LastCommits",
    "CommitRange",
    "SelectionCriteria",
    "ReleaseNotesDraft",
    "criteria_from_options",
    "LLMConfig",
    "GenerationConfig",
    "Settings",
]
