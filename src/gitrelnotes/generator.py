"""Release notes pipeline: select commits, build the prompt, stream the answer."""

from datetime import date
from pathlib import Path
from typing import Optional

import structlog

from gitrelnotes.extraction import CommitDetailExtractor, CommitRangeResolver, GitRepository
from gitrelnotes.extraction.details import ProgressCallback
from gitrelnotes.llm.base import BaseLLMProvider
from gitrelnotes.llm.openai_provider import OpenAIProvider
from gitrelnotes.llm.prompts import PromptTemplates
from gitrelnotes.llm.streaming import FragmentSink, StreamingCollector
from gitrelnotes.models import (
    CommitSelection,
    GenerationConfig,
    LLMConfig,
    SelectionCriteria,
)

logger = structlog.get_logger(__name__)


class ReleaseNotesGenerator:
    """Generates Markdown release notes for a selection of commits.

    Steps run strictly one after another: resolve the selection, fetch each
    commit's details, assemble the prompt, then stream the completion.
    """

    def __init__(
        self,
        repository: GitRepository,
        provider: BaseLLMProvider,
        config: Optional[GenerationConfig] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            repository: Repository to read commits from
            provider: Streaming completion provider
            config: Prompt and completion limits (defaults apply when omitted)
        """
        self.repository = repository
        self.provider = provider
        self.config = config or GenerationConfig()
        self.resolver = CommitRangeResolver(repository)
        self.extractor = CommitDetailExtractor(repository, max_chars=self.config.max_diff_chars)
        self.prompts = PromptTemplates()

    def select(self, criteria: SelectionCriteria) -> CommitSelection:
        """Resolve which commits the notes will cover."""
        return self.resolver.resolve(criteria)

    async def generate_from_selection(
        self,
        selection: CommitSelection,
        on_fragment: Optional[FragmentSink] = None,
        on_progress: Optional[ProgressCallback] = None,
        release_date: Optional[date] = None,
    ) -> str:
        """Generate release notes for an already resolved selection.

        Args:
            selection: Commits to summarize
            on_fragment: Receives each streamed fragment as it arrives
            on_progress: Receives per-commit progress during detail extraction
            release_date: Date embedded in the notes, defaults to today

        Returns:
            Trimmed Markdown release notes
        """
        logger.info("processing_commits", count=len(selection), selection=selection.describe())

        blobs = self.extractor.extract(selection, on_progress=on_progress)
        messages = self.prompts.build_messages(blobs, release_date)

        collector = StreamingCollector(on_fragment=on_fragment)
        return await collector.collect(
            self.provider.stream_chat(
                messages,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        )

    async def generate(
        self,
        criteria: SelectionCriteria,
        on_fragment: Optional[FragmentSink] = None,
        on_progress: Optional[ProgressCallback] = None,
        release_date: Optional[date] = None,
    ) -> str:
        """Select commits from ``criteria`` and generate release notes for them."""
        selection = self.select(criteria)
        return await self.generate_from_selection(
            selection,
            on_fragment=on_fragment,
            on_progress=on_progress,
            release_date=release_date,
        )


async def generate_release_notes(
    repo_path: Path,
    criteria: SelectionCriteria,
    llm_config: LLMConfig,
    generation_config: Optional[GenerationConfig] = None,
    on_fragment: Optional[FragmentSink] = None,
    release_date: Optional[date] = None,
) -> str:
    """Generate release notes for ``repo_path`` with explicit configuration.

    Args:
        repo_path: Path inside the Git repository
        criteria: ``LastCommits`` or ``CommitRange``
        llm_config: Backend credentials and deployment
        generation_config: Prompt and completion limits
        on_fragment: Receives each streamed fragment as it arrives
        release_date: Date embedded in the notes, defaults to today

    Returns:
        Trimmed Markdown release notes
    """
    repository = GitRepository(repo_path)
    provider = OpenAIProvider.from_config(llm_config)
    generator = ReleaseNotesGenerator(repository, provider, generation_config)
    try:
        return await generator.generate(criteria, on_fragment=on_fragment, release_date=release_date)
    finally:
        await provider.close()
