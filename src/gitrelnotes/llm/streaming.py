"""Consume a streamed completion into a release notes document."""

from typing import AsyncIterable, Callable, Optional

import structlog

from gitrelnotes.errors import EmptyCompletionError
from gitrelnotes.models import ReleaseNotesDraft

logger = structlog.get_logger(__name__)

FragmentSink = Callable[[str], None]


class StreamingCollector:
    """Forwards streamed fragments to a live sink while accumulating them."""

    def __init__(self, on_fragment: Optional[FragmentSink] = None) -> None:
        """Initialize the collector.

        Args:
            on_fragment: Called with each fragment as soon as it arrives
        """
        self.on_fragment = on_fragment
        self.draft = ReleaseNotesDraft()

    async def collect(self, fragments: AsyncIterable[str]) -> str:
        """Drain ``fragments`` and return the trimmed accumulated text.

        Raises:
            EmptyCompletionError: If the accumulated text is blank
            CompletionFailedError: Propagated from the provider if the stream fails
        """
        async for fragment in fragments:
            if not fragment:
                continue
            if self.on_fragment:
                self.on_fragment(fragment)
            self.draft.append(fragment)

        if self.draft.is_empty():
            raise EmptyCompletionError("No content returned from the completion backend")

        text = self.draft.text.strip()
        logger.info(
            "completion_collected",
            fragments=len(self.draft.fragments),
            characters=len(text),
        )
        return text
