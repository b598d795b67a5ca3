"""Base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, List, Optional


class BaseLLMProvider(ABC):
    """Abstract base class for streaming chat completion providers."""

    def __init__(self, api_key: str, model: str, **kwargs: Any) -> None:
        """Initialize the LLM provider.

        Args:
            api_key: API key for the provider
            model: Model or deployment name to use
            **kwargs: Additional provider-specific parameters
        """
        self.api_key = api_key
        self.model = model
        self.config = kwargs

    @abstractmethod
    def stream_chat(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int = 16384,
        temperature: Optional[float] = None,
        **kwargs: Any,
    ) -> AsyncIterator[str]:
        """Stream a chat completion as text fragments.

        The returned iterator is finite and cannot be restarted; a failure
        while it is being consumed ends the completion.

        Args:
            messages: Chat messages as ``{"role": ..., "content": ...}`` dicts
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature, or None for the backend default
            **kwargs: Additional provider-specific parameters

        Yields:
            Non-empty text fragments in arrival order

        Raises:
            CompletionFailedError: If the request or the stream fails
        """

    async def close(self) -> None:
        """Release network resources held by the provider."""
