"""OpenAI and Azure OpenAI streaming provider."""

from typing import Any, AsyncIterator, Dict, List, Optional

import structlog
from openai import AsyncAzureOpenAI, AsyncOpenAI

from gitrelnotes.errors import CompletionFailedError
from gitrelnotes.llm.base import BaseLLMProvider
from gitrelnotes.models import LLMConfig

logger = structlog.get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """Chat completions over the OpenAI API or an Azure OpenAI deployment."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        endpoint: Optional[str] = None,
        api_version: str = "2024-10-21",
        **kwargs: Any,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: OpenAI or Azure OpenAI API key
            model: Model name, or deployment name when ``endpoint`` is set
            endpoint: Azure OpenAI endpoint; the public API is used when omitted
            api_version: Azure OpenAI API version
            **kwargs: Additional parameters
        """
        super().__init__(api_key, model, **kwargs)
        self.endpoint = endpoint
        self.api_version = api_version

        if endpoint:
            self.client = AsyncAzureOpenAI(
                api_key=api_key,
                azure_endpoint=endpoint,
                azure_deployment=model,
                api_version=api_version,
            )
        else:
            self.client = AsyncOpenAI(api_key=api_key)

    @classmethod
    def from_config(cls, config: LLMConfig) -> "OpenAIProvider":
        """Create a provider from an LLMConfig."""
        return cls(
            api_key=config.api_key,
            model=config.deployment,
            endpoint=config.endpoint,
            api_version=config.api_version,
        )

    async def stream_chat(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int = 16384,
        temperature: Optional[float] = None,
        **kwargs: Any,
    ) -> AsyncIterator[str]:
        """Stream a chat completion from OpenAI.

        Args:
            messages: Chat messages
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature, omitted from the request when None
            **kwargs: Additional OpenAI parameters

        Yields:
            Non-empty content deltas

        Raises:
            CompletionFailedError: If opening or reading the stream fails
        """
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "stream": True,
        }
        if temperature is not None:
            params["temperature"] = temperature
        params.update(kwargs)

        try:
            stream = await self.client.chat.completions.create(**params)
        except Exception as e:
            raise CompletionFailedError(f"OpenAI API error: {e}") from e

        logger.debug("completion_stream_opened", model=self.model, azure=bool(self.endpoint))

        try:
            async for chunk in stream:
                content = self._chunk_content(chunk)
                if content:
                    yield content
        except Exception as e:
            raise CompletionFailedError(f"OpenAI stream interrupted: {e}") from e

    async def close(self) -> None:
        """Close the underlying HTTP client.

        Must be awaited on the event loop that used the client.
        """
        await self.client.close()

    @staticmethod
    def _chunk_content(chunk: Any) -> str:
        """Extract the text delta from a streamed chunk.

        Azure sends chunks without choices (e.g. content filter results).
        """
        if not chunk.choices:
            return ""
        delta = chunk.choices[0].delta
        if delta is None:
            return ""
        return delta.content or ""
