"""LLM integration for release notes generation."""

from gitrelnotes.llm.base import BaseLLMProvider
from gitrelnotes.llm.openai_provider import OpenAIProvider
from gitrelnotes.llm.prompts import SYSTEM_PROMPT, PromptTemplates
from gitrelnotes.llm.streaming import StreamingCollector

__all__ = [
    "BaseLLMProvider",
    "OpenAIProvider",
    "PromptTemplates",
    "SYSTEM_PROMPT",
    "StreamingCollector",
]
