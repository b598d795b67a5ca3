"""Configuration models."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseModel):
    """Credentials and model selection for the completion backend.

    When ``endpoint`` is set the Azure OpenAI service is used and
    ``deployment`` names the Azure deployment; otherwise the public OpenAI
    API is called and ``deployment`` is the model name.
    """

    api_key: str = Field(..., min_length=1, description="API key")
    endpoint: Optional[str] = Field(None, description="Azure OpenAI endpoint URL")
    deployment: str = Field("gpt-4o-mini", description="Deployment or model name")
    api_version: str = Field("2024-10-21", description="Azure OpenAI API version")


class GenerationConfig(BaseModel):
    """Tuning for prompt size and completion length."""

    max_diff_chars: int = Field(3000, gt=0, description="Character budget per commit diff")
    max_tokens: int = Field(16384, gt=0, description="Maximum tokens for the completion")
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Sampling temperature")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Azure OpenAI
    azure_openai_api_key: Optional[str] = None
    azure_openai_endpoint: Optional[str] = None
    azure_openai_deployment: str = "gpt-4o-mini"
    azure_openai_api_version: str = "2024-10-21"

    # Public OpenAI fallback
    openai_api_key: Optional[str] = None

    # Logging
    log_level: str = "WARNING"

    def to_llm_config(
        self,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        deployment: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> LLMConfig:
        """Merge explicit overrides over environment values.

        Raises:
            ValueError: If no API key is available from either source
        """
        key = api_key or self.azure_openai_api_key or self.openai_api_key
        if not key:
            raise ValueError(
                "API key is required. Set AZURE_OPENAI_API_KEY or use --api-key"
            )

        return LLMConfig(
            api_key=key,
            endpoint=endpoint or self.azure_openai_endpoint,
            deployment=deployment or self.azure_openai_deployment,
            api_version=api_version or self.azure_openai_api_version,
        )
