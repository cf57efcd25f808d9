from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from agentic_search.config.settings import Settings


class ModelSettings(BaseModel):
    """Chat model selection forwarded untouched to the summarizer.

    Attributes:
        provider: Either ``openai`` or ``gemini``.
        model: Provider-specific model name.
        temperature: Sampling temperature for the summary completion.
        max_tokens: Optional completion length cap.
        api_key: Provider key; the matching key from settings is used when empty.
    """

    model_config = ConfigDict(frozen=True)

    provider: str = "openai"
    model: str = "gpt-4o-mini"
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    max_tokens: int | None = None
    api_key: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> ModelSettings:
        provider = settings.llm_provider.strip().lower()
        model = settings.gemini_model if provider == "gemini" else settings.openai_model
        return cls(provider=provider, model=model)
