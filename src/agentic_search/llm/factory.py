from __future__ import annotations

from langchain_core.language_models import BaseChatModel

from agentic_search.config.settings import Settings, get_settings
from agentic_search.llm.models import ModelSettings


class LLMFactory:
    @staticmethod
    def create_chat_model(
        model_settings: ModelSettings, settings: Settings | None = None
    ) -> BaseChatModel:
        settings = settings or get_settings()
        provider = model_settings.provider.strip().lower()

        if provider == "gemini":
            from langchain_google_genai import ChatGoogleGenerativeAI

            return ChatGoogleGenerativeAI(
                model=model_settings.model,
                google_api_key=model_settings.api_key or settings.google_api_key or None,
                temperature=model_settings.temperature,
                max_output_tokens=model_settings.max_tokens,
            )

        if provider == "openai":
            from langchain_openai import ChatOpenAI

            return ChatOpenAI(
                model=model_settings.model,
                api_key=model_settings.api_key or settings.openai_api_key or None,
                temperature=model_settings.temperature,
                max_tokens=model_settings.max_tokens,
            )

        raise ValueError("Unsupported LLM provider. Use 'gemini' or 'openai'.")
