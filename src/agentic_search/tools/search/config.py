from __future__ import annotations

from dataclasses import dataclass

from agentic_search.config.settings import Settings
from agentic_search.errors import SearchConfigError
from agentic_search.llm.models import ModelSettings

DEFAULT_BASE_URL = "https://www.googleapis.com/customsearch/v1"


@dataclass(frozen=True)
class SearchToolConfig:
    """Everything a GoogleSearch instance needs, resolved once up front.

    Attributes:
        api_key: Custom Search JSON API key.
        cx: Programmable search engine id scoping the results.
        goal: The agent's current goal, handed to the summarizer.
        model_settings: Chat model selection, handed to the summarizer.
        base_url: Search endpoint.
        timeout_seconds: httpx timeout; None keeps the httpx default.
    """

    api_key: str
    cx: str
    goal: str
    model_settings: ModelSettings
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        if not self.api_key or not self.cx:
            raise SearchConfigError(
                "Google Search API key or CX not set. You can set them as "
                "GOOGLE_SEARCH_API_KEY and GOOGLE_SEARCH_CX in your .env file, "
                "or pass them to SearchToolConfig."
            )

    @classmethod
    def from_settings(
        cls, settings: Settings, model_settings: ModelSettings, goal: str
    ) -> SearchToolConfig:
        return cls(
            api_key=settings.google_search_api_key,
            cx=settings.google_search_cx,
            goal=goal,
            model_settings=model_settings,
            base_url=settings.google_search_base_url or DEFAULT_BASE_URL,
            timeout_seconds=settings.default_api_timeout_seconds,
        )
