"""Google Custom Search exposed as the agent's ``search`` tool.

Adapted from the Serper tool in LangChain. A free API key can be created at
https://developers.google.com/custom-search/v1/overview.
"""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any
from urllib.parse import quote

import httpx
from langchain_core.tools import StructuredTool

from agentic_search.config.settings import Settings, get_settings
from agentic_search.errors import SearchTransportError
from agentic_search.llm.models import ModelSettings
from agentic_search.llm.summarize import Summarizer, summarize_snippets
from agentic_search.tools.search.config import SearchToolConfig
from agentic_search.tools.search.models import SearchInput, SearchResponse

logger = logging.getLogger(__name__)

NO_RESULT = "No good search result found"
MAX_LINKS = 3


def encode_query(query: str) -> str:
    """Percent-encode the way ``encodeURIComponent`` does, nothing more."""
    return quote(query, safe="!*'()")


class GoogleSearch:
    name = "search"
    description = (
        "A search engine that should be used sparingly and only for questions "
        "about current events. Input should be a search query."
    )

    def __init__(
        self,
        config: SearchToolConfig,
        summarizer: Summarizer = summarize_snippets,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._summarize = summarizer
        self._transport = transport

    async def execute(self, query: str) -> str:
        result = await self.call_google_search(query)
        first = result.first_item

        if first is not None and first.open_graph_description:
            logger.debug("Answering %r from the Open Graph description", query)
            return first.open_graph_description

        if first is not None and first.snippet:
            snippets = [item.snippet for item in result.items]
            logger.debug("Summarizing %d snippets for %r", len(snippets), query)
            summary = await self._summarize(
                self.config.model_settings, self.config.goal, query, snippets
            )
            links = "\n".join(f"- {item.link}" for item in result.items[:MAX_LINKS])
            return f"{summary}\n\nLinks:\n{links}"

        return NO_RESULT

    def build_url(self, query: str) -> str:
        return (
            f"{self.config.base_url}?key={self.config.api_key}"
            f"&cx={self.config.cx}&q={encode_query(query)}"
        )

    async def call_google_search(self, query: str) -> SearchResponse:
        client_kwargs: dict[str, Any] = {"transport": self._transport}
        if self.config.timeout_seconds is not None:
            client_kwargs["timeout"] = self.config.timeout_seconds

        logger.debug("Querying Google Search API for %r", query)
        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.get(self.build_url(query))
        except httpx.HTTPError as exc:
            raise SearchTransportError(f"Google Search API request failed: {exc}") from exc

        # Error bodies are still parsed; they usually carry no items.
        if not response.is_success:
            logger.error(
                "Got %s error from Google Search API: %s",
                response.status_code,
                response.reason_phrase,
            )

        try:
            return SearchResponse.model_validate(response.json())
        except ValueError as exc:
            raise SearchTransportError(
                f"Unreadable Google Search API response ({response.status_code}): {exc}"
            ) from exc

    def run(self, query: str) -> str:
        """Blocking form of execute for agents that call tools synchronously."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.execute(query))
        # asyncio.run cannot nest inside a running loop; use a worker thread.
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, self.execute(query)).result()

    def as_tool(self) -> StructuredTool:
        return StructuredTool.from_function(
            name=self.name,
            description=self.description,
            func=self.run,
            coroutine=self.execute,
            args_schema=SearchInput,
        )


def build_search_tool(
    model_settings: ModelSettings,
    goal: str,
    settings: Settings | None = None,
    summarizer: Summarizer = summarize_snippets,
) -> StructuredTool:
    """Create the ``search`` tool for one agent run.

    Raises SearchConfigError straight away when the API key or CX is missing.
    """
    config = SearchToolConfig.from_settings(
        settings or get_settings(), model_settings, goal
    )
    return GoogleSearch(config, summarizer=summarizer).as_tool()
