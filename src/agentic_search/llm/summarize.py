from __future__ import annotations

from typing import Protocol, Sequence

from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from agentic_search.llm.factory import LLMFactory
from agentic_search.llm.models import ModelSettings

SUMMARIZE_SNIPPETS_PROMPT = ChatPromptTemplate.from_messages(
    [
        (
            "system",
            "You condense web search results for an autonomous agent working "
            "towards this goal: {goal}",
        ),
        (
            "human",
            'Summarize the following search results for the query "{query}":'
            "\n\n{snippets}",
        ),
    ]
)


class Summarizer(Protocol):
    async def __call__(
        self,
        model_settings: ModelSettings,
        goal: str,
        query: str,
        snippets: Sequence[str],
    ) -> str:
        ...


async def summarize_snippets(
    model_settings: ModelSettings,
    goal: str,
    query: str,
    snippets: Sequence[str],
) -> str:
    """Ask the configured chat model for a summary of the given snippets.

    Model and network errors are not caught here.
    """
    chain = (
        SUMMARIZE_SNIPPETS_PROMPT
        | LLMFactory.create_chat_model(model_settings)
        | StrOutputParser()
    )
    return await chain.ainvoke(
        {"goal": goal, "query": query, "snippets": "\n\n".join(snippets)}
    )
