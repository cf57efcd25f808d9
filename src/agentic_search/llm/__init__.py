from agentic_search.llm.factory import LLMFactory
from agentic_search.llm.models import ModelSettings
from agentic_search.llm.summarize import Summarizer, summarize_snippets

__all__ = ["LLMFactory", "ModelSettings", "Summarizer", "summarize_snippets"]
