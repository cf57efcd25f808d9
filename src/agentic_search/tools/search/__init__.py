from agentic_search.tools.search.config import SearchToolConfig
from agentic_search.tools.search.models import SearchResponse, SearchResultItem
from agentic_search.tools.search.tool import GoogleSearch, build_search_tool

__all__ = [
    "GoogleSearch",
    "SearchResponse",
    "SearchResultItem",
    "SearchToolConfig",
    "build_search_tool",
]
