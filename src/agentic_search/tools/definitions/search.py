from langchain_core.tools import StructuredTool

from agentic_search.llm.models import ModelSettings
from agentic_search.tools.search import GoogleSearch, build_search_tool
from agentic_search.tools.tool_models import ToolSpec


def build_search(model_settings: ModelSettings, goal: str) -> StructuredTool:
    """Build the Google search tool from the environment settings."""
    return build_search_tool(model_settings, goal)


tool = ToolSpec(
    name=GoogleSearch.name,
    description=GoogleSearch.description,
    builder=build_search,
)
