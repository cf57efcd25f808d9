from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from langchain_core.tools import BaseTool

from agentic_search.llm.models import ModelSettings

ToolBuilder = Callable[[ModelSettings, str], BaseTool]


@dataclass(frozen=True)
class ToolSpec:
    """Static definition of an agent tool.

    Attributes:
        name: Name the agent calls the tool by.
        description: Text the agent's model reads to decide when to call it.
        builder: Creates the tool for one agent run from model settings and goal.
    """

    name: str
    description: str
    builder: ToolBuilder

    def build(self, model_settings: ModelSettings, goal: str) -> BaseTool:
        built = self.builder(model_settings, goal)
        if built.name != self.name:
            raise ValueError(
                f"Builder for tool '{self.name}' produced a tool named '{built.name}'"
            )
        return built
