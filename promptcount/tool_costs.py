"""Experimental prompt token accounting for tool definitions.

Providers turn tool definitions into a system message with an undocumented
encoding before the model sees them. The overheads in FixedTokenCost were
reverse-engineered from usage reported for non-streaming requests, see
https://community.openai.com/t/how-to-calculate-the-tokens-when-using-function-call/266573/10

Only used when ``Settings.count_tool_definitions`` is enabled.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import structlog

from promptcount.costs import FixedTokenCost
from promptcount.schemas.tools import ChatTool

logger = structlog.get_logger()


class ToolDefinitionCounter:
    """Counts the prompt tokens added by a request's tool definitions."""

    def __init__(self, cost: FixedTokenCost, count: Callable[[str], int]):
        self.cost = cost
        self.count = count

    def count_property(self, name: str, prop: Any) -> int:
        tokens = self.count(name)
        # Boolean schemas (true/false) carry nothing beyond the name
        if not isinstance(prop, dict):
            return tokens
        # e.g. ["string", "null"]; only plain type names are counted
        prop_type = prop.get("type")
        if prop_type and isinstance(prop_type, str):
            tokens += self.cost.tool_parameter_property_type + self.count(prop_type)
        description = prop.get("description")
        if description and isinstance(description, str):
            tokens += self.cost.tool_parameter_property_description + self.count(
                description
            )
        enum = prop.get("enum")
        if isinstance(enum, list):
            tokens += self.cost.tool_parameter_property_enum
            for element in enum:
                tokens += self.cost.tool_parameter_property_enum_element
                if isinstance(element, str):
                    tokens += self.count(element)
        return tokens

    def count_tool(self, tool: ChatTool) -> int:
        function = tool.function
        if function is None or tool.type != "function":
            return 0

        tokens = self.count(function.description or "") + self.count(function.name)
        properties = function.properties
        for name, prop in properties.items():
            tokens += self.count_property(name, prop)
        if properties:
            tokens += self.cost.tool_parameters
        return tokens

    def __call__(self, tools: Sequence[ChatTool]) -> int:
        if not tools:
            return 0
        tokens = sum(self.count_tool(tool) for tool in tools) + self.cost.tools
        logger.debug("tool_definition_tokens_counted", tools=len(tools), tokens=tokens)
        return tokens
