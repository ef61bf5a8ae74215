"""Tool definition and tool call schemas carried by chat requests."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class FunctionDefinition(BaseModel):
    """A function the model may call."""

    name: str
    description: str | None = None
    # JSON schema object, e.g. {"type": "object", "properties": {...}}
    parameters: dict[str, Any] | None = None

    @property
    def properties(self) -> dict[str, Any]:
        """Return the parameter properties, or an empty dict if there are none."""
        if not self.parameters:
            return {}
        properties = self.parameters.get("properties")
        if not isinstance(properties, dict):
            return {}
        return properties


class ChatTool(BaseModel):
    """A tool offered to the model in a chat completion request."""

    type: str = "function"
    function: FunctionDefinition | None = None


class FunctionCall(BaseModel):
    """The function invocation inside an assistant tool call."""

    name: str
    arguments: str = ""  # JSON-encoded arguments


class ToolCall(BaseModel):
    """A tool call made by the assistant in a previous turn."""

    id: str
    type: str = "function"
    function: FunctionCall
