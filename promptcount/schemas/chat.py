"""Chat completion request schemas and the reduced shape used for counting."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from promptcount.schemas.tools import ChatTool, ToolCall


class ContentPart(BaseModel):
    """One part of a multi-part message (text, image_url, ...)."""

    model_config = ConfigDict(extra="allow")

    type: str
    text: str | None = None


class ChatMessage(BaseModel):
    """A single message of a chat completion request."""

    role: Literal["system", "user", "assistant", "tool", "function"]
    content: str | list[ContentPart] | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None


class ChatCompletionRequest(BaseModel):
    """Create chat completion request as sent to the provider.

    Only ``messages`` and ``tools`` matter for prompt token estimation;
    any other request fields are accepted and ignored.
    """

    model_config = ConfigDict(extra="allow")

    model: str | None = None
    messages: list[ChatMessage] = []
    tools: list[ChatTool] | None = None

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages(cls, v: object) -> object:
        """Treat an explicit null message list as empty."""
        return [] if v is None else v


class TokenMessage(BaseModel):
    """A message reduced to the fields that are counted."""

    name: str = ""
    role: str = ""
    content: str = ""


class TokenRequest(BaseModel):
    """A request reduced to the fields that are counted."""

    messages: list[TokenMessage] = []
    tools: list[ChatTool] = []
