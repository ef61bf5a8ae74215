"""Pydantic schemas for chat completion requests."""

from promptcount.schemas.chat import (
    ChatCompletionRequest,
    ChatMessage,
    ContentPart,
    TokenMessage,
    TokenRequest,
)
from promptcount.schemas.tools import (
    ChatTool,
    FunctionCall,
    FunctionDefinition,
    ToolCall,
)

__all__ = [
    "ChatCompletionRequest",
    "ChatMessage",
    "ChatTool",
    "ContentPart",
    "FunctionCall",
    "FunctionDefinition",
    "TokenMessage",
    "TokenRequest",
    "ToolCall",
]
