"""Prompt token estimation for chat completion requests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from promptcount.config import Settings, get_settings
from promptcount.costs import resolve_model
from promptcount.errors import (
    InvalidRequestError,
    NormalizationError,
    TokenizerUnavailableError,
)
from promptcount.schemas.chat import (
    ChatCompletionRequest,
    ChatMessage,
    TokenMessage,
    TokenRequest,
)
from promptcount.tool_costs import ToolDefinitionCounter
from promptcount.utils.tokens import encoded_length, get_encoding

logger = structlog.get_logger()

EncodingLoader = Callable[[str], Any]


def _to_token_message(index: int, message: ChatMessage) -> TokenMessage:
    content = message.content
    if isinstance(content, list):
        raise NormalizationError(
            f"message {index} has multi-part content, only text content can be counted"
        )
    return TokenMessage(
        name=message.name or "",
        role=message.role,
        content=content or "",
    )


def to_token_request(
    request: ChatCompletionRequest | Mapping[str, Any],
) -> TokenRequest:
    """Reduce a chat completion request to the fields that are counted.

    Only name, role and content survive for messages. Tool calls made by the
    assistant are dropped, so their tokens are not part of the estimate.
    """
    if isinstance(request, Mapping):
        try:
            request = ChatCompletionRequest.model_validate(request)
        except ValidationError as e:
            raise NormalizationError(
                f"invalid chat completion request: {e.error_count()} validation error(s)"
            ) from e
    elif not isinstance(request, ChatCompletionRequest):
        raise NormalizationError(
            f"cannot count tokens for {type(request).__name__}, "
            "expected a chat completion request"
        )

    return TokenRequest(
        messages=[_to_token_message(i, m) for i, m in enumerate(request.messages)],
        tools=request.tools or [],
    )


def count_prompt_tokens(
    model: str,
    request: ChatCompletionRequest | Mapping[str, Any] | None,
    *,
    settings: Settings | None = None,
    encoding_loader: EncodingLoader | None = None,
) -> int:
    """Estimate the prompt tokens a model will charge for a chat completion request.

    Raises:
        InvalidRequestError: request is None.
        UnsupportedModelError: no token counting method is known for the model.
        TokenizerUnavailableError: tiktoken has no encoding for the model.
        NormalizationError: the request cannot be reduced to text messages.
    """
    if request is None:
        raise InvalidRequestError("nil request, can't count tokens", model=model)

    settings = settings or get_settings()
    resolved, cost = resolve_model(model)
    try:
        encoding = (encoding_loader or get_encoding)(resolved)
    except TokenizerUnavailableError:
        raise
    except Exception as e:
        raise TokenizerUnavailableError(
            f"failed to get encoding for model {resolved}: {e}", model=resolved
        ) from e

    try:
        req = to_token_request(request)
    except NormalizationError as e:
        e.model = model
        raise

    def count(s: str) -> int:
        return encoded_length(encoding, s)

    tokens = 0
    for msg in req.messages:
        tokens += cost.message
        for s in (msg.content, msg.role, msg.name):
            tokens += count(s)
        if msg.name:
            tokens += cost.name

    if settings.count_tool_definitions:
        tokens += ToolDefinitionCounter(cost, count)(req.tools)

    logger.debug(
        "prompt_tokens_counted",
        model=model,
        resolved_model=resolved,
        messages=len(req.messages),
        tokens=tokens,
    )
    return tokens


def count_messages_tokens(
    messages: list[dict],
    model: str,
    tools: list[dict] | None = None,
    **kwargs: Any,
) -> int:
    """Estimate prompt tokens for a list of chat message dicts."""
    return count_prompt_tokens(
        model, {"messages": messages, "tools": tools}, **kwargs
    )
