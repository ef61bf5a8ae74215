"""Prompt token estimation for LLM chat completion requests."""

from promptcount.config import Settings, get_settings
from promptcount.costs import FALLBACK_RULES, MODEL_COSTS, FixedTokenCost, resolve_model
from promptcount.errors import (
    InvalidRequestError,
    NormalizationError,
    TokenCountError,
    TokenizerUnavailableError,
    UnsupportedModelError,
)
from promptcount.token_counter import (
    count_messages_tokens,
    count_prompt_tokens,
    to_token_request,
)
from promptcount.utils.tokens import count_tokens

__all__ = [
    "FALLBACK_RULES",
    "FixedTokenCost",
    "InvalidRequestError",
    "MODEL_COSTS",
    "NormalizationError",
    "Settings",
    "TokenCountError",
    "TokenizerUnavailableError",
    "UnsupportedModelError",
    "count_messages_tokens",
    "count_prompt_tokens",
    "count_tokens",
    "get_settings",
    "resolve_model",
    "to_token_request",
]
