"""Token counting utilities."""

from __future__ import annotations

from functools import lru_cache

import structlog
import tiktoken

from promptcount.config import get_settings
from promptcount.errors import TokenizerUnavailableError

logger = structlog.get_logger()


@lru_cache(maxsize=16)
def get_encoding(model: str) -> tiktoken.Encoding:
    """Return the tiktoken encoding for a model.

    Raises TokenizerUnavailableError if tiktoken does not know the model or
    cannot load its BPE ranks.
    """
    try:
        return tiktoken.encoding_for_model(model)
    except (KeyError, ValueError, OSError) as e:
        logger.warning("tokenizer_unavailable", model=model, error=str(e))
        raise TokenizerUnavailableError(
            f"failed to get encoding for model {model}: {e}", model=model
        ) from e


def encoded_length(encoding: tiktoken.Encoding, text: str) -> int:
    """Number of tokens in text; special-token markers count as plain text."""
    if not text:
        return 0
    return len(encoding.encode(text, disallowed_special=()))


def count_tokens(text: str, model: str | None = None) -> int:
    """Count tokens in text using tiktoken."""
    if not text:
        return 0
    return encoded_length(get_encoding(model or get_settings().default_model), text)
