"""Errors raised while estimating prompt tokens."""

from __future__ import annotations


class TokenCountError(Exception):
    """Base class for prompt token estimation failures."""

    def __init__(self, message: str, model: str | None = None):
        super().__init__(message)
        self.model = model


class InvalidRequestError(TokenCountError, ValueError):
    """The chat completion request is missing."""


class UnsupportedModelError(TokenCountError, ValueError):
    """No fixed-cost profile is known for the model."""


class TokenizerUnavailableError(TokenCountError):
    """tiktoken could not provide an encoding for the model."""


class NormalizationError(TokenCountError):
    """The request could not be reduced to name/role/content messages."""
