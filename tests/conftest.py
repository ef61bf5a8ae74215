"""Shared test fixtures.

Most tests count tokens with a fake encoding (one token per
whitespace-separated word) so they run without downloading tiktoken's BPE
files. Tests that need the real encodings use the ``cl100k`` fixture,
which skips when the ranks cannot be loaded.
"""

from __future__ import annotations

import pytest
import tiktoken

from promptcount.config import Settings
from promptcount.schemas.chat import ChatCompletionRequest
from tests.fixtures import WordEncoding


# ---------------------------------------------------------------------------
# Tokenizer fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def loaded_models():
    """Model ids requested from the fake encoding loader, in call order."""
    return []


@pytest.fixture
def word_loader(loaded_models):
    """Encoding loader returning WordEncoding and recording the model."""

    def _load(model: str) -> WordEncoding:
        loaded_models.append(model)
        return WordEncoding()

    return _load


@pytest.fixture(scope="session")
def cl100k():
    """Real cl100k_base encoding, or skip when it cannot be loaded."""
    try:
        return tiktoken.get_encoding("cl100k_base")
    except Exception as e:  # offline CI
        pytest.skip(f"tiktoken ranks unavailable: {e}")


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    return Settings(count_tool_definitions=False)


@pytest.fixture
def tool_settings():
    return Settings(count_tool_definitions=True)


# ---------------------------------------------------------------------------
# Request factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_request():
    """Factory for ChatCompletionRequest instances."""

    def _make(*messages: dict, tools: list[dict] | None = None) -> ChatCompletionRequest:
        return ChatCompletionRequest.model_validate(
            {"model": "gpt-3.5-turbo", "messages": list(messages), "tools": tools}
        )

    return _make
