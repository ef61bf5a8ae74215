"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Model used by count_tokens() when the caller does not name one
    default_model: str = "gpt-3.5-turbo"

    # Experimental: add tool/function definition costs to prompt estimates.
    # The provider's encoding of tool definitions is undocumented, so the
    # numbers are approximate.
    count_tool_definitions: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
