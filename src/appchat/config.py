"""Configuration for appchat.

Values come from environment variables so the same settings work for the
CLI and for embedding applications. The CLI loads a ``.env`` file before
calling ``load_config``.

Environment variables:
    APPCHAT_ENDPOINT: Assistant endpoint URL (default: http://localhost:3000/api/ai)
    APPCHAT_PROVIDER: Initial provider (default: claude)
    APPCHAT_TIMEOUT: Request timeout in seconds (default: unset, no deadline)
    APPCHAT_LOG_LEVEL: Logging level name (default: WARNING)
"""

import os

from pydantic import BaseModel, Field, field_validator

from .session.models import DEFAULT_PROVIDER
from .transport.http import DEFAULT_ENDPOINT

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ChatConfig(BaseModel):
    """Settings for a chat session and its transport."""

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="Assistant endpoint URL")
    provider: str = Field(default=DEFAULT_PROVIDER, description="Initially selected provider")
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (None means no deadline)"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}. Supported: {', '.join(LOG_LEVELS)}")
        return level


def load_config() -> ChatConfig:
    """Build a ChatConfig from environment variables.

    Returns:
        ChatConfig with environment overrides applied

    Raises:
        ValueError: If APPCHAT_TIMEOUT is not a number or a value fails validation
    """
    overrides: dict[str, object] = {}

    endpoint = os.getenv("APPCHAT_ENDPOINT")
    if endpoint:
        overrides["endpoint"] = endpoint

    provider = os.getenv("APPCHAT_PROVIDER")
    if provider:
        overrides["provider"] = provider

    timeout = os.getenv("APPCHAT_TIMEOUT")
    if timeout:
        try:
            overrides["timeout"] = float(timeout)
        except ValueError:
            raise ValueError(f"APPCHAT_TIMEOUT must be a number of seconds, got {timeout!r}") from None

    log_level = os.getenv("APPCHAT_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level

    return ChatConfig(**overrides)
