"""
Settings for statement instrumentation.
Loads environment variables prefixed with ``SQLCOUNT_``.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

ListenEvent = Literal["before_cursor_execute", "after_cursor_execute"]


class Settings(BaseSettings):
    """Instrumentation settings loaded from environment variables."""

    # before_cursor_execute also counts statements the driver rejects
    listen_event: ListenEvent = "before_cursor_execute"

    # Debug logging of recorded statements
    log_statements: bool = False
    statement_preview_chars: int = Field(default=100, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="SQLCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, with keyword overrides on top."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise ConfigError(f"Invalid sqlcount settings ({fields}): {exc}") from exc
