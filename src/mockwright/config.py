"""Mockwright configuration.

All settings support environment variable overrides with MOCKWRIGHT_ prefix.

Usage:
    from mockwright.config import settings

    print(settings.default_behavior)

    # MOCKWRIGHT_DEFAULT_BEHAVIOR=strict makes new interceptors strict
"""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .behavior import MockBehavior

__all__ = ["MockSettings", "settings"]


class MockSettings(BaseSettings):
    """Configuration for interceptors and logging."""

    model_config = SettingsConfigDict(env_prefix="MOCKWRIGHT_")

    default_behavior: MockBehavior = Field(
        default=MockBehavior.NORMAL,
        description="Behavior for interceptors created without an explicit one",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )

    log_invocations: bool = Field(
        default=True,
        description="Log expectation.* and invocation.* events for every setup and call",
    )

    @field_validator("default_behavior", mode="before")
    @classmethod
    def parse_behavior(cls, value: Any) -> Any:
        # Accept "Strict", "STRICT", " strict " and so on.
        if isinstance(value, str):
            return MockBehavior(value)
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {value}")
        return level


settings = MockSettings()
