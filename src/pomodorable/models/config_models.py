"""Configuration models for Pomodorable.

The on-disk config.json is validated against these models, so a bad
value written by hand or through ``pomodorable config set`` is rejected
before it reaches the timer.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from pomodorable.models.focus.cycling import PHASES
from pomodorable.models.focus.settings import (
    DEFAULT_FOCUS_LENGTH,
    DEFAULT_INTERVAL_TARGET,
    DEFAULT_LONG_BREAK_INTERVAL,
    DEFAULT_LONG_BREAK_LENGTH,
    DEFAULT_SHORT_BREAK_LENGTH,
    Settings,
)


class TimerConfig(BaseModel):
    """Phase lengths (minutes) and cycle targets."""

    focus_length: int = Field(default=DEFAULT_FOCUS_LENGTH, gt=0)
    short_break_length: int = Field(default=DEFAULT_SHORT_BREAK_LENGTH, gt=0)
    long_break_length: int = Field(default=DEFAULT_LONG_BREAK_LENGTH, gt=0)
    long_break_interval: int = Field(default=DEFAULT_LONG_BREAK_INTERVAL, ge=1)
    interval_target: int = Field(default=DEFAULT_INTERVAL_TARGET, ge=1)

    def to_settings(self, **overrides: int | None) -> Settings:
        """Build session Settings, replacing fields with non-None overrides."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**values)


class UIConfig(BaseModel):
    """Terminal display configuration."""

    refresh_interval_ms: int = Field(default=100, ge=10, le=1000)
    show_quotes: bool = Field(default=True)
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main Pomodorable configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Optional per-phase replacements for the built-in quote banks
    quotes: dict[str, list[str]] | None = None

    @field_validator("quotes")
    @classmethod
    def validate_quotes(
        cls, v: dict[str, list[str]] | None
    ) -> dict[str, list[str]] | None:
        if v is None:
            return v
        unknown = sorted(set(v) - set(PHASES))
        if unknown:
            raise ValueError(f"unknown phase(s) in quotes: {', '.join(unknown)}")
        return v
