"""Session settings for the Pomodoro cycle."""

from dataclasses import dataclass
from datetime import timedelta

DEFAULT_FOCUS_LENGTH = 25  # minutes
DEFAULT_SHORT_BREAK_LENGTH = 5  # minutes
DEFAULT_LONG_BREAK_LENGTH = 30  # minutes
DEFAULT_LONG_BREAK_INTERVAL = 4
DEFAULT_INTERVAL_TARGET = 10


@dataclass(frozen=True)
class Settings:
    """Phase lengths and cycle targets for one session.

    Lengths are whole minutes. Every ``long_break_interval``-th completed
    focus interval is followed by a long break, and the session finishes
    after ``interval_target`` focus intervals.
    """

    focus_length: int = DEFAULT_FOCUS_LENGTH
    short_break_length: int = DEFAULT_SHORT_BREAK_LENGTH
    long_break_length: int = DEFAULT_LONG_BREAK_LENGTH
    long_break_interval: int = DEFAULT_LONG_BREAK_INTERVAL
    interval_target: int = DEFAULT_INTERVAL_TARGET

    def __post_init__(self) -> None:
        for name in ("focus_length", "short_break_length", "long_break_length"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be greater than zero")
        if self.long_break_interval < 1:
            raise ValueError("long_break_interval must be at least 1")
        if self.interval_target < 1:
            raise ValueError("interval_target must be at least 1")

    @property
    def focus_duration(self) -> timedelta:
        return timedelta(minutes=self.focus_length)

    @property
    def short_break_duration(self) -> timedelta:
        return timedelta(minutes=self.short_break_length)

    @property
    def long_break_duration(self) -> timedelta:
        return timedelta(minutes=self.long_break_length)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "focus_length": self.focus_length,
            "short_break_length": self.short_break_length,
            "long_break_length": self.long_break_length,
            "long_break_interval": self.long_break_interval,
            "interval_target": self.interval_target,
        }
