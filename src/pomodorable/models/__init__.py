"""Pomodorable domain models.

``focus`` holds the timer core; ``config_models`` holds the pydantic models
validating config.json.
"""

from .config_models import AppConfig, LoggingConfig, TimerConfig, UIConfig

__all__ = ["AppConfig", "TimerConfig", "UIConfig", "LoggingConfig"]
