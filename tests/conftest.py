"""Shared test fixtures and configuration.

Keeps every test away from the real config and log directories.
"""

from __future__ import annotations

import logging
import logging.handlers
import random
from unittest.mock import patch

import pytest

from pomodorable.models.focus.cycling import IntervalCycle
from pomodorable.models.focus.settings import Settings
from pomodorable.models.focus.timer import FocusTimer


def _drop_file_handlers() -> None:
    """Close and detach the rotating log file handler, leaving capture handlers."""
    app_logger = logging.getLogger("pomodorable")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset cached singletons."""
    import pomodorable.utils.logger as logger_mod
    from pomodorable.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    original_root = logger_mod._root
    logger_mod._root = None
    _drop_file_handlers()

    with patch(
        "pomodorable.services.config_service.user_config_dir",
        return_value=str(config_dir),
    ):
        with patch("pomodorable.utils.logger.user_log_dir", return_value=str(log_dir)):
            yield tmp_path

    get_config_service.cache_clear()
    _drop_file_handlers()
    logger_mod._root = original_root


@pytest.fixture()
def settings() -> Settings:
    """Small settings so scenarios stay readable: 2/1/3 minutes, every 2nd, 5 total."""
    return Settings(
        focus_length=2,
        short_break_length=1,
        long_break_length=3,
        long_break_interval=2,
        interval_target=5,
    )


@pytest.fixture()
def cycle(settings) -> IntervalCycle:
    return IntervalCycle.with_settings(settings, rng=random.Random(42))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def timer(cycle, clock) -> FocusTimer:
    return FocusTimer(cycle, clock=clock)
