"""Pomodorable - a terminal Pomodoro focus timer."""

__version__ = "0.1.0"
