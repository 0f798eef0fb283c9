"""Focus mode - the Pomodoro interval cycle and its terminal host."""

from .cycling import PHASE_LABELS, PHASES, IntervalCycle, Phase
from .keyboard import KeyboardHandler, command_for_key
from .quotes import DEFAULT_QUOTE_BANKS, pick_quote
from .settings import Settings
from .timer import FocusTimer
from .ui import TimerDisplay, show_summary

__all__ = [
    "Phase",
    "PHASES",
    "PHASE_LABELS",
    "Settings",
    "IntervalCycle",
    "FocusTimer",
    "DEFAULT_QUOTE_BANKS",
    "pick_quote",
    "KeyboardHandler",
    "command_for_key",
    "TimerDisplay",
    "show_summary",
]
