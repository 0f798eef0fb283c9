"""Flavour messages shown alongside each phase."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .cycling import Phase

FALLBACK_QUOTE = "Uh oh you should not be seeing this O:"

READY_QUOTES = (
    "Welcome to Pomodorable",
    "Let's work together!",
    "Hi friend",
    "Let's get some work done!",
)

FOCUS_QUOTES = (
    "Work work",
    "Focus time",
    "Time to get stuff done!",
    "Time to be productive",
)

SHORT_BREAK_QUOTES = (
    "You deserve a short break",
    "Ahh break time",
    "Take five",
    "Remember to hydrate",
    "Remember to stretch",
)

LONG_BREAK_QUOTES = (
    "Break time!",
    "Step away from the computer for a bit",
    "You deserve some rest",
    "Go and get a snack",
)

FINISHED_QUOTES = (
    "All done, good job!",
    "Finished! Nice job!",
    "DONE! LOOK AT YOU GO!",
    "Mission complete!",
)

DEFAULT_QUOTE_BANKS: dict[str, tuple[str, ...]] = {
    "ready": READY_QUOTES,
    "focus": FOCUS_QUOTES,
    "short_break": SHORT_BREAK_QUOTES,
    "long_break": LONG_BREAK_QUOTES,
    "finished": FINISHED_QUOTES,
}


class RandomSource(Protocol):
    """Anything that can pick an element from a sequence (e.g. random.Random)."""

    def choice(self, seq: Sequence[str]) -> str: ...


def build_quote_banks(
    overrides: Mapping[str, Sequence[str]] | None = None,
) -> dict[str, tuple[str, ...]]:
    """Merge per-phase overrides on top of the default banks."""
    banks = dict(DEFAULT_QUOTE_BANKS)
    for phase, quotes in (overrides or {}).items():
        if phase not in banks:
            raise ValueError(f"Unknown phase for quotes: {phase}")
        banks[phase] = tuple(quotes)
    return banks


def pick_quote(
    phase: Phase,
    rng: RandomSource,
    banks: Mapping[str, Sequence[str]] | None = None,
) -> str:
    """Pick a quote for *phase* uniformly at random.

    Picks are independent, so repeats are allowed. An empty bank yields
    FALLBACK_QUOTE.
    """
    bank = (banks or DEFAULT_QUOTE_BANKS).get(phase, ())
    if not bank:
        return FALLBACK_QUOTE
    return rng.choice(bank)
