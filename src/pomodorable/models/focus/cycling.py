"""Pomodoro interval cycle: which phase is active and when the session ends."""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from datetime import timedelta
from typing import Literal

from .quotes import RandomSource, build_quote_banks, pick_quote
from .settings import Settings

Phase = Literal["ready", "focus", "short_break", "long_break", "finished"]

PHASES: tuple[Phase, ...] = ("ready", "focus", "short_break", "long_break", "finished")

PHASE_LABELS: dict[str, str] = {
    "ready": "Ready",
    "focus": "Focus",
    "short_break": "Short break",
    "long_break": "Long break",
    "finished": "Finished",
}


class IntervalCycle:
    """State machine over the phases of one Pomodoro session.

    Tracks the active phase, the number of completed focus intervals and
    the quote shown for the current phase. It has no notion of time; the
    caller decides when a phase is over and calls advance().
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: RandomSource | None = None,
        quotes: Mapping[str, Sequence[str]] | None = None,
    ):
        self._settings = settings or Settings()
        self._rng = rng or random.Random()
        self._quote_banks = build_quote_banks(quotes)

        self._phase: Phase = "ready"
        self._interval_count = 0
        self._quote = pick_quote(self._phase, self._rng, self._quote_banks)

    @classmethod
    def with_settings(
        cls,
        settings: Settings,
        *,
        rng: RandomSource | None = None,
        quotes: Mapping[str, Sequence[str]] | None = None,
    ) -> IntervalCycle:
        """Create a cycle with caller-supplied settings."""
        return cls(settings, rng=rng, quotes=quotes)

    @classmethod
    def seeded(
        cls,
        seed: int,
        settings: Settings | None = None,
        *,
        quotes: Mapping[str, Sequence[str]] | None = None,
    ) -> IntervalCycle:
        """Create a cycle whose quote picks are reproducible."""
        return cls(settings, rng=random.Random(seed), quotes=quotes)

    @property
    def settings(self) -> Settings:
        return self._settings

    def current_phase(self) -> Phase:
        return self._phase

    def completed_intervals(self) -> int:
        return self._interval_count

    def interval_target(self) -> int:
        return self._settings.interval_target

    def current_quote(self) -> str:
        return self._quote

    def active_phase_duration(self) -> timedelta:
        """Length of the active phase.

        Ready reports the focus length so a full countdown can be shown
        before the first start.
        """
        if self._phase in ("ready", "focus"):
            return self._settings.focus_duration
        if self._phase == "short_break":
            return self._settings.short_break_duration
        if self._phase == "long_break":
            return self._settings.long_break_duration
        return timedelta(0)

    def next_phase(self) -> Phase:
        """Phase that advance() would move to, without changing state."""
        if self._phase == "ready":
            return "focus"
        if self._phase == "finished":
            return "finished"
        if self._phase == "focus":
            finished_count = self._interval_count + 1
            # Session completion wins over a coincidental long break boundary
            if finished_count >= self._settings.interval_target:
                return "finished"
            if finished_count % self._settings.long_break_interval == 0:
                return "long_break"
            return "short_break"
        return "focus"

    def advance(self) -> None:
        """Move on to the next phase. A no-op once finished."""
        if self._phase == "finished":
            return

        new_phase = self.next_phase()
        if self._phase in ("short_break", "long_break"):
            self._interval_count += 1
        elif new_phase == "finished":
            # The last focus interval has no break after it
            self._interval_count += 1

        self._set_phase(new_phase)

    def reset(self) -> None:
        """Return to Ready with no completed intervals."""
        self._interval_count = 0
        self._set_phase("ready")

    def _set_phase(self, phase: Phase) -> None:
        self._phase = phase
        self._quote = pick_quote(phase, self._rng, self._quote_banks)
