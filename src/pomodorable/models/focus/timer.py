"""Elapsed-time accumulator and run/pause control on top of IntervalCycle."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from datetime import timedelta
from typing import Literal

from .cycling import IntervalCycle, Phase
from .quotes import RandomSource
from .settings import Settings

RunState = Literal["idle", "running"]


class FocusTimer:
    """Feeds host ticks into an IntervalCycle.

    The host delivers monotonic timestamps (seconds, as returned by
    time.monotonic) while the timer is running, plus the toggle, reset and
    skip commands. Elapsed time is reset to zero whenever the phase changes.
    """

    def __init__(
        self,
        cycle: IntervalCycle | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._cycle = cycle or IntervalCycle()
        self._clock = clock

        self._last_tick: float | None = None
        self._elapsed = timedelta(0)

    @classmethod
    def with_settings(
        cls,
        settings: Settings,
        *,
        rng: RandomSource | None = None,
        quotes: Mapping[str, Sequence[str]] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> FocusTimer:
        """Create a timer and its cycle from caller-supplied settings."""
        cycle = IntervalCycle.with_settings(settings, rng=rng, quotes=quotes)
        return cls(cycle, clock=clock)

    @property
    def cycle(self) -> IntervalCycle:
        return self._cycle

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    # ----- Commands -----
    def toggle(self, now: float | None = None) -> None:
        """Start or resume the timer when idle, pause it when running.

        Starting from Ready enters the first focus interval; starting from
        Finished begins a fresh session. Pausing keeps elapsed time.
        """
        if self._last_tick is not None:
            self._last_tick = None
            return

        phase = self._cycle.current_phase()
        if phase == "ready":
            self._cycle.advance()
            self._elapsed = timedelta(0)
        elif phase == "finished":
            self._cycle.reset()
            self._cycle.advance()
            self._elapsed = timedelta(0)

        self._last_tick = self._clock() if now is None else now

    def tick(self, now: float) -> bool:
        """Accumulate time up to *now*.

        Returns True when the tick moved the cycle to another phase. A
        finished session forces the timer idle.
        """
        if self._cycle.current_phase() == "finished":
            self._last_tick = None
            self._elapsed = timedelta(0)
            return False

        if self._last_tick is None:
            return False

        self._elapsed += timedelta(seconds=now - self._last_tick)
        self._last_tick = now

        if self._elapsed > self._cycle.active_phase_duration():
            self._cycle.advance()
            self._elapsed = timedelta(0)
            return True
        return False

    def reset_command(self) -> None:
        """Stop the timer and return to Ready. Nothing to do when already Ready."""
        if self._cycle.current_phase() == "ready":
            return
        self._cycle.reset()
        self._last_tick = None
        self._elapsed = timedelta(0)

    def skip_command(self) -> None:
        """Jump to the next phase, keeping the running/paused state."""
        if self._cycle.current_phase() == "finished":
            return
        self._cycle.advance()
        self._elapsed = timedelta(0)

    # ----- Queries -----
    def current_phase(self) -> Phase:
        return self._cycle.current_phase()

    def completed_intervals(self) -> int:
        return self._cycle.completed_intervals()

    def interval_target(self) -> int:
        return self._cycle.interval_target()

    def current_quote(self) -> str:
        return self._cycle.current_quote()

    def active_phase_duration(self) -> timedelta:
        return self._cycle.active_phase_duration()

    def elapsed(self) -> timedelta:
        return self._elapsed

    def is_running(self) -> bool:
        return self._last_tick is not None

    def run_state(self) -> RunState:
        return "running" if self.is_running() else "idle"

    def remaining(self) -> timedelta:
        """Time left in the active phase, never negative."""
        return max(timedelta(0), self.active_phase_duration() - self._elapsed)

    def progress(self) -> float:
        """Fraction of the active phase already elapsed, in [0, 1]."""
        duration = self.active_phase_duration()
        if duration <= timedelta(0):
            return 1.0
        return min(1.0, max(0.0, self._elapsed / duration))

    def interval_label(self) -> str:
        """1-based number of the focus interval in progress, e.g. '3/10'."""
        target = self.interval_target()
        current = min(self.completed_intervals() + 1, target)
        return f"{current}/{target}"
