"""Frame timer that tracks running, paused and per-frame durations."""

from __future__ import annotations

import enum
import time
from typing import Callable

__all__ = ["GameTimerState", "GameTimer"]

Clock = Callable[[], float]


class GameTimerState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class GameTimer:
    """Accumulates elapsed time on every :meth:`tick`.

    :meth:`stop` and :meth:`start` only request a state change; it takes
    effect on the next tick, and the interval that tick measures is still
    counted in the old state.
    """

    def __init__(
        self,
        state: GameTimerState = GameTimerState.RUNNING,
        clock: Clock = time.monotonic,
    ) -> None:
        self._clock = clock
        self._state = state
        self._curr = clock()
        self._delta = 0.0
        self._running = 0.0
        self._paused = 0.0
        self._start_requested = False
        self._stop_requested = False

    @property
    def state(self) -> GameTimerState:
        return self._state

    def total_time(self) -> float:
        """Seconds counted so far, running and paused together."""
        return self._paused + self._running

    def running_total_time(self) -> float:
        """Seconds counted while running."""
        return self._running

    def paused_total_time(self) -> float:
        """Seconds counted while paused."""
        return self._paused

    def delta_time(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta

    def start(self) -> None:
        """Request resuming; has effect only while paused."""
        self._stop_requested = False
        if not self._start_requested and self._state is GameTimerState.PAUSED:
            self._start_requested = True

    def stop(self) -> None:
        """Request pausing; has effect only while running."""
        self._start_requested = False
        if not self._stop_requested and self._state is GameTimerState.RUNNING:
            self._stop_requested = True

    def tick(self) -> None:
        """Measure the time since the previous tick; call once per frame."""
        prev, self._curr = self._curr, self._clock()
        self._delta = self._curr - prev

        if self._state is GameTimerState.RUNNING:
            if self._stop_requested:
                self._state = GameTimerState.PAUSED
                self._stop_requested = False
            self._running += self._delta
        else:
            if self._start_requested:
                self._state = GameTimerState.RUNNING
                self._start_requested = False
            self._paused += self._delta