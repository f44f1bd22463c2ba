"""Millisecond timers."""

from __future__ import annotations

import time
from typing import Callable

from swipekit.textutils import format_with_commas

Clock = Callable[[], int]


def global_time_ms() -> int:
    """Current monotonic time in milliseconds."""
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Measures milliseconds passed since it was started or reset."""

    def __init__(self, clock: Clock = global_time_ms, start_ms: int | None = None):
        self._clock = clock
        self.start_ms = clock() if start_ms is None else start_ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timer):
            return NotImplemented
        return self.start_ms == other.start_ms

    def __repr__(self) -> str:
        return f"Timer(start_ms={self.start_ms})"

    def reset(self) -> None:
        self.start_ms = self._clock()

    def time_passed_ms(self) -> int:
        return self._clock() - self.start_ms

    def time_passed_str(self) -> str:
        return format_with_commas(self.time_passed_ms())

    def time_passed_and_reset(self) -> int:
        """Return time passed and restart, reading the clock only once."""
        now = self._clock()
        result = now - self.start_ms
        self.start_ms = now
        return result

    def set_time_passed_ms(self, ms: int) -> None:
        self.start_ms = self._clock() - ms

    def add_time_passed_ms(self, ms: int) -> None:
        self.start_ms -= ms


class CountdownTimer:
    """Counts down from a given number of milliseconds."""

    def __init__(self, time_ms: int, clock: Clock = global_time_ms):
        self.timer = Timer(clock)
        self.reset(time_ms)

    def reset(self, time_ms: int) -> None:
        self.timer.set_time_passed_ms(-time_ms)

    def is_finished(self) -> bool:
        return self.timer.time_passed_ms() >= 0

    def top_up(self, ms: int) -> None:
        self.timer.add_time_passed_ms(-ms)

    def advance(self, ms: int) -> None:
        self.timer.add_time_passed_ms(ms)

    def time_remaining(self) -> int:
        return -self.timer.time_passed_ms()