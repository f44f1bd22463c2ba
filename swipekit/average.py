"""Running averages."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from swipekit.timer import Clock, Timer, global_time_ms


class Average:
    """Mean of every value added."""

    def __init__(self) -> None:
        self.count = 0
        self.total = 0.0

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value

    def add_n(self, value: float, n: int) -> None:
        """Add ``value`` as if it had been added ``n`` times."""
        self.count += n
        self.total += value * n

    def average(self) -> float:
        """Return the mean, or -1 when nothing has been added."""
        if self.count == 0:
            return -1
        return self.total / self.count

    def reset(self) -> None:
        self.total = 0.0
        self.count = 0


class RecentAverageTotalPerSecond:
    """Tracks a running total and its rate per second."""

    def __init__(self, clock: Clock = global_time_ms) -> None:
        self._previous_result = -1.0
        self._last_second_total = 0.0
        self.total = 0.0
        self._av = Average()
        self._timer = Timer(clock)
        self._total_time = Timer(clock)

    def add(self, value: float) -> None:
        self._last_second_total += value
        self.total += value

    def latest_average_per_second(self) -> float:
        """Rate over the latest window; recomputed once over 500 ms have passed."""
        if self._timer.time_passed_ms() > 500:
            elapsed = self._timer.time_passed_and_reset()
            self._previous_result = (self._last_second_total * 1000.0) / elapsed
            self._last_second_total = 0.0
        self._av.add(self._previous_result)
        return self._previous_result

    def average_per_second(self) -> float:
        """Rate since creation, or -1 when no time has passed."""
        passed = self._total_time.time_passed_ms()
        if passed == 0:
            return -1
        return (self.total * 1000.0) / passed


class LimitedAverage:
    """Mean of the most recent ``size`` values."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._recent: deque[float] = deque()
        self.count = 0
        self.total = 0

    def reset(self) -> None:
        self.count = 0
        self.total = 0
        self._recent.clear()

    def add(self, value: float) -> None:
        self.count += 1
        self.total += value
        if len(self._recent) >= self.size:
            self.total -= self._recent.popleft()
        self._recent.append(value)

    def average(self) -> float:
        """Return the windowed mean, or -1 when nothing has been added."""
        if self.count == 0:
            return -1
        return self.total / min(self.count, self.size)


@dataclass
class WeightedAverage:
    """Exponentially decaying sum: each add multiplies the old value by ``mul``."""

    mul: float
    av: float = 0.0

    def add(self, value: float) -> None:
        self.av = self.av * self.mul + value