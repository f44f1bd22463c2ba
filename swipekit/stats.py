"""Lightweight named statistics: tracked values and counted totals."""

from __future__ import annotations

import threading
from typing import ClassVar, Dict, Optional, TypeVar

from swipekit.average import Average, RecentAverageTotalPerSecond
from swipekit.static_array import AppendOnlyArray
from swipekit.textutils import to_lower
from swipekit.timer import Clock, global_time_ms

MAX_STATS = 512

BOTTLENECKS_BIG = "bottlenecks BIG"
BOTTLENECKS = "bottlenecks"
QSIZE_LOGGING = "Q-size: Logging"
CPU_USAGE = "CPU usage"


class Stat:
    """Tracks the count, last value and average of a named value."""

    def __init__(self, msg: str) -> None:
        self.msg = msg
        self._av = Average()
        self.last_value: float = -1

    def __repr__(self) -> str:
        return f"Stat({self.msg!r})"

    def add_value(self, value: float) -> None:
        self.last_value = value
        self._av.add(value)

    def average(self) -> float:
        """Mean of the values added, or -1 before any."""
        return self._av.average()

    @property
    def count(self) -> int:
        return self._av.count


class StatCount:
    """Tracks a named running total and how often it was added to, per second."""

    def __init__(self, msg: str, clock: Clock = global_time_ms) -> None:
        self.msg = msg
        self._total_ps = RecentAverageTotalPerSecond(clock)
        self._count_ps = RecentAverageTotalPerSecond(clock)

    def __repr__(self) -> str:
        return f"StatCount({self.msg!r})"

    def add_value(self, value: float) -> None:
        self._total_ps.add(value)
        self._count_ps.add(1)

    def latest_total_per_second(self) -> float:
        return self._total_ps.latest_average_per_second()

    def latest_count_per_second(self) -> float:
        return self._count_ps.latest_average_per_second()

    def average_total_per_second(self) -> float:
        return self._total_ps.average_per_second()

    def average_count_per_second(self) -> float:
        return self._count_ps.average_per_second()

    @property
    def total(self) -> float:
        return self._total_ps.total

    @property
    def count(self) -> float:
        return self._count_ps.total


S = TypeVar("S", Stat, StatCount)


def _sync_map(source: AppendOnlyArray, target: Dict[str, S]) -> None:
    """Add entries from ``source`` not yet in ``target``, keyed by lower-cased name.

    Clashing names get trailing spaces until unique.
    """
    n = len(target)
    while source.has_value_at(n):
        stat = source[n]
        key = to_lower(stat.msg)
        while key in target:
            key += " "
        target[key] = stat
        n += 1


class Stats:
    """Registry of every Stat and StatCount."""

    _instance: ClassVar[Optional["Stats"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self.all_stats: AppendOnlyArray[Stat] = AppendOnlyArray(MAX_STATS)
        self.all_count_stats: AppendOnlyArray[StatCount] = AppendOnlyArray(MAX_STATS)
        self.map_lock = threading.RLock()
        self._stats_map: Dict[str, Stat] = {}
        self._count_stats_map: Dict[str, StatCount] = {}
        self._value_sites: Dict[str, Stat] = {}
        self._count_sites: Dict[str, StatCount] = {}
        self._sites_lock = threading.Lock()

    @classmethod
    def instance(cls) -> "Stats":
        """Return the shared registry, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def add_stat(self, stat: Stat) -> None:
        self.all_stats.push_back(stat)

    def add_count_stat(self, stat: StatCount) -> None:
        self.all_count_stats.push_back(stat)

    def stats_map(self) -> Dict[str, Stat]:
        """Every Stat keyed by lower-cased name, in key order."""
        with self.map_lock:
            _sync_map(self.all_stats, self._stats_map)
            return dict(sorted(self._stats_map.items()))

    def count_stats_map(self) -> Dict[str, StatCount]:
        """Every StatCount keyed by lower-cased name, in key order."""
        with self.map_lock:
            _sync_map(self.all_count_stats, self._count_stats_map)
            return dict(sorted(self._count_stats_map.items()))

    def stat_by_key(self, key: str) -> Optional[Stat]:
        return self.stats_map().get(to_lower(key))

    def count_stat_by_key(self, key: str) -> Optional[StatCount]:
        return self.count_stats_map().get(to_lower(key))

    def _value_stat(self, msg: str) -> Stat:
        with self._sites_lock:
            stat = self._value_sites.get(msg)
            if stat is None:
                stat = Stat(msg)
                self._value_sites[msg] = stat
                self.add_stat(stat)
            return stat

    def _count_stat(self, msg: str) -> StatCount:
        with self._sites_lock:
            stat = self._count_sites.get(msg)
            if stat is None:
                stat = StatCount(msg)
                self._count_sites[msg] = stat
                self.add_count_stat(stat)
            return stat


def stat_value(msg: str, value: float) -> Stat:
    """Record ``value`` against the shared Stat named ``msg``."""
    stat = Stats.instance()._value_stat(msg)
    stat.add_value(value)
    return stat


def stat_count(msg: str, value: float = 1) -> StatCount:
    """Add ``value`` to the shared StatCount named ``msg``."""
    stat = Stats.instance()._count_stat(msg)
    stat.add_value(value)
    return stat