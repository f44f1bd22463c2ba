"""Wall-clock timestamps with microsecond resolution."""

from __future__ import annotations

import calendar
import datetime as _dt
import enum
import time
from dataclasses import dataclass

_USEC_PER_SEC = 1_000_000


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


class TimeFormat(enum.Enum):
    """Output layouts for timestamps."""

    DEFAULT = "%Y-%m-%d %H:%M:%S"
    COMPACT = "%y%m%d %H%M:%S"
    FILENAME = "%Y%m%d_%H%M_%S"


@dataclass(frozen=True)
class DateTime:
    """Seconds and microseconds since the Unix epoch."""

    sec: int = 0
    usec: int = 0

    @classmethod
    def now(cls) -> "DateTime":
        ns = time.time_ns()
        return cls(ns // 1_000_000_000, (ns // 1000) % _USEC_PER_SEC)

    @classmethod
    def from_ms(cls, ms: int) -> "DateTime":
        """Build an offset from milliseconds, truncating toward zero."""
        return cls(_trunc_div(ms, 1000), _trunc_mod(ms, 1000) * 1000)

    @classmethod
    def from_string(cls, text: str) -> "DateTime":
        """Parse ``YYYY-MM-DD[T ]HH:MM:SS[.mmm]`` as UTC.

        Raises ValueError when the text cannot be parsed or the milliseconds
        are not three digits. Text without milliseconds gives zero of them.
        """
        if len(text) < 19:
            raise ValueError(f"failure parsing time string: {text!r}")
        if text[10] == "T":
            text = text[:10] + " " + text[11:]
        try:
            parsed = _dt.datetime.strptime(text[:19], "%Y-%m-%d %H:%M:%S")
        except ValueError as exc:
            raise ValueError(f"failure parsing time string: {text!r}") from exc
        sec = calendar.timegm(parsed.timetuple())
        usec = 0
        if len(text) > 22:
            digits = text[20:23]
            if not (len(digits) == 3 and all("0" <= c <= "9" for c in digits)):
                raise ValueError(f"invalid milliseconds in: {text!r}")
            usec = int(digits) * 1000
        return cls(sec, usec)

    def is_set(self) -> bool:
        return self.sec > 0 or self.usec > 0

    def as_ms(self) -> int:
        return self.sec * 1000 + _trunc_div(self.usec, 1000)

    def as_ts(self) -> tuple[int, int]:
        """Return ``(seconds, nanoseconds)``."""
        return self.sec, self.usec * 1000

    def diff_ms(self, other: "DateTime") -> int:
        return self.as_ms() - other.as_ms()

    def _format(self, tm: time.struct_time, fmt: TimeFormat) -> str:
        base = time.strftime(fmt.value, tm)
        ms = _trunc_div(self.usec, 1000)
        sep = "_" if fmt is TimeFormat.FILENAME else "."
        return f"{base}{sep}{ms:03d}"

    def as_gmt_str(self, fmt: TimeFormat = TimeFormat.DEFAULT) -> str:
        return self._format(time.gmtime(self.sec), fmt)

    def as_local_str(self, fmt: TimeFormat = TimeFormat.DEFAULT) -> str:
        return self._format(time.localtime(self.sec), fmt)

    def __add__(self, other: "DateTime") -> "DateTime":
        if not isinstance(other, DateTime):
            return NotImplemented
        sec = self.sec + other.sec
        usec = self.usec + other.usec
        if usec > _USEC_PER_SEC:
            usec -= _USEC_PER_SEC
            sec += 1
        return DateTime(sec, usec)

    def __sub__(self, other: "DateTime") -> "DateTime":
        if not isinstance(other, DateTime):
            return NotImplemented
        sec = self.sec - other.sec
        usec = self.usec - other.usec
        if usec < 0:
            usec += _USEC_PER_SEC
            sec -= 1
        return DateTime(sec, usec)