"""Small string and file helpers."""

from __future__ import annotations

import datetime as _dt
from pathlib import Path

_C_WHITESPACE = " \t\n\v\f\r"


def trim(text: str) -> str:
    """Strip leading and trailing C-locale whitespace."""
    return text.strip(_C_WHITESPACE)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def format_with_commas(n: int) -> str:
    """Format an integer with a comma between each group of three digits."""
    return f"{n:,}"


def next_power_of_2(w: int) -> int:
    """Round up to a power of two, never below 16.

    Values too large to round up within a 32-bit int give 2.
    """
    w = max(w, 16)
    if w & (w - 1) == 0:
        return w
    if w > 2**30:
        return 2
    return 1 << (w - 1).bit_length()


def append_datetime_to_filename(
    filename: str, when: _dt.datetime | None = None
) -> str:
    """Insert ``_yymmdd_hhmmss`` before the last extension of ``filename``.

    A name without a dot is returned unchanged.
    """
    stem, dot, ext = filename.rpartition(".")
    if not dot:
        return filename
    when = when or _dt.datetime.now()
    stamp = when.strftime("_%y%m%d_%H%M%S")
    return f"{stem}{stamp}.{ext}"


def read_file(path: str | Path) -> str:
    """Return the whole content of a text file."""
    return Path(path).read_text(encoding="utf-8")