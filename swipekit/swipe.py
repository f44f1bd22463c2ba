"""Swipe-keyboard points and key labels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

PI = 3.14159265

KEY_LABELS = (
    "q", "w", "e", "r", "t", "y", "u", "i", "o", "p", "@", "?",
    "a", "s", "d", "f", "g", "h", "j", "k", "l", ".",
    "z", "x", "c", "v", "b", "n", "m", "!", "ਯ",
)
KEY_LABELS_SHIFT = (
    "Q", "W", "E", "R", "T", "Y", "U", "I", "O", "P", "@", "?",
    "A", "S", "D", "F", "G", "H", "J", "K", "L", ".",
    "Z", "X", "C", "V", "B", "N", "M", "!", "ਞ",
)
KEY_LABELS_ALT = (
    "1", "2", "3", "4", "5", "6", "7", "8", "9", "0", "*", "[",
    "]", "/", ":", "(", ")", "#", "$", "%", "'", '"',
    "{", "}", "-", "+", "=", ";", "<", ">",
)
ALT_LABEL = "123"
RETURN_LABEL = "return"
SPACE_LABEL = "space"


def key_labels(shift: bool = False, alt: bool = False) -> tuple[str, ...]:
    """Return the character key labels for the given keyboard mode."""
    if alt:
        return KEY_LABELS_ALT
    if shift:
        return KEY_LABELS_SHIFT
    return KEY_LABELS


class SwipeDelta(NamedTuple):
    velocity: float
    distance: int
    time_ms: int


@dataclass
class SwipePoint:
    """One sampled point of a swipe gesture."""

    x: float = 0.0
    y: float = 0.0
    ms: int = 0
    cnt: int = 0
    key: int = -1
    velocity: float = 0.0
    dist: float = 0.0
    angle: int = 0

    def compare_with(self, prev: "SwipePoint", time_ms: int) -> SwipeDelta:
        """Update distance, velocity and angle relative to ``prev``.

        Non-positive times are treated as 1 ms.
        """
        dx = int(self.x - prev.x)
        dy = int(self.y - prev.y)
        if time_ms <= 0:
            time_ms = 1
        self.dist = math.sqrt(dx * dx + dy * dy)
        self.velocity = self.dist / time_ms
        self.angle = int(math.atan2(dy, dx) * 180.0 / PI)
        return SwipeDelta(self.velocity, int(self.dist), time_ms)