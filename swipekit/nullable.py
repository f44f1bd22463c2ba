"""Values that may be unset."""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Nullable(Generic[T]):
    """Holds a value together with whether it has been set."""

    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._is_set = False

    @property
    def is_set(self) -> bool:
        return self._is_set

    def __bool__(self) -> bool:
        return self._is_set

    def set(self, value: T) -> None:
        self._value = value
        self._is_set = True

    def unset(self) -> None:
        self._is_set = False

    def get(self) -> T:
        """Return the value; raise LookupError when unset."""
        if not self._is_set:
            raise LookupError("value is not set")
        return self._value  # type: ignore[return-value]


class NullableBool:
    """A boolean that may be unset, with atomic compare-and-set operations."""

    _UNSET = -1

    def __init__(self) -> None:
        self._state = self._UNSET
        self._lock = threading.Lock()

    @property
    def is_set(self) -> bool:
        return self._state != self._UNSET

    def set(self, value: bool) -> None:
        self._state = 1 if value else 0

    def unset(self) -> None:
        self._state = self._UNSET

    def get(self) -> bool:
        """Return the value; an unset value reads as False."""
        return self._state == 1

    def peek(self) -> Optional[bool]:
        """Return the value, or None when unset, from a single read."""
        state = self._state
        return None if state == self._UNSET else state == 1

    def _compare_and_swap(self, old: int, new: int) -> bool:
        with self._lock:
            if self._state != old:
                return False
            self._state = new
            return True

    def unset_if_eq(self, old_value: bool) -> bool:
        """Unset if currently equal to ``old_value``; return True on success."""
        return self._compare_and_swap(1 if old_value else 0, self._UNSET)

    def set_if_unset(self, new_value: bool) -> bool:
        """Set to ``new_value`` if currently unset; return True on success."""
        return self._compare_and_swap(self._UNSET, 1 if new_value else 0)