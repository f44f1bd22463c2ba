"""Fixed-capacity arrays and a fixed-capacity double-ended queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")


class StaticArray(Generic[T]):
    """A list with a fixed maximum size."""

    def __init__(self, capacity: int, values: Iterable[T] = ()) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: List[Any] = []
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"StaticArray({self.capacity}, {self._items!r})"

    def push_back(self, value: T) -> None:
        if len(self._items) >= self.capacity:
            raise IndexError(f"array is full ({self.capacity} items)")
        self._items.append(value)

    def pop_back(self) -> T:
        if not self._items:
            raise IndexError("pop from empty array")
        return self._items.pop()

    @property
    def front(self) -> T:
        if not self._items:
            raise IndexError("array is empty")
        return self._items[0]

    @property
    def back(self) -> T:
        if not self._items:
            raise IndexError("array is empty")
        return self._items[-1]

    def erase(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items down."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        del self._items[index]

    def clear(self) -> None:
        self._items.clear()

    def resize(self, new_size: int) -> None:
        """Truncate, or extend with None, to exactly ``new_size`` items."""
        if not 0 <= new_size <= self.capacity:
            raise ValueError(f"size {new_size} outside 0..{self.capacity}")
        if new_size < len(self._items):
            del self._items[new_size:]
        else:
            self._items.extend([None] * (new_size - len(self._items)))


class AppendOnlyArray(Generic[T]):
    """Fixed-capacity array that many threads may append to while others read.

    Iteration yields items from the start up to the first slot not yet written.
    """

    def __init__(self, capacity: int, values: Iterable[T] = ()) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: List[Any] = [None] * capacity
        self._written = [False] * capacity
        self._last_write_pos = -1
        self._lock = threading.Lock()
        for value in values:
            self.push_back(value)

    def push_back(self, value: T) -> None:
        with self._lock:
            if self._last_write_pos + 1 >= self.capacity:
                raise IndexError(f"array is full ({self.capacity} items)")
            self._last_write_pos += 1
            pos = self._last_write_pos
        self._items[pos] = value
        self._written[pos] = True

    def has_value_at(self, index: int) -> bool:
        if not 0 <= index < self.capacity:
            return False
        return self._written[index]

    def __getitem__(self, index: int) -> T:
        if not self.has_value_at(index):
            raise IndexError(f"no value at index {index}")
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        index = 0
        while self.has_value_at(index):
            yield self._items[index]
            index += 1


class StaticDeque(Generic[T]):
    """Double-ended queue with a fixed capacity that must be a power of two."""

    def __init__(self, capacity: int, values: Iterable[T] = ()) -> None:
        _check_capacity(capacity)
        if capacity & (capacity - 1):
            raise ValueError(f"capacity must be a power of two, got {capacity}")
        self.capacity = capacity
        self._items: Deque[T] = deque()
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def _check_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise IndexError(f"deque is full ({self.capacity} items)")

    def push_back(self, value: T) -> None:
        self._check_room()
        self._items.append(value)

    def push_front(self, value: T) -> None:
        self._check_room()
        self._items.appendleft(value)

    def pop_back(self) -> T:
        if not self._items:
            raise IndexError("pop from empty deque")
        return self._items.pop()

    def pop_front(self) -> T:
        if not self._items:
            raise IndexError("pop from empty deque")
        return self._items.popleft()

    def front(self) -> T:
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("deque is empty")
        return self._items[-1]

    def erase(self, index: int) -> None:
        """Remove the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        del self._items[index]

    def clear(self) -> None:
        self._items.clear()