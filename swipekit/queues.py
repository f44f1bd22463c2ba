"""Multi-producer, single-consumer FIFO queues."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class MpscQueue(Generic[T]):
    """FIFO queue that many threads may push to while one thread pops.

    Pushing never blocks. ``pop`` and ``peek`` return None when the queue is
    empty, so None itself cannot be queued.
    """

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def push(self, item: T) -> None:
        if item is None:
            raise ValueError("None cannot be queued")
        self._items.append(item)

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None when empty."""
        try:
            return self._items.popleft()
        except IndexError:
            return None

    def peek(self) -> Optional[T]:
        """Return the oldest item without removing it, or None when empty."""
        try:
            return self._items[0]
        except IndexError:
            return None

    def drain(self) -> Iterator[T]:
        """Pop items until the queue is empty."""
        while (item := self.pop()) is not None:
            yield item


class CountedQueue(Generic[T]):
    """An MpscQueue that also keeps a count of the items in it."""

    def __init__(self) -> None:
        self._queue: MpscQueue[T] = MpscQueue()
        self._count = 0
        self._count_lock = threading.Lock()
        self._read_lock = threading.Lock()

    def _adjust(self, delta: int) -> None:
        with self._count_lock:
            self._count += delta

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def push(self, item: T) -> None:
        self._queue.push(item)
        self._adjust(1)

    def pop(self) -> Optional[T]:
        item = self._queue.pop()
        if item is not None:
            self._adjust(-1)
        return item

    def pop_with_lock(self) -> Optional[T]:
        """Pop while holding a read lock, so several consumers may share it."""
        with self._read_lock:
            item = self._queue.pop()
        if item is not None:
            self._adjust(-1)
        return item

    def peek(self) -> Optional[T]:
        return self._queue.peek()