"""Locks, a read/write mutex and a condition variable."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from swipekit.timer import Timer

LONG_LOCK_HOLD_THRESHOLD_MS = 350

Predicate = Callable[[], Any]


class Lock:
    """Scoped holder of a mutex.

    ``mutex`` may be None, in which case locking and unlocking only change the
    holder's own state. Used as a context manager, the mutex is held for the
    body of the ``with`` block and released on exit if still held. The
    duration of the most recent hold is kept in ``last_hold_ms``.
    """

    def __init__(self, mutex: Optional[Any] = None, lock_now: bool = True) -> None:
        self._mutex = mutex
        self._locked = False
        self._hold_timer: Optional[Timer] = None
        self.last_hold_ms: Optional[int] = None
        if lock_now:
            self.lock()

    @property
    def mutex(self) -> Optional[Any]:
        return self._mutex

    def lock(self) -> None:
        if self._mutex is not None:
            self._mutex.acquire()
        self._locked = True
        self._hold_timer = Timer()

    def try_lock(self) -> bool:
        """Take the mutex without blocking; return True on success."""
        if self._mutex is None or self._mutex.acquire(blocking=False):
            self._locked = True
            self._hold_timer = Timer()
            return True
        return False

    def unlock(self) -> None:
        if not self._locked:
            raise RuntimeError("lock is not held")
        if self._mutex is not None:
            self._mutex.release()
        self._locked = False
        if self._hold_timer is not None:
            self.last_hold_ms = self._hold_timer.time_passed_ms()
            self._hold_timer = None

    def is_locked(self) -> bool:
        return self._locked

    @property
    def held_too_long(self) -> bool:
        """True when the last hold exceeded the long-hold threshold."""
        return (
            self.last_hold_ms is not None
            and self.last_hold_ms > LONG_LOCK_HOLD_THRESHOLD_MS
        )

    def __enter__(self) -> "Lock":
        if not self._locked:
            self.lock()
        return self

    def __exit__(self, *exc: object) -> None:
        if self._locked:
            self.unlock()


class ReadWriteMutex:
    """Many readers or a single writer at a time."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    def acquire_read(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer)
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("read lock is not held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("write lock is not held")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator["ReadWriteMutex"]:
        self.acquire_read()
        try:
            yield self
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator["ReadWriteMutex"]:
        self.acquire_write()
        try:
            yield self
        finally:
            self.release_write()


class Condition:
    """A condition variable bound to its own reentrant mutex.

    Hold ``mutex`` (for instance with ``Lock(cond.mutex)`` or ``with cond:``)
    while changing the state that waiters test. Waiting and notifying take the
    mutex themselves, so they may be called with or without holding it.
    """

    def __init__(self) -> None:
        self._mutex = threading.RLock()
        self._cond = threading.Condition(self._mutex)

    @property
    def mutex(self) -> Any:
        return self._mutex

    def __enter__(self) -> "Condition":
        self._mutex.acquire()
        return self

    def __exit__(self, *exc: object) -> None:
        self._mutex.release()

    def notify_one(self) -> None:
        with self._cond:
            self._cond.notify()

    def notify_all(self) -> None:
        with self._cond:
            self._cond.notify_all()

    def wait(self, predicate: Optional[Predicate] = None) -> None:
        """Wait for a notification, or until ``predicate`` returns true."""
        with self._cond:
            if predicate is None:
                self._cond.wait()
                return
            while not predicate():
                self._cond.wait()

    def wait_with_timeout(
        self, timeout_ms: int, predicate: Optional[Predicate] = None
    ) -> bool:
        """Wait with a timeout.

        Without a predicate, return True if notified and False on timeout.
        With one, keep waiting while it is false; on a timeout return its
        current value. Each wake-up starts a fresh timeout.
        """
        timeout = max(timeout_ms, 0) / 1000.0
        with self._cond:
            if predicate is None:
                return self._cond.wait(timeout)
            while not predicate():
                if not self._cond.wait(timeout):
                    return bool(predicate())
            return True