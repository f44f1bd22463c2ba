import threading
import time

import pytest

from swipekit.sync import Condition, Lock, ReadWriteMutex


def _in_thread(fn):
    result = []
    t = threading.Thread(target=lambda: result.append(fn()))
    t.start()
    t.join(5)
    return result[0]


def test_lock_without_mutex_tracks_state():
    lock = Lock(None)
    assert lock.is_locked()
    lock.unlock()
    assert not lock.is_locked()
    assert lock.try_lock() is True
    assert lock.is_locked()


def test_lock_not_locked_when_lock_now_false():
    mutex = threading.RLock()
    lock = Lock(mutex, lock_now=False)
    assert not lock.is_locked()
    assert _in_thread(lambda: mutex.acquire(blocking=False)) is True


def test_lock_blocks_other_threads():
    mutex = threading.RLock()
    holder = Lock(mutex)
    assert _in_thread(lambda: Lock(mutex, lock_now=False).try_lock()) is False
    holder.unlock()

    def take_and_release():
        other = Lock(mutex, lock_now=False)
        ok = other.try_lock()
        if ok:
            other.unlock()
        return ok

    assert _in_thread(take_and_release) is True


def test_lock_is_recursive_with_rlock():
    mutex = threading.RLock()
    with Lock(mutex) as outer:
        inner = Lock(mutex)
        assert inner.is_locked() and outer.is_locked()
        inner.unlock()
    assert not outer.is_locked()


def test_context_manager_releases_and_records_hold():
    mutex = threading.RLock()
    with Lock(mutex) as lock:
        pass
    assert not lock.is_locked()
    assert lock.last_hold_ms >= 0
    assert lock.held_too_long is False


def test_unlock_when_not_held_raises():
    lock = Lock(None, lock_now=False)
    with pytest.raises(RuntimeError):
        lock.unlock()


def _signalling_thread(rw_context, cond, state):
    def body():
        with rw_context():
            with cond:
                state["acquired"] = True
                cond.notify_all()

    t = threading.Thread(target=body)
    t.start()
    return t


def test_rw_multiple_readers():
    rw = ReadWriteMutex()
    cond = Condition()
    state = {"acquired": False}
    rw.acquire_read()
    t = _signalling_thread(rw.read_locked, cond, state)
    assert cond.wait_with_timeout(5000, lambda: state["acquired"]) is True
    t.join(5)
    rw.release_read()


def test_rw_writer_waits_for_readers():
    rw = ReadWriteMutex()
    cond = Condition()
    state = {"acquired": False}
    rw.acquire_read()
    t = _signalling_thread(rw.write_locked, cond, state)
    assert cond.wait_with_timeout(100, lambda: state["acquired"]) is False
    rw.release_read()
    assert cond.wait_with_timeout(5000, lambda: state["acquired"]) is True
    t.join(5)


def test_rw_reader_waits_for_writer():
    rw = ReadWriteMutex()
    cond = Condition()
    state = {"acquired": False}
    rw.acquire_write()
    t = _signalling_thread(rw.read_locked, cond, state)
    assert cond.wait_with_timeout(100, lambda: state["acquired"]) is False
    rw.release_write()
    assert cond.wait_with_timeout(5000, lambda: state["acquired"]) is True
    t.join(5)


def test_rw_release_without_hold_raises():
    rw = ReadWriteMutex()
    with pytest.raises(RuntimeError):
        rw.release_read()
    with pytest.raises(RuntimeError):
        rw.release_write()


def test_condition_wait_with_predicate():
    cond = Condition()
    flag = []

    def signal():
        time.sleep(0.05)
        with Lock(cond.mutex):
            flag.append(True)
            cond.notify_all()

    t = threading.Thread(target=signal)
    t.start()
    cond.wait(lambda: flag)
    t.join(5)
    assert flag == [True]


def test_condition_timeout_without_notification():
    cond = Condition()
    assert cond.wait_with_timeout(20) is False


def test_condition_timeout_returns_predicate_value():
    cond = Condition()
    assert cond.wait_with_timeout(20, lambda: False) is False
    assert cond.wait_with_timeout(20, lambda: True) is True


def test_condition_notify_one_wakes_waiter():
    cond = Condition()
    state = {"ready": False}

    def signal():
        time.sleep(0.05)
        with cond:
            state["ready"] = True
            cond.notify_one()

    t = threading.Thread(target=signal)
    t.start()
    assert cond.wait_with_timeout(5000, lambda: state["ready"]) is True
    t.join(5)