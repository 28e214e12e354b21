"""Thread primitives: atomics, one-shot flags, mutexes, condition variables and timing."""

from __future__ import annotations

import os
import threading
import time
from collections import deque
from typing import Any

_PERF_FREQUENCY = 1_000_000_000


class Atomic:
    """Integer whose updates are indivisible across threads."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def load(self) -> int:
        """Current value."""
        with self._lock:
            return self._value

    def incr(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def decr(self) -> int:
        """Subtract one and return the new value."""
        with self._lock:
            self._value -= 1
            return self._value

    def exchange(self, value: int) -> int:
        """Store ``value`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = value
            return old

    def compare_and_swap(self, compare_with: int, set_to: int) -> int:
        """Store ``set_to`` if the value equals ``compare_with``; return the previous value."""
        with self._lock:
            old = self._value
            if old == compare_with:
                self._value = set_to
            return old

    def __str__(self) -> str:
        return f"Atomic{{{self.load()}}}"


class Flag:
    """Flag that stays raised once signalled; waiters block until it is."""

    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition(threading.Lock())

    def block(self) -> None:
        """Wait until the flag has been signalled at least once."""
        with self._cond:
            while self._count == 0:
                self._cond.wait()

    def signal(self) -> None:
        """Raise the flag and wake every waiter."""
        with self._cond:
            self._count += 1
            self._cond.notify_all()

    def ready(self) -> bool:
        """True once the flag has been signalled."""
        with self._cond:
            return self._count != 0


class Mutex:
    """Non-recursive mutual exclusion lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the lock; raises RuntimeError when it is not held."""
        self._lock.release()

    def try_lock(self) -> bool:
        """Take the lock without waiting; returns whether it was taken."""
        return self._lock.acquire(blocking=False)

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.unlock()


class Cond:
    """Condition variable usable with any Mutex."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._waiters: deque[threading.Lock] = deque()

    def wait(self, mutex: Mutex) -> None:
        """Release ``mutex``, wait for a signal, then take ``mutex`` again."""
        waiter = threading.Lock()
        waiter.acquire()
        with self._lock:
            self._waiters.append(waiter)
        try:
            mutex.unlock()
        except RuntimeError:
            with self._lock:
                self._waiters.remove(waiter)
            raise
        try:
            waiter.acquire()
        finally:
            mutex.lock()

    def signal(self) -> None:
        """Wake one waiter, if any."""
        with self._lock:
            if self._waiters:
                self._waiters.popleft().release()

    def broadcast(self) -> None:
        """Wake every waiter."""
        with self._lock:
            while self._waiters:
                self._waiters.popleft().release()


def sleep(ms: int) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(ms / 1000)


def this_id() -> int:
    """Operating-system identifier of the calling thread."""
    return threading.get_native_id()


def perf_counter() -> int:
    """High-resolution monotonic tick count."""
    return time.perf_counter_ns()


def perf_frequency() -> int:
    """Ticks of perf_counter per second."""
    return _PERF_FREQUENCY


def hardware_threads() -> int:
    """Number of logical processors."""
    return os.cpu_count() or 1