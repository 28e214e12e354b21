"""Eagerly started coroutine tasks that can await one another, and waitable events."""

from __future__ import annotations

import threading
from collections.abc import Coroutine, Iterable, Iterator
from typing import Any

from .sync import Flag

_SUSPEND = object()


class Suspend:
    """Awaitable that always suspends; the task continues on the next resume."""

    def __await__(self) -> Iterator[Any]:
        yield _SUSPEND


class Continue:
    """Awaitable that never suspends."""

    def __await__(self) -> Iterator[Any]:
        return iter(())


class Task:
    """Coroutine that starts running immediately and runs until it suspends.

    A task awaiting another unfinished task is resumed by the awaited task
    when it completes.
    """

    def __init__(self, coro: Coroutine[Any, Any, Any] | None = None) -> None:
        if coro is not None and not hasattr(coro, "send"):
            raise TypeError(f"expected a coroutine, not {type(coro).__name__}")
        self._coro = coro
        self._lock = threading.Lock()
        self._done = False
        self._continuation: Task | None = None
        self._result: Any = None
        self._error: BaseException | None = None
        self._flag = Flag()
        if coro is not None:
            self._run()

    def _run(self) -> None:
        assert self._coro is not None
        pending: BaseException | None = None
        while True:
            try:
                if pending is None:
                    signal = self._coro.send(None)
                else:
                    exc, pending = pending, None
                    signal = self._coro.throw(exc)
            except StopIteration as stop:
                self._complete(stop.value, None)
                return
            except Exception as exc:
                self._complete(None, exc)
                return
            if signal is _SUSPEND:
                return
            if isinstance(signal, Task):
                try:
                    if signal._subscribe(self):
                        return
                except RuntimeError as exc:
                    pending = exc
                continue
            pending = TypeError(f"cannot await {signal!r} inside a Task")

    def _subscribe(self, continuation: Task) -> bool:
        with self._lock:
            if self._done:
                return False
            if self._continuation is not None:
                raise RuntimeError("task is already being awaited")
            self._continuation = continuation
            return True

    def _complete(self, value: Any, error: BaseException | None) -> None:
        with self._lock:
            self._result = value
            self._error = error
            self._done = True
            continuation, self._continuation = self._continuation, None
        self._flag.signal()
        if continuation is not None:
            continuation._run()

    def _outcome(self) -> Any:
        if self._error is not None:
            raise self._error
        return self._result

    def _require(self) -> None:
        if self._coro is None:
            raise RuntimeError("empty task")

    def resume(self) -> None:
        """Continue a suspended task; raises RuntimeError if it has finished."""
        self._require()
        if self.done():
            raise RuntimeError("resume of a finished task")
        self._run()

    def done(self) -> bool:
        """True once the coroutine has returned."""
        self._require()
        with self._lock:
            return self._done

    def block(self) -> Any:
        """Wait for the task to finish and return its result."""
        self._require()
        self._flag.block()
        return self._outcome()

    def __await__(self) -> Iterator[Any]:
        self._require()
        if not self.done():
            yield self
        return self._outcome()

    def __bool__(self) -> bool:
        return self._coro is not None


class Event:
    """Manual-reset event: stays signalled until reset."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._signalled = False
        self._waiters: list[threading.Event] = []

    def signal(self) -> None:
        """Set the event and wake anyone waiting on it."""
        with self._lock:
            self._signalled = True
            waiters = list(self._waiters)
        for waiter in waiters:
            waiter.set()

    def reset(self) -> None:
        """Clear the event."""
        with self._lock:
            self._signalled = False

    def try_wait(self) -> bool:
        """True if the event is currently signalled."""
        with self._lock:
            return self._signalled

    @staticmethod
    def wait_any(events: Iterable[Event]) -> int:
        """Block until one event is signalled; return the lowest signalled index."""
        events = list(events)
        if not events:
            raise ValueError("wait_any needs at least one event")
        wake = threading.Event()
        for event in events:
            with event._lock:
                event._waiters.append(wake)
        try:
            while True:
                for index, event in enumerate(events):
                    if event.try_wait():
                        return index
                wake.wait()
                wake.clear()
        finally:
            for event in events:
                with event._lock:
                    event._waiters.remove(wake)