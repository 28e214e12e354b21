"""Reference-counted shared values: single-threaded Rc and thread-safe Arc."""

from __future__ import annotations

import threading
from typing import Any

_EMPTY = object()


class _Block:
    """Shared allocation holding the value and its reference count."""

    __slots__ = ("references", "value")

    def __init__(self, value: Any) -> None:
        self.references = 1
        self.value = value

    def incr(self) -> int:
        self.references += 1
        return self.references

    def decr(self) -> int:
        self.references -= 1
        return self.references

    def load(self) -> int:
        return self.references


class _AtomicBlock(_Block):
    """Shared allocation whose reference count is updated under a lock."""

    __slots__ = ("_lock",)

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self._lock = threading.Lock()

    def incr(self) -> int:
        with self._lock:
            self.references += 1
            return self.references

    def decr(self) -> int:
        with self._lock:
            self.references -= 1
            return self.references

    def load(self) -> int:
        with self._lock:
            return self.references


def _release(block: _Block | None) -> None:
    if block is not None and block.decr() == 0:
        block.value = None


def _describe(label: str, block: _Block | None) -> str:
    if block is None:
        return f"{label}{{null}}"
    return f"{label}[{block.load()}]{{{block.value}}}"


class Rc:
    """Single-threaded reference-counted handle."""

    def __init__(self, value: Any = _EMPTY) -> None:
        self._block: _Block | None = None if value is _EMPTY else _Block(value)

    def dup(self) -> Rc:
        """New handle to the same value, adding a reference."""
        ret = Rc()
        if self._block is not None:
            self._block.incr()
            ret._block = self._block
        return ret

    def take(self) -> Rc:
        """Move the reference into a new handle, leaving this one empty."""
        ret = Rc()
        ret._block, self._block = self._block, None
        return ret

    def clear(self) -> None:
        """Drop this handle's reference, leaving it empty."""
        block, self._block = self._block, None
        _release(block)

    def references(self) -> int:
        """Number of handles sharing the value, or 0 when empty."""
        return self._block.load() if self._block is not None else 0

    def value(self) -> Any:
        """The shared value; raises ValueError when the handle is empty."""
        if self._block is None:
            raise ValueError("empty Rc")
        return self._block.value

    def __del__(self) -> None:
        if getattr(self, "_block", None) is not None:
            self.clear()

    def __bool__(self) -> bool:
        return self._block is not None

    def __str__(self) -> str:
        return _describe("Rc", self._block)


class Arc:
    """Reference-counted handle whose count may be shared between threads."""

    def __init__(self, value: Any = _EMPTY) -> None:
        self._block: _AtomicBlock | None = None if value is _EMPTY else _AtomicBlock(value)

    def dup(self) -> Arc:
        """New handle to the same value, adding a reference."""
        ret = Arc()
        if self._block is not None:
            self._block.incr()
            ret._block = self._block
        return ret

    def take(self) -> Arc:
        """Move the reference into a new handle, leaving this one empty."""
        ret = Arc()
        ret._block, self._block = self._block, None
        return ret

    def clear(self) -> None:
        """Drop this handle's reference, leaving it empty."""
        block, self._block = self._block, None
        _release(block)

    def references(self) -> int:
        """Number of handles sharing the value, or 0 when empty."""
        return self._block.load() if self._block is not None else 0

    def value(self) -> Any:
        """The shared value; raises ValueError when the handle is empty."""
        if self._block is None:
            raise ValueError("empty Arc")
        return self._block.value

    def __del__(self) -> None:
        if getattr(self, "_block", None) is not None:
            self.clear()

    def __bool__(self) -> bool:
        return self._block is not None

    def __str__(self) -> str:
        return _describe("Arc", self._block)