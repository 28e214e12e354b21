"""Deferred-construction slot holding at most one value of a given type."""

from __future__ import annotations

from typing import Any

_EMPTY = object()


class Storage:
    """Slot for a value of ``kind`` that is built and torn down explicitly."""

    def __init__(self, kind: type, *args: Any) -> None:
        self._kind = kind
        self._value: Any = _EMPTY
        if args:
            self.construct(*args)

    def construct(self, *args: Any, **kwargs: Any) -> Any:
        """Build a value of ``kind`` from the arguments and return it."""
        self._value = self._kind(*args, **kwargs)
        return self._value

    def destruct(self) -> None:
        """Drop the held value; raises RuntimeError when nothing is held."""
        if self._value is _EMPTY:
            raise RuntimeError("destruct of empty storage")
        self._value = _EMPTY

    def value(self) -> Any:
        """The held value; raises RuntimeError when nothing is held."""
        if self._value is _EMPTY:
            raise RuntimeError("access to empty storage")
        return self._value

    def constructed(self) -> bool:
        return self._value is not _EMPTY

    def __str__(self) -> str:
        return f"Storage<{self._kind.__name__}>"