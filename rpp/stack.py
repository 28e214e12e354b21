"""A last-in, first-out stack."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any


def _clone_item(item: Any) -> Any:
    clone = getattr(item, "clone", None)
    return clone() if callable(clone) else copy.copy(item)


class Stack:
    """Stack whose iteration runs from bottom to top."""

    def __init__(self, *args: Any) -> None:
        self._data: list[Any] = list(args)

    def push(self, value: Any) -> Any:
        """Push a value and return it."""
        self._data.append(value)
        return value

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._data:
            raise IndexError("pop from empty stack")
        return self._data.pop()

    def top(self) -> Any:
        """The most recently pushed value."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def clear(self) -> None:
        self._data.clear()

    def clone(self) -> Stack:
        """Independent copy with each element cloned."""
        return Stack(*(_clone_item(item) for item in self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __str__(self) -> str:
        return "Stack[" + ", ".join(str(item) for item in self._data) + "]"