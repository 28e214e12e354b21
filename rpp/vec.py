"""A growable vector with explicit capacity, and a read-only slice view."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Sequence
from typing import Any


def _clone_item(item: Any) -> Any:
    clone = getattr(item, "clone", None)
    return clone() if callable(clone) else copy.copy(item)


def _check_index(index: int, length: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"index must be an integer, not {type(index).__name__}")
    if index < 0:
        index += length
    if not 0 <= index < length:
        raise IndexError(f"index {index} out of range for length {length}")
    return index


def _fill(factory: Callable[[], Any] | None) -> Any:
    return factory() if factory is not None else None


class Vec:
    """Vector that tracks its capacity and doubles it when full."""

    def __init__(self, *args: Any) -> None:
        self._data: list[Any] = []
        self._capacity = 0
        self.reserve(len(args))
        for value in args:
            self.push(value)

    @classmethod
    def with_capacity(cls, capacity: int) -> Vec:
        """Empty vector with room for ``capacity`` elements."""
        if capacity < 0:
            raise ValueError(f"negative capacity {capacity}")
        ret = cls()
        ret.reserve(capacity)
        return ret

    @classmethod
    def make(cls, length: int, factory: Callable[[], Any] | None = None) -> Vec:
        """Vector of ``length`` elements, each made by ``factory``."""
        if length < 0:
            raise ValueError(f"negative length {length}")
        ret = cls()
        ret.resize(length, factory)
        return ret

    def reserve(self, capacity: int) -> None:
        """Ensure room for at least ``capacity`` elements."""
        if capacity > self._capacity:
            self._capacity = capacity

    def grow(self) -> None:
        """Double the capacity, starting from 8."""
        self.reserve(2 * self._capacity if self._capacity else 8)

    def clear(self) -> None:
        self._data.clear()

    def resize(self, length: int, factory: Callable[[], Any] | None = None) -> None:
        """Set the length, filling new slots from ``factory``."""
        if length < 0:
            raise ValueError(f"negative length {length}")
        self.reserve(length)
        if length > len(self._data):
            self._data.extend(_fill(factory) for _ in range(length - len(self._data)))
        else:
            del self._data[length:]

    def extend(self, additional: int, factory: Callable[[], Any] | None = None) -> None:
        """Grow the length by ``additional`` elements made by ``factory``."""
        self.resize(len(self._data) + additional, factory)

    def push(self, value: Any) -> Any:
        """Append a value and return it."""
        if self.full():
            self.grow()
        self._data.append(value)
        return value

    def pop(self) -> Any:
        """Remove and return the last value."""
        if not self._data:
            raise IndexError("pop from empty vec")
        return self._data.pop()

    def front(self) -> Any:
        if not self._data:
            raise IndexError("front of empty vec")
        return self._data[0]

    def back(self) -> Any:
        if not self._data:
            raise IndexError("back of empty vec")
        return self._data[-1]

    def full(self) -> bool:
        """True when the length has reached the capacity."""
        return len(self._data) == self._capacity

    def capacity(self) -> int:
        return self._capacity

    def clone(self) -> Vec:
        """Independent copy with the same capacity and each element cloned."""
        ret = Vec()
        ret._capacity = self._capacity
        ret._data = [_clone_item(item) for item in self._data]
        return ret

    def slice(self) -> Slice:
        """Read-only view over the current elements."""
        return Slice(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[_check_index(index, len(self._data))]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[_check_index(index, len(self._data))] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __str__(self) -> str:
        return "Vec[" + ", ".join(str(item) for item in self._data) + "]"


class Slice:
    """Read-only window over a contiguous run of a sequence."""

    def __init__(self, items: Sequence[Any] = ()) -> None:
        self._items = items
        self._start = 0
        self._length = len(items)

    def sub(self, start: int, length: int) -> Slice:
        """Window of ``length`` elements beginning at ``start``."""
        if start < 0 or length < 0 or start + length > self._length:
            raise IndexError(
                f"sub-slice [{start}, {start + length}) out of range for length {self._length}"
            )
        ret = Slice(self._items)
        ret._start = self._start + start
        ret._length = length
        return ret

    def front(self) -> Any:
        if not self._length:
            raise IndexError("front of empty slice")
        return self._items[self._start]

    def back(self) -> Any:
        if not self._length:
            raise IndexError("back of empty slice")
        return self._items[self._start + self._length - 1]

    def __getitem__(self, index: int) -> Any:
        return self._items[self._start + _check_index(index, self._length)]

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._start, self._start + self._length):
            yield self._items[offset]

    def __str__(self) -> str:
        return "Slice[" + ", ".join(str(item) for item in self) + "]"