"""A fixed-length heterogeneous tuple with indexed access and invocation."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from typing import Any


def _clone_item(item: Any) -> Any:
    clone = getattr(item, "clone", None)
    return clone() if callable(clone) else copy.copy(item)


class Tuple:
    """Ordered, fixed-length group of values."""

    __slots__ = ("_items",)

    def __init__(self, *args: Any) -> None:
        self._items: tuple[Any, ...] = args

    def get(self, index: int) -> Any:
        """Element at ``index``; raises IndexError when out of range."""
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"index must be an integer, not {type(index).__name__}")
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for tuple of length {len(self._items)}")
        return self._items[index]

    def invoke(self, f: Callable[..., Any]) -> Any:
        """Call ``f`` with the elements as positional arguments."""
        return f(*self._items)

    def clone(self) -> Tuple:
        """Independent copy with each element cloned."""
        return Tuple(*(_clone_item(item) for item in self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self._items == other._items

    def __str__(self) -> str:
        return "Tuple{" + ", ".join(str(item) for item in self._items) + "}"