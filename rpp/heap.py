"""A binary min-heap over values ordered by ``<``."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any


def _clone_item(item: Any) -> Any:
    clone = getattr(item, "clone", None)
    return clone() if callable(clone) else copy.copy(item)


class Heap:
    """Min-heap keeping the smallest element at the top."""

    def __init__(self, *args: Any) -> None:
        self._data: list[Any] = []
        for value in args:
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert a value."""
        self._data.append(value)
        self._reheap_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("pop from empty heap")
        top = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._reheap_down(0)
        return top

    def top(self) -> Any:
        """The smallest value."""
        if not self._data:
            raise IndexError("top of empty heap")
        return self._data[0]

    def clear(self) -> None:
        self._data.clear()

    def clone(self) -> Heap:
        """Independent copy with each element cloned."""
        ret = Heap()
        ret._data = [_clone_item(item) for item in self._data]
        return ret

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __str__(self) -> str:
        return "Heap[" + ", ".join(str(item) for item in self._data) + "]"

    def _swap(self, a: int, b: int) -> None:
        self._data[a], self._data[b] = self._data[b], self._data[a]

    def _reheap_up(self, idx: int) -> None:
        data = self._data
        while idx:
            parent = (idx - 1) // 2
            if data[idx] < data[parent]:
                self._swap(idx, parent)
                idx = parent
            else:
                return

    def _reheap_down(self, idx: int) -> None:
        data = self._data
        length = len(data)
        while True:
            parent = data[idx]
            left = idx * 2 + 1
            right = left + 1
            if right < length:
                lchild = data[left]
                rchild = data[right]
                if lchild < parent and not rchild < lchild:
                    self._swap(idx, left)
                    idx = left
                elif rchild < parent and not lchild < rchild:
                    self._swap(idx, right)
                    idx = right
                else:
                    return
            elif left < length:
                if data[left] < parent:
                    self._swap(idx, left)
                return
            else:
                return