"""An open-addressing hash map using Robin Hood probing and backward-shift deletion."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from typing import Any

from .hashing import MASK64, hash_value, squirrel5
from .text import hash_string

_MISSING = object()


def _clone_item(item: Any) -> Any:
    clone = getattr(item, "clone", None)
    return clone() if callable(clone) else copy.copy(item)


def _key_hash(key: Any) -> int:
    if isinstance(key, (str, bytes, bytearray)):
        return hash_string(key)
    if isinstance(key, tuple):
        if not key:
            raise TypeError("cannot hash an empty tuple key")
        if len(key) == 1:
            return _key_hash(key[0])
        return squirrel5(sum(_key_hash(part) for part in key) & MASK64)
    return hash_value(key)


def _hash_nonzero(key: Any) -> int:
    return _key_hash(key) | 1


def _next_pow2(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class _Slot:
    __slots__ = ("hash", "key", "value")

    def __init__(self, hash_: int, key: Any, value: Any) -> None:
        self.hash = hash_
        self.key = key
        self.value = value


class Map:
    """Hash map whose capacity is a power of two and is kept at most 3/4 full."""

    def __init__(self, *args: tuple[Any, Any], capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"negative capacity {capacity}")
        self._data: list[_Slot | None] = []
        self._capacity = 0
        self._length = 0
        self._usable = 0
        self._shift = 0
        if capacity:
            self._allocate(_next_pow2(capacity))
        for key, value in args:
            self.insert(key, value)

    def _allocate(self, capacity: int) -> None:
        self._capacity = capacity
        self._data = [None] * capacity
        self._usable = (capacity // 4) * 3
        self._shift = 65 - capacity.bit_length()

    def _full(self) -> bool:
        return self._length >= self._usable

    def _distance(self, hash_: int, idx: int) -> int:
        home = hash_ >> self._shift
        return idx - home if home <= idx else self._capacity + idx - home

    def _insert_slot(self, slot: _Slot) -> tuple[_Slot, bool]:
        data = self._data
        idx = slot.hash >> self._shift
        placement: _Slot | None = None
        dist = 0
        while True:
            current = data[idx]
            if current is None:
                data[idx] = slot
                return (placement or slot), True
            if current.hash == slot.hash and current.key == slot.key:
                data[idx] = slot
                return slot, False
            current_dist = self._distance(current.hash, idx)
            if current_dist < dist:
                data[idx], slot = slot, current
                placement = placement or data[idx]
                dist = current_dist
            dist += 1
            idx += 1
            if idx == self._capacity:
                idx = 0

    def _find(self, key: Any) -> int | None:
        if not self._length:
            _hash_nonzero(key)
            return None
        hash_ = _hash_nonzero(key)
        data = self._data
        idx = hash_ >> self._shift
        dist = 0
        while True:
            current = data[idx]
            if current is None:
                return None
            if current.hash == hash_ and current.key == key:
                return idx
            if self._distance(current.hash, idx) < dist:
                return None
            dist += 1
            idx += 1
            if idx == self._capacity:
                idx = 0

    def _fix_up(self, idx: int) -> None:
        data = self._data
        while True:
            nxt = 0 if idx == self._capacity - 1 else idx + 1
            following = data[nxt]
            if following is None or (following.hash >> self._shift) == nxt:
                return
            data[idx] = following
            data[nxt] = None
            idx = nxt

    def insert(self, key: Any, value: Any) -> Any:
        """Insert or replace the value for ``key`` and return the value."""
        hash_ = _hash_nonzero(key)
        while self._full():
            self.grow()
        placed, is_new = self._insert_slot(_Slot(hash_, key, value))
        if is_new:
            self._length += 1
        return placed.value

    def try_get(self, key: Any) -> Any:
        """Value for ``key``, or None when it is absent."""
        idx = self._find(key)
        return None if idx is None else self._data[idx].value

    def get(self, key: Any) -> Any:
        """Value for ``key``; raises KeyError when it is absent."""
        idx = self._find(key)
        if idx is None:
            raise KeyError(key)
        return self._data[idx].value

    def contains(self, key: Any) -> bool:
        return self._find(key) is not None

    def try_erase(self, key: Any) -> bool:
        """Remove ``key``; returns whether it was present."""
        idx = self._find(key)
        if idx is None:
            return False
        self._data[idx] = None
        self._fix_up(idx)
        self._length -= 1
        return True

    def erase(self, key: Any) -> None:
        """Remove ``key``; raises KeyError when it is absent."""
        if not self.try_erase(key):
            raise KeyError(key)

    def get_or_insert(self, key: Any, factory: Callable[[], Any] | None = None) -> Any:
        """Value for ``key``, inserting one made by ``factory`` when absent."""
        idx = self._find(key)
        if idx is not None:
            return self._data[idx].value
        return self.insert(key, factory() if factory is not None else None)

    def reserve(self, capacity: int) -> None:
        """Grow the table to at least ``capacity`` slots, rehashing every entry."""
        if capacity <= self._capacity:
            return
        old = self._data
        self._allocate(_next_pow2(capacity))
        for slot in old:
            if slot is not None:
                self._insert_slot(slot)

    def grow(self) -> None:
        """Double the capacity, starting from 32."""
        self.reserve(2 * self._capacity if self._capacity else 32)

    def clear(self) -> None:
        self._data = [None] * self._capacity
        self._length = 0

    def capacity(self) -> int:
        return self._capacity

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Key-value pairs in table order."""
        for slot in self._data:
            if slot is not None:
                yield slot.key, slot.value

    def clone(self) -> Map:
        """Independent copy with the same layout and each key and value cloned."""
        ret = Map()
        if self._capacity:
            ret._allocate(self._capacity)
        ret._data = [
            None if slot is None else _Slot(slot.hash, _clone_item(slot.key), _clone_item(slot.value))
            for slot in self._data
        ]
        ret._length = self._length
        return ret

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Any) -> None:
        self.erase(key)

    def __str__(self) -> str:
        return "Map[" + ", ".join(f"{{{k} : {v}}}" for k, v in self.items()) + "]"