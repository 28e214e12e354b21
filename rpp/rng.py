"""A small deterministic random number stream built on squirrel5 hashing."""

from __future__ import annotations

import struct
import threading
import time
from collections.abc import MutableSequence
from typing import Any

from .hashing import MASK64, hash_value, hash_values

_INTEGER_BITS = (8, 16, 32, 64)


def _to_f32(value: float) -> float:
    (result,) = struct.unpack("<f", struct.pack("<f", value))
    return result


_F32_SCALE = _to_f32(1e-24)


class Stream:
    """Random stream whose state advances by hashing the previous state."""

    def __init__(self, seed: int | None = None) -> None:
        self._state = 0
        self.seed(seed)

    def __call__(self) -> int:
        """Advance the stream and return the next 64-bit value."""
        self._state = hash_value(self._state)
        return self._state

    def seed(self, value: int | None = None) -> None:
        """Reset the state; without a value it is seeded from thread and time."""
        if value is None:
            self._state = hash_values(
                hash_value(threading.get_ident()), hash_value(time.time_ns())
            )
        else:
            self._state = value & MASK64

    def unit(self) -> float:
        """Double drawn from the top 53 bits, scaled by 1e-53."""
        return (self() >> 11) * 1e-53

    def unit_f32(self) -> float:
        """Single-precision value drawn from the top 24 bits, scaled by 1e-24."""
        return _to_f32(_to_f32(float(self() >> 40)) * _F32_SCALE)

    def coin_flip(self, p: float) -> bool:
        """True when the next unit draw falls below p."""
        return self.unit() < p

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle a mutable sequence in place."""
        n = len(items)
        for i in range(n - 1):
            j = self.range(i, n)
            items[i], items[j] = items[j], items[i]

    def integer(self, bits: int = 64, signed: bool = False) -> int:
        """Next value truncated to an integer of the given width."""
        if bits not in _INTEGER_BITS:
            raise ValueError(f"unsupported integer width {bits}")
        value = self() & ((1 << bits) - 1)
        if signed and value >= 1 << (bits - 1):
            value -= 1 << bits
        return value

    def range(self, low: int, high: int) -> int:
        """Integer in [low, high)."""
        span = high - low
        if span <= 0:
            raise ValueError(f"empty range [{low}, {high})")
        return low + self() % span