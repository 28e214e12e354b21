"""Squirrel5-based 64-bit hashing of scalars, characters and literals."""

from __future__ import annotations

import struct

MASK64 = (1 << 64) - 1

_BIT_NOISE1 = 0xA278032FB08BA40D
_BIT_NOISE2 = 0x9D9FDC30FD876B1D
_BIT_NOISE3 = 0xEC705118C5FBDA13
_BIT_NOISE4 = 0xDB8BDB77D7DF9811
_BIT_NOISE5 = 0xD8081C73F0FAA127


def squirrel5(at: int) -> int:
    """Mix a 64-bit integer into a well distributed 64-bit hash."""
    at &= MASK64
    at = (at * _BIT_NOISE1) & MASK64
    at ^= at >> 9
    at = (at + _BIT_NOISE2) & MASK64
    at ^= at >> 11
    at = (at * _BIT_NOISE3) & MASK64
    at ^= at >> 13
    at = (at + _BIT_NOISE4) & MASK64
    at ^= at >> 15
    at = (at * _BIT_NOISE5) & MASK64
    at ^= at >> 17
    return at


def hash_combine(h1: int, h2: int) -> int:
    """Combine two hashes into one."""
    return squirrel5((h1 + h2) & MASK64)


def hash_char(c: str | int) -> int:
    """Hash a single (signed) byte character, given as a str or a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in one byte")
    elif isinstance(c, int) and not isinstance(c, bool):
        if not -128 <= c <= 0xFF:
            raise ValueError(f"byte value {c} out of range")
        code = c
    else:
        raise TypeError(f"cannot hash {type(c).__name__} as a character")
    if code >= 0x80:
        code -= 0x100
    return squirrel5(code & MASK64)


def hash_f32(value: float) -> int:
    """Hash the bit pattern of a single-precision float."""
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    return squirrel5(bits)


def hash_value(value: object) -> int:
    """Hash an integer, a float (as double), or a one-character string."""
    if isinstance(value, bool):
        return squirrel5(int(value))
    if isinstance(value, int):
        return squirrel5(value & MASK64)
    if isinstance(value, float):
        (bits,) = struct.unpack("<Q", struct.pack("<d", value))
        return squirrel5(bits)
    if isinstance(value, str) and len(value) == 1:
        return hash_char(value)
    raise TypeError(f"unhashable value of type {type(value).__name__}")


def hash_nonzero(value: object) -> int:
    """Hash a value, forcing the lowest bit so the result is never zero."""
    return hash_value(value) | 1


def hash_values(*args: object) -> int:
    """Hash several values together; a single value hashes as itself."""
    if not args:
        raise TypeError("hash_values needs at least one value")
    if len(args) == 1:
        return hash_value(args[0])
    return squirrel5(sum(hash_value(arg) for arg in args) & MASK64)


def hash_literal(text: str, seed: int = 0) -> int:
    """Hash the UTF-8 bytes of a literal string, never returning zero."""
    seed &= MASK64
    for byte in text.encode("utf-8"):
        seed = hash_combine(seed, hash_char(byte))
    return seed if seed else 1