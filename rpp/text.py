"""ASCII helpers, string hashing and parsing of numbers, words and enum names."""

from __future__ import annotations

import math
import re
import struct
from enum import Enum
from typing import TypeVar

from .hashing import hash_combine, hash_value

E = TypeVar("E", bound=Enum)

_I64_MAX = (1 << 63) - 1
_I64_MIN = -(1 << 63)

_WS = r"[ \t\n\v\f\r]*"
_INT_RE = re.compile(_WS + r"([+-]?[0-9]+)")
_SPECIAL_RE = re.compile(
    _WS + r"([+-]?)(inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)
_HEX_RE = re.compile(
    _WS
    + r"([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_DEC_RE = re.compile(_WS + r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

_ASCII_WHITESPACE = frozenset(b" \t\n\r\v")


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def to_uppercase(c: str | int) -> str | int:
    """Uppercase an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - ord("a") + ord("A"))
    return c


def to_lowercase(c: str | int) -> str | int:
    """Lowercase an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code - ord("A") + ord("a"))
    return c


def is_whitespace(c: str | int) -> bool:
    """Space, tab, newline, carriage return or vertical tab."""
    return _code(c) in _ASCII_WHITESPACE


def hash_string(text: str | bytes) -> int:
    """Hash the bytes of a string; the empty string hashes to zero."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    h = 0
    for byte in data:
        h = hash_combine(h, hash_value(byte))
    return h


def parse_i64(text: str) -> tuple[int, str] | None:
    """Parse a leading base-10 integer, saturating at the 64-bit limits."""
    match = _INT_RE.match(text)
    if match is None:
        return None
    value = min(max(int(match.group(1)), _I64_MIN), _I64_MAX)
    return value, text[match.end():]


def _to_f32(value: float) -> float:
    try:
        (result,) = struct.unpack("<f", struct.pack("<f", value))
    except OverflowError:
        return math.copysign(math.inf, value)
    return result


def parse_f32(text: str) -> tuple[float, str] | None:
    """Parse a leading single-precision float, accepting hex, inf and nan forms."""
    match = _SPECIAL_RE.match(text)
    if match is not None:
        sign = -1.0 if match.group(1) == "-" else 1.0
        word = match.group(2).lower()
        value = math.nan if word.startswith("nan") else sign * math.inf
        return value, text[match.end():]

    match = _HEX_RE.match(text)
    if match is not None:
        sign = -1.0 if match.group(1) == "-" else 1.0
        try:
            value = sign * float.fromhex("0x" + match.group(2))
        except OverflowError:
            value = sign * math.inf
        return _to_f32(value), text[match.end():]

    match = _DEC_RE.match(text)
    if match is None:
        return None
    return _to_f32(float(match.group(1))), text[match.end():]


def parse_string(text: str) -> tuple[str, str] | None:
    """Split off the first whitespace-delimited word.

    The word and the rest after its delimiter are returned. A word that runs to
    the end of the text is returned whole (including a trailing delimiter) with an
    empty rest; a single character at the very end is not taken as a word.
    """
    start = 0
    length = len(text)
    while start < length and is_whitespace(text[start]):
        start += 1
    for i in range(start, length):
        if i + 1 == length and start < i:
            return text[start:i + 1], ""
        if is_whitespace(text[i]):
            return text[start:i], text[i + 1:]
    return None


def parse_enum(enum_type: type[E], text: str) -> tuple[E, str] | None:
    """Parse a leading word naming a member of ``enum_type``."""
    parsed = parse_string(text)
    if parsed is None:
        return None
    name, rest = parsed
    result = None
    for member_name, member in enum_type.__members__.items():
        if member_name == name:
            result = (member, rest)
    return result


def enum_name(value: object) -> str:
    """Name of an enum member, or "Invalid" for anything else."""
    if not isinstance(value, Enum):
        return "Invalid"
    name = "Invalid"
    for member_name, member in type(value).__members__.items():
        if member is value:
            name = member_name
    return name