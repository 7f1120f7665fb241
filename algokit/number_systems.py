"""Conversion of fixed-point numerals between bases 2 to 36."""

from __future__ import annotations

import math
import re
from typing import List, Optional

MAX_FRACTION_DIGITS = 20
MIN_BASE = 2
MAX_BASE = 36

_SEPARATORS = ".,"
_SPLIT = re.compile(r"([^.,]*)(.*)", re.DOTALL)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _digit_value(char: str) -> Optional[int]:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    return None


def _digit_char(value: int) -> str:
    return chr(value + (55 if value >= 10 else 48))


def _truncate_int32(value: float) -> int:
    """Truncate toward zero into 32 bits; out-of-range values give the minimum."""
    if not math.isfinite(value):
        return _INT32_MIN
    truncated = int(value)
    if not _INT32_MIN <= truncated <= _INT32_MAX:
        return _INT32_MIN
    return truncated


def _whole_digits(number: int, base: int) -> str:
    digits: List[str] = []
    while True:
        number, remainder = divmod(number, base)
        digits.append(_digit_char(remainder))
        if number == 0:
            return "".join(reversed(digits))


def convert(text: str, in_base: int, out_base: int) -> str:
    """Rewrite the numeral ``text`` from ``in_base`` into ``out_base``.

    Digits are ``0``-``9`` then upper-case ``A``-``Z``; either ``.`` or ``,``
    separates the fractional part, and other characters carry no value. The
    fraction is worked out in floating point and written with at most
    ``MAX_FRACTION_DIGITS`` digits. Raises ValueError for a base outside
    2 to 36.
    """
    for base in (in_base, out_base):
        if not MIN_BASE <= base <= MAX_BASE:
            raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}: {base}")

    match = _SPLIT.match(text)
    assert match is not None
    whole, tail = match.groups()

    number = 0
    for char in whole:
        value = _digit_value(char)
        if value is not None:
            number = number * in_base + value

    fraction = 0.0
    scale = 1
    separators = 0
    chars = iter(tail)
    for char in chars:
        if char in _SEPARATORS:
            separators += 1
            char = next(chars, "")
            if not char:
                break
        value = _digit_value(char)
        if value is not None:
            fraction = value + fraction * in_base
        scale *= in_base
    fraction /= scale

    length = separators
    probe = fraction
    while length < MAX_FRACTION_DIGITS:
        scaled = probe * out_base
        if scaled - _truncate_int32(scaled) == 0:
            break
        probe = scaled
        length += 1

    result = _whole_digits(number, out_base)
    if length == 0:
        return result

    fraction_digits: List[str] = []
    for _ in range(length):
        scaled = fraction * out_base
        digit = _truncate_int32(scaled)
        fraction_digits.append(_digit_char(digit))
        fraction = scaled - digit
    return f"{result}.{''.join(fraction_digits)}"