"""Exact rational numbers kept in lowest terms with a positive denominator."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Optional, TextIO, Union

RationalLike = Union["Rational", int]


def _coerce(value: object) -> Optional["Rational"]:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(value)
    return None


@total_ordering
class Rational:
    """A fraction ``numer / denom`` reduced to lowest terms.

    The denominator is always positive; zero is stored as ``0/1``.
    A zero denominator raises ZeroDivisionError.
    """

    __slots__ = ("_numer", "_denom")

    def __init__(self, numer: int, denom: int = 1) -> None:
        if not isinstance(numer, int) or not isinstance(denom, int):
            raise TypeError("numerator and denominator must be integers")
        if denom == 0:
            raise ZeroDivisionError("denominator must not be zero")
        if denom < 0:
            numer, denom = -numer, -denom
        divisor = math.gcd(numer, denom)
        self._numer = numer // divisor
        self._denom = denom // divisor

    @property
    def numer(self) -> int:
        """The numerator in lowest terms."""
        return self._numer

    @property
    def denom(self) -> int:
        """The positive denominator in lowest terms."""
        return self._denom

    def __add__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._numer * rhs._denom + rhs._numer * self._denom, self._denom * rhs._denom)

    def __sub__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._numer * rhs._denom - rhs._numer * self._denom, self._denom * rhs._denom)

    def __mul__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._numer * rhs._numer, self._denom * rhs._denom)

    def __truediv__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._numer == 0:
            raise ZeroDivisionError("division by a zero rational")
        return Rational(self._numer * rhs._denom, self._denom * rhs._numer)

    def __pow__(self, power: int) -> "Rational":
        if not isinstance(power, int):
            return NotImplemented
        numer, denom = self._numer, self._denom
        if power < 0:
            if numer == 0:
                raise ZeroDivisionError("zero raised to a negative power")
            numer, denom = denom, numer
            power = -power
        return Rational(numer**power, denom**power)

    def compare(self, other: RationalLike) -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than ``other``."""
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare Rational with {type(other).__name__}")
        difference = self._numer * rhs._denom - rhs._numer * self._denom
        return (difference > 0) - (difference < 0)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._numer == rhs._numer and self._denom == rhs._denom

    def __lt__(self, other: RationalLike) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self._numer, self._denom))

    def to_int(self) -> int:
        """Round to the nearest integer, halves away from zero."""
        quotient, remainder = divmod(abs(self._numer), self._denom)
        if 2 * remainder >= self._denom:
            quotient += 1
        return -quotient if self._numer < 0 else quotient

    def __float__(self) -> float:
        return self._numer / self._denom

    def __str__(self) -> str:
        if self._numer == 0:
            return "0"
        if self._numer == self._denom:
            return "1"
        return f"{self._numer}/{self._denom}"

    def __repr__(self) -> str:
        return f"Rational({self._numer}, {self._denom})"

    def write(self, fp: TextIO) -> None:
        """Write the value and a newline to the text stream ``fp``."""
        fp.write(f"{self}\n")