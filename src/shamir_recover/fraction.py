# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact rational arithmetic over arbitrary-precision integers.

:class:`Fraction` is an immutable value type that is always stored in lowest
terms with a strictly positive denominator. Only addition and multiplication
are provided because Lagrange interpolation at ``x = 0`` needs nothing else.
No operation ever goes through ``float``; :meth:`Fraction.__float__` exists
for approximate comparisons only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import ZeroDenominatorError


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (Euclid)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class Fraction:
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        numerator, denominator = self.numerator, self.denominator
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError("Fraction components must be integers")
        if denominator == 0:
            raise ZeroDenominatorError("Denominator cannot be zero.")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        common = gcd(numerator, denominator)
        # frozen: normalisation is the only write after __init__
        object.__setattr__(self, "numerator", numerator // common)
        object.__setattr__(self, "denominator", denominator // common)

    @staticmethod
    def add(a: Fraction, b: Fraction) -> Fraction:
        """Sum scaled through ``gcd`` of the denominators to keep operands small."""
        g = gcd(a.denominator, b.denominator)
        common = a.denominator // g * b.denominator
        numerator = a.numerator * (b.denominator // g) + b.numerator * (a.denominator // g)
        return Fraction(numerator, common)

    @staticmethod
    def multiply(a: Fraction, b: Fraction) -> Fraction:
        return Fraction(a.numerator * b.numerator, a.denominator * b.denominator)

    def is_integer(self) -> bool:
        return self.denominator == 1

    def __add__(self, other: Union[Fraction, int]) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Fraction.add(self, other)

    __radd__ = __add__

    def __mul__(self, other: Union[Fraction, int]) -> Fraction:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return Fraction.multiply(self, other)

    __rmul__ = __mul__

    def __int__(self) -> int:
        if not self.is_integer():
            raise ValueError(f"{self} is not a whole number")
        return self.numerator

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __str__(self) -> str:
        if self.is_integer():
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def _coerce(value: object) -> Fraction | None:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value, 1)
    return None


ZERO = Fraction(0, 1)

__all__ = ["Fraction", "gcd", "ZERO"]
