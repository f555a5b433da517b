"""Rational numbers in mixed-fraction notation."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable
from fractions import Fraction


class Rational:
    """A reduced fraction; a zero denominator stands for infinity."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if numerator == 0:
            numerator, denominator = 0, 1
        elif denominator == 0:
            numerator, denominator = 1, 0
        else:
            divisor = math.gcd(numerator, denominator)
            numerator, denominator = numerator // divisor, denominator // divisor
            if denominator < 0:
                numerator, denominator = -numerator, -denominator
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read a fraction written as ``numerator/denominator``."""
        numerator_text, slash, denominator_text = text.strip().partition("/")
        if not slash:
            raise ValueError(f"not a fraction: {text!r}")
        return cls(int(numerator_text), int(denominator_text))

    def __add__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        if self._numerator == 0:
            return other
        if other._numerator == 0:
            return self
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __sub__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        if self._numerator == 0:
            return other * Rational(-1)
        if other._numerator == 0:
            return self
        return Rational(
            self._numerator * other._denominator - other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def __mul__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __truediv__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        if other._numerator == 0:
            return Rational(1, 0)
        return Rational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return (self._numerator, self._denominator) == (other._numerator, other._denominator)

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        """Mixed form such as ``1 2/3``; negatives in parentheses, infinity as ``Inf``."""
        if self._denominator == 0:
            return "Inf"
        if self._numerator == 0:
            return "0"
        magnitude = abs(self._numerator)
        whole = magnitude // self._denominator
        remainder = magnitude % self._denominator
        negative = self._numerator < 0
        if whole == 0:
            body = f"{self._numerator}/{self._denominator}"
        else:
            signed_whole = -whole if negative else whole
            if remainder == 0:
                body = str(signed_whole)
            else:
                body = f"{signed_whole} {remainder}/{self._denominator}"
        return f"({body})" if negative else body


_OPERATIONS = (
    ("+", operator.add),
    ("-", operator.sub),
    ("*", operator.mul),
    ("/", operator.truediv),
)


def arithmetic_report(first: Rational, second: Rational) -> list[str]:
    """Return the sum, difference, product and quotient lines for two rationals."""
    return [
        f"{first} {symbol} {second} = {operation(first, second)}"
        for symbol, operation in _OPERATIONS
    ]


def _parse_fraction(text: str) -> Fraction:
    numerator_text, slash, denominator_text = text.strip().partition("/")
    if not slash:
        raise ValueError(f"not a fraction: {text!r}")
    return Fraction(int(numerator_text), int(denominator_text))


def sum_rationals(fractions: Iterable[str]) -> str:
    """Add fractions written as ``a/b`` and write the total as ``integer num/den``.

    The fractional part keeps the sign of the total, so a negative total
    reads like ``-1 -2/3``.
    """
    total = sum((_parse_fraction(text) for text in fractions), Fraction(0))
    if total == 0:
        return "0"
    numerator, denominator = total.numerator, total.denominator
    whole = abs(numerator) // denominator
    if numerator < 0:
        whole = -whole
    remainder = numerator - whole * denominator
    if whole == 0:
        return f"{remainder}/{denominator}"
    if remainder == 0:
        return str(whole)
    return f"{whole} {remainder}/{denominator}"