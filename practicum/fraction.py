"""Fractions with integer numerator and denominator, and a small calculator."""

from __future__ import annotations


def _rem(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend (truncating division)."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _quot(a: int, b: int) -> int:
    """Quotient truncated towards zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders.

    Raises ZeroDivisionError when a remainder by zero is needed and
    ValueError when the arguments make the reduction stall.
    """
    while True:
        if _rem(a, b) == 0:
            return b
        if _rem(b, a) == 0:
            return a
        if a > b:
            reduced = _rem(a, b)
            if reduced == a:
                raise ValueError(f"cannot reduce gcd({a}, {b})")
            a = reduced
        else:
            reduced = _rem(b, a)
            if reduced == b:
                raise ValueError(f"cannot reduce gcd({a}, {b})")
            b = reduced


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as a*b / gcd(a, b)."""
    return _quot(a * b, gcd(a, b))


class FractionNumber:
    """A fraction numerator/denominator; results of arithmetic are reduced."""

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        self.numerator = numerator
        self.denominator = denominator

    @classmethod
    def _reduced(cls, numerator: int, denominator: int) -> FractionNumber:
        divisor = gcd(numerator, denominator)
        return cls(_quot(numerator, divisor), _quot(denominator, divisor))

    def _common(self, other: FractionNumber) -> tuple[int, int, int]:
        common = lcm(self.denominator, other.denominator)
        left = self.numerator * _quot(common, self.denominator)
        right = other.numerator * _quot(common, other.denominator)
        return left, right, common

    def __add__(self, other: FractionNumber) -> FractionNumber:
        left, right, common = self._common(other)
        return self._reduced(left + right, common)

    def __sub__(self, other: FractionNumber) -> FractionNumber:
        left, right, common = self._common(other)
        return self._reduced(left - right, common)

    def __mul__(self, other: FractionNumber) -> FractionNumber:
        return self._reduced(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def __truediv__(self, other: FractionNumber) -> FractionNumber:
        return self._reduced(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FractionNumber):
            return NotImplemented
        left, right, _ = self._common(other)
        return left == right

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"FractionNumber({self.numerator}, {self.denominator})"


class FractionCalculator:
    """Arithmetic on FractionNumber values."""

    @staticmethod
    def summ(a: FractionNumber, b: FractionNumber) -> FractionNumber:
        return a + b

    @staticmethod
    def diff(a: FractionNumber, b: FractionNumber) -> FractionNumber:
        return a - b

    @staticmethod
    def mult(a: FractionNumber, b: FractionNumber) -> FractionNumber:
        return a * b

    @staticmethod
    def div(a: FractionNumber, b: FractionNumber) -> FractionNumber:
        return a / b

    @staticmethod
    def format(a: FractionNumber) -> str:
        """Render a fraction as 'numerator/denominator'."""
        return str(a)