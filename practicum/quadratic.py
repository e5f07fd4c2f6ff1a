"""Real roots of the quadratic equation a*x^2 + b*x + c = 0."""

from __future__ import annotations

import math


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: a zero denominator gives an infinity or NaN."""
    if denominator != 0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def solve_quadratic(a: float, b: float, c: float) -> str:
    """Return the roots as text.

    Two roots are joined by '_', a double root stands alone, and
    'No solution' is returned when the discriminant is negative.
    Each root is written with six decimals.
    """
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        x1 = _divide(-b + root, 2 * a)
        x2 = _divide(-b - root, 2 * a)
        return f"{x1:f}_{x2:f}"
    if discriminant == 0:
        return f"{-_divide(b, 2 * a):f}"
    return "No solution"