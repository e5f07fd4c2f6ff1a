"""Points and the test of whether a point lies in a triangle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on the plane."""

    x: float
    y: float


class Triangle:
    """A triangle given by three vertices."""

    def __init__(self, p1: Point, p2: Point, p3: Point) -> None:
        self.points = (p1, p2, p3)

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies inside the triangle or on its border."""
        (x1, y1), (x2, y2), (x3, y3) = ((p.x, p.y) for p in self.points)
        x0, y0 = point.x, point.y
        a = (x1 - x0) * (y2 - y1) - (x2 - x1) * (y1 - y0)
        b = (x2 - x0) * (y3 - y2) - (x3 - x2) * (y2 - y0)
        c = (x3 - x0) * (y1 - y3) - (x1 - x3) * (y3 - y0)
        return (a >= 0 and b >= 0 and c >= 0) or (a <= 0 and b <= 0 and c <= 0)