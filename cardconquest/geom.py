"""Plane geometry: points, circles, lines and line segments."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PointF:
    """A point or vector with float coordinates."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: PointF) -> PointF:
        return PointF(self.x + other.x, self.y + other.y)

    def subtract(self, other: PointF) -> PointF:
        return PointF(self.x - other.x, self.y - other.y)

    def multiply(self, value: float) -> PointF:
        return PointF(self.x * value, self.y * value)

    def angle(self) -> float:
        """Return the direction of the vector in radians."""
        return math.atan2(self.y, self.x)

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: PointF) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def inner_product(self, other: PointF) -> float:
        return self.x * other.x + self.y * other.y


def point_from_polar(magnitude: float, angle: float) -> PointF:
    """Build a point from a length and an angle in radians."""
    return PointF(magnitude * math.cos(angle), magnitude * math.sin(angle))


@dataclass(frozen=True)
class Circle:
    center: PointF
    radius: float

    def left(self) -> float:
        return self.center.x - self.radius

    def right(self) -> float:
        return self.center.x + self.radius

    def top(self) -> float:
        return self.center.y - self.radius

    def bottom(self) -> float:
        return self.center.y + self.radius

    def intersects_with(self, other: Circle) -> bool:
        return self.center.distance(other.center) < self.radius + other.radius


@dataclass(frozen=True)
class LinearFunc:
    """The line a*x + b*y + c = 0."""

    a: float
    b: float
    c: float

    def x(self, y: float) -> float | None:
        """Return x on the line for the given y, or None if the line is horizontal."""
        if self.a == 0:
            return None
        return (self.b * y + self.c) / -self.a

    def y(self, x: float) -> float | None:
        """Return y on the line for the given x, or None if the line is vertical."""
        if self.b == 0:
            return None
        return (self.a * x + self.c) / -self.b

    def distance(self, pt: PointF) -> float:
        """Return the distance from pt to the line; 0 for a degenerate line."""
        denominator = math.hypot(self.a, self.b)
        if denominator == 0:
            return 0.0
        return abs(self.a * pt.x + self.b * pt.y + self.c) / denominator


def linear_func_from_points(pt1: PointF, pt2: PointF) -> LinearFunc:
    """Return the line through two points."""
    a = pt2.y - pt1.y
    b = pt1.x - pt2.x
    c = -(pt1.x * a + pt1.y * b)
    return LinearFunc(a, b, c)


@dataclass(frozen=True)
class LineSegment:
    pt1: PointF
    pt2: PointF

    def left(self) -> float:
        return min(self.pt1.x, self.pt2.x)

    def right(self) -> float:
        return max(self.pt1.x, self.pt2.x)

    def top(self) -> float:
        return min(self.pt1.y, self.pt2.y)

    def bottom(self) -> float:
        return max(self.pt1.y, self.pt2.y)

    def center(self) -> PointF:
        return PointF((self.pt1.x + self.pt2.x) * 0.5, (self.pt1.y + self.pt2.y) * 0.5)

    def length(self) -> float:
        return self.pt1.distance(self.pt2)

    def crosses_with(self, other: LineSegment) -> bool:
        """Return True if the two segments cross; parallel segments never do."""
        if self.right() < other.left() or other.right() < self.left():
            return False
        if self.bottom() < other.top() or other.bottom() < self.top():
            return False

        fn1 = linear_func_from_points(self.pt1, self.pt2)
        fn2 = linear_func_from_points(other.pt1, other.pt2)

        determinant = fn1.a * fn2.b - fn2.a * fn1.b
        if determinant == 0:
            return False

        cross_x = (fn2.c * fn1.b - fn1.c * fn2.b) / determinant
        if not self.left() <= cross_x <= self.right():
            return False
        return other.left() <= cross_x <= other.right()