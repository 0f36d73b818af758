"""Two-dimensional vector and axis-aligned rectangle types."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector."""
        length = self.length()
        if length > 0.0:
            return Vec2(self.x / length, self.y / length)
        return Vec2(0.0, 0.0)

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def distance_to(self, other: Vec2) -> float:
        """Distance between two points."""
        return (self - other).length()

    def distance_squared_to(self, other: Vec2) -> float:
        """Squared distance between two points."""
        return (self - other).length_squared()


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.width

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.height

    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def size(self) -> Vec2:
        return Vec2(self.width, self.height)

    def contains_point(self, px: float, py: float) -> bool:
        """True if the point lies inside; right and bottom edges are excluded."""
        return self.x <= px < self.right() and self.y <= py < self.bottom()

    def __contains__(self, point: Vec2) -> bool:
        return self.contains_point(point.x, point.y)

    def contains_rect(self, other: Rect) -> bool:
        """True if ``other`` lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.right() <= self.right()
            and other.y >= self.y
            and other.bottom() <= self.bottom()
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with positive area."""
        return (
            self.x < other.right()
            and self.right() > other.x
            and self.y < other.bottom()
            and self.bottom() > other.y
        )

    def intersection(self, other: Rect) -> Rect | None:
        """The overlapping rectangle, or None if they do not overlap."""
        x1 = max(self.x, other.x)
        y1 = max(self.y, other.y)
        x2 = min(self.right(), other.right())
        y2 = min(self.bottom(), other.bottom())
        if x1 < x2 and y1 < y2:
            return Rect(x1, y1, x2 - x1, y2 - y1)
        return None