"""Two-dimensional vectors and axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of ints or floats."""

    x: Number = 0
    y: Number = 0

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Number) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> Number:
        """Squared length, without the square root."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / size, self.y / size)

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        """Distance between two points."""
        return (a - b).length()

    def dot(self, other: Vector2) -> Number:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def clamped(self, min_x: Number, max_x: Number, min_y: Number, max_y: Number) -> Vector2:
        """Each component clamped into its range."""
        return Vector2(_clamp(self.x, min_x, max_x), _clamp(self.y, min_y, max_y))

    @staticmethod
    def lerp(a: Vector2, b: Vector2, t: Number) -> Vector2:
        """Linear interpolation from a (t=0) to b (t=1)."""
        return a + (b - a) * t

    def mirror(self, flip_x: bool, flip_y: bool) -> Vector2:
        """Negate the chosen components."""
        return Vector2(-self.x if flip_x else self.x, -self.y if flip_y else self.y)


def _clamp(value: Number, low: Number, high: Number) -> Number:
    if value < low:
        return low
    if high < value:
        return high
    return value


@dataclass
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        """The rectangle as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)