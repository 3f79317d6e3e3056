"""Two-dimensional vector with float coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(eq=False)
class Vector2:
    """A 2D vector with x and y coordinates.

    Ordering comparisons are component-wise: ``a < b`` holds only when every
    component of ``a`` is less than the matching component of ``b``.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """Unit vector pointing in the same direction."""
        mag = self.magnitude()
        return Vector2(self.x / mag, self.y / mag)

    def dot(self, other: Vector2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Vector2) -> float:
        """Euclidean distance to another vector."""
        return math.hypot(self.x - other.x, self.y - other.y)

    @staticmethod
    def lerp(a: Vector2, b: Vector2, t: float) -> Vector2:
        """Linear interpolation ``a + (b - a) * t``."""
        return a + (b - a) * t

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2) -> Vector2:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2) -> Vector2:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector2:
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector2:
        self.x /= scalar
        self.y /= scalar
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Vector2) -> bool:
        return self.x < other.x and self.y < other.y

    def __le__(self, other: Vector2) -> bool:
        return self.x <= other.x and self.y <= other.y

    def __gt__(self, other: Vector2) -> bool:
        return self.x > other.x and self.y > other.y

    def __ge__(self, other: Vector2) -> bool:
        return self.x >= other.x and self.y >= other.y

    def __str__(self) -> str:
        return f"Vector2({self.x:g}, {self.y:g})"