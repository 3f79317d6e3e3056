"""Three-dimensional vector with float coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from ev3finder.vector2 import Vector2


@dataclass(eq=False)
class Vector3:
    """A 3D vector with x, y and z coordinates.

    Ordering comparisons are component-wise: ``a < b`` holds only when every
    component of ``a`` is less than the matching component of ``b``.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    @classmethod
    def from_string(cls, text: str) -> Vector3:
        """Parse ``"(x, y, z)"``, ``"x y z"`` and similar forms.

        Parentheses are ignored and commas count as whitespace. Missing
        trailing components are zero; a component that is not a number
        raises ``ValueError``.
        """
        cleaned = text.replace("(", "").replace(")", "").replace(",", " ")
        tokens = cleaned.split()
        values = [0.0, 0.0, 0.0]
        for slot, token in zip(range(3), tokens):
            try:
                values[slot] = float(token)
            except ValueError:
                raise ValueError(f"invalid vector component {token!r} in {text!r}") from None
        return cls(*values)

    @classmethod
    def from_vector2(cls, xy: Vector2, z: float) -> Vector3:
        """Build a vector from a 2D vector and a z coordinate."""
        return cls(xy.x, xy.y, z)

    def to_string(self) -> str:
        """Fixed six-decimal form, e.g. ``Vector3(1.000000, 2.000000, 3.000000)``."""
        return f"Vector3({self.x:f}, {self.y:f}, {self.z:f})"

    def magnitude(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Unit vector pointing in the same direction."""
        mag = self.magnitude()
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def dot(self, other: Vector3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product with another vector."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance(self, other: Vector3) -> float:
        """Euclidean distance to another vector."""
        return (self - other).magnitude()

    @staticmethod
    def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
        """Linear interpolation ``a + (b - a) * t``."""
        return a + (b - a) * t

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iadd__(self, other: Vector3) -> Vector3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: float) -> Vector3:
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector3:
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: Vector3) -> bool:
        return self.x < other.x and self.y < other.y and self.z < other.z

    def __le__(self, other: Vector3) -> bool:
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def __gt__(self, other: Vector3) -> bool:
        return self.x > other.x and self.y > other.y and self.z > other.z

    def __ge__(self, other: Vector3) -> bool:
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def __str__(self) -> str:
        return f"Vector3({self.x:g}, {self.y:g}, {self.z:g})"