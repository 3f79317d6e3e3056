"""Line segment between two points in 2D space."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ev3finder.vector2 import Vector2


def _counter_clockwise(a: Vector2, b: Vector2, c: Vector2) -> bool:
    return (c.y - a.y) * (b.x - a.x) > (b.y - a.y) * (c.x - a.x)


@dataclass
class Line:
    """A line segment defined by two points; the line owns copies of them."""

    p1: Vector2
    p2: Vector2

    def __post_init__(self) -> None:
        self.p1 = Vector2(self.p1.x, self.p1.y)
        self.p2 = Vector2(self.p2.x, self.p2.y)

    def __copy__(self) -> Line:
        return Line(self.p1, self.p2)

    def length(self) -> float:
        """Distance between the two end points."""
        return self.p1.distance_to(self.p2)

    def angle(self) -> float:
        """Angle from the x-axis to the segment, in degrees within [-180, 180]."""
        return math.atan2(self.p2.y - self.p1.y, self.p2.x - self.p1.x) * 180 / math.pi

    def intersection(self, other: Line) -> Vector2:
        """Intersection point of the two infinite lines.

        Parallel lines give the origin.
        """
        x1, y1 = self.p1
        x2, y2 = self.p2
        x3, y3 = other.p1
        x4, y4 = other.p2

        d = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        if d == 0:
            return Vector2(0.0, 0.0)

        cross_a = x1 * y2 - y1 * x2
        cross_b = x3 * y4 - y3 * x4
        x = (cross_a * (x3 - x4) - (x1 - x2) * cross_b) / d
        y = (cross_a * (y3 - y4) - (y1 - y2) * cross_b) / d
        return Vector2(x, y)

    def is_intersecting(self, other: Line) -> bool:
        """Whether the two segments cross each other."""
        return (
            _counter_clockwise(self.p1, other.p1, other.p2)
            != _counter_clockwise(self.p2, other.p1, other.p2)
            and _counter_clockwise(self.p1, self.p2, other.p1)
            != _counter_clockwise(self.p1, self.p2, other.p2)
        )