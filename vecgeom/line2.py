"""Lines and segments in the plane."""

from __future__ import annotations

import math
from typing import NamedTuple

from .vec2 import Vec2, add, dot, norm2, scale, sub, unit


class Line2(NamedTuple):
    """A line through two points, usable as a segment or an infinite line."""

    start: Vec2
    end: Vec2

    def interpolate(self, t: float) -> Vec2:
        """Linearly interpolate along the line: 0 gives start, 1 gives end."""
        return add(self.start, scale(t, sub(self.end, self.start)))

    def distance_infinite(self, point: Vec2) -> float:
        """Return the distance from point to the infinite line."""
        p1, p2 = self.start, self.end
        num = abs((p2.x - p1.x) * (p1.y - point.y) - (p1.x - point.x) * (p2.y - p1.y))
        return num / math.hypot(p2.x - p1.x, p2.y - p1.y)

    def closest_infinite(self, point: Vec2) -> Vec2:
        """Return a point on the infinite line associated with point."""
        t = -dot(sub(self.start, point), sub(self.end, point)) / norm2(
            sub(self.end, self.start)
        )
        return self.interpolate(t)

    def closest(self, point: Vec2) -> tuple[Vec2, int]:
        """Return the closest point on the segment and where it lies.

        The flag is 0 when the end vertex is returned, 1 when the start
        vertex is returned and -1 when the point lies on the segment.
        """
        direction = sub(self.end, self.start)
        perpendicular = Vec2(-direction.y, direction.x)
        e2 = Line2(self.end, add(self.end, perpendicular))._edge_equation(point)
        if e2 > 0:
            return self.end, 0
        e1 = Line2(self.start, add(self.start, perpendicular))._edge_equation(point)
        if e1 < 0:
            return self.start, 1
        e3 = self.distance_infinite(point)
        to_point = scale(-e3, unit(perpendicular))
        return sub(point, to_point), -1

    def _edge_equation(self, p: Vec2) -> float:
        d = sub(self.end, self.start)
        return (p.x - self.start.x) * d.y - (p.y - self.start.y) * d.x