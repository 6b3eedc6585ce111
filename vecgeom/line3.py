"""Lines and segments in 3D space."""

from __future__ import annotations

from typing import NamedTuple

from .vec3 import Vec3, add, cross, dot, norm, norm2, scale, sub


class Line3(NamedTuple):
    """A line through two points, usable as a segment or an infinite line."""

    start: Vec3
    end: Vec3

    def interpolate(self, t: float) -> Vec3:
        """Linearly interpolate along the line: 0 gives start, 1 gives end."""
        return add(self.start, scale(t, sub(self.end, self.start)))

    def distance_infinite(self, point: Vec3) -> float:
        """Return the distance from point to the infinite line."""
        num = norm(cross(sub(point, self.start), sub(point, self.end)))
        return num / norm(sub(self.end, self.start))

    def closest_infinite(self, point: Vec3) -> Vec3:
        """Return a point on the infinite line associated with point."""
        t = -dot(sub(self.start, point), sub(self.end, point)) / norm2(
            sub(self.end, self.start)
        )
        return self.interpolate(t)