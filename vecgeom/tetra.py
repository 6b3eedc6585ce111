"""Tetrahedra in 3D space."""

from __future__ import annotations

import math
from typing import NamedTuple

from .line3 import Line3
from .plane import new_plane
from .triangle3 import Triangle3
from .vec3 import Vec3, add, cross, norm2, scale, sub


class Tetra(NamedTuple):
    """A tetrahedron given by its four vertices."""

    p0: Vec3
    p1: Vec3
    p2: Vec3
    p3: Vec3

    def centroid(self) -> Vec3:
        """Return the mean of the four vertices."""
        return scale(0.25, add(self.p0, add(self.p1, add(self.p2, self.p3))))

    def sides(self) -> tuple[Line3, ...]:
        """Return the six edges as lines.

        Order: (p0,p1), (p1,p2), (p2,p0), (p3,p2), (p0,p3), (p1,p3).
        """
        p0, p1, p2, p3 = self
        return (
            Line3(p0, p1), Line3(p1, p2), Line3(p2, p0),
            Line3(p3, p2), Line3(p0, p3), Line3(p1, p3),
        )

    def edges(self) -> tuple[Vec3, ...]:
        """Return the direction vectors of the sides, in the order of sides()."""
        return tuple(sub(line.end, line.start) for line in self.sides())

    def volume(self) -> float:
        """Return the enclosed volume."""
        base = Triangle3(self.p0, self.p1, self.p2)
        height = base.plane().distance(self.p3)
        return base.area() * height / 3.0

    def aspect(self) -> float:
        """Return the longest edge divided by the smallest height."""
        return self._longest_edge() / min(self._heights())

    def _longest_edge(self) -> float:
        return math.sqrt(max(norm2(e) for e in self.edges()))

    def _heights(self) -> list[float]:
        heights = []
        for i in range(4):
            j, k, m = (i + 1) % 4, (i + 2) % 4, (i + 3) % 4
            e1 = sub(self[k], self[j])
            e2 = sub(self[m], self[j])
            heights.append(new_plane(self[m], cross(e1, e2)).distance(self[i]))
        return heights