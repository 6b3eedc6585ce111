"""Triangles in the plane."""

from __future__ import annotations

import math
from typing import NamedTuple

from .line2 import Line2
from .vec2 import Vec2, add, norm, norm2, scale, sub


def _d2_sign(p1: Vec2, p2: Vec2, p3: Vec2) -> float:
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


class Triangle2(NamedTuple):
    """A triangle given by its three vertices; their order sets the orientation."""

    p0: Vec2
    p1: Vec2
    p2: Vec2

    def centroid(self) -> Vec2:
        """Return the intersection of the three medians."""
        return scale(1.0 / 3.0, add(add(self.p0, self.p1), self.p2))

    def sides(self) -> tuple[Line2, Line2, Line2]:
        """Return the sides as lines (p0,p1), (p1,p2), (p2,p0)."""
        return (
            Line2(self.p0, self.p1),
            Line2(self.p1, self.p2),
            Line2(self.p2, self.p0),
        )

    def _edges(self) -> tuple[Vec2, Vec2, Vec2]:
        return sub(self.p1, self.p0), sub(self.p2, self.p1), sub(self.p0, self.p2)

    def _long_idx(self) -> int:
        lengths = [norm2(e) for e in self._edges()]
        long_len = lengths[0]
        long_idx = 0
        if lengths[1] > long_len:
            long_len = lengths[1]
            long_idx = 1
        if lengths[2] > long_len:
            long_idx = 2
        return long_idx

    def area(self) -> float:
        """Return the surface area using a numerically careful Heron formula."""
        a, b, c = sorted(norm(e) for e in self._edges())
        value = (c + (b + a)) * (a - (c - b))
        value *= (a + (c - b)) * (c + (b - a))
        return math.sqrt(max(value, 0.0)) / 4

    def is_degenerate(self, tol: float) -> bool:
        """Return True if all vertices lie within tol of the longest side."""
        idx = self._long_idx()
        line = Line2(self[idx], self[(idx + 1) % 3])
        return line.distance_infinite(self[(idx + 2) % 3]) <= tol

    def contains(self, point: Vec2) -> bool:
        """Return True if point lies on the triangle's surface."""
        d1 = _d2_sign(point, self.p0, self.p1)
        d2 = _d2_sign(point, self.p1, self.p2)
        d3 = _d2_sign(point, self.p2, self.p0)
        has_neg = d1 < 0 or d2 < 0 or d3 < 0
        has_pos = d1 > 0 or d2 > 0 or d3 > 0
        return not (has_neg and has_pos)

    def closest(self, p: Vec2) -> tuple[Vec2, int, int]:
        """Return (closest point, side, vertex) on the triangle for p.

        If p lies on the triangle, p is returned with side = vertex = -1.
        Otherwise exactly one of side and vertex is a non-negative index:
        the side or vertex that the closest point lies on.
        """
        if self.contains(p):
            return p, -1, -1
        min_dist = math.inf
        closest = p
        side = -1
        vertex = -1
        for j in range(3):
            nxt = (j + 1) % 3
            point, flag = Line2(self[j], self[nxt]).closest(p)
            d2 = norm2(sub(p, point))
            if d2 < min_dist:
                if flag < 0:
                    side, vertex = j, -1
                else:
                    side = -1
                    vertex = nxt if flag == 0 else j
                min_dist = d2
                closest = point
        return closest, side, vertex