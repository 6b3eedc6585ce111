"""Triangles in 3D space."""

from __future__ import annotations

import math
from typing import NamedTuple

from .line3 import Line3
from .mat4 import Mat4
from .plane import Plane, new_plane
from .triangle2 import Triangle2
from .vec2 import Vec2
from .vec3 import Vec3, add, cross, dot, norm, norm2, scale, sub, unit


def sort3(a: float, b: float, c: float) -> tuple[float, float, float]:
    """Return the three values in ascending order."""
    if b < a:
        a, b = b, a
    if c < b:
        b, c = c, b
        if b < a:
            a, b = b, a
    return a, b, c


class Triangle3(NamedTuple):
    """A triangle given by its three vertices; their order sets the normal."""

    p0: Vec3
    p1: Vec3
    p2: Vec3

    def centroid(self) -> Vec3:
        """Return the intersection of the three medians."""
        return scale(1.0 / 3.0, add(add(self.p0, self.p1), self.p2))

    def sides(self) -> tuple[Line3, Line3, Line3]:
        """Return the sides as lines (p0,p1), (p1,p2), (p2,p0)."""
        return (
            Line3(self.p0, self.p1),
            Line3(self.p1, self.p2),
            Line3(self.p2, self.p0),
        )

    def _edges(self) -> tuple[Vec3, Vec3, Vec3]:
        return sub(self.p1, self.p0), sub(self.p2, self.p1), sub(self.p0, self.p2)

    def normal(self) -> Vec3:
        """Return the unnormalised normal, of length twice the area."""
        s1, s2, _ = self._edges()
        return cross(s1, s2)

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

    def is_degenerate(self, tol: float) -> bool:
        """Return True if all vertices lie within tol of the longest side."""
        idx = self._long_idx()
        line = Line3(self[idx], self[(idx + 1) % 3])
        return line.distance_infinite(self[(idx + 2) % 3]) <= tol

    def area(self) -> float:
        """Return the surface area using a numerically careful Heron formula."""
        a, b, c = sort3(*(norm(e) for e in self._edges()))
        value = (c + (b + a)) * (a - (c - b))
        value *= (a + (c - b)) * (c + (b - a))
        return math.sqrt(max(value, 0.0)) / 4

    def plane(self) -> Plane:
        """Return the plane through p0 with the triangle's normal."""
        return new_plane(self.p0, self.normal())

    def closest(self, p: Vec3) -> tuple[Vec3, int, int]:
        """Return (closest point, side, vertex) on the triangle for p.

        side and vertex follow the planar convention: -1 for both when the
        point projects inside the triangle, otherwise the index of the side
        or vertex on which the closest point lies.
        """
        tform = _plane_transform(self)
        flat = [tform.mul_position(v) for v in self]
        pxy = tform.mul_position(p)
        tri2 = Triangle2(*(Vec2(v.x, v.y) for v in flat))
        closest2, side, vertex = tri2.closest(Vec2(pxy.x, pxy.y))
        closest = tform.inverse().mul_position(Vec3(closest2.x, closest2.y, 0.0))
        return closest, side, vertex


def _plane_transform(t: Triangle3) -> Mat4:
    """Return the rigid transform taking t onto the z=0 plane with p0 at the origin."""
    xc = unit(sub(t.p1, t.p0))
    u3 = sub(t.p2, t.p0)
    yc = unit(sub(u3, scale(dot(xc, u3), xc)))
    zc = cross(xc, yc)
    p0 = t.p0
    return Mat4(
        xc.x, xc.y, xc.z, -dot(xc, p0),
        yc.x, yc.y, yc.z, -dot(yc, p0),
        zc.x, zc.y, zc.z, -dot(zc, p0),
        0.0, 0.0, 0.0, 1.0,
    )