"""Infinite planes in 3D space."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import Vec3, dot, sub, unit


@dataclass(frozen=True, slots=True)
class Plane:
    """An infinite plane through point with unit normal."""

    point: Vec3
    normal: Vec3

    def distance(self, point: Vec3) -> float:
        """Return the distance from the plane to point."""
        return abs(dot(sub(point, self.point), self.normal))


def new_plane(p: Vec3, n: Vec3) -> Plane:
    """Build a plane through p whose normal has the direction of n."""
    return Plane(p, unit(n))