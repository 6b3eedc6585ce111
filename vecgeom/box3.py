"""Axis-aligned 3D bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vec3 import (
    Vec3,
    abs_elem,
    add,
    equal_elem,
    max_elem,
    min_elem,
    mul_elem,
    scale,
    sub,
)


@dataclass(frozen=True, slots=True)
class Box3:
    """A 3D bounding box; well formed when min is component-wise below max."""

    min: Vec3 = Vec3()
    max: Vec3 = Vec3()

    def empty(self) -> bool:
        """Return True if the box has zero volume or is malformed."""
        return (
            self.min.x >= self.max.x
            or self.min.y >= self.max.y
            or self.min.z >= self.max.z
        )

    def size(self) -> Vec3:
        """Return the box dimensions."""
        return sub(self.max, self.min)

    def center(self) -> Vec3:
        """Return the box center."""
        return scale(0.5, add(self.min, self.max))

    def volume(self) -> float:
        """Return the enclosed volume, 0 for malformed boxes."""
        sz = self.size()
        if sz.x < 0 or sz.y < 0 or sz.z < 0:
            return 0.0
        return sz.x * sz.z * sz.y

    def vertices(self) -> tuple[Vec3, ...]:
        """Return the 8 corners.

        Corners 0-3 run counter-clockwise in the XY plane at minimum Z,
        corners 4-7 likewise at maximum Z.
        """
        lo, hi = self.min, self.max
        return (
            lo,
            Vec3(hi.x, lo.y, lo.z),
            Vec3(hi.x, hi.y, lo.z),
            Vec3(lo.x, hi.y, lo.z),
            Vec3(lo.x, lo.y, hi.z),
            Vec3(hi.x, lo.y, hi.z),
            hi,
            Vec3(lo.x, hi.y, hi.z),
        )

    def union(self, b: Box3) -> Box3:
        """Return the box enclosing both boxes."""
        if self.empty():
            return b
        if b.empty():
            return self
        return Box3(min_elem(self.min, b.min), max_elem(self.max, b.max))

    def intersect(self, b: Box3) -> Box3:
        """Return the shared region, or the zero box if there is none."""
        result = Box3(max_elem(self.min, b.min), min_elem(self.max, b.max))
        if result.empty():
            return Box3()
        return result

    def include_point(self, point: Vec3) -> Box3:
        """Return a box containing both this box and point."""
        return Box3(min_elem(self.min, point), max_elem(self.max, point))

    def add(self, v: Vec3) -> Box3:
        """Return the box translated by v."""
        return Box3(add(self.min, v), add(self.max, v))

    def scale_centered(self, scale: Vec3) -> Box3:
        """Scale the size element-wise around the center; negatives act as zero."""
        scale = max_elem(scale, Vec3())
        return new_centered_box3(self.center(), mul_elem(scale, self.size()))

    def scale(self, scale: Vec3) -> Box3:
        """Scale the box dimensions and position; negative factors mirror."""
        new_center = mul_elem(scale, self.center())
        return new_centered_box3(new_center, mul_elem(abs_elem(scale), self.size()))

    def contains(self, point: Vec3) -> bool:
        """Return True if point lies within the box bounds."""
        if self.empty():
            return point == self.min and point == self.max
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
            and self.min.z <= point.z <= self.max.z
        )

    def contains_box(self, b: Box3) -> bool:
        """Return True if b lies fully within this box."""
        return self.contains(b.min) and self.contains(b.max)

    def equal(self, b: Box3, tol: float) -> bool:
        """Return True if both limits are within tol component-wise."""
        return equal_elem(self.min, b.min, tol) and equal_elem(self.max, b.max, tol)

    def canon(self) -> Box3:
        """Return the well formed version of this box."""
        return Box3(min_elem(self.min, self.max), max_elem(self.min, self.max))

    def diagonal(self) -> float:
        """Return the length of the box diagonal."""
        sz = self.size()
        return math.hypot(math.hypot(sz.x, sz.y), sz.z)


def new_box3(
    x0: float, y0: float, z0: float, x1: float, y1: float, z1: float
) -> Box3:
    """Build a well formed box from two corner coordinates in any order."""
    return Box3(
        Vec3(min(x0, x1), min(y0, y1), min(z0, z1)),
        Vec3(max(x0, x1), max(y0, y1), max(z0, z1)),
    )


def new_centered_box3(center: Vec3, size: Vec3) -> Box3:
    """Build a box around center; negative size components become zero."""
    size = max_elem(size, Vec3())
    half = scale(0.5, size)
    return Box3(sub(center, half), add(center, half))