"""Axis-aligned 2D bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vec2 import (
    Vec2,
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
class Box2:
    """A 2D bounding box; well formed when min is component-wise below max."""

    min: Vec2 = Vec2()
    max: Vec2 = Vec2()

    def empty(self) -> bool:
        """Return True if the box has zero area or is malformed."""
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def size(self) -> Vec2:
        """Return the box dimensions."""
        return sub(self.max, self.min)

    def center(self) -> Vec2:
        """Return the box center."""
        return scale(0.5, add(self.min, self.max))

    def area(self) -> float:
        """Return the box area, 0 for malformed boxes."""
        sz = self.size()
        if sz.x < 0 or sz.y < 0:
            return 0.0
        return sz.x * sz.y

    def vertices(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Return the corners counter-clockwise starting at the minimum."""
        return (
            self.min,
            Vec2(self.max.x, self.min.y),
            self.max,
            Vec2(self.min.x, self.max.y),
        )

    def union(self, b: Box2) -> Box2:
        """Return the box enclosing both boxes."""
        if self.empty():
            return b
        if b.empty():
            return self
        return Box2(min_elem(self.min, b.min), max_elem(self.max, b.max))

    def intersect(self, b: Box2) -> Box2:
        """Return the shared region, or the zero box if there is none."""
        result = Box2(max_elem(self.min, b.min), min_elem(self.max, b.max))
        if result.empty():
            return Box2()
        return result

    def include_point(self, point: Vec2) -> Box2:
        """Return a box containing both this box and point."""
        return Box2(min_elem(self.min, point), max_elem(self.max, point))

    def add(self, v: Vec2) -> Box2:
        """Return the box translated by v."""
        return Box2(add(self.min, v), add(self.max, v))

    def scale_centered(self, scale: Vec2) -> Box2:
        """Scale the size element-wise around the center; negatives act as zero."""
        scale = max_elem(scale, Vec2())
        return new_centered_box2(self.center(), mul_elem(scale, self.size()))

    def scale(self, scale: Vec2) -> Box2:
        """Scale the box dimensions and position; negative factors mirror."""
        new_center = mul_elem(scale, self.center())
        return new_centered_box2(new_center, mul_elem(abs_elem(scale), self.size()))

    def contains(self, point: Vec2) -> bool:
        """Return True if point lies within the box bounds."""
        if self.empty():
            return point == self.min and point == self.max
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def contains_box(self, b: Box2) -> bool:
        """Return True if b lies fully within this box."""
        return self.contains(b.min) and self.contains(b.max)

    def equal(self, b: Box2, tol: float) -> bool:
        """Return True if both limits are within tol component-wise."""
        return equal_elem(self.min, b.min, tol) and equal_elem(self.max, b.max, tol)

    def canon(self) -> Box2:
        """Return the well formed version of this box."""
        return Box2(min_elem(self.min, self.max), max_elem(self.min, self.max))

    def diagonal(self) -> float:
        """Return the length of the box diagonal."""
        sz = self.size()
        return math.hypot(sz.x, sz.y)


def new_box2(x0: float, y0: float, x1: float, y1: float) -> Box2:
    """Build a well formed box from two corner coordinates in any order."""
    return Box2(Vec2(min(x0, x1), min(y0, y1)), Vec2(max(x0, x1), max(y0, y1)))


def new_centered_box2(center: Vec2, size: Vec2) -> Box2:
    """Build a box around center; negative size components become zero."""
    size = max_elem(size, Vec2())
    half = scale(0.5, size)
    return Box2(sub(center, half), add(center, half))