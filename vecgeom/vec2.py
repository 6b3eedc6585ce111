"""Two dimensional vectors and element-wise vector operations."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _fmin(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a >= b else b


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    t = float(math.trunc(x))
    if abs(x - t) >= 0.5:
        t += math.copysign(1.0, x)
    return t


def _ceil(x: float) -> float:
    return float(math.ceil(x)) if math.isfinite(x) else x


def _floor(x: float) -> float:
    return float(math.floor(x)) if math.isfinite(x) else x


@dataclass(frozen=True, slots=True)
class Vec2:
    """A 2D vector with x and y components."""

    x: float = 0.0
    y: float = 0.0

    def max(self) -> float:
        """Return the largest component."""
        return _fmax(self.x, self.y)

    def min(self) -> float:
        """Return the smallest component."""
        return _fmin(self.x, self.y)

    def array(self) -> tuple[float, float]:
        """Return the components as an (x, y) tuple."""
        return (self.x, self.y)

    def all_nonzero(self) -> bool:
        """Return True if every component is nonzero."""
        return self.x != 0 and self.y != 0


def add(p: Vec2, q: Vec2) -> Vec2:
    """Return the vector sum p + q."""
    return Vec2(p.x + q.x, p.y + q.y)


def add_scalar(f: float, v: Vec2) -> Vec2:
    """Add f to every component of v."""
    return Vec2(v.x + f, v.y + f)


def sub(p: Vec2, q: Vec2) -> Vec2:
    """Return the vector difference p - q."""
    return Vec2(p.x - q.x, p.y - q.y)


def scale(f: float, p: Vec2) -> Vec2:
    """Return p scaled by f."""
    return Vec2(f * p.x, f * p.y)


def cross(p: Vec2, q: Vec2) -> float:
    """Return the scalar cross product p×q."""
    return p.x * q.y - p.y * q.x


def dot(p: Vec2, q: Vec2) -> float:
    """Return the dot product p·q."""
    return p.x * q.x + p.y * q.y


def norm(p: Vec2) -> float:
    """Return the Euclidean norm of p."""
    return math.hypot(p.x, p.y)


def norm2(p: Vec2) -> float:
    """Return the squared Euclidean norm of p."""
    return p.x * p.x + p.y * p.y


def unit(p: Vec2) -> Vec2:
    """Return the unit vector colinear to p; NaN components for the zero vector."""
    if p.x == 0 and p.y == 0:
        return Vec2(math.nan, math.nan)
    return scale(1 / norm(p), p)


def cos(p: Vec2, q: Vec2) -> float:
    """Return the cosine of the angle between p and q."""
    return dot(p, q) / (norm(p) * norm(q))


def min_elem(a: Vec2, b: Vec2) -> Vec2:
    """Return the component-wise minimum of a and b."""
    return Vec2(_fmin(a.x, b.x), _fmin(a.y, b.y))


def max_elem(a: Vec2, b: Vec2) -> Vec2:
    """Return the component-wise maximum of a and b."""
    return Vec2(_fmax(a.x, b.x), _fmax(a.y, b.y))


def abs_elem(a: Vec2) -> Vec2:
    """Return a with every component replaced by its absolute value."""
    return Vec2(abs(a.x), abs(a.y))


def mul_elem(a: Vec2, b: Vec2) -> Vec2:
    """Return the Hadamard product of a and b."""
    return Vec2(a.x * b.x, a.y * b.y)


def div_elem(a: Vec2, b: Vec2) -> Vec2:
    """Return a divided component-wise by b."""
    return Vec2(a.x / b.x, a.y / b.y)


def equal_elem(a: Vec2, b: Vec2, tol: float) -> bool:
    """Return True if every component of a is within tol of b's."""
    return abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol


def round_elem(a: Vec2) -> Vec2:
    """Round each component, halves away from zero."""
    return Vec2(_round_half_away(a.x), _round_half_away(a.y))


def ceil_elem(a: Vec2) -> Vec2:
    """Apply ceil to each component."""
    return Vec2(_ceil(a.x), _ceil(a.y))


def floor_elem(a: Vec2) -> Vec2:
    """Apply floor to each component."""
    return Vec2(_floor(a.x), _floor(a.y))


def sin_elem(a: Vec2) -> Vec2:
    """Return sin applied to each component."""
    return Vec2(math.sin(a.x), math.sin(a.y))


def cos_elem(a: Vec2) -> Vec2:
    """Return cos applied to each component."""
    return Vec2(math.cos(a.x), math.cos(a.y))


def sincos_elem(a: Vec2) -> tuple[Vec2, Vec2]:
    """Return (sin(a), cos(a)) component-wise."""
    return sin_elem(a), cos_elem(a)


def copy_orientation(f: float, p1: Vec2, p2: Vec2, p3: Vec2) -> float:
    """Apply the plane orientation of three points to f.

    Returns f for counter-clockwise points, -f for clockwise points
    and 0 for collinear points.
    """
    slope1 = (p2.y - p1.y) * (p3.x - p2.x)
    slope2 = (p3.y - p2.y) * (p2.x - p1.x)
    if slope1 == slope2:
        return 0.0
    return math.copysign(f, slope2 - slope1)


def collinear(a: Vec2, b: Vec2, c: Vec2, tol: float) -> bool:
    """Return True if the three points lie on one line to within tol."""
    pa = unit(sub(a, c))
    pb = unit(sub(b, c))
    return abs(cross(pa, pb)) < tol