"""Three dimensional vectors and element-wise vector operations."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from .vec2 import _ceil, _floor, _fmax, _fmin, _round_half_away


@dataclass(frozen=True, slots=True)
class Vec3:
    """A 3D vector with x, y and z components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def max(self) -> float:
        """Return the largest component."""
        return _fmax(self.x, _fmax(self.y, self.z))

    def min(self) -> float:
        """Return the smallest component."""
        return _fmin(self.x, _fmin(self.y, self.z))

    def array(self) -> tuple[float, float, float]:
        """Return the components as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def all_nonzero(self) -> bool:
        """Return True if every component is nonzero."""
        return self.x != 0 and self.y != 0 and self.z != 0


def add(p: Vec3, q: Vec3) -> Vec3:
    """Return the vector sum p + q."""
    return Vec3(p.x + q.x, p.y + q.y, p.z + q.z)


def add_scalar(f: float, v: Vec3) -> Vec3:
    """Add f to every component of v."""
    return Vec3(v.x + f, v.y + f, v.z + f)


def sub(p: Vec3, q: Vec3) -> Vec3:
    """Return the vector difference p - q."""
    return Vec3(p.x - q.x, p.y - q.y, p.z - q.z)


def scale(f: float, p: Vec3) -> Vec3:
    """Return p scaled by f."""
    return Vec3(f * p.x, f * p.y, f * p.z)


def dot(p: Vec3, q: Vec3) -> float:
    """Return the dot product p·q."""
    return p.x * q.x + p.y * q.y + p.z * q.z


def cross(p: Vec3, q: Vec3) -> Vec3:
    """Return the cross product p×q."""
    return Vec3(
        p.y * q.z - p.z * q.y,
        p.z * q.x - p.x * q.z,
        p.x * q.y - p.y * q.x,
    )


def norm(p: Vec3) -> float:
    """Return the Euclidean norm of p."""
    return math.hypot(p.x, p.y, p.z)


def norm2(p: Vec3) -> float:
    """Return the squared Euclidean norm of p."""
    return p.x * p.x + p.y * p.y + p.z * p.z


def unit(p: Vec3) -> Vec3:
    """Return the unit vector colinear to p; NaN components for the zero vector."""
    if p.x == 0 and p.y == 0 and p.z == 0:
        return Vec3(math.nan, math.nan, math.nan)
    return scale(1 / norm(p), p)


def cos(p: Vec3, q: Vec3) -> float:
    """Return the cosine of the angle between p and q."""
    return dot(p, q) / (norm(p) * norm(q))


def divergence(p: Vec3, step: Vec3, field: Callable[[Vec3], Vec3]) -> float:
    """Approximate the divergence of field at p with finite differences."""
    sx = Vec3(x=step.x)
    divx = (field(add(p, sx)).x - field(sub(p, sx)).x) / step.x
    sy = Vec3(y=step.y)
    divy = (field(add(p, sy)).y - field(sub(p, sy)).y) / step.y
    sz = Vec3(z=step.z)
    divz = (field(add(p, sz)).z - field(sub(p, sz)).z) / step.z
    return 0.5 * (divx + divy + divz)


def gradient(p: Vec3, step: Vec3, field: Callable[[Vec3], float]) -> Vec3:
    """Approximate the gradient of a scalar field at p with central differences."""
    dx = Vec3(x=step.x)
    dy = Vec3(y=step.y)
    dz = Vec3(z=step.z)
    return Vec3(
        (field(add(p, dx)) - field(sub(p, dx))) / (2 * step.x),
        (field(add(p, dy)) - field(sub(p, dy))) / (2 * step.y),
        (field(add(p, dz)) - field(sub(p, dz))) / (2 * step.z),
    )


def min_elem(a: Vec3, b: Vec3) -> Vec3:
    """Return the component-wise minimum of a and b."""
    return Vec3(_fmin(a.x, b.x), _fmin(a.y, b.y), _fmin(a.z, b.z))


def max_elem(a: Vec3, b: Vec3) -> Vec3:
    """Return the component-wise maximum of a and b."""
    return Vec3(_fmax(a.x, b.x), _fmax(a.y, b.y), _fmax(a.z, b.z))


def abs_elem(a: Vec3) -> Vec3:
    """Return a with every component replaced by its absolute value."""
    return Vec3(abs(a.x), abs(a.y), abs(a.z))


def mul_elem(a: Vec3, b: Vec3) -> Vec3:
    """Return the Hadamard product of a and b."""
    return Vec3(a.x * b.x, a.y * b.y, a.z * b.z)


def div_elem(a: Vec3, b: Vec3) -> Vec3:
    """Return a divided component-wise by b."""
    return Vec3(a.x / b.x, a.y / b.y, a.z / b.z)


def equal_elem(a: Vec3, b: Vec3, tol: float) -> bool:
    """Return True if every component of a is within tol of b's."""
    return abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol and abs(a.z - b.z) <= tol


def round_elem(a: Vec3) -> Vec3:
    """Round each component, halves away from zero."""
    return Vec3(_round_half_away(a.x), _round_half_away(a.y), _round_half_away(a.z))


def ceil_elem(a: Vec3) -> Vec3:
    """Apply ceil to each component."""
    return Vec3(_ceil(a.x), _ceil(a.y), _ceil(a.z))


def floor_elem(a: Vec3) -> Vec3:
    """Apply floor to each component."""
    return Vec3(_floor(a.x), _floor(a.y), _floor(a.z))


def sin_elem(a: Vec3) -> Vec3:
    """Return sin applied to each component."""
    return Vec3(math.sin(a.x), math.sin(a.y), math.sin(a.z))


def cos_elem(a: Vec3) -> Vec3:
    """Return cos applied to each component."""
    return Vec3(math.cos(a.x), math.cos(a.y), math.cos(a.z))


def sincos_elem(a: Vec3) -> tuple[Vec3, Vec3]:
    """Return (sin(a), cos(a)) component-wise."""
    return sin_elem(a), cos_elem(a)