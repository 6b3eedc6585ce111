"""4x4 matrices for homogeneous 3D transforms."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .box3 import Box3
from .mat3 import Mat3, add_mat3, identity_mat3, mul_mat3, scale_mat3, skew
from .vec3 import Vec3, add, cross, dot, equal_elem, max_elem, min_elem, scale, unit


@dataclass(frozen=True, slots=True)
class Mat4:
    """A 4x4 matrix with row-major named entries."""

    x00: float = 0.0
    x01: float = 0.0
    x02: float = 0.0
    x03: float = 0.0
    x10: float = 0.0
    x11: float = 0.0
    x12: float = 0.0
    x13: float = 0.0
    x20: float = 0.0
    x21: float = 0.0
    x22: float = 0.0
    x23: float = 0.0
    x30: float = 0.0
    x31: float = 0.0
    x32: float = 0.0
    x33: float = 0.0

    def array(self) -> tuple[float, ...]:
        """Return the 16 entries in row-major order."""
        return (
            self.x00, self.x01, self.x02, self.x03,
            self.x10, self.x11, self.x12, self.x13,
            self.x20, self.x21, self.x22, self.x23,
            self.x30, self.x31, self.x32, self.x33,
        )

    def mul_position(self, b: Vec3) -> Vec3:
        """Apply the rotate/translate transform to the position b."""
        a = self
        return Vec3(
            a.x00 * b.x + a.x01 * b.y + a.x02 * b.z + a.x03,
            a.x10 * b.x + a.x11 * b.y + a.x12 * b.z + a.x13,
            a.x20 * b.x + a.x21 * b.y + a.x22 * b.z + a.x23,
        )

    def mul_box(self, box: Box3) -> Box3:
        """Transform a box and return the axis-aligned box enclosing the result."""
        a = self
        r = Vec3(a.x00, a.x10, a.x20)
        u = Vec3(a.x01, a.x11, a.x21)
        b = Vec3(a.x02, a.x12, a.x22)
        t = Vec3(a.x03, a.x13, a.x23)
        xa, xb = scale(box.min.x, r), scale(box.max.x, r)
        ya, yb = scale(box.min.y, u), scale(box.max.y, u)
        za, zb = scale(box.min.z, b), scale(box.max.z, b)
        xa, xb = min_elem(xa, xb), max_elem(xa, xb)
        ya, yb = min_elem(ya, yb), max_elem(ya, yb)
        za, zb = min_elem(za, zb), max_elem(za, zb)
        return Box3(
            add(xa, add(ya, add(za, t))),
            add(xb, add(yb, add(zb, t))),
        )

    def determinant(self) -> float:
        """Return the determinant."""
        (
            x00, x01, x02, x03,
            x10, x11, x12, x13,
            x20, x21, x22, x23,
            x30, x31, x32, x33,
        ) = self.array()
        return (
            x00 * x11 * x22 * x33 - x00 * x11 * x23 * x32
            + x00 * x12 * x23 * x31 - x00 * x12 * x21 * x33
            + x00 * x13 * x21 * x32 - x00 * x13 * x22 * x31
            - x01 * x12 * x23 * x30 + x01 * x12 * x20 * x33
            - x01 * x13 * x20 * x32 + x01 * x13 * x22 * x30
            - x01 * x10 * x22 * x33 + x01 * x10 * x23 * x32
            + x02 * x13 * x20 * x31 - x02 * x13 * x21 * x30
            + x02 * x10 * x21 * x33 - x02 * x10 * x23 * x31
            + x02 * x11 * x23 * x30 - x02 * x11 * x20 * x33
            - x03 * x10 * x21 * x32 + x03 * x10 * x22 * x31
            - x03 * x11 * x22 * x30 + x03 * x11 * x20 * x32
            - x03 * x12 * x20 * x31 + x03 * x12 * x21 * x30
        )

    def transpose(self) -> Mat4:
        """Return the transpose."""
        m = self.array()
        return Mat4(*(m[4 * col + row] for row in range(4) for col in range(4)))

    def inverse(self) -> Mat4:
        """Return the inverse; all NaN entries if the matrix is singular."""
        det = self.determinant()
        if det == 0:
            return Mat4(*([math.nan] * 16))
        d = 1.0 / det
        (
            x00, x01, x02, x03,
            x10, x11, x12, x13,
            x20, x21, x22, x23,
            x30, x31, x32, x33,
        ) = self.array()
        return Mat4(
            (x12 * x23 * x31 - x13 * x22 * x31 + x13 * x21 * x32 - x11 * x23 * x32 - x12 * x21 * x33 + x11 * x22 * x33) * d,
            (x03 * x22 * x31 - x02 * x23 * x31 - x03 * x21 * x32 + x01 * x23 * x32 + x02 * x21 * x33 - x01 * x22 * x33) * d,
            (x02 * x13 * x31 - x03 * x12 * x31 + x03 * x11 * x32 - x01 * x13 * x32 - x02 * x11 * x33 + x01 * x12 * x33) * d,
            (x03 * x12 * x21 - x02 * x13 * x21 - x03 * x11 * x22 + x01 * x13 * x22 + x02 * x11 * x23 - x01 * x12 * x23) * d,
            (x13 * x22 * x30 - x12 * x23 * x30 - x13 * x20 * x32 + x10 * x23 * x32 + x12 * x20 * x33 - x10 * x22 * x33) * d,
            (x02 * x23 * x30 - x03 * x22 * x30 + x03 * x20 * x32 - x00 * x23 * x32 - x02 * x20 * x33 + x00 * x22 * x33) * d,
            (x03 * x12 * x30 - x02 * x13 * x30 - x03 * x10 * x32 + x00 * x13 * x32 + x02 * x10 * x33 - x00 * x12 * x33) * d,
            (x02 * x13 * x20 - x03 * x12 * x20 + x03 * x10 * x22 - x00 * x13 * x22 - x02 * x10 * x23 + x00 * x12 * x23) * d,
            (x11 * x23 * x30 - x13 * x21 * x30 + x13 * x20 * x31 - x10 * x23 * x31 - x11 * x20 * x33 + x10 * x21 * x33) * d,
            (x03 * x21 * x30 - x01 * x23 * x30 - x03 * x20 * x31 + x00 * x23 * x31 + x01 * x20 * x33 - x00 * x21 * x33) * d,
            (x01 * x13 * x30 - x03 * x11 * x30 + x03 * x10 * x31 - x00 * x13 * x31 - x01 * x10 * x33 + x00 * x11 * x33) * d,
            (x03 * x11 * x20 - x01 * x13 * x20 - x03 * x10 * x21 + x00 * x13 * x21 + x01 * x10 * x23 - x00 * x11 * x23) * d,
            (x12 * x21 * x30 - x11 * x22 * x30 - x12 * x20 * x31 + x10 * x22 * x31 + x11 * x20 * x32 - x10 * x21 * x32) * d,
            (x01 * x22 * x30 - x02 * x21 * x30 + x02 * x20 * x31 - x00 * x22 * x31 - x01 * x20 * x32 + x00 * x21 * x32) * d,
            (x02 * x11 * x30 - x01 * x12 * x30 - x02 * x10 * x31 + x00 * x12 * x31 + x01 * x10 * x32 - x00 * x11 * x32) * d,
            (x01 * x12 * x20 - x02 * x11 * x20 + x02 * x10 * x21 - x00 * x12 * x21 - x01 * x10 * x22 + x00 * x11 * x22) * d,
        )


def new_mat4(v: Sequence[float]) -> Mat4:
    """Build a matrix from the first 16 values of v in row-major order."""
    if len(v) < 16:
        raise ValueError("need at least 16 values for a 4x4 matrix")
    return Mat4(*v[:16])


def identity_mat4() -> Mat4:
    """Return the 4x4 identity matrix."""
    return Mat4(x00=1.0, x11=1.0, x22=1.0, x33=1.0)


def translating_mat4(v: Vec3) -> Mat4:
    """Return the matrix translating by v."""
    return Mat4(x00=1.0, x03=v.x, x11=1.0, x13=v.y, x22=1.0, x23=v.z, x33=1.0)


def scaling_mat4(v: Vec3) -> Mat4:
    """Return the matrix scaling each axis by the components of v."""
    return Mat4(x00=v.x, x11=v.y, x22=v.z, x33=1.0)


def rotating_mat4(angle_radians: float, axis: Vec3) -> Mat4:
    """Return the right-handed rotation by angle_radians around axis."""
    ax = unit(axis)
    s, c = math.sin(angle_radians), math.cos(angle_radians)
    m = 1 - c
    return Mat4(
        m * ax.x * ax.x + c, m * ax.x * ax.y - ax.z * s, m * ax.z * ax.x + ax.y * s, 0.0,
        m * ax.x * ax.y + ax.z * s, m * ax.y * ax.y + c, m * ax.y * ax.z - ax.x * s, 0.0,
        m * ax.z * ax.x - ax.y * s, m * ax.y * ax.z + ax.x * s, m * ax.z * ax.z + c, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def mul_mat4(a: Mat4, b: Mat4) -> Mat4:
    """Return the matrix product a*b."""
    am, bm = a.array(), b.array()
    return Mat4(
        *(
            sum(am[4 * row + k] * bm[4 * k + col] for k in range(4))
            for row in range(4)
            for col in range(4)
        )
    )


def as_mat4(m: Mat3) -> Mat4:
    """Embed a 3x3 matrix in the top-left of a 4x4 matrix with a 1 in the corner."""
    return Mat4(
        m.x00, m.x01, m.x02, 0.0,
        m.x10, m.x11, m.x12, 0.0,
        m.x20, m.x21, m.x22, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def rotating_between_vecs_mat4(start: Vec3, dest: Vec3) -> Mat4:
    """Return the rotation turning the direction of start onto that of dest."""
    eps = 1e-12
    if equal_elem(start, Vec3(), eps) or equal_elem(dest, Vec3(), eps):
        return identity_mat4()
    start = unit(start)
    dest = unit(dest)
    if equal_elem(start, dest, eps):
        return identity_mat4()
    if equal_elem(scale(-1, start), dest, eps):
        return Mat4(x00=-1.0, x11=-1.0, x22=-1.0, x33=1.0)
    vx = skew(cross(start, dest))
    k = 1.0 / (1.0 + dot(start, dest))
    vx2 = scale_mat3(mul_mat3(vx, vx), k)
    return as_mat4(add_mat3(add_mat3(vx, identity_mat3()), vx2))


def equal_mat4(a: Mat4, b: Mat4, tolerance: float) -> bool:
    """Return True if every entry is within tolerance."""
    return all(abs(x - y) <= tolerance for x, y in zip(a.array(), b.array()))