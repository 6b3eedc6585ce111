"""2x2 matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Mat2:
    """A 2x2 matrix with row-major named entries."""

    x00: float = 0.0
    x01: float = 0.0
    x10: float = 0.0
    x11: float = 0.0

    def determinant(self) -> float:
        """Return the determinant."""
        return self.x00 * self.x11 - self.x10 * self.x01

    def transpose(self) -> Mat2:
        """Return the transpose."""
        return Mat2(self.x00, self.x10, self.x01, self.x11)

    def inverse(self) -> Mat2:
        """Return the inverse; all NaN entries if the matrix is singular."""
        det = self.determinant()
        if det == 0:
            return Mat2(math.nan, math.nan, math.nan, math.nan)
        d = 1.0 / det
        return Mat2(self.x11 * d, -self.x01 * d, -self.x10 * d, self.x00 * d)

    def vec_row(self, i: int) -> Vec2:
        """Return row i (0 or 1) as a vector."""
        if i == 0:
            return Vec2(self.x00, self.x01)
        if i == 1:
            return Vec2(self.x10, self.x11)
        raise IndexError("row index out of range")

    def vec_col(self, j: int) -> Vec2:
        """Return column j (0 or 1) as a vector."""
        if j == 0:
            return Vec2(self.x00, self.x10)
        if j == 1:
            return Vec2(self.x01, self.x11)
        raise IndexError("column index out of range")

    def array(self) -> tuple[float, float, float, float]:
        """Return the entries in row-major order."""
        return (self.x00, self.x01, self.x10, self.x11)


def new_mat2(v: Sequence[float]) -> Mat2:
    """Build a matrix from the first 4 values of v in row-major order."""
    if len(v) < 4:
        raise ValueError("need at least 4 values for a 2x2 matrix")
    return Mat2(v[0], v[1], v[2], v[3])


def identity_mat2() -> Mat2:
    """Return the 2x2 identity matrix."""
    return Mat2(1.0, 0.0, 0.0, 1.0)


def equal_mat2(a: Mat2, b: Mat2, tolerance: float) -> bool:
    """Return True if every entry differs by less than tolerance."""
    return all(abs(x - y) < tolerance for x, y in zip(a.array(), b.array()))


def mul_mat2(a: Mat2, b: Mat2) -> Mat2:
    """Return the matrix product a*b."""
    return Mat2(
        a.x00 * b.x00 + a.x01 * b.x10,
        a.x00 * b.x01 + a.x01 * b.x11,
        a.x10 * b.x00 + a.x11 * b.x10,
        a.x10 * b.x01 + a.x11 * b.x11,
    )


def add_mat2(a: Mat2, b: Mat2) -> Mat2:
    """Return the entry-wise sum a+b."""
    return Mat2(a.x00 + b.x00, a.x01 + b.x01, a.x10 + b.x10, a.x11 + b.x11)


def prod(v1: Vec2, v2t: Vec2) -> Mat2:
    """Return the outer product v1 * v2ᵀ."""
    return Mat2(v1.x * v2t.x, v1.x * v2t.y, v1.y * v2t.x, v1.y * v2t.y)


def mul_mat_vec(m: Mat2, v: Vec2) -> Vec2:
    """Return M * v."""
    return Vec2(v.x * m.x00 + v.y * m.x01, v.x * m.x10 + v.y * m.x11)


def mul_mat_vec_trans(m: Mat2, v: Vec2) -> Vec2:
    """Return Mᵀ * v."""
    return Vec2(v.x * m.x00 + v.y * m.x10, v.x * m.x01 + v.y * m.x11)


def scale_mat2(a: Mat2, k: float) -> Mat2:
    """Multiply every entry by k."""
    return Mat2(k * a.x00, k * a.x01, k * a.x10, k * a.x11)


def rotation_mat2(a: float) -> Mat2:
    """Return the counter-clockwise rotation matrix for angle a in radians."""
    s, c = math.sin(a), math.cos(a)
    return Mat2(c, -s, s, c)