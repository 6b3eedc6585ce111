"""3x3 matrices."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .vec3 import Vec3, add


class _Quaternion(Protocol):
    w: float
    i: float
    j: float
    k: float


@dataclass(frozen=True, slots=True)
class Mat3:
    """A 3x3 matrix with row-major named entries."""

    x00: float = 0.0
    x01: float = 0.0
    x02: float = 0.0
    x10: float = 0.0
    x11: float = 0.0
    x12: float = 0.0
    x20: float = 0.0
    x21: float = 0.0
    x22: float = 0.0

    def determinant(self) -> float:
        """Return the determinant."""
        a = self
        return (
            a.x00 * (a.x11 * a.x22 - a.x21 * a.x12)
            - a.x01 * (a.x10 * a.x22 - a.x20 * a.x12)
            + a.x02 * (a.x10 * a.x21 - a.x20 * a.x11)
        )

    def inverse(self) -> Mat3:
        """Return the inverse; all NaN entries if the matrix is singular."""
        a = self
        det = a.determinant()
        if det == 0:
            return Mat3(*([math.nan] * 9))
        d = 1.0 / det
        return Mat3(
            (a.x11 * a.x22 - a.x12 * a.x21) * d,
            (a.x21 * a.x02 - a.x01 * a.x22) * d,
            (a.x01 * a.x12 - a.x11 * a.x02) * d,
            (a.x12 * a.x20 - a.x22 * a.x10) * d,
            (a.x22 * a.x00 - a.x20 * a.x02) * d,
            (a.x02 * a.x10 - a.x12 * a.x00) * d,
            (a.x10 * a.x21 - a.x20 * a.x11) * d,
            (a.x20 * a.x01 - a.x00 * a.x21) * d,
            (a.x00 * a.x11 - a.x01 * a.x10) * d,
        )

    def transpose(self) -> Mat3:
        """Return the transpose."""
        a = self
        return Mat3(a.x00, a.x10, a.x20, a.x01, a.x11, a.x21, a.x02, a.x12, a.x22)

    def vec_diag(self) -> Vec3:
        """Return the diagonal as a vector."""
        return Vec3(self.x00, self.x11, self.x22)

    def vec_row(self, i: int) -> Vec3:
        """Return row i (0, 1 or 2) as a vector."""
        if i == 0:
            return Vec3(self.x00, self.x01, self.x02)
        if i == 1:
            return Vec3(self.x10, self.x11, self.x12)
        if i == 2:
            return Vec3(self.x20, self.x21, self.x22)
        raise IndexError("row index out of range")

    def vec_col(self, j: int) -> Vec3:
        """Return column j (0, 1 or 2) as a vector."""
        if j == 0:
            return Vec3(self.x00, self.x10, self.x20)
        if j == 1:
            return Vec3(self.x01, self.x11, self.x21)
        if j == 2:
            return Vec3(self.x02, self.x12, self.x22)
        raise IndexError("column index out of range")

    def array(self) -> tuple[float, ...]:
        """Return the 9 entries in row-major order."""
        return (
            self.x00, self.x01, self.x02,
            self.x10, self.x11, self.x12,
            self.x20, self.x21, self.x22,
        )

    def eigs(self) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
        """Return the real and imaginary parts of the 3 eigenvalues.

        Only symmetric matrices are supported; others raise ValueError.
        """
        tol = 1e-12
        m = self
        if (
            abs(m.x01 - m.x10) > tol
            or abs(m.x12 - m.x21) > tol
            or abs(m.x02 - m.x20) > tol
        ):
            raise ValueError("non-symmetric eigenvalue algorithm not implemented")
        mean = (m.x00 + m.x11 + m.x22) / 3
        nm = sub_mat3(m, scale_mat3(identity_mat3(), mean))
        q = nm.determinant() / 2
        p = sum(v * v for v in nm.array()) / 6
        zeros = (0.0, 0.0, 0.0)
        if abs(p) < tol and abs(q) < tol:
            return (mean, mean, mean), zeros
        radicand = p * p * p - q * q
        num = math.sqrt(radicand) if radicand >= 0 else math.nan
        phi = math.atan(_ieee_div(num, q)) / 3
        sp, cp = math.sin(phi), math.cos(phi)
        sqrtp = math.sqrt(p)
        sqrt3 = math.sqrt(3)
        return (
            (
                mean + 2 * sqrtp * cp,
                mean - sqrtp * (cp + sqrt3 * sp),
                mean - sqrtp * (cp - sqrt3 * sp),
            ),
            zeros,
        )


def _ieee_div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def new_mat3(v: Sequence[float]) -> Mat3:
    """Build a matrix from the first 9 values of v in row-major order."""
    if len(v) < 9:
        raise ValueError("need at least 9 values for a 3x3 matrix")
    return Mat3(*v[:9])


def identity_mat3() -> Mat3:
    """Return the 3x3 identity matrix."""
    return Mat3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def skew(v: Vec3) -> Mat3:
    """Return the skew-symmetric matrix of v, so that skew(v)*w = v×w."""
    return Mat3(0.0, -v.z, v.y, v.z, 0.0, -v.x, -v.y, v.x, 0.0)


def equal_mat3(a: Mat3, b: Mat3, tolerance: float) -> bool:
    """Return True if every entry is within tolerance."""
    return all(abs(x - y) <= tolerance for x, y in zip(a.array(), b.array()))


def mul_mat3(a: Mat3, b: Mat3) -> Mat3:
    """Return the matrix product a*b."""
    return Mat3(
        a.x00 * b.x00 + a.x01 * b.x10 + a.x02 * b.x20,
        a.x00 * b.x01 + a.x01 * b.x11 + a.x02 * b.x21,
        a.x00 * b.x02 + a.x01 * b.x12 + a.x02 * b.x22,
        a.x10 * b.x00 + a.x11 * b.x10 + a.x12 * b.x20,
        a.x10 * b.x01 + a.x11 * b.x11 + a.x12 * b.x21,
        a.x10 * b.x02 + a.x11 * b.x12 + a.x12 * b.x22,
        a.x20 * b.x00 + a.x21 * b.x10 + a.x22 * b.x20,
        a.x20 * b.x01 + a.x21 * b.x11 + a.x22 * b.x21,
        a.x20 * b.x02 + a.x21 * b.x12 + a.x22 * b.x22,
    )


def add_mat3(a: Mat3, b: Mat3) -> Mat3:
    """Return the entry-wise sum a+b."""
    return Mat3(*(x + y for x, y in zip(a.array(), b.array())))


def sub_mat3(a: Mat3, b: Mat3) -> Mat3:
    """Return the entry-wise difference a-b."""
    return Mat3(*(x - y for x, y in zip(a.array(), b.array())))


def prod(v1: Vec3, v2t: Vec3) -> Mat3:
    """Return the outer product v1 * v2ᵀ."""
    return Mat3(
        v1.x * v2t.x, v1.x * v2t.y, v1.x * v2t.z,
        v1.y * v2t.x, v1.y * v2t.y, v1.y * v2t.z,
        v1.z * v2t.x, v1.z * v2t.y, v1.z * v2t.z,
    )


def mul_mat_vec(m: Mat3, v: Vec3) -> Vec3:
    """Return M * v."""
    return Vec3(
        v.x * m.x00 + v.y * m.x01 + v.z * m.x02,
        v.x * m.x10 + v.y * m.x11 + v.z * m.x12,
        v.x * m.x20 + v.y * m.x21 + v.z * m.x22,
    )


def mul_mat_vec_trans(m: Mat3, v: Vec3) -> Vec3:
    """Return Mᵀ * v."""
    return Vec3(
        v.x * m.x00 + v.y * m.x10 + v.z * m.x20,
        v.x * m.x01 + v.y * m.x11 + v.z * m.x21,
        v.x * m.x02 + v.y * m.x12 + v.z * m.x22,
    )


def scale_mat3(a: Mat3, k: float) -> Mat3:
    """Multiply every entry by k."""
    return Mat3(*(k * x for x in a.array()))


def rotating_mat3(rotation_unit: _Quaternion) -> Mat3:
    """Return the rotation matrix of a unit quaternion.

    A quaternion that is not of unit length gives a matrix that is not a
    pure rotation.
    """
    w, i, j, k = rotation_unit.w, rotation_unit.i, rotation_unit.j, rotation_unit.k
    ii = 2 * i * i
    jj = 2 * j * j
    kk = 2 * k * k
    wi = 2 * w * i
    wj = 2 * w * j
    wk = 2 * w * k
    ij = 2 * i * j
    jk = 2 * j * k
    ki = 2 * k * i
    return Mat3(
        1 - (jj + kk), ij - wk, ki + wj,
        ij + wk, 1 - (ii + kk), jk - wi,
        ki - wj, jk + wi, 1 - (ii + jj),
    )


def hessian(p: Vec3, step: float, f: Callable[[Vec3], float]) -> Mat3:
    """Approximate the Hessian of the scalar field f at p with finite differences."""
    h2 = step * step * 4
    dx = Vec3(x=step)
    dy = Vec3(y=step)
    dz = Vec3(z=step)
    fp = f(p)

    def diff2(d1: Vec3, d2: Vec3) -> float:
        return (f(add(p, add(d1, d2))) - f(add(p, d2)) - f(add(p, d1)) + fp) / h2

    fxx = diff2(dx, dx)
    fyy = diff2(dy, dy)
    fzz = diff2(dz, dz)
    fxy = diff2(dx, dy)
    fxz = diff2(dx, dz)
    fyz = diff2(dy, dz)
    return Mat3(fxx, fxy, fxz, fxy, fyy, fyz, fxz, fyz, fzz)