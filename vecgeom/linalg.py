"""Singular value and QR decompositions of 3x3 matrices."""

from __future__ import annotations

import math

from .mat3 import Mat3, mul_mat3, rotating_mat3
from .quat import Quat

_GAMMA = 5.828427124  # sqrt(8) + 3
_CSTAR = 0.923879532  # cos(pi/8)
_SSTAR = 0.3826834323  # sin(pi/8)
_EPSILON = 1e-6


def svd(a: Mat3) -> tuple[Mat3, Mat3, Mat3]:
    """Return (U, S, V) with a = U * S * Vᵀ.

    U and V are rotations; S holds the singular values on its diagonal,
    ordered by decreasing magnitude (the last one may be negative).
    """
    ata = mul_mat3(a.transpose(), a)
    v = rotating_mat3(_jacobi_eigenanalysis(ata))
    b = mul_mat3(a, v)
    b, v = _sort_singular_values(b, v)
    u, s = qr_decomposition(b)
    return u, s, v


def qr_decomposition(b: Mat3) -> tuple[Mat3, Mat3]:
    """Return (Q, R) with b = Q * R, Q a rotation and R upper triangular."""
    b11, b12, b13 = b.x00, b.x01, b.x02
    b21, b22, b23 = b.x10, b.x11, b.x12
    b31, b32, b33 = b.x20, b.x21, b.x22

    ch1, sh1 = _qr_givens(b11, b21)
    a = 1 - 2 * sh1 * sh1
    s = 2 * ch1 * sh1
    r11, r12, r13 = a * b11 + s * b21, a * b12 + s * b22, a * b13 + s * b23
    r21, r22, r23 = -s * b11 + a * b21, -s * b12 + a * b22, -s * b13 + a * b23
    r31, r32, r33 = b31, b32, b33

    ch2, sh2 = _qr_givens(r11, r31)
    a = 1 - 2 * sh2 * sh2
    s = 2 * ch2 * sh2
    b11, b12, b13 = a * r11 + s * r31, a * r12 + s * r32, a * r13 + s * r33
    b21, b22, b23 = r21, r22, r23
    b31, b32, b33 = -s * r11 + a * r31, -s * r12 + a * r32, -s * r13 + a * r33

    ch3, sh3 = _qr_givens(b22, b32)
    a = 1 - 2 * sh3 * sh3
    s = 2 * ch3 * sh3
    r = Mat3(
        b11, b12, b13,
        a * b21 + s * b31, a * b22 + s * b32, a * b23 + s * b33,
        -s * b21 + a * b31, -s * b22 + a * b32, -s * b23 + a * b33,
    )

    sh12 = sh1 * sh1
    sh22 = sh2 * sh2
    sh32 = sh3 * sh3
    q = Mat3(
        (-1 + 2 * sh12) * (-1 + 2 * sh22),
        4 * ch2 * ch3 * (-1 + 2 * sh12) * sh2 * sh3
        + 2 * ch1 * sh1 * (-1 + 2 * sh32),
        4 * ch1 * ch3 * sh1 * sh3
        - 2 * ch2 * (-1 + 2 * sh12) * sh2 * (-1 + 2 * sh32),
        2 * ch1 * sh1 * (1 - 2 * sh22),
        -8 * ch1 * ch2 * ch3 * sh1 * sh2 * sh3
        + (-1 + 2 * sh12) * (-1 + 2 * sh32),
        -2 * ch3 * sh3
        + 4 * sh1 * (ch3 * sh1 * sh3 + ch1 * ch2 * sh2 * (-1 + 2 * sh32)),
        2 * ch2 * sh2,
        2 * ch3 * (1 - 2 * sh22) * sh3,
        (-1 + 2 * sh22) * (-1 + 2 * sh32),
    )
    return q, r


def _qr_givens(a1: float, a2: float) -> tuple[float, float]:
    rho = math.sqrt(a1 * a1 + a2 * a2)
    sh = a2 if rho > _EPSILON else 0.0
    ch = abs(a1) + max(rho, _EPSILON)
    w = 1.0 / math.sqrt(ch * ch + sh * sh)
    ch *= w
    sh *= w
    if a1 < 0:
        ch, sh = sh, ch
    return ch, sh


def _approximate_givens(a11: float, a12: float, a22: float) -> tuple[float, float]:
    ch = 2 * (a11 - a22)
    sh = a12
    if _GAMMA * sh * sh < ch * ch:
        w = 1.0 / math.sqrt(ch * ch + sh * sh)
        return w * ch, w * sh
    return _CSTAR, _SSTAR


def _jacobi_eigenanalysis(m: Mat3) -> Quat:
    """Return the rotation diagonalising the symmetric matrix m."""
    s = [m.x00, m.x10, m.x11, m.x20, m.x21, m.x22]
    q = [0.0, 0.0, 0.0, 1.0]  # i, j, k, w
    for _ in range(4):
        for x, y, z in ((0, 1, 2), (1, 2, 0), (2, 0, 1)):
            _jacobi_conj(s, q, x, y, z)
    return Quat(q[0], q[1], q[2], q[3])


def _jacobi_conj(s: list[float], q: list[float], x: int, y: int, z: int) -> None:
    s11, s21, s22, s31, s32, s33 = s
    ch, sh = _approximate_givens(s11, s21, s22)
    norm = ch * ch + sh * sh
    a = (ch * ch - sh * sh) / norm
    b = (2 * sh * ch) / norm

    tmp = (q[0] * sh, q[1] * sh, q[2] * sh)
    sh *= q[3]
    q[:] = [v * ch for v in q]
    q[z] += sh
    q[3] -= tmp[z]
    q[x] += tmp[y]
    q[y] -= tmp[x]

    n11 = a * (a * s11 + b * s21) + b * (a * s21 + b * s22)
    n21 = a * (-b * s11 + a * s21) + b * (-b * s21 + a * s22)
    n22 = -b * (-b * s11 + a * s21) + a * (-b * s21 + a * s22)
    n31 = a * s31 + b * s32
    n32 = -b * s31 + a * s32
    n33 = s33
    # Rotate the storage so the next axis pair comes first.
    s[:] = [n22, n32, n33, n21, n31, n11]


def _neg_swap_columns(m: list[float], c1: int, c2: int) -> None:
    for row in range(3):
        i1, i2 = 3 * row + c1, 3 * row + c2
        m[i1], m[i2] = m[i2], -m[i1]


def _sort_singular_values(b: Mat3, v: Mat3) -> tuple[Mat3, Mat3]:
    bm = list(b.array())
    vm = list(v.array())
    rho1, rho2, rho3 = (
        sum(bm[3 * row + col] ** 2 for row in range(3)) for col in range(3)
    )
    if rho1 < rho2:
        _neg_swap_columns(bm, 0, 1)
        _neg_swap_columns(vm, 0, 1)
        rho1, rho2 = rho2, rho1
    if rho1 < rho3:
        _neg_swap_columns(bm, 0, 2)
        _neg_swap_columns(vm, 0, 2)
        rho3 = rho1
    if rho2 < rho3:
        _neg_swap_columns(bm, 1, 2)
        _neg_swap_columns(vm, 1, 2)
    return Mat3(*bm), Mat3(*vm)