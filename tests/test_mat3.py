import math
from dataclasses import dataclass

import pytest

from vecgeom.mat3 import (
    Mat3,
    add_mat3,
    equal_mat3,
    hessian,
    identity_mat3,
    mul_mat3,
    mul_mat_vec,
    mul_mat_vec_trans,
    new_mat3,
    prod,
    rotating_mat3,
    scale_mat3,
    skew,
    sub_mat3,
)
from vecgeom.vec3 import Vec3, cross, dot, equal_elem, scale

A = new_mat3([2.0, -1.0, 0.5, 3.0, 4.0, -2.0, 1.0, 0.0, 5.0])
B = new_mat3([1.0, 2.0, 3.0, -4.0, 0.5, 6.0, 7.0, 8.0, -1.0])


@dataclass
class _Q:
    w: float
    i: float
    j: float
    k: float


def test_new_mat3_round_trip():
    values = [float(i) for i in range(9)]
    assert list(new_mat3(values).array()) == values


def test_new_mat3_too_short():
    with pytest.raises(ValueError):
        new_mat3([1.0] * 8)


def test_identity_is_neutral():
    assert mul_mat3(identity_mat3(), A) == A
    assert mul_mat3(A, identity_mat3()) == A


def test_inverse_round_trip():
    assert equal_mat3(mul_mat3(A, A.inverse()), identity_mat3(), 1e-12)
    assert equal_mat3(mul_mat3(B.inverse(), B), identity_mat3(), 1e-12)


def test_singular_inverse_is_nan():
    singular = new_mat3([1, 2, 3, 2, 4, 6, 0, 1, 1])
    assert [str(x) for x in singular.inverse().array()] == ["nan"] * 9


def test_determinant_is_multiplicative():
    lhs = mul_mat3(A, B).determinant()
    assert math.isclose(lhs, A.determinant() * B.determinant(), rel_tol=1e-12)
    assert A.transpose().determinant() == pytest.approx(A.determinant())


def test_transpose_involution_and_rows():
    assert A.transpose().transpose() == A
    for i in range(3):
        assert A.transpose().vec_row(i) == A.vec_col(i)


def test_vec_row_col_out_of_range():
    with pytest.raises(IndexError):
        A.vec_row(3)
    with pytest.raises(IndexError):
        A.vec_col(-1)


def test_vec_diag():
    arr = A.array()
    assert A.vec_diag() == Vec3(arr[0], arr[4], arr[8])


def test_add_sub_round_trip():
    assert equal_mat3(sub_mat3(add_mat3(A, B), B), A, 1e-12)


def test_scale_mat3_matches_add():
    assert scale_mat3(A, 2) == add_mat3(A, A)


def test_skew_is_cross_product():
    v = Vec3(1.5, -2.0, 3.0)
    w = Vec3(0.5, 4.0, -1.0)
    assert equal_elem(mul_mat_vec(skew(v), w), cross(v, w), 1e-12)
    assert skew(v).transpose() == scale_mat3(skew(v), -1)


def test_prod_outer_product():
    v1 = Vec3(1, 2, 3)
    v2 = Vec3(-1, 0.5, 2)
    w = Vec3(3, -2, 1)
    assert equal_elem(mul_mat_vec(prod(v1, v2), w), scale(dot(v2, w), v1), 1e-12)


def test_mul_mat_vec_trans():
    v = Vec3(1, -2, 3)
    assert mul_mat_vec_trans(A, v) == mul_mat_vec(A.transpose(), v)


def test_rotating_identity_quaternion():
    assert rotating_mat3(_Q(1, 0, 0, 0)) == identity_mat3()


def test_rotating_quarter_turn_about_z():
    h = math.sqrt(0.5)
    rot = rotating_mat3(_Q(h, 0, 0, h))
    assert equal_elem(mul_mat_vec(rot, Vec3(1, 0, 0)), Vec3(0, 1, 0), 1e-12)
    assert equal_mat3(mul_mat3(rot, rot.transpose()), identity_mat3(), 1e-12)
    assert rot.determinant() == pytest.approx(1.0)


def test_hessian_linear_is_zero_and_symmetric():
    def lin(p):
        return 2 * p.x - 3 * p.y + p.z

    h = hessian(Vec3(1, 2, 3), 0.01, lin)
    assert equal_mat3(h, Mat3(), 1e-9)

    def quad(p):
        return p.x * p.y + p.y * p.z * p.z

    hq = hessian(Vec3(1, 2, 3), 0.01, quad)
    assert equal_mat3(hq, hq.transpose(), 1e-12)


def test_eigs_diagonal():
    real, imag = new_mat3([1, 0, 0, 0, 2, 0, 0, 0, 3]).eigs()
    assert sorted(real) == pytest.approx([1, 2, 3])
    assert imag == (0.0, 0.0, 0.0)


def test_eigs_scalar_matrix():
    real, _ = scale_mat3(identity_mat3(), 4.0).eigs()
    assert real == (4.0, 4.0, 4.0)


def test_eigs_trace_and_determinant():
    m = new_mat3([2, 1, 0, 1, 3, 1, 0, 1, 4])
    real, _ = m.eigs()
    assert sum(real) == pytest.approx(m.x00 + m.x11 + m.x22)
    assert real[0] * real[1] * real[2] == pytest.approx(m.determinant())


def test_eigs_non_symmetric_raises():
    with pytest.raises(ValueError):
        A.eigs()