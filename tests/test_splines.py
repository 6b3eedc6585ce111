import pytest

from vecgeom.splines import (
    Spline3,
    Spline3Sampler,
    spline_basis,
    spline_bezier_cubic,
    spline_bezier_quadratic,
    spline_cardinal,
    spline_catmull_rom,
    spline_hermite,
)
from vecgeom.vec2 import Vec2, equal_elem

P0, P1, P2, P3 = Vec2(0, 0), Vec2(1, 2), Vec2(2, 2), Vec2(3, 0)
TOL = 1e-9


def test_bezier_matrix_array():
    assert spline_bezier_cubic().mat4_array() == (
        1, 0, 0, 0,
        -3, 3, 0, 0,
        3, -6, 3, 0,
        -1, 3, -3, 1,
    )


def test_short_matrix_rejected():
    with pytest.raises(ValueError):
        Spline3((1.0,) * 15)


def test_bezier_interpolates_endpoints():
    bz = spline_bezier_cubic()
    assert equal_elem(bz.evaluate(0, P0, P1, P2, P3), P0, TOL)
    assert equal_elem(bz.evaluate(1, P0, P1, P2, P3), P3, TOL)


def test_hermite_interpolates_points():
    h = spline_hermite()
    vel0, vel1 = Vec2(1, 1), Vec2(-1, 2)
    assert equal_elem(h.evaluate(0, P0, vel0, P2, vel1), P0, TOL)
    assert equal_elem(h.evaluate(1, P0, vel0, P2, vel1), P2, TOL)


def test_catmull_rom_interpolates_middle_points():
    cr = spline_catmull_rom()
    assert equal_elem(cr.evaluate(0, P0, P1, P2, P3), P1, TOL)
    assert equal_elem(cr.evaluate(1, P0, P1, P2, P3), P2, TOL)
    assert spline_cardinal(0.5).mat4_array() == cr.mat4_array()


def test_quadratic_ignores_fourth_point():
    q = spline_bezier_quadratic()
    a = q.evaluate(0.3, P0, P1, P2, P3)
    b = q.evaluate(0.3, P0, P1, P2, Vec2(100, -50))
    assert equal_elem(a, b, TOL)
    assert equal_elem(q.evaluate(1, P0, P1, P2, P3), P2, TOL)


@pytest.mark.parametrize("factory", [spline_bezier_cubic, spline_basis, spline_catmull_rom])
@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.9, 1.0])
def test_basis_partition_of_unity(factory, t):
    sp = factory()
    assert sum(b(t) for b in sp.basis_funcs()) == pytest.approx(1.0)
    assert sum(b(t) for b in sp.basis_funcs_diff()) == pytest.approx(0.0, abs=1e-12)
    assert sum(b(t) for b in sp.basis_funcs_diff2()) == pytest.approx(0.0, abs=1e-12)
    assert sum(b(t) for b in sp.basis_funcs_diff3()) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("t", [0.0, 0.3, 0.7, 1.0])
def test_basis_matches_evaluate(t):
    sp = spline_bezier_cubic()
    weights = [b(t) for b in sp.basis_funcs()]
    pts = (P0, P1, P2, P3)
    x = sum(w * p.x for w, p in zip(weights, pts))
    y = sum(w * p.y for w, p in zip(weights, pts))
    assert equal_elem(sp.evaluate(t, *pts), Vec2(x, y), 1e-9)


def test_sampler_requires_tolerance_and_depth():
    s = Spline3Sampler(spline_bezier_cubic())
    s.set_spline_points(P0, P1, P2, P3)
    with pytest.raises(ValueError):
        s.sample_bisect(4)
    s.tolerance = -1
    with pytest.raises(ValueError):
        s.sample_bisect(4)
    s.tolerance = 0.01
    with pytest.raises(ValueError):
        s.sample_bisect(0)


def test_straight_curve_has_no_interior_samples():
    s = Spline3Sampler(spline_bezier_cubic(), tolerance=0.01)
    s.set_spline_points(Vec2(0, 0), Vec2(1, 1), Vec2(2, 2), Vec2(3, 3))
    assert s.sample_bisect(5) == []
    ext = s.sample_bisect_with_extremes(5)
    assert len(ext) == 2
    assert equal_elem(ext[0], Vec2(0, 0), TOL)
    assert equal_elem(ext[1], Vec2(3, 3), TOL)


def test_curved_samples_ordered_and_bounded():
    depth = 5
    s = Spline3Sampler(spline_bezier_cubic(), tolerance=0.001)
    s.set_spline_points(P0, P1, P2, P3)
    pts = s.sample_bisect(depth)
    assert 0 < len(pts) <= 2**depth - 1
    xs = [p.x for p in pts]
    assert xs == sorted(xs)
    assert all(0 < x < 3 for x in xs)
    ext = s.sample_bisect_with_extremes(depth)
    assert ext[1:-1] == pts
    assert equal_elem(ext[0], P0, TOL) and equal_elem(ext[-1], P3, TOL)
    assert s.evaluate(0.5) == spline_bezier_cubic().evaluate(0.5, P0, P1, P2, P3)