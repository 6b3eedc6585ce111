import math

import pytest

from vecgeom.polygon import (
    BAD_ARC,
    CP_EQUAL_TO_PREV,
    LARGE_SMOOTH_RADIUS,
    TOO_FEW_VERTICES,
    PolygonBuilder,
    PolygonControlPoint,
    PolygonError,
)
from vecgeom.vec2 import Vec2, norm, sub

TEST_OFFSETS = [
    Vec2(-1, -2),
    Vec2(-2, 1),
    Vec2(2, -1),
    Vec2(),
    Vec2(1, 0),
    Vec2(0, 1),
    Vec2(1, 1),
]


@pytest.mark.parametrize("offset", TEST_OFFSETS)
@pytest.mark.parametrize("facets", [2, 3, 4, 6, 7])
def test_circle_smoothing(offset, facets):
    poly = PolygonBuilder()
    for r in [1e-6, 0.1, 1, 5, 100]:
        poly.reset()
        ox, oy = offset.x, offset.y
        poly.add_xy(ox + r, oy + 0)
        poly.add_xy(ox + r, oy + r).smooth(r, facets)
        poly.add_xy(ox + 0, oy + r)
        poly.add_xy(ox - r, oy + r).smooth(r, facets)
        poly.add_xy(ox - r, oy + 0)
        poly.add_xy(ox - r, oy - r).smooth(r, facets)
        poly.add_xy(ox + 0, oy - r)
        poly.add_xy(ox + r, oy - r).smooth(r, facets)

        verts = poly.vecs()
        assert len(verts) == 4 + (facets - 1) * 4
        for v in verts:
            got_r = norm(sub(v, offset))
            assert not math.isnan(got_r)
            assert abs(got_r - r) <= 1e-4


@pytest.mark.parametrize("offset", TEST_OFFSETS)
@pytest.mark.parametrize("facets", [2, 3, 4, 6, 7])
def test_circle_arcing(offset, facets):
    poly = PolygonBuilder()
    for r in [0.1, 1, 5, 100]:
        poly.reset()
        poly.add_xy(offset.x + r, offset.y).arc(r, facets)
        poly.add_xy(offset.x - r, offset.y).arc(r, facets)
        verts = poly.vecs()
        assert len(verts) == 2 + (facets - 1) * 2
        for v in verts:
            assert abs(norm(sub(v, offset)) - r) <= 1e-4


def test_smooth_radius_limit_bug():
    poly = PolygonBuilder()
    poly.add_xy(0.8, 0.6)
    poly.add_xy(0.4, 0.6).smooth(0.2, 5)
    poly.add_xy(0.3, 0)
    vecs = poly.vecs()
    assert len(vecs) >= 6
    assert vecs[0] == Vec2(0.8, 0.6)
    assert vecs[-1] == Vec2(0.3, 0)


def test_arc_radius_limit_bug():
    poly = PolygonBuilder()
    poly.add_xy(1, 0)
    poly.add_xy(0, 38).arc(380, 2)
    vecs = poly.vecs()
    assert len(vecs) == 3
    assert vecs[0] == Vec2(1, 0)
    assert vecs[-1] == Vec2(0, 38)
    assert all(not math.isnan(v.x) and not math.isnan(v.y) for v in vecs)


@pytest.mark.parametrize(
    "verts, want_cw",
    [
        ([Vec2(0, 0), Vec2(0, 1), Vec2(1, 0)], False),
        ([Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)], True),
    ],
)
def test_is_clockwise(verts, want_cw):
    poly = PolygonBuilder()
    for v in verts:
        poly.add(v)
    assert poly.is_clockwise() is want_cw


ARC_CASES = [
    (Vec2(135.1107, 116.67478), Vec2(135.1107, 116.67478), Vec2(135.10947, 116.673546), False),
    (Vec2(-1.05, 149.07), Vec2(-1.12, 148.7), Vec2(-1.0500132, 149), False),
    (Vec2(-40.52799, -25.628536), Vec2(-40.88199, -25.628536), Vec2(-40.704987, -25.628536), True),
    (Vec2(165.36844, 125.63215), Vec2(165.59346, 125.85769), Vec2(165.48108, 125.74479), True),
    (Vec2(168.19885, 129.9802), Vec2(167.97331, 129.75517), Vec2(168.08597, 129.86781), True),
]


@pytest.mark.parametrize("start, end, center, is_valid", ARC_CASES)
def test_arc_invalid_arc(start, end, center, is_valid):
    radius = norm(sub(start, center))
    poly = PolygonBuilder()
    poly.add(start)
    poly.add(end).arc(radius, 3)
    if is_valid:
        vecs = poly.vecs()
        assert vecs
        for v in vecs:
            assert not math.isnan(v.x) and not math.isnan(v.y)
    else:
        with pytest.raises(PolygonError) as info:
            poly.vecs()
        assert info.value.index == 1


def test_bad_arc_reason():
    poly = PolygonBuilder()
    poly.add_xy(0, 0)
    poly.add_xy(10, 0).arc(1, 3)
    with pytest.raises(PolygonError) as info:
        poly.vecs()
    assert info.value.reason == BAD_ARC
    assert info.value.index == 1


def test_too_few_vertices():
    poly = PolygonBuilder()
    poly.add_xy(1, 1)
    with pytest.raises(PolygonError) as info:
        poly.vecs()
    assert info.value.reason == TOO_FEW_VERTICES
    assert info.value.index is None


def test_duplicate_control_point():
    poly = PolygonBuilder()
    poly.add_xy(0, 0)
    poly.add_xy(1, 0)
    poly.add_xy(1, 0)
    poly.add_xy(0, 1)
    with pytest.raises(PolygonError) as info:
        poly.vecs()
    assert info.value.reason == CP_EQUAL_TO_PREV
    assert info.value.index == 2


def test_large_smoothing_radius():
    poly = PolygonBuilder()
    poly.add_xy(0, 0)
    poly.add_xy(1, 0).smooth(5, 4)
    poly.add_xy(1, 1)
    with pytest.raises(PolygonError) as info:
        poly.vecs()
    assert info.value.reason == LARGE_SMOOTH_RADIUS
    assert info.value.index == 1


def test_plain_polygon_round_trip():
    pts = [Vec2(0, 0), Vec2(2, 0), Vec2(2, 3), Vec2(0, 3)]
    poly = PolygonBuilder()
    for p in pts:
        poly.add(p)
    assert poly.vecs() == pts
    assert poly.vecs() == pts


def test_nagon_too_few_sides_does_nothing():
    poly = PolygonBuilder()
    poly.add_xy(5, 5)
    poly.nagon(2, 1.0)
    assert len(poly) == 1


def test_nagon_smoothed_rejects_large_radius():
    poly = PolygonBuilder()
    poly.nagon_smoothed(4, 1.0, 3, 2.0)
    assert len(poly) == 0


def test_nagon_smoothed_points_within_circumradius():
    poly = PolygonBuilder()
    poly.nagon_smoothed(4, 1.0, 4, 0.2)
    verts = poly.vecs()
    assert len(verts) > 4
    for v in verts:
        assert norm(v) <= 1.0 + 1e-9


def test_add_relative_and_drop_last():
    poly = PolygonBuilder()
    first = poly.add_relative_xy(1, 2)
    second = poly.add_relative(Vec2(3, -1))
    assert first.v == Vec2(1, 2)
    assert second.v == Vec2(4, 1)
    poly.drop_last()
    assert len(poly) == 1
    poly.drop_last()
    poly.drop_last()
    assert len(poly) == 0


def test_add_polar():
    poly = PolygonBuilder()
    cp = poly.add_polar_r_theta(2, math.pi / 2)
    assert cp.v.x == pytest.approx(0.0, abs=1e-12)
    assert cp.v.y == pytest.approx(2.0)


def test_control_point_modifiers():
    cp = PolygonControlPoint(Vec2(1, 1))
    cp.smooth(0, 3)
    assert (cp.radius, cp.facets) == (0.0, 0)
    cp.smooth(0.5, 3)
    assert (cp.radius, cp.facets) == (0.5, 3)
    cp.arc(-2, 4)
    assert (cp.radius, cp.facets) == (-2, -4)
    cp.chamfer(2)
    assert cp.radius == pytest.approx(math.sqrt(2))
    assert cp.facets == 1


def test_chamfered_corner_is_dropped():
    poly = PolygonBuilder()
    poly.add_xy(0, 0)
    poly.add_xy(2, 0).chamfer(0.5)
    poly.add_xy(2, 2)
    assert poly.vecs() == [Vec2(0, 0), Vec2(2, 2)]


def test_clockwise_needs_three_vertices():
    poly = PolygonBuilder()
    poly.add_xy(0, 0)
    poly.add_xy(1, 0)
    assert poly.is_clockwise() is False