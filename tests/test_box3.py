import math

from vecgeom.box3 import Box3, new_box3, new_centered_box3
from vecgeom.vec3 import Vec3, equal_elem


def test_new_box3_swaps_corners():
    assert new_box3(2, 3, 4, 0, 0, 0) == new_box3(0, 0, 0, 2, 3, 4)
    box = new_box3(2, -3, 4, 0, 1, -1)
    assert box.min == Vec3(0, -3, -1)
    assert box.max == Vec3(2, 1, 4)


def test_volume_and_malformed():
    box = new_box3(0, 0, 0, 2, 3, 4)
    assert box.volume() == 24.0
    assert Box3(Vec3(1, 1, 1), Vec3(0, 2, 2)).volume() == 0.0


def test_empty():
    assert Box3().empty()
    assert not new_box3(0, 0, 0, 1, 1, 1).empty()
    assert new_box3(0, 0, 0, 1, 1, 0).empty()


def test_centered_box_center_and_size():
    center = Vec3(1, 2, 3)
    size = Vec3(4, 6, 8)
    box = new_centered_box3(center, size)
    assert box.center() == center
    assert box.size() == size


def test_centered_box_negative_size_is_zero():
    box = new_centered_box3(Vec3(1, 1, 1), Vec3(-2, 2, 2))
    assert box.size().x == 0
    assert box.empty()


def test_vertices_order_and_containment():
    box = new_box3(-1, -2, -3, 1, 2, 3)
    verts = box.vertices()
    assert len(verts) == 8
    assert verts[0] == box.min
    assert verts[6] == box.max
    assert all(box.contains(v) for v in verts)
    assert len(set(verts)) == 8
    assert all(v.z == box.min.z for v in verts[:4])
    assert all(v.z == box.max.z for v in verts[4:])


def test_union_contains_both():
    a = new_box3(0, 0, 0, 1, 1, 1)
    b = new_box3(2, 2, 2, 3, 4, 5)
    u = a.union(b)
    assert u.contains_box(a)
    assert u.contains_box(b)
    assert u == Box3(a.min, b.max)


def test_union_with_empty_returns_other():
    a = new_box3(0, 0, 0, 1, 1, 1)
    assert Box3().union(a) == a
    assert a.union(Box3()) == a


def test_intersect():
    a = new_box3(0, 0, 0, 2, 2, 2)
    b = new_box3(1, 1, 1, 3, 3, 3)
    assert a.intersect(b) == Box3(b.min, a.max)
    c = new_box3(5, 5, 5, 6, 6, 6)
    assert a.intersect(c) == Box3()


def test_include_point():
    a = new_box3(0, 0, 0, 1, 1, 1)
    p = Vec3(-2, 5, 0.5)
    b = a.include_point(p)
    assert b.contains(p)
    assert b.contains_box(a)


def test_add_translates():
    a = new_box3(0, 0, 0, 1, 2, 3)
    v = Vec3(10, -5, 2)
    b = a.add(v)
    assert b.size() == a.size()
    assert b.min == Vec3(10, -5, 2)


def test_scale_centered_keeps_center():
    a = new_box3(0, 0, 0, 2, 4, 6)
    b = a.scale_centered(Vec3(2, 0.5, -1))
    assert equal_elem(b.center(), a.center(), 1e-12)
    assert b.size() == Vec3(4, 2, 0)


def test_scale_mirror():
    a = new_box3(1, 2, 3, 2, 4, 6)
    b = a.scale(Vec3(-1, -1, -1))
    assert b.equal(new_box3(-1, -2, -3, -2, -4, -6), 1e-12)


def test_contains_on_empty_box():
    p = Vec3(1, 1, 1)
    assert Box3(p, p).contains(p)
    assert not Box3(p, p).contains(Vec3(1, 1, 2))


def test_contains_box():
    outer = new_box3(0, 0, 0, 10, 10, 10)
    assert outer.contains_box(new_box3(1, 1, 1, 2, 2, 2))
    assert not outer.contains_box(new_box3(1, 1, 1, 11, 2, 2))


def test_equal_tolerance():
    a = new_box3(0, 0, 0, 1, 1, 1)
    b = new_box3(0, 0, 0.01, 1, 1, 1)
    assert a.equal(b, 0.1)
    assert not a.equal(b, 0.001)


def test_canon():
    bad = Box3(Vec3(1, 0, 5), Vec3(0, 1, 2))
    good = bad.canon()
    assert good == new_box3(1, 0, 5, 0, 1, 2)
    assert good.canon() == good


def test_diagonal():
    assert math.isclose(new_box3(0, 0, 0, 1, 1, 1).diagonal(), math.sqrt(3))
    box = new_box3(0, 0, 0, 3, 0, 0)
    assert box.diagonal() == 3.0