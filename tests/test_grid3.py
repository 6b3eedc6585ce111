import pytest

from vecgeom.box3 import new_box3
from vecgeom.grid3 import grid_points, grid_subdomain


def test_grid_count_and_extremes():
    domain = new_box3(-1, -2, -3, 4, 5, 6)
    pts = grid_points(domain, 3, 4, 5)
    assert len(pts) == 3 * 4 * 5
    assert pts[0] == domain.min
    assert pts[-1] == domain.max
    assert all(domain.contains(p) for p in pts)


def test_grid_ordering_x_major():
    domain = new_box3(0, 0, 0, 4, 4, 4)
    nx, ny, nz = 5, 3, 2
    pts = grid_points(domain, nx, ny, nz)
    assert pts[1].x > pts[0].x and pts[1].y == pts[0].y
    assert pts[nx].y > pts[0].y and pts[nx].x == pts[0].x
    assert pts[nx * ny].z > pts[0].z and pts[nx * ny].y == pts[0].y


@pytest.mark.parametrize("dims", [(1, 2, 2), (2, 1, 2), (2, 2, 0)])
def test_grid_too_few_subdivisions(dims):
    with pytest.raises(ValueError):
        grid_points(new_box3(0, 0, 0, 1, 1, 1), *dims)


def test_subdomain_not_contained():
    domain = new_box3(0, 0, 0, 1, 1, 1)
    with pytest.raises(ValueError):
        grid_subdomain(domain, 3, 3, 3, new_box3(0.5, 0.5, 0.5, 2, 1, 1))


def test_subdomain_whole_domain():
    domain = new_box3(0, 0, 0, 4, 4, 4)
    assert grid_subdomain(domain, 5, 5, 5, domain) == (0, 5, 5, 5)


def test_subdomain_points_contained():
    domain = new_box3(0, 0, 0, 8, 8, 8)
    nx, ny, nz = 9, 9, 9
    sub = new_box3(1.5, 2.5, 0, 6.2, 7.1, 3.5)
    pts = grid_points(domain, nx, ny, nz)
    i_start, nx_sub, ny_sub, nz_sub = grid_subdomain(domain, nx, ny, nz, sub)
    first_layer = pts[: nx * ny]
    inside = [p for p in first_layer if sub.contains(p)]
    assert len(inside) == nx_sub * ny_sub
    for iy in range(ny_sub):
        for ix in range(nx_sub):
            assert sub.contains(pts[i_start + iy * nx + ix])
    z_levels = {p.z for p in pts if sub.min.z <= p.z <= sub.max.z}
    assert len(z_levels) == nz_sub