"""Regular point grids over 2D boxes."""

from __future__ import annotations

import math

from .box2 import Box2
from .vec2 import Vec2, div_elem, sub


def grid_points(domain: Box2, nx: int, ny: int) -> list[Vec2]:
    """Return the nx*ny grid vertices spanning domain, x-major.

    The point at (ix, iy) is at index iy*nx + ix. Box edges are included.
    """
    if nx <= 1 or ny <= 1:
        raise ValueError("grid needs at least 2 subdivisions per axis")
    step = div_elem(domain.size(), Vec2(float(nx - 1), float(ny - 1)))
    return [
        Vec2(domain.min.x + step.x * i, domain.min.y + step.y * j)
        for j in range(ny)
        for i in range(nx)
    ]


def grid_subdomain(
    domain: Box2, nx_domain: int, ny_domain: int, subdomain: Box2
) -> tuple[int, int, int]:
    """Locate the grid points of domain that fall inside subdomain.

    Returns (i_start, nx_sub, ny_sub): the index of the first contained point
    and the number of contained points along x and y.
    """
    if not domain.contains_box(subdomain):
        raise ValueError("subdomain not contained in domain")
    dx = (domain.max.x - domain.min.x) / (nx_domain - 1)
    dy = (domain.max.y - domain.min.y) / (ny_domain - 1)

    off = sub(subdomain.min, domain.min)
    ix0 = math.ceil(off.x / dx)
    iy0 = math.ceil(off.y / dy)
    i_start = ix0 + iy0 * nx_domain

    off_end = sub(subdomain.max, domain.min)
    ixf = int(off_end.x / dx)
    iyf = int(off_end.y / dy)
    return i_start, ixf - ix0 + 1, iyf - iy0 + 1