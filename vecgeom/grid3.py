"""Regular point grids over 3D boxes."""

from __future__ import annotations

import math

from .box3 import Box3
from .vec3 import Vec3, div_elem, sub


def grid_points(domain: Box3, nx: int, ny: int, nz: int) -> list[Vec3]:
    """Return the nx*ny*nz grid vertices spanning domain.

    Ordering is x-major, then y: the point at (ix, iy, iz) is at index
    iz*nx*ny + iy*nx + ix. Box edges are included.
    """
    if nx <= 1 or ny <= 1 or nz <= 1:
        raise ValueError("grid needs at least 2 subdivisions per axis")
    step = div_elem(domain.size(), Vec3(float(nx - 1), float(ny - 1), float(nz - 1)))
    lo = domain.min
    return [
        Vec3(lo.x + step.x * i, lo.y + step.y * j, lo.z + step.z * k)
        for k in range(nz)
        for j in range(ny)
        for i in range(nx)
    ]


def grid_subdomain(
    domain: Box3, nx_domain: int, ny_domain: int, nz_domain: int, subdomain: Box3
) -> tuple[int, int, int, int]:
    """Locate the grid points of domain that fall inside subdomain.

    Returns (i_start, nx_sub, ny_sub, nz_sub). The start index places each
    z layer at a stride of nx_domain + ny_domain.
    """
    if not domain.contains_box(subdomain):
        raise ValueError("subdomain not contained in domain")
    dx = (domain.max.x - domain.min.x) / (nx_domain - 1)
    dy = (domain.max.y - domain.min.y) / (ny_domain - 1)
    dz = (domain.max.z - domain.min.z) / (nz_domain - 1)

    off = sub(subdomain.min, domain.min)
    ix0 = math.ceil(off.x / dx)
    iy0 = math.ceil(off.y / dy)
    iz0 = math.ceil(off.z / dz)
    i_start = ix0 + iy0 * nx_domain + iz0 * (nx_domain + ny_domain)

    off_end = sub(subdomain.max, domain.min)
    ixf = int(off_end.x / dx)
    iyf = int(off_end.y / dy)
    izf = int(off_end.z / dz)
    return i_start, ixf - ix0 + 1, iyf - iy0 + 1, izf - iz0 + 1