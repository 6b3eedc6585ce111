"""2D and 3D vector geometry: vectors, lines, matrices, boxes, grids, triangles, polygons, splines, planes, tetrahedra, quaternions and 3x3 SVD."""

__version__ = "0.1.0"