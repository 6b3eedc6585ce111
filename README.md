# vecgeom

This package provides geometry for two and three dimensions in plain Python.
It depends only on the standard library. Vectors, matrices, boxes and
quaternions are immutable dataclasses or named tuples of Python floats. The
operations on them are module-level functions such as `add`, `sub` and `dot`,
or methods on the classes.

## Modules

### 2D

- `vecgeom.vec2`
  - `Vec2` has the methods `max`, `min`, `array` and `all_nonzero`.
  - Vector functions: `add`, `add_scalar`, `sub`, `scale`, `cross`, `dot`, `norm`, `norm2`, `unit` and `cos`.
  - Element-wise helpers: `min_elem`, `max_elem`, `abs_elem`, `mul_elem`, `div_elem`, `equal_elem`, `round_elem`, `ceil_elem`, `floor_elem`, `sin_elem`, `cos_elem` and `sincos_elem`.
  - `copy_orientation` and `collinear`.
- `vecgeom.line2`
  - `Line2` has the methods `interpolate`, `distance_infinite`, `closest_infinite` and `closest`.
  - `closest` returns the point together with a flag: `0` means the end vertex, `1` the start vertex, and `-1` the segment.
- `vecgeom.mat2`
  - `Mat2` has the methods `determinant`, `transpose`, `inverse`, `vec_row`, `vec_col` and `array`.
  - Functions: `new_mat2`, `identity_mat2`, `equal_mat2`, `mul_mat2`, `add_mat2`, `prod`, `mul_mat_vec`, `mul_mat_vec_trans`, `scale_mat2` and `rotation_mat2`.
  - `inverse` of a singular matrix returns NaN entries.
- `vecgeom.box2`
  - `Box2` has the methods `empty`, `size`, `center`, `area`, `vertices`, `union`, `intersect`, `include_point`, `add`, `scale_centered`, `scale`, `contains`, `contains_box`, `equal`, `canon` and `diagonal`.
  - Constructors: `new_box2` and `new_centered_box2`.
- `vecgeom.grid2`
  - `grid_points(domain, nx, ny)` returns the grid vertices in x-major order. The point `(ix, iy)` is at index `iy*nx + ix`.
  - `grid_subdomain` returns `(i_start, nx_sub, ny_sub)` for the grid points that fall inside a sub-box.
- `vecgeom.triangle2`
  - `Triangle2` has the methods `centroid`, `sides`, `area`, `is_degenerate`, `contains` and `closest`.
  - `closest` returns `(point, side, vertex)`.
- `vecgeom.polygon`
  - `PolygonBuilder` provides `add`, `add_xy`, `add_polar_r_theta`, `add_relative`, `add_relative_xy`, `drop_last`, `reset`, `nagon`, `nagon_smoothed`, `is_clockwise` and `vecs`.
  - Every `add*` method returns a `PolygonControlPoint`. You can call `smooth(radius, facets)` on it to round the corner. You can call `arc(radius, facets)` to join it to the previous point with an arc: a positive radius runs counter-clockwise and a negative radius runs clockwise.
  - `chamfer(size)` sets a smoothing with a single facet. A single-facet smoothing adds no points, so that vertex is left out of the outline.
- `vecgeom.splines`
  - `Spline3` is a uniform cubic spline given by a row-major 4x4 matrix. It has the methods `evaluate`, `mat4_array` and the `basis_funcs*` family.
  - Ready-made splines: `spline_bezier_cubic`, `spline_hermite`, `spline_catmull_rom`, `spline_cardinal`, `spline_basis` and `spline_bezier_quadratic`.
  - `Spline3Sampler` samples a spline adaptively by bisection, with `sample_bisect` and `sample_bisect_with_extremes`. Its `tolerance` must be set to a positive value first.

### 3D

- `vecgeom.vec3`
  - `Vec3` and the same kind of vector and element-wise functions as `vec2`. Here `cross` returns a vector.
  - Finite-difference `gradient` and `divergence`.
- `vecgeom.line3`
  - `Line3` has the methods `interpolate`, `distance_infinite` and `closest_infinite`.
- `vecgeom.box3`
  - `Box3` has the same methods as `Box2`, except that it has `volume` where `Box2` has `area`.
  - Constructors: `new_box3` and `new_centered_box3`.
- `vecgeom.grid3`
  - `grid_points(domain, nx, ny, nz)` returns the point `(ix, iy, iz)` at index `iz*nx*ny + iy*nx + ix`.
  - `grid_subdomain` returns `(i_start, nx_sub, ny_sub, nz_sub)`. Its start index counts z layers at a stride of `nx + ny`.
- `vecgeom.mat3`
  - `Mat3` has the methods `determinant`, `inverse`, `transpose`, `vec_diag`, `vec_row`, `vec_col`, `array` and `eigs`.
  - `eigs` supports symmetric matrices only.
  - Functions: `new_mat3`, `identity_mat3`, `skew`, `equal_mat3`, `mul_mat3`, `add_mat3`, `sub_mat3`, `prod`, `mul_mat_vec`, `mul_mat_vec_trans`, `scale_mat3`, `rotating_mat3` (from a quaternion) and `hessian`.
- `vecgeom.mat4`
  - `Mat4` has the methods `mul_position`, `mul_box`, `determinant`, `transpose`, `inverse` and `array`.
  - Functions: `new_mat4`, `identity_mat4`, `translating_mat4`, `scaling_mat4`, `rotating_mat4`, `mul_mat4`, `as_mat4`, `rotating_between_vecs_mat4` and `equal_mat4`.
- `vecgeom.quat`
  - `Quat` has the fields `i`, `j`, `k` and `w`, and the methods `add`, `sub`, `mul`, `scale`, `conjugate`, `norm`, `unit`, `inverse`, `rotate`, `dot`, `ijk`, `with_ijk` and `rotation_mat3`.
  - Functions: `quat_ident`, `rotation_quat`, `quat_lerp`, `quat_nlerp`, `quat_slerp`, `angles_to_quat` (with a `RotationOrder`), `rotation_between_vecs_quat` and `quat_look_at`.
- `vecgeom.linalg`
  - `svd(a)` returns `(U, S, V)` with `a = U * S * Vᵀ` for a 3x3 matrix.
  - `qr_decomposition(b)` returns `(Q, R)`.
- `vecgeom.plane`
  - `Plane` and `new_plane`. `Plane.distance` gives the distance to a point.
- `vecgeom.triangle3`
  - `Triangle3` has the methods `centroid`, `sides`, `normal`, `is_degenerate`, `area`, `plane` and `closest`.
  - `sort3` sorts three values.
- `vecgeom.tetra`
  - `Tetra` has the methods `centroid`, `sides`, `edges`, `volume` and `aspect`.

## Examples

```python
from vecgeom.polygon import PolygonBuilder

poly = PolygonBuilder()
poly.add_xy(0, 0)
poly.add_xy(2, 0).smooth(0.5, 4)
poly.add_xy(2, 1)
poly.add_xy(0, 1)
points = poly.vecs()          # list of Vec2
```

```python
import math
from vecgeom.vec3 import Vec3
from vecgeom.mat4 import rotating_mat4

m = rotating_mat4(math.pi / 2, Vec3(0, 1, 0))
print(m.mul_position(Vec3(1, 0, 0)))   # approximately Vec3(0, 0, -1)
```

## Errors

Failures are reported by raising exceptions:

- `PolygonBuilder.vecs` raises `PolygonError`, a subclass of `ValueError`, in these cases:
  - there are fewer than two vertices;
  - two consecutive control points are equal;
  - an arc is impossible;
  - a smoothing radius is too large or badly conditioned.

  The error's `index` attribute names the control point at fault.
- The grid functions raise `ValueError` when an axis has fewer than two points. They also raise it when the sub-box does not lie inside the domain.
- `Mat3.eigs` raises `ValueError` for non-symmetric matrices.
- `angles_to_quat` raises `ValueError` for an unknown rotation order.
- The matrix constructors raise `ValueError` when given too few values.
- `vec_row` and `vec_col` raise `IndexError` when the index is out of range.

## What it does not do

This is a library only. It has no command-line program and reads or writes no files. It works in Python's double-precision floats and has no vectorised (array) versions of its operations.

## Running the tests

```
pip install -e .[test]
pytest
```