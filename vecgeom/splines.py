"""Uniform cubic splines described by 4x4 matrices, and a curve sampler."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .vec2 import Vec2, add, collinear, scale

BasisFunc = Callable[[float], float]

_BEZIER = (
    1.0, 0.0, 0.0, 0.0,
    -3.0, 3.0, 0.0, 0.0,
    3.0, -6.0, 3.0, 0.0,
    -1.0, 3.0, -3.0, 1.0,
)
_HERMITE = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    -3.0, -2.0, 3.0, -1.0,
    2.0, 1.0, -2.0, 1.0,
)
_BASIS = tuple(
    v / 6
    for v in (
        1.0, 4.0, 1.0, 0.0,
        -3.0, 0.0, 3.0, 0.0,
        3.0, -6.0, 3.0, 0.0,
        -1.0, 3.0, -3.0, 1.0,
    )
)
_QUADRATIC_BEZIER = (
    1.0, 0.0, 0.0, 0.0,
    -2.0, 2.0, 0.0, 0.0,
    1.0, -2.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 0.0,
)


def _cardinal(s: float) -> tuple[float, ...]:
    return (
        0.0, 1.0, 0.0, 0.0,
        -s, 0.0, s, 0.0,
        2 * s, s - 3, 3 - 2 * s, -s,
        -s, 2 - s, s - 2, s,
    )


def _transpose(m: Sequence[float]) -> tuple[float, ...]:
    return tuple(m[4 * col + row] for row in range(4) for col in range(4))


def _matvec(m: Sequence[float], v: Sequence[float]) -> tuple[float, ...]:
    return tuple(
        sum(m[4 * row + k] * v[k] for k in range(4)) for row in range(4)
    )


@dataclass(frozen=True)
class Spline3:
    """A uniform cubic spline defined by a row-major 4x4 characteristic matrix.

    B(t) = [1 t t² t³] * M * [P0 P1 P2 P3]ᵀ
    """

    matrix: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.matrix)
        if len(values) < 16:
            raise ValueError("spline matrix too short: need 16 values, row major")
        object.__setattr__(self, "matrix", values[:16])

    def mat4_array(self) -> tuple[float, ...]:
        """Return the 16 matrix values in row-major order."""
        return self.matrix

    def evaluate(self, t: float, v0: Vec2, v1: Vec2, v2: Vec2, v3: Vec2) -> Vec2:
        """Evaluate the spline over four points at parameter t."""
        cx = _matvec(self.matrix, (v0.x, v1.x, v2.x, v3.x))
        cy = _matvec(self.matrix, (v0.y, v1.y, v2.y, v3.y))
        c0, c1, c2, c3 = (Vec2(x, y) for x, y in zip(cx, cy))
        res = add(c0, scale(t, c1))
        res = add(res, scale(t * t, c2))
        return add(res, scale(t * t * t, c3))

    def _basis(self, build: Callable[[tuple[float, ...]], BasisFunc]) -> tuple[BasisFunc, ...]:
        arr = _transpose(self.matrix)
        return tuple(build(arr[4 * i : 4 * i + 4]) for i in range(4))

    def basis_funcs(self) -> tuple[BasisFunc, ...]:
        """Return the basis function of each of the four control points."""
        return self._basis(
            lambda c: lambda t: c[0] + t * c[1] + t * t * c[2] + t * t * t * c[3]
        )

    def basis_funcs_diff(self) -> tuple[BasisFunc, ...]:
        """Return the first derivatives of the basis functions."""
        return self._basis(lambda c: lambda t: c[1] + 2 * t * c[2] + 3 * t * t * c[3])

    def basis_funcs_diff2(self) -> tuple[BasisFunc, ...]:
        """Return the second derivatives of the basis functions."""
        return self._basis(lambda c: lambda t: 2 * c[2] + 6 * t * c[3])

    def basis_funcs_diff3(self) -> tuple[BasisFunc, ...]:
        """Return the third derivatives of the basis functions."""
        return self._basis(lambda c: lambda t: 6 * c[3])


def spline_bezier_cubic() -> Spline3:
    """Cubic Bézier: point, control point, control point, point."""
    return Spline3(_BEZIER)


def spline_hermite() -> Spline3:
    """Hermite: point, velocity, point, velocity."""
    return Spline3(_HERMITE)


def spline_catmull_rom() -> Spline3:
    """Catmull-Rom: a cardinal spline with scale 0.5."""
    return Spline3(_cardinal(0.5))


def spline_cardinal(scale: float) -> Spline3:
    """Cardinal spline with the given tension scale."""
    return Spline3(_cardinal(scale))


def spline_basis() -> Spline3:
    """Uniform cubic B-spline; C² continuous, interpolates no points."""
    return Spline3(_BASIS)


def spline_bezier_quadratic() -> Spline3:
    """Quadratic Bézier: point, control point, point; the fourth point is unused."""
    return Spline3(_QUADRATIC_BEZIER)


@dataclass
class Spline3Sampler:
    """Samples a spline over four set points into line segments within tolerance."""

    spline: Spline3
    tolerance: float = 0.0
    _points: tuple[Vec2, Vec2, Vec2, Vec2] = field(
        default=(Vec2(), Vec2(), Vec2(), Vec2()), repr=False
    )

    def set_spline_points(self, v0: Vec2, v1: Vec2, v2: Vec2, v3: Vec2) -> None:
        """Set the four points passed to the spline on evaluation."""
        self._points = (v0, v1, v2, v3)

    def evaluate(self, t: float) -> Vec2:
        """Evaluate the spline at t with the set points."""
        return self.spline.evaluate(t, *self._points)

    def _check(self, max_depth: int) -> float:
        if max_depth <= 0:
            raise ValueError("invalid depth")
        if self.tolerance < 0:
            raise ValueError("negative tolerance")
        if self.tolerance == 0:
            raise ValueError("zero tolerance: set tolerance to a small value, i.e. 0.01")
        return 1.0 / (1 << max_depth)

    def sample_bisect(self, max_depth: int) -> list[Vec2]:
        """Sample interior curve points by bisection, excluding t=0 and t=1.

        At most 2**max_depth - 1 points are returned.
        """
        base_res = self._check(max_depth)
        out: list[Vec2] = []
        self._bisect(out, max_depth, 0, self.evaluate(0.0), 0.0, base_res)
        return out

    def sample_bisect_with_extremes(self, max_depth: int) -> list[Vec2]:
        """Like sample_bisect, with the points at t=0 and t=1 added."""
        base_res = self._check(max_depth)
        start = self.evaluate(0.0)
        out = [start]
        self._bisect(out, max_depth, 0, start, 0.0, base_res)
        out.append(self.evaluate(1.0))
        return out

    def _bisect(
        self,
        out: list[Vec2],
        lvl: int,
        idx: int,
        xstart: Vec2,
        tstart: float,
        base_res: float,
    ) -> None:
        if lvl == 0:
            if idx != 0:
                out.append(xstart)
            return
        slvl = lvl - 1
        mid_idx = idx + (1 << slvl)
        end_idx = idx + (1 << lvl)
        tend = base_res * end_idx
        tmid = base_res * mid_idx
        xend = self.evaluate(tend)
        xmid = self.evaluate(tmid)
        if collinear(xstart, xmid, xend, self.tolerance):
            # Check an offset point too: the curve may be undersampled.
            tmid2 = tstart + 0.45 * (tend - tstart)
            if collinear(xstart, self.evaluate(tmid2), xend, self.tolerance):
                if idx != 0:
                    out.append(xstart)
                return
        self._bisect(out, slvl, idx, xstart, tstart, base_res)
        self._bisect(out, slvl, mid_idx, xmid, tmid, base_res)