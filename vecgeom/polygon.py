"""Polygon construction with arcs, smoothed corners and chamfers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .mat2 import mul_mat_vec, rotation_mat2
from .vec2 import (
    Vec2,
    add,
    copy_orientation,
    dot,
    equal_elem,
    norm,
    scale,
    sub,
    unit,
)

_ARC_TOL = 0.5
_SMALL = 1e-5
_SQRT_HALF = math.sqrt(2) / 2

LARGE_SMOOTH_RADIUS = "smoothing radius too large"
BAD_SMOOTH = "badly conditioned smoothing"
CP_EQUAL_TO_PREV = "equal to previous control point"
ARC_CP_EQUAL_TO_PREV = "arc start equal to end point"
BAD_ARC = "invalid arc"
TOO_FEW_VERTICES = "too few vertices"


class PolygonError(ValueError):
    """Raised when a polygon cannot be discretised.

    ``index`` is the offending control point, or None when the error
    concerns the polygon as a whole.
    """

    def __init__(self, reason: str, index: int | None = None) -> None:
        self.reason = reason
        self.index = index
        if index is None:
            message = reason
        else:
            message = f"polygon control point [{index}]: {reason}"
        super().__init__(message)


class _ShapeError(Exception):
    pass


@dataclass
class PolygonControlPoint:
    """A polygon vertex, optionally smoothed or reached through an arc.

    A positive ``facets`` marks smoothing, a negative one an arc from the
    previous point; ``radius`` zero means a plain vertex.
    """

    v: Vec2
    radius: float = 0.0
    facets: int = 0

    def smooth(self, radius: float, facets: int) -> None:
        """Round this corner with the given radius, discretised in facets."""
        if radius > 0 and facets > 0:
            self.radius = radius
            self.facets = facets

    def arc(self, radius: float, facets: int) -> None:
        """Join the previous point to this one with an arc.

        A positive radius gives a counter-clockwise path, a negative one
        a clockwise path.
        """
        if radius != 0 and facets > 0:
            self.radius = radius
            self.facets = -facets

    def chamfer(self, size: float) -> None:
        """Cut this corner with a single facet of length size."""
        self.smooth(size * _SQRT_HALF, 1)

    def _is_smoothed(self) -> bool:
        return self.facets > 0 and self.radius > 0

    def _is_arc(self) -> bool:
        return self.facets < 0 and self.radius != 0


@dataclass
class PolygonBuilder:
    """Builds a polygon outline from control points."""

    _verts: list[PolygonControlPoint] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._verts)

    def nagon(self, n: int, center_distance: float) -> None:
        """Set the vertices to a regular n-sided polygon; no-op if n < 3."""
        self.nagon_smoothed(n, center_distance, 0, 0.0)

    def nagon_smoothed(
        self, n: int, center_distance: float, facets: int, radius: float
    ) -> None:
        """Set the vertices to a smoothed regular n-sided polygon.

        Does nothing if n < 3 or a nonzero radius exceeds center_distance.
        """
        if n < 3 or (radius != 0 and radius > center_distance):
            return
        self.reset()
        rot = rotation_mat2(2 * math.pi / n)
        v = Vec2(center_distance, 0.0)
        for _ in range(n):
            self.add(v).smooth(radius, facets)
            v = mul_mat_vec(rot, v)

    def add(self, v: Vec2) -> PolygonControlPoint:
        """Append a point in absolute coordinates and return its control point."""
        cp = PolygonControlPoint(v)
        self._verts.append(cp)
        return cp

    def add_xy(self, x: float, y: float) -> PolygonControlPoint:
        """Append the point (x, y)."""
        return self.add(Vec2(x, y))

    def add_polar_r_theta(self, r: float, theta: float) -> PolygonControlPoint:
        """Append a point given in polar coordinates."""
        return self.add(Vec2(r * math.cos(theta), r * math.sin(theta)))

    def add_relative(self, v: Vec2) -> PolygonControlPoint:
        """Append a point relative to the last one, or to the origin if empty."""
        if not self._verts:
            return self.add(v)
        return self.add(add(self._verts[-1].v, v))

    def add_relative_xy(self, x: float, y: float) -> PolygonControlPoint:
        """Append the point (x, y) relative to the last one."""
        return self.add_relative(Vec2(x, y))

    def drop_last(self) -> None:
        """Drop the last vertex, if any."""
        if self._verts:
            self._verts.pop()

    def reset(self) -> None:
        """Drop all vertices."""
        self._verts.clear()

    def is_clockwise(self) -> bool:
        """Return True if the vertices wind clockwise; False below 3 vertices."""
        if len(self._verts) < 3:
            return False
        prev = self._verts[-1].v
        winding = 0.0
        for cp in self._verts:
            v = cp.v
            winding += (v.x - prev.x) * (v.y + prev.y)
            prev = v
        return winding < 0

    def vecs(self) -> list[Vec2]:
        """Return the discretised outline; the builder is left unchanged."""
        verts = self._verts
        if len(verts) < 2:
            raise PolygonError(TOO_FEW_VERTICES)
        out: list[Vec2] = []
        prev = verts[-1]
        for i, current in enumerate(verts):
            if i != 0 and prev == current:
                raise PolygonError(CP_EQUAL_TO_PREV, i)
            try:
                if current._is_arc():
                    out.extend(
                        _arc_two_points(
                            prev.v, current.v, current.radius, -current.facets
                        )
                    )
                    out.append(current.v)
                elif current._is_smoothed():
                    nxt = verts[(i + 1) % len(verts)]
                    out.extend(
                        _smoothed_corner(
                            prev.v, current.v, nxt.v, current.radius, current.facets
                        )
                    )
                else:
                    out.append(current.v)
            except _ShapeError as exc:
                raise PolygonError(str(exc), i) from exc
            prev = current
        return out


def _arc_two_points(p1: Vec2, p2: Vec2, r: float, facets: int) -> list[Vec2]:
    if facets <= 1:
        return []
    center, angle = _arc_center(p1, p2, r)
    return _arc_with_center(p1, center, angle, facets)


def _arc_with_center(
    start: Vec2, center: Vec2, arc_angle: float, facets: int
) -> list[Vec2]:
    rot = rotation_mat2(arc_angle / facets)
    rv = sub(start, center)
    points = []
    for _ in range(facets - 1):
        rv = mul_mat_vec(rot, rv)
        points.append(add(center, rv))
    return points


def _arc_center(p1: Vec2, p2: Vec2, r: float) -> tuple[Vec2, float]:
    semi_arc_tol = _SMALL * 10
    v12 = sub(p2, p1)
    chord_center = add(p1, scale(0.5, v12))
    chord_len = norm(v12)
    max_chord_len = 2 * abs(r)
    if chord_len == 0:
        raise _ShapeError(ARC_CP_EQUAL_TO_PREV)
    if max_chord_len - chord_len <= -semi_arc_tol:
        raise _ShapeError(BAD_ARC)
    sin_theta = chord_len / max_chord_len
    if abs(sin_theta - 1) <= semi_arc_tol:
        return scale(0.5, add(p1, p2)), math.copysign(math.pi / 2, r)
    half_theta = math.asin(sin_theta)
    diff_to_90 = half_theta - math.pi / 2
    if abs(diff_to_90) < _SMALL / 10:
        half_theta += math.copysign(1e-6, -diff_to_90)
    perp = Vec2(
        math.copysign(v12.y, -v12.y * r),
        math.copysign(v12.x, v12.x * r),
    )
    x = 0.5 * chord_len / math.tan(half_theta)
    perp = scale(x / chord_len, perp)
    return add(chord_center, perp), math.copysign(2 * half_theta, r)


def _smoothed_corner(
    p0: Vec2, p1: Vec2, p2: Vec2, r: float, facets: int
) -> list[Vec2]:
    if facets <= 1:
        return []
    v10 = sub(p0, p1)
    norm10 = norm(v10)
    v12 = sub(p2, p1)
    norm12 = norm(v12)
    if r - norm10 > _ARC_TOL or r - norm12 > _ARC_TOL:
        raise _ShapeError(LARGE_SMOOTH_RADIUS)
    if norm10 == 0 or norm12 == 0:
        raise _ShapeError(BAD_SMOOTH)
    v10 = scale(1 / norm10, v10)
    v12 = scale(1 / norm12, v12)

    theta = math.acos(max(-1.0, min(1.0, dot(v10, v12))))
    if abs(theta) < _ARC_TOL or abs(theta - math.pi) < _ARC_TOL:
        raise _ShapeError(BAD_SMOOTH)

    half = 0.5 * theta
    sint, cost = math.sin(half), math.cos(half)
    d = r / (sint / cost)
    start = add(p1, scale(d, v10))
    end = add(p1, scale(d, v12))
    points: list[Vec2] = []
    if not equal_elem(p0, start, _ARC_TOL * norm10):
        points.append(start)
    center = add(p1, scale(r / sint, unit(add(v10, v12))))
    arc_angle = copy_orientation(math.pi - theta, start, p1, end)
    points.extend(_arc_with_center(start, center, arc_angle, facets))
    if not equal_elem(p2, end, _ARC_TOL * norm12):
        points.append(end)
    return points