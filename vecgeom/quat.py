"""Quaternions for representing and interpolating 3D rotations."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from .mat3 import Mat3, add_mat3, identity_mat3, prod, scale_mat3, skew
from .vec3 import Vec3
from .vec3 import add as vadd
from .vec3 import cross as vcross
from .vec3 import dot as vdot
from .vec3 import norm2 as vnorm2
from .vec3 import scale as vscale
from .vec3 import sub as vsub
from .vec3 import unit as vunit

_MAX_FLOAT32 = 3.4028234663852886e38


class RotationOrder(IntEnum):
    """Axis sequence used by angles_to_quat."""

    XYX = 0
    XYZ = 1
    XZX = 2
    XZY = 3
    YXY = 4
    YXZ = 5
    YZY = 6
    YZX = 7
    ZYZ = 8
    ZYX = 9
    ZXZ = 10
    ZXY = 11


@dataclass(frozen=True, slots=True)
class Quat:
    """A quaternion with imaginary parts i, j, k and real part w."""

    i: float = 0.0
    j: float = 0.0
    k: float = 0.0
    w: float = 0.0

    def ijk(self) -> Vec3:
        """Return the imaginary parts as a vector."""
        return Vec3(self.i, self.j, self.k)

    def with_ijk(self, ijk: Vec3) -> Quat:
        """Return a copy with the imaginary parts replaced by ijk."""
        return Quat(ijk.x, ijk.y, ijk.z, self.w)

    def add(self, q2: Quat) -> Quat:
        """Return the component-wise sum."""
        return Quat(self.i + q2.i, self.j + q2.j, self.k + q2.k, self.w + q2.w)

    def sub(self, q2: Quat) -> Quat:
        """Return the component-wise difference."""
        return Quat(self.i - q2.i, self.j - q2.j, self.k - q2.k, self.w - q2.w)

    def mul(self, q2: Quat) -> Quat:
        """Return the (non-commutative) quaternion product self*q2."""
        v1 = self.ijk()
        v2 = q2.ijk()
        m = vadd(vcross(v1, v2), vscale(self.w, v2))
        return Quat(
            m.x + q2.w * v1.x,
            m.y + q2.w * v1.y,
            m.z + q2.w * v1.z,
            self.w * q2.w - vdot(v1, v2),
        )

    def scale(self, c: float) -> Quat:
        """Multiply every component by c."""
        return Quat(self.i * c, self.j * c, self.k * c, self.w * c)

    def conjugate(self) -> Quat:
        """Return the conjugate: the imaginary parts negated."""
        return Quat(-self.i, -self.j, -self.k, self.w)

    def norm(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def unit(self) -> Quat:
        """Return the unit quaternion; the identity for the zero quaternion."""
        length = self.norm()
        if abs(1 - length) < 1e-8:
            return self
        if length == 0:
            return quat_ident()
        if math.isinf(length):
            length = math.copysign(_MAX_FLOAT32, length)
        return self.scale(1.0 / length)

    def inverse(self) -> Quat:
        """Return the conjugate divided by the squared length; NaN if zero."""
        d = self.dot(self)
        if d == 0:
            return Quat(math.nan, math.nan, math.nan, math.nan)
        return self.conjugate().scale(1 / d)

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate v by the rotation this quaternion represents."""
        v1 = self.ijk()
        c = vcross(v1, v)
        final_term = vcross(vscale(2, v1), c)
        return vadd(v, vadd(vscale(2 * self.w, c), final_term))

    def dot(self, q2: Quat) -> float:
        """Return the 4D dot product."""
        return self.w * q2.w + self.i * q2.i + self.j * q2.j + self.k * q2.k

    def rotation_mat3(self) -> Mat3:
        """Return 2*v*vᵀ + w²*I + (v·v)*I + 2w*skew(v) for imaginary part v."""
        qv = self.ijk()
        m = scale_mat3(prod(qv, qv), 2)
        m = add_mat3(m, scale_mat3(identity_mat3(), self.w * self.w))
        m = add_mat3(m, scale_mat3(identity_mat3(), vdot(qv, qv)))
        return add_mat3(m, scale_mat3(skew(qv), 2 * self.w))


def quat_ident() -> Quat:
    """Return the identity quaternion w=1, v=(0,0,0)."""
    return Quat(w=1.0)


def rotation_quat(angle: float, axis: Vec3) -> Quat:
    """Return the quaternion rotating by angle radians around axis."""
    s, c = math.sin(0.5 * angle), math.cos(0.5 * angle)
    return Quat(axis.x * s, axis.y * s, axis.z * s, c)


def quat_lerp(q1: Quat, q2: Quat, amount: float) -> Quat:
    """Linearly interpolate between two quaternions."""
    return q1.add(q2.sub(q1).scale(amount))


def quat_nlerp(q1: Quat, q2: Quat, amount: float) -> Quat:
    """Linearly interpolate and normalise the result."""
    return quat_lerp(q1, q2, amount).unit()


def quat_slerp(q1: Quat, q2: Quat, amount: float) -> Quat:
    """Spherical linear interpolation from q1 to q2."""
    q1, q2 = q1.unit(), q2.unit()
    d = q1.dot(q2)
    if d > 0.9995:
        return quat_nlerp(q1, q2, amount)
    d = max(-1.0, min(1.0, d))
    theta = math.acos(d) * amount
    s, c = math.sin(theta), math.cos(theta)
    rel = q2.sub(q1.scale(d)).unit()
    return q1.scale(c).add(rel.scale(s))


_Components = tuple[float, float, float, float]
_Builder = Callable[[Sequence[float], Sequence[float]], _Components]

# Each builder returns (w, i, j, k) from the half-angle sines s and cosines c.
_ANGLE_BUILDERS: dict[RotationOrder, _Builder] = {
    RotationOrder.ZYX: lambda s, c: (
        c[0] * c[1] * c[2] + s[0] * s[1] * s[2],
        c[0] * c[1] * s[2] - s[0] * s[1] * c[2],
        c[0] * s[1] * c[2] + s[0] * c[1] * s[2],
        s[0] * c[1] * c[2] - c[0] * s[1] * s[2],
    ),
    RotationOrder.ZYZ: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * s[1] * s[2] - s[0] * s[1] * c[2],
        c[0] * s[1] * c[2] + s[0] * s[1] * s[2],
        s[0] * c[1] * c[2] + c[0] * c[1] * s[2],
    ),
    RotationOrder.ZXY: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * s[1] * s[2],
        c[0] * s[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * s[1] * c[2],
        c[0] * s[1] * s[2] + s[0] * c[1] * c[2],
    ),
    RotationOrder.ZXZ: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * s[1] * c[2] + s[0] * s[1] * s[2],
        s[0] * s[1] * c[2] - c[0] * s[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * c[1] * c[2],
    ),
    RotationOrder.YXZ: lambda s, c: (
        c[0] * c[1] * c[2] + s[0] * s[1] * s[2],
        c[0] * s[1] * c[2] + s[0] * c[1] * s[2],
        s[0] * c[1] * c[2] - c[0] * s[1] * s[2],
        c[0] * c[1] * s[2] - s[0] * s[1] * c[2],
    ),
    RotationOrder.YXY: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * s[1] * c[2] + s[0] * s[1] * s[2],
        s[0] * c[1] * c[2] + c[0] * c[1] * s[2],
        c[0] * s[1] * s[2] - s[0] * s[1] * c[2],
    ),
    RotationOrder.YZX: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * s[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * s[1] * c[2],
        c[0] * s[1] * s[2] + s[0] * c[1] * c[2],
        c[0] * s[1] * c[2] - s[0] * c[1] * s[2],
    ),
    RotationOrder.YZY: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * c[1] * s[2],
        s[0] * s[1] * c[2] - c[0] * s[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * c[1] * c[2],
        c[0] * s[1] * c[2] + s[0] * s[1] * s[2],
    ),
    RotationOrder.XYZ: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * s[1] * s[2],
        c[0] * s[1] * s[2] + s[0] * c[1] * c[2],
        c[0] * s[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * s[1] * c[2],
    ),
    RotationOrder.XYX: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * c[1] * c[2],
        c[0] * s[1] * c[2] + s[0] * s[1] * s[2],
        s[0] * s[1] * c[2] - c[0] * s[1] * s[2],
    ),
    RotationOrder.XZY: lambda s, c: (
        c[0] * c[1] * c[2] + s[0] * s[1] * s[2],
        s[0] * c[1] * c[2] - c[0] * s[1] * s[2],
        c[0] * c[1] * s[2] - s[0] * s[1] * c[2],
        c[0] * s[1] * c[2] + s[0] * c[1] * s[2],
    ),
    RotationOrder.XZX: lambda s, c: (
        c[0] * c[1] * c[2] - s[0] * c[1] * s[2],
        c[0] * c[1] * s[2] + s[0] * c[1] * c[2],
        c[0] * s[1] * s[2] - s[0] * s[1] * c[2],
        c[0] * s[1] * c[2] + s[0] * s[1] * s[2],
    ),
}


def angles_to_quat(
    angle1: float, angle2: float, angle3: float, order: RotationOrder
) -> Quat:
    """Compose three rotations about the axes named by order.

    Raises ValueError for an unknown rotation order.
    """
    order = RotationOrder(order)
    halves = (angle1 / 2, angle2 / 2, angle3 / 2)
    s = [math.sin(h) for h in halves]
    c = [math.cos(h) for h in halves]
    w, i, j, k = _ANGLE_BUILDERS[order](s, c)
    return Quat(i, j, k, w)


def rotation_between_vecs_quat(start: Vec3, dest: Vec3) -> Quat:
    """Return the rotation taking the direction of start onto that of dest."""
    start = vunit(start)
    dest = vunit(dest)
    epsilon = 0.001
    cos_theta = vdot(start, dest)
    if cos_theta < -1.0 + epsilon:
        # Opposite directions: any axis perpendicular to start will do.
        axis = vcross(Vec3(1.0, 0.0, 0.0), start)
        if vnorm2(axis) < epsilon:
            axis = vcross(Vec3(0.0, 1.0, 0.0), start)
        return rotation_quat(math.pi, vunit(axis))
    axis = vcross(start, dest)
    s = math.sqrt((1.0 + cos_theta) * 2.0)
    return Quat(axis.x / s, axis.y / s, axis.z / s, s * 0.5)


def quat_look_at(eye: Vec3, center: Vec3, up_dir: Vec3) -> Quat:
    """Return the camera rotation looking from eye towards center.

    The object's front is taken as -Z and its up as +Y.
    """
    direction = vunit(vsub(center, eye))
    rot_dir = rotation_between_vecs_quat(Vec3(0.0, 0.0, -1.0), direction)
    up_cur = rot_dir.rotate(Vec3(0.0, 1.0, 0.0))
    rot_up = rotation_between_vecs_quat(up_cur, up_dir)
    rot_target = rot_up.mul(rot_dir)
    return rot_target.inverse()