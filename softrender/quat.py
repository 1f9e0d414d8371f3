"""Quaternions for camera orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .matrix import Mat4, Vec3


@dataclass(frozen=True)
class Quat:
    """A quaternion ``w + xi + yj + zk``; the default is the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis`` (expected to be unit length)."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        a, b = self, other
        return Quat(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def __iter__(self):
        return iter((self.w, self.x, self.y, self.z))

    def normalized(self) -> Quat:
        """Unit quaternion; the zero quaternion stays zero."""
        length = math.sqrt(self.w ** 2 + self.x ** 2 + self.y ** 2 + self.z ** 2)
        if length == 0.0:
            return Quat(0.0, 0.0, 0.0, 0.0)
        return Quat(self.w / length, self.x / length, self.y / length, self.z / length)

    def conjugate(self) -> Quat:
        """The opposite rotation for a unit quaternion."""
        return Quat(self.w, -self.x, -self.y, -self.z)

    def rotate_vector(self, v: Vec3) -> Vec3:
        """Rotate ``v``; assumes this quaternion is normalised."""
        r = self * Quat(0.0, v.x, v.y, v.z) * self.conjugate()
        return Vec3(r.x, r.y, r.z)

    def forward(self) -> Vec3:
        return self.rotate_vector(Vec3(0.0, 0.0, -1.0))

    def up(self) -> Vec3:
        return self.rotate_vector(Vec3(0.0, 1.0, 0.0))

    def right(self) -> Vec3:
        return self.rotate_vector(Vec3(1.0, 0.0, 0.0))

    def to_mat4(self) -> Mat4:
        """Column-major rotation matrix with no translation."""
        x2, y2, z2 = self.x + self.x, self.y + self.y, self.z + self.z
        xx, yy, zz = self.x * x2, self.y * y2, self.z * z2
        xy, xz, yz = self.x * y2, self.x * z2, self.y * z2
        wx, wy, wz = self.w * x2, self.w * y2, self.w * z2
        return Mat4(
            (
                1.0 - (yy + zz), xy + wz, xz - wy, 0.0,
                xy - wz, 1.0 - (xx + zz), yz + wx, 0.0,
                xz + wy, yz - wx, 1.0 - (xx + yy), 0.0,
                0.0, 0.0, 0.0, 1.0,
            )
        )