"""Vectors and column-major 4x4 matrices for the rendering pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """A 2D point, usually in integer screen coordinates."""

    x: Number = 0
    y: Number = 0

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Vec3:
    """A 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def scaled(self, factor: float) -> Vec3:
        """Return this vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def add_scaled(self, other: Vec3, scale: float) -> Vec3:
        """Return ``self + other * scale``."""
        return Vec3(
            self.x + other.x * scale,
            self.y + other.y * scale,
            self.z + other.z * scale,
        )

    def cross(self, other: Vec3) -> Vec3:
        """Cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / length, self.y / length, self.z / length)


@dataclass(frozen=True)
class Vec4:
    """A homogeneous 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def xyz(self) -> Vec3:
        """The spatial part, dropping the homogeneous component."""
        return Vec3(self.x, self.y, self.z)


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix stored as 16 floats in column-major order."""

    values: tuple = (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.values)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def identity(cls) -> Mat4:
        return cls(tuple(1.0 if i % 5 == 0 else 0.0 for i in range(16)))

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Mat4:
        values = list(cls.identity().values)
        values[12:15] = [x, y, z]
        return cls(tuple(values))

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        values = list(cls.identity().values)
        values[5], values[6], values[9], values[10] = c, -s, s, c
        return cls(tuple(values))

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        values = list(cls.identity().values)
        values[0], values[2], values[8], values[10] = c, s, -s, c
        return cls(tuple(values))

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        values = list(cls.identity().values)
        values[0], values[1], values[4], values[5] = c, -s, s, c
        return cls(tuple(values))

    @classmethod
    def scaling(cls, sx: float, sy: float, sz: float) -> Mat4:
        values = list(cls.identity().values)
        values[0], values[5], values[10] = sx, sy, sz
        return cls(tuple(values))

    def __getitem__(self, index) -> float:
        """Index by flat column-major position or by ``(row, col)``."""
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < 4 and 0 <= col < 4):
                raise IndexError(f"matrix index out of range: {index}")
            return self.values[col * 4 + row]
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.values, other.values
        return Mat4(
            tuple(
                sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
                for col in range(4)
                for row in range(4)
            )
        )

    def transform_vec2(self, v: Vec2) -> Vec2:
        """Affine transform of a 2D point; integer points stay integer (truncated)."""
        m = self.values
        x = m[0] * v.x + m[4] * v.y + m[12]
        y = m[1] * v.x + m[5] * v.y + m[13]
        if isinstance(v.x, int) and isinstance(v.y, int):
            return Vec2(int(x), int(y))
        return Vec2(x, y)

    def transform_vec3(self, v: Vec3) -> Vec3:
        """Affine transform of a 3D point (implicit w of 1)."""
        m = self.values
        return Vec3(
            m[0] * v.x + m[4] * v.y + m[8] * v.z + m[12],
            m[1] * v.x + m[5] * v.y + m[9] * v.z + m[13],
            m[2] * v.x + m[6] * v.y + m[10] * v.z + m[14],
        )

    def transform_vec4(self, v: Vec4) -> Vec4:
        """Full homogeneous transform."""
        m = self.values
        return Vec4(
            m[0] * v.x + m[4] * v.y + m[8] * v.z + m[12] * v.w,
            m[1] * v.x + m[5] * v.y + m[9] * v.z + m[13] * v.w,
            m[2] * v.x + m[6] * v.y + m[10] * v.z + m[14] * v.w,
            m[3] * v.x + m[7] * v.y + m[11] * v.z + m[15] * v.w,
        )

    def inverse_rigid(self) -> Mat4:
        """Inverse of a rotation-plus-translation matrix (no scale or shear)."""
        m = self.values
        tx, ty, tz = m[12], m[13], m[14]
        return Mat4(
            (
                m[0], m[4], m[8], 0.0,
                m[1], m[5], m[9], 0.0,
                m[2], m[6], m[10], 0.0,
                -(m[0] * tx + m[1] * ty + m[2] * tz),
                -(m[4] * tx + m[5] * ty + m[6] * tz),
                -(m[8] * tx + m[9] * ty + m[10] * tz),
                1.0,
            )
        )

    def format(self) -> str:
        """Render the matrix as four text rows."""
        return "\n".join(
            "| " + " ".join(f"{self[row, col]:6.2f}" for col in range(4)) + " |"
            for row in range(4)
        )

    def __str__(self) -> str:
        return self.format()


def collinear(a, b, c, epsilon: float) -> bool:
    """Whether three points are collinear in the XY plane within ``epsilon``."""
    area = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    return abs(area) < epsilon