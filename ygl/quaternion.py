"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .matrix import Mat4
from .vectors import Vec3


@dataclass(frozen=True, slots=True)
class Quat:
    """An immutable quaternion ``x i + y j + z k + w``; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis`` (expected to be unit length)."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_matrix(cls, matrix: Mat4) -> Quat:
        """Extract the rotation held in the upper 3x3 block of ``matrix``."""
        m = matrix
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            s = 0.5 / math.sqrt(trace + 1.0)
            return cls(
                (m[2, 1] - m[1, 2]) * s,
                (m[0, 2] - m[2, 0]) * s,
                (m[1, 0] - m[0, 1]) * s,
                0.25 / s,
            )
        if m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            s = 2.0 * math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
            return cls(
                0.25 * s,
                (m[0, 1] + m[1, 0]) / s,
                (m[0, 2] + m[2, 0]) / s,
                (m[2, 1] - m[1, 2]) / s,
            )
        if m[1, 1] > m[2, 2]:
            s = 2.0 * math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
            return cls(
                (m[0, 1] + m[1, 0]) / s,
                0.25 * s,
                (m[1, 2] + m[2, 1]) / s,
                (m[0, 2] - m[2, 0]) / s,
            )
        s = 2.0 * math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
        return cls(
            (m[0, 2] + m[2, 0]) / s,
            (m[1, 2] + m[2, 1]) / s,
            0.25 * s,
            (m[1, 0] - m[0, 1]) / s,
        )

    @classmethod
    def identity(cls) -> Quat:
        return cls(0.0, 0.0, 0.0, 1.0)

    def __add__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        """Hamilton product with a Quat, rotation of a Vec3, or scaling by a number."""
        if isinstance(other, Quat):
            x, y, z, w = self.x, self.y, self.z, self.w
            return Quat(
                w * other.x + x * other.w + y * other.z - z * other.y,
                w * other.y - x * other.z + y * other.w + z * other.x,
                w * other.z + x * other.y - y * other.x + z * other.w,
                w * other.w - x * other.x - y * other.y - z * other.z,
            )
        if isinstance(other, Vec3):
            u = Vec3(self.x, self.y, self.z)
            cross1 = u.cross(other)
            cross2 = u.cross(cross1)
            return other + cross1 * (2.0 * self.w) + cross2 * 2.0
        if isinstance(other, Real):
            return Quat(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def normalized(self) -> Quat:
        """Unit-length copy; a zero quaternion is returned unchanged."""
        length = math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)
        if length > 0.0:
            inv = 1.0 / length
            return Quat(self.x * inv, self.y * inv, self.z * inv, self.w * inv)
        return self

    def to_matrix(self) -> Mat4:
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return Mat4(
            [
                1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0,
                2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0,
                2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0,
                0.0, 0.0, 0.0, 1.0,
            ]
        )