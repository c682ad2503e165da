"""Two-, three- and four-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec2:
        """Vector with every component set to ``value``."""
        return cls(value, value)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"Vec2({_fmt(self.x)}, {_fmt(self.y)})"

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        return self / length if length > 0 else Vec2()

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    @classmethod
    def zero(cls) -> Vec2:
        return cls.splat(0.0)

    @classmethod
    def one(cls) -> Vec2:
        return cls.splat(1.0)

    @classmethod
    def unit_x(cls) -> Vec2:
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vec2:
        return cls(0.0, 1.0)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec3:
        """Vector with every component set to ``value``."""
        return cls(value, value, value)

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

    def __mul__(self, other: float | Vec3) -> Vec3:
        """Scale by a number, or multiply component-wise by another Vec3."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"Vec3({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        return self / length if length > 0 else self

    def transform(self, matrix) -> Vec3:
        """Transform as a point by a 4x4 matrix indexed ``matrix[row, col]``.

        The result is divided by the homogeneous w unless w is 0 or 1.
        """
        x, y, z = self
        result = Vec3(
            matrix[0, 0] * x + matrix[0, 1] * y + matrix[0, 2] * z + matrix[0, 3],
            matrix[1, 0] * x + matrix[1, 1] * y + matrix[1, 2] * z + matrix[1, 3],
            matrix[2, 0] * x + matrix[2, 1] * y + matrix[2, 2] * z + matrix[2, 3],
        )
        w = matrix[3, 0] * x + matrix[3, 1] * y + matrix[3, 2] * z + matrix[3, 3]
        if w != 0.0 and w != 1.0:
            result = result * (1.0 / w)
        return result

    @classmethod
    def zero(cls) -> Vec3:
        return cls.splat(0.0)

    @classmethod
    def one(cls) -> Vec3:
        return cls.splat(1.0)

    @classmethod
    def unit_x(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def minimum(cls, a: Vec3, b: Vec3) -> Vec3:
        """Component-wise minimum."""
        return cls(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))

    @classmethod
    def maximum(cls, a: Vec3, b: Vec3) -> Vec3:
        """Component-wise maximum."""
        return cls(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    @classmethod
    def clamp(cls, v: Vec3, lo: Vec3, hi: Vec3) -> Vec3:
        """Clamp each component of ``v`` into ``[lo, hi]``."""
        return cls(*(_clamp(c, a, b) for c, a, b in zip(v, lo, hi)))


def _clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if hi < value:
        return hi
    return value


@dataclass(frozen=True, slots=True)
class Vec4:
    """An immutable 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec4:
        """Vector with every component set to ``value``."""
        return cls(value, value, value, value)

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        return cls(v.x, v.y, v.z, w)

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec4(*(c * scalar for c in self))

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec4(*(c / scalar for c in self))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __str__(self) -> str:
        return "Vec4(" + ", ".join(_fmt(c) for c in self) + ")"

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.dot(self)

    def normalized(self) -> Vec4:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        return self / length if length > 0 else Vec4()

    def dot(self, other: Vec4) -> float:
        return sum(a * b for a, b in zip(self, other))

    @classmethod
    def zero(cls) -> Vec4:
        return cls.splat(0.0)

    @classmethod
    def one(cls) -> Vec4:
        return cls.splat(1.0)


def normalize(v):
    """Return ``v`` scaled to unit length."""
    return v.normalized()


def dot(a, b) -> float:
    """Dot product of two vectors of the same kind."""
    return a.dot(b)


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two 3D vectors."""
    return a.cross(b)