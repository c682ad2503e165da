"""Row-major 4x4 float matrix."""

from __future__ import annotations

import math
from typing import Iterable

from .vectors import Vec3, Vec4

_IDENTITY = tuple(float(r == c) for r in range(4) for c in range(4))


class Mat4:
    """An immutable 4x4 matrix stored in row-major order, indexed ``m[row, col]``."""

    __slots__ = ("_data",)

    def __init__(self, values: Iterable | None = None) -> None:
        """Build from 16 numbers or 4 rows of 4; no argument gives the identity."""
        if values is None:
            self._data = _IDENTITY
            return
        items = list(values)
        if len(items) == 4 and all(not isinstance(item, (int, float)) for item in items):
            items = [value for row in items for value in row]
        if len(items) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(items)}")
        self._data = tuple(float(v) for v in items)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index out of range: {key}")
        return self._data[row * 4 + col]

    def __mul__(self, other):
        if isinstance(other, Mat4):
            columns = list(zip(*other.rows()))
            return Mat4(
                sum(a * b for a, b in zip(row, column))
                for row in self.rows()
                for column in columns
            )
        if isinstance(other, Vec3):
            return other.transform(self)
        if isinstance(other, Vec4):
            return Vec4(*(sum(a * b for a, b in zip(row, other)) for row in self.rows()))
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Mat4({[list(row) for row in self.rows()]})"

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """The four rows as tuples."""
        return tuple(self._data[i:i + 4] for i in range(0, 16, 4))

    @classmethod
    def _with(cls, entries: dict[tuple[int, int], float]) -> Mat4:
        data = list(_IDENTITY)
        for (row, col), value in entries.items():
            data[row * 4 + col] = value
        return cls(data)

    @classmethod
    def identity(cls) -> Mat4:
        return cls()

    @classmethod
    def translation(cls, vec: Vec3) -> Mat4:
        return cls._with({(0, 3): vec.x, (1, 3): vec.y, (2, 3): vec.z})

    @classmethod
    def scaling(cls, vec: Vec3) -> Mat4:
        return cls._with({(0, 0): vec.x, (1, 1): vec.y, (2, 2): vec.z})

    @classmethod
    def rotation_x(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls._with({(1, 1): c, (1, 2): -s, (2, 1): s, (2, 2): c})

    @classmethod
    def rotation_y(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls._with({(0, 0): c, (0, 2): s, (2, 0): -s, (2, 2): c})

    @classmethod
    def rotation_z(cls, angle: float) -> Mat4:
        c, s = math.cos(angle), math.sin(angle)
        return cls._with({(0, 0): c, (0, 1): -s, (1, 0): s, (1, 1): c})

    @classmethod
    def look_at(cls, eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
        """Right-handed view matrix looking from ``eye`` towards ``target``."""
        z = (eye - target).normalized()
        x = up.cross(z).normalized()
        y = z.cross(x)
        return cls(
            [
                x.x, x.y, x.z, -x.dot(eye),
                y.x, y.y, y.z, -y.dot(eye),
                z.x, z.y, z.z, -z.dot(eye),
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    @classmethod
    def perspective(cls, fov: float, aspect: float, near: float, far: float) -> Mat4:
        """Perspective projection; ``fov`` is the vertical field of view in radians."""
        tan_half = math.tan(fov / 2.0)
        return cls._with(
            {
                (0, 0): 1.0 / (aspect * tan_half),
                (1, 1): 1.0 / tan_half,
                (2, 2): (far + near) / (near - far),
                (2, 3): (2.0 * far * near) / (near - far),
                (3, 2): -1.0,
                (3, 3): 0.0,
            }
        )

    @classmethod
    def orthographic(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Mat4:
        return cls._with(
            {
                (0, 0): 2.0 / (right - left),
                (1, 1): 2.0 / (top - bottom),
                (2, 2): 2.0 / (far - near),
                (0, 3): -(right + left) / (right - left),
                (1, 3): -(top + bottom) / (top - bottom),
                (2, 3): -(far + near) / (far - near),
            }
        )

    def _minor(self, row: int, col: int) -> float:
        m = [
            [self._data[r * 4 + c] for c in range(4) if c != col]
            for r in range(4)
            if r != row
        ]
        return (
            m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
            - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
            + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
        )

    def _cofactor(self, row: int, col: int) -> float:
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * self._minor(row, col)

    def determinant(self) -> float:
        return sum(self._data[col] * self._cofactor(0, col) for col in range(4))

    def inverted(self) -> Mat4:
        """The inverse matrix; a singular matrix yields the identity."""
        det = self.determinant()
        if det == 0.0:
            return Mat4.identity()
        inv_det = 1.0 / det
        return Mat4(
            self._cofactor(col, row) * inv_det for row in range(4) for col in range(4)
        )

    def transposed(self) -> Mat4:
        return Mat4(zip(*self.rows()))