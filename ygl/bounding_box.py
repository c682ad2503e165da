"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .matrix import Mat4
from .ray import FLOAT_MAX, Ray
from .vectors import Vec3


def _empty_min() -> Vec3:
    return Vec3.splat(FLOAT_MAX)


def _empty_max() -> Vec3:
    return Vec3.splat(-FLOAT_MAX)


def _slab(bound: float, origin: float, direction: float) -> float:
    """``(bound - origin) / direction`` with IEEE semantics for a zero divisor."""
    diff = bound - origin
    if direction == 0.0:
        if diff == 0.0:
            return math.nan
        return math.copysign(math.inf, diff) * math.copysign(1.0, direction)
    return diff / direction


@dataclass
class BoundingBox:
    """An axis-aligned box spanning ``min`` to ``max``.

    A default-constructed box is empty: its minimum is the largest float and its
    maximum the lowest, so that expanding it by any point yields that point.
    """

    min: Vec3 = field(default_factory=_empty_min)
    max: Vec3 = field(default_factory=_empty_max)

    def reset(self) -> None:
        """Make the box empty again."""
        self.min = _empty_min()
        self.max = _empty_max()

    def center(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def size(self) -> Vec3:
        return self.max - self.min

    def half_size(self) -> Vec3:
        return self.size() * 0.5

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def depth(self) -> float:
        return self.max.z - self.min.z

    def volume(self) -> float:
        size = self.size()
        return size.x * size.y * size.z

    def surface_area(self) -> float:
        s = self.size()
        return 2.0 * (s.x * s.y + s.x * s.z + s.y * s.z)

    def set_center(self, center: Vec3) -> None:
        """Move the box so it is centred on ``center``, keeping its size."""
        half = self.size() * 0.5
        self.min = center - half
        self.max = center + half

    def set_size(self, size: Vec3) -> None:
        """Resize the box around its current centre."""
        center = self.center()
        half = size * 0.5
        self.min = center - half
        self.max = center + half

    def expand(self, other: Vec3 | BoundingBox) -> None:
        """Grow the box to include a point or another box."""
        if isinstance(other, BoundingBox):
            self.expand(other.min)
            self.expand(other.max)
            return
        self.min = Vec3.minimum(self.min, other)
        self.max = Vec3.maximum(self.max, other)

    def contains(self, other: Vec3 | BoundingBox) -> bool:
        """True if a point, or both corners of a box, lie inside (bounds inclusive)."""
        if isinstance(other, BoundingBox):
            return self.contains(other.min) and self.contains(other.max)
        lo, hi = self.min, self.max
        return (
            lo.x <= other.x <= hi.x
            and lo.y <= other.y <= hi.y
            and lo.z <= other.z <= hi.z
        )

    def intersects(self, other: BoundingBox) -> bool:
        return not (
            other.max.x < self.min.x
            or other.min.x > self.max.x
            or other.max.y < self.min.y
            or other.min.y > self.max.y
            or other.max.z < self.min.z
            or other.min.z > self.max.z
        )

    def intersect_ray(self, ray: Ray, t_min: float = 0.0, t_max: float = FLOAT_MAX) -> bool:
        """Slab test: does ``ray`` hit the box within ``[t_min, t_max]``?"""
        o, d = ray.origin, ray.direction
        t1 = _slab(self.min.x, o.x, d.x)
        t2 = _slab(self.max.x, o.x, d.x)
        t3 = _slab(self.min.y, o.y, d.y)
        t4 = _slab(self.max.y, o.y, d.y)
        t5 = _slab(self.min.z, o.z, d.z)
        t6 = _slab(self.max.z, o.z, d.z)

        near = max(max(min(t1, t2), min(t3, t4)), min(t5, t6))
        far = min(min(max(t1, t2), max(t3, t4)), max(t5, t6))
        return far >= max(near, t_min) and near <= min(far, t_max)

    def distance_to(self, other: Vec3 | BoundingBox) -> float:
        """Distance to a point, or to another box (zero when they intersect)."""
        if isinstance(other, BoundingBox):
            if self.intersects(other):
                return 0.0
            return min(self.distance_to(other.min), self.distance_to(other.max))
        closest = Vec3.clamp(other, self.min, self.max)
        return (other - closest).length()

    def corners(self) -> list[Vec3]:
        """The eight corners: the bottom face (min z) first, then the top face."""
        lo, hi = self.min, self.max
        return [
            Vec3(lo.x, lo.y, lo.z),
            Vec3(hi.x, lo.y, lo.z),
            Vec3(hi.x, hi.y, lo.z),
            Vec3(lo.x, hi.y, lo.z),
            Vec3(lo.x, lo.y, hi.z),
            Vec3(hi.x, lo.y, hi.z),
            Vec3(hi.x, hi.y, hi.z),
            Vec3(lo.x, hi.y, hi.z),
        ]

    def transform(self, matrix: Mat4) -> BoundingBox:
        """The axis-aligned box enclosing this box's corners after ``matrix``."""
        points = [corner.transform(matrix) for corner in self.corners()]
        new_min = new_max = points[0]
        for point in points[1:]:
            new_min = Vec3.minimum(new_min, point)
            new_max = Vec3.maximum(new_max, point)
        return BoundingBox(new_min, new_max)

    @classmethod
    def from_points(cls, points) -> BoundingBox:
        """Smallest box holding every point; empty if there are none."""
        box = cls()
        for point in points:
            box.expand(point)
        return box

    @classmethod
    def from_center_and_size(cls, center: Vec3, size: Vec3) -> BoundingBox:
        half = size * 0.5
        return cls(center - half, center + half)

    @classmethod
    def from_center_and_half_size(cls, center: Vec3, half_size: Vec3) -> BoundingBox:
        return cls(center - half_size, center + half_size)

    @classmethod
    def merge(cls, a: BoundingBox, b: BoundingBox) -> BoundingBox:
        return cls(Vec3.minimum(a.min, b.min), Vec3.maximum(a.max, b.max))

    def __str__(self) -> str:
        return f"BoundingBox(min={self.min}, max={self.max})"