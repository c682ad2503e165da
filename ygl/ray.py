"""Rays with a parametric range."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matrix import Mat4
from .vectors import Vec3

FLOAT_MAX = 3.4028234663852886e38
"""Largest single-precision float, the default upper bound of a ray."""


@dataclass
class Ray:
    """A ray ``origin + t * direction`` valid for ``t`` in ``[t_min, t_max]``."""

    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)
    t_min: float = 0.0
    t_max: float = FLOAT_MAX

    def __call__(self, t: float) -> Vec3:
        return self.at(t)

    def at(self, t: float) -> Vec3:
        """The point at parameter ``t``."""
        return self.origin + self.direction * t

    def set_bounds(self, t_min: float, t_max: float) -> None:
        self.t_min = t_min
        self.t_max = t_max

    def is_valid(self) -> bool:
        """True when the direction is non-zero."""
        return self.direction.length_squared() > 0.0

    def transform(self, matrix: Mat4) -> Ray:
        """A new ray with origin and direction transformed; bounds reset to defaults."""
        origin = matrix * self.origin
        return Ray(origin, matrix * (self.origin + self.direction) - origin)

    def __str__(self) -> str:
        return (
            f"Ray(origin={self.origin}, direction={self.direction}, "
            f"t_min={self.t_min:g}, t_max={self.t_max:g})"
        )