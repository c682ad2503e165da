"""Light sources."""

from __future__ import annotations

from enum import Enum, auto

from .object3d import Object3D
from .vectors import Vec3


class LightType(Enum):
    DIRECTIONAL = auto()
    POINT = auto()
    SPOT = auto()


class Light(Object3D):
    """A light with colour, intensity, direction and range."""

    def __init__(self, light_type: LightType = LightType.POINT) -> None:
        super().__init__("Light")
        self.light_type = light_type
        self.color = Vec3(1.0, 1.0, 1.0)
        self.intensity = 1.0
        self._direction = Vec3(0.0, -1.0, 0.0)
        self.range = 10.0

    @property
    def direction(self) -> Vec3:
        return self._direction

    @direction.setter
    def direction(self, value: Vec3) -> None:
        """Stored normalized."""
        self._direction = value.normalized()