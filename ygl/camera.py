"""A look-at camera with perspective or orthographic projection."""

from __future__ import annotations

import math
from enum import Enum, auto

from .matrix import Mat4
from .object3d import Object3D
from .quaternion import Quat
from .vectors import Vec3

_PITCH_LIMIT = 89.0


class ProjectionType(Enum):
    PERSPECTIVE = auto()
    ORTHOGRAPHIC = auto()


class Camera(Object3D):
    """A camera looking from its world position towards ``target``."""

    def __init__(
        self,
        position: Vec3 = Vec3(0.0, 0.0, 0.0),
        target: Vec3 = Vec3(0.0, 0.0, -1.0),
        up: Vec3 = Vec3(0.0, 1.0, 0.0),
    ) -> None:
        super().__init__("Camera")
        self._target = target
        self._up = up
        self._forward = Vec3(0.0, 0.0, -1.0)
        self._right = Vec3(1.0, 0.0, 0.0)
        self._projection_type = ProjectionType.PERSPECTIVE
        self._fov = 45.0
        self._aspect = 16.0 / 9.0
        self._near = 0.1
        self._far = 1000.0
        self._orthographic_size = 10.0
        self._projection_cache: Mat4 | None = None
        self.yaw = -90.0
        self.pitch = 0.0
        self.mouse_sensitivity = 0.1
        self._first_mouse = True
        self._last_mouse = (0.0, 0.0)
        self.position = position
        self._update_vectors()

    # Projection parameters

    @property
    def projection_type(self) -> ProjectionType:
        return self._projection_type

    @projection_type.setter
    def projection_type(self, value: ProjectionType) -> None:
        self._projection_type = value
        self._projection_cache = None

    @property
    def fov(self) -> float:
        """Vertical field of view in degrees."""
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = value
        self._projection_cache = None

    @property
    def aspect(self) -> float:
        return self._aspect

    @aspect.setter
    def aspect(self, value: float) -> None:
        self._aspect = value
        self._projection_cache = None

    @property
    def near(self) -> float:
        return self._near

    @near.setter
    def near(self, value: float) -> None:
        self._near = value
        self._projection_cache = None

    @property
    def far(self) -> float:
        return self._far

    @far.setter
    def far(self, value: float) -> None:
        self._far = value
        self._projection_cache = None

    @property
    def orthographic_size(self) -> float:
        """Full height of the orthographic view volume."""
        return self._orthographic_size

    @orthographic_size.setter
    def orthographic_size(self, value: float) -> None:
        self._orthographic_size = value
        self._projection_cache = None

    # View parameters

    @property
    def target(self) -> Vec3:
        return self._target

    @target.setter
    def target(self, value: Vec3) -> None:
        self._target = value

    @property
    def up(self) -> Vec3:
        return self._up

    @up.setter
    def up(self, value: Vec3) -> None:
        self._up = value

    @property
    def forward(self) -> Vec3:
        return self._forward

    @property
    def right(self) -> Vec3:
        return self._right

    # Matrices

    @property
    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.world_position, self._target, self._up)

    @property
    def projection_matrix(self) -> Mat4:
        if self._projection_cache is None:
            if self._projection_type is ProjectionType.PERSPECTIVE:
                self._projection_cache = Mat4.perspective(
                    math.radians(self._fov), self._aspect, self._near, self._far
                )
            else:
                half = self._orthographic_size * 0.5
                self._projection_cache = Mat4.orthographic(
                    -half * self._aspect,
                    half * self._aspect,
                    -half,
                    half,
                    self._near,
                    self._far,
                )
        return self._projection_cache

    @property
    def view_projection_matrix(self) -> Mat4:
        return self.projection_matrix * self.view_matrix

    def _update_vectors(self) -> None:
        self._forward = (self._target - self.world_position).normalized()
        self._right = self._forward.cross(self._up).normalized()
        self._up = self._right.cross(self._forward)

    # Movement

    def _move(self, offset: Vec3) -> None:
        new_position = self.world_position + offset
        self.position = new_position
        self._target = new_position + self._forward

    def move_forward(self, distance: float) -> None:
        self._move(self._forward * distance)

    def move_backward(self, distance: float) -> None:
        self._move(-(self._forward * distance))

    def move_left(self, distance: float) -> None:
        self._move(-(self._right * distance))

    def move_right(self, distance: float) -> None:
        self._move(self._right * distance)

    def move_up(self, distance: float) -> None:
        self._move(self._up * distance)

    def move_down(self, distance: float) -> None:
        self._move(-(self._up * distance))

    # Rotation

    def rotate_yaw(self, angle: float) -> None:
        self.yaw += angle
        self._update_vectors()

    def rotate_pitch(self, angle: float) -> None:
        """Add to the pitch, clamped to +/-89 degrees."""
        self.pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, self.pitch + angle))
        self._update_vectors()

    def rotate_roll(self, angle: float) -> None:
        """Spin the up and right vectors ``angle`` radians about the forward axis."""
        roll = Quat.from_axis_angle(self._forward, angle)
        self._up = roll * self._up
        self._right = roll * self._right

    def process_mouse_movement(self, xpos: float, ypos: float) -> None:
        """Turn by the cursor offset since the previous call, scaled by sensitivity."""
        if self._first_mouse:
            self._last_mouse = (xpos, ypos)
            self._first_mouse = False
        last_x, last_y = self._last_mouse
        x_offset = (xpos - last_x) * self.mouse_sensitivity
        y_offset = (last_y - ypos) * self.mouse_sensitivity
        self._last_mouse = (xpos, ypos)
        self.rotate_yaw(x_offset)
        self.rotate_pitch(y_offset)

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        direction = self._target - self.world_position
        if direction.length_squared() > 0.0001:
            self._forward = direction.normalized()
            self._right = self._forward.cross(self._up).normalized()
            self._up = self._right.cross(self._forward)