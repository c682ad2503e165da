"""Scene-graph nodes with a local transform and a parent/child hierarchy."""

from __future__ import annotations

import weakref

from .matrix import Mat4
from .quaternion import Quat
from .vectors import Vec3


class Object3D:
    """A named node with position, rotation and scale relative to its parent."""

    def __init__(self, name: str = "Object3D") -> None:
        self.name = name
        self._position = Vec3.zero()
        self._rotation = Quat.identity()
        self._scale = Vec3.one()
        self._local_cache: Mat4 | None = None
        self._parent_ref: weakref.ReferenceType[Object3D] | None = None
        self._children: list[Object3D] = []

    # Local transform

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        self._position = value
        self._local_cache = None

    @property
    def rotation(self) -> Quat:
        return self._rotation

    @rotation.setter
    def rotation(self, value: Quat) -> None:
        self._rotation = value
        self._local_cache = None

    @property
    def scale(self) -> Vec3:
        return self._scale

    @scale.setter
    def scale(self, value: Vec3) -> None:
        self._scale = value
        self._local_cache = None

    def translate(self, translation: Vec3) -> None:
        self.position = self._position + translation

    def rotate(self, rotation: Quat) -> None:
        """Apply ``rotation`` after the current rotation."""
        self.rotation = rotation * self._rotation

    def scale_by(self, factor: Vec3) -> None:
        """Multiply the scale component-wise by ``factor``."""
        self.scale = self._scale * factor

    # Matrices

    @property
    def local_matrix(self) -> Mat4:
        """Translation * rotation * scale."""
        if self._local_cache is None:
            self._local_cache = (
                Mat4.translation(self._position)
                * self._rotation.to_matrix()
                * Mat4.scaling(self._scale)
            )
        return self._local_cache

    @property
    def world_matrix(self) -> Mat4:
        parent = self.parent
        if parent is None:
            return self.local_matrix
        return parent.world_matrix * self.local_matrix

    @property
    def normal_matrix(self) -> Mat4:
        """Inverse transpose of the world matrix."""
        return self.world_matrix.inverted().transposed()

    @property
    def world_position(self) -> Vec3:
        m = self.world_matrix
        return Vec3(m[0, 3], m[1, 3], m[2, 3])

    @property
    def world_scale(self) -> Vec3:
        m = self.world_matrix
        return Vec3(
            *(Vec3(m[0, c], m[1, c], m[2, c]).length() for c in range(3))
        )

    @property
    def world_rotation(self) -> Quat:
        return Quat.from_matrix(self.world_matrix)

    # Hierarchy

    def add_child(self, child: Object3D | None) -> None:
        """Attach ``child``, detaching it from any previous parent."""
        if child is None:
            return
        current = child.parent
        if current is not None:
            current.remove_child(child)
        child._parent_ref = weakref.ref(self)
        self._children.append(child)

    def remove_child(self, child: Object3D | int) -> None:
        """Detach a child given by object or by index; unknown children are ignored."""
        if isinstance(child, int):
            if 0 <= child < len(self._children):
                removed = self._children.pop(child)
                removed._parent_ref = None
            return
        for position, candidate in enumerate(self._children):
            if candidate is child:
                del self._children[position]
                child._parent_ref = None
                return

    def clear_children(self) -> None:
        for child in self._children:
            child._parent_ref = None
        self._children.clear()

    def child(self, index: int) -> Object3D | None:
        """The child at ``index``, or None when out of range."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    @property
    def children(self) -> tuple[Object3D, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Object3D | None:
        return self._parent_ref() if self._parent_ref is not None else None

    def update(self, delta_time: float) -> None:
        """Invalidate cached transforms and update every child."""
        self._local_cache = None
        for child in self._children:
            child.update(delta_time)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"