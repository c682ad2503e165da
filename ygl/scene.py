"""The root node holding a scene's meshes and lights."""

from __future__ import annotations

from .light import Light
from .mesh import Mesh
from .object3d import Object3D
from .vectors import Vec3


class Scene(Object3D):
    """A scene-graph root that tracks its lights and meshes as children."""

    def __init__(self, name: str = "Scene") -> None:
        super().__init__(name)
        self.background_color = Vec3(0.2, 0.2, 0.2)
        self._lights: list[Light] = []
        self._meshes: list[Mesh] = []

    @staticmethod
    def _remove(items: list, item, scene: Scene) -> None:
        if isinstance(item, int):
            if 0 <= item < len(items):
                scene.remove_child(items.pop(item))
            return
        for position, candidate in enumerate(items):
            if candidate is item:
                scene.remove_child(candidate)
                del items[position]
                return

    def add_light(self, light: Light | None) -> None:
        if light is None:
            return
        self.add_child(light)
        self._lights.append(light)

    def remove_light(self, light: Light | int) -> None:
        """Remove a light given by object or index; unknown lights are ignored."""
        self._remove(self._lights, light, self)

    def clear_lights(self) -> None:
        for light in self._lights:
            self.remove_child(light)
        self._lights.clear()

    @property
    def lights(self) -> tuple[Light, ...]:
        return tuple(self._lights)

    def add_mesh(self, mesh: Mesh | None) -> None:
        if mesh is None:
            return
        self.add_child(mesh)
        self._meshes.append(mesh)

    def remove_mesh(self, mesh: Mesh | int) -> None:
        """Remove a mesh given by object or index; unknown meshes are ignored."""
        self._remove(self._meshes, mesh, self)

    def clear_meshes(self) -> None:
        for mesh in self._meshes:
            self.remove_child(mesh)
        self._meshes.clear()

    @property
    def meshes(self) -> tuple[Mesh, ...]:
        return tuple(self._meshes)