"""Triangle meshes with per-vertex attributes."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable

from .bounding_box import BoundingBox
from .material import Material
from .object3d import Object3D
from .vectors import Vec2, Vec3


class PrimitiveType(Enum):
    POINTS = auto()
    LINES = auto()
    LINE_LOOP = auto()
    LINE_STRIP = auto()
    TRIANGLES = auto()
    TRIANGLE_STRIP = auto()
    TRIANGLE_FAN = auto()


class Mesh(Object3D):
    """Vertex positions with optional normals, texture coordinates, colours and indices.

    An optional attribute is part of the vertex layout only when it has exactly
    one entry per position.
    """

    def __init__(self, name: str = "Mesh") -> None:
        super().__init__(name)
        self._positions: list[Vec3] = []
        self._normals: list[Vec3] = []
        self._tex_coords: list[Vec2] = []
        self._colors: list[Vec3] = []
        self._indices: list[int] = []
        self._bounds: BoundingBox | None = None
        self.material: Material | None = None
        self.primitive_type = PrimitiveType.TRIANGLES

    @property
    def positions(self) -> tuple[Vec3, ...]:
        return tuple(self._positions)

    @positions.setter
    def positions(self, values: Iterable[Vec3]) -> None:
        self._positions = list(values)
        self._bounds = None

    @property
    def normals(self) -> tuple[Vec3, ...]:
        return tuple(self._normals)

    @normals.setter
    def normals(self, values: Iterable[Vec3]) -> None:
        self._normals = list(values)

    @property
    def tex_coords(self) -> tuple[Vec2, ...]:
        return tuple(self._tex_coords)

    @tex_coords.setter
    def tex_coords(self, values: Iterable[Vec2]) -> None:
        self._tex_coords = list(values)

    @property
    def colors(self) -> tuple[Vec3, ...]:
        return tuple(self._colors)

    @colors.setter
    def colors(self, values: Iterable[Vec3]) -> None:
        self._colors = list(values)

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(self._indices)

    @indices.setter
    def indices(self, values: Iterable[int]) -> None:
        self._indices = [int(i) for i in values]

    def add_position(self, position: Vec3) -> None:
        self._positions.append(position)
        self._bounds = None

    def add_normal(self, normal: Vec3) -> None:
        self._normals.append(normal)

    def add_tex_coord(self, tex_coord: Vec2) -> None:
        self._tex_coords.append(tex_coord)

    def add_color(self, color: Vec3) -> None:
        self._colors.append(color)

    def add_index(self, index: int) -> None:
        self._indices.append(int(index))

    def add_triangle(self, v0: int, v1: int, v2: int) -> None:
        self._indices.extend((int(v0), int(v1), int(v2)))

    def clear(self) -> None:
        """Remove every vertex attribute and index."""
        self._positions.clear()
        self._normals.clear()
        self._tex_coords.clear()
        self._colors.clear()
        self._indices.clear()
        self._bounds = None

    @property
    def bounding_box(self) -> BoundingBox:
        """Box around the positions, recomputed when they change."""
        if self._bounds is None:
            self.update_bounding_box()
        return self._bounds

    def update_bounding_box(self) -> None:
        self._bounds = BoundingBox.from_points(self._positions)

    def _attribute_lists(self):
        count = len(self._positions)
        candidates = (
            ("normal", 3, self._normals),
            ("tex_coord", 2, self._tex_coords),
            ("color", 3, self._colors),
        )
        yield "position", 3, self._positions
        for name, size, values in candidates:
            if values and len(values) == count:
                yield name, size, values

    def vertex_layout(self) -> tuple[tuple[str, int], ...]:
        """The interleaved attributes as ``(name, component_count)`` in buffer order."""
        return tuple((name, size) for name, size, _ in self._attribute_lists())

    def interleaved_vertex_data(self) -> list[float]:
        """Vertex attributes packed per vertex in :meth:`vertex_layout` order."""
        columns = [values for _, _, values in self._attribute_lists()]
        return [
            component
            for vertex in zip(*columns)
            for attribute in vertex
            for component in attribute
        ]

    def draw_count(self) -> int:
        """Number of elements a draw call submits for the primitive type."""
        if not self._positions:
            return 0
        if self.primitive_type is PrimitiveType.TRIANGLES and self._indices:
            return len(self._indices)
        return len(self._positions)