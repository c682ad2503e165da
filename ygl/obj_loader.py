"""Wavefront OBJ model loading."""

from __future__ import annotations

from typing import Iterable

from .loader import Loader, LoaderError, compute_normals, split_line
from .mesh import Mesh
from .vectors import Vec2, Vec3


def _float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise LoaderError(f"invalid number: {token!r}") from None


def _index(token: str) -> int:
    try:
        return int(token) - 1
    except ValueError:
        raise LoaderError(f"invalid index: {token!r}") from None


def _pick(values: list, index: int, default):
    return values[index] if 0 <= index < len(values) else default


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from the lines of an OBJ document.

    Face corners with the same position/texcoord/normal indices share a vertex.
    A missing texcoord or normal index refers to the first entry. When the file
    has no normals, smooth normals are computed from the faces.
    """
    positions: list[Vec3] = []
    normals: list[Vec3] = []
    texcoords: list[Vec2] = []
    vertex_positions: list[Vec3] = []
    vertex_normals: list[Vec3] = []
    vertex_texcoords: list[Vec2] = []
    indices: list[int] = []
    vertex_map: dict[tuple[int, int, int], int] = {}

    for line in lines:
        if line.startswith("#"):
            continue
        tokens = split_line(line)
        if not tokens:
            continue
        head = tokens[0]
        if head == "v" and len(tokens) >= 4:
            positions.append(Vec3(*(_float(t) for t in tokens[1:4])))
        elif head == "vn" and len(tokens) >= 4:
            normals.append(Vec3(*(_float(t) for t in tokens[1:4])))
        elif head == "vt" and len(tokens) >= 2:
            v = _float(tokens[2]) if len(tokens) >= 3 else 0.0
            texcoords.append(Vec2(_float(tokens[1]), v))
        elif head == "f" and len(tokens) >= 4:
            for corner in tokens[1:]:
                parts = corner.split("/", 2)
                pos_idx = _index(parts[0])
                if not 0 <= pos_idx < len(positions):
                    raise LoaderError(f"position index out of range in face: {corner!r}")
                tex_idx = _index(parts[1]) if len(parts) > 1 and parts[1] else 0
                norm_idx = _index(parts[2]) if len(parts) > 2 and parts[2] else 0
                key = (pos_idx, tex_idx, norm_idx)
                if key not in vertex_map:
                    vertex_map[key] = len(vertex_positions)
                    vertex_positions.append(positions[pos_idx])
                    vertex_texcoords.append(_pick(texcoords, tex_idx, Vec2()))
                    vertex_normals.append(_pick(normals, norm_idx, Vec3()))
                indices.append(vertex_map[key])

    if not normals:
        vertex_normals = compute_normals(vertex_positions, indices)

    mesh = Mesh()
    mesh.positions = vertex_positions
    mesh.normals = vertex_normals
    mesh.tex_coords = vertex_texcoords
    mesh.indices = indices
    mesh.update_bounding_box()
    return mesh


def load_obj(path: str) -> Mesh:
    """Read and parse the OBJ file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_obj(handle)
    except OSError as exc:
        raise LoaderError(f"cannot read {path}: {exc}") from exc


class OBJLoader(Loader):
    """Loader for Wavefront OBJ files."""

    def load(self, filename: str) -> list[Mesh]:
        return [self.load_single(filename)]

    def load_single(self, filename: str) -> Mesh:
        return load_obj(filename)