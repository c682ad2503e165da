"""MD5 skinned mesh loading, evaluated in the bind pose."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .loader import Loader, LoaderError, compute_normals, split_line
from .mesh import Mesh
from .quaternion import Quat
from .vectors import Vec2, Vec3


@dataclass
class MD5Joint:
    """A skeleton joint in the bind pose."""

    name: str
    parent: int
    position: Vec3
    orientation: Quat


@dataclass
class _Vertex:
    index: int
    u: float
    v: float
    start_weight: int
    count_weight: int


@dataclass
class _Weight:
    joint: int
    bias: float
    position: Vec3


@dataclass
class _SubMesh:
    shader: str
    vertices: list[_Vertex] = field(default_factory=list)
    triangles: list[tuple[int, int, int]] = field(default_factory=list)
    weights: list[_Weight] = field(default_factory=list)


def _int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise LoaderError(f"invalid integer: {token!r}") from None


def _float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise LoaderError(f"invalid number: {token!r}") from None


def parse_md5(lines: Iterable[str]) -> Mesh:
    """Build a mesh from the first sub-mesh of an MD5 mesh document.

    Joint lines read ``name parent ( px py pz qw qx qy qz )``; vertex lines
    ``index u v start_weight weight_count``; triangle lines three vertex indices;
    weight lines ``joint bias px py pz`` followed by at least two more tokens.
    Lines too short for their block are skipped.
    """
    it = iter(lines)

    def block(count: int) -> list[list[str]]:
        return [split_line(next(it, "")) for _ in range(count)]

    joints: list[MD5Joint] = []
    meshes: list[_SubMesh] = []
    current = _SubMesh("")
    in_mesh = False

    for line in it:
        tokens = split_line(line)
        if not tokens:
            continue
        head = tokens[0]
        if head == "joints" and len(tokens) > 1:
            for jt in block(_int(tokens[1])):
                if len(jt) < 10:
                    continue
                joints.append(
                    MD5Joint(
                        name=jt[0],
                        parent=_int(jt[1]),
                        position=Vec3(_float(jt[3]), _float(jt[4]), _float(jt[5])),
                        orientation=Quat(
                            _float(jt[7]), _float(jt[8]), _float(jt[9]), _float(jt[6])
                        ),
                    )
                )
        elif head == "mesh" and len(tokens) > 1:
            in_mesh = True
            current = _SubMesh(tokens[1][1:-1])
        elif in_mesh and head == "}":
            in_mesh = False
            meshes.append(current)
        elif in_mesh and head == "numverts" and len(tokens) > 1:
            for vt in block(_int(tokens[1])):
                if len(vt) < 5:
                    continue
                current.vertices.append(
                    _Vertex(_int(vt[0]), _float(vt[1]), _float(vt[2]), _int(vt[3]), _int(vt[4]))
                )
        elif in_mesh and head == "numtris" and len(tokens) > 1:
            for tt in block(_int(tokens[1])):
                if len(tt) < 3:
                    continue
                current.triangles.append((_int(tt[0]), _int(tt[1]), _int(tt[2])))
        elif in_mesh and head == "numweights" and len(tokens) > 1:
            for wt in block(_int(tokens[1])):
                if len(wt) < 7:
                    continue
                current.weights.append(
                    _Weight(
                        _int(wt[0]),
                        _float(wt[1]),
                        Vec3(_float(wt[2]), _float(wt[3]), _float(wt[4])),
                    )
                )

    if not meshes:
        raise LoaderError("no mesh found in MD5 data")
    sub = meshes[0]

    indices = [index for triangle in sub.triangles for index in triangle]
    positions: list[Vec3] = []
    for vertex in sub.vertices:
        position = Vec3()
        for offset in range(vertex.count_weight):
            slot = vertex.start_weight + offset
            if not 0 <= slot < len(sub.weights):
                raise LoaderError(f"weight index {slot} out of range")
            weight = sub.weights[slot]
            if not 0 <= weight.joint < len(joints):
                raise LoaderError(f"joint index {weight.joint} out of range")
            joint = joints[weight.joint]
            rotated = joint.orientation * weight.position
            position = position + (rotated + joint.position) * weight.bias
        positions.append(position)

    if any(not 0 <= index < len(positions) for index in indices):
        raise LoaderError("triangle refers to a missing vertex")

    mesh = Mesh()
    mesh.positions = positions
    mesh.normals = compute_normals(positions, indices)
    mesh.tex_coords = [Vec2(vertex.u, vertex.v) for vertex in sub.vertices]
    mesh.indices = indices
    mesh.update_bounding_box()
    return mesh


def load_md5(path: str) -> Mesh:
    """Read and parse the MD5 mesh file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_md5(handle)
    except OSError as exc:
        raise LoaderError(f"cannot read {path}: {exc}") from exc


class MD5Loader(Loader):
    """Loader for MD5 mesh files."""

    def load(self, filename: str) -> list[Mesh]:
        return [self.load_single(filename)]

    def load_single(self, filename: str) -> Mesh:
        return load_md5(filename)