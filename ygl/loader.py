"""Shared pieces of the model loaders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .mesh import Mesh
from .vectors import Vec3


class LoaderError(Exception):
    """Raised when a model file cannot be read or is malformed."""


def split_line(line: str) -> list[str]:
    """Split a line into its whitespace-separated tokens."""
    return line.split()


def compute_normals(positions: Sequence[Vec3], indices: Sequence[int]) -> list[Vec3]:
    """Smooth per-vertex normals from indexed triangles.

    Each complete triple of indices contributes its unit face normal to its three
    vertices; the sums are then normalized. A trailing incomplete triple is
    ignored, and vertices no triangle touches keep a zero normal.
    """
    normals = [Vec3() for _ in positions]
    triples = [iter(indices)] * 3
    for a, b, c in zip(*triples):
        origin = positions[a]
        face = (positions[b] - origin).cross(positions[c] - origin).normalized()
        normals[a] = normals[a] + face
        normals[b] = normals[b] + face
        normals[c] = normals[c] + face
    return [normal.normalized() for normal in normals]


class Loader(ABC):
    """Base class of the file loaders; a failed load raises :class:`LoaderError`."""

    def load(self, filename: str) -> list[Mesh]:
        """Every mesh held in ``filename``."""
        return [self.load_single(filename)]

    @abstractmethod
    def load_single(self, filename: str) -> Mesh:
        """The mesh held in ``filename``."""