"""Surface materials for physically based shading."""

from __future__ import annotations

import math
from enum import Enum, auto

from .vectors import Vec2, Vec3, Vec4


class MaterialType(Enum):
    PBR_METALLIC_ROUGHNESS = auto()


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


class Material:
    """Albedo, roughness, metallic and emission parameters with optional textures.

    Roughness and metallic are clamped into ``[0, 1]``. The emission reported by
    :attr:`emission` is the emission colour scaled by its strength.
    """

    def __init__(self, albedo: Vec4 = Vec4(1.0, 1.0, 1.0, 1.0)) -> None:
        self.albedo = albedo
        self._roughness = 0.5
        self._metallic = 0.0
        self._emission = Vec3(0.0, 0.0, 0.0)
        self.emission_strength = 1.0
        self.ior = 1.5
        self.material_type = MaterialType.PBR_METALLIC_ROUGHNESS
        self.albedo_texture_id = 0
        self.normal_texture_id = 0
        self.roughness_texture_id = 0
        self.metallic_texture_id = 0
        self.emission_texture_id = 0
        self._bound_textures: set[str] = set()

    @property
    def roughness(self) -> float:
        return self._roughness

    @roughness.setter
    def roughness(self, value: float) -> None:
        self._roughness = _unit(value)

    @property
    def metallic(self) -> float:
        return self._metallic

    @metallic.setter
    def metallic(self, value: float) -> None:
        self._metallic = _unit(value)

    @property
    def emission(self) -> Vec3:
        """Emission colour multiplied by its strength."""
        return self._emission * self.emission_strength

    def set_emission(self, emission: Vec3, strength: float = 1.0) -> None:
        self._emission = emission
        self.emission_strength = strength

    def set_albedo_texture(self, texture_id: int) -> None:
        self.albedo_texture_id = texture_id
        self._bound_textures.add("albedo")

    def set_normal_texture(self, texture_id: int) -> None:
        self.normal_texture_id = texture_id
        self._bound_textures.add("normal")

    def set_roughness_texture(self, texture_id: int) -> None:
        self.roughness_texture_id = texture_id
        self._bound_textures.add("roughness")

    def set_metallic_texture(self, texture_id: int) -> None:
        self.metallic_texture_id = texture_id
        self._bound_textures.add("metallic")

    def set_emission_texture(self, texture_id: int) -> None:
        self.emission_texture_id = texture_id
        self._bound_textures.add("emission")

    @property
    def has_albedo_texture(self) -> bool:
        return "albedo" in self._bound_textures

    @property
    def has_normal_texture(self) -> bool:
        return "normal" in self._bound_textures

    @property
    def has_roughness_texture(self) -> bool:
        return "roughness" in self._bound_textures

    @property
    def has_metallic_texture(self) -> bool:
        return "metallic" in self._bound_textures

    @property
    def has_emission_texture(self) -> bool:
        return "emission" in self._bound_textures

    def sample(
        self, wi: Vec3, wo: Vec3, normal: Vec3, texcoord: Vec2, position: Vec3
    ) -> Vec3:
        """Lambertian BRDF value: the albedo colour divided by pi."""
        return Vec3(self.albedo.x, self.albedo.y, self.albedo.z) * (1.0 / math.pi)

    def pdf(self, wi: Vec3, wo: Vec3, normal: Vec3) -> float:
        """Uniform hemisphere sampling density."""
        return 1.0 / (2.0 * math.pi)

    def __repr__(self) -> str:
        return (
            f"Material(albedo={self.albedo}, roughness={self._roughness:g}, "
            f"metallic={self._metallic:g})"
        )