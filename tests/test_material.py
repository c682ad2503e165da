import math

import pytest

from ygl.material import Material, MaterialType
from ygl.vectors import Vec2, Vec3, Vec4


def test_albedo_given_to_constructor_is_kept():
    color = Vec4(0.8, 0.2, 0.2, 1.0)
    assert Material(color).albedo == color


def test_default_type():
    assert Material().material_type is MaterialType.PBR_METALLIC_ROUGHNESS


@pytest.mark.parametrize("value", [0.0, 0.25, 0.8, 1.0])
def test_roughness_in_range_round_trips(value):
    material = Material()
    material.roughness = value
    assert material.roughness == value


def test_roughness_and_metallic_are_clamped():
    material = Material()
    material.roughness = 3.0
    material.metallic = -2.0
    assert material.roughness == 1.0
    assert material.metallic == 0.0


def test_metallic_in_range_round_trips():
    material = Material()
    material.metallic = 0.8
    assert material.metallic == 0.8


def test_emission_is_scaled_by_strength():
    material = Material()
    material.set_emission(Vec3(10.0, 10.0, 10.0), 0.5)
    assert material.emission == Vec3(10.0, 10.0, 10.0) * 0.5
    assert material.emission_strength == 0.5


def test_emission_default_strength_leaves_colour():
    material = Material()
    material.set_emission(Vec3(1.0, 2.0, 3.0))
    assert material.emission == Vec3(1.0, 2.0, 3.0)


def test_textures_start_unbound():
    material = Material()
    flags = [
        material.has_albedo_texture,
        material.has_normal_texture,
        material.has_roughness_texture,
        material.has_metallic_texture,
        material.has_emission_texture,
    ]
    assert flags == [False, False, False, False, False]


@pytest.mark.parametrize(
    "slot", ["albedo", "normal", "roughness", "metallic", "emission"]
)
def test_setting_texture_marks_only_that_slot(slot):
    material = Material()
    getattr(material, f"set_{slot}_texture")(7)
    assert getattr(material, f"{slot}_texture_id") == 7
    assert getattr(material, f"has_{slot}_texture") is True
    others = {"albedo", "normal", "roughness", "metallic", "emission"} - {slot}
    assert not any(getattr(material, f"has_{name}_texture") for name in others)


def test_texture_id_zero_still_counts_as_set():
    material = Material()
    material.set_normal_texture(0)
    assert material.has_normal_texture is True


def test_sample_times_pi_gives_albedo_colour():
    material = Material(Vec4(0.9, 0.5, 0.1, 1.0))
    value = material.sample(Vec3(0, 1, 0), Vec3(0, 1, 0), Vec3(0, 1, 0), Vec2(), Vec3())
    assert value.x * math.pi == pytest.approx(0.9)
    assert value.y * math.pi == pytest.approx(0.5)
    assert value.z * math.pi == pytest.approx(0.1)


def test_pdf_integrates_over_hemisphere_to_one():
    pdf = Material().pdf(Vec3(0, 1, 0), Vec3(0, 1, 0), Vec3(0, 1, 0))
    assert pdf * 2.0 * math.pi == pytest.approx(1.0)