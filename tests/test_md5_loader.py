import math

import pytest

from ygl.loader import LoaderError
from ygl.md5_loader import MD5Loader, load_md5, parse_md5
from ygl.vectors import Vec2, Vec3


def make_document(joint="( 0 0 0 1 0 0 0 )", weights=None):
    weights = weights or [
        "0 1.0 0.0 0.0 0.0 ( )",
        "0 1.0 1.0 0.0 0.0 ( )",
        "0 1.0 0.0 1.0 0.0 ( )",
    ]
    lines = [
        "joints 1",
        f'"origin" -1 {joint}',
        'mesh "skin"',
        "numverts 3",
        "0 0.0 0.0 0 1",
        "1 1.0 0.0 1 1",
        "2 0.0 1.0 2 1",
        "numtris 1",
        "0 1 2",
        f"numweights {len(weights)}",
        *weights,
        "}",
    ]
    return lines


def test_identity_joint_places_vertices_at_weights():
    mesh = parse_md5(make_document())
    assert mesh.positions == (
        Vec3(0.0, 0.0, 0.0),
        Vec3(1.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
    )
    assert mesh.indices == (0, 1, 2)


def test_texcoords_come_from_vertices():
    mesh = parse_md5(make_document())
    assert mesh.tex_coords == (Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(0.0, 1.0))


def test_normals_are_unit_and_perpendicular():
    mesh = parse_md5(make_document())
    for normal in mesh.normals:
        assert normal.length() == pytest.approx(1.0)
        assert normal.dot(Vec3(1.0, 0.0, 0.0)) == pytest.approx(0.0)
        assert normal.dot(Vec3(0.0, 1.0, 0.0)) == pytest.approx(0.0)


def test_joint_translation_offsets_vertices():
    mesh = parse_md5(make_document(joint="( 1 2 3 1 0 0 0 )"))
    assert mesh.positions[0] == Vec3(1.0, 2.0, 3.0)
    assert mesh.positions[1] == Vec3(2.0, 2.0, 3.0)
    box = mesh.bounding_box
    assert box.min == Vec3(1.0, 2.0, 3.0)
    assert box.max == Vec3(2.0, 3.0, 3.0)


def test_joint_rotation_turns_weights():
    half = math.sqrt(0.5)
    mesh = parse_md5(make_document(joint=f"( 0 0 0 {half} 0 0 {half} )"))
    assert tuple(mesh.positions[1]) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert tuple(mesh.positions[2]) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)


def test_weights_are_blended_by_bias():
    lines = make_document()
    lines[4] = "0 0.0 0.0 0 2"
    lines[9] = "numweights 4"
    lines.insert(10, "0 0.5 2.0 4.0 6.0 ( )")
    lines.insert(11, "0 0.5 0.0 0.0 0.0 ( )")
    lines[12:15] = ["0 1.0 1.0 0.0 0.0 ( )", "0 1.0 0.0 1.0 0.0 ( )"]
    lines[5] = "1 1.0 0.0 2 1"
    lines[6] = "2 0.0 1.0 3 1"
    mesh = parse_md5(lines)
    assert tuple(mesh.positions[0]) == pytest.approx((1.0, 2.0, 3.0))


def test_no_mesh_block_raises():
    with pytest.raises(LoaderError):
        parse_md5(["joints 1", '"origin" -1 ( 0 0 0 1 0 0 0 )'])


def test_unclosed_mesh_block_raises():
    with pytest.raises(LoaderError):
        parse_md5(make_document()[:-1])


def test_bad_integer_raises():
    lines = make_document()
    lines[3] = "numverts three"
    with pytest.raises(LoaderError):
        parse_md5(lines)


def test_short_weight_lines_are_skipped_and_reported():
    weights = ["0 1.0 0.0 0.0 0.0", "0 1.0 1.0 0.0 0.0", "0 1.0 0.0 1.0 0.0"]
    with pytest.raises(LoaderError):
        parse_md5(make_document(weights=weights))


def test_triangle_index_out_of_range_raises():
    lines = make_document()
    lines[8] = "0 1 7"
    with pytest.raises(LoaderError):
        parse_md5(lines)


def test_load_md5_from_file(tmp_path):
    path = tmp_path / "model.md5mesh"
    path.write_text("\n".join(make_document()) + "\n")
    mesh = load_md5(str(path))
    assert mesh.indices == (0, 1, 2)
    meshes = MD5Loader().load(str(path))
    assert len(meshes) == 1
    assert meshes[0].positions == mesh.positions


def test_missing_file_raises(tmp_path):
    with pytest.raises(LoaderError):
        MD5Loader().load_single(str(tmp_path / "absent.md5mesh"))