from ygl.bounding_box import BoundingBox
from ygl.material import Material
from ygl.mesh import Mesh, PrimitiveType
from ygl.object3d import Object3D
from ygl.vectors import Vec2, Vec3

QUAD = [
    Vec3(-5.0, -1.0, -5.0),
    Vec3(5.0, -1.0, -5.0),
    Vec3(5.0, -1.0, 5.0),
    Vec3(-5.0, -1.0, 5.0),
]
QUAD_INDICES = [0, 1, 2, 0, 2, 3]


def make_quad() -> Mesh:
    mesh = Mesh("floor")
    mesh.positions = QUAD
    mesh.indices = QUAD_INDICES
    return mesh


def test_mesh_is_scene_node_with_name():
    mesh = Mesh("floor")
    assert isinstance(mesh, Object3D)
    assert mesh.name == "floor"


def test_attributes_round_trip():
    mesh = make_quad()
    normals = [Vec3(0.0, 1.0, 0.0)] * 4
    uvs = [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1), Vec2(0, 1)]
    mesh.normals = normals
    mesh.tex_coords = uvs
    assert mesh.positions == tuple(QUAD)
    assert mesh.normals == tuple(normals)
    assert mesh.tex_coords == tuple(uvs)
    assert mesh.indices == tuple(QUAD_INDICES)


def test_bounding_box_matches_points():
    mesh = make_quad()
    assert mesh.bounding_box == BoundingBox.from_points(QUAD)


def test_bounding_box_follows_added_positions():
    mesh = make_quad()
    _ = mesh.bounding_box
    mesh.add_position(Vec3(0.0, 5.0, 0.0))
    assert mesh.bounding_box.max.y == 5.0
    assert mesh.bounding_box.contains(Vec3(0.0, 5.0, 0.0))


def test_add_triangle_and_index_append():
    mesh = Mesh()
    mesh.add_triangle(0, 1, 2)
    mesh.add_index(3)
    assert mesh.indices == (0, 1, 2, 3)


def test_add_single_attributes():
    mesh = Mesh()
    mesh.add_position(Vec3(1, 2, 3))
    mesh.add_normal(Vec3(0, 0, 1))
    mesh.add_tex_coord(Vec2(0.5, 0.5))
    mesh.add_color(Vec3(1, 0, 0))
    assert mesh.positions == (Vec3(1, 2, 3),)
    assert mesh.normals == (Vec3(0, 0, 1),)
    assert mesh.tex_coords == (Vec2(0.5, 0.5),)
    assert mesh.colors == (Vec3(1, 0, 0),)


def test_clear_empties_everything():
    mesh = make_quad()
    mesh.normals = [Vec3(0, 1, 0)] * 4
    mesh.clear()
    assert mesh.positions == ()
    assert mesh.normals == ()
    assert mesh.indices == ()
    assert mesh.bounding_box == BoundingBox()
    assert mesh.draw_count() == 0


def test_layout_skips_attributes_of_wrong_length():
    mesh = make_quad()
    mesh.normals = [Vec3(0, 1, 0)] * 4
    mesh.tex_coords = [Vec2(0, 0)] * 3
    mesh.colors = [Vec3(1, 1, 1)] * 4
    assert mesh.vertex_layout() == (("position", 3), ("normal", 3), ("color", 3))


def test_interleaved_data_order_and_size():
    mesh = Mesh()
    mesh.positions = [Vec3(1, 2, 3), Vec3(4, 5, 6)]
    mesh.tex_coords = [Vec2(7, 8), Vec2(9, 10)]
    data = mesh.interleaved_vertex_data()
    assert data == [1, 2, 3, 7, 8, 4, 5, 6, 9, 10]
    stride = sum(size for _, size in mesh.vertex_layout())
    assert len(data) == stride * len(mesh.positions)


def test_draw_count_uses_indices_for_triangles():
    mesh = make_quad()
    assert mesh.draw_count() == len(QUAD_INDICES)
    mesh.primitive_type = PrimitiveType.LINE_LOOP
    assert mesh.draw_count() == len(QUAD)


def test_draw_count_without_indices_uses_positions():
    mesh = Mesh()
    mesh.positions = QUAD
    assert mesh.draw_count() == len(QUAD)


def test_material_can_be_attached():
    mesh = make_quad()
    material = Material()
    mesh.material = material
    assert mesh.material is material