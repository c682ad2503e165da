import math
from itertools import chain

import pytest

from ygl.matrix import Mat4
from ygl.object3d import Object3D
from ygl.quaternion import Quat
from ygl.vectors import Vec3


def test_defaults_are_identity():
    obj = Object3D("node")
    assert obj.name == "node"
    assert obj.local_matrix == Mat4.identity()
    assert obj.world_matrix == Mat4.identity()
    assert obj.parent is None
    assert obj.children == ()


def test_position_sets_translation():
    obj = Object3D("node")
    p = Vec3(1.0, 2.0, 3.0)
    obj.position = p
    assert obj.local_matrix == Mat4.translation(p)
    assert obj.world_position == p


def test_translate_accumulates():
    obj = Object3D("node")
    obj.translate(Vec3(1.0, 0.0, 0.0))
    obj.translate(Vec3(0.0, 2.0, 0.0))
    assert obj.position == Vec3(1.0, 0.0, 0.0) + Vec3(0.0, 2.0, 0.0)


def test_rotate_composes():
    obj = Object3D("node")
    a = Quat.from_axis_angle(Vec3.unit_z(), 0.3)
    b = Quat.from_axis_angle(Vec3.unit_x(), 0.7)
    obj.rotate(a)
    obj.rotate(b)
    assert obj.rotation == b * a


def test_scale_by_multiplies():
    obj = Object3D("node")
    obj.scale = Vec3(2.0, 3.0, 4.0)
    obj.scale_by(Vec3(0.5, 2.0, 1.0))
    assert obj.scale == Vec3(2.0, 3.0, 4.0) * Vec3(0.5, 2.0, 1.0)


def test_child_world_position_follows_parent():
    parent = Object3D("parent")
    child = Object3D("child")
    parent.position = Vec3(1.0, 2.0, 3.0)
    child.position = Vec3(4.0, 5.0, 6.0)
    parent.add_child(child)
    assert child.parent is parent
    assert tuple(child.world_position) == pytest.approx((5.0, 7.0, 9.0), abs=1e-9)

    parent.position = Vec3(-1.0, 0.0, 0.0)
    assert tuple(child.world_position) == pytest.approx((3.0, 5.0, 6.0), abs=1e-9)


def test_world_scale_combines_parent_and_child():
    parent = Object3D("parent")
    child = Object3D("child")
    parent.scale = Vec3(2.0, 2.0, 2.0)
    child.scale = Vec3(3.0, 1.5, 0.5)
    parent.add_child(child)
    assert tuple(child.world_scale) == pytest.approx((6.0, 3.0, 1.0), abs=1e-9)


def test_world_rotation_recovers_rotation():
    obj = Object3D("node")
    q = Quat.from_axis_angle(Vec3.unit_z(), math.pi / 2)
    obj.rotation = q
    r = obj.world_rotation
    assert (r.x, r.y, r.z, r.w) == pytest.approx((q.x, q.y, q.z, q.w), abs=1e-9)


def test_normal_matrix_is_inverse_transpose():
    obj = Object3D("node")
    obj.position = Vec3(1.0, 2.0, 3.0)
    obj.scale = Vec3(2.0, 4.0, 8.0)
    normal = list(chain.from_iterable(obj.normal_matrix.rows()))
    expected = list(chain.from_iterable(obj.world_matrix.inverted().transposed().rows()))
    assert normal == pytest.approx(expected, abs=1e-9)
    product = obj.normal_matrix.transposed() * obj.world_matrix
    assert list(chain.from_iterable(product.rows())) == pytest.approx(
        list(chain.from_iterable(Mat4.identity().rows())), abs=1e-9
    )


def test_add_child_reparents():
    first = Object3D("first")
    second = Object3D("second")
    child = Object3D("child")
    first.add_child(child)
    second.add_child(child)
    assert first.children == ()
    assert second.children == (child,)
    assert child.parent is second


def test_add_none_is_ignored():
    obj = Object3D("node")
    obj.add_child(None)
    assert obj.children == ()


def test_remove_child_by_object_and_index():
    parent = Object3D("parent")
    a, b, c = Object3D("a"), Object3D("b"), Object3D("c")
    for node in (a, b, c):
        parent.add_child(node)
    parent.remove_child(b)
    assert parent.children == (a, c)
    assert b.parent is None
    parent.remove_child(0)
    assert parent.children == (c,)
    assert a.parent is None
    parent.remove_child(7)
    assert parent.children == (c,)


def test_child_lookup_out_of_range():
    parent = Object3D("parent")
    kid = Object3D("kid")
    parent.add_child(kid)
    assert parent.child(0) is kid
    assert parent.child(5) is None


def test_clear_children_detaches_all():
    parent = Object3D("parent")
    kids = [Object3D(str(i)) for i in range(3)]
    for kid in kids:
        parent.add_child(kid)
    parent.clear_children()
    assert parent.children == ()
    assert all(kid.parent is None for kid in kids)


def test_update_keeps_transform():
    parent = Object3D("parent")
    child = Object3D("child")
    parent.add_child(child)
    child.position = Vec3(1.0, 1.0, 1.0)
    before = child.world_matrix
    parent.update(0.016)
    assert child.world_matrix == before