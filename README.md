# ygl

A small, dependency-free 3D toolkit: vector, matrix, quaternion and ray math,
a scene graph with cameras, lights and meshes, PBR-style material parameters,
and loaders for Wavefront OBJ and MD5 mesh files.

## Installation

```
pip install .
```

## Modules

- `ygl.vectors` – immutable `Vec2`, `Vec3`, `Vec4` with arithmetic, `length`,
  `normalized`, `dot`; `Vec3` also has `cross`, `transform`, `minimum`,
  `maximum` and `clamp`. Free functions `normalize`, `dot`, `cross`.
- `ygl.matrix` – `Mat4`, an immutable row-major 4×4 matrix indexed `m[row, col]`,
  with `identity`, `translation`, `scaling`, `rotation_x/y/z`, `look_at`,
  `perspective`, `orthographic`, `inverted` (a singular matrix gives the
  identity), `determinant`, `transposed` and `rows`. Multiplying by a `Vec3`
  transforms it as a point; by a `Vec4`, as a full 4-vector.
- `ygl.quaternion` – `Quat` with `from_axis_angle`, `from_matrix`, `identity`,
  `normalized`, `to_matrix`; `q * v` rotates a `Vec3`.
- `ygl.ray` – `Ray` (origin, direction, `t_min`, `t_max`) with `at`,
  `set_bounds`, `is_valid` and `transform`.
- `ygl.bounding_box` – axis-aligned `BoundingBox`: size queries, `expand`,
  `contains`, `intersects`, `intersect_ray`, `distance_to`, `corners`,
  `transform`, `from_points`, `merge`. A default box is empty.
- `ygl.object3d` – `Object3D` scene-graph node with `position`, `rotation`,
  `scale`, `local_matrix`, `world_matrix`, `normal_matrix`, `world_position`,
  `world_scale`, `world_rotation` and parent/child handling.
- `ygl.camera` – `Camera` and `ProjectionType`: perspective or orthographic
  projection, `view_matrix`, `projection_matrix`, `view_projection_matrix`,
  movement (`move_forward`, `move_left`, …), `rotate_roll`,
  `process_mouse_movement` and `update`.
- `ygl.light` – `Light` and `LightType`; the direction is stored normalized.
- `ygl.material` – `Material` and `MaterialType`: albedo, roughness and
  metallic (clamped to `[0, 1]`), emission with strength, IOR, texture ids,
  and a Lambertian `sample` / uniform-hemisphere `pdf`.
- `ygl.mesh` – `Mesh` and `PrimitiveType`: positions, normals, texture
  coordinates, colours and indices, a cached `bounding_box`, and
  `vertex_layout`, `interleaved_vertex_data` and `draw_count` describing how
  the vertices would be packed and drawn.
- `ygl.scene` – `Scene`, a root node that keeps its meshes and lights as
  children, with a `background_color`.
- `ygl.loader` – `Loader` base class, `LoaderError`, `split_line` and
  `compute_normals` (smooth normals from indexed triangles).
- `ygl.obj_loader` – `parse_obj`, `load_obj` and `OBJLoader`.
- `ygl.md5_loader` – `parse_md5`, `load_md5`, `MD5Joint` and `MD5Loader`; the
  first sub-mesh is built in its bind pose.

## Example

```python
from ygl.camera import Camera
from ygl.obj_loader import parse_obj
from ygl.scene import Scene
from ygl.vectors import Vec3

camera = Camera(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
camera.fov = 60.0
view_projection = camera.view_projection_matrix

mesh = parse_obj([
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "f 1 2 3",
])
scene = Scene("demo")
scene.add_mesh(mesh)

print(mesh.bounding_box)   # BoundingBox(min=Vec3(0, 0, 0), max=Vec3(1, 1, 0))
print(mesh.normals)        # computed, since the data has no "vn" lines
```

`load_obj(path)` and `load_md5(path)` read a file; they, and the `load` and
`load_single` methods of `OBJLoader` and `MD5Loader`, raise
`ygl.loader.LoaderError` when the file cannot be read or its contents are
malformed (bad numbers, indices out of range, no mesh in MD5 data).

## What this package does not do

It does not draw anything. There is no window, no GPU upload and no
rasteriser or ray tracer: `Mesh` only reports its vertex layout, interleaved
vertex data and draw count, and texture ids on a `Material` are plain numbers.
It loads no images, writes no rendered output, and reads only OBJ geometry and
the bind pose of MD5 meshes (no materials files, no animations).

## Running the tests

```
pip install .[test]
pytest
```