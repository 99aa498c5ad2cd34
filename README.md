# meshkit

Vertex and index data for simple 3D meshes, as plain Python objects that you
can inspect or copy into a GPU vertex or index buffer. It has no dependencies
outside the standard library.

## Modules

- `meshkit.vertex`: the vertex types and the mesh container.
  - `VertexSimple` holds a position (`x`, `y`, `z`), an RGBA colour
    (`r`, `g`, `b`, `a`), a texture UV (`u`, `v`) and a normal
    (`nx`, `ny`, `nz`). UV and normal default to zero. `position()` and
    `color()` return them as tuples.
  - `LineVertexSimple` holds a position and a colour. By default it is white
    at the origin. `LineVertexSimple.from_vectors(position, color)` builds one
    from a 3-item and a 4-item sequence, and raises `ValueError` if the
    lengths are wrong.
  - `GeometryData` holds `vertices` and a triangle-list `indices` buffer.
    - `append_vertex(vertex)` adds a vertex and returns its index.
    - `extend_indices(indices)` appends indices to the buffer.
    - `triangles()` returns the indices as 3-tuples. It raises `ValueError`
      if the count is not a multiple of three.
    - `bounds()` returns the `(min, max)` corners of the bounding box. It
      raises `ValueError` when there are no vertices.
  - `PrimitiveType` and `ShaderType` are integer enumerations of primitive
    kinds and pipeline stages. `GlyphInfo` records where a glyph sits in a
    font atlas.
- `meshkit.geometry`: generators that each return a `GeometryData`.
  - `create_cube(size)`: an axis-aligned cube centred on the origin, with
    8 coloured corners and 12 triangles.
  - `create_sphere(radius, slice_count, stack_count)`: a UV sphere with its
    poles on the z axis.
  - `create_cylinder(bottom_radius, top_radius, height, slice_count, stack_count)`:
    a capped cylinder or frustum along z, centred on the origin.
  - `create_cone(bottom_radius, height, slice_count, stack_count)`: a capped
    cone with its apex at `z = height / 2`.
  - `create_radial_cone(height, angle, slice_count)`: an open yellow cone.
    Its apex is at the origin, it opens along +z, and `angle` is the full
    opening angle in radians.

  A `slice_count` below 1 raises `ValueError`. So does a `stack_count` below
  2 for the sphere, or below 1 for the cylinder and cones.
- `meshkit.gizmo_rotation`: `gizmo_rotation()` returns the rotation gizmo.
  It is a flat white ring in the xy plane, with outer radius 1, 128 vertices
  and 256 triangles.
- `meshkit.monkey`: `monkey()` returns the monkey head test mesh, with 507
  grey vertices and 967 triangles. `monkey_indices()` returns a copy of its
  index buffer.
- `meshkit.monkey_vertices_first` and `meshkit.monkey_vertices_second`:
  `first_half_vertices()` and `second_half_vertices()` return fresh lists of
  the monkey vertices 0–253 and 254–506.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from meshkit.geometry import create_sphere
from meshkit.monkey import monkey

sphere = create_sphere(1, 16, 8)
print(len(sphere.vertices), len(sphere.indices))
for a, b, c in sphere.triangles():
    ...

head = monkey()
low, high = head.bounds()
```

## What it does not do

meshkit only produces mesh data. It does not render anything. It creates no
GPU buffers, shaders or render states, and it does not load or save mesh
files. Of the editor gizmos it includes only the rotation ring. There is no
arrow mesh for translation and no scale mesh. It has no registry for looking
up meshes or other resources by name.