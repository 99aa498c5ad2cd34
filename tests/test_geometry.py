import math

import pytest

from meshkit.geometry import (
    create_cone,
    create_cube,
    create_cylinder,
    create_radial_cone,
    create_sphere,
)


def _assert_valid(mesh):
    triangles = mesh.triangles()
    assert triangles
    count = len(mesh.vertices)
    assert all(0 <= i < count for tri in triangles for i in tri)


def _radius(vertex):
    return math.hypot(vertex.x, vertex.y)


def test_cube_corners_and_indices():
    mesh = create_cube(2.0)
    _assert_valid(mesh)
    corners = {vertex.position() for vertex in mesh.vertices}
    expected = {(x, y, z) for x in (-1.0, 1.0) for y in (-1.0, 1.0) for z in (-1.0, 1.0)}
    assert corners == expected
    assert len(mesh.indices) == 36
    assert set(mesh.indices) == set(range(8))


def test_cube_vertex_colours_follow_source_order():
    mesh = create_cube(1.0)
    assert mesh.vertices[0].color() == (0.0, 0.0, 0.0, 1.0)
    assert mesh.vertices[7].color() == (1.0, 1.0, 1.0, 1.0)


def test_cube_bounds_scale_with_size():
    low, high = create_cube(3.0).bounds()
    assert low == (-1.5, -1.5, -1.5)
    assert high == (1.5, 1.5, 1.5)


def test_sphere_vertices_lie_on_surface():
    mesh = create_sphere(2, 8, 4)
    _assert_valid(mesh)
    for vertex in mesh.vertices:
        distance = math.sqrt(vertex.x ** 2 + vertex.y ** 2 + vertex.z ** 2)
        assert distance == pytest.approx(2.0)


def test_sphere_poles():
    mesh = create_sphere(3, 6, 5)
    assert mesh.vertices[0].position() == (0.0, 0.0, 3.0)
    assert mesh.vertices[-1].position() == (0.0, 0.0, -3.0)
    top_fan = mesh.triangles()[:6]
    assert all(tri[0] == 0 for tri in top_fan)
    bottom_fan = mesh.triangles()[-6:]
    assert all(tri[0] == len(mesh.vertices) - 1 for tri in bottom_fan)


def test_sphere_rejects_bad_counts():
    with pytest.raises(ValueError):
        create_sphere(1, 8, 1)
    with pytest.raises(ValueError):
        create_sphere(1, 0, 4)


def test_cylinder_heights_and_radii():
    mesh = create_cylinder(1.0, 0.5, 4.0, 12, 3)
    _assert_valid(mesh)
    low, high = mesh.bounds()
    assert low[2] == pytest.approx(-2.0)
    assert high[2] == pytest.approx(2.0)
    for vertex in mesh.vertices:
        if vertex.z == pytest.approx(-2.0) and _radius(vertex) > 0:
            assert _radius(vertex) == pytest.approx(1.0)
        if vertex.z == pytest.approx(2.0) and _radius(vertex) > 0:
            assert _radius(vertex) == pytest.approx(0.5)


def test_cylinder_cap_centres():
    mesh = create_cylinder(1.0, 1.0, 2.0, 8, 2)
    centres = [v.position() for v in mesh.vertices if _radius(v) == 0.0]
    assert centres == [(0.0, 0.0, 1.0), (0.0, 0.0, -1.0)]


def test_cylinder_rejects_bad_counts():
    with pytest.raises(ValueError):
        create_cylinder(1.0, 1.0, 1.0, 0, 2)
    with pytest.raises(ValueError):
        create_cylinder(1.0, 1.0, 1.0, 8, 0)


def test_cone_apex_and_base():
    mesh = create_cone(1.5, 2.0, 10, 4)
    _assert_valid(mesh)
    assert mesh.vertices[0].position() == (0.0, 0.0, -1.0)
    assert (0.0, 0.0, 1.0) in [v.position() for v in mesh.vertices]
    for vertex in mesh.vertices:
        assert _radius(vertex) <= 1.5 + 1e-9
        assert -1.0 - 1e-9 <= vertex.z <= 1.0 + 1e-9


def test_cone_radius_shrinks_towards_apex():
    mesh = create_cone(2.0, 4.0, 6, 4)
    for vertex in mesh.vertices:
        expected = 2.0 * (1.0 - (vertex.z + 2.0) / 4.0)
        if _radius(vertex) > 1e-9:
            assert _radius(vertex) == pytest.approx(expected)


def test_cone_rejects_bad_counts():
    with pytest.raises(ValueError):
        create_cone(1.0, 1.0, 8, 0)


def test_radial_cone_shape_and_colour():
    mesh = create_radial_cone(2.0, math.pi / 2, 16)
    _assert_valid(mesh)
    assert mesh.vertices[0].position() == (0.0, 0.0, 0.0)
    assert all(v.color() == (1.0, 1.0, 0.0, 1.0) for v in mesh.vertices)
    for vertex in mesh.vertices[1:]:
        assert vertex.z == 2.0
        assert _radius(vertex) == pytest.approx(2.0 * math.tan(math.pi / 4))
    assert all(tri[0] == 0 for tri in mesh.triangles())
    assert len(mesh.triangles()) == 16


def test_radial_cone_rejects_zero_slices():
    with pytest.raises(ValueError):
        create_radial_cone(1.0, 1.0, 0)