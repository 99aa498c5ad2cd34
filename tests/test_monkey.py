import pytest

from meshkit.monkey import monkey, monkey_indices
from meshkit.monkey_vertices_first import first_half_vertices
from meshkit.monkey_vertices_second import second_half_vertices


def test_index_count_matches_declared_size():
    assert len(monkey_indices()) == 2901


def test_vertex_count_matches_declared_size():
    assert len(monkey().vertices) == 507


def test_indices_are_in_range():
    mesh = monkey()
    count = len(mesh.vertices)
    assert all(0 <= index < count for index in mesh.indices)


def test_indices_form_whole_triangles():
    triangles = monkey().triangles()
    assert len(triangles) * 3 == len(monkey_indices())


def test_first_and_last_triangles():
    triangles = monkey().triangles()
    assert triangles[0] == (46, 2, 44)
    assert triangles[-1] == (504, 322, 320)


def test_index_list_is_a_fresh_copy():
    indices = monkey_indices()
    indices.clear()
    assert len(monkey_indices()) == 2901


def test_meshes_are_independent():
    first = monkey()
    first.indices.append(0)
    first.vertices.pop()
    second = monkey()
    assert len(second.indices) == 2901
    assert len(second.vertices) == 507


def test_vertices_are_the_two_halves_in_order():
    mesh = monkey()
    first = first_half_vertices()
    second = second_half_vertices()
    assert mesh.vertices[: len(first)] == first
    assert mesh.vertices[len(first):] == second


def test_first_vertex_position():
    assert monkey().vertices[0].position() == pytest.approx((-0.765625, -0.4375, 0.164062))


def test_vertices_are_opaque_grey():
    for vertex in monkey().vertices:
        r, g, b, a = vertex.color()
        assert r == g == b
        assert a == 1.0


def test_bounds_are_symmetric_in_y():
    low, high = monkey().bounds()
    assert low[1] == pytest.approx(-high[1])
    assert high[1] == pytest.approx(1.367188)


def test_every_triangle_has_distinct_corners():
    for triangle in monkey().triangles():
        assert len(set(triangle)) == 3