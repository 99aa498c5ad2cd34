import pytest

from meshkit.vertex import GeometryData, LineVertexSimple, VertexSimple


def _vertex(x, y, z):
    return VertexSimple(x, y, z, 1.0, 1.0, 1.0, 1.0)


def test_vertex_defaults_for_uv_and_normal():
    vertex = VertexSimple(1.0, 2.0, 3.0, 0.1, 0.2, 0.3, 0.4)
    assert (vertex.u, vertex.v, vertex.nx, vertex.ny, vertex.nz) == (0.0,) * 5


def test_vertex_position_and_color():
    vertex = VertexSimple(1.0, 2.0, 3.0, 0.1, 0.2, 0.3, 0.4)
    assert vertex.position() == (1.0, 2.0, 3.0)
    assert vertex.color() == (0.1, 0.2, 0.3, 0.4)


def test_line_vertex_default_is_white_origin():
    line = LineVertexSimple()
    assert (line.x, line.y, line.z) == (0.0, 0.0, 0.0)
    assert (line.r, line.g, line.b, line.a) == (1.0, 1.0, 1.0, 1.0)


def test_line_vertex_from_vectors():
    line = LineVertexSimple.from_vectors((4.0, 5.0, 6.0), (0.5, 0.25, 0.75, 1.0))
    assert (line.x, line.y, line.z) == (4.0, 5.0, 6.0)
    assert (line.r, line.g, line.b, line.a) == (0.5, 0.25, 0.75, 1.0)


def test_line_vertex_from_vectors_rejects_bad_lengths():
    with pytest.raises(ValueError):
        LineVertexSimple.from_vectors((1.0, 2.0), (1.0, 1.0, 1.0, 1.0))
    with pytest.raises(ValueError):
        LineVertexSimple.from_vectors((1.0, 2.0, 3.0), (1.0, 1.0, 1.0))


def test_append_vertex_returns_consecutive_indices():
    mesh = GeometryData()
    indices = [mesh.append_vertex(_vertex(i, 0.0, 0.0)) for i in range(4)]
    assert indices == [0, 1, 2, 3]
    assert len(mesh.vertices) == 4


def test_triangles_groups_indices():
    mesh = GeometryData()
    mesh.extend_indices([0, 1, 2])
    mesh.extend_indices([2, 1, 3])
    assert mesh.triangles() == [(0, 1, 2), (2, 1, 3)]


def test_triangles_rejects_partial_triangle():
    mesh = GeometryData(indices=[0, 1, 2, 3])
    with pytest.raises(ValueError):
        mesh.triangles()


def test_bounds_cover_all_vertices():
    mesh = GeometryData()
    mesh.append_vertex(_vertex(-1.0, 5.0, 2.0))
    mesh.append_vertex(_vertex(3.0, -2.0, 0.5))
    mesh.append_vertex(_vertex(0.0, 0.0, -4.0))
    assert mesh.bounds() == ((-1.0, -2.0, -4.0), (3.0, 5.0, 2.0))


def test_bounds_of_empty_geometry_raise():
    with pytest.raises(ValueError):
        GeometryData().bounds()


def test_geometry_instances_do_not_share_lists():
    first = GeometryData()
    second = GeometryData()
    first.append_vertex(_vertex(1.0, 1.0, 1.0))
    first.extend_indices([0])
    assert second.vertices == []
    assert second.indices == []