import math

import pytest

from meshkit.gizmo_rotation import gizmo_rotation


@pytest.fixture
def mesh():
    return gizmo_rotation()


def test_counts_match_source_arrays(mesh):
    assert len(mesh.vertices) == 128
    assert len(mesh.indices) == 768
    assert len(mesh.triangles()) == 256


def test_indices_in_range(mesh):
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)


def test_every_vertex_is_referenced(mesh):
    assert set(mesh.indices) == set(range(len(mesh.vertices)))


def test_no_degenerate_triangles(mesh):
    assert all(len(set(tri)) == 3 for tri in mesh.triangles())


def test_first_and_last_triangles(mesh):
    triangles = mesh.triangles()
    assert triangles[0] == (97, 65, 96)
    assert triangles[-1] == (38, 102, 103)


def test_first_vertex(mesh):
    assert mesh.vertices[0].position() == pytest.approx((1.0, 0.0, -0.025))


def test_inner_edge_order(mesh):
    assert mesh.vertices[32].position() == pytest.approx((0.819765, 0.163061, -0.025))
    assert mesh.vertices[33].position() == pytest.approx((0.835825, 0.0, -0.025))


def test_faces_have_fixed_z(mesh):
    assert all(v.z == pytest.approx(-0.025) for v in mesh.vertices[:64])
    assert all(v.z == pytest.approx(0.025) for v in mesh.vertices[64:])


def test_upper_face_mirrors_lower_face(mesh):
    for lower, upper in zip(mesh.vertices[:64], mesh.vertices[64:]):
        assert (upper.x, upper.y) == (lower.x, lower.y)
        assert upper.z == -lower.z


def test_edge_radii(mesh):
    for face in (0, 64):
        outer = mesh.vertices[face:face + 32]
        inner = mesh.vertices[face + 32:face + 64]
        assert all(math.hypot(v.x, v.y) == pytest.approx(1.0, abs=1e-5) for v in outer)
        assert all(
            math.hypot(v.x, v.y) == pytest.approx(0.835825, abs=1e-5) for v in inner
        )


def test_all_white(mesh):
    assert all(v.color() == (1.0, 1.0, 1.0, 1.0) for v in mesh.vertices)


def test_bounds(mesh):
    low, high = mesh.bounds()
    assert low == pytest.approx((-1.0, -1.0, -0.025))
    assert high == pytest.approx((1.0, 1.0, 0.025))


def test_each_call_returns_independent_mesh():
    first = gizmo_rotation()
    first.vertices[0].x = 42.0
    first.indices.clear()
    second = gizmo_rotation()
    assert second.vertices[0].x == 1.0
    assert len(second.indices) == 768