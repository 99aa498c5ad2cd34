from collections import Counter

import pytest

from meshkit.monkey_vertices_first import first_half_vertices
from meshkit.monkey_vertices_second import second_half_vertices


def test_count_completes_the_mesh():
    assert len(second_half_vertices()) == 253
    assert len(first_half_vertices()) + len(second_half_vertices()) == 507


def test_first_vertex_matches_source():
    first = second_half_vertices()[0]
    assert first.position() == pytest.approx((-0.781250, 0.179688, 0.296875))
    assert first.color() == pytest.approx((0.500986, 0.500986, 0.500986, 1.0))


def test_last_vertex_matches_source():
    last = second_half_vertices()[-1]
    assert last.position() == pytest.approx((0.382812, 0.859375, 0.382812))
    assert last.color() == pytest.approx((0.998028, 0.998028, 0.998028, 1.0))


def test_every_vertex_is_opaque_grey():
    for vertex in second_half_vertices():
        assert vertex.a == 1.0
        assert vertex.r == vertex.g == vertex.b
        assert 0.0 <= vertex.r <= 1.0


def test_grey_levels_strictly_increase():
    shades = [vertex.r for vertex in second_half_vertices()]
    assert all(a < b for a, b in zip(shades, shades[1:]))


def test_grey_levels_continue_from_first_half():
    assert first_half_vertices()[-1].r < second_half_vertices()[0].r


def test_whole_head_is_mirror_symmetric_in_y():
    positions = Counter(
        (round(v.x, 6), round(v.y, 6), round(v.z, 6))
        for v in first_half_vertices() + second_half_vertices()
    )
    mirrored = Counter(
        (x, round(-y, 6) + 0.0, z) for (x, y, z), n in positions.items() for _ in range(n)
    )
    normalised = Counter(
        (x, y + 0.0, z) for (x, y, z), n in positions.items() for _ in range(n)
    )
    assert mirrored == normalised


def test_first_vertex_mirrors_last_of_first_half():
    left = first_half_vertices()[-1]
    right = second_half_vertices()[0]
    assert (right.x, -right.y, right.z) == pytest.approx(left.position())


def test_returns_fresh_list_each_call():
    vertices = second_half_vertices()
    vertices[0].x = 42.0
    vertices.clear()
    again = second_half_vertices()
    assert len(again) == 253
    assert again[0].x == pytest.approx(-0.781250)


def test_uv_and_normals_default_to_zero():
    for vertex in second_half_vertices():
        assert (vertex.u, vertex.v) == (0.0, 0.0)
        assert (vertex.nx, vertex.ny, vertex.nz) == (0.0, 0.0, 0.0)