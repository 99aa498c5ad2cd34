from meshkit.monkey_vertices_first import first_half_vertices


def test_vertex_count():
    assert len(first_half_vertices()) == 254


def test_first_vertex_matches_source():
    first = first_half_vertices()[0]
    assert first.position() == (-0.765625, -0.4375, 0.164062)
    assert first.color() == (0.0, 0.0, 0.0, 1.0)


def test_last_vertex_matches_source():
    last = first_half_vertices()[-1]
    assert last.position() == (-0.78125, -0.179688, 0.296875)
    assert last.color() == (0.499014, 0.499014, 0.499014, 1.0)


def test_all_vertices_opaque_grey():
    for vertex in first_half_vertices():
        assert vertex.a == 1.0
        assert vertex.r == vertex.g == vertex.b
        assert 0.0 <= vertex.r < 0.5


def test_uv_and_normal_default_to_zero():
    for vertex in first_half_vertices():
        assert (vertex.u, vertex.v, vertex.nx, vertex.ny, vertex.nz) == (0.0,) * 5


def test_repeated_vertices_share_position_and_colour():
    vertices = first_half_vertices()
    assert vertices[113] == vertices[14]
    assert vertices[114] == vertices[15]


def test_mesh_is_mirrored_across_y():
    vertices = first_half_vertices()
    positions = {vertex.position() for vertex in vertices}
    # The last vertex's mirror image belongs to the second half of the mesh.
    for vertex in vertices[:-1]:
        x, y, z = vertex.position()
        assert (x, -y, z) in positions


def test_mirror_pairs_are_adjacent():
    vertices = first_half_vertices()
    assert vertices[1].position() == (
        vertices[0].x,
        -vertices[0].y,
        vertices[0].z,
    )


def test_each_call_returns_independent_list():
    first = first_half_vertices()
    first[0].x = 42.0
    first.pop()
    second = first_half_vertices()
    assert len(second) == 254
    assert second[0].x == -0.765625