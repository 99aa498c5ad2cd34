"""Fixed mesh for the rotation gizmo: a flat ring lying in the xy plane."""

from __future__ import annotations

from meshkit.vertex import GeometryData, VertexSimple

_HALF_THICKNESS = 0.025

# Points on the ring's outer edge, radius 1, in steps of 11.25 degrees.
_OUTER_EDGE = (
    (1.000000, 0.000000),
    (0.980785, 0.195090),
    (0.923880, 0.382683),
    (0.831470, 0.555570),
    (0.707107, 0.707107),
    (0.555570, 0.831470),
    (0.382683, 0.923880),
    (0.195090, 0.980785),
    (0.000000, 1.000000),
    (-0.195090, 0.980785),
    (-0.382683, 0.923880),
    (-0.555570, 0.831470),
    (-0.707107, 0.707107),
    (-0.831470, 0.555570),
    (-0.923880, 0.382683),
    (-0.980785, 0.195090),
    (-1.000000, 0.000000),
    (-0.980785, -0.195090),
    (-0.923880, -0.382683),
    (-0.831470, -0.555570),
    (-0.707107, -0.707107),
    (-0.555570, -0.831470),
    (-0.382683, -0.923880),
    (-0.195090, -0.980785),
    (0.000000, -1.000000),
    (0.195090, -0.980785),
    (0.382683, -0.923880),
    (0.555570, -0.831470),
    (0.707107, -0.707107),
    (0.831470, -0.555570),
    (0.923880, -0.382683),
    (0.980785, -0.195090),
)

# Points on the ring's inner edge. The first two are swapped relative to the
# outer edge; the index buffer depends on that order.
_INNER_EDGE = (
    (0.819765, 0.163061),
    (0.835825, 0.000000),
    (0.772201, 0.319856),
    (0.694963, 0.464359),
    (0.591017, 0.591017),
    (0.464359, 0.694963),
    (0.319856, 0.772201),
    (0.163061, 0.819765),
    (0.000000, 0.835825),
    (-0.163061, 0.819765),
    (-0.319856, 0.772201),
    (-0.464359, 0.694963),
    (-0.591017, 0.591017),
    (-0.694963, 0.464359),
    (-0.772201, 0.319856),
    (-0.819765, 0.163061),
    (-0.835825, 0.000000),
    (-0.819765, -0.163061),
    (-0.772201, -0.319856),
    (-0.694963, -0.464359),
    (-0.591017, -0.591017),
    (-0.464359, -0.694963),
    (-0.319856, -0.772201),
    (-0.163061, -0.819765),
    (0.000000, -0.835825),
    (0.163061, -0.819765),
    (0.319856, -0.772201),
    (0.464359, -0.694963),
    (0.591017, -0.591017),
    (0.694963, -0.464359),
    (0.772201, -0.319856),
    (0.819765, -0.163061),
)

_TRIANGLES = (
    (97, 65, 96),
    (1, 33, 32),
    (2, 32, 34),
    (35, 2, 34),
    (4, 35, 36),
    (37, 4, 36),
    (6, 37, 38),
    (7, 38, 39),
    (40, 7, 39),
    (9, 40, 41),
    (10, 41, 42),
    (43, 10, 42),
    (12, 43, 44),
    (45, 12, 44),
    (14, 45, 46),
    (15, 46, 47),
    (48, 15, 47),
    (17, 48, 49),
    (18, 49, 50),
    (51, 18, 50),
    (20, 51, 52),
    (53, 20, 52),
    (22, 53, 54),
    (23, 54, 55),
    (56, 23, 55),
    (25, 56, 57),
    (26, 57, 58),
    (59, 26, 58),
    (28, 59, 60),
    (61, 28, 60),
    (30, 61, 62),
    (31, 62, 63),
    (33, 31, 63),
    (96, 66, 98),
    (99, 66, 67),
    (99, 68, 100),
    (101, 68, 69),
    (101, 70, 102),
    (102, 71, 103),
    (104, 71, 72),
    (104, 73, 105),
    (105, 74, 106),
    (107, 74, 75),
    (107, 76, 108),
    (109, 76, 77),
    (109, 78, 110),
    (110, 79, 111),
    (112, 79, 80),
    (112, 81, 113),
    (113, 82, 114),
    (115, 82, 83),
    (115, 84, 116),
    (117, 84, 85),
    (117, 86, 118),
    (118, 87, 119),
    (120, 87, 88),
    (120, 89, 121),
    (121, 90, 122),
    (123, 90, 91),
    (123, 92, 124),
    (125, 92, 93),
    (125, 94, 126),
    (126, 95, 127),
    (97, 95, 64),
    (28, 91, 27),
    (2, 65, 1),
    (39, 104, 40),
    (29, 92, 28),
    (3, 66, 2),
    (40, 105, 41),
    (30, 93, 29),
    (4, 67, 3),
    (41, 106, 42),
    (31, 94, 30),
    (5, 68, 4),
    (42, 107, 43),
    (0, 95, 31),
    (6, 69, 5),
    (43, 108, 44),
    (7, 70, 6),
    (44, 109, 45),
    (8, 71, 7),
    (45, 110, 46),
    (9, 72, 8),
    (46, 111, 47),
    (10, 73, 9),
    (47, 112, 48),
    (11, 74, 10),
    (48, 113, 49),
    (12, 75, 11),
    (49, 114, 50),
    (13, 76, 12),
    (50, 115, 51),
    (14, 77, 13),
    (51, 116, 52),
    (15, 78, 14),
    (52, 117, 53),
    (16, 79, 15),
    (53, 118, 54),
    (17, 80, 16),
    (54, 119, 55),
    (18, 81, 17),
    (55, 120, 56),
    (19, 82, 18),
    (56, 121, 57),
    (20, 83, 19),
    (57, 122, 58),
    (21, 84, 20),
    (58, 123, 59),
    (33, 96, 32),
    (22, 85, 21),
    (59, 124, 60),
    (32, 98, 34),
    (23, 86, 22),
    (60, 125, 61),
    (34, 99, 35),
    (24, 87, 23),
    (61, 126, 62),
    (35, 100, 36),
    (25, 88, 24),
    (62, 127, 63),
    (36, 101, 37),
    (26, 89, 25),
    (63, 97, 33),
    (37, 102, 38),
    (27, 90, 26),
    (1, 64, 0),
    (38, 103, 39),
    (97, 64, 65),
    (1, 0, 33),
    (2, 1, 32),
    (35, 3, 2),
    (4, 3, 35),
    (37, 5, 4),
    (6, 5, 37),
    (7, 6, 38),
    (40, 8, 7),
    (9, 8, 40),
    (10, 9, 41),
    (43, 11, 10),
    (12, 11, 43),
    (45, 13, 12),
    (14, 13, 45),
    (15, 14, 46),
    (48, 16, 15),
    (17, 16, 48),
    (18, 17, 49),
    (51, 19, 18),
    (20, 19, 51),
    (53, 21, 20),
    (22, 21, 53),
    (23, 22, 54),
    (56, 24, 23),
    (25, 24, 56),
    (26, 25, 57),
    (59, 27, 26),
    (28, 27, 59),
    (61, 29, 28),
    (30, 29, 61),
    (31, 30, 62),
    (33, 0, 31),
    (96, 65, 66),
    (99, 98, 66),
    (99, 67, 68),
    (101, 100, 68),
    (101, 69, 70),
    (102, 70, 71),
    (104, 103, 71),
    (104, 72, 73),
    (105, 73, 74),
    (107, 106, 74),
    (107, 75, 76),
    (109, 108, 76),
    (109, 77, 78),
    (110, 78, 79),
    (112, 111, 79),
    (112, 80, 81),
    (113, 81, 82),
    (115, 114, 82),
    (115, 83, 84),
    (117, 116, 84),
    (117, 85, 86),
    (118, 86, 87),
    (120, 119, 87),
    (120, 88, 89),
    (121, 89, 90),
    (123, 122, 90),
    (123, 91, 92),
    (125, 124, 92),
    (125, 93, 94),
    (126, 94, 95),
    (97, 127, 95),
    (28, 92, 91),
    (2, 66, 65),
    (39, 103, 104),
    (29, 93, 92),
    (3, 67, 66),
    (40, 104, 105),
    (30, 94, 93),
    (4, 68, 67),
    (41, 105, 106),
    (31, 95, 94),
    (5, 69, 68),
    (42, 106, 107),
    (0, 64, 95),
    (6, 70, 69),
    (43, 107, 108),
    (7, 71, 70),
    (44, 108, 109),
    (8, 72, 71),
    (45, 109, 110),
    (9, 73, 72),
    (46, 110, 111),
    (10, 74, 73),
    (47, 111, 112),
    (11, 75, 74),
    (48, 112, 113),
    (12, 76, 75),
    (49, 113, 114),
    (13, 77, 76),
    (50, 114, 115),
    (14, 78, 77),
    (51, 115, 116),
    (15, 79, 78),
    (52, 116, 117),
    (16, 80, 79),
    (53, 117, 118),
    (17, 81, 80),
    (54, 118, 119),
    (18, 82, 81),
    (55, 119, 120),
    (19, 83, 82),
    (56, 120, 121),
    (20, 84, 83),
    (57, 121, 122),
    (21, 85, 84),
    (58, 122, 123),
    (33, 97, 96),
    (22, 86, 85),
    (59, 123, 124),
    (32, 96, 98),
    (23, 87, 86),
    (60, 124, 125),
    (34, 98, 99),
    (24, 88, 87),
    (61, 125, 126),
    (35, 99, 100),
    (25, 89, 88),
    (62, 126, 127),
    (36, 100, 101),
    (26, 90, 89),
    (63, 127, 97),
    (37, 101, 102),
    (27, 91, 90),
    (1, 65, 64),
    (38, 102, 103),
)


def gizmo_rotation() -> GeometryData:
    """Return the rotation gizmo: a white ring of unit outer radius around +z.

    Vertices 0-63 lie on the lower face (outer edge, then inner edge) and
    64-127 repeat them on the upper face.
    """
    mesh = GeometryData()
    for z in (-_HALF_THICKNESS, _HALF_THICKNESS):
        for x, y in _OUTER_EDGE + _INNER_EDGE:
            mesh.append_vertex(VertexSimple(x, y, z, 1.0, 1.0, 1.0, 1.0))
    for triangle in _TRIANGLES:
        mesh.extend_indices(triangle)
    return mesh