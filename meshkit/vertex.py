"""Vertex records, geometry containers and the enumerations used with them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

Vector3 = tuple[float, float, float]
Vector4 = tuple[float, float, float, float]

WHITE: Vector4 = (1.0, 1.0, 1.0, 1.0)


@dataclass
class VertexSimple:
    """A mesh vertex: position, RGBA colour, texture UV and normal."""

    x: float
    y: float
    z: float
    r: float
    g: float
    b: float
    a: float
    u: float = 0.0
    v: float = 0.0
    nx: float = 0.0
    ny: float = 0.0
    nz: float = 0.0

    def position(self) -> Vector3:
        """Return the position as an (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def color(self) -> Vector4:
        """Return the colour as an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)


@dataclass
class LineVertexSimple:
    """A line vertex: position and RGBA colour, white at the origin by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @classmethod
    def from_vectors(
        cls, position: Sequence[float] = (0.0, 0.0, 0.0), color: Sequence[float] = WHITE
    ) -> LineVertexSimple:
        """Build a line vertex from a 3-component position and a 4-component colour."""
        if len(position) != 3:
            raise ValueError(f"position needs 3 components, got {len(position)}")
        if len(color) != 4:
            raise ValueError(f"color needs 4 components, got {len(color)}")
        x, y, z = position
        r, g, b, a = color
        return cls(x, y, z, r, g, b, a)


@dataclass
class GeometryData:
    """Vertices plus a triangle-list index buffer."""

    vertices: list[VertexSimple] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def append_vertex(self, vertex: VertexSimple) -> int:
        """Add a vertex and return its index."""
        self.vertices.append(vertex)
        return len(self.vertices) - 1

    def extend_indices(self, indices: Iterable[int]) -> None:
        """Append indices to the index buffer."""
        self.indices.extend(indices)

    def triangles(self) -> list[tuple[int, int, int]]:
        """Return the index buffer grouped into triangles."""
        if len(self.indices) % 3:
            raise ValueError(
                f"index count {len(self.indices)} is not a multiple of three"
            )
        it = iter(self.indices)
        return list(zip(it, it, it))

    def bounds(self) -> tuple[Vector3, Vector3]:
        """Return the (minimum, maximum) corners of the vertices' bounding box."""
        if not self.vertices:
            raise ValueError("bounds of an empty geometry are undefined")
        positions = [vertex.position() for vertex in self.vertices]
        low = tuple(min(axis) for axis in zip(*positions))
        high = tuple(max(axis) for axis in zip(*positions))
        return low, high  # type: ignore[return-value]


class PrimitiveType(IntEnum):
    """Kinds of primitive that a scene can hold."""

    NONE = 0
    LINE = 1
    TRIANGLE = 2
    QUAD = 3
    CUBE = 4
    SPHERE = 5
    CYLINDER = 6
    CONE = 7
    PLANE = 8
    GIZMO = 9
    MAX = 10


class ShaderType(IntEnum):
    """Pipeline stages a shader can belong to."""

    NONE = 0
    VERTEX = 1
    HULL = 2
    TESSELLATOR = 3
    DOMAIN = 4
    GEOMETRY = 5
    PIXEL = 6
    COMPUTE = 7
    MAX = 8


@dataclass
class GlyphInfo:
    """Placement of one glyph inside a font atlas."""

    u: float
    v: float
    width: float
    height: float
    offset_x: float
    offset_y: float