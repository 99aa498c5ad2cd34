"""Procedural generators for basic meshes: cube, sphere, cylinder and cones."""

from __future__ import annotations

import math

from meshkit.vertex import GeometryData, VertexSimple

_CUBE_CORNERS = (
    ((-1, -1, -1), (0.0, 0.0, 0.0)),
    ((-1, -1, 1), (0.0, 1.0, 0.0)),
    ((-1, 1, -1), (1.0, 0.0, 0.0)),
    ((-1, 1, 1), (1.0, 1.0, 0.0)),
    ((1, -1, -1), (0.0, 0.0, 1.0)),
    ((1, -1, 1), (0.0, 1.0, 1.0)),
    ((1, 1, -1), (1.0, 0.0, 1.0)),
    ((1, 1, 1), (1.0, 1.0, 1.0)),
)

_CUBE_INDICES = (
    0, 1, 2, 2, 1, 3,  # front
    4, 6, 5, 5, 6, 7,  # back
    0, 2, 4, 4, 2, 6,  # left
    1, 5, 3, 3, 5, 7,  # right
    2, 3, 6, 6, 3, 7,  # top
    0, 4, 1, 1, 4, 5,  # bottom
)


def _require(value: int, minimum: int, name: str) -> None:
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")


def _angle(slice_index: int, slice_count: int) -> float:
    return 2.0 * math.pi * slice_index / slice_count


def create_cube(size: float) -> GeometryData:
    """Return an axis-aligned cube of edge length size centred on the origin."""
    half = size / 2.0
    mesh = GeometryData()
    for (sx, sy, sz), (r, g, b) in _CUBE_CORNERS:
        mesh.append_vertex(VertexSimple(sx * half, sy * half, sz * half, r, g, b, 1.0))
    mesh.extend_indices(_CUBE_INDICES)
    return mesh


def create_sphere(radius: float, slice_count: int, stack_count: int) -> GeometryData:
    """Return a UV sphere with poles on the z axis."""
    _require(slice_count, 1, "slice_count")
    _require(stack_count, 2, "stack_count")
    mesh = GeometryData()
    mesh.append_vertex(VertexSimple(0.0, 0.0, radius, 1.0, 1.0, 1.0, 1.0))

    for stack in range(1, stack_count):
        phi = math.pi * stack / stack_count
        shade = stack / stack_count
        ring_radius = radius * math.sin(phi)
        z = radius * math.cos(phi)
        for slice_index in range(slice_count + 1):
            theta = _angle(slice_index, slice_count)
            mesh.append_vertex(
                VertexSimple(
                    ring_radius * math.sin(theta),
                    ring_radius * math.cos(theta),
                    z,
                    shade,
                    shade,
                    1.0 - shade,
                    1.0,
                )
            )

    bottom = mesh.append_vertex(VertexSimple(0.0, 0.0, -radius, 1.0, 1.0, 1.0, 1.0))

    for slice_index in range(slice_count):
        mesh.extend_indices((0, (slice_index + 1) % slice_count + 1, slice_index + 1))

    ring = slice_count + 1
    for stack in range(stack_count - 2):
        base = 1 + stack * ring
        for slice_index in range(slice_count):
            i = base + slice_index
            mesh.extend_indices((i, i + 1, i + ring, i + 1, i + ring + 1, i + ring))

    last_ring = bottom - ring
    for slice_index in range(slice_count):
        mesh.extend_indices((bottom, last_ring + slice_index, last_ring + slice_index + 1))
    return mesh


def create_cylinder(
    bottom_radius: float,
    top_radius: float,
    height: float,
    slice_count: int,
    stack_count: int,
) -> GeometryData:
    """Return a capped cylinder (or frustum) along the z axis, centred on the origin."""
    _require(slice_count, 1, "slice_count")
    _require(stack_count, 1, "stack_count")
    mesh = GeometryData()
    stack_height = height / stack_count
    radius_step = (top_radius - bottom_radius) / stack_count
    ring = slice_count + 1

    for stack in range(stack_count + 1):
        z = -0.5 * height + stack * stack_height
        r = bottom_radius + stack * radius_step
        shade = stack / stack_count
        for slice_index in range(ring):
            theta = _angle(slice_index, slice_count)
            mesh.append_vertex(
                VertexSimple(
                    r * math.sin(theta),
                    r * math.cos(theta),
                    z,
                    shade,
                    slice_index / slice_count,
                    1.0 - shade,
                    1.0,
                )
            )

    for stack in range(stack_count):
        for slice_index in range(slice_count):
            base = stack * ring + slice_index
            mesh.extend_indices(
                (base, base + ring, base + 1, base + 1, base + ring, base + ring + 1)
            )

    half = height / 2.0
    top_center = mesh.append_vertex(VertexSimple(0.0, 0.0, half, 1.0, 1.0, 1.0, 1.0))
    for slice_index in range(ring):
        theta = _angle(slice_index, slice_count)
        fraction = slice_index / slice_count
        mesh.append_vertex(
            VertexSimple(
                top_radius * math.sin(theta),
                top_radius * math.cos(theta),
                half,
                fraction,
                1.0 - fraction,
                0.0,
                1.0,
            )
        )
    for slice_index in range(slice_count):
        mesh.extend_indices(
            (
                top_center,
                top_center + (slice_index + 1) % slice_count + 1,
                top_center + slice_index + 1,
            )
        )

    bottom_center = mesh.append_vertex(VertexSimple(0.0, 0.0, -half, 1.0, 1.0, 1.0, 1.0))
    for slice_index in range(ring):
        theta = _angle(slice_index, slice_count)
        fraction = slice_index / slice_count
        mesh.append_vertex(
            VertexSimple(
                bottom_radius * math.sin(theta),
                bottom_radius * math.cos(theta),
                -half,
                fraction,
                0.0,
                1.0 - fraction,
                1.0,
            )
        )
    for slice_index in range(slice_count):
        mesh.extend_indices(
            (
                bottom_center,
                bottom_center + slice_index + 1,
                bottom_center + (slice_index + 1) % slice_count + 1,
            )
        )
    return mesh


def create_cone(
    bottom_radius: float, height: float, slice_count: int, stack_count: int
) -> GeometryData:
    """Return a capped cone along the z axis with its apex at z = height / 2."""
    _require(slice_count, 1, "slice_count")
    _require(stack_count, 1, "stack_count")
    mesh = GeometryData()
    half = height / 2.0
    ring = slice_count + 1

    mesh.append_vertex(VertexSimple(0.0, 0.0, -half, 1.0, 1.0, 1.0, 1.0))
    for slice_index in range(ring):
        theta = _angle(slice_index, slice_count)
        fraction = slice_index / slice_count
        mesh.append_vertex(
            VertexSimple(
                bottom_radius * math.sin(theta),
                bottom_radius * math.cos(theta),
                -half,
                fraction,
                0.0,
                1.0 - fraction,
                1.0,
            )
        )
    for slice_index in range(slice_count):
        mesh.extend_indices((0, slice_index + 1, (slice_index + 1) % slice_count + 1))

    top = mesh.append_vertex(VertexSimple(0.0, 0.0, half, 1.0, 1.0, 1.0, 1.0))
    for stack in range(stack_count + 1):
        shade = stack / stack_count
        z = -half + height * stack / stack_count
        r = bottom_radius * (1.0 - shade)
        for slice_index in range(ring):
            theta = _angle(slice_index, slice_count)
            mesh.append_vertex(
                VertexSimple(
                    r * math.sin(theta),
                    r * math.cos(theta),
                    z,
                    shade,
                    slice_index / slice_count,
                    1.0 - shade,
                    1.0,
                )
            )

    for stack in range(stack_count):
        for slice_index in range(slice_count):
            base = top + 1 + stack * ring + slice_index
            mesh.extend_indices((top, base + 1, base))
            if stack < stack_count - 1:
                mesh.extend_indices(
                    (base, base + 1, base + ring, base + 1, base + ring + 1, base + ring)
                )
    return mesh


def create_radial_cone(height: float, angle: float, slice_count: int) -> GeometryData:
    """Return an open yellow cone with its apex at the origin opening along +z.

    angle is the full opening angle in radians.
    """
    _require(slice_count, 1, "slice_count")
    radius = height * math.tan(angle * 0.5)
    color = (1.0, 1.0, 0.0, 1.0)
    mesh = GeometryData()
    apex = mesh.append_vertex(VertexSimple(0.0, 0.0, 0.0, *color))
    base_start = len(mesh.vertices)
    for slice_index in range(slice_count + 1):
        theta = _angle(slice_index, slice_count)
        mesh.append_vertex(
            VertexSimple(radius * math.sin(theta), radius * math.cos(theta), height, *color)
        )
    for slice_index in range(slice_count):
        mesh.extend_indices((apex, base_start + slice_index, base_start + slice_index + 1))
    return mesh