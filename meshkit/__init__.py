"""Procedural primitive meshes and the built-in rotation gizmo and monkey head meshes."""

__version__ = "0.1.0"
__all__ = [
    "geometry",
    "gizmo_rotation",
    "monkey",
    "monkey_vertices_first",
    "monkey_vertices_second",
    "vertex",
]