"""Building boundaries from vertex tables and querying them in bulk."""

from nanoshapes.construction.batch import count_inside, in_bounds_batch
from nanoshapes.construction.builder import (
    build_from_definition,
    build_polyhedron,
    build_sphere,
)
from nanoshapes.construction.normals import face_normal, newell_vector
from nanoshapes.construction.topology import derive_faces, hull_face_counts

__all__ = [
    "build_from_definition",
    "build_polyhedron",
    "build_sphere",
    "count_inside",
    "derive_faces",
    "face_normal",
    "hull_face_counts",
    "in_bounds_batch",
    "newell_vector",
]
