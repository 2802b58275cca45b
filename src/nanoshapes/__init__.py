"""nanoshapes: exact containment tests for nanoparticle shapes.

A shape is built once, at a chosen radius and decimal precision, from a
catalog of Platonic, Archimedean, Catalan, Johnson and prismatic solids
(or a sphere).  The result answers ``in_bounds(point)`` for the lattice
points of a crystal, inclusive of the surface.

Example usage::

    from nanoshapes import build_shape, in_bounds_batch

    cube = build_shape("cube", radius="1", precision=50)
    cube.in_bounds(("0.99", "0", "0"))   # True
    in_bounds_batch(cube, points)        # numpy bool array
"""

import logging

from nanoshapes.catalog import available_shapes, build_shape, get_shape
from nanoshapes.construction import (
    build_from_definition,
    build_polyhedron,
    build_sphere,
    count_inside,
    derive_faces,
    face_normal,
    in_bounds_batch,
    newell_vector,
)
from nanoshapes.expressions import evaluate, evaluate_vector
from nanoshapes.model import (
    BuildOptions,
    DegenerateGeometryError,
    ExpressionError,
    Face,
    GeometryError,
    InsufficientPrecisionError,
    MalformedPolyhedronError,
    Polyhedron,
    ShapeDefinition,
    Sphere,
    UnknownShapeError,
    Vector3,
    cross,
    dot,
    in_bounds,
    normalize,
    scale,
    subtract,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BuildOptions",
    "DegenerateGeometryError",
    "ExpressionError",
    "Face",
    "GeometryError",
    "InsufficientPrecisionError",
    "MalformedPolyhedronError",
    "Polyhedron",
    "ShapeDefinition",
    "Sphere",
    "UnknownShapeError",
    "Vector3",
    "available_shapes",
    "build_from_definition",
    "build_polyhedron",
    "build_shape",
    "build_sphere",
    "count_inside",
    "cross",
    "derive_faces",
    "dot",
    "evaluate",
    "evaluate_vector",
    "face_normal",
    "get_shape",
    "in_bounds",
    "in_bounds_batch",
    "newell_vector",
    "normalize",
    "scale",
    "subtract",
]
