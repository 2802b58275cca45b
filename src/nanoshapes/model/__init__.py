"""Core data model for nanoshapes: scalars, vectors, boundaries and errors.

Everything is re-exported here so that ``from nanoshapes.model import
Polyhedron`` works without knowing the submodule layout.
"""

from nanoshapes.model.errors import (
    DegenerateGeometryError,
    ExpressionError,
    GeometryError,
    InsufficientPrecisionError,
    MalformedPolyhedronError,
    UnknownShapeError,
)
from nanoshapes.model.options import BuildOptions
from nanoshapes.model.polyhedron import Face, Polyhedron, in_bounds
from nanoshapes.model.shape_definition import ShapeDefinition
from nanoshapes.model.sphere import Sphere
from nanoshapes.model.vector import (
    Scalar,
    Vector3,
    context_for,
    cross,
    dot,
    normalize,
    scale,
    subtract,
    to_scalar,
)

__all__ = [
    "BuildOptions",
    "DegenerateGeometryError",
    "ExpressionError",
    "Face",
    "GeometryError",
    "InsufficientPrecisionError",
    "MalformedPolyhedronError",
    "Polyhedron",
    "Scalar",
    "ShapeDefinition",
    "Sphere",
    "UnknownShapeError",
    "Vector3",
    "context_for",
    "cross",
    "dot",
    "in_bounds",
    "normalize",
    "scale",
    "subtract",
    "to_scalar",
]
