"""Immutable convex polyhedra and the half-space containment test."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import cached_property

import mpmath
import numpy as np

from nanoshapes.model.errors import MalformedPolyhedronError
from nanoshapes.model.vector import Scalar, Vector3, context_for


@dataclass(frozen=True)
class Face:
    """One planar boundary polygon of a polyhedron.

    Attributes:
        indices: Vertex indices into the owning polyhedron's
            ``vertices``, in loop order.
        vertices: The vertex positions, in the same order.
        normal: Outward unit normal.
        offset: Signed distance of the face plane from the origin,
            ``dot(normal, anchor)``.  Positive for every face of a
            solid that contains the origin.
    """

    indices: tuple[int, ...]
    vertices: tuple[Vector3, ...]
    normal: Vector3
    offset: Scalar

    @property
    def anchor(self) -> Vector3:
        """The representative vertex used for the plane test."""
        return self.vertices[0]

    @property
    def arity(self) -> int:
        return len(self.indices)

    def signed_distance(self, point: Vector3) -> Scalar:
        """Return ``dot(normal, point - anchor)``; positive is outside."""
        return self.normal.dot(point) - self.offset


@dataclass(frozen=True)
class Polyhedron:
    """A convex solid bounded by planar faces, centred on the origin.

    Instances are produced by
    :func:`~nanoshapes.construction.builder.build_polyhedron` and are
    immutable, so a single instance may be queried from many threads.

    Attributes:
        vertices: Scaled vertex positions, each at distance
            *circumradius* from the origin.
        faces: All faces in one flat tuple, whatever their arity.
        radius: The radius the caller asked for.
        circumradius: Distance of every vertex from the origin.  Equal
            to *radius* except for shapes whose radius means something
            else (the cube's half-extent).
        precision: Requested decimal precision.
        working_digits: Digits actually carried in arithmetic
            (precision plus guard digits).
        tolerance: Points at most this far outside a face plane are
            still inside.  Absorbs the rounding of irrational
            coordinates so that vertices and edge points test inside.
        name: Catalog name, or ``None`` for ad hoc solids.
    """

    vertices: tuple[Vector3, ...]
    faces: tuple[Face, ...]
    radius: Scalar
    circumradius: Scalar
    precision: int
    working_digits: int
    tolerance: Scalar
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.faces:
            raise MalformedPolyhedronError("a polyhedron needs at least one face")
        if self.working_digits < self.precision:
            raise ValueError(
                f"working_digits ({self.working_digits}) must be >= "
                f"precision ({self.precision})"
            )

    @property
    def context(self) -> mpmath.MPContext:
        """The mpmath context all of this solid's scalars belong to."""
        return context_for(self.working_digits)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    def face_arities(self) -> dict[int, int]:
        """Return ``{arity: count}`` over all faces, e.g. ``{3: 8, 4: 6}``."""
        return dict(sorted(Counter(f.arity for f in self.faces).items()))

    def in_bounds(self, point) -> bool:
        """Test whether *point* lies inside or on the boundary.

        Faces are tested in turn and the first one with the point
        strictly outside its plane (beyond :attr:`tolerance`) ends the
        test.

        Args:
            point: A :class:`Vector3`, or three numbers or decimal
                strings.  Floats are taken at their exact binary value.

        Returns:
            ``True`` if the point is inside or on the surface.
            Non-finite points are never inside.
        """
        p = Vector3.from_values(point, self.context)
        if not p.is_finite():
            return False
        tolerance = self.tolerance
        for face in self.faces:
            if face.normal.dot(p) - face.offset > tolerance:
                return False
        return True

    def vertex_array(self) -> np.ndarray:
        """Vertices as a float64 array of shape ``(n_vertices, 3)``."""
        return np.array([v.to_array() for v in self.vertices])

    @cached_property
    def _float_planes(self) -> tuple[np.ndarray, np.ndarray]:
        normals = np.array([f.normal.to_array() for f in self.faces])
        offsets = np.array([float(f.offset) for f in self.faces])
        return normals, offsets

    def float_distances(self, points: np.ndarray) -> np.ndarray:
        """Signed float64 distances of *points* from every face plane.

        Args:
            points: Array of shape ``(n, 3)``.

        Returns:
            Array of shape ``(n, n_faces)``; positive entries are
            outside the corresponding face.
        """
        normals, offsets = self._float_planes
        return np.asarray(points, dtype=float) @ normals.T - offsets


def in_bounds(boundary, point) -> bool:
    """Return whether *point* is inside *boundary* (surface included).

    *boundary* is a :class:`Polyhedron` or a
    :class:`~nanoshapes.model.sphere.Sphere`.
    """
    return boundary.in_bounds(point)
