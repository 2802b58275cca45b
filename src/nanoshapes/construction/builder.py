"""Construction and validation of polyhedra from vertex and face tables."""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from decimal import Decimal
from fractions import Fraction

from nanoshapes._constants import GUARD_DIGITS, MIN_PRECISION
from nanoshapes.construction.normals import face_normal
from nanoshapes.construction.topology import derive_faces
from nanoshapes.expressions import evaluate_in, evaluate_vector_in
from nanoshapes.model.errors import (
    DegenerateGeometryError,
    ExpressionError,
    InsufficientPrecisionError,
    MalformedPolyhedronError,
)
from nanoshapes.model.options import BuildOptions
from nanoshapes.model.polyhedron import Face, Polyhedron
from nanoshapes.model.shape_definition import ShapeDefinition
from nanoshapes.model.sphere import Sphere
from nanoshapes.model.vector import Vector3, context_for

logger = logging.getLogger(__name__)


def _check_precision(precision) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise MalformedPolyhedronError(
            f"precision must be an integer, got {precision!r}"
        )
    if precision < MIN_PRECISION:
        raise MalformedPolyhedronError(
            f"precision must be >= {MIN_PRECISION} digits, got {precision}"
        )


def _parse_radius(radius, ctx):
    """Convert a caller-supplied radius to a positive scalar of *ctx*."""
    if isinstance(radius, bool):
        raise MalformedPolyhedronError(f"invalid radius {radius!r}")
    if isinstance(radius, float):
        if not math.isfinite(radius):
            raise MalformedPolyhedronError(f"radius must be finite, got {radius}")
        # Take the float as written, not its binary expansion.
        radius = repr(radius)
    if not isinstance(radius, (str, int, Decimal, Fraction)) and not hasattr(
        radius, "_mpf_",
    ):
        raise MalformedPolyhedronError(
            f"radius must be a number or decimal string, got "
            f"{type(radius).__name__}"
        )
    try:
        value = evaluate_in(radius, ctx)
    except ExpressionError as exc:
        raise MalformedPolyhedronError(f"invalid radius {radius!r}: {exc}") from exc
    if not value > 0:
        raise MalformedPolyhedronError(f"radius must be positive, got {radius!r}")
    return value


def _check_faces(faces, n_vertices: int) -> list[tuple[int, ...]]:
    if faces is None or len(faces) == 0:
        raise MalformedPolyhedronError("a polyhedron needs at least one face")
    checked = []
    for face in faces:
        indices = tuple(face)
        if len(indices) < 3:
            raise MalformedPolyhedronError(
                f"face {indices!r} has fewer than 3 vertices"
            )
        for i in indices:
            if isinstance(i, bool) or not isinstance(i, numbers.Integral):
                raise MalformedPolyhedronError(
                    f"face {indices!r} has a non-integer index {i!r}"
                )
            if not 0 <= i < n_vertices:
                raise MalformedPolyhedronError(
                    f"face {indices!r} references vertex {i}, but there "
                    f"are only {n_vertices} vertices"
                )
        if len(set(indices)) != len(indices):
            raise MalformedPolyhedronError(
                f"face {indices!r} repeats a vertex index"
            )
        checked.append(tuple(int(i) for i in indices))
    return checked


def build_polyhedron(
    radius,
    precision: int,
    basis_vertices: Sequence,
    faces: Sequence[Sequence[int]],
    *,
    radius_scale="1",
    guard_digits: int = GUARD_DIGITS,
    name: str | None = None,
) -> Polyhedron:
    """Build a validated polyhedron ready for containment queries.

    Every basis vertex is evaluated, projected onto the sphere of
    radius ``radius * radius_scale`` and every face gets an outward
    unit normal.  All validation happens here so that
    :meth:`Polyhedron.in_bounds` can never fail afterwards.

    Args:
        radius: Positive radius as a decimal string, int,
            :class:`~decimal.Decimal`, :class:`~fractions.Fraction`,
            float or mpf.
        precision: Decimal digits of the containment predicate.
        basis_vertices: Canonical vertex table; each entry is three
            algebraic expressions or numbers.  Only the direction of a
            basis vertex matters.
        faces: Vertex-index loops, one per face, of any arity >= 3.
        radius_scale: Expression multiplying *radius* to give the
            circumradius.
        guard_digits: Extra digits carried in arithmetic.
        name: Optional label stored on the result.

    Returns:
        The immutable :class:`Polyhedron`.

    Raises:
        MalformedPolyhedronError: For an invalid radius or precision,
            empty vertex or face tables, bad face indices or an
            unparsable vertex expression.
        DegenerateGeometryError: For a zero-length basis vertex, a
            collinear face, or a face whose plane does not separate
            the solid from the origin.
        InsufficientPrecisionError: If two vertices of one face
            coincide at *precision*.
    """
    _check_precision(precision)
    if (
        isinstance(guard_digits, bool)
        or not isinstance(guard_digits, int)
        or guard_digits < 0
    ):
        raise MalformedPolyhedronError(
            f"guard_digits must be a non-negative integer, got {guard_digits!r}"
        )
    if basis_vertices is None or len(basis_vertices) < 4:
        raise MalformedPolyhedronError(
            f"a polyhedron needs at least 4 vertices, got "
            f"{0 if basis_vertices is None else len(basis_vertices)}"
        )
    face_table = _check_faces(faces, len(basis_vertices))

    working_digits = precision + guard_digits
    ctx = context_for(working_digits)
    radius_value = _parse_radius(radius, ctx)
    circumradius = radius_value * evaluate_in(radius_scale, ctx)
    if not circumradius > 0:
        raise MalformedPolyhedronError(
            f"radius_scale must be positive, got {radius_scale!r}"
        )
    tolerance = circumradius * ctx.mpf(10) ** (-precision)

    vertices = []
    for index, expr in enumerate(basis_vertices):
        try:
            basis = evaluate_vector_in(expr, ctx)
        except ExpressionError as exc:
            raise MalformedPolyhedronError(
                f"vertex {index} is invalid: {exc}"
            ) from exc
        if basis.norm() <= tolerance:
            raise DegenerateGeometryError(
                f"vertex {index} {tuple(expr)!r} is at the origin"
            )
        vertices.append(basis.normalize().scale(circumradius))

    built_faces = []
    for indices in face_table:
        loop = [vertices[i] for i in indices]
        _check_distinct(indices, loop, tolerance)
        normal = face_normal(
            loop, force_outward=True, tolerance=tolerance * circumradius,
        )
        offset = normal.dot(loop[0])
        if not offset > tolerance:
            raise DegenerateGeometryError(
                f"face {indices!r} passes through or behind the origin"
            )
        built_faces.append(Face(
            indices=indices,
            vertices=tuple(loop),
            normal=normal,
            offset=offset,
        ))

    polyhedron = Polyhedron(
        vertices=tuple(vertices),
        faces=tuple(built_faces),
        radius=radius_value,
        circumradius=circumradius,
        precision=precision,
        working_digits=working_digits,
        tolerance=tolerance,
        name=name,
    )
    logger.debug(
        "Built %s: %d vertices, faces %s, precision %d, tolerance %s",
        name or "polyhedron", polyhedron.n_vertices,
        polyhedron.face_arities(), precision, ctx.nstr(tolerance, 3),
    )
    return polyhedron


def _check_distinct(indices, loop: list[Vector3], tolerance) -> None:
    n = len(loop)
    for a in range(n):
        for b in range(a + 1, n):
            if loop[a].subtract(loop[b]).norm() <= tolerance:
                raise InsufficientPrecisionError(
                    f"vertices {indices[a]} and {indices[b]} of face "
                    f"{indices!r} coincide at the requested precision; "
                    f"increase precision"
                )


def build_sphere(
    radius,
    precision: int,
    *,
    guard_digits: int = GUARD_DIGITS,
    name: str | None = "sphere",
) -> Sphere:
    """Build a spherical boundary of the given radius.

    Raises:
        MalformedPolyhedronError: For an invalid radius or precision.
    """
    _check_precision(precision)
    ctx = context_for(precision + guard_digits)
    radius_value = _parse_radius(radius, ctx)
    return Sphere(
        radius=radius_value,
        precision=precision,
        working_digits=precision + guard_digits,
        tolerance=radius_value * ctx.mpf(10) ** (-precision),
        name=name,
    )


def build_from_definition(
    definition: ShapeDefinition,
    radius,
    precision: int | None = None,
    options: BuildOptions | None = None,
) -> Polyhedron | Sphere:
    """Build the boundary described by a catalog definition.

    Args:
        definition: The shape to build.
        radius: Requested radius (see :func:`build_polyhedron`).
        precision: Decimal digits; overrides ``options.precision``.
        options: Build settings; defaults to :class:`BuildOptions()`.

    Returns:
        A :class:`Polyhedron`, or a :class:`Sphere` for the sphere
        entry.
    """
    options = options or BuildOptions()
    precision = options.precision if precision is None else precision
    if definition.is_sphere:
        return build_sphere(
            radius, precision,
            guard_digits=options.guard_digits, name=definition.name,
        )
    faces = definition.faces
    if faces is None:
        faces = derive_faces(_float_vertices(definition))
    return build_polyhedron(
        radius,
        precision,
        definition.vertices,
        faces,
        radius_scale=definition.radius_scale,
        guard_digits=options.guard_digits,
        name=definition.name,
    )


def _float_vertices(definition: ShapeDefinition) -> list[tuple[float, float, float]]:
    # The topology is that of the projected vertices, which is what
    # build_polyhedron produces; double precision is plenty to find it.
    ctx = context_for(20)
    return [
        tuple(float(c) for c in evaluate_vector_in(v, ctx).normalize())
        for v in definition.vertices
    ]
