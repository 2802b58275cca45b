"""Outward unit normals of planar and near-planar polygon faces."""

from __future__ import annotations

from collections.abc import Sequence

from nanoshapes.model.errors import DegenerateGeometryError
from nanoshapes.model.vector import Vector3, centroid


def newell_vector(vertices: Sequence[Vector3]) -> Vector3:
    """Return the unnormalised Newell sum of a polygon loop.

    For a triangle this is the plain cross product of two edges.  For
    larger polygons it is the sum of ``cross(v_i - c, v_{i+1} - c)``
    over every edge, with ``c`` the centroid, which tolerates vertices
    that are only coplanar to within rounding.  The magnitude is twice
    the polygon's (projected) area.

    Args:
        vertices: At least three vertices in loop order.

    Raises:
        DegenerateGeometryError: If fewer than three vertices are given.
    """
    n = len(vertices)
    if n < 3:
        raise DegenerateGeometryError(
            f"a face needs at least 3 vertices, got {n}"
        )
    if n == 3:
        v0, v1, v2 = vertices
        return v1.subtract(v0).cross(v2.subtract(v0))

    c = centroid(list(vertices))
    rel = [v.subtract(c) for v in vertices]
    total = rel[-1].cross(rel[0])
    for a, b in zip(rel, rel[1:]):
        total = total.add(a.cross(b))
    return total


def face_normal(
    vertices: Sequence[Vector3],
    *,
    force_outward: bool = True,
    tolerance=0,
) -> Vector3:
    """Compute the unit normal of a face.

    Args:
        vertices: At least three vertices in loop order.
        force_outward: If true (the default), flip the normal when it
            points towards the origin, i.e. when its dot product with
            the face centroid is negative.  Every solid in the catalog
            is centred on the origin, so this yields the outward
            normal whatever the winding of *vertices*.
        tolerance: Newell vectors no longer than this are treated as
            zero.

    Returns:
        The unit normal as a :class:`Vector3`.

    Raises:
        DegenerateGeometryError: If the vertices are collinear (or
            coincident) to within *tolerance*.
    """
    accumulated = newell_vector(vertices)
    if accumulated.norm() <= tolerance:
        raise DegenerateGeometryError(
            f"face with {len(vertices)} vertices is collinear; "
            f"no normal can be derived"
        )
    normal = accumulated.normalize()
    if force_outward and normal.dot(centroid(list(vertices))) < 0:
        normal = normal.scale(-1)
    return normal
