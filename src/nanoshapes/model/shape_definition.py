"""Static catalog records: vertex expressions and optional face loops."""

from __future__ import annotations

from dataclasses import dataclass

from nanoshapes._constants import CHIRALITIES, FAMILIES
from nanoshapes.model.errors import MalformedPolyhedronError


@dataclass(frozen=True)
class ShapeDefinition:
    """Static data describing one catalog shape.

    A definition holds no computed geometry.  The builder evaluates the
    vertex expressions at the requested precision and derives the
    faces when *faces* is ``None``.

    Attributes:
        name: Registry name, e.g. ``"icosahedron"``.
        family: One of :data:`~nanoshapes._constants.FAMILIES`.
        vertices: Canonical vertex table as algebraic expression
            triples.  Only directions matter; the builder projects
            every vertex onto the circumsphere.  Empty for the sphere.
        faces: Explicit face loops as vertex-index tuples, or ``None``
            to take the faces from the convex hull of *vertices*.
        radius_scale: Expression for the circumradius in units of the
            requested radius.
        chirality: ``"levo"`` or ``"dextro"`` for one hand of a chiral
            solid, ``None`` otherwise.
        description: Short human-readable description.
    """

    name: str
    family: str
    vertices: tuple[tuple, ...]
    faces: tuple[tuple[int, ...], ...] | None = None
    radius_scale: str = "1"
    chirality: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be a non-empty string")
        if self.family not in FAMILIES:
            raise ValueError(
                f"unknown family {self.family!r}; "
                f"expected one of {sorted(FAMILIES)}"
            )
        if self.chirality is not None and self.chirality not in CHIRALITIES:
            raise ValueError(
                f"chirality must be one of {CHIRALITIES} or None, "
                f"got {self.chirality!r}"
            )
        if self.is_sphere:
            if self.vertices or self.faces:
                raise MalformedPolyhedronError(
                    f"{self.name}: a sphere has no vertices or faces"
                )
            return
        if len(self.vertices) < 4:
            raise MalformedPolyhedronError(
                f"{self.name}: a solid needs at least 4 vertices, "
                f"got {len(self.vertices)}"
            )
        for vertex in self.vertices:
            if len(vertex) != 3:
                raise MalformedPolyhedronError(
                    f"{self.name}: vertex {vertex!r} does not have 3 components"
                )
        if self.faces is not None:
            n = len(self.vertices)
            for face in self.faces:
                if len(face) < 3 or any(not 0 <= i < n for i in face):
                    raise MalformedPolyhedronError(
                        f"{self.name}: invalid face {face!r} for {n} vertices"
                    )

    @property
    def is_sphere(self) -> bool:
        return self.family == "ellipsoid"

    @property
    def is_chiral(self) -> bool:
        return self.chirality is not None
