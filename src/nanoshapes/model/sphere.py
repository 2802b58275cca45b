"""Spherical boundary with the same containment interface as polyhedra."""

from __future__ import annotations

from dataclasses import dataclass

import mpmath
import numpy as np

from nanoshapes.model.errors import MalformedPolyhedronError
from nanoshapes.model.vector import Scalar, Vector3, context_for


@dataclass(frozen=True)
class Sphere:
    """The closed ball ``|p| <= radius`` centred on the origin.

    Attributes:
        radius: Ball radius.
        precision: Requested decimal precision.
        working_digits: Digits carried in arithmetic.
        tolerance: Points at most this far outside the surface are
            still inside.
        name: Catalog name.
    """

    radius: Scalar
    precision: int
    working_digits: int
    tolerance: Scalar
    name: str | None = "sphere"

    def __post_init__(self) -> None:
        if not self.radius > 0:
            raise MalformedPolyhedronError(
                f"radius must be positive, got {self.radius}"
            )

    @property
    def context(self) -> mpmath.MPContext:
        return context_for(self.working_digits)

    @property
    def circumradius(self) -> Scalar:
        return self.radius

    def in_bounds(self, point) -> bool:
        """Test whether *point* lies inside or on the sphere."""
        p = Vector3.from_values(point, self.context)
        if not p.is_finite():
            return False
        limit = self.radius + self.tolerance
        return p.dot(p) <= limit * limit

    def float_distances(self, points: np.ndarray) -> np.ndarray:
        """Signed float64 distance of each point from the surface.

        Returns:
            Array of shape ``(n, 1)``; positive entries are outside.
        """
        points = np.asarray(points, dtype=float)
        return (np.linalg.norm(points, axis=1) - float(self.radius))[:, None]
