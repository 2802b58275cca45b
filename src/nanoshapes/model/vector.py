"""Arbitrary-precision scalars and three-component vectors.

Every scalar belongs to a private :class:`mpmath.MPContext` whose
``dps`` is fixed when the context is created.  Arithmetic between two
scalars runs at the precision of their context, so no code in this
package ever changes :data:`mpmath.mp`, and polyhedra built at
different precisions can be queried from several threads at once.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache

import mpmath
import numpy as np

from nanoshapes.model.errors import DegenerateGeometryError

Scalar = mpmath.mpf
"""Type of the arbitrary-precision reals used throughout the package."""


@lru_cache(maxsize=None)
def context_for(digits: int) -> mpmath.MPContext:
    """Return the shared mpmath context working at *digits* decimal places.

    Contexts are created once per precision and never modified
    afterwards.

    Raises:
        ValueError: If *digits* is not a positive integer.
    """
    if isinstance(digits, bool) or not isinstance(digits, int) or digits < 1:
        raise ValueError(f"digits must be a positive integer, got {digits!r}")
    ctx = mpmath.MPContext()
    ctx.dps = digits
    return ctx


def to_scalar(value, ctx: mpmath.MPContext):
    """Convert a number or decimal string to a scalar of *ctx*.

    Strings and :class:`~decimal.Decimal` values are parsed as
    decimals at the context's precision; fractions are divided
    exactly; floats are taken at their exact binary value.

    Raises:
        TypeError: If *value* is not a supported numeric type.
    """
    if isinstance(value, str):
        return ctx.mpf(value.strip())
    if isinstance(value, Decimal):
        return ctx.mpf(str(value))
    if isinstance(value, Fraction):
        return ctx.mpf(value.numerator) / value.denominator
    if hasattr(value, "_mpf_"):
        return ctx.mpf(value)
    if isinstance(value, bool):
        raise TypeError("booleans are not valid coordinates")
    if isinstance(value, numbers.Integral):
        return ctx.mpf(int(value))
    if isinstance(value, numbers.Real):
        return ctx.mpf(float(value))
    raise TypeError(
        f"cannot convert {type(value).__name__} to a scalar"
    )


@dataclass(frozen=True)
class Vector3:
    """An immutable triple of scalars.

    All three components are expected to belong to the same mpmath
    context; the methods below then run at that context's precision.

    Attributes:
        x: First Cartesian component.
        y: Second Cartesian component.
        z: Third Cartesian component.
    """

    x: Scalar
    y: Scalar
    z: Scalar

    @classmethod
    def from_values(cls, values, ctx: mpmath.MPContext) -> Vector3:
        """Build a vector from any three numbers, converted into *ctx*.

        Args:
            values: A :class:`Vector3`, or a length-3 sequence or
                array of numbers or decimal strings.
            ctx: Target context (see :func:`context_for`).

        Raises:
            ValueError: If *values* does not have exactly three
                components.
        """
        if isinstance(values, Vector3):
            values = (values.x, values.y, values.z)
        elif isinstance(values, np.ndarray):
            values = values.tolist()
        components = tuple(values)
        if len(components) != 3:
            raise ValueError(
                f"expected 3 components, got {len(components)}"
            )
        return cls(*(to_scalar(c, ctx) for c in components))

    @property
    def context(self) -> mpmath.MPContext:
        """The mpmath context the components belong to."""
        return self.x.context

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> tuple[Scalar, Scalar, Scalar]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Return the vector as a float64 array of shape ``(3,)``."""
        return np.array([float(self.x), float(self.y), float(self.z)])

    def add(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vector3) -> Scalar:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> Scalar:
        """Euclidean length, ``sqrt(dot(v, v))``."""
        return self.context.sqrt(self.dot(self))

    def normalize(self) -> Vector3:
        """Return the unit vector in the same direction.

        Raises:
            DegenerateGeometryError: If the vector has zero length.
        """
        length = self.norm()
        if length == 0:
            raise DegenerateGeometryError("cannot normalise a zero-length vector")
        return Vector3(self.x / length, self.y / length, self.z / length)

    def is_finite(self) -> bool:
        isfinite = self.context.isfinite
        return isfinite(self.x) and isfinite(self.y) and isfinite(self.z)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    """Return ``a - b``."""
    return a.subtract(b)


def scale(v: Vector3, s) -> Vector3:
    """Return ``s * v``."""
    return v.scale(s)


def dot(a: Vector3, b: Vector3) -> Scalar:
    """Return the dot product of *a* and *b*."""
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Return the cross product ``a x b``."""
    return a.cross(b)


def normalize(v: Vector3) -> Vector3:
    """Return ``v / |v|``.

    Raises:
        DegenerateGeometryError: If *v* has zero length.
    """
    return v.normalize()


def centroid(points: list[Vector3]) -> Vector3:
    """Return the arithmetic mean of a non-empty list of vectors."""
    total = points[0]
    for p in points[1:]:
        total = total.add(p)
    return total.scale(total.context.mpf(1) / len(points))
