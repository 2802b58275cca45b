"""Exception types raised while building boundaries and shapes."""

from __future__ import annotations


class GeometryError(ValueError):
    """Base class for invalid or unbuildable geometry."""


class MalformedPolyhedronError(GeometryError):
    """Vertex or face data is empty, out of range or of the wrong shape."""


class DegenerateGeometryError(GeometryError):
    """A vertex, face or normal collapses to zero length."""


class InsufficientPrecisionError(GeometryError):
    """Two distinct vertices coincide at the requested precision."""


class ExpressionError(ValueError):
    """An algebraic expression is malformed or uses unsupported syntax."""


class UnknownShapeError(KeyError, ValueError):
    """A catalog lookup named a shape that is not registered."""

    def __str__(self) -> str:
        # KeyError.__str__ repr-quotes the message.
        return str(self.args[0]) if self.args else ""
