"""Shared constants used across the model, construction and catalog layers."""

DEFAULT_PRECISION: int = 50
"""Decimal digits used when the caller does not request a precision."""

MIN_PRECISION: int = 15
"""Smallest precision accepted by the builder.

Below double precision the exact predicate is no better than the
float64 screening pass, so such requests are rejected.
"""

GUARD_DIGITS: int = 10
"""Extra working digits carried beyond the requested precision."""

DEFAULT_BATCH_SIZE: int = 4096
"""Number of points handed to one worker in batched evaluation."""

FLOAT_SCREEN_MARGIN: float = 1e-9
"""Relative band around each face plane inside which the float64
screening pass defers to the exact predicate."""

COPLANAR_COS_TOL: float = 1.0 - 1e-9
"""Cosine threshold for merging hull triangles into one face."""

CHIRALITIES: tuple[str, str] = ("levo", "dextro")
"""Recognised handedness names for chiral catalog entries."""

FAMILIES: frozenset[str] = frozenset({
    "platonic", "chamfered", "archimedean", "catalan",
    "johnson", "prism", "ellipsoid",
})
"""Recognised catalog family names."""
