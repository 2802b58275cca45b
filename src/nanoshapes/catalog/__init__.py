"""Catalog of nanoparticle shapes, looked up by name.

Each shape is a factory function returning a
:class:`~nanoshapes.model.ShapeDefinition`.  Chiral shapes take a
``chirality`` argument (``"levo"``, the default, or ``"dextro"``) and
can also be looked up as ``"<name>_levo"`` or ``"<name>_dextro"``.

Example usage::

    from nanoshapes.catalog import build_shape

    ico = build_shape("icosahedron", radius="12.5", precision=40)
    ico.in_bounds((1.0, 2.0, 3.0))
"""

from __future__ import annotations

from nanoshapes._constants import CHIRALITIES
from nanoshapes.catalog import archimedean, catalan, johnson, platonic  # noqa: F401
from nanoshapes.catalog._registry import SHAPES, RegisteredShape, register
from nanoshapes.construction.builder import build_from_definition
from nanoshapes.model.errors import UnknownShapeError
from nanoshapes.model.options import BuildOptions
from nanoshapes.model.polyhedron import Polyhedron
from nanoshapes.model.shape_definition import ShapeDefinition
from nanoshapes.model.sphere import Sphere


@register("sphere", "ellipsoid")
def sphere() -> ShapeDefinition:
    return ShapeDefinition(
        name="sphere",
        family="ellipsoid",
        vertices=(),
        description="Sphere.",
    )


def available_shapes(family: str | None = None) -> list[str]:
    """Return registered shape names, optionally restricted to *family*."""
    return [
        name for name, entry in SHAPES.items()
        if family is None or entry.family == family
    ]


def _resolve(name: str, chirality: str | None) -> tuple[RegisteredShape, str | None]:
    key = name.strip().lower()
    if key in SHAPES:
        return SHAPES[key], chirality
    for hand in CHIRALITIES:
        suffix = f"_{hand}"
        base = key[:-len(suffix)]
        if key.endswith(suffix) and base in SHAPES and SHAPES[base].chiral:
            if chirality is not None and chirality != hand:
                raise ValueError(
                    f"{name!r} already names the {hand} form; "
                    f"got chirality={chirality!r}"
                )
            return SHAPES[base], hand
    raise UnknownShapeError(
        f"unknown shape {name!r}; available: {', '.join(SHAPES)}"
    )


def get_shape(name: str, *, chirality: str | None = None) -> ShapeDefinition:
    """Return the definition of a catalog shape.

    Args:
        name: Registered name, case-insensitive.  Chiral shapes also
            accept a ``_levo`` or ``_dextro`` suffix.
        chirality: Hand of a chiral shape; defaults to ``"levo"``.

    Raises:
        UnknownShapeError: If *name* is not registered.
        ValueError: If *chirality* is given for an achiral shape or is
            not a recognised hand.
    """
    entry, chirality = _resolve(name, chirality)
    if entry.chiral:
        return entry.factory(chirality or "levo")
    if chirality is not None:
        raise ValueError(f"shape {entry.name!r} is not chiral")
    return entry.factory()


def build_shape(
    name: str,
    radius,
    precision: int | None = None,
    *,
    chirality: str | None = None,
    options: BuildOptions | None = None,
) -> Polyhedron | Sphere:
    """Build a catalog shape at the given radius and precision.

    Args:
        name: Shape name (see :func:`available_shapes`).
        radius: Circumradius, or the half-extent for ``"cube"``.
        precision: Decimal digits; defaults to ``options.precision``.
        chirality: Hand of a chiral shape.
        options: Build settings.

    Returns:
        A :class:`~nanoshapes.model.Polyhedron`, or a
        :class:`~nanoshapes.model.Sphere` for ``"sphere"``.
    """
    definition = get_shape(name, chirality=chirality)
    return build_from_definition(definition, radius, precision, options)


__all__ = [
    "SHAPES",
    "available_shapes",
    "build_shape",
    "get_shape",
    "sphere",
]
