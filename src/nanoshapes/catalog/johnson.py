"""Johnson solids and the octagonal prism."""

from __future__ import annotations

from nanoshapes.catalog._orbits import cyclic, join, signed
from nanoshapes.catalog._registry import register
from nanoshapes.catalog.archimedean import rhombicosidodecahedron_vertices
from nanoshapes.catalog.gyrate import gyrate_vertices
from nanoshapes.model.shape_definition import ShapeDefinition

# Pentagonal-cupola axes of the rhombicosidodecahedron; any two used
# together must not be adjacent.
_AXIS_TOP = ("0", "phi", "1")
_AXIS_BOTTOM = ("0", "-phi", "-1")
_AXIS_META = ("0", "-phi", "1")
_AXIS_THIRD = ("1", "0", "-phi")

_COS_36 = "(1 + sqrt(5))/4"
_SIN_36 = "sqrt(10 - 2*sqrt(5))/4"


def _rhombicosidodecahedron_gyrated(name: str, axes, description: str):
    return ShapeDefinition(
        name=name,
        family="johnson",
        vertices=gyrate_vertices(
            rhombicosidodecahedron_vertices(), axes,
            cos=_COS_36, sin=_SIN_36, cap_size=5,
        ),
        description=description,
    )


@register("rhombicosidodecahedron_gyrate", "johnson")
def rhombicosidodecahedron_gyrate() -> ShapeDefinition:
    return _rhombicosidodecahedron_gyrated(
        "rhombicosidodecahedron_gyrate", (_AXIS_TOP,),
        "Gyrate rhombicosidodecahedron (J72).",
    )


@register("rhombicosidodecahedron_parabigyrate", "johnson")
def rhombicosidodecahedron_parabigyrate() -> ShapeDefinition:
    return _rhombicosidodecahedron_gyrated(
        "rhombicosidodecahedron_parabigyrate", (_AXIS_TOP, _AXIS_BOTTOM),
        "Parabigyrate rhombicosidodecahedron (J73).",
    )


@register("rhombicosidodecahedron_metabigyrate", "johnson")
def rhombicosidodecahedron_metabigyrate() -> ShapeDefinition:
    return _rhombicosidodecahedron_gyrated(
        "rhombicosidodecahedron_metabigyrate", (_AXIS_TOP, _AXIS_META),
        "Metabigyrate rhombicosidodecahedron (J74).",
    )


@register("rhombicosidodecahedron_trigyrate", "johnson")
def rhombicosidodecahedron_trigyrate() -> ShapeDefinition:
    return _rhombicosidodecahedron_gyrated(
        "rhombicosidodecahedron_trigyrate",
        (_AXIS_TOP, _AXIS_META, _AXIS_THIRD),
        "Trigyrate rhombicosidodecahedron (J75).",
    )


@register("rhombicuboctahedron_gyrate", "johnson")
def rhombicuboctahedron_gyrate() -> ShapeDefinition:
    """Elongated square gyrobicupola (pseudo-rhombicuboctahedron)."""
    c0 = "(1 + sqrt(2))/2"
    vertices = join(cyclic(("1/2", "1/2", c0)))
    return ShapeDefinition(
        name="rhombicuboctahedron_gyrate",
        family="johnson",
        vertices=gyrate_vertices(
            vertices, (("0", "0", "1"),),
            cos="sqrt(2)/2", sin="sqrt(2)/2", cap_size=4,
        ),
        description="Elongated square gyrobicupola (J37).",
    )


@register("orthobicupola_triangular", "johnson")
def orthobicupola_triangular() -> ShapeDefinition:
    c0 = "sqrt(2)/6"
    c1 = "sqrt(2)/2"
    c2 = "2*sqrt(2)/3"
    return ShapeDefinition(
        name="orthobicupola_triangular",
        family="johnson",
        vertices=join(
            cyclic((f"-{c0}", f"-{c0}", f"-{c2}"), "none"),
            cyclic((c1, "0", c1), "none"),
            cyclic((c1, "0", f"-{c1}"), "none"),
            cyclic((f"-{c1}", "0", c1), "none"),
        ),
        description="Triangular orthobicupola (J27).",
    )


@register("bilunabirotunda", "johnson")
def bilunabirotunda() -> ShapeDefinition:
    c0 = "(1 + sqrt(5))/4"
    c1 = "(3 + sqrt(5))/4"
    return ShapeDefinition(
        name="bilunabirotunda",
        family="johnson",
        vertices=join(
            signed(("1/2", c0, "1/2")),
            signed((c1, "1/2", "0"), positions=(0, 1)),
            signed(("0", "0", c0), positions=(2,)),
        ),
        description="Bilunabirotunda (J91).",
    )


@register("dipyramid_pentagonal_elongated", "johnson")
def dipyramid_pentagonal_elongated() -> ShapeDefinition:
    c0 = "(sqrt(5) - 1)/4"
    c1 = "sqrt(2*(5 - sqrt(5)))/4"
    c2 = "(1 + sqrt(5))/4"
    c3 = "sqrt(2*(5 + sqrt(5)))/4"
    c4 = "sqrt(10*(185 + 11*sqrt(5)))/40"
    return ShapeDefinition(
        name="dipyramid_pentagonal_elongated",
        family="johnson",
        vertices=join(
            signed((c3, c0, c1), positions=(0, 2)),
            signed((c1, f"-{c2}", c1), positions=(0, 2)),
            signed(("0", "1", c1), positions=(2,)),
            signed(("0", "0", c4), positions=(2,)),
        ),
        description="Elongated pentagonal dipyramid (J16).",
    )


@register("prism_octagonal", "prism")
def prism_octagonal() -> ShapeDefinition:
    h = "sqrt(2 - sqrt(2))/2"
    s = "sqrt(2)/2"
    return ShapeDefinition(
        name="prism_octagonal",
        family="prism",
        vertices=join(
            signed(("1", "0", h), positions=(0, 2)),
            signed(("0", "1", h), positions=(1, 2)),
            signed((s, s, h)),
        ),
        description="Uniform octagonal prism: 8 squares, 2 octagons.",
    )
