"""Platonic solids and their chamfered variants."""

from __future__ import annotations

from itertools import combinations

from nanoshapes.catalog._orbits import cyclic, join, signed
from nanoshapes.catalog._registry import register
from nanoshapes.model.shape_definition import ShapeDefinition

PHI = "((1 + sqrt(5))/2)"


@register("tetrahedron", "platonic")
def tetrahedron() -> ShapeDefinition:
    c0 = "sqrt(2)/4"
    vertices = join(signed((c0, c0, c0), "odd"))
    return ShapeDefinition(
        name="tetrahedron",
        family="platonic",
        vertices=vertices,
        faces=tuple(combinations(range(4), 3)),
        description="Regular tetrahedron: 4 triangles.",
    )


@register("cube", "platonic")
def cube() -> ShapeDefinition:
    """Cube whose radius is the half-edge, so it spans ``[-r, r]^3``."""
    return ShapeDefinition(
        name="cube",
        family="platonic",
        vertices=join(signed((1, 1, 1))),
        radius_scale="sqrt(3)",
        description="Cube: 6 squares; radius is the half-extent.",
    )


@register("octahedron", "platonic")
def octahedron() -> ShapeDefinition:
    vertices = (
        ("1", "0", "0"), ("-1", "0", "0"),
        ("0", "1", "0"), ("0", "-1", "0"),
        ("0", "0", "1"), ("0", "0", "-1"),
    )
    faces = (
        (0, 2, 4), (2, 1, 4), (1, 3, 4), (3, 0, 4),
        (2, 0, 5), (1, 2, 5), (3, 1, 5), (0, 3, 5),
    )
    return ShapeDefinition(
        name="octahedron",
        family="platonic",
        vertices=vertices,
        faces=faces,
        description="Regular octahedron: 8 triangles.",
    )


@register("dodecahedron", "platonic")
def dodecahedron() -> ShapeDefinition:
    c0 = "(1 + sqrt(5))/4"
    c1 = "(3 + sqrt(5))/4"
    return ShapeDefinition(
        name="dodecahedron",
        family="platonic",
        vertices=join(cyclic(("0", "1/2", c1)), signed((c0, c0, c0))),
        description="Regular dodecahedron: 12 pentagons.",
    )


@register("icosahedron", "platonic")
def icosahedron() -> ShapeDefinition:
    return ShapeDefinition(
        name="icosahedron",
        family="platonic",
        vertices=join(cyclic(("0", "1", PHI))),
        description="Regular icosahedron: 20 triangles.",
    )


@register("tetrahedron_chamfered", "chamfered")
def tetrahedron_chamfered() -> ShapeDefinition:
    a = "sqrt(2)/2"
    b = "(2 - sqrt(2))/2"
    return ShapeDefinition(
        name="tetrahedron_chamfered",
        family="chamfered",
        vertices=join(cyclic((a, b, a), "even"), signed((a, a, a), "odd")),
        description="Chamfered tetrahedron: 4 triangles, 6 hexagons.",
    )


@register("cube_chamfered", "chamfered")
def cube_chamfered() -> ShapeDefinition:
    c0 = "sqrt(2) - 1"
    c1 = "sqrt(2)/2"
    return ShapeDefinition(
        name="cube_chamfered",
        family="chamfered",
        vertices=join(cyclic((c0, c0, "1")), signed((c1, c1, c1))),
        description="Chamfered cube (biscribed): 6 squares, 12 hexagons.",
    )


@register("octahedron_chamfered", "chamfered")
def octahedron_chamfered() -> ShapeDefinition:
    c0 = "(sqrt(6) - 1)/2"
    return ShapeDefinition(
        name="octahedron_chamfered",
        family="chamfered",
        vertices=join(
            cyclic(("0", "0", c0)),
            cyclic(("1/2", "1/2", "sqrt(6)/2")),
        ),
        description="Chamfered octahedron: 8 triangles, 12 hexagons.",
    )
