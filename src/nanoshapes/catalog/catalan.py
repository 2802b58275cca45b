"""Catalan solids (duals of the Archimedean solids) and related forms."""

from __future__ import annotations

from nanoshapes.catalog._orbits import (
    cyclic,
    hand_parity,
    join,
    mirror_parity,
    signed,
)
from nanoshapes.catalog._registry import register
from nanoshapes.model.shape_definition import ShapeDefinition


@register("dodecahedron_rhombic", "catalan")
def dodecahedron_rhombic() -> ShapeDefinition:
    c0 = "3*sqrt(2)/8"
    c1 = "3*sqrt(2)/4"
    return ShapeDefinition(
        name="dodecahedron_rhombic",
        family="catalan",
        vertices=join(cyclic(("0", "0", c1)), signed((c0, c0, c0))),
        description="Rhombic dodecahedron: 12 rhombi.",
    )


@register("triacontahedron_rhombic", "catalan")
def triacontahedron_rhombic() -> ShapeDefinition:
    c0 = "sqrt(5)/4"
    c1 = "(5 + sqrt(5))/8"
    c2 = "(5 + 3*sqrt(5))/8"
    return ShapeDefinition(
        name="triacontahedron_rhombic",
        family="catalan",
        vertices=join(
            cyclic((c1, "0", c2)),
            cyclic(("0", c0, c2)),
            signed((c1, c1, c1)),
        ),
        description="Rhombic triacontahedron: 30 rhombi.",
    )


@register("hexahedron_tetrakis", "catalan")
def hexahedron_tetrakis() -> ShapeDefinition:
    c0 = "3*sqrt(2)/4"
    c1 = "9*sqrt(2)/8"
    return ShapeDefinition(
        name="hexahedron_tetrakis",
        family="catalan",
        vertices=join(cyclic(("0", "0", c1)), signed((c0, c0, c0))),
        description="Tetrakis hexahedron (canonical): 24 isosceles triangles.",
    )


@register("hexahedron_tetrakis_biscribed", "catalan")
def hexahedron_tetrakis_biscribed() -> ShapeDefinition:
    c0 = "sqrt(3)/3"
    return ShapeDefinition(
        name="hexahedron_tetrakis_biscribed",
        family="catalan",
        vertices=join(cyclic(("0", "0", "1")), signed((c0, c0, c0))),
        description="Biscribed tetrakis hexahedron.",
    )


@register("octahedron_triakis", "catalan")
def octahedron_triakis() -> ShapeDefinition:
    return ShapeDefinition(
        name="octahedron_triakis",
        family="catalan",
        vertices=join(cyclic(("0", "0", "1 + sqrt(2)")), signed(("1", "1", "1"))),
        description="Triakis octahedron: 24 isosceles triangles.",
    )


@register("tetrahedron_triakis", "catalan")
def tetrahedron_triakis() -> ShapeDefinition:
    c0 = "9*sqrt(2)/20"
    c1 = "3*sqrt(2)/4"
    return ShapeDefinition(
        name="tetrahedron_triakis",
        family="catalan",
        vertices=join(signed((c1, c1, c1), "even"), signed((c0, c0, c0), "odd")),
        description="Triakis tetrahedron: 12 isosceles triangles.",
    )


@register("tetrahedron_triakis_truncated", "catalan")
def tetrahedron_triakis_truncated() -> ShapeDefinition:
    c0 = "(2*sqrt(6) - 3*sqrt(2))/12"
    c1 = "sqrt(2)/4"
    c2 = "3*(sqrt(2) + 2*sqrt(6))/20"
    c3 = "(3*sqrt(2) + 4*sqrt(6))/12"
    c4 = "(sqrt(2) + 2*sqrt(6))/4"
    return ShapeDefinition(
        name="tetrahedron_triakis_truncated",
        family="catalan",
        vertices=join(
            cyclic((c1, c1, c4), "even"),
            cyclic((c3, c0, c3), "odd"),
            signed((c2, c2, c2), "odd"),
        ),
        description="Truncated triakis tetrahedron: 4 hexagons, 12 pentagons.",
    )


@register("icositetrahedron_deltoidal", "catalan")
def icositetrahedron_deltoidal() -> ShapeDefinition:
    c0 = "(4 + sqrt(2))/7"
    return ShapeDefinition(
        name="icositetrahedron_deltoidal",
        family="catalan",
        vertices=join(
            cyclic(("0", "0", "sqrt(2)")),
            cyclic(("1", "0", "1")),
            signed((c0, c0, c0)),
        ),
        description="Deltoidal icositetrahedron: 24 kites.",
    )


@register("hexecontahedron_deltoidal", "catalan")
def hexecontahedron_deltoidal() -> ShapeDefinition:
    c0 = "(5 - sqrt(5))/4"
    c1 = "(15 + sqrt(5))/22"
    c2 = "sqrt(5)/2"
    c3 = "(5 + sqrt(5))/6"
    c4 = "(5 + 4*sqrt(5))/11"
    c5 = "(5 + sqrt(5))/4"
    c6 = "(5 + 3*sqrt(5))/6"
    c7 = "(25 + 9*sqrt(5))/22"
    c8 = "sqrt(5)"
    return ShapeDefinition(
        name="hexecontahedron_deltoidal",
        family="catalan",
        vertices=join(
            cyclic(("0", "0", c8)),
            cyclic(("0", c1, c7)),
            cyclic((c3, "0", c6)),
            cyclic((c0, c2, c5)),
            signed((c4, c4, c4)),
        ),
        description="Deltoidal hexecontahedron: 60 kites.",
    )


def _pentagonal_icositetrahedron(
    name: str,
    chirality: str,
    *,
    apex: str,
    a: str,
    b: str,
    h: str,
    corner: str,
    description: str,
) -> ShapeDefinition:
    # 4-fold apexes on the axes, 3-fold corners on the body diagonals,
    # and the remaining pentagon corners in two cyclic orbits of
    # opposite sign parity.
    parity = hand_parity(chirality, "even")
    return ShapeDefinition(
        name=name,
        family="catalan",
        vertices=join(
            cyclic(("0", "0", apex)),
            cyclic((a, b, h), parity),
            cyclic((b, a, h), mirror_parity(parity)),
            signed((corner, corner, corner)),
        ),
        chirality=chirality,
        description=description,
    )


@register("icositetrahedron_pentagonal", "catalan", chiral=True)
def icositetrahedron_pentagonal(chirality: str = "levo") -> ShapeDefinition:
    x = "cbrt(6*(9 + sqrt(33)))"
    y = "cbrt(6*(9 - sqrt(33)))"
    c0 = f"sqrt(6*({x} + {y} - 6))/12"
    c1 = f"sqrt(6*(6 + {x} + {y}))/12"
    c2 = f"sqrt(6*(18 + {x} + {y}))/12"
    c3 = (
        "sqrt(6*(14 + cbrt(2*(1777 + 33*sqrt(33)))"
        " + cbrt(2*(1777 - 33*sqrt(33)))))/12"
    )
    return _pentagonal_icositetrahedron(
        "icositetrahedron_pentagonal", chirality,
        apex=c3, a=c1, b=c0, h=c2, corner=c1,
        description="Pentagonal icositetrahedron (canonical): 24 pentagons.",
    )


@register("icositetrahedron_pentagonal_biscribed", "catalan", chiral=True)
def icositetrahedron_pentagonal_biscribed(
    chirality: str = "levo",
) -> ShapeDefinition:
    root = "sqrt(3*(52*sqrt(3) - 89))"
    c0 = f"(8*sqrt(3) - 15 + {root})/6"
    c1 = "sqrt(3)/3"
    c2 = f"(9 - 4*sqrt(3) + {root})/6"
    c3 = "(5*sqrt(3) - 9 + sqrt(6*(15*sqrt(3) - 22)))/6"
    return _pentagonal_icositetrahedron(
        "icositetrahedron_pentagonal_biscribed", chirality,
        apex="1", a=c2, b=c0, h=c3, corner=c1,
        description="Biscribed pentagonal icositetrahedron.",
    )


@register("hexecontahedron_pentagonal", "catalan", chiral=True)
def hexecontahedron_pentagonal(chirality: str = "levo") -> ShapeDefinition:
    """Pentagonal hexecontahedron, dual of the snub dodecahedron.

    ``x`` is the real root of ``x**3 = 2*x + phi``, by Cardano's formula.
    """
    root = "sqrt(phi - 5/27)/2"
    x = f"(cbrt(phi/2 + {root}) + cbrt(phi/2 - {root}))"
    wing = f"sqrt({x}*({x} + phi) + 1)"
    c0 = f"phi*sqrt(3 - {x}**2)/2"
    c1 = f"phi*sqrt(({x} - 1 - 1/{x})*phi)/(2*{x})"
    c2 = f"phi*sqrt(({x} - 1 - 1/{x})*phi)/2"
    c3 = f"{x}**2*phi*sqrt(3 - {x}**2)/2"
    c4 = f"phi*sqrt(1 - {x} + (1 + phi)/{x})/2"
    c5 = f"{wing}/(2*{x})"
    c6 = f"sqrt(({x} + 2)*phi + 2)/(2*{x})"
    c7 = f"sqrt(-{x}**2*(2 + phi) + {x}*(1 + 3*phi) + 4)/2"
    c8 = f"(1 + phi)*sqrt(1 + 1/{x})/(2*{x})"
    c9 = f"sqrt(2 + 3*phi - 2*{x} + 3/{x})/2"
    c10 = (
        f"sqrt({x}**2*(392 + 225*phi) + {x}*(249 + 670*phi)"
        f" + (470 + 157*phi))/62"
    )
    c11 = f"phi*{wing}/(2*{x})"
    c12 = f"phi*sqrt({x}**2 + {x} + 1 + phi)/(2*{x})"
    c13 = f"phi*sqrt({x}**2 + 2*{x}*phi + 2)/(2*{x})"
    c14 = f"sqrt({x}**2*(1 + 2*phi) - phi)/2"
    c15 = f"phi*sqrt({x}**2 + {x})/2"
    c16 = f"phi**3*{wing}/(2*{x}**2)"
    c17 = (
        f"sqrt({x}**2*(617 + 842*phi) + {x}*(919 + 1589*phi)"
        f" + (627 + 784*phi))/62"
    )
    c18 = f"phi**2*{wing}/(2*{x})"
    c19 = f"phi*{wing}/2"
    odd = hand_parity(chirality, "odd")
    even = mirror_parity(odd)
    return ShapeDefinition(
        name="hexecontahedron_pentagonal",
        family="catalan",
        vertices=join(
            cyclic((c0, c1, c19), odd),
            cyclic(("0", c5, c18)),
            cyclic((c10, "0", c17)),
            cyclic((c3, c6, c16), even),
            cyclic((c2, c9, c15), odd),
            cyclic((c7, c8, c14), odd),
            cyclic((c4, c12, c13), even),
            signed((c11, c11, c11)),
        ),
        chirality=chirality,
        description="Pentagonal hexecontahedron (canonical): 60 pentagons.",
    )


@register("triacontahedron_disdyakis", "catalan")
def triacontahedron_disdyakis() -> ShapeDefinition:
    c0 = "3*(15 + sqrt(5))/44"
    c1 = "(5 - sqrt(5))/2"
    c2 = "3*(5 + 4*sqrt(5))/22"
    c3 = "3*(5 + sqrt(5))/10"
    c4 = "sqrt(5)"
    c5 = "(75 + 27*sqrt(5))/44"
    c6 = "(15 + 9*sqrt(5))/10"
    c7 = "(5 + sqrt(5))/2"
    c8 = "3*(5 + 4*sqrt(5))/11"
    return ShapeDefinition(
        name="triacontahedron_disdyakis",
        family="catalan",
        vertices=join(
            cyclic(("0", "0", c8)),
            cyclic(("0", c1, c7)),
            cyclic((c3, "0", c6)),
            cyclic((c0, c2, c5)),
            signed((c4, c4, c4)),
        ),
        description="Disdyakis triacontahedron (canonical): 120 triangles.",
    )


@register("triacontahedron_disdyakis_biscribed", "catalan")
def triacontahedron_disdyakis_biscribed() -> ShapeDefinition:
    c0 = "(sqrt(5) - 1)/4"
    c1 = "(sqrt(15) - sqrt(3))/6"
    c2 = "sqrt(10*(5 - sqrt(5)))/10"
    c3 = "sqrt(3)/3"
    c4 = "(1 + sqrt(5))/4"
    c5 = "sqrt(10*(5 + sqrt(5)))/10"
    c6 = "(sqrt(3) + sqrt(15))/6"
    return ShapeDefinition(
        name="triacontahedron_disdyakis_biscribed",
        family="catalan",
        vertices=join(
            cyclic(("0", "0", "1")),
            cyclic(("0", c1, c6)),
            cyclic((c2, "0", c5)),
            cyclic((c0, "1/2", c4)),
            signed((c3, c3, c3)),
        ),
        description="Biscribed disdyakis triacontahedron.",
    )


@register("tetrahedron_propello", "catalan", chiral=True)
def tetrahedron_propello(chirality: str = "levo") -> ShapeDefinition:
    r69 = "sqrt(69)"
    c0 = f"(cbrt(4*(11 + 3*{r69})) - cbrt(4*(3*{r69} - 11)) - 1)/3"
    c1 = f"(cbrt(4*(25 + 3*{r69})) + cbrt(4*(25 - 3*{r69})) - 5)/3"
    c2 = f"(cbrt(4*(371 + 33*{r69})) + cbrt(4*(371 - 33*{r69})) - 1)/33"
    parity = hand_parity(chirality, "even")
    return ShapeDefinition(
        name="tetrahedron_propello",
        family="catalan",
        vertices=join(
            cyclic((c1, c0, "1"), parity),
            signed((c2, c2, c2), mirror_parity(parity)),
        ),
        chirality=chirality,
        description="Propello tetrahedron: 4 triangles, 12 pentagons.",
    )
