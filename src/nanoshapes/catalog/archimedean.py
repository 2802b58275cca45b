"""Archimedean solids, their biscribed forms and the snub solids."""

from __future__ import annotations

from nanoshapes.catalog._orbits import (
    cyclic,
    hand_parity,
    join,
    mirror_parity,
    permuted,
)
from nanoshapes.catalog._registry import register
from nanoshapes.model.shape_definition import ShapeDefinition

PHI = "((1 + sqrt(5))/2)"


@register("cuboctahedron", "archimedean")
def cuboctahedron() -> ShapeDefinition:
    return ShapeDefinition(
        name="cuboctahedron",
        family="archimedean",
        vertices=join(cyclic(("1", "1", "0"))),
        description="Cuboctahedron: 8 triangles, 6 squares.",
    )


@register("cuboctahedron_truncated", "archimedean")
def cuboctahedron_truncated() -> ShapeDefinition:
    return ShapeDefinition(
        name="cuboctahedron_truncated",
        family="archimedean",
        vertices=join(permuted(("1", "1 + sqrt(2)", "1 + 2*sqrt(2)"))),
        description="Truncated cuboctahedron: 12 squares, 8 hexagons, 6 octagons.",
    )


@register("cuboctahedron_truncated_biscribed", "archimedean")
def cuboctahedron_truncated_biscribed() -> ShapeDefinition:
    c0 = "(1 + sqrt(2))/2"
    c1 = "(1 + 2*sqrt(2))/2"
    return ShapeDefinition(
        name="cuboctahedron_truncated_biscribed",
        family="archimedean",
        vertices=join(permuted(("1", c0, c1))),
        description="Biscribed truncated cuboctahedron.",
    )


@register("cube_truncated", "archimedean")
def cube_truncated() -> ShapeDefinition:
    c0 = "(1 + sqrt(2))/2"
    return ShapeDefinition(
        name="cube_truncated",
        family="archimedean",
        vertices=join(cyclic((c0, "1/2", c0))),
        description="Truncated cube: 8 triangles, 6 octagons.",
    )


@register("tetrahedron_truncated", "archimedean")
def tetrahedron_truncated() -> ShapeDefinition:
    c0 = "sqrt(2)/4"
    c1 = "3*sqrt(2)/4"
    return ShapeDefinition(
        name="tetrahedron_truncated",
        family="archimedean",
        vertices=join(cyclic((c0, c0, c1), "odd")),
        description="Truncated tetrahedron: 4 triangles, 4 hexagons.",
    )


@register("tetrahedron_ditruncated", "archimedean")
def tetrahedron_ditruncated() -> ShapeDefinition:
    return ShapeDefinition(
        name="tetrahedron_ditruncated",
        family="archimedean",
        vertices=join(
            cyclic(("1/5", "1/5", "1"), "odd"),
            cyclic(("5/9", "1/3", "7/9"), "odd"),
            cyclic(("1/3", "5/9", "7/9"), "odd"),
        ),
        description="Ditruncated tetrahedron (tetrahedral Goldberg solid).",
    )


@register("octahedron_truncated", "archimedean")
def octahedron_truncated() -> ShapeDefinition:
    return ShapeDefinition(
        name="octahedron_truncated",
        family="archimedean",
        vertices=join(permuted(("0", "sqrt(2)/2", "sqrt(2)"))),
        description="Truncated octahedron: 6 squares, 8 hexagons.",
    )


@register("octahedron_truncated_biscribed", "archimedean")
def octahedron_truncated_biscribed() -> ShapeDefinition:
    return ShapeDefinition(
        name="octahedron_truncated_biscribed",
        family="archimedean",
        vertices=join(permuted(("0", "sqrt(3) - 1", "1"))),
        description="Biscribed truncated octahedron.",
    )


@register("dodecahedron_truncated", "archimedean")
def dodecahedron_truncated() -> ShapeDefinition:
    c0 = "(3 + sqrt(5))/4"
    c1 = PHI
    c2 = "(2 + sqrt(5))/2"
    c3 = "(3 + sqrt(5))/2"
    c4 = "(5 + 3*sqrt(5))/4"
    return ShapeDefinition(
        name="dodecahedron_truncated",
        family="archimedean",
        vertices=join(
            cyclic(("0", "1/2", c4)),
            cyclic(("1/2", c0, c3)),
            cyclic((c0, c1, c2)),
        ),
        description="Truncated dodecahedron: 20 triangles, 12 decagons.",
    )


@register("icosahedron_truncated", "archimedean")
def icosahedron_truncated() -> ShapeDefinition:
    c0 = "(1 + sqrt(5))/4"
    c1 = PHI
    c2 = "(5 + sqrt(5))/4"
    c3 = "(2 + sqrt(5))/2"
    c4 = "3*(1 + sqrt(5))/4"
    return ShapeDefinition(
        name="icosahedron_truncated",
        family="archimedean",
        vertices=join(
            cyclic(("1/2", "0", c4)),
            cyclic(("1", c0, c3)),
            cyclic(("1/2", c1, c2)),
        ),
        description="Truncated icosahedron: 12 pentagons, 20 hexagons.",
    )


@register("icosahedron_truncated_biscribed", "archimedean")
def icosahedron_truncated_biscribed() -> ShapeDefinition:
    s3 = "sqrt(3)"
    s15 = "sqrt(15)"
    r_plus = "sqrt(2*(5 + sqrt(5)))"
    r_minus = "sqrt(2*(5 - sqrt(5)))"
    r_5 = "sqrt(5 + 2*sqrt(5))"
    c0 = f"{r_plus}/2 - {s3}"
    c1 = f"(5*{s3} - {s15} - {r_plus})/4"
    c2 = f"({s15} - {r_5})/2"
    c3 = f"({s3} - {s15} + {r_plus})/4"
    c4 = f"({r_5} - {s3})/2"
    c5 = f"({s3} + {s15} - {r_minus})/4"
    c6 = f"(3*{s3} - {s15} + {r_minus})/4"
    c7 = f"({s15} - {s3})/2"
    return ShapeDefinition(
        name="icosahedron_truncated_biscribed",
        family="archimedean",
        vertices=join(
            cyclic((c0, "0", c7)),
            cyclic((c3, c2, c6)),
            cyclic((c1, c4, c5)),
        ),
        description="Biscribed truncated icosahedron: 12 pentagons, 20 hexagons.",
    )


@register("icosidodecahedron", "archimedean")
def icosidodecahedron() -> ShapeDefinition:
    c0 = "(1 + sqrt(5))/4"
    c1 = "(3 + sqrt(5))/4"
    return ShapeDefinition(
        name="icosidodecahedron",
        family="archimedean",
        vertices=join(cyclic(("0", "0", PHI)), cyclic(("1/2", c0, c1))),
        description="Icosidodecahedron: 20 triangles, 12 pentagons.",
    )


@register("icosidodecahedron_truncated", "archimedean")
def icosidodecahedron_truncated() -> ShapeDefinition:
    c0 = "(3 + sqrt(5))/4"
    c1 = PHI
    c2 = "(5 + sqrt(5))/4"
    c3 = "(2 + sqrt(5))/2"
    c4 = "3*(1 + sqrt(5))/4"
    c5 = "(3 + sqrt(5))/2"
    c6 = "(5 + 3*sqrt(5))/4"
    c7 = "(4 + sqrt(5))/2"
    c8 = "(7 + 3*sqrt(5))/4"
    c9 = "(3 + 2*sqrt(5))/2"
    return ShapeDefinition(
        name="icosidodecahedron_truncated",
        family="archimedean",
        vertices=join(
            cyclic(("1/2", "1/2", c9)),
            cyclic(("1", c0, c8)),
            cyclic(("1/2", c3, c7)),
            cyclic((c2, c1, c6)),
            cyclic((c0, c4, c5)),
        ),
        description=(
            "Truncated icosidodecahedron: 30 squares, 20 hexagons, "
            "12 decagons."
        ),
    )


@register("icosidodecahedron_truncated_biscribed", "archimedean")
def icosidodecahedron_truncated_biscribed() -> ShapeDefinition:
    s3 = "sqrt(3)"
    s5 = "sqrt(5)"
    s15 = "sqrt(15)"
    r_plus = "sqrt(2*(5 + sqrt(5)))"
    r_minus = "sqrt(2*(5 - sqrt(5)))"
    r_5 = "sqrt(5 + 2*sqrt(5))"
    c0 = f"(4 - 3*{s3} + 4*{s5} - {s15} - {r_plus})/4"
    c1 = f"({s3} - 3 - {s5} + {s15})/2"
    c2 = f"(3 - {s3} + {s5} - {r_5})/2"
    c3 = f"({r_plus} - 1 - {s5})/2"
    c4 = f"(2 - 3*{s3} + 2*{s5} - {s15} + {r_plus})/4"
    c5 = f"(3*{s3} - 4 + {s15} - {r_plus})/4"
    c6 = f"(2 + {s3} - {r_5})/2"
    c7 = f"(3*{s3} - 6 - 2*{s5} + {s15} + {r_plus})/4"
    c8 = f"(6 - {s3} + 2*{s5} - {s15} - {r_minus})/4"
    c9 = f"({r_5} - {s3})/2"
    c10 = f"({s3} - 1 - {s5} + {r_5})/2"
    c11 = f"(2 - {s3} + 2*{s5} - {s15} + {r_minus})/4"
    c12 = f"({s3} + {s15} - {r_minus})/4"
    c13 = f"({s3} - 4 + {s15} + {r_minus})/4"
    return ShapeDefinition(
        name="icosidodecahedron_truncated_biscribed",
        family="archimedean",
        vertices=join(
            cyclic((c3, c1, "1")),
            cyclic((c4, c2, c13)),
            cyclic((c0, c9, c12)),
            cyclic((c7, c6, c11)),
            cyclic((c5, c10, c8)),
        ),
        description="Biscribed truncated icosidodecahedron.",
    )


@register("rhombicuboctahedron", "archimedean")
def rhombicuboctahedron() -> ShapeDefinition:
    c0 = "(1 + sqrt(2))/2"
    return ShapeDefinition(
        name="rhombicuboctahedron",
        family="archimedean",
        vertices=join(cyclic(("1/2", "1/2", c0))),
        description="Rhombicuboctahedron: 8 triangles, 18 squares.",
    )


@register("rhombicuboctahedron_truncated", "archimedean")
def rhombicuboctahedron_truncated() -> ShapeDefinition:
    s0 = "sqrt(3*(50 - 33*sqrt(2) - sqrt(2*(2327 - 1644*sqrt(2)))))/12"
    s1 = "sqrt(3*(8 - 3*sqrt(2) + sqrt(2*(29 - 18*sqrt(2)))))/12"
    s2 = "sqrt(3*(18 + sqrt(2) - sqrt(2*(103 - 24*sqrt(2)))))/12"
    s3 = "sqrt(28 + 5*sqrt(2) + sqrt(2*(117 - 46*sqrt(2))))/12"
    s4 = "sqrt(112 - sqrt(2) - sqrt(2*(213 + 134*sqrt(2))))/12"
    s5 = "sqrt(3*(30 - sqrt(2) + sqrt(2*(103 - 24*sqrt(2)))))/12"
    return ShapeDefinition(
        name="rhombicuboctahedron_truncated",
        family="archimedean",
        vertices=join(permuted((s0, s2, s5)), permuted((s1, s3, s4))),
        description="Truncated rhombicuboctahedron.",
    )


@register("rhombicosidodecahedron", "archimedean")
def rhombicosidodecahedron() -> ShapeDefinition:
    return ShapeDefinition(
        name="rhombicosidodecahedron",
        family="archimedean",
        vertices=rhombicosidodecahedron_vertices(),
        description=(
            "Rhombicosidodecahedron: 20 triangles, 30 squares, 12 pentagons."
        ),
    )


def rhombicosidodecahedron_vertices() -> tuple[tuple[str, str, str], ...]:
    """Vertex table shared with the gyrate rhombicosidodecahedra."""
    c0 = "(1 + sqrt(5))/4"
    c1 = "(3 + sqrt(5))/4"
    c2 = PHI
    c3 = "(5 + sqrt(5))/4"
    c4 = "(2 + sqrt(5))/2"
    return join(
        cyclic(("1/2", "1/2", c4)),
        cyclic(("0", c1, c3)),
        cyclic((c1, c0, c2)),
    )


@register("snub_cube", "archimedean", chiral=True)
def snub_cube(chirality: str = "levo") -> ShapeDefinition:
    x = "cbrt(17 + 3*sqrt(33))"
    y = "cbrt(17 - 3*sqrt(33))"
    c0 = f"sqrt(3*(4 - {x} - {y}))/6"
    c1 = f"sqrt(3*(2 + {x} + {y}))/6"
    c2 = "sqrt(3*(4 + cbrt(199 + 3*sqrt(33)) + cbrt(199 - 3*sqrt(33))))/6"
    parity = hand_parity(chirality, "even")
    return ShapeDefinition(
        name="snub_cube",
        family="archimedean",
        vertices=join(
            cyclic((c1, c0, c2), parity),
            cyclic((c0, c1, c2), mirror_parity(parity)),
        ),
        chirality=chirality,
        description="Snub cube: 32 triangles, 6 squares.",
    )


@register("snub_cube_biscribed", "archimedean", chiral=True)
def snub_cube_biscribed(chirality: str = "levo") -> ShapeDefinition:
    c0 = "(1 + 2*sqrt(3) - sqrt(1 + 8*sqrt(3)))/2"
    c1 = "(sqrt(1 + 8*sqrt(3)) - 3)/2"
    parity = hand_parity(chirality, "even")
    return ShapeDefinition(
        name="snub_cube_biscribed",
        family="archimedean",
        vertices=join(
            cyclic((c1, c0, "1"), parity),
            cyclic((c0, c1, "1"), mirror_parity(parity)),
        ),
        chirality=chirality,
        description="Biscribed snub cube.",
    )


@register("snub_dodecahedron", "archimedean", chiral=True)
def snub_dodecahedron(chirality: str = "levo") -> ShapeDefinition:
    xi = "(cbrt(phi/2 + sqrt(phi - 5/27)/2) + cbrt(phi/2 - sqrt(phi - 5/27)/2))"
    w = f"sqrt(3 - {xi}**2)"
    u = f"sqrt(({xi} - 1 - 1/{xi})*phi)"
    v = f"sqrt(1 - {xi} + (1 + phi)/{xi})"
    t = f"sqrt({xi}*({xi} + phi) + 1)"
    c0 = f"phi*{w}/2"
    c1 = f"{xi}*phi*{w}/2"
    c2 = f"phi*{u}/2"
    c3 = f"{xi}**2*phi*{w}/2"
    c4 = f"{xi}*phi*{u}/2"
    c5 = f"phi*{v}/2"
    c6 = f"phi*sqrt({xi} + 1 - phi)/2"
    c7 = f"{xi}**2*phi*{u}/2"
    c8 = f"{xi}*phi*{v}/2"
    c9 = f"sqrt(({xi} + 2)*phi + 2)/2"
    c10 = f"{xi}*sqrt({xi}*(1 + phi) - phi)/2"
    c11 = f"sqrt({xi}**2*(1 + 2*phi) - phi)/2"
    c12 = f"phi*sqrt({xi}**2 + {xi})/2"
    c13 = f"phi**2*{t}/(2*{xi})"
    c14 = f"phi*{t}/2"
    odd = hand_parity(chirality, "odd")
    even = mirror_parity(odd)
    return ShapeDefinition(
        name="snub_dodecahedron",
        family="archimedean",
        vertices=join(
            cyclic((c2, c1, c14), odd),
            cyclic((c3, c4, c13), even),
            cyclic((c0, c8, c12), odd),
            cyclic((c7, c6, c11), odd),
            cyclic((c9, c5, c10), even),
        ),
        chirality=chirality,
        description="Snub dodecahedron: 80 triangles, 12 pentagons.",
    )
