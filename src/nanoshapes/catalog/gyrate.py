"""Gyration of cupola caps, for the gyrate Johnson solids.

A gyrate solid is an Archimedean solid with one or more of its cupolae
turned about their own axis.  Only the cap polygon of each cupola moves;
the cupola's base is symmetric under the turn.  Rotated coordinates are
composed as expression strings with Rodrigues' formula, so the result
is as exact as the original vertex table.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from nanoshapes.expressions import evaluate_vector_in
from nanoshapes.model.vector import context_for

logger = logging.getLogger(__name__)

# Precision used only to pick the cap vertices.
_SELECT_DIGITS = 30


def rotate_expr(
    vertex: Sequence[str],
    axis: Sequence[str],
    cos: str,
    sin: str,
) -> tuple[str, str, str]:
    """Rotate *vertex* about *axis* by the angle with the given cosine and sine.

    Uses ``v cos + (k x v) sin + k (k . v)(1 - cos)`` with ``k`` the
    unit vector along *axis*; *axis* need not be normalised.

    Args:
        vertex: Three coordinate expressions.
        axis: Three expressions for the rotation axis.
        cos: Expression for the cosine of the angle.
        sin: Expression for the sine of the angle.

    Returns:
        The rotated vertex as three expressions.
    """
    v = [f"({c})" for c in vertex]
    a = [f"({c})" for c in axis]
    norm2 = f"({a[0]}**2 + {a[1]}**2 + {a[2]}**2)"
    proj = f"({a[0]}*{v[0]} + {a[1]}*{v[1]} + {a[2]}*{v[2]})"
    cross = (
        f"({a[1]}*{v[2]} - {a[2]}*{v[1]})",
        f"({a[2]}*{v[0]} - {a[0]}*{v[2]})",
        f"({a[0]}*{v[1]} - {a[1]}*{v[0]})",
    )
    return tuple(
        f"{v[i]}*({cos}) + {cross[i]}*({sin})/sqrt({norm2})"
        f" + {a[i]}*{proj}*(1 - ({cos}))/{norm2}"
        for i in range(3)
    )


def cap_indices(
    vertices: Sequence[Sequence[str]],
    axis: Sequence[str],
    cap_size: int,
) -> list[int]:
    """Return the indices of the *cap_size* vertices furthest along *axis*.

    Raises:
        ValueError: If the cap is not separated from the remaining
            vertices, i.e. the axis does not pass through a cap face.
    """
    ctx = context_for(_SELECT_DIGITS)
    k = evaluate_vector_in(axis, ctx)
    heights = [evaluate_vector_in(v, ctx).dot(k) for v in vertices]
    order = sorted(range(len(vertices)), key=lambda i: heights[i], reverse=True)
    cap = order[:cap_size]
    top = heights[cap[0]]
    spread = top - heights[cap[-1]]
    gap = heights[cap[-1]] - heights[order[cap_size]]
    if spread > ctx.mpf(10) ** (-20) * abs(top) or gap <= 0:
        raise ValueError(
            f"axis {tuple(axis)!r} does not select a cap of "
            f"{cap_size} coplanar vertices"
        )
    return sorted(cap)


def gyrate_vertices(
    vertices: Sequence[Sequence[str]],
    axes: Sequence[Sequence[str]],
    *,
    cos: str,
    sin: str,
    cap_size: int,
) -> tuple[tuple[str, str, str], ...]:
    """Turn the cap selected by each axis and return the new vertex table.

    Args:
        vertices: The parent solid's vertex table.
        axes: One axis per cupola to gyrate.  Caps must not share
            vertices.
        cos: Cosine of the turn angle.
        sin: Sine of the turn angle.
        cap_size: Vertices per cap (5 for a pentagonal cupola, 4 for
            a square cupola).

    Raises:
        ValueError: If an axis does not select a cap, or two caps
            overlap.
    """
    result = [tuple(str(c) for c in v) for v in vertices]
    moved: set[int] = set()
    for axis in axes:
        cap = cap_indices(vertices, axis, cap_size)
        if moved.intersection(cap):
            raise ValueError(f"cap around axis {tuple(axis)!r} overlaps another cap")
        moved.update(cap)
        for i in cap:
            result[i] = rotate_expr(vertices[i], axis, cos, sin)
    logger.debug("Gyrated %d caps, %d vertices moved", len(axes), len(moved))
    return tuple(result)
