"""Vertex tables from symmetry orbits of seed coordinates.

Most catalog solids have vertex sets that are unions of a few orbits
such as "all cyclic permutations of (0, 1, phi) with all sign
combinations".  The helpers here expand such seeds into explicit
expression triples.  Signs apply to non-zero entries only, and sign
*parity* counts the number of minus signs.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import permutations, product

from nanoshapes.expressions import negate

_SIGN_MODES = ("all", "even", "odd", "none")


def _cyclic_perms(seed: Sequence) -> list[tuple]:
    a, b, c = seed
    return [(a, b, c), (b, c, a), (c, a, b)]


def _all_perms(seed: Sequence) -> list[tuple]:
    return list(permutations(seed))


def _sign_patterns(signs: str, positions: Sequence[int]) -> list[tuple[int, ...]]:
    if signs not in _SIGN_MODES:
        raise ValueError(f"signs must be one of {_SIGN_MODES}, got {signs!r}")
    if signs == "none":
        return [(1, 1, 1)]
    patterns = []
    for choice in product((1, -1), repeat=len(positions)):
        pattern = [1, 1, 1]
        for pos, s in zip(positions, choice):
            pattern[pos] = s
        n_minus = pattern.count(-1)
        if signs == "even" and n_minus % 2:
            continue
        if signs == "odd" and not n_minus % 2:
            continue
        patterns.append(tuple(pattern))
    return patterns


def _apply(triple: tuple, pattern: tuple[int, ...]) -> tuple[str, str, str]:
    return tuple(
        negate(c) if s < 0 else str(c).strip()
        for c, s in zip(triple, pattern)
    )


def _unique(vertices: Iterable[tuple]) -> list[tuple[str, str, str]]:
    return list(dict.fromkeys(vertices))


def signed(
    seed: Sequence,
    signs: str = "all",
    positions: Sequence[int] = (0, 1, 2),
) -> list[tuple[str, str, str]]:
    """Expand *seed* over sign changes, without permuting it.

    Args:
        seed: Three expressions.
        signs: ``"all"``, ``"even"``, ``"odd"`` or ``"none"``.
        positions: Coordinates that may change sign.

    Returns:
        Distinct expression triples.  Zero coordinates do not produce
        duplicate ``-0`` vertices.
    """
    return _unique(
        _apply(tuple(seed), pattern)
        for pattern in _sign_patterns(signs, positions)
    )


def cyclic(seed: Sequence, signs: str = "all") -> list[tuple[str, str, str]]:
    """Expand *seed* over its three cyclic permutations and sign changes.

    With ``signs="even"`` or ``"odd"`` only sign patterns with an even
    or odd number of minus signs are used; the two choices give mirror
    images of each other.
    """
    return _unique(
        v
        for perm in _cyclic_perms(seed)
        for v in signed(perm, signs)
    )


def permuted(seed: Sequence, signs: str = "all") -> list[tuple[str, str, str]]:
    """Expand *seed* over all six permutations and sign changes."""
    return _unique(
        v
        for perm in _all_perms(seed)
        for v in signed(perm, signs)
    )


def mirror_parity(signs: str) -> str:
    """Return the sign parity of the mirror-image orbit."""
    return {"even": "odd", "odd": "even"}.get(signs, signs)


def join(*orbits: Iterable[tuple]) -> tuple[tuple[str, str, str], ...]:
    """Concatenate orbits into one duplicate-free vertex table."""
    return tuple(_unique(v for orbit in orbits for v in orbit))


def hand_parity(chirality: str, levo: str) -> str:
    """Sign parity of an orbit for *chirality*, given its levo parity.

    Raises:
        ValueError: If *chirality* is not ``"levo"`` or ``"dextro"``.
    """
    if chirality == "levo":
        return levo
    if chirality == "dextro":
        return mirror_parity(levo)
    raise ValueError(
        f"chirality must be 'levo' or 'dextro', got {chirality!r}"
    )
