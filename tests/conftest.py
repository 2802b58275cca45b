"""Shared test fixtures for nanoshapes."""

from itertools import combinations

import pytest

from nanoshapes.catalog import build_shape
from nanoshapes.construction.builder import build_polyhedron

CUBE_VERTICES = [
    (x, y, z) for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)
]
"""Corners of the cube ``[-1, 1]^3``."""

CUBE_FACES = [
    (0, 1, 3, 2), (4, 6, 7, 5),
    (0, 4, 5, 1), (2, 3, 7, 6),
    (0, 2, 6, 4), (1, 5, 7, 3),
]

TETRAHEDRON_VERTICES = [
    ("1", "1", "1"), ("1", "-1", "-1"), ("-1", "1", "-1"), ("-1", "-1", "1"),
]
TETRAHEDRON_FACES = list(combinations(range(4), 3))


@pytest.fixture
def cube():
    """Catalog cube spanning ``[-1, 1]^3`` at 50 digits."""
    return build_shape("cube", radius="1", precision=50)


@pytest.fixture
def octahedron():
    """Catalog octahedron of circumradius 1 at 50 digits."""
    return build_shape("octahedron", radius="1", precision=50)


@pytest.fixture
def tetrahedron():
    """Regular tetrahedron of circumradius 1 built from raw tables."""
    return build_polyhedron(
        radius="1",
        precision=30,
        basis_vertices=TETRAHEDRON_VERTICES,
        faces=TETRAHEDRON_FACES,
    )
