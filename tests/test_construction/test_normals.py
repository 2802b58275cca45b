"""Tests for Newell normals and outward orientation."""

import mpmath
import pytest

from nanoshapes.construction.normals import face_normal, newell_vector
from nanoshapes.model.errors import DegenerateGeometryError
from nanoshapes.model.vector import Vector3, context_for

CTX = context_for(40)
EPS = CTX.mpf(10) ** -35


def points(*coords):
    return [Vector3.from_values(c, CTX) for c in coords]


def close(v, expected):
    return all(abs(a - b) < EPS for a, b in zip(v, expected))


class TestNewellVector:
    def test_triangle_is_cross_product(self):
        tri = points((0, 0, 0), (1, 0, 0), (0, 1, 0))
        assert newell_vector(tri).as_tuple() == (0, 0, 1)

    def test_square_magnitude_is_twice_area(self):
        square = points((0, 0, 1), (2, 0, 1), (2, 2, 1), (0, 2, 1))
        n = newell_vector(square)
        assert close(n, (0, 0, 8))

    def test_reversed_loop_flips_sign(self):
        loop = points((1, 0, 0), (0, 1, 0), (-1, 0, 0), (0, -1, 0))
        forward = newell_vector(loop)
        backward = newell_vector(loop[::-1])
        assert close(forward, (-backward.x, -backward.y, -backward.z))

    def test_too_few_vertices(self):
        with pytest.raises(DegenerateGeometryError, match="at least 3"):
            newell_vector(points((0, 0, 0), (1, 0, 0)))


class TestFaceNormal:
    def test_unit_length(self):
        n = face_normal(points((1, 0, 0), (0, 1, 0), (0, 0, 1)))
        assert abs(n.norm() - 1) < EPS
        s = 1 / CTX.sqrt(3)
        assert close(n, (s, s, s))

    def test_outward_whatever_the_winding(self):
        tri = points((1, 0, 0), (0, 1, 0), (0, 0, 1))
        assert close(face_normal(tri), face_normal(tri[::-1]))

    def test_inward_winding_kept_without_force(self):
        tri = points((1, 0, 0), (0, 0, 1), (0, 1, 0))
        n = face_normal(tri, force_outward=False)
        s = 1 / CTX.sqrt(3)
        assert close(n, (-s, -s, -s))

    def test_pentagon(self):
        pentagon = points(*[
            (mpmath.cos(2 * mpmath.pi * k / 5), mpmath.sin(2 * mpmath.pi * k / 5), -2)
            for k in range(5)
        ])
        n = face_normal(pentagon)
        assert abs(n.z + 1) < CTX.mpf(10) ** -12

    def test_collinear_raises(self):
        with pytest.raises(DegenerateGeometryError, match="collinear"):
            face_normal(points((1, 0, 0), (2, 0, 0), (3, 0, 0)))

    def test_coincident_raises(self):
        with pytest.raises(DegenerateGeometryError, match="collinear"):
            face_normal(points((1, 1, 1), (1, 1, 1), (1, 1, 1), (1, 1, 1)))

    def test_nearly_collinear_within_tolerance_raises(self):
        tri = points((1, 0, 0), (2, "1e-30", 0), (3, 0, 0))
        with pytest.raises(DegenerateGeometryError):
            face_normal(tri, tolerance=CTX.mpf(10) ** -20)
