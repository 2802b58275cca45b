"""Tests for Polyhedron, Face and Sphere containment."""

import dataclasses

import mpmath
import numpy as np
import pytest

from nanoshapes.construction.builder import build_sphere
from nanoshapes.model.errors import MalformedPolyhedronError
from nanoshapes.model.polyhedron import Polyhedron, in_bounds
from nanoshapes.model.sphere import Sphere
from nanoshapes.model.vector import Vector3, context_for


class TestCubeContainment:
    """Cube spanning ``[-1, 1]^3``."""

    def test_just_inside(self, cube):
        assert cube.in_bounds(("0.99", "0", "0"))

    def test_just_outside(self, cube):
        assert not cube.in_bounds(("1.01", "0", "0"))

    def test_origin_inside(self, cube):
        assert cube.in_bounds((0, 0, 0))

    def test_face_point_inside(self, cube):
        assert cube.in_bounds(("1", "0.5", "-0.25"))

    def test_edge_and_corner_inside(self, cube):
        assert cube.in_bounds(("1", "1", "0"))
        assert cube.in_bounds(("1", "1", "1"))
        assert cube.in_bounds(("-1", "-1", "-1"))

    def test_tiny_excursion_beyond_precision_is_inside(self, cube):
        assert cube.in_bounds(("1.0000000000000000000000000000000000000000000000000001", "0", "0"))

    def test_excursion_above_tolerance_is_outside(self, cube):
        assert not cube.in_bounds(("1.000000000000000000000000000000000000001", "0", "0"))

    @pytest.mark.parametrize("point", [
        (2, 0, 0), (0, -2, 0), (0, 0, 1.5), (1.1, 1.1, 1.1),
    ])
    def test_far_points_outside(self, cube, point):
        assert not cube.in_bounds(point)

    def test_accepts_vector(self, cube):
        p = Vector3.from_values(("0.5", "0.5", "0.5"), context_for(12))
        assert cube.in_bounds(p)

    def test_accepts_numpy_row(self, cube):
        assert cube.in_bounds(np.array([0.25, -0.75, 0.5]))

    @pytest.mark.parametrize("point", [
        (float("nan"), 0, 0),
        (0, float("inf"), 0),
        (0, 0, float("-inf")),
    ])
    def test_non_finite_points_are_outside(self, cube, point):
        assert cube.in_bounds(point) is False

    def test_module_level_in_bounds(self, cube):
        assert in_bounds(cube, ("0.5", "0", "0"))
        assert not in_bounds(cube, ("5", "0", "0"))

    def test_symmetry(self, cube):
        for p in [("0.7", "-0.3", "0.99"), ("1.2", "0", "0.1")]:
            expected = cube.in_bounds(p)
            for q in [
                (p[1], p[0], p[2]),
                (p[2], p[1], p[0]),
                ("-" + p[0], p[1], p[2]),
            ]:
                assert cube.in_bounds(q) == expected

    def test_idempotent(self, cube):
        p = ("0.999999", "0.999999", "0.999999")
        assert cube.in_bounds(p) == cube.in_bounds(p)


class TestPolyhedronAttributes:
    def test_counts(self, cube):
        assert cube.n_vertices == 8
        assert cube.n_faces == 6
        assert cube.face_arities() == {4: 6}

    def test_precision_fields(self, cube):
        assert cube.precision == 50
        assert cube.working_digits == 60
        assert cube.context.dps == 60

    def test_radius_and_circumradius(self, cube):
        assert cube.radius == 1
        assert abs(cube.circumradius - mpmath.sqrt(3)) < mpmath.mpf(10) ** -14

    def test_tolerance_scales_with_precision(self, cube):
        expected = cube.circumradius * mpmath.mpf(10) ** -50
        assert abs(cube.tolerance / expected - 1) < mpmath.mpf(10) ** -10

    def test_name(self, cube):
        assert cube.name == "cube"

    def test_vertex_array(self, cube):
        arr = cube.vertex_array()
        assert arr.shape == (8, 3)
        np.testing.assert_allclose(np.abs(arr), 1.0)

    def test_immutable(self, cube):
        with pytest.raises(dataclasses.FrozenInstanceError):
            cube.radius = 2

    def test_float_distances_shape(self, cube):
        d = cube.float_distances(np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]]))
        assert d.shape == (2, 6)
        np.testing.assert_allclose(d[0], -1.0)
        assert d[1].max() == pytest.approx(1.0)

    def test_empty_faces_rejected(self, cube):
        with pytest.raises(MalformedPolyhedronError, match="at least one face"):
            dataclasses.replace(cube, faces=())

    def test_working_digits_below_precision_rejected(self, cube):
        with pytest.raises(ValueError, match="working_digits"):
            dataclasses.replace(cube, working_digits=10)


class TestFace:
    def test_cube_faces(self, cube):
        for face in cube.faces:
            assert face.arity == 4
            assert face.anchor == face.vertices[0]
            assert abs(face.offset - 1) < cube.tolerance
            assert abs(face.normal.norm() - 1) < cube.tolerance

    def test_signed_distance(self, cube):
        ctx = cube.context
        face = next(f for f in cube.faces if f.normal.x > ctx.mpf("0.5"))
        inside = Vector3.from_values((0, 0, 0), ctx)
        outside = Vector3.from_values((3, 0, 0), ctx)
        assert abs(face.signed_distance(inside) + 1) < cube.tolerance
        assert abs(face.signed_distance(outside) - 2) < cube.tolerance


class TestSphere:
    @pytest.fixture
    def sphere(self):
        return build_sphere("2", 30)

    def test_inside_and_outside(self, sphere):
        assert sphere.in_bounds((0, 0, 0))
        assert sphere.in_bounds(("1.99", "0", "0"))
        assert not sphere.in_bounds(("2.01", "0", "0"))
        assert not sphere.in_bounds((1.5, 1.5, 0))

    def test_surface_is_inside(self, sphere):
        assert sphere.in_bounds(("0", "2", "0"))
        assert sphere.in_bounds(("1.2", "1.6", "0"))

    def test_non_finite(self, sphere):
        assert not sphere.in_bounds((float("nan"), 0, 0))

    def test_attributes(self, sphere):
        assert isinstance(sphere, Sphere)
        assert sphere.circumradius == 2
        assert sphere.name == "sphere"
        assert sphere.working_digits == 40

    def test_float_distances(self, sphere):
        d = sphere.float_distances(np.array([[0.0, 0.0, 0.0], [0.0, 3.0, 4.0]]))
        assert d.shape == (2, 1)
        np.testing.assert_allclose(d[:, 0], [-2.0, 3.0])

    def test_non_positive_radius_rejected(self):
        ctx = context_for(40)
        with pytest.raises(MalformedPolyhedronError, match="positive"):
            Sphere(
                radius=ctx.mpf(0), precision=30, working_digits=40,
                tolerance=ctx.mpf(0),
            )


class TestPolyhedronIsFrozenDataclass:
    def test_is_dataclass(self, cube):
        assert dataclasses.is_dataclass(Polyhedron)
        assert dataclasses.is_dataclass(cube)
