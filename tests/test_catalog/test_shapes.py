"""Geometric checks run over every shape in the catalog."""

from functools import lru_cache

import mpmath
import numpy as np
import pytest

from nanoshapes.catalog import available_shapes, build_shape, get_shape
from nanoshapes.catalog._registry import SHAPES
from nanoshapes.expressions import evaluate, evaluate_vector

PRECISION = 30

SOLIDS = [name for name in available_shapes() if name != "sphere"]

CHIRAL = [name for name, entry in SHAPES.items() if entry.chiral]

# Solids whose canonical vertices already lie on one sphere, so projection
# leaves their faces planar.
FACE_COUNTS = {
    "tetrahedron": {3: 4},
    "cube": {4: 6},
    "octahedron": {3: 8},
    "dodecahedron": {5: 12},
    "icosahedron": {3: 20},
    "cuboctahedron": {3: 8, 4: 6},
    "cuboctahedron_truncated": {4: 12, 6: 8, 8: 6},
    "cube_truncated": {3: 8, 8: 6},
    "tetrahedron_truncated": {3: 4, 6: 4},
    "octahedron_truncated": {4: 6, 6: 8},
    "dodecahedron_truncated": {3: 20, 10: 12},
    "icosahedron_truncated": {5: 12, 6: 20},
    "icosidodecahedron": {3: 20, 5: 12},
    "icosidodecahedron_truncated": {4: 30, 6: 20, 10: 12},
    "rhombicuboctahedron": {3: 8, 4: 18},
    "rhombicosidodecahedron": {3: 20, 4: 30, 5: 12},
    "snub_cube": {3: 32, 4: 6},
    "prism_octagonal": {4: 8, 8: 2},
    "rhombicuboctahedron_gyrate": {3: 8, 4: 18},
    "orthobicupola_triangular": {3: 8, 4: 6},
    "rhombicosidodecahedron_gyrate": {3: 20, 4: 30, 5: 12},
    "rhombicosidodecahedron_parabigyrate": {3: 20, 4: 30, 5: 12},
    "rhombicosidodecahedron_metabigyrate": {3: 20, 4: 30, 5: 12},
    "rhombicosidodecahedron_trigyrate": {3: 20, 4: 30, 5: 12},
    "icosahedron_truncated_biscribed": {5: 12, 6: 20},
    # The apexes sit slightly inside the ring sphere; projection moves
    # them along the axis, which keeps every face planar.
    "dipyramid_pentagonal_elongated": {3: 10, 4: 5},
}


@lru_cache(maxsize=None)
def built(name, chirality=None):
    return build_shape(name, "1", PRECISION, chirality=chirality)


def mirrored_rows(arr):
    flipped = arr * np.array([-1.0, 1.0, 1.0])
    return sorted(tuple(row) for row in np.round(flipped, 9))


class TestCatalogContents:
    def test_every_solid_is_listed(self):
        assert len(SOLIDS) >= 52

    def test_face_count_table_refers_to_catalog(self):
        assert set(FACE_COUNTS) <= set(SOLIDS)

    @pytest.mark.parametrize("name", SOLIDS)
    def test_definition_matches_registry(self, name):
        definition = get_shape(name)
        assert definition.name == name
        assert definition.family == SHAPES[name].family
        assert definition.is_chiral == SHAPES[name].chiral


@pytest.mark.parametrize("name", SOLIDS)
class TestEveryShape:
    def test_vertices_on_circumsphere(self, name):
        shape = built(name)
        for v in shape.vertices:
            assert abs(v.norm() - shape.circumradius) <= shape.tolerance

    def test_unit_outward_normals(self, name):
        shape = built(name)
        for face in shape.faces:
            assert abs(face.normal.norm() - 1) <= shape.tolerance
            assert face.offset > shape.tolerance
            assert face.offset <= shape.circumradius + shape.tolerance

    def test_origin_inside(self, name):
        assert built(name).in_bounds((0, 0, 0))

    @pytest.mark.parametrize("direction", [
        (1, 0, 0), (0, -1, 0), (0, 0, 1), (1, 1, 1), (-2, 3, -5),
    ])
    def test_far_points_outside(self, name, direction):
        shape = built(name)
        point = tuple(10 * c * shape.circumradius for c in direction)
        assert not shape.in_bounds(point)

    def test_every_vertex_bounds_a_face(self, name):
        shape = built(name)
        used = {i for face in shape.faces for i in face.indices}
        assert used == set(range(shape.n_vertices))

    def test_faces_have_at_least_three_vertices(self, name):
        assert all(face.arity >= 3 for face in built(name).faces)

    def test_every_vertex_inside(self, name):
        shape = built(name)
        for v in shape.vertices:
            assert shape.in_bounds(v), f"{name}: vertex {v.to_array()} tested outside"

    def test_just_beyond_each_vertex_is_outside(self, name):
        shape = built(name)
        factor = 1 + shape.context.mpf(10) ** -12
        for v in shape.vertices:
            assert not shape.in_bounds(v.scale(factor))

    def test_midpoints_of_face_edges_inside(self, name):
        shape = built(name)
        half = shape.context.mpf(1) / 2
        for face in shape.faces:
            a, b = face.vertices[0], face.vertices[1]
            assert shape.in_bounds(a.add(b).scale(half))


@pytest.mark.parametrize("name, expected", sorted(FACE_COUNTS.items()))
def test_face_counts(name, expected):
    assert built(name).face_arities() == expected


class TestRadius:
    @pytest.mark.parametrize("name", ["icosahedron", "snub_cube", "hexecontahedron_deltoidal"])
    def test_vertices_scale_with_radius(self, name):
        shape = build_shape(name, "7.25", 25)
        for v in shape.vertices:
            assert abs(v.norm() - mpmath.mpf("7.25")) <= shape.tolerance

    def test_cube_radius_is_half_extent(self):
        cube = build_shape("cube", "2", 25)
        assert cube.in_bounds(("2", "-2", "2"))
        assert not cube.in_bounds(("2.0001", "0", "0"))

    def test_precision_does_not_move_vertices(self):
        low = build_shape("dodecahedron", "1", 20)
        high = build_shape("dodecahedron", "1", 60)
        np.testing.assert_allclose(low.vertex_array(), high.vertex_array(), atol=1e-15)
        for a, b in zip(low.vertices, high.vertices):
            assert abs(b.x - a.x) < mpmath.mpf(10) ** -19


class TestSymmetry:
    POINTS = [
        ("0.31", "0.42", "0.2"),
        ("0.6", "-0.35", "0.07"),
        ("0.5", "0.5", "0.0001"),
        ("0.9", "0.05", "0.05"),
    ]

    @staticmethod
    def images(p):
        x, y, z = p
        neg = lambda s: s[1:] if s.startswith("-") else "-" + s  # noqa: E731
        return [
            (y, x, z), (z, y, x), (x, z, y), (y, z, x),
            (neg(x), y, z), (x, neg(y), z), (neg(x), neg(y), neg(z)),
        ]

    @pytest.mark.parametrize("name", ["cube", "octahedron", "cuboctahedron"])
    def test_cubic_symmetry(self, name):
        shape = built(name)
        for p in self.POINTS:
            expected = shape.in_bounds(p)
            for q in self.images(p):
                assert shape.in_bounds(q) == expected, (name, p, q)

    def test_octahedron_boundary(self):
        octahedron = built("octahedron")
        assert octahedron.in_bounds(("0.5", "0.25", "0.25"))
        assert not octahedron.in_bounds(("0.5", "0.25", "0.2500001"))


@pytest.mark.parametrize("name", CHIRAL)
class TestChirality:
    def test_hands_differ(self, name):
        levo = built(name, "levo").vertex_array()
        dextro = built(name, "dextro").vertex_array()
        levo_rows = sorted(tuple(r) for r in np.round(levo, 9))
        dextro_rows = sorted(tuple(r) for r in np.round(dextro, 9))
        assert levo_rows != dextro_rows

    def test_dextro_is_mirror_of_levo(self, name):
        levo = built(name, "levo").vertex_array()
        dextro = built(name, "dextro").vertex_array()
        assert mirrored_rows(levo) == sorted(
            tuple(r) for r in np.round(dextro, 9)
        )

    def test_same_face_structure(self, name):
        assert built(name, "levo").face_arities() == built(name, "dextro").face_arities()

    def test_mirrored_queries_agree(self, name):
        levo = built(name, "levo")
        dextro = built(name, "dextro")
        rng = np.random.default_rng(7)
        points = rng.uniform(-1.0, 1.0, size=(40, 3))
        for x, y, z in points:
            assert levo.in_bounds((x, y, z)) == dextro.in_bounds((-x, y, z))


class TestPentagonalHexecontahedron:
    def test_vertex_count(self):
        assert len(get_shape("hexecontahedron_pentagonal").vertices) == 92

    @pytest.mark.parametrize("hand", ["levo", "dextro"])
    def test_hands_are_registered(self, hand):
        definition = get_shape(f"hexecontahedron_pentagonal_{hand}")
        assert definition.chirality == hand
        assert definition.family == "catalan"

    def test_cubic_root(self):
        # x solves x**3 = 2*x + phi.
        x = "(cbrt(phi/2 + sqrt(phi - 5/27)/2) + cbrt(phi/2 - sqrt(phi - 5/27)/2))"
        residual = evaluate(f"{x}**3 - 2*{x} - phi", 40)
        assert abs(residual) < mpmath.mpf(10) ** -35

    def test_built_vertices_distinct(self):
        rows = {tuple(r) for r in np.round(built("hexecontahedron_pentagonal").vertex_array(), 9)}
        assert len(rows) == 92


class TestBiscribedTruncatedIcosahedron:
    def test_vertex_count(self):
        assert len(get_shape("icosahedron_truncated_biscribed").vertices) == 60

    def test_canonical_vertices_share_a_sphere(self):
        # Biscribed: projection leaves the vertex table in place.
        norms = [
            evaluate_vector(v, 40).norm()
            for v in get_shape("icosahedron_truncated_biscribed").vertices
        ]
        assert max(norms) - min(norms) < mpmath.mpf(10) ** -35
