"""Face topology of a convex vertex set from its convex hull."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence
from functools import lru_cache

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from nanoshapes._constants import COPLANAR_COS_TOL
from nanoshapes.model.errors import DegenerateGeometryError

logger = logging.getLogger(__name__)


def derive_faces(
    vertices: np.ndarray | Sequence[Sequence[float]],
    cos_tol: float = COPLANAR_COS_TOL,
) -> tuple[tuple[int, ...], ...]:
    """Compute the polygonal faces of the convex hull of *vertices*.

    The hull is triangulated by Qhull, then adjacent triangles whose
    normals agree to within *cos_tol* are merged into one polygon.
    Each returned loop is wound counter-clockwise when seen from
    outside.

    Results are cached per vertex table, so repeatedly building a
    catalog shape only runs Qhull once.

    Args:
        vertices: Array-like of shape ``(n, 3)``, centred on the origin.
        cos_tol: Cosine threshold for treating two triangle normals as
            parallel.  The default is tight enough that distinct faces
            of every catalog solid stay separate.

    Returns:
        Tuple of faces, each a tuple of vertex indices in loop order.

    Raises:
        DegenerateGeometryError: If the points do not span a solid.
    """
    key = tuple(tuple(float(c) for c in v) for v in vertices)
    return _derive_faces_cached(key, cos_tol)


@lru_cache(maxsize=None)
def _derive_faces_cached(
    key: tuple[tuple[float, float, float], ...],
    cos_tol: float,
) -> tuple[tuple[int, ...], ...]:
    coords = np.array(key, dtype=float)
    if coords.ndim != 2 or coords.shape[1] != 3 or len(coords) < 4:
        raise DegenerateGeometryError(
            f"need at least 4 points in 3D to form a solid, got shape "
            f"{coords.shape}"
        )
    try:
        hull = ConvexHull(coords)
    except QhullError as exc:
        raise DegenerateGeometryError(
            f"vertices do not span a convex solid: {exc}"
        ) from exc

    missing = sorted(set(range(len(coords))) - set(hull.vertices.tolist()))
    if missing:
        logger.warning(
            "Vertices %s lie inside the convex hull and bound no face", missing,
        )

    faces = _merge_coplanar_faces(coords, hull.simplices, cos_tol)
    logger.debug(
        "Derived %d faces %s from %d vertices",
        len(faces), hull_face_counts(faces), len(coords),
    )
    return tuple(tuple(int(i) for i in face) for face in faces)


def _merge_coplanar_faces(
    coords: np.ndarray,
    simplices: np.ndarray,
    cos_tol: float,
) -> list[list[int]]:
    """Merge adjacent coplanar triangles into polygonal faces.

    Args:
        coords: Vertex coordinates, shape ``(n, 3)``.
        simplices: Triangle array, shape ``(n_tri, 3)``.
        cos_tol: Cosine threshold for treating normals as parallel.

    Returns:
        List of faces, each a list of vertex indices ordered as an
        outward counter-clockwise loop.

    Raises:
        DegenerateGeometryError: If a merged group's boundary is not a
            single closed loop.
    """
    n_tri = len(simplices)

    v0 = coords[simplices[:, 0]]
    v1 = coords[simplices[:, 1]]
    v2 = coords[simplices[:, 2]]
    normals = np.cross(v1 - v0, v2 - v0)
    normals /= np.maximum(np.linalg.norm(normals, axis=1, keepdims=True), 1e-300)

    # Orient normals outward (away from the centroid).
    centroid = coords.mean(axis=0)
    outward = (v0 + v1 + v2) / 3.0 - centroid
    flip = np.sum(normals * outward, axis=1) < 0
    normals[flip] *= -1

    edge_to_tris: dict[tuple[int, int], list[int]] = defaultdict(list)
    for ti, tri in enumerate(simplices):
        for edge in _edges(tri):
            edge_to_tris[edge].append(ti)

    # BFS to group coplanar adjacent triangles.
    visited = np.zeros(n_tri, dtype=bool)
    groups: list[list[int]] = []
    for start in range(n_tri):
        if visited[start]:
            continue
        group = [start]
        visited[start] = True
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for edge in _edges(simplices[current]):
                for other in edge_to_tris[edge]:
                    if visited[other]:
                        continue
                    if np.dot(normals[current], normals[other]) > cos_tol:
                        visited[other] = True
                        group.append(other)
                        queue.append(other)
        groups.append(group)

    faces: list[list[int]] = []
    for group in groups:
        normal = normals[group[0]]
        if len(group) == 1:
            loop = [int(i) for i in simplices[group[0]]]
        else:
            edge_count: Counter[tuple[int, int]] = Counter()
            for ti in group:
                edge_count.update(_edges(simplices[ti]))
            # Boundary edges appear exactly once.
            boundary = [edge for edge, count in edge_count.items() if count == 1]
            loop = _order_boundary_loop(boundary)
            if loop is None:
                raise DegenerateGeometryError(
                    f"coplanar triangles {group} do not bound a single polygon"
                )
        faces.append(_wind_outward(coords, loop, normal))
    return faces


def _edges(tri: Iterable[int]) -> list[tuple[int, int]]:
    a, b, c = (int(i) for i in tri)
    return [(min(a, b), max(a, b)), (min(b, c), max(b, c)), (min(a, c), max(a, c))]


def _wind_outward(
    coords: np.ndarray, loop: list[int], normal: np.ndarray,
) -> list[int]:
    pts = coords[loop]
    centre = pts.mean(axis=0)
    rel = pts - centre
    newell = np.cross(rel, np.roll(rel, -1, axis=0)).sum(axis=0)
    if np.dot(newell, normal) < 0:
        return loop[::-1]
    return loop


def _order_boundary_loop(
    edges: list[tuple[int, int]],
) -> list[int] | None:
    """Order boundary edges into a closed polygon vertex loop.

    Args:
        edges: List of ``(a, b)`` vertex index pairs.

    Returns:
        Ordered list of vertex indices, or ``None`` if the edges
        don't form a single closed loop.
    """
    if not edges:
        return None

    adj: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    if any(len(neighbours) != 2 for neighbours in adj.values()):
        return None

    start = edges[0][0]
    loop = [start]
    prev = -1
    current = start
    for _ in range(len(edges)):
        next_v = next(n for n in adj[current] if n != prev)
        if next_v == start:
            break
        loop.append(next_v)
        prev, current = current, next_v
    else:
        return None

    if len(loop) != len(edges):
        return None
    return loop


def hull_face_counts(faces: Iterable[Sequence[int]]) -> dict[int, int]:
    """Summarise faces as ``{arity: count}``, e.g. ``{3: 20, 5: 12}``."""
    return dict(sorted(Counter(len(f) for f in faces).items()))
