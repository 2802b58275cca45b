"""Parallel containment tests over many points."""

from __future__ import annotations

import concurrent.futures
import logging
from collections.abc import Sequence

import numpy as np

from nanoshapes._constants import DEFAULT_BATCH_SIZE, FLOAT_SCREEN_MARGIN
from nanoshapes.model.options import BuildOptions

logger = logging.getLogger(__name__)


def _as_float_array(points) -> np.ndarray | None:
    """Return *points* as an ``(n, 3)`` float64 array, or ``None``.

    Numeric strings are converted by numpy like any other number.
    ``None`` means some point has no float64 value (a
    :class:`~nanoshapes.model.Vector3`, a non-numeric string, or an int
    too large for a double), in which case every point takes the exact
    path.
    """
    try:
        arr = np.asarray(points, dtype=float)
    except (TypeError, ValueError, OverflowError):
        return None
    if arr.ndim != 2 or arr.shape[1] != 3:
        return None
    return arr


def _screen(boundary, arr: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Classify points that are clearly inside or clearly outside.

    Returns:
        ``(result, undecided)`` boolean arrays.  *result* holds the
        answer for decided points; *undecided* marks points within the
        safety band of some face plane, or non-finite points.
    """
    distances = boundary.float_distances(arr).max(axis=1)
    scale = float(boundary.circumradius) + np.abs(arr).max(axis=1, initial=0.0)
    band = FLOAT_SCREEN_MARGIN * scale
    inside = distances < -band
    outside = distances > band
    undecided = ~(inside | outside)
    return inside, undecided


def _evaluate_chunk(boundary, points: Sequence) -> list[bool]:
    return [boundary.in_bounds(p) for p in points]


def in_bounds_batch(
    boundary,
    points,
    *,
    max_workers: int | None = None,
    batch_size: int | None = None,
    screen_with_floats: bool = True,
    options: BuildOptions | None = None,
) -> np.ndarray:
    """Test many points against one boundary.

    Points are split into contiguous batches which worker threads test
    against the shared, immutable *boundary*.  The result is the same
    as calling ``boundary.in_bounds`` on each point in turn.

    When *screen_with_floats* is set and the points are plain numbers,
    a vectorised float64 pass first settles every point whose distance
    from all face planes is well clear of zero; only the remainder go
    through the exact predicate.

    Args:
        boundary: A :class:`~nanoshapes.model.Polyhedron` or
            :class:`~nanoshapes.model.Sphere`.
        points: Array of shape ``(n, 3)``, or a sequence of
            :class:`~nanoshapes.model.Vector3` or coordinate triples.
        max_workers: Worker threads; overrides *options*.
        batch_size: Points per worker task; overrides *options*.
        screen_with_floats: Whether to run the float64 pre-pass.
        options: Defaults for *max_workers*, *batch_size* and
            *screen_with_floats*.

    Returns:
        Boolean array of length ``n``, in input order.
    """
    if options is not None:
        max_workers = options.max_workers if max_workers is None else max_workers
        batch_size = options.batch_size if batch_size is None else batch_size
        screen_with_floats = screen_with_floats and options.screen_with_floats
    batch_size = batch_size or DEFAULT_BATCH_SIZE
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")

    points = list(points) if not isinstance(points, np.ndarray) else points
    n = len(points)
    result = np.zeros(n, dtype=bool)
    if n == 0:
        return result

    pending = np.arange(n)
    arr = _as_float_array(points) if screen_with_floats else None
    if arr is not None:
        inside, undecided = _screen(boundary, arr)
        result[inside] = True
        pending = np.flatnonzero(undecided)

    logger.debug(
        "Batch of %d points: %d need the exact predicate",
        n, len(pending),
    )
    if len(pending) == 0:
        return result

    chunks = [
        pending[start:start + batch_size]
        for start in range(0, len(pending), batch_size)
    ]
    if len(chunks) == 1 or max_workers == 1:
        for chunk in chunks:
            result[chunk] = _evaluate_chunk(boundary, [points[i] for i in chunk])
        return result

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(
                _evaluate_chunk, boundary, [points[i] for i in chunk],
            ): chunk
            for chunk in chunks
        }
        for future in concurrent.futures.as_completed(futures):
            result[futures[future]] = future.result()
    return result


def count_inside(boundary, points, **kwargs) -> int:
    """Return how many of *points* lie inside *boundary*.

    Keyword arguments are passed to :func:`in_bounds_batch`.
    """
    return int(np.count_nonzero(in_bounds_batch(boundary, points, **kwargs)))
