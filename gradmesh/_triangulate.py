"""
Triangulators: pure functions mapping an (n, 2) point array to an (k, 3)
integer array of triangle vertex indices.  No state is kept between calls.
"""
from __future__ import annotations

import logging

import numpy as np
from scipy.spatial import Delaunay, QhullError

EMPTY_SIMPLICES = np.zeros((0, 3), dtype=int)


def delaunay(points) -> np.ndarray:
    """Delaunay triangulation of a planar point set.

    Degenerate inputs (fewer than three points, all points collinear or
    coincident) have no triangulation and give an empty ``(0, 3)`` array.

    :param points: Array like of shape (n, 2).
    :return: Integer array of shape (k, 3).
    """
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[0] < 3:
        return EMPTY_SIMPLICES.copy()
    try:
        tri = Delaunay(points)
    except (QhullError, ValueError) as exc:
        logging.debug(f"Triangulation of {points.shape[0]} points failed: {exc}")
        return EMPTY_SIMPLICES.copy()
    return np.asarray(tri.simplices, dtype=int)


def sanitize_simplices(simplices, n_points: int) -> np.ndarray:
    """Coerce a triangulator result into a valid ``(k, 3)`` index array.

    Results that cannot be read as index triples are discarded as a whole;
    triples naming a point outside ``[0, n_points)`` are dropped.
    """
    if simplices is None:
        return EMPTY_SIMPLICES.copy()
    try:
        arr = np.asarray(simplices)
    except (TypeError, ValueError):
        # Ragged sequences
        logging.warning("Discarding malformed triangulation result")
        return EMPTY_SIMPLICES.copy()
    if arr.size == 0:
        return EMPTY_SIMPLICES.copy()
    if arr.ndim != 2 or arr.shape[1] != 3 or arr.dtype.kind not in 'iuf':
        logging.warning("Discarding triangulation result of shape "
                        f"{arr.shape} and dtype {arr.dtype}")
        return EMPTY_SIMPLICES.copy()
    if not np.all(np.isfinite(arr)):
        arr = arr[np.all(np.isfinite(arr), axis=1)]
    whole = np.all(arr == np.floor(arr), axis=1)
    if not np.all(whole):
        logging.warning(f"Dropping {int(np.sum(~whole))} triangles with "
                        "non-integer vertex indices")
        arr = arr[whole]
    arr = arr.astype(int)
    valid = np.all((arr >= 0) & (arr < n_points), axis=1)
    if not np.all(valid):
        logging.warning(f"Dropping {int(np.sum(~valid))} triangles with "
                        "out of range vertex indices")
        arr = arr[valid]
    return arr
