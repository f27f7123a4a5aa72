"""
Planar geometry helpers shared by the motion model and the mesh pipeline.

Points and vectors are numpy float arrays of shape (2,) (or (n, 2) for
point sets), so addition, subtraction and scaling are plain array
arithmetic.  Angles are in degrees throughout.
"""
from __future__ import annotations

import math

import numpy as np


def as_point(x, y) -> np.ndarray:
    """Return a float64 point array ``[x, y]``."""
    return np.array([x, y], dtype=float)


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(a[0] * b[0] + a[1] * b[1])


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def rotate(v: np.ndarray, deg: float) -> np.ndarray:
    """Rotate vector ``v`` by ``deg`` degrees about the origin.

    :param v: Array of shape (2,).
    :param deg: Rotation angle in degrees (positive = counter clockwise in
        a y-up frame, clockwise on screen where y points down).
    :return: Rotated copy of ``v``.
    """
    rad = math.radians(deg)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([v[0] * c - v[1] * s, v[0] * s + v[1] * c])


def heading_vector(deg: float) -> np.ndarray:
    """Unit vector pointing along heading ``deg``."""
    rad = math.radians(deg)
    return np.array([math.cos(rad), math.sin(rad)])


def triangle_areas(points: np.ndarray, simplices: np.ndarray) -> np.ndarray:
    """Unsigned areas of the triangles ``points[simplices]``.

    :param points: Array of shape (n, 2).
    :param simplices: Integer array of shape (k, 3).
    :return: Array of shape (k,).
    """
    simplices = np.asarray(simplices, dtype=int).reshape(-1, 3)
    if simplices.shape[0] == 0:
        return np.zeros(0)
    tri = np.asarray(points, dtype=float)[simplices]  # (k, 3, 2)
    e1 = tri[:, 1, :] - tri[:, 0, :]
    e2 = tri[:, 2, :] - tri[:, 0, :]
    return 0.5 * np.abs(e1[:, 0] * e2[:, 1] - e1[:, 1] * e2[:, 0])


def wrap_coordinate(value: float, low: float, high: float) -> float:
    """Teleport ``value`` to the opposite extreme when it leaves [low, high]."""
    if value < low:
        return high
    if value > high:
        return low
    return value
