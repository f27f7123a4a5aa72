"""
Per-frame mesh construction.

Every frame the live node positions are joined by four fixed corner points
just outside the padded viewport, the combined set is triangulated, and
each triangle is shaded by sampling the current gradient at the height of
its centroid (top of the viewport = ``from_color``, bottom = ``to_color``).
Nothing here is kept between frames.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from gradmesh._color import Color
from gradmesh._geometry import triangle_areas
from gradmesh._scene import FilledPolygon, Line
from gradmesh._triangulate import delaunay, sanitize_simplices

__all__ = ["MeshFrame", "corner_points", "shade_triangles", "build_frame"]

DEBUG_LINE_COLOR = Color(0, 0, 0)


@dataclass
class MeshFrame:
    """Ephemeral result of one mesh build.

    :param points: (n, 2) positions, the four corners first.
    :param simplices: (k, 3) indices into ``points``.
    :param colors: (k, 3) fill colours as RGB floats in [0, 255].
    :param edges: (3k, 2) index pairs of triangle edges, only filled in
        debug mode.
    """
    points: np.ndarray
    simplices: np.ndarray
    colors: np.ndarray
    edges: np.ndarray = field(default_factory=lambda: np.zeros((0, 2), dtype=int))

    n_corners = 4

    def __len__(self):
        return self.simplices.shape[0]

    def __iter__(self):
        """Yield ``(vertices, Color)`` for every triangle."""
        for simplex, rgb in zip(self.simplices, self.colors):
            yield self.points[simplex], Color(*rgb)

    @property
    def corners(self) -> np.ndarray:
        return self.points[:self.n_corners]

    def area(self) -> float:
        """Total area covered by the triangles."""
        return float(triangle_areas(self.points, self.simplices).sum())

    def polygons(self):
        return [FilledPolygon(verts, color) for verts, color in self]

    def lines(self, color: Color = DEBUG_LINE_COLOR):
        return [Line(self.points[a], self.points[b], color)
                for a, b in self.edges]


def corner_points(width: float, height: float, buffer: float) -> np.ndarray:
    """Corners of the padded viewport, in fixed order."""
    return np.array([
        [-buffer, -buffer],
        [-buffer, height + buffer],
        [width + buffer, -buffer],
        [width + buffer, height + buffer],
    ], dtype=float)


def shade_triangles(points: np.ndarray, simplices: np.ndarray,
                    height: float, from_color: Color,
                    to_color: Color) -> np.ndarray:
    """Gradient colour of every triangle, by the height of its centroid.

    :return: Array of shape (k, 3) of RGB channels.
    """
    if simplices.shape[0] == 0:
        return np.zeros((0, 3))
    avg_y = points[simplices][:, :, 1].mean(axis=1)
    ratio = np.clip(avg_y, 0.0, height) / height
    start = from_color.rgb_array()
    change = to_color.rgb_array() - start
    return start[np.newaxis, :] + ratio[:, np.newaxis] * change[np.newaxis, :]


def _triangle_edges(simplices: np.ndarray) -> np.ndarray:
    return simplices[:, [0, 1, 1, 2, 2, 0]].reshape(-1, 2)


def build_frame(nodes, viewport, transition, triangulator=delaunay,
                buffer: float = 120.0, debug: bool = False) -> MeshFrame:
    """Triangulate corners + node positions and shade every triangle.

    :param nodes: Sequence of ``Node``.
    :param viewport: ``Viewport`` read for this frame only.
    :param transition: ``TransitionState``; its end points are captured
        once for the whole frame.
    :param triangulator: Callable mapping (n, 2) points to (k, 3) indices.
    :param buffer: Outer buffer around the viewport.
    :param debug: Also list every triangle edge.
    :return: ``MeshFrame``
    """
    width, height = viewport.extent
    corners = corner_points(width, height, buffer)
    if nodes:
        points = np.vstack([corners, np.array([n.pos for n in nodes])])
    else:
        points = corners

    from_color, to_color = transition.snapshot()
    simplices = sanitize_simplices(triangulator(points), points.shape[0])
    colors = shade_triangles(points, simplices, height, from_color, to_color)

    frame = MeshFrame(points=points, simplices=simplices, colors=colors)
    if debug:
        frame.edges = _triangle_edges(simplices)
    return frame
