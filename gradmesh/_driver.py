"""
Frame driver: the per-refresh loop body of a gradient mesh simulation.

The driver owns the nodes, the colour ``TransitionState``, the pointer
snapshot and the scene collections handed to the renderer.  A host (the
matplotlib front end in ``gradmesh._plotting`` or any other refresh
scheduler) calls ``tick`` once per display refresh and forwards input
events to ``pointer_down``/``pointer_move``/``pointer_up``/``key_press``.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from gradmesh._color import Color
from gradmesh._config import SimulationConfig
from gradmesh._geometry import as_point
from gradmesh._mesh import build_frame
from gradmesh._node import advance_all, spawn_nodes
from gradmesh._palette import COLOR_COMBOS, TransitionState
from gradmesh._render import NullRenderer
from gradmesh._scene import FilledCircle, SceneCollection
from gradmesh._triangulate import delaunay
from gradmesh._viewport import Viewport


class FrameDriver:
    """Advance motion and colour, rebuild the mesh and submit it.

    :param config: ``SimulationConfig``; defaults are used if None.
    :param viewport: Initial ``Viewport``; defaults to 800x600 at ratio 1.
    :param renderer: Object satisfying the ``Renderer`` protocol; a
        ``NullRenderer`` is used if None.
    :param triangulator: Callable mapping (n, 2) points to (k, 3) indices.
    :param combos: Palette table for the colour transitions.
    :param rng: ``numpy.random.Generator`` for node placement.
    """

    def __init__(self, config=None, viewport=None, renderer=None,
                 triangulator=delaunay, combos=COLOR_COMBOS, rng=None):
        self.config = config if config is not None else SimulationConfig()
        self.viewport = viewport if viewport is not None else Viewport(800, 600)
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.triangulator = triangulator
        if rng is None:
            rng = np.random.default_rng(self.config.seed)
        self.rng = rng

        self.nodes = spawn_nodes(self.config.node_count, self.viewport,
                                 self.config, rng=self.rng)
        self.transition = TransitionState(
            combos, initial=self.config.initial_combo,
            duration=self.config.transition_duration)

        self.triangles = SceneCollection('triangles')
        self.lines = SceneCollection('lines')
        self.markers = SceneCollection('markers')
        self.scenes = [self.triangles, self.lines, self.markers]

        self.pointer = None
        self.running = True
        self.frame_count = 0
        self.last_frame = None

    # -- input --------------------------------------------------------------

    def pointer_down(self, x, y):
        self.pointer = as_point(x, y)

    def pointer_move(self, x, y):
        """Track the pointer only while it is held down."""
        if self.pointer is not None:
            self.pointer = as_point(x, y)

    def pointer_up(self):
        self.pointer = None

    def key_press(self, key) -> bool:
        """Select a palette combo from a digit key ('1' selects combo 0).

        :return: True if the key was accepted.
        """
        if not key or len(key) != 1 or key not in '123456789':
            return False
        return self.transition.request_combo(int(key) - 1)

    def resize(self, viewport: Viewport):
        self.viewport = viewport

    # -- loop ---------------------------------------------------------------

    def stop(self):
        self.running = False

    def tick(self, p: float):
        """Run one frame.

        :param p: Milliseconds elapsed since the previous frame.
        :return: The ``MeshFrame`` submitted, or None if the driver is
            stopped or the frame could not be built.
        """
        if not self.running:
            return None
        cfg = self.config
        pointer = None if self.pointer is None else self.pointer.copy()
        viewport = self.viewport

        advance_all(self.nodes, pointer, p, viewport, cfg)
        if math.isfinite(p) and p > 0:
            self.transition.step(p / 1000.0)

        for scene in self.scenes:
            scene.empty()
        try:
            frame = build_frame(self.nodes, viewport, self.transition,
                                triangulator=self.triangulator,
                                buffer=cfg.outer_buffer,
                                debug=cfg.draw_lines)
            self.triangles.extend(frame.polygons())
            if cfg.draw_lines:
                self.lines.extend(frame.lines(Color.from_tuple(cfg.line_color)))
            if cfg.draw_markers:
                self.markers.extend(self._markers(frame))
            self.renderer.draw(self.scenes)
        except Exception as exc:
            logging.warning(f"Frame {self.frame_count} dropped: {exc!r}")
            for scene in self.scenes:
                scene.empty()
            frame = None

        self.frame_count += 1
        self.last_frame = frame
        return frame

    def _markers(self, frame):
        color = Color.from_tuple(self.config.marker_rgba)
        low, high = self.config.radius_range
        corner_radius = 0.5 * (low + high) * self.viewport.ratio
        circles = [FilledCircle(c, corner_radius, color) for c in frame.corners]
        circles.extend(FilledCircle(n.pos.copy(), n.radius, color)
                       for n in self.nodes)
        return circles

    def run(self, frames: int, p: float = 1000.0 / 60.0):
        """Tick ``frames`` times with a fixed step (headless use)."""
        frame = None
        for _ in range(frames):
            if not self.running:
                break
            frame = self.tick(p)
        return frame
