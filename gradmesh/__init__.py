"""
Animated Delaunay gradient meshes.

A field of drifting points is triangulated every frame; each triangle is
filled from a two colour vertical gradient that morphs between a fixed set
of colour schemes.

Usage::

    from gradmesh import FrameDriver, SimulationConfig

    driver = FrameDriver(SimulationConfig(node_count=100, seed=1))
    driver.key_press('4')
    frame = driver.run(60)
    for vertices, color in frame:
        ...
"""
from ._color import Color
from ._config import SimulationConfig
from ._driver import FrameDriver
from ._mesh import MeshFrame, build_frame, corner_points
from ._node import Node, advance, spawn_nodes
from ._palette import (COLOR_COMBOS, PaletteCombo, TransitionState,
                       ease_out_quart)
from ._render import MatplotlibRenderer, NullRenderer, get_renderer
from ._scene import FilledCircle, FilledPolygon, Line, SceneCollection
from ._triangulate import delaunay
from ._viewport import Viewport

__all__ = [
    "Color",
    "SimulationConfig",
    "FrameDriver",
    "MeshFrame",
    "build_frame",
    "corner_points",
    "Node",
    "advance",
    "spawn_nodes",
    "COLOR_COMBOS",
    "PaletteCombo",
    "TransitionState",
    "ease_out_quart",
    "MatplotlibRenderer",
    "NullRenderer",
    "get_renderer",
    "FilledCircle",
    "FilledPolygon",
    "Line",
    "SceneCollection",
    "delaunay",
    "Viewport",
]
