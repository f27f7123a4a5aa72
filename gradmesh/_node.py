"""
Node motion model.

A node drifts along its heading at constant speed.  While the pointer is
held near it, the heading receives a small angular nudge whose size scales
with proximity, and whose sign depends on which side of the node the
pointer lies.  Nodes that leave the padded viewport reappear on the
opposite side.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from gradmesh._config import SimulationConfig
from gradmesh._geometry import (clamp, distance, dot, heading_vector, rotate,
                                wrap_coordinate)


@dataclass(eq=False)
class Node:
    """Plain record of a moving mesh point.

    :param pos: Position, float array of shape (2,) in simulation units.
    :param heading: Direction of travel in degrees, [0, 360).
    :param speed: Distance per millisecond, already scaled by the viewport
        ratio.
    :param radius: Marker radius, chosen once at creation.
    """
    pos: np.ndarray
    heading: float = 0.0
    speed: float = 0.0
    radius: float = 1.0

    def __post_init__(self):
        self.pos = np.asarray(self.pos, dtype=float).copy()
        self.heading = float(self.heading) % 360.0


def spawn_nodes(count, viewport, config: SimulationConfig, rng=None):
    """Create ``count`` nodes scattered over the padded viewport.

    :param count: Number of nodes.
    :param viewport: ``Viewport`` giving the simulation extent and ratio.
    :param config: Simulation parameters (buffer, speed, radius range).
    :param rng: ``numpy.random.Generator``; a fresh one is created if None.
    :return: list of ``Node``.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)
    width, height = viewport.extent
    b = config.outer_buffer
    low, high = config.radius_range

    xs = rng.uniform(-b, width + b, size=count)
    ys = rng.uniform(-b, height + b, size=count)
    headings = rng.integers(0, 360, size=count)
    radii = rng.uniform(low, high, size=count) * viewport.ratio

    return [Node(pos=(xs[i], ys[i]), heading=float(headings[i]),
                 speed=config.speed * viewport.ratio, radius=float(radii[i]))
            for i in range(count)]


def steering_torque(node: Node, pointer: np.ndarray, max_dist: float,
                    rotation_speed: float) -> float:
    """Heading change caused by ``pointer`` on ``node``.

    The influence falls off linearly from 1 at the pointer to 0 at
    ``max_dist``.  The dot product between the heading rotated a quarter
    turn and the node-to-pointer vector is clamped to [-1, 1], so the
    result never exceeds ``rotation_speed`` in magnitude.
    """
    d = distance(node.pos, pointer)
    if not d < max_dist:
        return 0.0
    influence = (max_dist - d) / max_dist
    steer = rotate(np.array([1.0, 0.0]), node.heading - 90.0)
    alignment = clamp(dot(steer, pointer - node.pos), -1.0, 1.0)
    return rotation_speed * influence * alignment


def floor_dt(dt: float, min_dt: float) -> float:
    if math.isfinite(dt) and dt >= min_dt:
        return dt
    return min_dt


def advance(node: Node, pointer, dt: float, viewport,
            config: SimulationConfig) -> None:
    """Move ``node`` forward by one frame in place.

    :param node: Node to update.
    :param pointer: Pointer position array of shape (2,), or None when no
        pointer is held down.
    :param dt: Frame time in milliseconds; floored at ``config.min_dt``,
        which also replaces a NaN or infinite frame time.
    :param viewport: Current ``Viewport``.
    :param config: Simulation parameters.
    """
    dt = floor_dt(dt, config.min_dt)
    width, height = viewport.extent
    b = config.outer_buffer

    if pointer is not None:
        torque = steering_torque(node, pointer,
                                 config.max_effect_dist * viewport.ratio,
                                 config.rotation_speed)
        heading = node.heading + torque
        if math.isfinite(heading):
            node.heading = heading % 360.0

    step = heading_vector(node.heading) * node.speed * dt
    x = node.pos[0] + step[0]
    y = node.pos[1] + step[1]

    if not (math.isfinite(x) and math.isfinite(y)):
        logging.warning(f"Non-finite node position ({x}, {y}) reset to the "
                        "viewport centre")
        x, y = 0.5 * width, 0.5 * height

    node.pos[0] = wrap_coordinate(x, -b, width + b)
    node.pos[1] = wrap_coordinate(y, -b, height + b)


def advance_all(nodes, pointer, dt, viewport, config) -> None:
    for node in nodes:
        advance(node, pointer, dt, viewport, config)
