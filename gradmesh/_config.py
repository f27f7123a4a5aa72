"""
Simulation parameters.

All lengths are in logical pixels and are multiplied by the viewport ratio
where they are used, so a simulation looks the same on high density
displays.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SimulationConfig:
    """Tunable parameters of a gradient mesh simulation.

    :param node_count: Number of live nodes created at start.
    :param outer_buffer: Margin beyond the viewport inside which nodes
        remain valid before wrapping to the opposite side.
    :param max_effect_dist: Radius around the pointer inside which node
        headings are steered.
    :param rotation_speed: Maximum heading change (degrees) per tick caused
        by the pointer.
    :param speed: Distance travelled per millisecond of frame time.
    :param radius_range: (low, high) range for node marker radii.
    :param min_dt: Floor applied to the frame time step.
    :param transition_duration: Seconds taken by one colour transition.
    :param draw_lines: Draw triangle edges on top of the mesh.
    :param draw_markers: Draw a circle at every node.
    :param initial_combo: Palette index shown at start.
    :param seed: Seed for the random generator placing the nodes.
    """
    node_count: int = 200
    outer_buffer: float = 120.0
    max_effect_dist: float = 225.0
    rotation_speed: float = 4.0
    speed: float = 0.045
    radius_range: tuple = (1.75, 3.25)
    min_dt: float = 0.01
    transition_duration: float = 1.0
    draw_lines: bool = False
    draw_markers: bool = True
    line_color: tuple = (0, 0, 0)
    marker_color: tuple = (255, 255, 255, 0.4)
    initial_combo: int = 0
    seed: int | None = None

    def __post_init__(self):
        if self.node_count < 0:
            raise ValueError(f"node_count must be >= 0, got {self.node_count}")
        if self.outer_buffer < 0:
            raise ValueError(
                f"outer_buffer must be >= 0, got {self.outer_buffer}")
        if self.max_effect_dist <= 0:
            raise ValueError(
                f"max_effect_dist must be > 0, got {self.max_effect_dist}")
        if self.min_dt <= 0:
            raise ValueError(f"min_dt must be > 0, got {self.min_dt}")
        if self.transition_duration <= 0:
            raise ValueError("transition_duration must be > 0, got "
                             f"{self.transition_duration}")
        low, high = self.radius_range
        if low <= 0 or high < low:
            raise ValueError(
                f"radius_range must satisfy 0 < low <= high, got "
                f"{self.radius_range}")

    @property
    def marker_rgba(self) -> tuple:
        """Marker colour, switched to the line colour when edges are drawn."""
        if self.draw_lines:
            return tuple(self.line_color[:3]) + (1.0,)
        return tuple(self.marker_color)
