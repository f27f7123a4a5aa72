"""Viewport description read by the motion model and mesh pipeline."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Visible area in logical pixels and the device-to-simulation ratio.

    Simulation coordinates are device pixels, so the simulated area spans
    ``width * ratio`` by ``height * ratio``.
    """
    width: float
    height: float
    ratio: float = 1.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Viewport size must be positive, got {self.width}x{self.height}")
        if self.ratio <= 0:
            raise ValueError(f"Viewport ratio must be positive, got {self.ratio}")

    @property
    def extent(self) -> tuple:
        """(W, H) of the simulated area."""
        return (self.width * self.ratio, self.height * self.ratio)
