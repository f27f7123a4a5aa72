"""Drawable primitives and the collections that group them for a renderer."""
from __future__ import annotations

from typing import NamedTuple

import numpy as np

from gradmesh._color import Color


class FilledPolygon(NamedTuple):
    vertices: np.ndarray  # (m, 2)
    color: Color


class Line(NamedTuple):
    start: np.ndarray
    end: np.ndarray
    color: Color


class FilledCircle(NamedTuple):
    center: np.ndarray
    radius: float
    color: Color


class SceneCollection:
    """Named, ordered group of primitives that is refilled every frame."""

    def __init__(self, name):
        self.name = name
        self.items = []

    def __repr__(self):
        return f"SceneCollection({self.name!r}, {len(self.items)} items)"

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def add(self, item):
        self.items.append(item)

    def extend(self, items):
        self.items.extend(items)

    def empty(self):
        self.items = []

    def of_type(self, kind):
        return [item for item in self.items if isinstance(item, kind)]
