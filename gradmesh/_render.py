"""
Renderers for gradmesh frames.

A renderer receives the frame's scene collections and replaces whatever
it showed before with their contents.  Renderers:

- ``NullRenderer``: Headless, keeps the last submitted primitives
  (default, always available)
- ``MatplotlibRenderer``: Draws onto a matplotlib ``Axes`` using one
  collection artist per primitive kind and scene

Usage::

    from gradmesh._render import get_renderer

    renderer = get_renderer("null")
    renderer = get_renderer("matplotlib", ax=ax)
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

import numpy as np

from gradmesh._scene import FilledCircle, FilledPolygon, Line, SceneCollection


# ---------------------------------------------------------------------------
# Protocol (structural typing interface)
# ---------------------------------------------------------------------------
@runtime_checkable
class Renderer(Protocol):
    """Protocol for frame renderers."""

    name: str

    def draw(self, scenes: Sequence[SceneCollection]) -> None:
        """Show the primitives held by ``scenes``, replacing the last frame.

        Scenes are drawn in order, later scenes on top.
        """
        ...

    def clear(self) -> None:
        """Remove everything drawn so far."""
        ...


# ---------------------------------------------------------------------------
# Null renderer (always available)
# ---------------------------------------------------------------------------
class NullRenderer:
    """Headless renderer keeping a copy of the last frame's primitives."""

    name = "null"

    def __init__(self):
        self.frames_drawn = 0
        self.last = {}

    def draw(self, scenes: Sequence[SceneCollection]) -> None:
        self.last = {scene.name: list(scene) for scene in scenes}
        self.frames_drawn += 1

    def clear(self) -> None:
        self.last = {}

    def count(self, kind=None) -> int:
        """Number of primitives (of type ``kind``) in the last frame."""
        return sum(1 for items in self.last.values() for item in items
                   if kind is None or isinstance(item, kind))


# ---------------------------------------------------------------------------
# Matplotlib renderer
# ---------------------------------------------------------------------------
class MatplotlibRenderer:
    """Renderer drawing onto a matplotlib Axes.

    Each primitive kind of each scene becomes one collection artist
    (``PolyCollection``, ``LineCollection`` or ``EllipseCollection``).  The
    artists of the previous frame are removed before the new ones are added.
    """

    name = "matplotlib"

    def __init__(self, ax, edge_width: float = 0.6):
        from matplotlib.collections import (EllipseCollection, LineCollection,
                                            PolyCollection)
        self._PolyCollection = PolyCollection
        self._LineCollection = LineCollection
        self._EllipseCollection = EllipseCollection

        self.ax = ax
        # Triangle outlines in the fill colour hide antialiasing seams
        self.edge_width = edge_width
        self.artists = []

    def clear(self) -> None:
        for artist in self.artists:
            artist.remove()
        self.artists = []

    def draw(self, scenes: Sequence[SceneCollection]) -> None:
        self.clear()
        zorder = 1
        for scene in scenes:
            for artist in self._scene_artists(scene):
                artist.set_zorder(zorder)
                self.ax.add_collection(artist, autolim=False)
                self.artists.append(artist)
                zorder += 1

    def _scene_artists(self, scene: SceneCollection):
        polygons = scene.of_type(FilledPolygon)
        if polygons:
            colors = [p.color.to_rgba() for p in polygons]
            yield self._PolyCollection(
                [np.asarray(p.vertices) for p in polygons],
                facecolors=colors, edgecolors=colors,
                linewidths=self.edge_width)

        lines = scene.of_type(Line)
        if lines:
            yield self._LineCollection(
                [(ln.start, ln.end) for ln in lines],
                colors=[ln.color.to_rgba() for ln in lines],
                linewidths=1.0)

        circles = scene.of_type(FilledCircle)
        if circles:
            diameters = np.array([2.0 * c.radius for c in circles])
            yield self._EllipseCollection(
                diameters, diameters, np.zeros(len(circles)), units='xy',
                offsets=np.array([c.center for c in circles]),
                offset_transform=self.ax.transData,
                facecolors=[c.color.to_rgba() for c in circles],
                edgecolors='none')


# ---------------------------------------------------------------------------
# Renderer registry
# ---------------------------------------------------------------------------
_RENDERERS: dict[str, type] = {
    "null": NullRenderer,
    "matplotlib": MatplotlibRenderer,
}


def get_renderer(name: str | None = None, **kwargs: Any) -> Renderer:
    """Get a renderer by name.

    Parameters
    ----------
    name : str or None
        ``"null"``, ``"matplotlib"`` or ``None`` (null renderer).
    **kwargs
        Passed to the renderer constructor (e.g. ``ax=ax`` for matplotlib).

    Returns
    -------
    Renderer
        An instance satisfying the :class:`Renderer` protocol.
    """
    if name is None:
        name = "null"
    if name not in _RENDERERS:
        raise ValueError(
            f"Unknown renderer {name!r}. Available: {list(_RENDERERS.keys())}"
        )
    return _RENDERERS[name](**kwargs)
