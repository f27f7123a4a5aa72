"""
Matplotlib front end: an interactive, animated gradient mesh window.

Usage::

    from gradmesh import FrameDriver
    from gradmesh._plotting import animate_mesh
    import matplotlib.pyplot as plt

    driver = FrameDriver()
    fig, ax, anim = animate_mesh(driver)
    plt.show()

Hold the mouse button to steer nodes near the cursor, press the number
keys to switch colour schemes.
"""
from __future__ import annotations

import logging
import time

from gradmesh._render import MatplotlibRenderer
from gradmesh._viewport import Viewport

DIRECTIONS = "Press the number keys to switch color schemes"

# Logical pixels per inch; the figure dpi relative to this is the
# device ratio.
LOGICAL_DPI = 100.0


def viewport_from_figure(fig) -> Viewport:
    """Viewport matching the current pixel size of ``fig``."""
    w_in, h_in = fig.get_size_inches()
    return Viewport(w_in * LOGICAL_DPI, h_in * LOGICAL_DPI,
                    fig.dpi / LOGICAL_DPI)


class MeshAnimator:
    """Connects a ``FrameDriver`` to a matplotlib figure.

    The Axes spans the whole figure with the y axis pointing down, so data
    coordinates are simulation coordinates.  Mouse and key events of the
    figure canvas are forwarded to the driver, resize events refresh its
    viewport.

    :param driver: ``FrameDriver`` to animate; its renderer is replaced by
        a ``MatplotlibRenderer`` drawing on ``ax``.
    :param fig: matplotlib Figure, created if None.
    :param ax: Axes to draw on, created if None.
    :param figsize: Size of a created figure in inches.
    :param dpi: Resolution of a created figure.
    :param fixed_step: If not None, every frame advances by this many
        milliseconds instead of the measured wall clock time.
    """

    def __init__(self, driver, fig=None, ax=None, figsize=(8, 6), dpi=100,
                 fixed_step=None):
        from matplotlib import pyplot

        if fig is None:
            fig = pyplot.figure(figsize=figsize, dpi=dpi)
        if ax is None:
            ax = fig.add_axes([0, 0, 1, 1])
        self.fig = fig
        self.ax = ax
        self.driver = driver
        self.fixed_step = fixed_step
        self._last_time = None
        self._cids = []

        ax.set_axis_off()
        ax.set_facecolor('black')
        driver.renderer = MatplotlibRenderer(ax)
        driver.resize(viewport_from_figure(fig))
        self._update_limits()

        manager = getattr(fig.canvas, 'manager', None)
        if manager is not None:
            try:
                manager.set_window_title(DIRECTIONS)
            except AttributeError:
                pass

    def _update_limits(self):
        width, height = self.driver.viewport.extent
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)

    def connect(self):
        """Start forwarding canvas events to the driver."""
        canvas = self.fig.canvas
        self._cids = [
            canvas.mpl_connect('button_press_event', self.on_press),
            canvas.mpl_connect('motion_notify_event', self.on_move),
            canvas.mpl_connect('button_release_event', self.on_release),
            canvas.mpl_connect('key_press_event', self.on_key),
            canvas.mpl_connect('resize_event', self.on_resize),
        ]
        return self

    def disconnect(self):
        for cid in self._cids:
            self.fig.canvas.mpl_disconnect(cid)
        self._cids = []

    # -- event handlers -----------------------------------------------------

    def on_press(self, event):
        if event.inaxes is self.ax and event.xdata is not None:
            self.driver.pointer_down(event.xdata, event.ydata)

    def on_move(self, event):
        if event.inaxes is self.ax and event.xdata is not None:
            self.driver.pointer_move(event.xdata, event.ydata)

    def on_release(self, event):
        self.driver.pointer_up()

    def on_key(self, event):
        if self.driver.key_press(event.key):
            logging.info(f"Switching to color scheme {event.key}")

    def on_resize(self, event):
        self.driver.resize(viewport_from_figure(self.fig))
        self._update_limits()

    # -- animation ----------------------------------------------------------

    def elapsed_ms(self) -> float:
        if self.fixed_step is not None:
            return self.fixed_step
        now = time.perf_counter()
        if self._last_time is None:
            self._last_time = now
            return 0.0
        p = (now - self._last_time) * 1000.0
        self._last_time = now
        return p

    def update(self, frame_number):
        """FuncAnimation callback: run one driver tick."""
        self.driver.tick(self.elapsed_ms())
        return self.driver.renderer.artists


def animate_mesh(driver, frames=None, interval=16, figsize=(8, 6), dpi=100,
                 fixed_step=False, fig=None, ax=None):
    """Animate ``driver`` in a matplotlib figure.

    :param driver: ``FrameDriver`` to animate.
    :param frames: Number of frames, or None to run until the window closes.
    :param interval: Delay between frames in milliseconds.
    :param figsize: Figure size in inches.
    :param dpi: Figure resolution.
    :param fixed_step: Advance every frame by ``interval`` milliseconds
        instead of the measured time.
    :return: (fig, ax, anim) tuple; keep a reference to ``anim`` for as long
        as the animation should run.
    """
    from matplotlib.animation import FuncAnimation

    animator = MeshAnimator(driver, fig=fig, ax=ax, figsize=figsize, dpi=dpi,
                            fixed_step=interval if fixed_step else None)
    animator.connect()
    anim = FuncAnimation(animator.fig, animator.update, frames=frames,
                         interval=interval, blit=False,
                         cache_frame_data=False)
    anim.animator = animator
    return animator.fig, animator.ax, anim
