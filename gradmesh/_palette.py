"""
Colour schemes and the transition state machine that morphs between them.

A scheme ("combo") is a pair of gradient end points: ``from_color`` at the
top of the viewport and ``to_color`` at the bottom.  Switching schemes
eases both end points toward the target combo over a fixed duration.  A
switch requested while a transition is running is queued (latest request
wins) and starts as soon as the running transition completes.

Usage::

    state = TransitionState()
    state.request_combo(3)
    while state.transitioning:
        state.step(1 / 60)
    state.sample_gradient(0.5)
"""
from __future__ import annotations

import logging
from typing import Callable, NamedTuple

from gradmesh._color import Color


class PaletteCombo(NamedTuple):
    from_color: Color
    to_color: Color


COLOR_COMBOS = (
    PaletteCombo(Color(158, 219, 230), Color(14, 123, 143)),
    PaletteCombo(Color(255, 255, 255), Color(14, 123, 143)),
    PaletteCombo(Color(255, 255, 255), Color(0, 0, 0)),
    PaletteCombo(Color(238, 164, 127), Color(0, 83, 156)),
    PaletteCombo(Color(137, 172, 227), Color(234, 115, 141)),
    PaletteCombo(Color(251, 248, 190), Color(35, 79, 112)),
    PaletteCombo(Color(173, 216, 230), Color(0, 0, 139)),
    PaletteCombo(Color(232, 201, 63), Color(0, 0, 0)),
    PaletteCombo(Color(255, 255, 255), Color(10, 87, 17)),
)


def ease_out_quart(x: float) -> float:
    return 1 - (1 - x) ** 4


class TransitionState:
    """Current gradient end points and the transition toward a target combo.

    :param combos: Palette table; defaults to ``COLOR_COMBOS``.
    :param initial: Index of the combo shown at start.
    :param duration: Length of one transition in seconds.
    :param easing: Monotonic map of [0, 1] onto [0, 1] shaping the rate of
        change; ``ease_out_quart`` front loads the motion.
    """

    def __init__(self, combos=COLOR_COMBOS, initial: int = 0,
                 duration: float = 1.0,
                 easing: Callable[[float], float] = ease_out_quart):
        if not combos:
            raise ValueError("At least one palette combo is required")
        if not 0 <= initial < len(combos):
            raise ValueError(f"Initial combo {initial} is outside the "
                             f"palette table of size {len(combos)}")
        if duration <= 0:
            raise ValueError(f"duration must be > 0, got {duration}")

        self.combos = tuple(combos)
        self.duration = duration
        self.easing = easing

        self.current_combo = initial
        self.from_color = self.combos[initial].from_color.clone()
        self.to_color = self.combos[initial].to_color.clone()
        self.transitioning = False
        self.pending_combo = None

        self.progress = 0.0
        self._eased = 0.0
        self._from_diff = Color()
        self._to_diff = Color()

    def __len__(self):
        return len(self.combos)

    def request_combo(self, i: int) -> bool:
        """Ask for a switch to combo ``i``.

        :return: False if ``i`` is outside the palette table (the request
            is ignored), True otherwise.
        """
        if not 0 <= i < len(self.combos):
            return False
        if self.transitioning:
            self.pending_combo = i
            logging.debug(f"Queued palette combo {i}")
        else:
            self._begin(i)
        return True

    def _begin(self, i: int) -> None:
        target = self.combos[i]
        self.current_combo = i
        self.transitioning = True
        self.progress = 0.0
        self._eased = 0.0
        # Gaps are measured once, against the values at the start of the
        # transition.
        self._from_diff = target.from_color - self.from_color
        self._to_diff = target.to_color - self.to_color
        logging.debug(f"Transitioning to palette combo {i}")

    def _complete(self) -> None:
        target = self.combos[self.current_combo]
        self.from_color.assign(target.from_color)
        self.to_color.assign(target.to_color)
        self.transitioning = False
        if self.pending_combo is not None:
            i, self.pending_combo = self.pending_combo, None
            self._begin(i)

    def step(self, elapsed: float) -> None:
        """Advance the running transition by ``elapsed`` seconds."""
        if not self.transitioning:
            return
        self.progress = min(1.0, self.progress + max(0.0, elapsed) / self.duration)
        eased = self.easing(self.progress)
        dp = eased - self._eased
        self._eased = eased

        self.from_color.shift(self._from_diff, dp)
        self.to_color.shift(self._to_diff, dp)

        if self.progress >= 1.0:
            self._complete()

    def finish(self, max_steps: int = 10000, elapsed: float = 1 / 60) -> None:
        """Run the current transition, and any queued one, to completion."""
        for _ in range(max_steps):
            if not self.transitioning:
                return
            self.step(elapsed)

    def snapshot(self):
        """Copies of the current end points, for shading a whole frame."""
        return self.from_color.clone(), self.to_color.clone()

    def sample_gradient(self, t: float) -> Color:
        return self.from_color.lerp(self.to_color, t)
