"""RGB(A) colour values with channel-wise arithmetic."""
from __future__ import annotations

import numpy as np


class Color:
    """An RGB colour with an optional alpha.

    Channels ``r``, ``g`` and ``b`` nominally lie in [0, 255] but are stored
    as floats so that colour transitions can hold fractional values between
    frames.  ``a`` is an opacity in [0, 1].

    Arithmetic (``+``, ``-`` and ``*`` with a scalar) acts on the RGB
    channels and keeps the alpha of the left operand.
    """
    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r=0.0, g=0.0, b=0.0, a=1.0):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(a)

    def __repr__(self):
        if self.a == 1.0:
            return f"Color({self.r:g}, {self.g:g}, {self.b:g})"
        return f"Color({self.r:g}, {self.g:g}, {self.b:g}, {self.a:g})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r == other.r and self.g == other.g
                and self.b == other.b and self.a == other.a)

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __add__(self, other):
        return Color(self.r + other.r, self.g + other.g, self.b + other.b,
                     self.a)

    def __sub__(self, other):
        return Color(self.r - other.r, self.g - other.g, self.b - other.b,
                     self.a)

    def __mul__(self, k):
        return Color(self.r * k, self.g * k, self.b * k, self.a)

    __rmul__ = __mul__

    def clone(self):
        return Color(self.r, self.g, self.b, self.a)

    def assign(self, other):
        """Copy every channel of ``other`` into this colour in place."""
        self.r, self.g, self.b, self.a = other.r, other.g, other.b, other.a

    def shift(self, delta, k=1.0):
        """In place ``self += delta * k`` on the RGB channels."""
        self.r += delta.r * k
        self.g += delta.g * k
        self.b += delta.b * k

    def lerp(self, other, t):
        """Channel-wise linear interpolation ``self + (other - self) * t``."""
        return Color(self.r + (other.r - self.r) * t,
                     self.g + (other.g - self.g) * t,
                     self.b + (other.b - self.b) * t,
                     self.a)

    def rgb_array(self) -> np.ndarray:
        return np.array([self.r, self.g, self.b])

    def to_rgba(self) -> tuple:
        """Matplotlib style (r, g, b, a) tuple with every entry in [0, 1]."""
        return (min(1.0, max(0.0, self.r / 255.0)),
                min(1.0, max(0.0, self.g / 255.0)),
                min(1.0, max(0.0, self.b / 255.0)),
                min(1.0, max(0.0, self.a)))

    @classmethod
    def from_tuple(cls, values):
        """Build from ``(r, g, b)`` or ``(r, g, b, a)``."""
        return cls(*values)
