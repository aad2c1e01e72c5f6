from __future__ import annotations
from enum import Enum

from ._keyword import parse_keyword


class BlendMode(str, Enum):
    """Color space in which interpolation arithmetic is performed."""
    RGB = "rgb"
    LINEAR_RGB = "linear-rgb"
    HSV = "hsv"
    OKLAB = "oklab"

    @classmethod
    def parse(cls, value) -> BlendMode:
        return parse_keyword(cls, value, "blend mode")

    @property
    def has_hue(self) -> bool:
        return self is BlendMode.HSV


class InterpolationMode(str, Enum):
    """Spline family used to blend between stops."""
    LINEAR = "linear"
    BASIS = "basis"
    CATMULL_ROM = "catmull-rom"

    @classmethod
    def parse(cls, value) -> InterpolationMode:
        return parse_keyword(cls, value, "interpolation mode")

    @property
    def passes_through_stops(self) -> bool:
        """True for the interpolating splines, False for the approximating B-spline."""
        return self is not InterpolationMode.BASIS
