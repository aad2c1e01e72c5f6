from __future__ import annotations
from typing import Iterator, Sequence, Tuple, Union
import math

import numpy as np
from numpy import ndarray

from ..types.color_types import RGBA, Scalar


def _channel(value: Scalar) -> float:
    value = float(value)
    if math.isnan(value):
        return 0.0
    return value


class Color:
    """
    Immutable sRGB color with straight (non-premultiplied) alpha.

    Channels are floats nominally in ``[0, 1]``. Values are stored as given;
    clamping happens when a color is rendered or formatted, so that
    intermediate results (for example spline overshoot) survive a round trip
    through the color-space conversions.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: Scalar, g: Scalar, b: Scalar, a: Scalar = 1.0) -> None:
        self._value: RGBA = (_channel(r), _channel(g), _channel(b), _channel(a))
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_array(cls, arr: Union[ndarray, Sequence[Scalar]]) -> Color:
        """Build from 3 (opaque) or 4 channel values in ``[0, 1]``."""
        values = [float(v) for v in np.asarray(arr, dtype=float).ravel()]
        if len(values) in (3, 4):
            return cls(*values)
        raise ValueError(f"Color expects 3 or 4 channels, got {len(values)}")

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        return cls(r / 255, g / 255, b / 255, a / 255)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional)."""
        digits = text.strip().lstrip('#')
        if len(digits) in (3, 4):
            digits = ''.join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        return cls.from_rgba8(*channels)

    @classmethod
    def gray(cls, level: Scalar, alpha: Scalar = 1.0) -> Color:
        return cls(level, level, level, alpha)

    @classmethod
    def coerce(cls, value) -> Color:
        """Accept a Color, a 3/4-tuple of unit floats, or an ndarray."""
        if isinstance(value, Color):
            return value
        return cls.from_array(value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBA:
        return self._value

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    @property
    def a(self) -> float:
        return self._value[3]

    @property
    def is_opaque(self) -> bool:
        return self._value[3] >= 1.0

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=float)

    def clamped(self) -> Color:
        return Color(*(min(max(v, 0.0), 1.0) for v in self._value))

    def rgba8(self) -> Tuple[int, int, int, int]:
        """Channels as 0..255 integers, rounded half up after clamping."""
        return tuple(int(min(max(v, 0.0), 1.0) * 255 + 0.5) for v in self._value)  # type: ignore[return-value]

    def with_alpha(self, alpha: Scalar) -> Color:
        r, g, b, _ = self._value
        return Color(r, g, b, alpha)

    # ------------------ DUNDERS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Color):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"Color({r:.6g}, {g:.6g}, {b:.6g}, {a:.6g})"


def colors_to_array(colors: Sequence[Color]) -> ndarray:
    """Stack colors into an ``(n, 4)`` float array."""
    if len(colors) == 0:
        return np.empty((0, 4), dtype=float)
    return np.array([c.value for c in colors], dtype=float)


def array_to_colors(arr: ndarray) -> list[Color]:
    return [Color(*row) for row in np.asarray(arr, dtype=float).reshape(-1, 4)]


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
