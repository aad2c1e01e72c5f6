"""
Read GIMP gradient (``.ggr``) files.

A GIMP gradient is a run of segments covering ``[0, 1]``. Each segment has
its own midpoint, blending function and color model, so it cannot be
expressed as a list of color stops; :class:`GimpGradient` samples the
segments directly and offers the same sampling surface as
:class:`~chromagrad.gradients.Gradient`.

File layout::

    GIMP Gradient
    Name: Sunrise
    2
    0.0 0.25 0.5  r g b a  r g b a  blend coloring [left-type right-type]
    ...
"""
from __future__ import annotations
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Union
import logging

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp

from ..colors.color import Color
from ..conversions import np_from_space, np_to_space
from ..defaults import GGR_BACKGROUND, GGR_FOREGROUND, value_or_default
from ..errors import InvalidGgrError
from ..gradients import sampler
from ..types.color_types import Domain
from ..types.modes import BlendMode

logger = logging.getLogger(__name__)

_clamp = bound_type_to_np_function[BoundType.CLAMP]

GGR_HEADER = "GIMP Gradient"
SEGMENT_EPSILON = 1e-10


class GgrBlend(IntEnum):
    LINEAR = 0
    CURVED = 1
    SINE = 2
    SPHERE_INCREASING = 3
    SPHERE_DECREASING = 4
    STEP = 5


class GgrColoring(IntEnum):
    RGB = 0
    HSV_CCW = 1
    HSV_CW = 2


class GgrEndpoint(IntEnum):
    FIXED = 0
    FOREGROUND = 1
    FOREGROUND_TRANSPARENT = 2
    BACKGROUND = 3
    BACKGROUND_TRANSPARENT = 4


# ------------------ BLENDING FUNCTIONS ------------------
def np_linear_factor(middle: NDArray, pos: NDArray) -> NDArray:
    """Piecewise-linear factor reaching 0.5 at the segment midpoint."""
    low_span = np.where(middle < SEGMENT_EPSILON, 1.0, middle)
    low = np.where(middle < SEGMENT_EPSILON, 0.0, 0.5 * pos / low_span)
    upper = 1.0 - middle
    high_span = np.where(upper < SEGMENT_EPSILON, 1.0, upper)
    high = np.where(upper < SEGMENT_EPSILON, 1.0, 0.5 + 0.5 * (pos - middle) / high_span)
    return np.where(pos <= middle, low, high)


def np_curved_factor(middle: NDArray, pos: NDArray) -> NDArray:
    middle = np.clip(middle, SEGMENT_EPSILON, 1.0 - SEGMENT_EPSILON)
    return pos ** (np.log(0.5) / np.log(middle))


def np_blend_factor(blend: NDArray, middle: NDArray, pos: NDArray) -> NDArray:
    """Blend factor in [0, 1] for each sample, per its segment's blending function."""
    linear = np_linear_factor(middle, pos)
    return np.select(
        [
            blend == GgrBlend.CURVED,
            blend == GgrBlend.SINE,
            blend == GgrBlend.SPHERE_INCREASING,
            blend == GgrBlend.SPHERE_DECREASING,
            blend == GgrBlend.STEP,
        ],
        [
            np_curved_factor(middle, pos),
            (np.sin(-np.pi / 2 + np.pi * linear) + 1.0) / 2.0,
            np.sqrt(np.clip(1.0 - (linear - 1.0) ** 2, 0.0, 1.0)),
            1.0 - np.sqrt(np.clip(1.0 - linear ** 2, 0.0, 1.0)),
            (pos >= middle).astype(float),
        ],
        default=linear,
    )


def np_hue_ccw(left: NDArray, right: NDArray, f: NDArray) -> NDArray:
    """Hue turns (fractions of a circle) swept counter-clockwise from left to right."""
    h = np.where(left < right, left + (right - left) * f, left + (1.0 - (left - right)) * f)
    return np.mod(h, 1.0)


def np_hue_cw(left: NDArray, right: NDArray, f: NDArray) -> NDArray:
    h = np.where(right < left, left - (left - right) * f, left - (1.0 - (right - left)) * f)
    return np.mod(h, 1.0)


def _np_hsv_blend(left: NDArray, right: NDArray, f: NDArray, clockwise: bool) -> NDArray:
    lhsv = np_to_space(left, BlendMode.HSV)
    rhsv = np_to_space(right, BlendMode.HSV)
    hue_fn = np_hue_cw if clockwise else np_hue_ccw
    mixed = lhsv + f[:, None] * (rhsv - lhsv)
    mixed[:, 0] = 360.0 * hue_fn(lhsv[:, 0] / 360.0, rhsv[:, 0] / 360.0, f)
    return np_from_space(mixed, BlendMode.HSV)


# ------------------ GRADIENT ------------------
class GimpGradient:
    """
    Immutable GIMP gradient over the unit domain.

    Segment arrays are indexed in file order; endpoint colors that follow the
    foreground or background are resolved when the file is read.
    """
    __slots__ = ('_name', '_left', '_middle', '_right', '_left_colors', '_right_colors',
                 '_blend', '_coloring', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        name: Optional[str],
        segments: NDArray,
        left_colors: NDArray,
        right_colors: NDArray,
        blend: Sequence[int],
        coloring: Sequence[int],
    ) -> None:
        segments = np.asarray(segments, dtype=float).reshape(-1, 3)
        if len(segments) == 0:
            raise InvalidGgrError("GIMP gradient has no segments")
        arrays = {
            '_left': segments[:, 0].copy(),
            '_middle': segments[:, 1].copy(),
            '_right': segments[:, 2].copy(),
            '_left_colors': np.asarray(left_colors, dtype=float).reshape(-1, 4),
            '_right_colors': np.asarray(right_colors, dtype=float).reshape(-1, 4),
            '_blend': np.asarray(blend, dtype=int),
            '_coloring': np.asarray(coloring, dtype=int),
        }
        for attr, arr in arrays.items():
            arr.flags.writeable = False
            super().__setattr__(attr, arr)
        self._name = name
        super().__setattr__('_is_frozen', True)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def label(self) -> str:
        return self._name if self._name else "(no name)"

    @property
    def domain(self) -> Domain:
        return 0.0, 1.0

    def __len__(self) -> int:
        return len(self._left)

    def sample_array(self, positions: Union[Sequence[float], NDArray]) -> NDArray:
        """sRGB+alpha colors of shape (m, 4) at ``positions`` clamped into [0, 1]."""
        t = np.asarray(_clamp(np.atleast_1d(np.asarray(positions, dtype=float)), 0.0, 1.0), dtype=float)
        idx = np.clip(np.searchsorted(self._right, t, side='left'), 0, len(self) - 1)

        left = self._left[idx]
        span = self._right[idx] - left
        degenerate = span < SEGMENT_EPSILON
        safe_span = np.where(degenerate, 1.0, span)
        middle = np.where(degenerate, 0.5, (self._middle[idx] - left) / safe_span)
        pos = np.where(degenerate, 0.5, np.clip((t - left) / safe_span, 0.0, 1.0))
        f = np_blend_factor(self._blend[idx], middle, pos)

        lc = self._left_colors[idx]
        rc = self._right_colors[idx]
        coloring = self._coloring[idx][:, None]
        result = np.select(
            [coloring == GgrColoring.HSV_CCW, coloring == GgrColoring.HSV_CW],
            [_np_hsv_blend(lc, rc, f, clockwise=False), _np_hsv_blend(lc, rc, f, clockwise=True)],
            default=lc + f[:, None] * (rc - lc),
        )
        # alpha always blends linearly in the segment's factor
        result[:, 3] = lc[:, 3] + f * (rc[:, 3] - lc[:, 3])
        return np.array(_clamp(result, 0.0, 1.0), dtype=float)

    def sample(self, t: float) -> Color:
        return Color(*self.sample_array([clamp(float(t), 0.0, 1.0)])[0])

    def sample_many(self, positions: Iterable[float]) -> List[Color]:
        return sampler.sample_many(self, positions)

    def sample_n(self, n: int) -> List[Color]:
        return sampler.sample_n(self, n)

    def __repr__(self) -> str:
        return f"GimpGradient(name={self._name!r}, segments={len(self)})"


# ------------------ PARSING ------------------
def _endpoint_color(kind: int, fixed: NDArray, foreground: Color, background: Color) -> NDArray:
    if kind == GgrEndpoint.FOREGROUND:
        return foreground.to_array()
    if kind == GgrEndpoint.FOREGROUND_TRANSPARENT:
        return foreground.with_alpha(0.0).to_array()
    if kind == GgrEndpoint.BACKGROUND:
        return background.to_array()
    if kind == GgrEndpoint.BACKGROUND_TRANSPARENT:
        return background.with_alpha(0.0).to_array()
    return fixed


def _enum_value(enum_cls, text: str, line_no: int) -> int:
    try:
        return enum_cls(int(text)).value
    except ValueError:
        raise InvalidGgrError(f"line {line_no}: invalid {enum_cls.__name__} value {text!r}") from None


def parse_ggr(
    text: str,
    foreground: Optional[Color] = None,
    background: Optional[Color] = None,
) -> GimpGradient:
    """
    Parse the contents of a GIMP gradient file.

    Args:
        text: File contents
        foreground: Color for endpoints that follow the foreground [default: black]
        background: Color for endpoints that follow the background [default: white]

    Raises:
        InvalidGgrError: Missing header, bad segment count or malformed segment.
    """
    foreground = value_or_default(foreground, GGR_FOREGROUND)
    background = value_or_default(background, GGR_BACKGROUND)

    lines = [line.strip() for line in text.splitlines()]
    if not lines or lines[0] != GGR_HEADER:
        raise InvalidGgrError(f"Missing {GGR_HEADER!r} header")

    index = 1
    name = None
    if index < len(lines) and lines[index].startswith("Name:"):
        name = lines[index][len("Name:"):].strip()
        index += 1

    try:
        count = int(lines[index])
    except (IndexError, ValueError):
        raise InvalidGgrError("Missing or invalid segment count") from None
    if count < 1:
        raise InvalidGgrError(f"Invalid segment count {count}")

    segments, left_colors, right_colors, blend, coloring = [], [], [], [], []
    for offset in range(count):
        line_no = index + offset + 2
        try:
            fields = lines[index + 1 + offset].split()
        except IndexError:
            raise InvalidGgrError(f"Expected {count} segments, got {offset}") from None
        if len(fields) < 13:
            raise InvalidGgrError(f"line {line_no}: expected at least 13 values, got {len(fields)}")
        try:
            values = np.array([float(v) for v in fields[:11]])
        except ValueError:
            raise InvalidGgrError(f"line {line_no}: malformed number") from None

        left_kind = _enum_value(GgrEndpoint, fields[13], line_no) if len(fields) > 13 else GgrEndpoint.FIXED
        right_kind = _enum_value(GgrEndpoint, fields[14], line_no) if len(fields) > 14 else GgrEndpoint.FIXED
        segments.append(values[:3])
        left_colors.append(_endpoint_color(left_kind, values[3:7], foreground, background))
        right_colors.append(_endpoint_color(right_kind, values[7:11], foreground, background))
        blend.append(_enum_value(GgrBlend, fields[11], line_no))
        coloring.append(_enum_value(GgrColoring, fields[12], line_no))

    logger.debug("Read GIMP gradient %r with %d segment(s)", name, count)
    return GimpGradient(name, np.array(segments), np.array(left_colors), np.array(right_colors), blend, coloring)
