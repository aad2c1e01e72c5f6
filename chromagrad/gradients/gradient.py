from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Union
import logging

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp

from ..colors.color import Color
from ..conversions import np_to_space, np_from_space
from ..defaults import (
    DEFAULT_BLEND_MODE,
    DEFAULT_DOMAIN,
    DEFAULT_INTERPOLATION,
    value_or_default,
)
from ..errors import EmptyStopsError, InvalidDomainError
from ..types.color_types import ColorLike, Domain, StopLike
from ..types.modes import BlendMode, InterpolationMode
from .interpolator import interpolate, interpolate_linear_channel
from .stops import (
    ColorStop,
    StopList,
    evenly_spaced_positions,
    monotonic_positions,
    validate_domain,
)
from . import sampler

logger = logging.getLogger(__name__)

_clamp = bound_type_to_np_function[BoundType.CLAMP]

# Saturation / value below which a stop's hue is meaningless
ACHROMATIC_EPSILON = 1e-9


def _borrow_achromatic_hues(hsv: NDArray) -> NDArray:
    """Give gray stops the hue of their nearest chromatic neighbour."""
    achromatic = (hsv[:, 1] <= ACHROMATIC_EPSILON) | (hsv[:, 2] <= ACHROMATIC_EPSILON)
    chromatic = np.flatnonzero(~achromatic)
    if chromatic.size == 0 or not achromatic.any():
        return hsv
    hsv = hsv.copy()
    for i in np.flatnonzero(achromatic):
        nearest = chromatic[np.argmin(np.abs(chromatic - i))]
        hsv[i, 0] = hsv[nearest, 0]
    return hsv


def blend_space_values(colors: NDArray, blend_mode: BlendMode) -> NDArray:
    """
    Convert stop colors (n, 4) into the blend space used for interpolation.

    In HSV the hue channel is unwrapped so that consecutive stops are joined
    along the shorter arc; the inverse conversion wraps it back into [0, 360).
    """
    values = np_to_space(colors, blend_mode)
    if blend_mode.has_hue and len(values) > 1:
        values = _borrow_achromatic_hues(values)
        values[:, 0] = np.unwrap(values[:, 0], period=360.0)
    return values


def _default_domain(stops: StopList) -> Domain:
    first, last = stops.span
    if first < last:
        return first, last
    return DEFAULT_DOMAIN


class Gradient:
    """
    Immutable continuous gradient over a set of color stops.

    Stop colors are converted into the blend space once, at construction;
    every sample afterwards is a pure function of the query position.

    Args:
        stops: ``(position, color)`` pairs or :class:`ColorStop` objects.
            Colors are :class:`Color` instances or 3/4-tuples of unit floats.
        blend_mode: Space in which channels are interpolated.
        interpolation: Spline family.
        domain: ``(min, max)`` sampling range. Defaults to the span of the
            stop positions. Stops outside it are clamped onto it.

    Raises:
        EmptyStopsError: No stops were given.
        InvalidDomainError: ``min >= max`` or a bound is not finite.
        UnsupportedModeError: Unknown blend or interpolation keyword.
    """
    __slots__ = ('_stops', '_blend_mode', '_interpolation', '_domain', '_blend_values', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        stops: Union[StopList, Iterable[Union[ColorStop, StopLike]]],
        blend_mode: Union[BlendMode, str, None] = None,
        interpolation: Union[InterpolationMode, str, None] = None,
        domain: Optional[Sequence[float]] = None,
    ) -> None:
        blend_mode = BlendMode.parse(value_or_default(blend_mode, DEFAULT_BLEND_MODE))
        interpolation = InterpolationMode.parse(value_or_default(interpolation, DEFAULT_INTERPOLATION))
        stop_list = stops if isinstance(stops, StopList) else StopList(stops)

        domain = validate_domain(domain) if domain is not None else _default_domain(stop_list)
        stop_list = stop_list.clamped_to(domain)

        blend_values = blend_space_values(stop_list.colors, blend_mode)
        blend_values.flags.writeable = False

        self._stops = stop_list
        self._blend_mode = blend_mode
        self._interpolation = interpolation
        self._domain = domain
        self._blend_values = blend_values
        super().__setattr__('_is_frozen', True)

        logger.debug(
            "Built gradient: %d stops, blend=%s, interpolation=%s, domain=%s",
            len(stop_list), blend_mode.value, interpolation.value, domain,
        )

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[ColorLike],
        positions: Optional[Sequence[float]] = None,
        *,
        blend_mode: Union[BlendMode, str, None] = None,
        interpolation: Union[InterpolationMode, str, None] = None,
    ) -> Gradient:
        """
        Build a gradient from colors and optional positions.

        - No positions: colors are spread evenly over ``[0, 1]``.
        - Two positions and more than two colors: the positions are the
          domain and the colors are spread evenly within it.
        - Otherwise there must be one position per color. Decreasing
          positions are raised to their predecessor.

        Raises:
            EmptyStopsError: ``colors`` is empty.
            InvalidDomainError: Position count does not fit, or the implied
                domain is empty.
        """
        if len(colors) == 0:
            raise EmptyStopsError()

        domain: Optional[Domain] = None
        if positions is None:
            domain = DEFAULT_DOMAIN
            stop_positions = evenly_spaced_positions(len(colors), domain)
        elif len(positions) == 2 and len(colors) > 2:
            domain = validate_domain(positions)
            stop_positions = evenly_spaced_positions(len(colors), domain)
        elif len(positions) == len(colors):
            stop_positions = monotonic_positions(positions)
            if len(stop_positions) > 1:
                domain = validate_domain((stop_positions[0], stop_positions[-1]))
        else:
            raise InvalidDomainError(
                f"Expected 2 or {len(colors)} positions for {len(colors)} colors, got {len(positions)}"
            )

        stops = [ColorStop.coerce((p, c)) for p, c in zip(stop_positions, colors)]
        return cls(stops, blend_mode=blend_mode, interpolation=interpolation, domain=domain)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> StopList:
        return self._stops

    @property
    def blend_mode(self) -> BlendMode:
        return self._blend_mode

    @property
    def interpolation(self) -> InterpolationMode:
        return self._interpolation

    @property
    def domain(self) -> Domain:
        return self._domain

    # ------------------ SAMPLING ------------------
    def sample_array(self, positions: Union[Sequence[float], NDArray]) -> NDArray:
        """
        Vectorized sampling: sRGB+alpha colors of shape (m, 4) for ``positions``.

        Positions are clamped into the domain. Alpha is interpolated linearly
        whatever the blend or interpolation mode. The first and last stop
        colors are returned exactly at and beyond the ends of the stops.
        """
        dmin, dmax = self._domain
        t = np.atleast_1d(np.asarray(positions, dtype=float))
        t = np.asarray(_clamp(t, dmin, dmax), dtype=float)

        stop_positions = self._stops.positions
        stop_colors = self._stops.colors

        channels = interpolate(self._blend_values[:, :3], stop_positions, t, self._interpolation)
        alpha = interpolate_linear_channel(stop_colors[:, 3], stop_positions, t)
        blended = np.concatenate([channels, alpha[:, None]], axis=-1)
        result = np.array(_clamp(np_from_space(blended, self._blend_mode), 0.0, 1.0), dtype=float)

        if self._interpolation.passes_through_stops:
            idx = self._stops.np_find_segments(t)
            hit = stop_positions[idx] == t
            result[hit] = stop_colors[idx[hit]]

        # both ends pin to their stop; of stops sharing the first position the last wins
        head = self._stops.np_find_segments(stop_positions[:1])[0]
        result[t <= stop_positions[0]] = stop_colors[head]
        result[t >= stop_positions[-1]] = stop_colors[-1]
        return result

    def sample(self, t: float) -> Color:
        """Color at position ``t`` (clamped into the domain)."""
        dmin, dmax = self._domain
        return Color(*self.sample_array([clamp(float(t), dmin, dmax)])[0])

    def sample_many(self, positions: Iterable[float]) -> List[Color]:
        """Colors at each of ``positions``, in input order."""
        return sampler.sample_many(self, positions)

    def sample_n(self, n: int) -> List[Color]:
        """``n`` colors evenly spaced across the domain."""
        return sampler.sample_n(self, n)

    def __repr__(self) -> str:
        return (
            f"Gradient(stops={len(self._stops)}, blend_mode={self._blend_mode.value!r}, "
            f"interpolation={self._interpolation.value!r}, domain={self._domain})"
        )
