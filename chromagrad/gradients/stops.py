from __future__ import annotations
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union
import logging
import math

import numpy as np

from ..colors.color import Color, colors_to_array
from ..errors import EmptyStopsError, InvalidDomainError
from ..types.color_types import Domain, StopLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorStop:
    """A (position, color) anchor point of a gradient."""
    position: float
    color: Color

    @classmethod
    def coerce(cls, stop: Union[ColorStop, StopLike]) -> ColorStop:
        if isinstance(stop, ColorStop):
            return stop
        position, color = stop
        position = float(position)
        if not math.isfinite(position):
            raise InvalidDomainError(f"Stop position must be finite, got {position!r}")
        return cls(position, Color.coerce(color))


def validate_domain(domain: Sequence[float]) -> Domain:
    """Return ``domain`` as a float pair, raising InvalidDomainError unless ``min < max``."""
    try:
        dmin, dmax = (float(v) for v in domain)
    except (TypeError, ValueError):
        raise InvalidDomainError(f"Domain must be a (min, max) pair, got {domain!r}") from None
    if not (math.isfinite(dmin) and math.isfinite(dmax)):
        raise InvalidDomainError(f"Domain bounds must be finite, got ({dmin}, {dmax})")
    if dmin >= dmax:
        raise InvalidDomainError(f"Domain min must be less than max, got ({dmin}, {dmax})")
    return dmin, dmax


class StopList:
    """
    Ordered, immutable sequence of color stops.

    Stops are stable-sorted by position, so stops sharing a position keep the
    order in which they were supplied. Positions and colors are also kept as
    read-only numpy arrays for the vectorized interpolators.
    """
    __slots__ = ('_stops', '_positions', '_colors')

    def __init__(self, stops: Iterable[Union[ColorStop, StopLike]]) -> None:
        coerced = [ColorStop.coerce(s) for s in stops]
        if not coerced:
            raise EmptyStopsError()
        # sorted() is stable: ties preserve input order
        self._stops: Tuple[ColorStop, ...] = tuple(sorted(coerced, key=lambda s: s.position))
        self._positions = np.array([s.position for s in self._stops], dtype=float)
        self._colors = colors_to_array([s.color for s in self._stops])
        self._positions.flags.writeable = False
        self._colors.flags.writeable = False

    def clamped_to(self, domain: Domain) -> StopList:
        """Return a copy whose positions are clamped into ``domain``."""
        dmin, dmax = domain
        if self._positions[0] >= dmin and self._positions[-1] <= dmax:
            return self
        logger.debug("Clamping stop positions into domain (%s, %s)", dmin, dmax)
        return StopList(
            ColorStop(min(max(s.position, dmin), dmax), s.color) for s in self._stops
        )

    # ------------------ LOOKUP ------------------
    def find_segment(self, t: float) -> int:
        """
        Index of the rightmost stop whose position is ``<= t``.

        Returns 0 when ``t`` lies before the first stop; when ``t`` is at or
        after the last stop the last index is returned.
        """
        return max(bisect_right(self._positions.tolist(), t) - 1, 0)

    def np_find_segments(self, t: np.ndarray) -> np.ndarray:
        """Vectorized :meth:`find_segment`."""
        idx = np.searchsorted(self._positions, np.asarray(t, dtype=float), side='right') - 1
        return np.clip(idx, 0, len(self._stops) - 1)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def positions(self) -> np.ndarray:
        return self._positions

    @property
    def colors(self) -> np.ndarray:
        """sRGB+alpha stop colors, shape ``(n, 4)``."""
        return self._colors

    @property
    def first(self) -> ColorStop:
        return self._stops[0]

    @property
    def last(self) -> ColorStop:
        return self._stops[-1]

    @property
    def span(self) -> Domain:
        return float(self._positions[0]), float(self._positions[-1])

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[ColorStop]:
        return iter(self._stops)

    def __getitem__(self, index: int) -> ColorStop:
        return self._stops[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, StopList):
            return self._stops == other._stops
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        return f"StopList({list(self._stops)!r})"


def evenly_spaced_positions(count: int, domain: Domain) -> List[float]:
    """``count`` positions spread evenly over ``domain``, ends included."""
    dmin, dmax = domain
    if count == 1:
        return [dmin]
    step = (dmax - dmin) / (count - 1)
    return [dmin + i * step for i in range(count)]


def monotonic_positions(positions: Sequence[float]) -> List[float]:
    """Raise every position that falls below its predecessor up to it."""
    result: List[float] = []
    previous = -math.inf
    for p in positions:
        previous = max(float(p), previous)
        result.append(previous)
    return result
