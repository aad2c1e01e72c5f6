"""
Sampling helpers built on :meth:`Gradient.sample_array`.

All functions are eager: they return lists or arrays, never generators, so
repeating a request always yields the same result.
"""
from __future__ import annotations
from typing import Iterable, List, Protocol, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray
from unitfield import flat_1d_upbm

from ..colors.color import Color, array_to_colors
from ..types.color_types import Domain


class Sampleable(Protocol):
    """Anything with a domain and vectorized sampling, such as :class:`Gradient`."""

    @property
    def domain(self) -> Domain: ...

    def sample_array(self, positions: Union[Sequence[float], NDArray]) -> NDArray: ...


def remap(t, a: float, b: float, c: float, d: float):
    """Map ``t`` from the range ``[a, b]`` onto ``[c, d]``."""
    return (t - a) * ((d - c) / (b - a)) + c


def even_positions(domain: Domain, n: int) -> NDArray:
    """
    ``n`` evenly spaced positions covering ``domain`` end to end.

    A single sample sits at the middle of the domain.
    """
    if n < 0:
        raise ValueError(f"Sample count must be non-negative, got {n}")
    dmin, dmax = domain
    if n == 0:
        return np.empty(0, dtype=float)
    if n == 1:
        return np.array([(dmin + dmax) / 2.0])
    u = np.asarray(flat_1d_upbm(n), dtype=float).ravel()
    positions = dmin + u * (dmax - dmin)
    positions[[0, -1]] = dmin, dmax
    return positions


def swatch_positions(domain: Domain, width: int) -> NDArray:
    """Sample position of each of ``width`` display columns."""
    dmin, dmax = domain
    if width <= 0:
        return np.empty(0, dtype=float)
    return remap(np.arange(width, dtype=float), 0.0, float(width), dmin, dmax)


def sample_n(gradient: Sampleable, n: int) -> List[Color]:
    """Exactly ``n`` colors at evenly spaced positions, in ascending order."""
    positions = even_positions(gradient.domain, n)
    if positions.size == 0:
        return []
    return array_to_colors(gradient.sample_array(positions))


def sample_many(gradient: Sampleable, positions: Iterable[float]) -> List[Color]:
    """Colors at arbitrary positions, preserving input order."""
    positions = np.fromiter((float(t) for t in positions), dtype=float)
    if positions.size == 0:
        return []
    return array_to_colors(gradient.sample_array(positions))


def sample_swatch(gradient: Sampleable, width: int) -> List[Color]:
    """One color per display column for a ``width``-wide swatch."""
    positions = swatch_positions(gradient.domain, width)
    if positions.size == 0:
        return []
    return array_to_colors(gradient.sample_array(positions))
