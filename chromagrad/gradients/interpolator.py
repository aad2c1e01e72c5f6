from __future__ import annotations
from typing import Callable, Dict, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.modes import InterpolationMode

# Kernel signature: control points v0..v3 of shape (m, C) and the local
# segment parameter f of shape (m, 1) -> interpolated values (m, C)
SplineKernel = Callable[[NDArray, NDArray, NDArray, NDArray, NDArray], NDArray]


def linear_kernel(v0: NDArray, v1: NDArray, v2: NDArray, v3: NDArray, f: NDArray) -> NDArray:
    return v1 + f * (v2 - v1)


def basis_kernel(v0: NDArray, v1: NDArray, v2: NDArray, v3: NDArray, f: NDArray) -> NDArray:
    """Uniform cubic B-spline; approximates rather than passes through v1/v2."""
    f2 = f * f
    f3 = f2 * f
    return (
        (1 - 3 * f + 3 * f2 - f3) * v0
        + (4 - 6 * f2 + 3 * f3) * v1
        + (1 + 3 * f + 3 * f2 - 3 * f3) * v2
        + f3 * v3
    ) / 6


def catmull_rom_kernel(v0: NDArray, v1: NDArray, v2: NDArray, v3: NDArray, f: NDArray) -> NDArray:
    """Uniform Catmull-Rom spline; equals v1 at f=0 and v2 at f=1."""
    f2 = f * f
    f3 = f2 * f
    return 0.5 * (
        2 * v1
        + (v2 - v0) * f
        + (2 * v0 - 5 * v1 + 4 * v2 - v3) * f2
        + (3 * v1 - v0 - 3 * v2 + v3) * f3
    )


KERNELS: Dict[InterpolationMode, SplineKernel] = {
    InterpolationMode.LINEAR: linear_kernel,
    InterpolationMode.BASIS: basis_kernel,
    InterpolationMode.CATMULL_ROM: catmull_rom_kernel,
}


def segment_parameters(positions: NDArray, t: NDArray) -> Tuple[NDArray, NDArray]:
    """
    Locate the segment bracketing each query and the local parameter in it.

    Args:
        positions: Sorted stop positions, shape (n,), n >= 2
        t: Query positions, shape (m,)

    Returns:
        (i, f): segment start indices in [0, n-2] and local parameters in
        [0, 1]. Zero-length segments yield f = 0.
    """
    n = len(positions)
    i = np.searchsorted(positions, t, side='right') - 1
    i = np.clip(i, 0, n - 2)
    p0 = positions[i]
    p1 = positions[i + 1]
    span = p1 - p0
    safe_span = np.where(span > 0, span, 1.0)
    f = np.where(span > 0, (t - p0) / safe_span, 0.0)
    return i, np.clip(f, 0.0, 1.0)


def control_points(
    values: NDArray,
    i: NDArray,
    reflect_ends: bool = False,
) -> Tuple[NDArray, NDArray, NDArray, NDArray]:
    """
    Four neighbouring control points per segment.

    Past either end the end stop is repeated, or with ``reflect_ends`` a
    phantom point is mirrored through it (``2 * v1 - v2`` before the first
    stop, ``2 * v2 - v1`` after the last). A uniform B-spline only reaches its
    end stops with mirrored phantoms.
    """
    last = len(values) - 1
    v0 = values[np.maximum(i - 1, 0)]
    v1 = values[i]
    v2 = values[np.minimum(i + 1, last)]
    v3 = values[np.minimum(i + 2, last)]
    if reflect_ends:
        v0 = np.where((i == 0)[:, None], 2 * v1 - v2, v0)
        v3 = np.where((i + 2 > last)[:, None], 2 * v2 - v1, v3)
    return v0, v1, v2, v3


def interpolate(
    values: NDArray,
    positions: NDArray,
    t: NDArray,
    mode: InterpolationMode,
) -> NDArray:
    """
    Evaluate the spline ``mode`` through ``values`` at positions ``t``.

    Args:
        values: Control values, shape (n, C), already in the blend space
        positions: Sorted stop positions, shape (n,)
        t: Query positions, shape (m,)
        mode: Spline family

    Returns:
        Interpolated values of shape (m, C)
    """
    values = np.asarray(values, dtype=float)
    t = np.atleast_1d(np.asarray(t, dtype=float))
    if len(values) == 1:
        return np.repeat(values, len(t), axis=0)

    mode = InterpolationMode.parse(mode)
    i, f = segment_parameters(np.asarray(positions, dtype=float), t)
    v0, v1, v2, v3 = control_points(values, i, reflect_ends=mode is InterpolationMode.BASIS)
    return KERNELS[mode](v0, v1, v2, v3, f[:, None])


def interpolate_linear_channel(values: NDArray, positions: NDArray, t: NDArray) -> NDArray:
    """Piecewise-linear interpolation of a single channel, shape (n,) -> (m,)."""
    values = np.asarray(values, dtype=float)
    t = np.atleast_1d(np.asarray(t, dtype=float))
    if len(values) == 1:
        return np.repeat(values, len(t))
    i, f = segment_parameters(np.asarray(positions, dtype=float), t)
    return values[i] + f * (values[i + 1] - values[i])
