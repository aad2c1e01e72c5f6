"""
Swatch rendering: turns a row of sampled colors into a grid of opaque cells.

Translucent cells are composited ("over") onto a background which is either
a solid color or a two-tone checkerboard. Everything here works on float
RGBA arrays; turning the grid into terminal output is done by :mod:`.ansi`.
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from ..colors.color import Color, colors_to_array
from ..defaults import CHECKERBOARD_BLOCK_WIDTH, CHECKERBOARD_COLORS, DEFAULT_HEIGHT, value_or_default
from ..gradients.sampler import Sampleable, sample_swatch

_clamp = bound_type_to_np_function[BoundType.CLAMP]

Background = Union[Color, Tuple[Color, Color], None]


def np_composite(fg: NDArray, bg: NDArray) -> NDArray:
    """
    Vectorized "over" compositing of straight-alpha ``fg`` onto ``bg``.

    Args:
        fg: Foreground RGBA, shape (..., 4)
        bg: Background RGBA broadcastable to ``fg``; its alpha is ignored

    Returns:
        Opaque RGBA of shape (..., 4)
    """
    fg = np.asarray(_clamp(np.asarray(fg, dtype=float), 0.0, 1.0), dtype=float)
    bg = np.broadcast_to(np.asarray(bg, dtype=float), fg.shape)
    alpha = fg[..., 3:4]
    rgb = fg[..., :3] * alpha + bg[..., :3] * (1.0 - alpha)
    # exact pass-through at the alpha extremes
    rgb = np.where(alpha >= 1.0, fg[..., :3], rgb)
    rgb = np.where(alpha <= 0.0, bg[..., :3], rgb)
    return np.concatenate([rgb, np.ones_like(alpha)], axis=-1)


def composite(fg: Color, bg: Color) -> Color:
    """Single-color :func:`np_composite`."""
    return Color(*np_composite(fg.to_array(), bg.to_array()))


def checkerboard_parity(x, y, block_width: int = CHECKERBOARD_BLOCK_WIDTH):
    """0 or 1 for the checker block holding column ``x`` of row ``y``."""
    return ((np.asarray(x) // block_width) & 1) ^ (np.asarray(y) & 1)


def checkerboard_tone(
    x: int,
    y: int,
    colors: Optional[Tuple[Color, Color]] = None,
    block_width: int = CHECKERBOARD_BLOCK_WIDTH,
) -> Color:
    colors = value_or_default(colors, CHECKERBOARD_COLORS)
    return colors[int(checkerboard_parity(x, y, block_width))]


def background_grid(
    rows: int,
    cols: int,
    background: Background = None,
    block_width: int = CHECKERBOARD_BLOCK_WIDTH,
) -> NDArray:
    """
    Background RGBA of shape (rows, cols, 4).

    A single :class:`Color` gives a solid fill; a pair of colors (or None for
    the default tones) gives a checkerboard.
    """
    if isinstance(background, Color):
        return np.broadcast_to(background.to_array(), (rows, cols, 4)).copy()

    tones = colors_to_array(value_or_default(background, CHECKERBOARD_COLORS))
    ys, xs = np.mgrid[0:rows, 0:cols]
    return tones[checkerboard_parity(xs, ys, block_width)]


def render_colors(
    colors: Sequence[Color],
    rows: int = DEFAULT_HEIGHT,
    background: Background = None,
    block_width: int = CHECKERBOARD_BLOCK_WIDTH,
) -> NDArray:
    """
    Lay ``colors`` out as columns repeated over ``rows`` rows and flatten
    transparency onto ``background``.

    Returns:
        Opaque RGBA grid of shape (rows, len(colors), 4)
    """
    if rows < 0:
        raise ValueError(f"Row count must be non-negative, got {rows}")
    fg = colors_to_array(colors)
    grid = np.broadcast_to(fg, (rows, len(fg), 4))
    return np_composite(grid, background_grid(rows, len(fg), background, block_width))


def render_gradient(
    gradient: Sampleable,
    width: int,
    height: int = DEFAULT_HEIGHT,
    background: Background = None,
    block_width: int = CHECKERBOARD_BLOCK_WIDTH,
) -> NDArray:
    """Render a ``width`` x ``height`` preview swatch of ``gradient``."""
    return render_colors(sample_swatch(gradient, width), height, background, block_width)


def grid_to_rgb8(grid: NDArray) -> NDArray:
    """Float RGBA grid → uint8 RGB grid, rounding half up."""
    rgb = np.asarray(_clamp(np.asarray(grid, dtype=float)[..., :3], 0.0, 1.0), dtype=float)
    return (rgb * 255 + 0.5).astype(np.uint8)
