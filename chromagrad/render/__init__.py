from .renderer import (
    np_composite,
    composite,
    checkerboard_parity,
    checkerboard_tone,
    background_grid,
    render_colors,
    render_gradient,
    grid_to_rgb8,
)
from .ansi import paint, grid_lines, label_lines

__all__ = [
    "np_composite",
    "composite",
    "checkerboard_parity",
    "checkerboard_tone",
    "background_grid",
    "render_colors",
    "render_gradient",
    "grid_to_rgb8",
    "paint",
    "grid_lines",
    "label_lines",
]
