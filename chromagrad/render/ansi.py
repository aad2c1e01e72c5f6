"""24-bit ANSI escape emission for rendered swatches and colored labels."""
from __future__ import annotations
from typing import List, Sequence

from numpy import ndarray as NDArray

from ..colors.color import Color
from ..formatting import contrast_text_color
from .renderer import composite, grid_to_rgb8

RESET = "\x1b[0m"


def fg(r: int, g: int, b: int) -> str:
    return f"\x1b[38;2;{r};{g};{b}m"


def bg(r: int, g: int, b: int) -> str:
    return f"\x1b[48;2;{r};{g};{b}m"


def paint(text: str, background: Color, foreground: Color | None = None) -> str:
    """``text`` on an opaque ``background``; foreground defaults to contrast text."""
    foreground = foreground if foreground is not None else contrast_text_color(background)
    return f"{fg(*foreground.rgba8()[:3])}{bg(*background.rgba8()[:3])}{text}{RESET}"


def grid_lines(grid: NDArray) -> List[str]:
    """One line of background-colored spaces per row of an opaque grid."""
    rgb8 = grid_to_rgb8(grid)
    return [
        "".join(f"{bg(int(r), int(g), int(b))} " for r, g, b in row) + RESET
        for row in rgb8
    ]


def label_lines(
    labels: Sequence[str],
    colors: Sequence[Color],
    width: int,
    background: Color,
) -> List[str]:
    """
    Lay colored labels out in lines at most ``width`` columns wide.

    Each label is drawn on its color flattened onto ``background`` with black
    or white text, and labels are separated by a single space.
    """
    lines: List[str] = []
    current: List[str] = []
    remaining = width
    for text, color in zip(labels, colors):
        if current and remaining < len(text):
            lines.append("".join(current).rstrip())
            current = []
            remaining = width
        current.append(paint(text, composite(color, background)))
        remaining -= len(text)
        if remaining >= 1:
            current.append(" ")
            remaining -= 1
    if current:
        lines.append("".join(current).rstrip())
    return lines
