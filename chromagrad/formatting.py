"""
Text representations of final colors.

Formatting never fails for a valid :class:`Color`: channels are clamped into
``[0, 1]`` first, and the hue of achromatic colors is reported as 0.
"""
from __future__ import annotations
from typing import Callable, Dict, Iterable, Union
import json

import numpy as np
from boundednumbers.functions import clamp

from .colors.color import BLACK, WHITE, Color
from .conversions import np_to_space
from .defaults import DEFAULT_FORMAT, value_or_default
from .types.format_type import FormatType, percent_channels

# WCAG luminance below which labels are drawn in white
LABEL_LUMINANCE_THRESHOLD = 0.3


def format_alpha(alpha: float) -> str:
    """``,NN.NN%`` suffix for functional notations, empty when fully opaque."""
    text = f",{clamp(alpha, 0.0, 1.0) * 100:.2f}%"
    if text.startswith(",100"):
        return ""
    return text


def to_hex(color: Color) -> str:
    r, g, b, a = color.rgba8()
    if a < 255:
        return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
    return f"#{r:02x}{g:02x}{b:02x}"


def _format_rgb(color: Color) -> str:
    r, g, b, a = color.clamped()
    return f"rgb({r:.3f},{g:.3f},{b:.3f}{format_alpha(a)})"


def _format_rgb255(color: Color) -> str:
    r, g, b, _ = color.rgba8()
    return f"rgb({r},{g},{b}{format_alpha(color.a)})"


def _hue_notation(fmt: FormatType) -> Callable[[Color], str]:
    scale = percent_channels[fmt]

    def _format(color: Color) -> str:
        h, x, y, a = np_to_space(color.clamped().to_array(), fmt.value)
        return f"{fmt.value}({h:.2f},{x * scale:.2f}%,{y * scale:.2f}%{format_alpha(a)})"

    return _format


FORMATTERS: Dict[FormatType, Callable[[Color], str]] = {
    FormatType.HEX: to_hex,
    FormatType.RGB: _format_rgb,
    FormatType.RGB255: _format_rgb255,
    FormatType.HSL: _hue_notation(FormatType.HSL),
    FormatType.HSV: _hue_notation(FormatType.HSV),
    FormatType.HWB: _hue_notation(FormatType.HWB),
}


def format_color(color: Color, fmt: Union[FormatType, str, None] = None) -> str:
    """
    Format ``color`` as text.

    Args:
        color: Color to format
        fmt: One of hex, rgb, rgb255, hsl, hsv, hwb. Defaults to hex.

    Returns:
        e.g. ``#ff8000``, ``rgb(1.000,0.502,0.000)``, ``rgb(255,128,0)``,
        ``hsl(30.12,100.00%,50.00%)``

    Raises:
        UnsupportedModeError: ``fmt`` is not a known format keyword.
    """
    fmt = FormatType.parse(value_or_default(fmt, DEFAULT_FORMAT))
    return FORMATTERS[fmt](Color.coerce(color))


def format_colors_array(colors: Iterable[Color], fmt: Union[FormatType, str, None] = None) -> str:
    """All ``colors`` as a JSON array of formatted strings."""
    return json.dumps([format_color(c, fmt) for c in colors])


def _luminance_channel(c: np.ndarray) -> np.ndarray:
    return np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def relative_luminance(color: Color) -> float:
    """WCAG 2.0 relative luminance of the opaque part of ``color``."""
    rgb = color.clamped().to_array()[:3]
    lum = _luminance_channel(rgb)
    return float(0.2126 * lum[0] + 0.7152 * lum[1] + 0.0722 * lum[2])


def contrast_text_color(background: Color) -> Color:
    """Black or white, whichever reads better on ``background``."""
    if relative_luminance(background) < LABEL_LUMINANCE_THRESHOLD:
        return WHITE
    return BLACK
