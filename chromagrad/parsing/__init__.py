from .css import parse_color, parse_colors
from .svg import SvgGradient, parse_svg, parse_percent_or_float, parse_stop_style
from .ggr import GimpGradient, parse_ggr

__all__ = [
    "parse_color",
    "parse_colors",
    "SvgGradient",
    "parse_svg",
    "parse_percent_or_float",
    "parse_stop_style",
    "GimpGradient",
    "parse_ggr",
]
