from .modes import BlendMode, InterpolationMode
from .format_type import FormatType
from .color_types import Scalar, RGBA, ColorLike, Domain, StopLike

__all__ = [
    "BlendMode",
    "InterpolationMode",
    "FormatType",
    "Scalar",
    "RGBA",
    "ColorLike",
    "Domain",
    "StopLike",
]
