from typing import Optional, Tuple, TypeVar

from .colors.color import Color
from .types.format_type import FormatType
from .types.modes import BlendMode, InterpolationMode

T = TypeVar('T')

DEFAULT_BLEND_MODE = BlendMode.OKLAB
DEFAULT_INTERPOLATION = InterpolationMode.CATMULL_ROM
DEFAULT_DOMAIN: Tuple[float, float] = (0.0, 1.0)

DEFAULT_FORMAT = FormatType.HEX
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 2

# Checkerboard shown behind translucent swatches; parity 0 uses the first tone
CHECKERBOARD_COLORS: Tuple[Color, Color] = (Color.gray(0.20), Color.gray(0.05))
CHECKERBOARD_BLOCK_WIDTH = 2

PRESET_BLEND_MODE = BlendMode.RGB
PRESET_INTERPOLATION = InterpolationMode.BASIS

# GIMP gradient endpoint colors that follow the foreground / background
GGR_FOREGROUND = Color(0.0, 0.0, 0.0)
GGR_BACKGROUND = Color(1.0, 1.0, 1.0)


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
