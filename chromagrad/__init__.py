"""Chromagrad: continuous color gradients from color stops."""

__version__ = "0.1.0"

from .colors import Color, BLACK, WHITE, TRANSPARENT
from .types import BlendMode, InterpolationMode, FormatType
from .errors import (
    GradientError,
    EmptyStopsError,
    InvalidDomainError,
    InvalidColorError,
    UnsupportedModeError,
    UnknownPresetError,
    InvalidSvgError,
    InvalidGgrError,
)
from .conversions import to_space, from_space, convert, np_to_space, np_from_space
from .gradients import ColorStop, StopList, Gradient, sample_n, sample_many
from .render import composite, checkerboard_tone, render_colors, render_gradient
from .formatting import format_color, format_colors_array, relative_luminance, contrast_text_color
from .presets import preset_gradient, preset_names
from .parsing import parse_color, parse_svg, SvgGradient, parse_ggr, GimpGradient

__all__ = [
    '__version__',

    # Colors
    'Color',
    'BLACK',
    'WHITE',
    'TRANSPARENT',

    # Modes
    'BlendMode',
    'InterpolationMode',
    'FormatType',

    # Errors
    'GradientError',
    'EmptyStopsError',
    'InvalidDomainError',
    'InvalidColorError',
    'UnsupportedModeError',
    'UnknownPresetError',
    'InvalidSvgError',
    'InvalidGgrError',

    # Conversions
    'to_space',
    'from_space',
    'convert',
    'np_to_space',
    'np_from_space',

    # Gradients
    'ColorStop',
    'StopList',
    'Gradient',
    'sample_n',
    'sample_many',

    # Rendering and formatting
    'composite',
    'checkerboard_tone',
    'render_colors',
    'render_gradient',
    'format_color',
    'format_colors_array',
    'relative_luminance',
    'contrast_text_color',

    # Collaborators
    'preset_gradient',
    'preset_names',
    'parse_color',
    'parse_svg',
    'SvgGradient',
    'parse_ggr',
    'GimpGradient',
]
