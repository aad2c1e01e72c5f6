"""
Chromagrad Color Space Conversions
==================================

Vectorized conversions between sRGB and the spaces gradients are blended or
reported in. Every ``np_*`` function takes three channel arrays (or scalars)
and returns an array of shape ``(..., 3)``; the high-level wrappers take and
return RGBA data of shape ``(..., 4)`` and pass alpha through unchanged.

Spaces
------
- rgb: nonlinear sRGB, channels in [0, 1]
- linear-rgb: linear-light sRGB (gamma decoded)
- hsv / hsl / hwb: hue in degrees [0, 360), other channels in [0, 1]
- oklab: perceptual L, a, b

Every conversion is total: hue is taken modulo 360 and the transfer
functions are extended symmetrically to negative values.

High-Level API
--------------
    np_to_space(rgba, space) / np_from_space(values, space)
    to_space(color, space) / from_space(values, space)
    convert(values, from_space, to_space)

Examples
--------
>>> from chromagrad.conversions import to_space, from_space
>>> h, s, v, a = to_space((1.0, 0.5, 0.0, 1.0), "hsv")
>>> from_space((h, s, v, a), "hsv")
Color(1, 0.5, 0, 1)
"""

from .gamma import np_srgb_to_linear, np_linear_to_srgb
from .hsv import np_unit_rgb_to_hsv, np_hsv_to_unit_rgb
from .hsl import np_unit_rgb_to_hsl, np_hsl_to_unit_rgb
from .hwb import np_unit_rgb_to_hwb, np_hwb_to_unit_rgb, np_hsv_to_hwb, np_hwb_to_hsv
from .oklab import (
    np_unit_rgb_to_oklab,
    np_oklab_to_unit_rgb,
    np_linear_rgb_to_oklab,
    np_oklab_to_linear_rgb,
)
from .cubehelix import np_cubehelix_to_unit_rgb
from .wrapper import (
    ColorSpace,
    SPACES,
    np_to_space,
    np_from_space,
    to_space,
    from_space,
    convert,
)

__all__ = [
    # sRGB transfer function
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # Hue spaces
    'np_unit_rgb_to_hsv',
    'np_hsv_to_unit_rgb',
    'np_unit_rgb_to_hsl',
    'np_hsl_to_unit_rgb',
    'np_unit_rgb_to_hwb',
    'np_hwb_to_unit_rgb',
    'np_hsv_to_hwb',
    'np_hwb_to_hsv',

    # Oklab
    'np_unit_rgb_to_oklab',
    'np_oklab_to_unit_rgb',
    'np_linear_rgb_to_oklab',
    'np_oklab_to_linear_rgb',

    # Cubehelix (preset ramps only)
    'np_cubehelix_to_unit_rgb',

    # High-level API
    'ColorSpace',
    'SPACES',
    'np_to_space',
    'np_from_space',
    'to_space',
    'from_space',
    'convert',
]
