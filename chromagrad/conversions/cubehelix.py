import numpy as np
from numpy import ndarray as NDArray

from .hsv import _broadcast

# Green's cubehelix basis vectors
CUBEHELIX_A = -0.14861
CUBEHELIX_B = 1.78277
CUBEHELIX_C = -0.29227
CUBEHELIX_D = -0.90649
CUBEHELIX_E = 1.97294


def np_cubehelix_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: cubehelix (hue in degrees, saturation, lightness) to sRGB.

    Saturations above 1 are allowed and may push channels outside [0, 1];
    callers clamp.
    """
    h, s, l = _broadcast(h, s, l)
    angle = np.radians(h + 120.0)
    amplitude = s * l * (1.0 - l)
    cos_h = np.cos(angle)
    sin_h = np.sin(angle)
    r = l + amplitude * (CUBEHELIX_A * cos_h + CUBEHELIX_B * sin_h)
    g = l + amplitude * (CUBEHELIX_C * cos_h + CUBEHELIX_D * sin_h)
    b = l + amplitude * (CUBEHELIX_E * cos_h)
    return np.stack([r, g, b], axis=-1)
