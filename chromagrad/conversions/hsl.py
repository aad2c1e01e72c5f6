import numpy as np
from numpy import ndarray as NDArray

from .hsv import _broadcast, np_rgb_hue


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB (0..1) to HSL.

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = _broadcast(r, g, b)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    # Lightness
    lightness = (max_c + min_c) / 2.0

    # Saturation
    saturation = np.zeros_like(lightness)
    denominator = 1 - np.abs(2 * lightness - 1)
    mask_delta = (delta > 0) & (denominator > 0)
    saturation[mask_delta] = delta[mask_delta] / denominator[mask_delta]

    hue = np_rgb_hue(r, g, b, max_c, delta)

    return np.stack([hue, saturation, lightness], axis=-1)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to sRGB (0..1); hue is taken modulo 360."""
    h, s, l = _broadcast(h, s, l)
    h = np.mod(h, 360.0)
    a = s * np.minimum(l, 1 - l)

    def f(n: int) -> NDArray:
        k = np.mod(n + h / 30.0, 12.0)
        return l - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.stack([f(0), f(8), f(4)], axis=-1)
