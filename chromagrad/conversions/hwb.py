import numpy as np
from numpy import ndarray as NDArray

from .hsv import _broadcast, np_unit_rgb_to_hsv, np_hsv_to_unit_rgb


def np_hsv_to_hwb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = _broadcast(h, s, v)
    return np.stack([h, (1 - s) * v, 1 - v], axis=-1)


def np_hwb_to_hsv(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert HWB to HSV.

    When whiteness + blackness reaches 1 the color is the gray
    ``w / (w + b)``, following CSS Color 4.
    """
    h, w, b = _broadcast(h, w, b)
    total = w + b
    gray = total >= 1

    v = np.where(gray, w / np.where(gray, total, 1.0), 1 - b)
    s = np.zeros_like(v)
    chroma = ~gray & (v > 0)
    s[chroma] = 1 - w[chroma] / v[chroma]
    return np.stack([h, s, v], axis=-1)


def np_unit_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB (0..1) to HWB.

    Returns:
        hwb: array of shape (..., 3): (hue [0,360), whiteness [0,1], blackness [0,1])
    """
    hsv = np_unit_rgb_to_hsv(r, g, b)
    return np_hsv_to_hwb(hsv[..., 0], hsv[..., 1], hsv[..., 2])


def np_hwb_to_unit_rgb(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    hsv = np_hwb_to_hsv(h, w, b)
    return np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
