import numpy as np
from numpy import ndarray as NDArray


def _broadcast(*channels: NDArray):
    channels = [np.asarray(c, dtype=float) for c in channels]
    out_shape = np.broadcast(*channels).shape
    return [np.broadcast_to(c, out_shape) for c in channels]


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, delta: NDArray) -> NDArray:
    """Hexagonal hue in degrees ``[0, 360)``; 0 where the color is achromatic."""
    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % 360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % 360
    return hue


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB (0..1) to HSV.

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = _broadcast(r, g, b)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    hue = np_rgb_hue(r, g, b, max_c, delta)

    saturation = np.zeros_like(max_c)
    mask = max_c != 0
    saturation[mask] = delta[mask] / max_c[mask]

    return np.stack([hue, saturation, max_c], axis=-1)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to sRGB (0..1).

    Hue is taken modulo 360, so any real hue is accepted.
    """
    h, s, v = _broadcast(h, s, v)
    h = np.mod(h, 360.0)

    def f(n: int) -> NDArray:
        k = np.mod(n + h / 60.0, 6.0)
        return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)

    return np.stack([f(5), f(3), f(1)], axis=-1)
