"""
Oklab conversions.

sRGB → linear RGB (gamma decode) → LMS cone response → cube root → Oklab.
The inverse matrices are computed from the forward ones instead of using the
rounded published inverses, so a round trip is exact to float precision.
"""
import numpy as np
from numpy import ndarray as NDArray

from .gamma import np_srgb_to_linear, np_linear_to_srgb
from .hsv import _broadcast

LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

LMS_TO_LINEAR_RGB = np.linalg.inv(LINEAR_RGB_TO_LMS)
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)


def np_linear_rgb_to_oklab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    rgb = np.stack(_broadcast(r, g, b), axis=-1)
    lms = rgb @ LINEAR_RGB_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_linear_rgb(L: NDArray, a: NDArray, b: NDArray) -> NDArray:
    lab = np.stack(_broadcast(L, a, b), axis=-1)
    lms = (lab @ OKLAB_TO_LMS.T) ** 3
    return lms @ LMS_TO_LINEAR_RGB.T


def np_unit_rgb_to_oklab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert sRGB (0..1) to Oklab.

    Returns:
        lab: array of shape (..., 3): (L ~[0,1], a ~[-0.4,0.4], b ~[-0.4,0.4])
    """
    return np_linear_rgb_to_oklab(
        np_srgb_to_linear(r), np_srgb_to_linear(g), np_srgb_to_linear(b)
    )


def np_oklab_to_unit_rgb(L: NDArray, a: NDArray, b: NDArray) -> NDArray:
    linear = np_oklab_to_linear_rgb(L, a, b)
    return np_linear_to_srgb(linear)
