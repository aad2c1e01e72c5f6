import numpy as np
from numpy import ndarray as NDArray
# No dependencies

# Encoded-side threshold of the sRGB transfer function; the linear-side
# threshold is derived from it so both directions switch branch at the same point.
SRGB_THRESHOLD = 0.04045
LINEAR_THRESHOLD = SRGB_THRESHOLD / 12.92


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """
    Vectorized: Convert nonlinear sRGB to linear-light RGB.

    Negative inputs are mirrored through the origin, so the function is total
    over the reals and its inverse is exact.
    """
    c = np.asarray(c, dtype=float)
    magnitude = np.abs(c)
    result = np.where(
        magnitude <= SRGB_THRESHOLD,
        c / 12.92,
        np.sign(c) * ((magnitude + 0.055) / 1.055) ** 2.4
    )
    return result

def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB to nonlinear sRGB."""
    c = np.asarray(c, dtype=float)
    magnitude = np.abs(c)
    result = np.where(
        magnitude <= LINEAR_THRESHOLD,
        12.92 * c,
        np.sign(c) * (1.055 * (magnitude ** (1 / 2.4)) - 0.055)
    )
    return result
