import numpy as np
from typing import Callable, Dict, Literal, Sequence, Tuple, Union

from ..colors.color import Color
from ..errors import UnsupportedModeError
from .gamma import np_srgb_to_linear, np_linear_to_srgb
from .hsv import np_unit_rgb_to_hsv, np_hsv_to_unit_rgb
from .hsl import np_unit_rgb_to_hsl, np_hsl_to_unit_rgb
from .hwb import np_unit_rgb_to_hwb, np_hwb_to_unit_rgb
from .oklab import np_unit_rgb_to_oklab, np_oklab_to_unit_rgb

ColorSpace = Literal["rgb", "linear-rgb", "hsv", "hsl", "hwb", "oklab"]
ChannelConversion = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]


def _identity(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    return np.stack(np.broadcast_arrays(a, b, c), axis=-1).astype(float)


def _per_channel(fn: Callable[[np.ndarray], np.ndarray]) -> ChannelConversion:
    return lambda a, b, c: np.stack([fn(a), fn(b), fn(c)], axis=-1)


# sRGB → space
CONVERT_FROM_RGB: Dict[str, ChannelConversion] = {
    "rgb": _identity,
    "linear-rgb": _per_channel(np_srgb_to_linear),
    "hsv": np_unit_rgb_to_hsv,
    "hsl": np_unit_rgb_to_hsl,
    "hwb": np_unit_rgb_to_hwb,
    "oklab": np_unit_rgb_to_oklab,
}

# space → sRGB
CONVERT_TO_RGB: Dict[str, ChannelConversion] = {
    "rgb": _identity,
    "linear-rgb": _per_channel(np_linear_to_srgb),
    "hsv": np_hsv_to_unit_rgb,
    "hsl": np_hsl_to_unit_rgb,
    "hwb": np_hwb_to_unit_rgb,
    "oklab": np_oklab_to_unit_rgb,
}

SPACES: Tuple[str, ...] = tuple(CONVERT_FROM_RGB)


def _space_key(space) -> str:
    key = getattr(space, "value", space)
    if not isinstance(key, str) or key.lower() not in CONVERT_FROM_RGB:
        raise UnsupportedModeError(f"Unknown color space: {space!r}")
    return key.lower()


def _apply(table: Dict[str, ChannelConversion], color: np.ndarray, space) -> np.ndarray:
    color = np.asarray(color, dtype=float)
    if color.shape[-1] != 4:
        raise ValueError(f"Expected RGBA-shaped data (..., 4), got shape {color.shape}")
    converted = table[_space_key(space)](color[..., 0], color[..., 1], color[..., 2])
    # alpha passes through untouched
    return np.concatenate([converted, color[..., 3:4]], axis=-1)


def np_to_space(rgba: np.ndarray, space: ColorSpace) -> np.ndarray:
    """Vectorized: convert sRGB+alpha data of shape (..., 4) into ``space``."""
    return _apply(CONVERT_FROM_RGB, rgba, space)


def np_from_space(values: np.ndarray, space: ColorSpace) -> np.ndarray:
    """Vectorized: convert ``space``+alpha data of shape (..., 4) back to sRGB."""
    return _apply(CONVERT_TO_RGB, values, space)


def to_space(color: Union[Color, Sequence[float]], space: ColorSpace) -> Tuple[float, float, float, float]:
    """Convert one color to ``space``; hue-based spaces report hue in degrees."""
    rgba = Color.coerce(color).to_array()
    return tuple(float(v) for v in np_to_space(rgba, space))  # type: ignore[return-value]


def from_space(values: Sequence[float], space: ColorSpace) -> Color:
    """Inverse of :func:`to_space`. Values are not clamped."""
    arr = np.asarray(values, dtype=float)
    if arr.shape == (3,):
        arr = np.append(arr, 1.0)
    return Color.from_array(np_from_space(arr, space))


def convert(values: Sequence[float], from_space_: ColorSpace, to_space_: ColorSpace) -> Tuple[float, ...]:
    """Convert 4-channel values between any two supported spaces via sRGB."""
    if _space_key(from_space_) == _space_key(to_space_):
        return tuple(float(v) for v in values)
    rgba = np_from_space(np.asarray(values, dtype=float), from_space_)
    return tuple(float(v) for v in np_to_space(rgba, to_space_))
