from .stops import ColorStop, StopList, validate_domain
from .interpolator import interpolate, KERNELS
from .gradient import Gradient
from .sampler import Sampleable, sample_n, sample_many, sample_swatch, even_positions, swatch_positions, remap

__all__ = [
    "ColorStop",
    "StopList",
    "validate_domain",
    "interpolate",
    "KERNELS",
    "Gradient",
    "Sampleable",
    "sample_n",
    "sample_many",
    "sample_swatch",
    "even_positions",
    "swatch_positions",
    "remap",
]
