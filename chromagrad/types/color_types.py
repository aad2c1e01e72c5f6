from __future__ import annotations
from typing import Sequence, Tuple, Union, TYPE_CHECKING
from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.color import Color

Scalar = int | float
RGBA = Tuple[float, float, float, float]
ColorLike = Union["Color", Sequence[float], ndarray]
Domain = Tuple[float, float]
StopLike = Tuple[float, ColorLike]
