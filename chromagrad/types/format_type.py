from __future__ import annotations
from enum import Enum

from ._keyword import parse_keyword


class FormatType(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGB255 = "rgb255"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"

    @classmethod
    def parse(cls, value) -> FormatType:
        return parse_keyword(cls, value, "output format")


# Scale applied to the non-hue channels of the functional notations
percent_channels = {
    FormatType.HSL: 100.0,
    FormatType.HSV: 100.0,
    FormatType.HWB: 100.0,
}
