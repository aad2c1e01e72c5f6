"""CSS color strings → :class:`Color`, backed by coloraide."""
from __future__ import annotations
import re

from coloraide import Color as CSSColor

from ..colors.color import Color
from ..errors import InvalidColorError

_BARE_HEX = re.compile(r"^[0-9a-fA-F]{3,4}$|^[0-9a-fA-F]{6}$|^[0-9a-fA-F]{8}$")


def parse_color(text: str) -> Color:
    """
    Parse any CSS Color Level 4 string coloraide understands: named colors,
    hex (the leading ``#`` may be omitted), ``rgb()``, ``hsl()``, ``hwb()``,
    ``lab()``, ``oklch()`` and so on.

    Colors outside the sRGB gamut keep their out-of-range channels; they are
    clamped when rendered or formatted.

    Raises:
        InvalidColorError: ``text`` is not a color.
    """
    source = text.strip()
    if _BARE_HEX.match(source):
        source = "#" + source
    try:
        srgb = CSSColor(source).convert("srgb")
    except ValueError:
        raise InvalidColorError(f"Invalid color: {text!r}") from None
    return Color(srgb["red"], srgb["green"], srgb["blue"], srgb.alpha())


def parse_colors(texts) -> list[Color]:
    return [parse_color(t) for t in texts]
