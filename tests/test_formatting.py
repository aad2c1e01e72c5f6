import pytest

from chromagrad.colors import Color, BLACK, WHITE
from chromagrad.errors import UnsupportedModeError
from chromagrad.formatting import (
    contrast_text_color,
    format_alpha,
    format_color,
    format_colors_array,
    relative_luminance,
    to_hex,
)
from chromagrad.types import FormatType

ORANGE = Color(1.0, 0.5, 0.0)

samples_orange = {
    "hex": "#ff8000",
    "rgb": "rgb(1.000,0.500,0.000)",
    "rgb255": "rgb(255,128,0)",
    "hsl": "hsl(30.00,100.00%,50.00%)",
    "hsv": "hsv(30.00,100.00%,100.00%)",
    "hwb": "hwb(30.00,0.00%,0.00%)",
}

samples_translucent_red = {
    "hex": "#ff000080",
    "rgb": "rgb(1.000,0.000,0.000,50.20%)",
    "rgb255": "rgb(255,0,0,50.20%)",
    "hsl": "hsl(0.00,100.00%,50.00%,50.20%)",
}


@pytest.mark.parametrize("fmt, expected", samples_orange.items())
def test_format_orange(fmt, expected):
    assert format_color(ORANGE, fmt) == expected


@pytest.mark.parametrize("fmt, expected", samples_translucent_red.items())
def test_format_translucent(fmt, expected):
    assert format_color(Color(1.0, 0.0, 0.0, 128 / 255), fmt) == expected


def test_default_format_is_hex():
    assert format_color(ORANGE) == "#ff8000"
    assert format_color(ORANGE, FormatType.HEX) == "#ff8000"


def test_hex_is_lowercase_and_rounded():
    assert to_hex(Color(0.0, 0.0, 0.0)) == "#000000"
    assert to_hex(Color(170 / 255, 187 / 255, 204 / 255)) == "#aabbcc"


def test_out_of_range_channels_are_clamped():
    assert format_color(Color(1.3, -0.2, 0.5), "rgb255") == "rgb(255,0,128)"
    assert format_color(Color(1.3, -0.2, 0.5), "rgb") == "rgb(1.000,0.000,0.500)"


def test_achromatic_hue_is_zero():
    assert format_color(Color(0.5, 0.5, 0.5), "hsl") == "hsl(0.00,0.00%,50.00%)"
    assert format_color(BLACK, "hwb") == "hwb(0.00,0.00%,100.00%)"


def test_format_alpha():
    assert format_alpha(1.0) == ""
    assert format_alpha(0.99999) == ""
    assert format_alpha(0.5) == ",50.00%"
    assert format_alpha(0.0) == ",0.00%"


def test_unknown_format():
    with pytest.raises(UnsupportedModeError):
        format_color(ORANGE, "cmyk")


def test_format_colors_array():
    colors = [Color(1.0, 0.0, 85 / 255), Color(0.0, 1.0, 90 / 255)]
    assert format_colors_array(colors) == '["#ff0055", "#00ff5a"]'
    assert format_colors_array([], "rgb") == "[]"


def test_relative_luminance():
    assert relative_luminance(WHITE) == pytest.approx(1.0)
    assert relative_luminance(BLACK) == 0.0
    assert relative_luminance(Color(1.0, 0.0, 0.0)) == pytest.approx(0.2126)
    assert relative_luminance(Color(0.0, 1.0, 0.0)) == pytest.approx(0.7152)


def test_contrast_text_color():
    assert contrast_text_color(BLACK) == WHITE
    assert contrast_text_color(WHITE) == BLACK
    assert contrast_text_color(Color(0.0, 0.0, 1.0)) == WHITE
    assert contrast_text_color(Color(1.0, 1.0, 0.0)) == BLACK
