import numpy as np
import pytest

from chromagrad.colors import Color
from chromagrad.errors import GradientError, InvalidGgrError
from chromagrad.formatting import to_hex
from chromagrad.parsing import GimpGradient, parse_ggr
from chromagrad.parsing.ggr import np_blend_factor, np_hue_ccw, np_hue_cw, GgrBlend

RED = "1 0 0 1"
BLUE = "0 0 1 1"

tolerance = 1e-6


def ggr(*segments, name="Test"):
    header = ["GIMP Gradient"]
    if name is not None:
        header.append(f"Name: {name}")
    header.append(str(len(segments)))
    return "\n".join(header + list(segments)) + "\n"


def segment(left=0.0, middle=0.5, right=1.0, lc=RED, rc=BLUE, blend=0, coloring=0, *endpoints):
    fields = [f"{left:.6f}", f"{middle:.6f}", f"{right:.6f}", lc, rc, str(int(blend)), str(int(coloring))]
    fields.extend(str(int(e)) for e in endpoints)
    return " ".join(fields)


def test_linear_segment():
    grad = parse_ggr(ggr(segment()))
    assert isinstance(grad, GimpGradient)
    assert grad.name == "Test"
    assert grad.domain == (0.0, 1.0)
    assert len(grad) == 1
    assert [to_hex(c) for c in grad.sample_n(3)] == ["#ff0000", "#800080", "#0000ff"]


def test_midpoint_moves_the_half_way_color():
    grad = parse_ggr(ggr(segment(middle=0.25)))
    assert grad.sample(0.25).r == pytest.approx(0.5)
    assert grad.sample(0.125).r == pytest.approx(0.75)
    assert grad.sample(0.625).r == pytest.approx(0.25)


def test_step_blend():
    grad = parse_ggr(ggr(segment(blend=GgrBlend.STEP)))
    assert to_hex(grad.sample(0.49)) == "#ff0000"
    assert to_hex(grad.sample(0.5)) == "#0000ff"


@pytest.mark.parametrize("blend", list(GgrBlend))
def test_blend_factors_span_unit_range(blend):
    middle = np.full(3, 0.5)
    pos = np.array([0.0, 0.5, 1.0])
    factor = np_blend_factor(np.full(3, int(blend)), middle, pos)
    assert factor[0] == pytest.approx(0.0, abs=tolerance)
    assert factor[2] == pytest.approx(1.0, abs=tolerance)
    if blend in (GgrBlend.LINEAR, GgrBlend.CURVED, GgrBlend.SINE):
        assert factor[1] == pytest.approx(0.5)


def test_hue_directions():
    left, right, f = np.array([0.0]), np.array([2.0 / 3.0]), np.array([0.5])
    assert np_hue_ccw(left, right, f)[0] == pytest.approx(1.0 / 3.0)
    assert np_hue_cw(left, right, f)[0] == pytest.approx(5.0 / 6.0)


def test_hsv_colorings():
    ccw = parse_ggr(ggr(segment(coloring=1)))
    assert to_hex(ccw.sample(0.5)) == "#00ff00"
    cw = parse_ggr(ggr(segment(coloring=2)))
    assert to_hex(cw.sample(0.5)) == "#ff00ff"


def test_segments_are_looked_up_by_position():
    text = ggr(
        segment(0.0, 0.25, 0.5, RED, RED),
        segment(0.5, 0.75, 1.0, BLUE, BLUE),
    )
    grad = parse_ggr(text)
    assert [to_hex(c) for c in grad.sample_many([0.0, 0.3, 0.5, 0.7, 1.0])] == [
        "#ff0000", "#ff0000", "#ff0000", "#0000ff", "#0000ff",
    ]


def test_alpha_blends_linearly():
    grad = parse_ggr(ggr(segment(lc="1 0 0 0", rc="1 0 0 1")))
    assert grad.sample(0.5).a == pytest.approx(0.5)


def test_foreground_and_background_endpoints():
    text = ggr(segment(0.0, 0.5, 1.0, "0 0 0 1", "0 0 0 1", 0, 0, 1, 3))
    default = parse_ggr(text)
    assert to_hex(default.sample(0.0)) == "#000000"
    assert to_hex(default.sample(1.0)) == "#ffffff"

    custom = parse_ggr(text, foreground=Color(1.0, 0.0, 0.0), background=Color(0.0, 0.0, 1.0))
    assert to_hex(custom.sample(0.0)) == "#ff0000"
    assert to_hex(custom.sample(1.0)) == "#0000ff"


def test_transparent_endpoints():
    grad = parse_ggr(ggr(segment(0.0, 0.5, 1.0, RED, BLUE, 0, 0, 2, 4)))
    assert grad.sample(0.0).a == 0.0
    assert grad.sample(1.0).a == 0.0


def test_name_is_optional():
    grad = parse_ggr(ggr(segment(), name=None))
    assert grad.name is None
    assert grad.label == "(no name)"


def test_positions_are_clamped():
    grad = parse_ggr(ggr(segment()))
    assert grad.sample(-1.0) == grad.sample(0.0)
    assert grad.sample(2.0) == grad.sample(1.0)


def test_gimp_gradient_is_immutable():
    grad = parse_ggr(ggr(segment()))
    with pytest.raises(AttributeError):
        grad._name = "other"


@pytest.mark.parametrize("text", [
    "",
    "GIMP Palette\n1\n",
    "GIMP Gradient\nName: x\n",
    "GIMP Gradient\nName: x\nmany\n",
    "GIMP Gradient\n0\n",
    "GIMP Gradient\n2\n" + segment() + "\n",
    "GIMP Gradient\n1\n0 0.5 1 1 0 0 1\n",
    "GIMP Gradient\n1\n0 0.5 1 1 0 0 1 0 0 one 1 0 0\n",
    "GIMP Gradient\n1\n" + segment(blend=9) + "\n",
    "GIMP Gradient\n1\n" + segment(coloring=3) + "\n",
    "GIMP Gradient\n1\n" + segment(0.0, 0.5, 1.0, RED, BLUE, 0, 0, 7, 0) + "\n",
])
def test_malformed_files(text):
    with pytest.raises(InvalidGgrError):
        parse_ggr(text)


def test_errors_are_gradient_errors():
    assert issubclass(InvalidGgrError, GradientError)
