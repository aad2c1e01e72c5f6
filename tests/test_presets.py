import pytest

from chromagrad.errors import UnknownPresetError
from chromagrad.formatting import to_hex
from chromagrad.presets import (
    COMPUTED_PRESET_STOPS,
    COMPUTED_RAMPS,
    PRESETS,
    preset_colors,
    preset_gradient,
    preset_names,
)
from chromagrad.types import BlendMode, InterpolationMode


def test_preset_names_sorted_and_complete():
    names = preset_names()
    assert list(names) == sorted(PRESETS)
    assert {"blues", "rd-bu", "spectral", "viridis", "magma"} <= set(names)
    assert {"rainbow", "sinebow", "cool", "warm", "cubehelix"} <= set(names)
    assert len(names) == 38


@pytest.mark.parametrize("name", preset_names())
def test_every_preset_builds(name):
    grad = preset_gradient(name)
    assert grad.blend_mode is BlendMode.RGB
    assert grad.interpolation is InterpolationMode.BASIS
    assert grad.domain == (0.0, 1.0)
    assert len(grad.sample_n(10)) == 10


def test_preset_end_color():
    # basis splines still clamp to the last stop at the end of the domain
    assert to_hex(preset_gradient("viridis").sample(1.0)) == "#fde725"


@pytest.mark.parametrize("name", ["greys", "viridis", "rd-bu"])
def test_preset_starts_and_ends_on_its_stops(name):
    grad = preset_gradient(name)
    stops = PRESETS[name]
    assert to_hex(grad.sample(0.0)) == "#" + stops[0]
    assert to_hex(grad.sample(1.0)) == "#" + stops[-1]


def test_greys_has_no_step_before_the_end():
    grad = preset_gradient("greys")
    assert to_hex(grad.sample(0.9999)) == "#000000"
    assert to_hex(grad.sample(0.0001)) == "#ffffff"


@pytest.mark.parametrize("name", sorted(COMPUTED_RAMPS))
def test_computed_presets_are_tabulated(name):
    assert len(PRESETS[name]) == COMPUTED_PRESET_STOPS
    assert all(len(stop) == 6 for stop in PRESETS[name])


def test_computed_preset_values():
    assert PRESETS["cubehelix"][0] == "000000"
    assert PRESETS["cubehelix"][-1] == "ffffff"
    assert PRESETS["sinebow"][0] == "ff4040"
    # the rainbow is cyclical
    assert PRESETS["rainbow"][0] == PRESETS["rainbow"][-1]
    assert PRESETS["warm"][-1] == PRESETS["cool"][-1]


def test_rainbow_preset_gradient():
    grad = preset_gradient("Rainbow")
    assert to_hex(grad.sample(0.0)) == "#" + PRESETS["rainbow"][0]
    assert len(grad.sample_n(5)) == 5


def test_names_are_normalized():
    assert preset_colors("RD_BU") == preset_colors("rd-bu")
    assert to_hex(preset_colors(" Greys ")[0]) == "#ffffff"


def test_unknown_preset():
    with pytest.raises(UnknownPresetError):
        preset_gradient("pineapple")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PRESETS["mine"] = ("000000",)
