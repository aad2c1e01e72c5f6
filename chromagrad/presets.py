"""
Built-in preset gradients.

ColorBrewer sequential and diverging schemes, the perceptually uniform
matplotlib colormaps and the cubehelix/sinebow ramps, stored as evenly spaced
hex stops. The formula-based ramps are tabulated once, at import. Presets are blended
in RGB with a basis spline, which smooths the sampled tables back into a
continuous ramp.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from .colors.color import Color
from .conversions import np_cubehelix_to_unit_rgb
from .defaults import PRESET_BLEND_MODE, PRESET_INTERPOLATION
from .errors import UnknownPresetError
from .gradients.gradient import Gradient

_PRESETS = {
    # ColorBrewer diverging
    "br-bg": ("543005", "8c510a", "bf812d", "dfc27d", "f6e8c3", "f5f5f5", "c7eae5", "80cdc1", "35978f", "01665e", "003c30"),
    "pi-yg": ("8e0152", "c51b7d", "de77ae", "f1b6da", "fde0ef", "f7f7f7", "e6f5d0", "b8e186", "7fbc41", "4d9221", "276419"),
    "pr-gn": ("40004b", "762a83", "9970ab", "c2a5cf", "e7d4e8", "f7f7f7", "d9f0d3", "a6dba0", "5aae61", "1b7837", "00441b"),
    "pu-or": ("2d004b", "542788", "8073ac", "b2abd2", "d8daeb", "f7f7f7", "fee0b6", "fdb863", "e08214", "b35806", "7f3b08"),
    "rd-bu": ("67001f", "b2182b", "d6604d", "f4a582", "fddbc7", "f7f7f7", "d1e5f0", "92c5de", "4393c3", "2166ac", "053061"),
    "rd-gy": ("67001f", "b2182b", "d6604d", "f4a582", "fddbc7", "ffffff", "e0e0e0", "bababa", "878787", "4d4d4d", "1a1a1a"),
    "rd-yl-bu": ("a50026", "d73027", "f46d43", "fdae61", "fee090", "ffffbf", "e0f3f8", "abd9e9", "74add1", "4575b4", "313695"),
    "rd-yl-gn": ("a50026", "d73027", "f46d43", "fdae61", "fee08b", "ffffbf", "d9ef8b", "a6d96a", "66bd63", "1a9850", "006837"),
    "spectral": ("9e0142", "d53e4f", "f46d43", "fdae61", "fee08b", "ffffbf", "e6f598", "abdda4", "66c2a5", "3288bd", "5e4fa2"),

    # ColorBrewer sequential, single hue
    "blues": ("f7fbff", "deebf7", "c6dbef", "9ecae1", "6baed6", "4292c6", "2171b5", "08519c", "08306b"),
    "greens": ("f7fcf5", "e5f5e0", "c7e9c0", "a1d99b", "74c476", "41ab5d", "238b45", "006d2c", "00441b"),
    "greys": ("ffffff", "f0f0f0", "d9d9d9", "bdbdbd", "969696", "737373", "525252", "252525", "000000"),
    "oranges": ("fff5eb", "fee6ce", "fdd0a2", "fdae6b", "fd8d3c", "f16913", "d94801", "a63603", "7f2704"),
    "purples": ("fcfbfd", "efedf5", "dadaeb", "bcbddc", "9e9ac8", "807dba", "6a51a3", "54278f", "3f007d"),
    "reds": ("fff5f0", "fee0d2", "fcbba1", "fc9272", "fb6a4a", "ef3b2c", "cb181d", "a50f15", "67000d"),

    # ColorBrewer sequential, multi hue
    "bu-gn": ("f7fcfd", "e5f5f9", "ccece6", "99d8c9", "66c2a4", "41ae76", "238b45", "006d2c", "00441b"),
    "bu-pu": ("f7fcfd", "e0ecf4", "bfd3e6", "9ebcda", "8c96c6", "8c6bb1", "88419d", "810f7c", "4d004b"),
    "gn-bu": ("f7fcf0", "e0f3db", "ccebc5", "a8ddb5", "7bccc4", "4eb3d3", "2b8cbe", "0868ac", "084081"),
    "or-rd": ("fff7ec", "fee8c8", "fdd49e", "fdbb84", "fc8d59", "ef6548", "d7301f", "b30000", "7f0000"),
    "pu-bu": ("fff7fb", "ece7f2", "d0d1e6", "a6bddb", "74a9cf", "3690c0", "0570b0", "045a8d", "023858"),
    "pu-bu-gn": ("fff7fb", "ece2f0", "d0d1e6", "a6bddb", "67a9cf", "3690c0", "02818a", "016c59", "014636"),
    "pu-rd": ("f7f4f9", "e7e1ef", "d4b9da", "c994c7", "df65b0", "e7298a", "ce1256", "980043", "67001f"),
    "rd-pu": ("fff7f3", "fde0dd", "fcc5c0", "fa9fb5", "f768a1", "dd3497", "ae017e", "7a0177", "49006a"),
    "yl-gn": ("ffffe5", "f7fcb9", "d9f0a3", "addd8e", "78c679", "41ab5d", "238443", "006837", "004529"),
    "yl-gn-bu": ("ffffd9", "edf8b1", "c7e9b4", "7fcdbb", "41b6c4", "1d91c0", "225ea8", "253494", "081d58"),
    "yl-or-br": ("ffffe5", "fff7bc", "fee391", "fec44f", "fe9929", "ec7014", "cc4c02", "993404", "662506"),
    "yl-or-rd": ("ffffcc", "ffeda0", "fed976", "feb24c", "fd8d3c", "fc4e2a", "e31a1c", "bd0026", "800026"),

    # matplotlib
    "cividis": ("00224e", "123570", "3b496c", "575d6d", "707173", "8a8779", "a69d75", "c4b56c", "e4cf5b", "fee838"),
    "inferno": ("000004", "160b39", "420a68", "6a176e", "932667", "bc3754", "dd513a", "f37819", "fca50a", "f6d746", "fcffa4"),
    "magma": ("000004", "180f3d", "440f76", "721f81", "9e2f7f", "cd4071", "f1605d", "fd9668", "feca8d", "fcfdbf"),
    "plasma": ("0d0887", "41049d", "6a00a8", "8f0da4", "b12a90", "cc4778", "e16462", "f2844b", "fca636", "fcce25", "f0f921"),
    "turbo": ("23171b", "4a58dd", "2f9df5", "27d7c4", "4df884", "95fb51", "dedd32", "ffa423", "f65f18", "ba2208", "900c00"),
    "viridis": ("440154", "482878", "3e4989", "31688e", "26828e", "1f9e89", "35b779", "6ece58", "b5de2b", "fde725"),
}


_clamp = bound_type_to_np_function[BoundType.CLAMP]

# stops sampled from each formula-based ramp
COMPUTED_PRESET_STOPS = 33

Ramp = Callable[[NDArray], NDArray]


def cubehelix_ramp(start: Tuple[float, float, float], end: Tuple[float, float, float]) -> Ramp:
    """Ramp between two cubehelix (h, s, l) colors, taking the long way round the hue."""
    start_hsl = np.asarray(start, dtype=float)
    end_hsl = np.asarray(end, dtype=float)

    def ramp(t: NDArray) -> NDArray:
        h, s, l = (start_hsl + t[:, None] * (end_hsl - start_hsl)).T
        return np_cubehelix_to_unit_rgb(h, s, l)
    return ramp


def rainbow_ramp(t: NDArray) -> NDArray:
    """Cyclical cubehelix rainbow, warm on the first half and cool on the second."""
    ts = np.abs(t - 0.5)
    return np_cubehelix_to_unit_rgb(360.0 * t - 100.0, 1.5 - 1.5 * ts, 0.8 - 0.9 * ts)


def sinebow_ramp(t: NDArray) -> NDArray:
    t = 0.5 - t
    return np.stack([np.sin(np.pi * (t + k / 3.0)) ** 2 for k in range(3)], axis=-1)


COMPUTED_RAMPS: Mapping[str, Ramp] = MappingProxyType({
    "cool": cubehelix_ramp((260.0, 0.75, 0.35), (80.0, 1.50, 0.8)),
    "cubehelix": cubehelix_ramp((300.0, 0.5, 0.0), (-240.0, 0.5, 1.0)),
    "rainbow": rainbow_ramp,
    "sinebow": sinebow_ramp,
    "warm": cubehelix_ramp((-100.0, 0.75, 0.35), (80.0, 1.50, 0.8)),
})


def tabulate_ramp(ramp: Ramp, n: int = COMPUTED_PRESET_STOPS) -> Tuple[str, ...]:
    """Sample ``ramp`` at ``n`` evenly spaced positions as hex stops."""
    rgb = np.asarray(_clamp(ramp(np.linspace(0.0, 1.0, n)), 0.0, 1.0), dtype=float)
    return tuple("%02x%02x%02x" % Color.from_array(row).rgba8()[:3] for row in rgb)


_PRESETS.update((name, tabulate_ramp(ramp)) for name, ramp in COMPUTED_RAMPS.items())

# name -> hex stops, read-only
PRESETS: Mapping[str, Tuple[str, ...]] = MappingProxyType(_PRESETS)


def normalize_preset_name(name: str) -> str:
    return name.strip().lower().replace("_", "-")


def preset_names() -> Tuple[str, ...]:
    """All preset names, sorted."""
    return tuple(sorted(PRESETS))


def preset_colors(name: str) -> Tuple[Color, ...]:
    key = normalize_preset_name(name)
    if key not in PRESETS:
        raise UnknownPresetError(
            f"Invalid preset gradient name: {name!r}. Use --list-presets to list all preset names."
        )
    return tuple(Color.from_hex(h) for h in PRESETS[key])


def preset_gradient(name: str) -> Gradient:
    """
    Build the named preset over the unit domain.

    Names are case-insensitive and ``_`` may be used in place of ``-``.

    Raises:
        UnknownPresetError: ``name`` is not a preset.
    """
    return Gradient.from_colors(
        preset_colors(name),
        blend_mode=PRESET_BLEND_MODE,
        interpolation=PRESET_INTERPOLATION,
    )
