"""
Command-line front end.

    chromagrad -p spectral -t 15
    chromagrad -c deeppink gold seagreen
    chromagrad -c ff00ff 'rgb(50,200,70)' -m hsv -i basis -t 20 -o hsl
    chromagrad -f gradients.svg --svg-id banana
"""
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple, Union
import argparse
import logging
import shutil
import sys

from . import __version__
from .colors.color import BLACK, Color
from .defaults import DEFAULT_HEIGHT, DEFAULT_WIDTH, value_or_default
from .errors import GradientError
from .formatting import format_color, format_colors_array
from .gradients.gradient import Gradient
from .gradients.sampler import Sampleable
from .parsing.css import parse_color, parse_colors
from .parsing.ggr import parse_ggr
from .parsing.svg import parse_svg
from .presets import preset_gradient, preset_names
from .render.ansi import grid_lines, label_lines
from .render.renderer import render_gradient
from .types.format_type import FormatType
from .types.modes import BlendMode, InterpolationMode

logger = logging.getLogger(__name__)


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="chromagrad",
        description="Display gradients in the terminal and pick colors from them.",
        epilog="COLOR can be given in any CSS color format, e.g. gold, #f05, 'rgb(50,200,70)'.",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug information to stderr')

    preset = parser.add_argument_group('preset gradient')
    preset.add_argument('-l', '--list-presets', action='store_true', help='list all preset gradient names')
    preset.add_argument('-p', '--preset', metavar='NAME', help='use the preset gradient')

    custom = parser.add_argument_group('custom gradient')
    custom.add_argument('-c', '--custom', nargs='+', metavar='COLOR', help='create a gradient from these colors')
    custom.add_argument(
        '-P', '--position', nargs='+', type=float, metavar='FLOAT',
        help='color positions; two values set the domain',
    )
    custom.add_argument(
        '-m', '--blend-mode', choices=[m.value for m in BlendMode], metavar='COLOR-SPACE',
        help='blending color space: %(choices)s [default: oklab]',
    )
    custom.add_argument(
        '-i', '--interpolation', choices=[m.value for m in InterpolationMode], metavar='MODE',
        help='interpolation mode: %(choices)s [default: catmull-rom]',
    )

    files = parser.add_argument_group('gradient file')
    files.add_argument(
        '-f', '--file', nargs='+', type=Path, metavar='FILE',
        help='read gradients from SVG or GIMP gradient (.ggr) file(s)',
    )
    files.add_argument('--svg-id', metavar='ID', help='pick the SVG gradient with this id')
    files.add_argument('--ggr-fg', metavar='COLOR', help='GIMP gradient foreground color [default: black]')
    files.add_argument('--ggr-bg', metavar='COLOR', help='GIMP gradient background color [default: white]')

    display = parser.add_argument_group('display')
    display.add_argument('-W', '--width', type=_count, metavar='NUM', help='swatch width [default: terminal width]')
    display.add_argument('-H', '--height', type=_count, metavar='NUM', help=f'swatch height [default: {DEFAULT_HEIGHT}]')
    display.add_argument('-b', '--background', metavar='COLOR', help='background color [default: checkerboard]')
    display.add_argument('--cb-color', nargs=2, metavar='COLOR', help='checkerboard colors')

    output = parser.add_argument_group('colors output')
    pick = output.add_mutually_exclusive_group()
    pick.add_argument('-t', '--take', type=_count, metavar='NUM', help='get NUM colors evenly spaced across the gradient')
    pick.add_argument('-s', '--sample', nargs='+', type=float, metavar='FLOAT', help='get colors at these positions')
    output.add_argument(
        '-o', '--format', choices=[f.value for f in FormatType], default=FormatType.HEX.value,
        metavar='FORMAT', help='color format: %(choices)s [default: hex]',
    )
    output.add_argument('-a', '--array', action='store_true', help='print --take/--sample colors as an array')
    return parser


class Output:
    """Where and how results are written."""

    def __init__(self, options: argparse.Namespace, stream: TextIO) -> None:
        self.stream = stream
        self.is_tty = stream.isatty()
        self.term_width = shutil.get_terminal_size((DEFAULT_WIDTH, DEFAULT_HEIGHT)).columns
        self.width = value_or_default(options.width, self.term_width)
        self.height = value_or_default(options.height, DEFAULT_HEIGHT)
        self.format = FormatType.parse(options.format)
        self.array = options.array
        self.take: Optional[int] = options.take
        self.sample: Optional[List[float]] = options.sample
        self.solid: Optional[Color] = parse_color(options.background) if options.background else None
        self.checkerboard: Optional[Tuple[Color, Color]] = (
            tuple(parse_colors(options.cb_color)) if options.cb_color else None  # type: ignore[assignment]
        )

    def println(self, text: str = "") -> None:
        print(text, file=self.stream)

    def show(self, gradient: Sampleable) -> None:
        if self.take is not None:
            self.show_colors(gradient.sample_n(self.take))
        elif self.sample is not None:
            self.show_colors(gradient.sample_many(self.sample))
        else:
            self.show_swatch(gradient)

    def show_colors(self, colors: Sequence[Color]) -> None:
        if self.array:
            self.println(format_colors_array(colors, self.format))
            return
        labels = [format_color(c, self.format) for c in colors]
        if not self.is_tty:
            for label in labels:
                self.println(label)
            return
        background = value_or_default(self.solid, BLACK)
        for line in label_lines(labels, colors, self.term_width, background):
            self.println(line)

    def show_swatch(self, gradient: Sampleable) -> None:
        if not self.is_tty:
            logger.debug("Not a terminal; skipping swatch")
            return
        background = self.solid if self.solid is not None else self.checkerboard
        grid = render_gradient(gradient, self.width, self.height, background)
        for line in grid_lines(grid):
            self.println(line)


def custom_gradient(options: argparse.Namespace) -> Gradient:
    return Gradient.from_colors(
        parse_colors(options.custom),
        options.position,
        blend_mode=options.blend_mode,
        interpolation=options.interpolation,
    )


def is_ggr_file(path: Path) -> bool:
    return path.suffix.lower() == '.ggr'


def read_file_gradients(options: argparse.Namespace, path: Path) -> List[Tuple[str, Union[Sampleable, GradientError]]]:
    """(label, gradient or the error building it) for each gradient in ``path``."""
    text = path.read_text(encoding='utf-8')
    if is_ggr_file(path):
        foreground = parse_color(options.ggr_fg) if options.ggr_fg else None
        background = parse_color(options.ggr_bg) if options.ggr_bg else None
        try:
            ggr = parse_ggr(text, foreground, background)
        except GradientError as exc:
            return [(path.name, exc)]
        return [(ggr.label, ggr)]

    found = []
    for svg_gradient in parse_svg(text, options.svg_id):
        try:
            found.append((svg_gradient.label, svg_gradient.to_gradient(options.blend_mode, options.interpolation)))
        except GradientError as exc:
            found.append((svg_gradient.label, exc))
    return found


def show_files(options: argparse.Namespace, out: Output) -> int:
    """Display every gradient found in the files; returns the number of failures."""
    failures = 0
    for path in options.file:
        found = read_file_gradients(options, path)
        if not found:
            logger.warning("%s: no matching gradient", path)
            failures += 1
        for label, gradient in found:
            if isinstance(gradient, GradientError):
                print(f"error: {path}: {gradient}", file=sys.stderr)
                failures += 1
                continue
            if out.is_tty and out.take is None and out.sample is None:
                out.println(f"{path} {label}")
            out.show(gradient)
    return failures


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None, stdout: Optional[TextIO] = None) -> int:
    parser = create_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        parser.print_help(sys.stderr)
        return 2

    options = parser.parse_args(argv)
    configure_logging(options.verbose)
    stream = value_or_default(stdout, sys.stdout)

    if options.list_presets:
        for name in preset_names():
            print(name, file=stream)
        return 0

    sources = [options.preset is not None, options.custom is not None, options.file is not None]
    if sum(sources) != 1:
        parser.error("exactly one of --preset, --custom or --file is required")

    try:
        out = Output(options, stream)
        if options.file is not None:
            return 1 if show_files(options, out) else 0
        if options.preset is not None:
            gradient = preset_gradient(options.preset)
        else:
            gradient = custom_gradient(options)
        out.show(gradient)
    except (GradientError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
