"""
Read ``linearGradient`` / ``radialGradient`` definitions out of SVG markup.

Only the stops are used; gradient geometry (``x1``, ``cx``, transforms,
``href`` inheritance) is ignored. Fragments without a single root element
are accepted, so a bare list of gradient elements parses as well as a full
document.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union
import logging
import math
import re
import xml.etree.ElementTree as ET

from ..colors.color import BLACK, Color
from ..errors import EmptyStopsError, InvalidColorError, InvalidSvgError
from ..gradients.gradient import Gradient
from ..types.modes import BlendMode, InterpolationMode
from .css import parse_color

logger = logging.getLogger(__name__)

GRADIENT_TAGS = {"linearGradient", "radialGradient"}

_PROLOG = re.compile(r"<\?xml[^>]*\?>|<!DOCTYPE[^>]*>", re.IGNORECASE)


def parse_percent_or_float(text: str) -> Optional[float]:
    """``"50%"`` → 0.5, ``"0.73"`` → 0.73, anything unreadable → None."""
    text = text.strip()
    scale = 1.0
    if text.endswith("%"):
        text = text[:-1]
        scale = 100.0
    try:
        return float(text) / scale
    except ValueError:
        return None


def parse_stop_style(style: str) -> Tuple[Optional[str], Optional[str]]:
    """Pull ``stop-color`` and ``stop-opacity`` out of an inline ``style``."""
    color = opacity = None
    for declaration in style.split(";"):
        parts = declaration.split(":")
        if len(parts) != 2:
            continue
        key = parts[0].strip().lower()
        if key == "stop-color":
            color = parts[1].strip()
        elif key == "stop-opacity":
            opacity = parts[1].strip()
    return color, opacity


@dataclass
class SvgGradient:
    """Stops of one SVG gradient element, in document order."""
    id: Optional[str]
    colors: List[Color] = field(default_factory=list)
    positions: List[float] = field(default_factory=list)
    valid: bool = True

    def to_gradient(
        self,
        blend_mode: Union[BlendMode, str, None] = None,
        interpolation: Union[InterpolationMode, str, None] = None,
    ) -> Gradient:
        """
        Build a :class:`Gradient` from the stops.

        When the first offset is above 0 (or the last below 1) the end color
        is repeated at 0 (or 1) so the gradient covers the unit range.

        Raises:
            InvalidSvgError: A stop had a malformed color, offset or opacity.
            EmptyStopsError: The element has no stops.
        """
        if not self.valid:
            raise InvalidSvgError(f"SVG gradient {self.label} has malformed stops")
        if not self.colors:
            raise EmptyStopsError(f"SVG gradient {self.label} has no stops")

        colors = list(self.colors)
        positions = list(self.positions)
        if positions[0] > 0.0:
            positions.insert(0, 0.0)
            colors.insert(0, colors[0])
        if positions[-1] < 1.0:
            positions.append(1.0)
            colors.append(colors[-1])
        return Gradient(
            list(zip(positions, colors)),
            blend_mode=blend_mode,
            interpolation=interpolation,
        )

    @property
    def label(self) -> str:
        return f"#{self.id}" if self.id is not None else "(no id)"


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    tag = tag.rsplit("}", 1)[-1]
    return tag.rsplit(":", 1)[-1]


def _read_stop(attrib: Dict[str, str]) -> Optional[Tuple[Color, Optional[float], Optional[float]]]:
    """(color, offset, opacity) of a ``<stop>``, or None when any value is malformed."""
    color = BLACK
    opacity = None
    style_color, style_opacity = parse_stop_style(attrib.get("style", ""))

    # inline style wins over the presentation attributes
    for color_text in (attrib.get("stop-color"), style_color):
        if color_text is None:
            continue
        try:
            color = parse_color(color_text)
        except InvalidColorError:
            return None

    for opacity_text in (attrib.get("stop-opacity"), style_opacity):
        if opacity_text is None:
            continue
        opacity = parse_percent_or_float(opacity_text)
        if opacity is None:
            return None

    offset = None
    if "offset" in attrib:
        offset = parse_percent_or_float(attrib["offset"])
        if offset is None:
            return None
    return color, offset, opacity


def _events(text: str):
    body = _PROLOG.sub("", text)
    parser = ET.XMLPullParser(events=("start", "end"))
    try:
        parser.feed(f"<chromagrad-root>{body}</chromagrad-root>")
        parser.close()
        # syntax errors surface while the queued events are read
        return list(parser.read_events())
    except ET.ParseError as exc:
        raise InvalidSvgError(f"Malformed SVG: {exc}") from None


def parse_svg(text: str, target_id: Optional[str] = None) -> List[SvgGradient]:
    """
    Extract every gradient element from SVG markup.

    Args:
        text: SVG document or fragment
        target_id: When given, only gradients whose ``id`` equals it

    Returns:
        One :class:`SvgGradient` per matching element, in document order.
        Stops outside a gradient element are ignored. A stop without
        ``stop-color`` is black, a stop without ``offset`` reuses the previous
        offset, and offsets never decrease. A stop with a malformed value is
        dropped and its gradient marked invalid.

    Raises:
        InvalidSvgError: ``text`` is not well-formed markup.
    """
    result: List[SvgGradient] = []
    current: Optional[SvgGradient] = None
    previous = -math.inf

    for event, element in _events(text):
        name = _local_name(element.tag)
        if name in GRADIENT_TAGS:
            if event == "start":
                gradient_id = element.attrib.get("id")
                if target_id is not None and gradient_id != target_id:
                    current = None
                    continue
                current = SvgGradient(gradient_id)
                result.append(current)
            else:
                current = None
                previous = -math.inf
        elif name == "stop" and event == "start" and current is not None:
            stop = _read_stop(element.attrib)
            if stop is None:
                current.valid = False
                continue
            color, offset, opacity = stop
            if opacity is not None:
                color = color.with_alpha(min(max(opacity, 0.0), 1.0))
            offset = offset if offset is not None else previous
            previous = max(offset, previous) if math.isfinite(offset) else 0.0
            current.colors.append(color)
            current.positions.append(previous)

    logger.debug("Found %d SVG gradient(s)", len(result))
    return result
