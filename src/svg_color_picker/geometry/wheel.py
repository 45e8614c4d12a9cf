"""Hue/saturation wheel geometry.

The wheel maps hue to an angle around the center and HSV saturation to the
distance from the center. Value is left alone and drawn as a dark overlay.
Angles are degrees everywhere in this module's API; radians only appear
inside trigonometric calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from svg_color_picker.core.color import Color
from svg_color_picker.core.constants import HUE_RING_ARC_SPAN, HUE_RING_STEPS
from svg_color_picker.core.convert import clamp
from svg_color_picker.geometry.hit_test import HandlePosition
from svg_color_picker.geometry.params import WidgetGeometryParams


@dataclass(frozen=True)
class WheelDimensions:
    """Pixel dimensions derived from the params; never stored."""
    width: float
    radius: float
    cx: float
    cy: float
    handle_range: float  # max distance of a handle from the center


def wheel_dimensions(params: WidgetGeometryParams) -> WheelDimensions:
    half = params.width / 2
    return WheelDimensions(
        width=params.width,
        radius=half - params.border_width,
        cx=half,
        cy=half,
        handle_range=half - params.padding - params.handle_radius - params.border_width,
    )


def translate_wheel_angle(
    params: WidgetGeometryParams,
    angle: float,
    invert: bool = False,
) -> float:
    """
    Convert between a screen angle and a hue, in degrees.

    Without ``invert`` the input is a screen angle (from ``atan2``) and the
    result is a hue. With ``invert`` the input is a hue and the result is the
    angle to draw it at, measured from the negative x axis.
    """
    offset = params.wheel_angle
    if params.is_clockwise:
        angle = offset + angle if invert else 360 - offset + angle
    else:
        angle = offset + 180 - angle if invert else offset - angle
    return angle % 360


def pointer_to_color(params: WidgetGeometryParams, x: float, y: float) -> tuple[float, float]:
    """
    Hue and saturation under a pointer.

    The distance from the center is clamped to the handle travel range before
    scaling, so pointers outside the disc give saturation 100.

    Returns:
        (hue 0-360, saturation 0-100)
    """
    dims = wheel_dimensions(params)
    dx = x - dims.cx
    dy = y - dims.cy
    hue = translate_wheel_angle(params, math.degrees(math.atan2(dy, dx)))
    distance = math.hypot(dx, dy)
    if dims.handle_range <= 0:
        return (hue, 0.0 if distance == 0 else 100.0)
    distance = clamp(distance, 0, dims.handle_range)
    return (hue, distance / dims.handle_range * 100)


def color_to_handle_position(params: WidgetGeometryParams, color: Color) -> HandlePosition:
    """Handle position for a color; the inverse of pointer_to_color()."""
    h, s, _ = color.hsv
    dims = wheel_dimensions(params)
    angle = math.radians(180 + translate_wheel_angle(params, h, invert=True))
    distance = (s / 100) * max(dims.handle_range, 0)
    direction = -1 if params.is_clockwise else 1
    return HandlePosition(
        x=dims.cx + distance * math.cos(angle) * direction,
        y=dims.cy + distance * math.sin(angle) * direction,
        index=color.index,
    )


def apply_wheel_value(params: WidgetGeometryParams, color: Color, x: float, y: float) -> None:
    """Move a color to the pointer, keeping its value and alpha."""
    hue, saturation = pointer_to_color(params, x, y)
    _, _, value = color.hsv
    color.hsv = (hue, saturation, value)


def svg_arc_path(cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> str:
    """SVG path data for a circular arc between two angles (degrees)."""
    large_arc = 0 if end_angle - start_angle <= 180 else 1
    start = math.radians(start_angle)
    end = math.radians(end_angle)
    x1 = cx + radius * math.cos(end)
    y1 = cy + radius * math.sin(end)
    x2 = cx + radius * math.cos(start)
    y2 = cy + radius * math.sin(start)
    return (
        f"M {_coord(x1)} {_coord(y1)} "
        f"A {_coord(radius)} {_coord(radius)} 0 {large_arc} 0 {_coord(x2)} {_coord(y2)}"
    )


def _coord(value: float) -> str:
    return f"{round(value, 3):g}"


@dataclass(frozen=True)
class ArcSegment:
    """One slice of the hue ring."""
    start_angle: float
    end_angle: float
    hue: float
    path: str
    stroke_width: float

    @property
    def stroke(self) -> str:
        return f"hsl({_coord(self.hue)}, 100%, 50%)"


class HueRing:
    """
    The hue ring as a lazy sequence of one-degree arc segments.

    Segments depend only on the wheel's size, direction and offset, never on
    a color. Iterating is restartable; each pass recomputes the segments.
    Each arc spans slightly more than a degree so neighbours overlap and no
    seams show between them.
    """

    def __init__(self, params: WidgetGeometryParams, radius: Optional[float] = None) -> None:
        self.params = params
        dims = wheel_dimensions(params)
        self._cx = dims.cx
        self._cy = dims.cy
        # Ring is stroked at half radius with a full-radius stroke, filling the disc
        self._radius = dims.radius if radius is None else radius

    def __len__(self) -> int:
        return HUE_RING_STEPS

    def __iter__(self) -> Iterator[ArcSegment]:
        for angle in range(HUE_RING_STEPS):
            yield ArcSegment(
                start_angle=angle,
                end_angle=angle + HUE_RING_ARC_SPAN,
                hue=translate_wheel_angle(self.params, angle),
                path=svg_arc_path(self._cx, self._cy, self._radius / 2, angle, angle + HUE_RING_ARC_SPAN),
                stroke_width=self._radius,
            )


def hue_ring_segments(params: WidgetGeometryParams, radius: Optional[float] = None) -> HueRing:
    """Arc segments used to draw the wheel's hue ring."""
    return HueRing(params, radius)
