"""Linear slider geometry.

A slider controls one channel of the active color. Positions along the
track are expressed as a percentage (0-100) which is then scaled to the
channel's own range:

    red/green/blue  0-255
    alpha           0-1
    hue             0-359
    saturation      0-100 (HSL saturation)
    value           0-100 (HSV value)
    kelvin          min_temperature-max_temperature

Horizontal picker layouts stack sliders side by side, so their tracks run
along the y axis with 0% at the bottom. Both directions of the mapping apply
the same inversion, keeping position -> value -> position an identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from svg_color_picker.core.color import Color
from svg_color_picker.core.constants import (
    HUE_GRADIENT,
    HUE_SLIDER_MAX,
    KELVIN_GRADIENT_STOPS,
)
from svg_color_picker.core.convert import clamp, hsv_to_hsl, kelvin_to_rgb
from svg_color_picker.geometry.hit_test import HandlePosition
from svg_color_picker.geometry.params import SliderShape, SliderType, WidgetGeometryParams

GradientStop = tuple[float, str]


@dataclass(frozen=True)
class SliderDimensions:
    """Pixel dimensions derived from the params; never stored."""
    width: float
    height: float
    radius: float
    handle_start: float  # offset of the 0% handle position along the track
    handle_range: float  # track travel in pixels
    cx: Optional[float] = None
    cy: Optional[float] = None


def slider_dimensions(params: WidgetGeometryParams) -> SliderDimensions:
    if params.slider_shape is SliderShape.CIRCLE:
        return SliderDimensions(
            width=params.width,
            height=params.width,
            radius=params.width / 2 - params.border_width / 2,
            handle_start=params.padding + params.handle_radius,
            handle_range=params.width - params.padding * 2 - params.handle_radius * 2,
            cx=params.width / 2,
            cy=params.width / 2,
        )

    size = params.slider_size
    if size is None:
        size = params.padding * 2 + params.handle_radius * 2
    return SliderDimensions(
        width=size if params.is_horizontal else params.width,
        height=params.width if params.is_horizontal else size,
        radius=size / 2,
        handle_start=size / 2,
        handle_range=params.width - size,
    )


def pointer_to_value(params: WidgetGeometryParams, x: float, y: float) -> float:
    """
    Slider percentage (0-100) under a pointer.

    Only the coordinate along the track matters. Pointers past either end
    are clamped. A zero-length track gives 0 or 100 depending on which side
    of the handle start the pointer is.
    """
    dims = slider_dimensions(params)
    if params.is_horizontal:
        position = -y + dims.handle_range + dims.handle_start
    else:
        position = x - dims.handle_start
    if dims.handle_range <= 0:
        return 0.0 if position <= 0 else 100.0
    position = clamp(position, 0, dims.handle_range)
    return position / dims.handle_range * 100


def percent_to_channel_value(params: WidgetGeometryParams, percent: float) -> float:
    """Scale a slider percentage into the slider channel's range."""
    kind = params.slider_type
    if kind is SliderType.KELVIN:
        temperature_range = params.max_temperature - params.min_temperature
        return params.min_temperature + temperature_range * (percent / 100)
    if kind is SliderType.ALPHA:
        return percent / 100
    if kind is SliderType.HUE:
        return percent * HUE_SLIDER_MAX / 100
    if kind in (SliderType.RED, SliderType.GREEN, SliderType.BLUE):
        return percent * 2.55
    return percent


def current_slider_value(params: WidgetGeometryParams, color: Color) -> float:
    """The color's channel value as a slider percentage (0-100)."""
    kind = params.slider_type
    if kind is SliderType.RED:
        return color.red / 2.55
    if kind is SliderType.GREEN:
        return color.green / 2.55
    if kind is SliderType.BLUE:
        return color.blue / 2.55
    if kind is SliderType.ALPHA:
        return color.alpha * 100
    if kind is SliderType.KELVIN:
        temperature_range = params.max_temperature - params.min_temperature
        if temperature_range <= 0:
            return 0.0 if color.kelvin <= params.min_temperature else 100.0
        percent = (color.kelvin - params.min_temperature) / temperature_range * 100
        return clamp(percent, 0, 100)
    if kind is SliderType.HUE:
        return clamp(color.hue / HUE_SLIDER_MAX * 100, 0, 100)
    if kind is SliderType.SATURATION:
        return color.hsl[1]
    return color.value


def value_to_handle_position(params: WidgetGeometryParams, color: Color) -> HandlePosition:
    """Handle position for a color; the inverse of pointer_to_value()."""
    dims = slider_dimensions(params)
    percent = current_slider_value(params, color)
    position = dims.handle_start + (percent / 100) * dims.handle_range
    if params.is_horizontal:
        position = -position + dims.handle_range + dims.handle_start * 2
        return HandlePosition(x=dims.width / 2, y=position, index=color.index)
    return HandlePosition(x=position, y=dims.height / 2, index=color.index)


def apply_slider_value(params: WidgetGeometryParams, color: Color, x: float, y: float) -> None:
    """
    Write the pointer's slider value into the color.

    The saturation slider edits HSL saturation only; hue and lightness stay
    where they were. Every other type writes its channel property.
    """
    value = percent_to_channel_value(params, pointer_to_value(params, x, y))
    if params.slider_type is SliderType.SATURATION:
        h, _, l = color.hsl
        color.hsl = (h, value, l)
    else:
        setattr(color, params.slider_type.value, value)


def gradient_stops(params: WidgetGeometryParams, color: Color) -> list[GradientStop]:
    """
    Gradient stops (offset %, CSS color) for the slider's track.

    Depends only on the slider type, the color and the temperature range;
    the color is read, never modified.
    """
    kind = params.slider_type
    r, g, b = color.rgb_int

    if kind is SliderType.RED:
        return [(0, f"rgb(0, {g}, {b})"), (100, f"rgb(255, {g}, {b})")]
    if kind is SliderType.GREEN:
        return [(0, f"rgb({r}, 0, {b})"), (100, f"rgb({r}, 255, {b})")]
    if kind is SliderType.BLUE:
        return [(0, f"rgb({r}, {g}, 0)"), (100, f"rgb({r}, {g}, 255)")]
    if kind is SliderType.ALPHA:
        return [(0, f"rgba({r}, {g}, {b}, 0)"), (100, f"rgb({r}, {g}, {b})")]
    if kind is SliderType.KELVIN:
        return kelvin_gradient_stops(params.min_temperature, params.max_temperature)
    if kind is SliderType.HUE:
        return list(HUE_GRADIENT)
    if kind is SliderType.SATURATION:
        h, _, l = color.hsl
        return [
            (0, f"hsl({round(h)}, 0%, {round(l)}%)"),
            (100, f"hsl({round(h)}, 100%, {round(l)}%)"),
        ]

    h, s, _ = color.hsv
    h, s, l = hsv_to_hsl((h, s, 100))
    return [(0, "#000"), (100, f"hsl({round(h)}, {round(s)}%, {round(l)}%)")]


def kelvin_gradient_stops(
    min_temperature: float,
    max_temperature: float,
    count: int = KELVIN_GRADIENT_STOPS,
) -> list[GradientStop]:
    """Evenly spaced stops across a temperature range, both ends included."""
    if count < 2:
        count = 2
    stops: list[GradientStop] = []
    temperature_range = max_temperature - min_temperature
    last = count - 1
    for i in range(count):
        r, g, b = kelvin_to_rgb(min_temperature + temperature_range * i / last)
        stops.append((100 * i / last, f"rgb({r}, {g}, {b})"))
    return stops


def gradient_coords(params: WidgetGeometryParams) -> dict[str, str]:
    """linearGradient x1/y1/x2/y2 attributes matching the track direction."""
    if params.is_horizontal:
        return {"x1": "0%", "y1": "100%", "x2": "0%", "y2": "0%"}
    return {"x1": "0%", "y1": "0%", "x2": "100%", "y2": "0%"}
