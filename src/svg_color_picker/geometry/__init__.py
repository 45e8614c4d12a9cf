"""Widget geometry: pointer <-> value mapping, handle positions, gradients."""

from svg_color_picker.geometry.params import (
    LayoutDirection,
    SliderShape,
    SliderType,
    WheelDirection,
    WidgetGeometryParams,
)
from svg_color_picker.geometry.hit_test import HandlePosition, hit_test
from svg_color_picker.geometry.wheel import (
    ArcSegment,
    HueRing,
    color_to_handle_position,
    hue_ring_segments,
    pointer_to_color,
    wheel_dimensions,
)
from svg_color_picker.geometry.slider import (
    current_slider_value,
    gradient_stops,
    pointer_to_value,
    slider_dimensions,
    value_to_handle_position,
)

__all__ = [
    "LayoutDirection",
    "SliderShape",
    "SliderType",
    "WheelDirection",
    "WidgetGeometryParams",
    "HandlePosition",
    "hit_test",
    "ArcSegment",
    "HueRing",
    "color_to_handle_position",
    "hue_ring_segments",
    "pointer_to_color",
    "wheel_dimensions",
    "current_slider_value",
    "gradient_stops",
    "pointer_to_value",
    "slider_dimensions",
    "value_to_handle_position",
]
