"""
svg-color-picker: geometry and color model for SVG color picker widgets

Turns pointer input into colors and colors into handle positions for a
hue/saturation wheel and single-channel sliders. Drawing is left to the
caller: widgets hand back plain frame data (handle positions, gradient
stops, hue ring arcs) ready to be written out as SVG.

Quick Start:
    >>> import svg_color_picker as scp
    >>> picker = scp.ColorPicker(["#ff0000", "#00ff00"])
    >>> wheel = scp.WheelWidget(picker, scp.WidgetGeometryParams(width=200))
    >>> wheel.handle_input(scp.InputEvent.start(100, 20))
    True
    >>> pos = wheel.frame().active_handle.position
    >>> round(pos.x), round(pos.y)
    (100, 20)
    >>> round(picker.color.hue)
    90

Features:
    - Color model with RGB, HSV, HSL, alpha and color temperature views
    - Wheel geometry with configurable direction and hue offset
    - Red/green/blue/alpha/hue/saturation/value/kelvin sliders
    - Multi-handle hit-testing with lowest-index tie-break
    - Start/move/end input routing with picker-level events
"""

__version__ = "0.1.0"

# Core types
from svg_color_picker.core.color import Color, ColorChanges
from svg_color_picker.core.convert import kelvin_to_rgb, kelvin_to_rgb_float, rgb_to_kelvin

# Geometry
from svg_color_picker.geometry.params import (
    LayoutDirection,
    SliderShape,
    SliderType,
    WheelDirection,
    WidgetGeometryParams,
)
from svg_color_picker.geometry.hit_test import HandlePosition, hit_test

# Input
from svg_color_picker.input.events import InputEvent, InputType
from svg_color_picker.input.router import InputRouter

# Picker and widgets
from svg_color_picker.picker import ColorPicker, PickerOptions
from svg_color_picker.widgets.slider import SliderWidget
from svg_color_picker.widgets.wheel import WheelWidget

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "ColorChanges",
    "kelvin_to_rgb",
    "kelvin_to_rgb_float",
    "rgb_to_kelvin",
    # Geometry
    "LayoutDirection",
    "SliderShape",
    "SliderType",
    "WheelDirection",
    "WidgetGeometryParams",
    "HandlePosition",
    "hit_test",
    # Input
    "InputEvent",
    "InputType",
    "InputRouter",
    # Picker and widgets
    "ColorPicker",
    "PickerOptions",
    "SliderWidget",
    "WheelWidget",
]
