"""Picker widgets."""

from svg_color_picker.widgets.base import BaseWidget, HandleView, Widget
from svg_color_picker.widgets.slider import SliderFrame, SliderWidget
from svg_color_picker.widgets.wheel import WheelFrame, WheelWidget

__all__ = [
    "BaseWidget",
    "HandleView",
    "Widget",
    "SliderFrame",
    "SliderWidget",
    "WheelFrame",
    "WheelWidget",
]
