"""Pointer input events and routing."""

from svg_color_picker.input.events import InputEvent, InputType
from svg_color_picker.input.router import InputRouter, InputTarget, RouterState

__all__ = ["InputEvent", "InputType", "InputRouter", "InputTarget", "RouterState"]
