"""Hue/saturation wheel widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from svg_color_picker.geometry.hit_test import hit_test
from svg_color_picker.geometry.params import WidgetGeometryParams
from svg_color_picker.geometry.wheel import (
    HueRing,
    apply_wheel_value,
    color_to_handle_position,
    hue_ring_segments,
    wheel_dimensions,
)
from svg_color_picker.widgets.base import BaseWidget, HandleView

if TYPE_CHECKING:
    from svg_color_picker.picker import ColorPicker


@dataclass(frozen=True)
class WheelFrame:
    """Everything needed to draw a wheel for one frame."""
    width: float
    radius: float
    cx: float
    cy: float
    border_width: float
    hue_ring: HueRing
    handles: list[HandleView]  # inactive handles first, active handle last
    lightness_opacity: Optional[float]  # None when the overlay is disabled

    @property
    def active_handle(self) -> HandleView:
        return self.handles[-1]


class WheelWidget(BaseWidget):
    """
    Circular widget picking hue (angle) and saturation (radius).

    Every color in the picker gets a handle. Pressing on a handle makes that
    color active; pressing anywhere else moves the active color there.
    """

    def __init__(self, picker: ColorPicker, params: Optional[WidgetGeometryParams] = None) -> None:
        super().__init__(picker, params or WidgetGeometryParams())

    @property
    def supports_handle_selection(self) -> bool:
        return True

    def handle_at(self, x: float, y: float) -> Optional[int]:
        positions = [color_to_handle_position(self.params, c) for c in self.picker.colors]
        return hit_test(self.params, x, y, positions)

    def apply_pointer(self, x: float, y: float) -> None:
        with self.picker.user_input():
            apply_wheel_value(self.params, self.picker.color, x, y)

    def frame(self) -> WheelFrame:
        dims = wheel_dimensions(self.params)
        active = self.picker.color
        handles = [
            HandleView(
                position=color_to_handle_position(self.params, color),
                radius=self.params.handle_radius,
                fill=color.hsl_string,
                active=False,
            )
            for color in self.picker.colors
            if color is not active
        ]
        handles.append(HandleView(
            position=color_to_handle_position(self.params, active),
            radius=self.params.handle_radius,
            fill=active.hsl_string,
            active=True,
        ))
        return WheelFrame(
            width=dims.width,
            radius=dims.radius,
            cx=dims.cx,
            cy=dims.cy,
            border_width=self.params.border_width,
            hue_ring=hue_ring_segments(self.params, dims.radius),
            handles=handles,
            lightness_opacity=1 - active.value / 100 if self.params.wheel_lightness else None,
        )
