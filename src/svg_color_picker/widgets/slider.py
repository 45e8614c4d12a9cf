"""Single-channel slider widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from svg_color_picker.geometry.params import SliderType, WidgetGeometryParams
from svg_color_picker.geometry.slider import (
    GradientStop,
    apply_slider_value,
    current_slider_value,
    gradient_coords,
    gradient_stops,
    slider_dimensions,
    value_to_handle_position,
)
from svg_color_picker.widgets.base import BaseWidget, HandleView

if TYPE_CHECKING:
    from svg_color_picker.picker import ColorPicker


@dataclass(frozen=True)
class SliderFrame:
    """Everything needed to draw a slider for one frame."""
    width: float
    height: float
    radius: float
    border_width: float
    handle: HandleView
    value: float  # percent 0-100
    gradient: list[GradientStop]
    gradient_coords: dict[str, str]
    checkerboard: bool  # alpha sliders draw over a transparency pattern


class SliderWidget(BaseWidget):
    """Linear widget editing one channel of the active color."""

    def __init__(
        self,
        picker: ColorPicker,
        params: Optional[WidgetGeometryParams] = None,
        slider_type: Optional[SliderType | str] = None,
    ) -> None:
        params = params or WidgetGeometryParams()
        if slider_type is not None:
            params = params.with_slider(slider_type)
        super().__init__(picker, params)

    @property
    def slider_type(self) -> SliderType:
        return self.params.slider_type

    def apply_pointer(self, x: float, y: float) -> None:
        with self.picker.user_input():
            apply_slider_value(self.params, self.picker.color, x, y)

    def frame(self) -> SliderFrame:
        dims = slider_dimensions(self.params)
        color = self.picker.color
        return SliderFrame(
            width=dims.width,
            height=dims.height,
            radius=dims.radius,
            border_width=self.params.border_width,
            handle=HandleView(
                position=value_to_handle_position(self.params, color),
                radius=self.params.handle_radius,
                active=True,
            ),
            value=current_slider_value(self.params, color),
            gradient=gradient_stops(self.params, color),
            gradient_coords=gradient_coords(self.params),
            checkerboard=self.slider_type is SliderType.ALPHA,
        )
