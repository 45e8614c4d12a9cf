"""Tests for widget geometry params."""

import pytest

from svg_color_picker.geometry.params import (
    LayoutDirection,
    SliderShape,
    SliderType,
    WheelDirection,
    WidgetGeometryParams,
)


class TestWidgetGeometryParams:

    def test_defaults(self, params: WidgetGeometryParams) -> None:
        assert params.width == 300
        assert params.padding == 6
        assert params.handle_radius == 8
        assert params.wheel_direction is WheelDirection.ANTICLOCKWISE
        assert params.slider_type is SliderType.VALUE
        assert (params.min_temperature, params.max_temperature) == (2200, 11000)

    def test_strings_are_coerced(self) -> None:
        params = WidgetGeometryParams(
            wheel_direction="clockwise",
            layout_direction="horizontal",
            slider_type="kelvin",
            slider_shape="circle",
        )
        assert params.is_clockwise
        assert params.is_horizontal
        assert params.slider_type is SliderType.KELVIN
        assert params.slider_shape is SliderShape.CIRCLE

    def test_counterclockwise_alias(self) -> None:
        assert WheelDirection("counterclockwise") is WheelDirection.ANTICLOCKWISE

    def test_invalid_direction(self) -> None:
        with pytest.raises(ValueError):
            WidgetGeometryParams(wheel_direction="sideways")
        with pytest.raises(ValueError):
            WidgetGeometryParams(layout_direction="diagonal")

    def test_unknown_slider_type_is_value(self) -> None:
        assert WidgetGeometryParams(slider_type="brightness").slider_type is SliderType.VALUE

    def test_is_immutable(self, params: WidgetGeometryParams) -> None:
        with pytest.raises(AttributeError):
            params.width = 10  # type: ignore[misc]

    def test_fluent_copies(self, params: WidgetGeometryParams) -> None:
        slider = params.with_slider("hue", "horizontal")
        assert slider.slider_type is SliderType.HUE
        assert slider.layout_direction is LayoutDirection.HORIZONTAL
        assert params.slider_type is SliderType.VALUE

        wheel = params.with_wheel("clockwise", 45)
        assert wheel.is_clockwise and wheel.wheel_angle == 45
        assert params.with_size(120).width == 120
        assert params.with_temperature_range(1000, 5000).max_temperature == 5000

    def test_with_slider_keeps_layout(self) -> None:
        params = WidgetGeometryParams(layout_direction="horizontal").with_slider("red")
        assert params.is_horizontal

    def test_to_dict_uses_strings(self) -> None:
        data = WidgetGeometryParams(wheel_direction="clockwise").to_dict()
        assert data["wheel_direction"] == "clockwise"
        assert data["slider_type"] == "value"
        assert data["slider_size"] is None

    def test_dict_round_trip(self) -> None:
        params = WidgetGeometryParams(width=180, slider_type="alpha", slider_size=20)
        assert WidgetGeometryParams.from_dict(params.to_dict()) == params

    def test_from_dict_ignores_unknown_keys(self) -> None:
        params = WidgetGeometryParams.from_dict({"width": 90, "theme": "dark"})
        assert params.width == 90

    def test_from_dict_invalid_shape(self) -> None:
        with pytest.raises(ValueError):
            WidgetGeometryParams.from_dict({"slider_shape": "triangle"})
