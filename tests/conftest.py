"""Shared fixtures for picker tests."""

import pytest

from svg_color_picker.core.color import Color
from svg_color_picker.geometry.params import WidgetGeometryParams
from svg_color_picker.picker import ColorPicker


@pytest.fixture
def params() -> WidgetGeometryParams:
    """Default geometry: 300px wide, padding 6, handle radius 8, no border."""
    return WidgetGeometryParams()


@pytest.fixture
def clockwise_params(params: WidgetGeometryParams) -> WidgetGeometryParams:
    return params.with_wheel("clockwise")


@pytest.fixture
def mid_color() -> Color:
    """A color away from every channel's extremes."""
    return Color("hsl(200, 60%, 40%)")


@pytest.fixture
def picker() -> ColorPicker:
    return ColorPicker(["#ff0000", "#00ff00", "#0000ff"])


@pytest.fixture
def events(picker: ColorPicker) -> list[tuple]:
    """Every picker event as (name, *args), in order."""
    recorded: list[tuple] = []
    for name in (
        "color:init",
        "color:change",
        "input:change",
        "color:setActive",
        "color:remove",
        "input:start",
        "input:move",
        "input:end",
    ):
        picker.on(name, lambda *args, name=name: recorded.append((name, *args)))
    return recorded
