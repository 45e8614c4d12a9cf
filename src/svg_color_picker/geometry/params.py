"""Per-render widget configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Optional

from svg_color_picker.core.constants import (
    DEFAULT_BORDER_WIDTH,
    DEFAULT_HANDLE_RADIUS,
    DEFAULT_MAX_TEMPERATURE,
    DEFAULT_MIN_TEMPERATURE,
    DEFAULT_PADDING,
    DEFAULT_WHEEL_ANGLE,
    DEFAULT_WIDTH,
)


class LayoutDirection(Enum):
    """Picker layout; a horizontal picker stacks its sliders side by side,
    so their tracks run vertically (bottom = 0%)."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class WheelDirection(Enum):
    """Direction in which hue increases around the wheel."""
    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"

    @classmethod
    def _missing_(cls, value: object) -> Optional[WheelDirection]:
        if value == "counterclockwise":
            return cls.ANTICLOCKWISE
        return None


class SliderShape(Enum):
    BAR = "bar"
    CIRCLE = "circle"


class SliderType(Enum):
    """
    Channel controlled by a slider.

    Unknown tags resolve to VALUE instead of raising, so a misconfigured
    slider still behaves as a brightness slider.
    """
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA = "alpha"
    HUE = "hue"
    SATURATION = "saturation"
    VALUE = "value"
    KELVIN = "kelvin"

    @classmethod
    def _missing_(cls, value: object) -> SliderType:
        return cls.VALUE


@dataclass(frozen=True)
class WidgetGeometryParams:
    """
    Immutable geometry configuration for one widget render.

    Strings are accepted for the enum fields and coerced on construction:

        >>> params = WidgetGeometryParams(width=200, slider_type="alpha")
        >>> params.slider_type
        <SliderType.ALPHA: 'alpha'>
    """

    width: float = DEFAULT_WIDTH
    border_width: float = DEFAULT_BORDER_WIDTH
    padding: float = DEFAULT_PADDING
    handle_radius: float = DEFAULT_HANDLE_RADIUS

    # Wheel
    wheel_angle: float = DEFAULT_WHEEL_ANGLE
    wheel_direction: WheelDirection = WheelDirection.ANTICLOCKWISE
    wheel_lightness: bool = True

    # Slider
    layout_direction: LayoutDirection = LayoutDirection.VERTICAL
    slider_type: SliderType = SliderType.VALUE
    slider_shape: SliderShape = SliderShape.BAR
    slider_size: Optional[float] = None  # None = 2 * (padding + handle_radius)
    min_temperature: float = DEFAULT_MIN_TEMPERATURE
    max_temperature: float = DEFAULT_MAX_TEMPERATURE

    def __post_init__(self) -> None:
        # Frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "wheel_direction", WheelDirection(self.wheel_direction))
        object.__setattr__(self, "layout_direction", LayoutDirection(self.layout_direction))
        object.__setattr__(self, "slider_type", SliderType(self.slider_type))
        object.__setattr__(self, "slider_shape", SliderShape(self.slider_shape))

    @property
    def is_horizontal(self) -> bool:
        return self.layout_direction is LayoutDirection.HORIZONTAL

    @property
    def is_clockwise(self) -> bool:
        return self.wheel_direction is WheelDirection.CLOCKWISE

    # Fluent copies
    def with_size(self, width: float) -> WidgetGeometryParams:
        return replace(self, width=width)

    def with_slider(
        self,
        slider_type: SliderType | str,
        layout_direction: Optional[LayoutDirection | str] = None,
    ) -> WidgetGeometryParams:
        """Copy configured for a slider of the given type."""
        if layout_direction is None:
            return replace(self, slider_type=slider_type)
        return replace(self, slider_type=slider_type, layout_direction=layout_direction)

    def with_wheel(
        self,
        direction: WheelDirection | str,
        angle: float = DEFAULT_WHEEL_ANGLE,
    ) -> WidgetGeometryParams:
        """Copy configured for a wheel with the given direction and offset."""
        return replace(self, wheel_direction=direction, wheel_angle=angle)

    def with_temperature_range(self, minimum: float, maximum: float) -> WidgetGeometryParams:
        return replace(self, min_temperature=minimum, max_temperature=maximum)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with enum fields as their string values."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Enum):
                data[key] = value.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WidgetGeometryParams:
        """
        Build params from a dictionary, ignoring unknown keys.

        Raises:
            ValueError: for an invalid direction or shape. Slider types
                never fail; unknown ones become VALUE.
        """
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)
