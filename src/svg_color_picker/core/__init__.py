"""Color model and color space conversions."""

from svg_color_picker.core.color import Color, ColorChanges, parse_color
from svg_color_picker.core.convert import bound_kelvin, kelvin_to_rgb, kelvin_to_rgb_float, rgb_to_kelvin

__all__ = [
    "Color",
    "ColorChanges",
    "parse_color",
    "bound_kelvin",
    "kelvin_to_rgb",
    "kelvin_to_rgb_float",
    "rgb_to_kelvin",
]
