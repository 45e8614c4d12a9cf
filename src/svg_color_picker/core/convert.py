"""Color space conversions.

All functions work on plain tuples so they can be shared by the color model,
the slider gradients and the CLI without creating Color objects.

Ranges:
    rgb: 0-255 per channel (floats, not rounded)
    hsv: h 0-360, s 0-100, v 0-100
    hsl: h 0-360, s 0-100, l 0-100
"""

from __future__ import annotations

import colorsys
import math

from svg_color_picker.core.constants import KELVIN_EPSILON, KELVIN_MAX, KELVIN_MIN

RGB = tuple[float, float, float]
HSV = tuple[float, float, float]
HSL = tuple[float, float, float]


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to the closed range [low, high]."""
    return max(low, min(value, high))


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    hue = hue % 360
    # -1e-15 % 360 rounds to 360.0
    return 0.0 if hue >= 360 else hue


def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert RGB (0-255) to HSV (h: 0-360, s: 0-100, v: 0-100)."""
    r, g, b = (clamp(c, 0, 255) / 255 for c in rgb)
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    return (normalize_hue(h * 360), clamp(s * 100, 0, 100), clamp(v * 100, 0, 100))


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert HSV (h: 0-360, s: 0-100, v: 0-100) to RGB (0-255)."""
    h, s, v = hsv
    r, g, b = colorsys.hsv_to_rgb(
        normalize_hue(h) / 360,
        clamp(s, 0, 100) / 100,
        clamp(v, 0, 100) / 100,
    )
    return (clamp(r * 255, 0, 255), clamp(g * 255, 0, 255), clamp(b * 255, 0, 255))


def hsv_to_hsl(hsv: HSV) -> HSL:
    """Convert HSV to HSL. Hue passes through untouched."""
    h, s, v = hsv
    s = clamp(s, 0, 100) / 100
    v = clamp(v, 0, 100) / 100
    lightness = (2 - s) * v
    divisor = lightness if lightness <= 1 else 2 - lightness
    saturation = 0.0 if divisor < 1e-9 else (s * v) / divisor
    return (h, clamp(saturation * 100, 0, 100), clamp(lightness * 50, 0, 100))


def hsl_to_hsv(hsl: HSL) -> HSV:
    """Convert HSL to HSV. Hue passes through untouched."""
    h, s, l = hsl
    l = clamp(l, 0, 100) * 2
    s = clamp(s, 0, 100) * (l if l <= 100 else 200 - l) / 100
    saturation = 0.0 if l + s < 1e-9 else (2 * s) / (l + s)
    return (h, clamp(saturation * 100, 0, 100), clamp((l + s) / 2, 0, 100))


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB (0-255) to HSL (h: 0-360, s: 0-100, l: 0-100)."""
    r, g, b = (clamp(c, 0, 255) / 255 for c in rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (normalize_hue(h * 360), clamp(s * 100, 0, 100), clamp(l * 100, 0, 100))


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL (h: 0-360, s: 0-100, l: 0-100) to RGB (0-255)."""
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb(
        normalize_hue(h) / 360,
        clamp(l, 0, 100) / 100,
        clamp(s, 0, 100) / 100,
    )
    return (clamp(r * 255, 0, 255), clamp(g * 255, 0, 255), clamp(b * 255, 0, 255))


def bound_kelvin(kelvin: float) -> float:
    """Clamp a temperature to KELVIN_MIN-KELVIN_MAX; inf and nan map to a bound."""
    if not math.isfinite(kelvin):
        return float(KELVIN_MAX if kelvin > 0 else KELVIN_MIN)
    return clamp(kelvin, KELVIN_MIN, KELVIN_MAX)


def kelvin_to_rgb_float(kelvin: float) -> RGB:
    """
    Approximate the RGB color of a black-body radiator, unrounded.

    Uses Tanner Helland's piecewise fit. The fit is tuned for 1000K-40000K;
    higher temperatures are still computed (the curve flattens towards a
    pale blue). Temperatures below KELVIN_MIN are raised to it, since the
    green term's logarithm is undefined under 200K. Infinite and nan
    temperatures are treated as the nearest bound.
    """
    if not math.isfinite(kelvin):
        kelvin = bound_kelvin(kelvin)
    temp = max(kelvin, KELVIN_MIN) / 100
    if temp < 66:
        r = 255.0
        g = -155.25485562709179 - 0.44596950469579133 * (temp - 2) + 104.49216199393888 * math.log(temp - 2)
        if temp < 20:
            b = 0.0
        else:
            b = -254.76935184120902 + 0.8274096064007395 * (temp - 10) + 115.67994401066147 * math.log(temp - 10)
    else:
        r = 351.97690566805693 + 0.114206453784165 * (temp - 55) - 40.25366309332127 * math.log(temp - 55)
        g = 325.4494125711974 + 0.07943456536662342 * (temp - 50) - 28.0852963507957 * math.log(temp - 50)
        b = 255.0
    return (clamp(r, 0, 255), clamp(g, 0, 255), clamp(b, 0, 255))


def kelvin_to_rgb(kelvin: float) -> tuple[int, int, int]:
    """Black-body color with 8-bit channels, as used for CSS gradient stops."""
    r, g, b = kelvin_to_rgb_float(kelvin)
    return (math.floor(r), math.floor(g), math.floor(b))


def rgb_to_kelvin(rgb: RGB) -> float:
    """
    Estimate the correlated color temperature of an RGB color.

    Bisects the temperature range, comparing the blue/red ratio of each
    candidate with the target. Ratios are cross-multiplied so a zero red
    channel cannot divide by zero.
    """
    r, _, b = rgb
    low, high = float(KELVIN_MIN), float(KELVIN_MAX)
    temp = (low + high) / 2
    while high - low > KELVIN_EPSILON:
        temp = (low + high) / 2
        kr, _, kb = kelvin_to_rgb_float(temp)
        if kb * r >= b * kr:
            high = temp
        else:
            low = temp
    return temp
