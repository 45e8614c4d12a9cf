"""Color model for picker widgets."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from svg_color_picker.core.constants import NAMED_COLORS
from svg_color_picker.core.convert import (
    bound_kelvin,
    clamp,
    hsl_to_hsv,
    hsv_to_hsl,
    hsv_to_rgb,
    kelvin_to_rgb_float,
    normalize_hue,
    rgb_to_hsv,
    rgb_to_kelvin,
)

HSVA = tuple[float, float, float, float]
ColorValue = Union[str, dict, "Color"]

# rgb(255, 0, 0) / hsla(120, 50%, 50%, 0.5) style functional notation
_FUNCTIONAL_RE = re.compile(
    r"^(rgb|rgba|hsl|hsla|hsv|hsva)\(\s*([^)]*)\)$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ColorChanges:
    """Which canonical channels a write actually modified."""
    h: bool = False
    s: bool = False
    v: bool = False
    a: bool = False

    @property
    def any(self) -> bool:
        return self.h or self.s or self.v or self.a


ChangeCallback = Callable[["Color", ColorChanges], None]


class Color:
    """
    A single mutable color, stored canonically as HSV plus alpha.

    Every other view (RGB, HSL, kelvin, strings) is derived on read, so the
    views can never drift apart. Writing any view converts it to HSV
    immediately and notifies ``on_change`` if the canonical value moved.
    A temperature written through ``kelvin`` is kept until hue, saturation
    or value change, so reading it back gives the same number.

    Example:
        >>> color = Color("#ff0000")
        >>> color.hsv
        (0.0, 100.0, 100.0)
        >>> color.value = 50
        >>> color.hex_string
        '#800000'
    """

    def __init__(
        self,
        value: Optional[ColorValue] = None,
        index: int = 0,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        self.index = index
        self._hsva: HSVA = (0.0, 0.0, 100.0, 1.0)
        self._kelvin: Optional[float] = None  # last temperature written, while still current
        self._on_change: Optional[ChangeCallback] = None
        if value is not None:
            self.set(value)
        self._initial: HSVA = self._hsva
        self._on_change = on_change

    # -------------------------------------------------------------------------
    # Canonical storage
    # -------------------------------------------------------------------------

    def _write(self, h: float, s: float, v: float, a: float, kelvin: Optional[float] = None) -> None:
        new = (
            normalize_hue(h),
            clamp(s, 0, 100),
            clamp(v, 0, 100),
            clamp(a, 0, 1),
        )
        old = self._hsva
        changes = ColorChanges(
            h=new[0] != old[0],
            s=new[1] != old[1],
            v=new[2] != old[2],
            a=new[3] != old[3],
        )
        self._hsva = new
        if kelvin is not None:
            self._kelvin = kelvin
        elif changes.h or changes.s or changes.v:
            self._kelvin = None
        if changes.any and self._on_change is not None:
            self._on_change(self, changes)

    def _write_rgb(self, r: float, g: float, b: float, a: float, kelvin: Optional[float] = None) -> None:
        h, s, v = rgb_to_hsv((r, g, b))
        if s == 0:
            # Grays have no hue; keep the old one so sliders don't snap to red
            h = self._hsva[0]
        self._write(h, s, v, a, kelvin)

    def set(self, value: ColorValue) -> None:
        """Set the color from a string, a channel dict or another Color."""
        self._write(*parse_color(value))

    def set_channel(self, channel: str, value: float) -> None:
        """Set a single named channel, e.g. ``"red"`` or ``"kelvin"``."""
        if channel not in _CHANNELS:
            raise ValueError(f"Unknown color channel: {channel!r}")
        setattr(self, channel, value)

    def reset(self) -> None:
        """Restore the value the color was created with."""
        self._write(*self._initial)

    def detach(self) -> None:
        """Drop the change callback; the color no longer reports writes."""
        self._on_change = None

    def clone(self) -> Color:
        """Copy of this color without the change callback."""
        copy = Color(index=self.index)
        copy._hsva = self._hsva
        copy._initial = self._initial
        copy._kelvin = self._kelvin
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._hsva == other._hsva

    def __repr__(self) -> str:
        return f"Color({self.hex8_string!r}, index={self.index})"

    # -------------------------------------------------------------------------
    # Composite views
    # -------------------------------------------------------------------------

    @property
    def hsva(self) -> HSVA:
        return self._hsva

    @hsva.setter
    def hsva(self, value: HSVA) -> None:
        self._write(*value)

    @property
    def hsv(self) -> tuple[float, float, float]:
        h, s, v, _ = self._hsva
        return (h, s, v)

    @hsv.setter
    def hsv(self, value: tuple[float, float, float]) -> None:
        self._write(*value, self._hsva[3])

    @property
    def rgb(self) -> tuple[float, float, float]:
        """RGB channels as unrounded floats (0-255)."""
        return hsv_to_rgb(self.hsv)

    @rgb.setter
    def rgb(self, value: tuple[float, float, float]) -> None:
        self._write_rgb(*value, self._hsva[3])

    @property
    def rgb_int(self) -> tuple[int, int, int]:
        """RGB channels rounded to integers (0-255)."""
        r, g, b = self.rgb
        return (round(r), round(g), round(b))

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (*self.rgb, self._hsva[3])

    @rgba.setter
    def rgba(self, value: tuple[float, float, float, float]) -> None:
        self._write_rgb(*value)

    @property
    def hsl(self) -> tuple[float, float, float]:
        return hsv_to_hsl(self.hsv)

    @hsl.setter
    def hsl(self, value: tuple[float, float, float]) -> None:
        self._write(*hsl_to_hsv(value), self._hsva[3])

    @property
    def hsla(self) -> tuple[float, float, float, float]:
        return (*self.hsl, self._hsva[3])

    @hsla.setter
    def hsla(self, value: tuple[float, float, float, float]) -> None:
        h, s, l, a = value
        self._write(*hsl_to_hsv((h, s, l)), a)

    @property
    def kelvin(self) -> float:
        """
        Correlated color temperature in Kelvin.

        Returns the temperature last written through this property while the
        color still holds it; otherwise estimates it from RGB. The estimate
        is ambiguous around 6500-6650K, where red and blue both saturate.
        """
        if self._kelvin is not None:
            return self._kelvin
        return rgb_to_kelvin(self.rgb)

    @kelvin.setter
    def kelvin(self, value: float) -> None:
        self._write_rgb(*kelvin_to_rgb_float(value), self._hsva[3], kelvin=bound_kelvin(value))

    # -------------------------------------------------------------------------
    # Single channels
    # -------------------------------------------------------------------------

    @property
    def red(self) -> float:
        return self.rgb[0]

    @red.setter
    def red(self, value: float) -> None:
        _, g, b = self.rgb
        self.rgb = (value, g, b)

    @property
    def green(self) -> float:
        return self.rgb[1]

    @green.setter
    def green(self, value: float) -> None:
        r, _, b = self.rgb
        self.rgb = (r, value, b)

    @property
    def blue(self) -> float:
        return self.rgb[2]

    @blue.setter
    def blue(self, value: float) -> None:
        r, g, _ = self.rgb
        self.rgb = (r, g, value)

    @property
    def alpha(self) -> float:
        return self._hsva[3]

    @alpha.setter
    def alpha(self, value: float) -> None:
        h, s, v, _ = self._hsva
        self._write(h, s, v, value)

    @property
    def hue(self) -> float:
        return self._hsva[0]

    @hue.setter
    def hue(self, value: float) -> None:
        _, s, v, a = self._hsva
        self._write(value, s, v, a)

    @property
    def saturation(self) -> float:
        """HSV saturation (0-100)."""
        return self._hsva[1]

    @saturation.setter
    def saturation(self, value: float) -> None:
        h, _, v, a = self._hsva
        self._write(h, value, v, a)

    @property
    def value(self) -> float:
        """HSV value (0-100)."""
        return self._hsva[2]

    @value.setter
    def value(self, value: float) -> None:
        h, s, _, a = self._hsva
        self._write(h, s, value, a)

    # -------------------------------------------------------------------------
    # String forms
    # -------------------------------------------------------------------------

    @property
    def hex_string(self) -> str:
        r, g, b = self.rgb_int
        return f"#{r:02x}{g:02x}{b:02x}"

    @property
    def hex8_string(self) -> str:
        return f"{self.hex_string}{round(self.alpha * 255):02x}"

    @property
    def rgb_string(self) -> str:
        r, g, b = self.rgb_int
        return f"rgb({r}, {g}, {b})"

    @property
    def rgba_string(self) -> str:
        r, g, b = self.rgb_int
        return f"rgba({r}, {g}, {b}, {_fmt(self.alpha)})"

    @property
    def hsl_string(self) -> str:
        h, s, l = self.hsl
        return f"hsl({round(h)}, {round(s)}%, {round(l)}%)"

    @property
    def hsla_string(self) -> str:
        h, s, l = self.hsl
        return f"hsla({round(h)}, {round(s)}%, {round(l)}%, {_fmt(self.alpha)})"


_CHANNELS = frozenset({
    "red", "green", "blue", "alpha", "hue", "saturation", "value", "kelvin",
})


def _fmt(value: float) -> str:
    """Format a number without a trailing ``.0``."""
    return f"{value:.3f}".rstrip("0").rstrip(".")


def parse_color(value: Any) -> HSVA:
    """
    Parse a color value to an (h, s, v, a) tuple.

    Accepts:
        - Color instances
        - Hex strings: "#f00", "#f00c", "#ff0000", "#ff0000cc"
        - Functional strings: "rgb(255, 0, 0)", "hsla(0, 100%, 50%, 0.5)",
          "hsv(0, 100%, 100%)"
        - Named colors: "red", "white", ...
        - Dicts with r/g/b, h/s/v or h/s/l keys and an optional "a"

    Raises:
        ValueError: if the value cannot be interpreted as a color.
    """
    if isinstance(value, Color):
        return value.hsva
    if isinstance(value, dict):
        return _parse_dict(value)
    if isinstance(value, str):
        return _parse_string(value)
    raise ValueError(f"Cannot parse color: {value!r}")


def _rgba_to_hsva(r: float, g: float, b: float, a: float) -> HSVA:
    h, s, v = rgb_to_hsv((r, g, b))
    return (h, s, v, a)


def _parse_dict(value: dict) -> HSVA:
    a = float(value.get("a", 1))
    keys = set(value) - {"a"}
    if keys == {"r", "g", "b"}:
        return _rgba_to_hsva(value["r"], value["g"], value["b"], a)
    if keys == {"h", "s", "v"}:
        return (value["h"], value["s"], value["v"], a)
    if keys == {"h", "s", "l"}:
        h, s, v = hsl_to_hsv((value["h"], value["s"], value["l"]))
        return (h, s, v, a)
    raise ValueError(f"Cannot parse color: {value!r}")


def _parse_string(value: str) -> HSVA:
    text = value.strip().lower()

    if text in NAMED_COLORS:
        return _rgba_to_hsva(*NAMED_COLORS[text], 1.0)

    if text.startswith("#"):
        return _parse_hex(text[1:], value)

    match = _FUNCTIONAL_RE.match(text)
    if not match:
        raise ValueError(f"Cannot parse color: {value!r}")

    kind = match.group(1).rstrip("a")
    parts = [p for p in re.split(r"[\s,/]+", match.group(2)) if p]
    if len(parts) not in (3, 4):
        raise ValueError(f"Cannot parse color: {value!r}")
    try:
        nums = [_parse_number(p) for p in parts[:3]]
        a = _parse_number(parts[3], alpha=True) if len(parts) == 4 else 1.0
    except ValueError:
        raise ValueError(f"Cannot parse color: {value!r}") from None

    if kind == "rgb":
        return _rgba_to_hsva(*nums, a)
    if kind == "hsl":
        h, s, v = hsl_to_hsv((nums[0], nums[1], nums[2]))
        return (h, s, v, a)
    return (nums[0], nums[1], nums[2], a)


def _parse_hex(digits: str, original: str) -> HSVA:
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) not in (6, 8):
        raise ValueError(f"Cannot parse color: {original!r}")
    try:
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError:
        raise ValueError(f"Cannot parse color: {original!r}") from None
    a = channels[3] / 255 if len(channels) == 4 else 1.0
    return _rgba_to_hsva(channels[0], channels[1], channels[2], a)


def _parse_number(part: str, alpha: bool = False) -> float:
    """Parse a numeric component; percentages on alpha scale to 0-1."""
    if part.endswith("%"):
        number = float(part[:-1])
        return number / 100 if alpha else number
    return float(part)
