"""ColorPicker - owner of the color set, the active index and picker events.

Widgets never share colors directly. They all read and write the colors a
ColorPicker owns, and the picker notifies subscribers when anything changes:

    color:init       (color)               colors were (re)created
    color:change     (color, changes)      any color's value changed
    input:change     (color, changes)      a change caused by pointer input
    color:setActive  (color)               the active color switched
    color:remove     (color)               a color was removed
    input:start      (color)               pointer pressed on a widget
    input:move       (color)               pointer dragged
    input:end        (color)               pointer released
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Sequence

from svg_color_picker.core.color import Color, ColorChanges, ColorValue
from svg_color_picker.geometry.params import WidgetGeometryParams
from svg_color_picker.input.events import InputType

logger = logging.getLogger(__name__)

EventCallback = Callable[..., None]

EVENTS = frozenset({
    "color:init",
    "color:change",
    "input:change",
    "color:setActive",
    "color:remove",
    "input:start",
    "input:move",
    "input:end",
})


@dataclass
class PickerOptions:
    """
    Picker configuration: initial colors plus shared widget geometry.

    ``colors`` wins over ``color`` when both are given.
    """
    color: str = "#ffffff"
    colors: list[str] = field(default_factory=list)
    active_index: int = 0
    geometry: WidgetGeometryParams = field(default_factory=WidgetGeometryParams)

    @property
    def initial_colors(self) -> list[str]:
        return list(self.colors) if self.colors else [self.color]

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "colors": list(self.colors),
            "active_index": self.active_index,
            "geometry": self.geometry.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PickerOptions:
        return cls(
            color=data.get("color", "#ffffff"),
            colors=list(data.get("colors", [])),
            active_index=data.get("active_index", 0),
            geometry=WidgetGeometryParams.from_dict(data.get("geometry", {})),
        )


class ColorPicker:
    """
    Ordered set of colors with one active color.

    Example:
        >>> picker = ColorPicker(["#f00", "#0f0"])
        >>> picker.on("color:change", lambda color, changes: print(color.hex_string))
        >>> picker.color.hue = 120
        #00ff00
    """

    def __init__(
        self,
        colors: Sequence[ColorValue] = ("#ffffff",),
        active_index: int = 0,
    ) -> None:
        self._callbacks: dict[str, list[EventCallback]] = {}
        self.colors: list[Color] = []
        self._active_index = 0
        self.input_active = False
        self.set_colors(colors, active_index)

    @classmethod
    def from_options(cls, options: PickerOptions) -> ColorPicker:
        return cls(options.initial_colors, options.active_index)

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def on(self, event: str, callback: EventCallback) -> None:
        """Subscribe to a picker event."""
        if event not in EVENTS:
            raise ValueError(f"Unknown picker event: {event!r}")
        self._callbacks.setdefault(event, []).append(callback)

    def off(self, event: str, callback: EventCallback) -> None:
        """Unsubscribe; unknown callbacks are ignored."""
        callbacks = self._callbacks.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, *args: Any) -> None:
        logger.debug("Picker event %s", event)
        for callback in list(self._callbacks.get(event, [])):
            callback(*args)

    def _on_color_change(self, color: Color, changes: ColorChanges) -> None:
        if self.input_active:
            self.emit("input:change", color, changes)
        self.emit("color:change", color, changes)

    @contextmanager
    def user_input(self) -> Iterator[None]:
        """Mark color writes inside the block as caused by pointer input."""
        self.input_active = True
        try:
            yield
        finally:
            self.input_active = False

    def notify_input(self, input_type: InputType) -> None:
        """Forward an input phase from a widget as an ``input:*`` event."""
        self.emit(input_type.event_name, self.color)

    # -------------------------------------------------------------------------
    # Color set
    # -------------------------------------------------------------------------

    @property
    def color(self) -> Color:
        """The active color."""
        return self.colors[self._active_index]

    @property
    def active_index(self) -> int:
        return self._active_index

    def _make_color(self, value: ColorValue, index: int) -> Color:
        return Color(value, index=index, on_change=self._on_color_change)

    def set_colors(self, values: Sequence[ColorValue], active_index: int = 0) -> None:
        """
        Replace the whole color set.

        Raises:
            ValueError: if no colors are given or one cannot be parsed.
            IndexError: if ``active_index`` is out of range.
        """
        if not values:
            raise ValueError("A picker needs at least one color")
        colors = [self._make_color(value, i) for i, value in enumerate(values)]
        if not 0 <= active_index < len(colors):
            raise IndexError(f"Active index {active_index} out of range (0-{len(colors) - 1})")
        for old in self.colors:
            old.detach()
        self.colors = colors
        self._active_index = active_index
        logger.debug("Picker colors replaced (%d colors, active %d)", len(colors), active_index)
        self.emit("color:init", self.color)

    def add_color(self, value: ColorValue, index: Optional[int] = None) -> Color:
        """Insert a color (at the end by default) and reindex the set."""
        position = len(self.colors) if index is None else max(0, min(index, len(self.colors)))
        color = self._make_color(value, position)
        active = self.color
        self.colors.insert(position, color)
        self._reindex()
        self._active_index = active.index
        return color

    def remove_color(self, index: int) -> None:
        """
        Remove a color. Removing the active color makes the first one active.
        The removed color stops reporting changes to this picker.

        Raises:
            ValueError: when removing the last remaining color.
            IndexError: if ``index`` is out of range.
        """
        if not 0 <= index < len(self.colors):
            raise IndexError(f"Color index {index} out of range (0-{len(self.colors) - 1})")
        if len(self.colors) == 1:
            raise ValueError("Cannot remove the only color")
        active = self.color
        removed = self.colors.pop(index)
        removed.detach()
        self._reindex()
        self._active_index = 0 if removed is active else active.index
        self.emit("color:remove", removed)

    def set_active_color(self, index: int) -> None:
        """
        Switch the active color.

        Raises:
            IndexError: if ``index`` is out of range.
        """
        if not 0 <= index < len(self.colors):
            raise IndexError(f"Color index {index} out of range (0-{len(self.colors) - 1})")
        if index == self._active_index:
            return
        self._active_index = index
        self.emit("color:setActive", self.color)

    def _reindex(self) -> None:
        for i, color in enumerate(self.colors):
            color.index = i

    def reset(self) -> None:
        """Reset every color to its initial value."""
        for color in self.colors:
            color.reset()
