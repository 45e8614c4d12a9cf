"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from svg_color_picker.geometry.hit_test import HandlePosition
from svg_color_picker.geometry.params import WidgetGeometryParams
from svg_color_picker.input.events import InputEvent, InputType
from svg_color_picker.input.router import InputRouter

if TYPE_CHECKING:
    from svg_color_picker.picker import ColorPicker


@dataclass(frozen=True)
class HandleView:
    """A handle as the renderer should draw it."""
    position: HandlePosition
    radius: float
    fill: Optional[str] = None
    active: bool = False


@runtime_checkable
class Widget(Protocol):
    """Protocol for picker widgets."""

    def frame(self) -> Any:
        """Render data for the current color state."""
        ...

    def handle_input(self, event: InputEvent) -> bool:
        """Handle a pointer event. Returns True if consumed."""
        ...


class BaseWidget(ABC):
    """
    Common widget plumbing: a picker, geometry params and an input router.

    Subclasses supply ``apply_pointer`` (pointer -> color edit) and
    ``frame`` (color state -> render data). Frames are rebuilt on every call
    from the picker's current colors; nothing positional is cached.
    """

    def __init__(self, picker: ColorPicker, params: WidgetGeometryParams) -> None:
        self.picker = picker
        self.params = params
        self.router = InputRouter(self)
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    # InputTarget
    @property
    def supports_handle_selection(self) -> bool:
        return False

    def handle_at(self, x: float, y: float) -> Optional[int]:
        return None

    def select_handle(self, index: int) -> None:
        self.picker.set_active_color(index)

    @abstractmethod
    def apply_pointer(self, x: float, y: float) -> None:
        """Subclasses must implement the pointer -> color edit."""
        pass

    def notify(self, input_type: InputType) -> None:
        self.picker.notify_input(input_type)

    @abstractmethod
    def frame(self) -> Any:
        """Subclasses must implement render data."""
        pass

    def handle_input(self, event: InputEvent) -> bool:
        """Route a pointer event; hidden widgets ignore input."""
        if not self._visible:
            return False
        return self.router.handle(event)
