"""Pointer input events in widget-local coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InputType(Enum):
    """Phase of a pointer interaction."""
    START = "start"  # pointer pressed
    MOVE = "move"    # pointer dragged while pressed
    END = "end"      # pointer released

    @property
    def event_name(self) -> str:
        """Picker event fired for this phase, e.g. ``input:start``."""
        return f"input:{self.value}"


@dataclass(frozen=True)
class InputEvent:
    """A pointer event already translated into the widget's local space."""
    type: InputType
    x: float
    y: float

    @classmethod
    def start(cls, x: float, y: float) -> InputEvent:
        return cls(InputType.START, x, y)

    @classmethod
    def move(cls, x: float, y: float) -> InputEvent:
        return cls(InputType.MOVE, x, y)

    @classmethod
    def end(cls, x: float, y: float) -> InputEvent:
        return cls(InputType.END, x, y)
