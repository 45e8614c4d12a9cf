"""Pointer input routing for picker widgets."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional, Protocol, runtime_checkable

from svg_color_picker.input.events import InputEvent, InputType

logger = logging.getLogger(__name__)


class RouterState(Enum):
    IDLE = auto()
    DRAGGING = auto()


@runtime_checkable
class InputTarget(Protocol):
    """What a widget exposes to its InputRouter."""

    @property
    def supports_handle_selection(self) -> bool:
        """Whether pressing on a handle selects it instead of moving it."""
        ...

    def handle_at(self, x: float, y: float) -> Optional[int]:
        """Index of the handle under the pointer, if any."""
        ...

    def select_handle(self, index: int) -> None:
        """Make the color at ``index`` the active one."""
        ...

    def apply_pointer(self, x: float, y: float) -> None:
        """Mutate the active color from a pointer position."""
        ...

    def notify(self, input_type: InputType) -> None:
        """Tell the owner an input phase was handled."""
        ...


class InputRouter:
    """
    Two-state machine turning pointer events into color edits.

    IDLE + START:      select a hit handle (no edit, stay IDLE) when the
                       target supports selection, otherwise edit and start
                       DRAGGING.
    DRAGGING + MOVE:   edit, no hit-testing.
    DRAGGING + END:    back to IDLE without another edit.
    DRAGGING + START:  the END was lost; edit again and keep dragging.

    MOVE or END while IDLE are ignored. Every handled event is followed by
    exactly one ``notify()`` with its phase.
    """

    def __init__(self, target: InputTarget) -> None:
        self.target = target
        self._state = RouterState.IDLE

    @property
    def state(self) -> RouterState:
        return self._state

    @property
    def dragging(self) -> bool:
        return self._state is RouterState.DRAGGING

    def handle(self, event: InputEvent) -> bool:
        """
        Route one event.

        Returns:
            True if the event was consumed, False if it was ignored.
        """
        if event.type is InputType.START:
            self._on_start(event)
        elif event.type is InputType.MOVE:
            if not self.dragging:
                return False
            self.target.apply_pointer(event.x, event.y)
        elif event.type is InputType.END:
            if not self.dragging:
                return False
            self._transition(RouterState.IDLE)
        self.target.notify(event.type)
        return True

    def _on_start(self, event: InputEvent) -> None:
        if not self.dragging and self.target.supports_handle_selection:
            index = self.target.handle_at(event.x, event.y)
            if index is not None:
                logger.debug("Pointer hit handle %d; selecting it", index)
                self.target.select_handle(index)
                return
        self.target.apply_pointer(event.x, event.y)
        self._transition(RouterState.DRAGGING)

    def _transition(self, state: RouterState) -> None:
        if state is not self._state:
            logger.debug("Input router %s -> %s", self._state.name, state.name)
        self._state = state

    def reset(self) -> None:
        """Abandon any drag in progress without notifying."""
        self._transition(RouterState.IDLE)
