"""Tests for the input router state machine."""

from typing import Optional

import pytest

from svg_color_picker.input.events import InputEvent, InputType
from svg_color_picker.input.router import InputRouter, InputTarget, RouterState


class RecordingTarget:
    """InputTarget that records calls; one handle sits at (10, 10)."""

    def __init__(self, selection: bool = True) -> None:
        self.selection = selection
        self.calls: list[tuple] = []

    @property
    def supports_handle_selection(self) -> bool:
        return self.selection

    def handle_at(self, x: float, y: float) -> Optional[int]:
        self.calls.append(("hit", x, y))
        return 1 if (x, y) == (10, 10) else None

    def select_handle(self, index: int) -> None:
        self.calls.append(("select", index))

    def apply_pointer(self, x: float, y: float) -> None:
        self.calls.append(("apply", x, y))

    def notify(self, input_type: InputType) -> None:
        self.calls.append(("notify", input_type))


@pytest.fixture
def target() -> RecordingTarget:
    return RecordingTarget()


@pytest.fixture
def router(target: RecordingTarget) -> InputRouter:
    return InputRouter(target)


class TestInputRouter:

    def test_target_satisfies_protocol(self, target: RecordingTarget) -> None:
        assert isinstance(target, InputTarget)

    def test_starts_idle(self, router: InputRouter) -> None:
        assert router.state is RouterState.IDLE

    def test_start_off_handle_mutates_and_drags(self, router: InputRouter, target: RecordingTarget) -> None:
        assert router.handle(InputEvent.start(50, 60)) is True
        assert router.state is RouterState.DRAGGING
        assert target.calls == [
            ("hit", 50, 60),
            ("apply", 50, 60),
            ("notify", InputType.START),
        ]

    def test_start_on_handle_selects_without_mutation(self, router: InputRouter, target: RecordingTarget) -> None:
        assert router.handle(InputEvent.start(10, 10)) is True
        assert router.state is RouterState.IDLE
        assert target.calls == [
            ("hit", 10, 10),
            ("select", 1),
            ("notify", InputType.START),
        ]

    def test_no_hit_testing_without_selection_support(self) -> None:
        target = RecordingTarget(selection=False)
        router = InputRouter(target)
        router.handle(InputEvent.start(10, 10))
        assert ("hit", 10, 10) not in target.calls
        assert ("apply", 10, 10) in target.calls

    def test_move_while_dragging_mutates_without_hit_test(
        self, router: InputRouter, target: RecordingTarget
    ) -> None:
        router.handle(InputEvent.start(50, 60))
        target.calls.clear()
        assert router.handle(InputEvent.move(10, 10)) is True
        assert target.calls == [("apply", 10, 10), ("notify", InputType.MOVE)]
        assert router.dragging

    def test_end_returns_to_idle_without_mutation(self, router: InputRouter, target: RecordingTarget) -> None:
        router.handle(InputEvent.start(50, 60))
        target.calls.clear()
        assert router.handle(InputEvent.end(70, 80)) is True
        assert target.calls == [("notify", InputType.END)]
        assert router.state is RouterState.IDLE

    def test_idle_move_and_end_are_ignored(self, router: InputRouter, target: RecordingTarget) -> None:
        assert router.handle(InputEvent.move(1, 2)) is False
        assert router.handle(InputEvent.end(1, 2)) is False
        assert target.calls == []

    def test_move_after_handle_selection_is_ignored(self, router: InputRouter, target: RecordingTarget) -> None:
        router.handle(InputEvent.start(10, 10))
        target.calls.clear()
        assert router.handle(InputEvent.move(20, 20)) is False
        assert target.calls == []

    def test_start_while_dragging_restarts_drag(self, router: InputRouter, target: RecordingTarget) -> None:
        router.handle(InputEvent.start(50, 60))
        target.calls.clear()
        router.handle(InputEvent.start(10, 10))
        assert target.calls == [("apply", 10, 10), ("notify", InputType.START)]
        assert router.dragging

    def test_full_drag_sequence(self, router: InputRouter, target: RecordingTarget) -> None:
        for event in (
            InputEvent.start(1, 1),
            InputEvent.move(2, 2),
            InputEvent.move(3, 3),
            InputEvent.end(3, 3),
        ):
            router.handle(event)
        notified = [call[1] for call in target.calls if call[0] == "notify"]
        applied = [call[1:] for call in target.calls if call[0] == "apply"]
        assert notified == [InputType.START, InputType.MOVE, InputType.MOVE, InputType.END]
        assert applied == [(1, 1), (2, 2), (3, 3)]

    def test_reset_abandons_drag(self, router: InputRouter) -> None:
        router.handle(InputEvent.start(50, 60))
        router.reset()
        assert router.state is RouterState.IDLE


class TestInputType:

    def test_event_names(self) -> None:
        assert InputType.START.event_name == "input:start"
        assert InputType.MOVE.event_name == "input:move"
        assert InputType.END.event_name == "input:end"
