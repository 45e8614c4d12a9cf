"""Handle positions and pointer hit-testing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from svg_color_picker.geometry.params import WidgetGeometryParams


@dataclass(frozen=True)
class HandlePosition:
    """Screen position of the handle for the color at ``index``."""
    x: float
    y: float
    index: int = 0

    def distance_to(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)


def hit_test(
    params: WidgetGeometryParams,
    x: float,
    y: float,
    handle_positions: Sequence[HandlePosition],
) -> Optional[int]:
    """
    Find the handle under the pointer.

    Handles are circles of ``params.handle_radius``. They are checked in
    index order and the first hit wins, so when handles overlap the one
    with the lowest index is selected.

    Returns:
        The hit handle's color index, or None if the pointer misses them all.
    """
    for position in sorted(handle_positions, key=lambda p: p.index):
        if position.distance_to(x, y) < params.handle_radius:
            return position.index
    return None
