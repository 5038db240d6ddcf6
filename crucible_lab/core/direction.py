# crucible_lab/core/direction.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

# Clockwise order; the value doubles as the table index.
_DELTAS = {
    0: (-1, 0),
    1: (0, 1),
    2: (1, 0),
    3: (0, -1),
}


class Direction(Enum):
    """Cardinal heading. Rotations only; there is no reverse()."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def turn_right(self) -> "Direction":
        return Direction((self.value + 1) % 4)

    def turn_left(self) -> "Direction":
        return Direction((self.value + 3) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """(d_row, d_col) unit offset of one step."""
        return _DELTAS[self.value]

    @property
    def glyph(self) -> str:
        return "^>v<"[self.value]
