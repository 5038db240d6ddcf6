# crucible_lab/core/state.py
# A point in the augmented state space: where the mover is, which way it faces,
# and how many steps it has taken in a row that way.
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .direction import Direction
from .grid import Position


@dataclass(frozen=True)
class SearchState:
    position: Position
    direction: Direction
    run_length: int  # 1..max_run, steps in `direction` ending at `position`

    @property
    def index(self) -> Tuple[int, int, int, int]:
        """Index into the dense best-cost table: (row, col, direction, run_length)."""
        r, c = self.position
        return r, c, self.direction.value, self.run_length

    def __str__(self) -> str:
        r, c = self.position
        return f"<{r},{c} {self.direction.name} x{self.run_length}>"
