# crucible_lab/core/grid.py
# Immutable rectangular matrix of non-negative cell costs, loaded from digit rows.
from __future__ import annotations
from typing import Iterable, Sequence, Tuple
import numpy as np

from .errors import MalformedGrid, OutOfBounds

Position = Tuple[int, int]  # (row, col)

_DIGITS = frozenset("0123456789")


class Grid:
    """
    Read-only cost grid.

    - costs live in a 2-D int64 numpy array with the writeable flag cleared
    - cost(r, c) raises OutOfBounds instead of wrapping on negative indices
    - a 1x1 grid is refused: the origin is also the destination and no move exists
    """

    def __init__(self, costs: Sequence[Sequence[int]] | np.ndarray):
        try:
            raw = np.asarray(costs)
        except (TypeError, ValueError) as e:
            raise MalformedGrid(f"grid rows must be equal-length integer sequences: {e}") from e
        if raw.ndim != 2 or raw.size == 0:
            raise MalformedGrid(f"grid must be a non-empty rectangle, got shape {raw.shape}")
        if raw.dtype.kind not in "iu":
            raise MalformedGrid(f"cell costs must be integers, got dtype {raw.dtype}")
        arr = raw.astype(np.int64)
        if arr.shape == (1, 1):
            raise MalformedGrid("1x1 grid has no move from origin to destination")
        if (arr < 0).any():
            raise MalformedGrid("cell costs must be non-negative")
        arr.flags.writeable = False
        self._costs = arr

    # -------------------- loading --------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Read digit rows until the first blank line (after content) or end of input."""
        rows = []
        for lineno, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                if rows:
                    break
                continue
            bad = [ch for ch in line if ch not in _DIGITS]
            if bad:
                col = line.index(bad[0]) + 1
                raise MalformedGrid(f"line {lineno}, column {col}: non-digit character {bad[0]!r}")
            if rows and len(line) != len(rows[0]):
                raise MalformedGrid(
                    f"line {lineno}: row length {len(line)} differs from first row length {len(rows[0])}"
                )
            rows.append([ord(ch) - 48 for ch in line])
        if not rows:
            raise MalformedGrid("empty grid")
        return cls(rows)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return cls.from_lines(text.splitlines())

    # -------------------- queries --------------------

    @property
    def rows(self) -> int:
        return int(self._costs.shape[0])

    @property
    def cols(self) -> int:
        return int(self._costs.shape[1])

    def dims(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def destination(self) -> Position:
        return self.rows - 1, self.cols - 1

    @property
    def costs(self) -> np.ndarray:
        return self._costs

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cost(self, r: int, c: int) -> int:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise OutOfBounds(f"({r}, {c}) outside {self.rows}x{self.cols} grid")
        return int(self._costs[r, c])

    def min_cost(self) -> int:
        return int(self._costs.min())

    def with_cost(self, r: int, c: int, value: int) -> "Grid":
        """Copy of this grid with one cell changed."""
        if not self.in_bounds((r, c)):
            raise OutOfBounds(f"({r}, {c}) outside {self.rows}x{self.cols} grid")
        arr = self._costs.copy()
        arr[r, c] = value
        return Grid(arr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._costs, other._costs)

    def __hash__(self) -> int:
        return hash((self._costs.shape, self._costs.tobytes()))

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"

    def __str__(self) -> str:
        return "\n".join("".join(str(v) for v in row) for row in self._costs.tolist())
