# crucible_lab/core/utils.py
# Rebuilds the winning route from the predecessor links the relaxation engine records.
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from .grid import Grid
from .state import SearchState


def reconstruct_path(
    parents: Dict[SearchState, Optional[SearchState]], end: SearchState, grid: Grid
) -> Tuple[List[SearchState], int]:
    """Return (states from the first move to `end`, summed entry cost of those states)."""
    if end not in parents:
        raise KeyError(f"{end} was never reached")
    path: List[SearchState] = []
    cur: Optional[SearchState] = end
    while cur is not None:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    cost = sum(grid.cost(*s.position) for s in path)
    return path, cost


def render_path(grid: Grid, path: List[SearchState]) -> str:
    """Grid rows with every visited cell replaced by the arrow of the step that entered it."""
    rows = [[str(v) for v in row] for row in grid.costs.tolist()]
    for s in path:
        r, c = s.position
        rows[r][c] = s.direction.glyph
    return "\n".join("".join(row) for row in rows)
