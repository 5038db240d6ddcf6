# crucible_lab/algorithms/extract.py
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

import numpy as np

from ..config import RunConstraints
from ..core.direction import Direction
from ..core.errors import UnreachableDestination
from ..core.grid import Grid
from ..core.state import SearchState
from ..core.utils import reconstruct_path
from .relaxation import UNREACHED, RelaxationResult, label_correcting_search

logger = logging.getLogger(__name__)


def extract_min_cost(result: RelaxationResult) -> Tuple[int, SearchState]:
    """
    Cheapest destination state whose run_length >= min_run.
    A route may only stop once its final straight segment is long enough.
    """
    grid = result.problem.grid
    min_run = result.problem.constraints.min_run
    r, c = grid.destination
    block = result.table[r, c, :, min_run:]
    if block.size == 0 or bool((block == UNREACHED).all()):
        raise UnreachableDestination(
            f"no route reaches ({r}, {c}) with a final run of at least {min_run}"
        )
    d, k = np.unravel_index(int(np.argmin(block)), block.shape)
    state = SearchState((r, c), Direction(int(d)), int(k) + min_run)
    cost = int(block[d, k])
    logger.debug("destination best %d via %s", cost, state)
    return cost, state


def min_total_cost(grid: Grid, constraints: RunConstraints, strategy: Optional[str] = None) -> int:
    """Minimal total cost from top-left to bottom-right, origin cell excluded."""
    cost, _ = extract_min_cost(label_correcting_search(grid, constraints, strategy))
    return cost


def cheapest_path(
    grid: Grid, constraints: RunConstraints, strategy: Optional[str] = None
) -> Tuple[int, List[SearchState]]:
    result = label_correcting_search(grid, constraints, strategy)
    cost, end = extract_min_cost(result)
    path, path_cost = reconstruct_path(result.parents, end, grid)
    if path_cost != cost:
        raise RuntimeError(f"path cost {path_cost} disagrees with table cost {cost}")
    return cost, path
