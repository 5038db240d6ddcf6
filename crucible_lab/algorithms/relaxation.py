# crucible_lab/algorithms/relaxation.py
# Label-correcting shortest path over (position, direction, run_length) states.
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from ..config import DEFAULT_STRATEGY, RunConstraints
from ..core.frontiers import make_frontier
from ..core.grid import Grid
from ..core.state import SearchState
from ..problems.crucible import CrucibleProblem

logger = logging.getLogger(__name__)

UNREACHED = np.iinfo(np.int64).max


@dataclass
class RelaxationResult:
    """Best-cost table plus the bookkeeping of the run that produced it."""
    problem: CrucibleProblem
    strategy: str
    table: np.ndarray                       # [row, col, direction, run_length] -> cost
    parents: Dict[SearchState, Optional[SearchState]] = field(default_factory=dict)
    pops: int = 0
    relaxations: int = 0
    stale_skips: int = 0
    peak_queue: int = 0

    def best(self, state: SearchState) -> Optional[int]:
        v = int(self.table[state.index])
        return None if v == UNREACHED else v

    @property
    def reached(self) -> int:
        return int(np.count_nonzero(self.table != UNREACHED))


def label_correcting_search(
    grid: Grid,
    constraints: RunConstraints,
    strategy: Optional[str] = None,
) -> RelaxationResult:
    """
    Relax every reachable state until no cost improves.

    strategy="fifo" (default) is SPFA-style: states may be re-relaxed when a cheaper
    route shows up later. strategy="heap" pops cheapest-first, so each state settles
    on its first non-stale pop. Both end with the same table.

    Entries whose carried cost is above the table value were superseded after being
    queued; they are skipped rather than expanded.
    """
    strategy = strategy or DEFAULT_STRATEGY
    problem = CrucibleProblem(grid, constraints)
    frontier = make_frontier(strategy)
    table = np.full(problem.table_shape, UNREACHED, dtype=np.int64)
    result = RelaxationResult(problem=problem, strategy=strategy, table=table)
    parents = result.parents

    for state, cost in problem.initial_states():
        table[state.index] = cost
        parents[state] = None
        frontier.push((state, cost))
        result.relaxations += 1

    while frontier:
        state, cost = frontier.pop()
        result.pops += 1
        if cost > table[state.index]:
            result.stale_skips += 1
            continue

        for nxt, step_cost in problem.expand(state):
            new_cost = cost + step_cost
            idx = nxt.index
            if new_cost < table[idx]:
                table[idx] = new_cost
                parents[nxt] = state
                frontier.push((nxt, new_cost))
                result.relaxations += 1

    result.peak_queue = frontier.peak
    table.flags.writeable = False
    logger.info(
        "%s relaxation on %dx%d grid (min_run=%d, max_run=%d): %d pops, %d relaxations, "
        "%d stale, peak queue %d, %d states reached",
        strategy, grid.rows, grid.cols, constraints.min_run, constraints.max_run,
        result.pops, result.relaxations, result.stale_skips, result.peak_queue, result.reached,
    )
    return result
