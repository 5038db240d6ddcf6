# crucible_lab/problems/checks.py
# Independent checks used by the tests: an expander audit and a slow exact oracle.
from __future__ import annotations
from collections import deque
from typing import Optional, Set, Tuple

from ..config import RunConstraints
from ..core.errors import UnreachableDestination
from ..core.grid import Grid
from ..core.state import SearchState
from .crucible import CrucibleProblem


def sanity_check_expander(grid: Grid, constraints: RunConstraints, max_states: int = 200_000) -> str:
    """Walks reachable states breadth-first and checks every successor obeys the movement rules."""
    problem = CrucibleProblem(grid, constraints)
    seen: Set[SearchState] = set()
    q = deque(s for s, _ in problem.initial_states())
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        dr, dc = s.direction.delta
        for s2, cost in problem.expand(s):
            r2, c2 = s2.position
            if not grid.in_bounds(s2.position):
                raise AssertionError(f"{s} -> {s2} leaves the grid")
            if cost != grid.cost(r2, c2):
                raise AssertionError(f"{s} -> {s2} charged {cost}, cell costs {grid.cost(r2, c2)}")
            ndr, ndc = s2.direction.delta
            if (dr + ndr, dc + ndc) == (0, 0):
                raise AssertionError(f"{s} -> {s2} reverses")
            if s2.direction == s.direction:
                if s2.run_length != s.run_length + 1 or s2.run_length > constraints.max_run:
                    raise AssertionError(f"{s} -> {s2} breaks the straight-run count")
            elif s.run_length < constraints.min_run or s2.run_length != 1:
                raise AssertionError(f"{s} -> {s2} turns too early")
            if (r2 - s.position[0], c2 - s.position[1]) != (ndr, ndc):
                raise AssertionError(f"{s} -> {s2} is not a single step")
            q.append(s2)
    return f"OK: visited {len(seen)} states; all successors legal."


def exhaustive_min_cost(grid: Grid, constraints: RunConstraints, max_iters: int = 10_000) -> int:
    """
    Exact answer by cost-bounded depth-first enumeration (IDA* with h = 0).

    Every constrained path whose cost fits under the bound is walked; a path never
    repeats a state, since dropping a repeated loop cannot raise a non-negative total.
    Only practical for small grids.
    """
    problem = CrucibleProblem(grid, constraints)
    seeds = list(problem.initial_states())
    on_path: Set[SearchState] = set()

    def search(state: SearchState, cost: int, bound: int) -> Tuple[bool, float]:
        if cost > bound:
            return False, cost
        if problem.is_goal(state):
            return True, cost
        on_path.add(state)
        min_excess = float("inf")
        try:
            for child, step_cost in problem.expand(state):
                if child in on_path:
                    continue
                found, t = search(child, cost + step_cost, bound)
                if found:
                    return True, t
                if t < min_excess:
                    min_excess = t
        finally:
            on_path.discard(state)
        return False, min_excess

    bound: Optional[float] = min((c for _, c in seeds), default=None)
    iters = 0
    while bound is not None and bound != float("inf") and iters < max_iters:
        iters += 1
        next_bound = float("inf")
        for seed, cost in seeds:
            found, t = search(seed, cost, int(bound))
            if found:
                return int(t)
            next_bound = min(next_bound, t)
        bound = next_bound
    raise UnreachableDestination("exhaustive search found no route to the destination")
