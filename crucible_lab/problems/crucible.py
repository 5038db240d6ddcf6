# crucible_lab/problems/crucible.py
from __future__ import annotations
from typing import Iterator, Tuple

from ..config import RunConstraints
from ..core.direction import Direction
from ..core.errors import OutOfBounds
from ..core.grid import Grid, Position
from ..core.state import SearchState

Successor = Tuple[SearchState, int]  # (next_state, incremental_cost)

_ORIGIN: Position = (0, 0)


def _step(grid: Grid, pos: Position, direction: Direction) -> Position | None:
    dr, dc = direction.delta
    nxt = (pos[0] + dr, pos[1] + dc)
    return nxt if grid.in_bounds(nxt) else None


def _enter(grid: Grid, pos: Position, direction: Direction, run_length: int) -> Successor:
    return SearchState(pos, direction, run_length), grid.cost(*pos)


def seed_states(grid: Grid) -> Iterator[Successor]:
    """The first moves out of the origin: right into (0,1) and down into (1,0), when in bounds."""
    for direction in (Direction.RIGHT, Direction.DOWN):
        nxt = _step(grid, _ORIGIN, direction)
        if nxt is not None:
            yield _enter(grid, nxt, direction, 1)


def successors(state: SearchState, grid: Grid, min_run: int, max_run: int) -> Iterator[Successor]:
    """
    Up to three (next_state, incremental_cost) pairs:
    - straight on, while run_length < max_run
    - a quarter turn either way, once run_length >= min_run
    Reversal is never produced; edges and run limits simply yield fewer successors.
    """
    pos, heading, run = state.position, state.direction, state.run_length
    if not grid.in_bounds(pos):
        raise OutOfBounds(f"state {state} lies outside the {grid.rows}x{grid.cols} grid")

    if run < max_run:
        nxt = _step(grid, pos, heading)
        if nxt is not None:
            yield _enter(grid, nxt, heading, run + 1)

    if run >= min_run:
        for turned in (heading.turn_left(), heading.turn_right()):
            nxt = _step(grid, pos, turned)
            if nxt is not None:
                yield _enter(grid, nxt, turned, 1)


class CrucibleProblem:
    """
    Grid plus run constraints, packaged the way the search algorithms consume it.

    - initial_states(): seed successors out of the origin
    - expand(s): successors of s under this problem's constraints
    - is_goal(s): destination reached with the minimum run satisfied
    """

    def __init__(self, grid: Grid, constraints: RunConstraints):
        self.grid = grid
        self.constraints = constraints

    def initial_states(self) -> Iterator[Successor]:
        return seed_states(self.grid)

    def expand(self, state: SearchState) -> Iterator[Successor]:
        return successors(state, self.grid, self.constraints.min_run, self.constraints.max_run)

    def is_goal(self, state: SearchState) -> bool:
        return state.position == self.grid.destination and state.run_length >= self.constraints.min_run

    @property
    def table_shape(self) -> Tuple[int, int, int, int]:
        # run_length slot 0 is never used; keeps SearchState.index direct.
        return self.grid.rows, self.grid.cols, len(Direction), self.constraints.max_run + 1
