"""Minimum-cost grid routing under straight-run constraints."""
from __future__ import annotations

from .algorithms.extract import cheapest_path, extract_min_cost, min_total_cost
from .algorithms.relaxation import RelaxationResult, label_correcting_search
from .config import VARIANT_A, VARIANT_B, RunConstraints
from .core.direction import Direction
from .core.errors import (
    CrucibleError,
    InvalidConstraints,
    MalformedGrid,
    OutOfBounds,
    UnreachableDestination,
)
from .core.grid import Grid
from .core.state import SearchState
from .problems.crucible import CrucibleProblem, seed_states, successors

__version__ = "0.1.0"

__all__ = [
    "CrucibleError", "CrucibleProblem", "Direction", "Grid", "InvalidConstraints",
    "MalformedGrid", "OutOfBounds", "RelaxationResult", "RunConstraints", "SearchState",
    "UnreachableDestination", "VARIANT_A", "VARIANT_B", "cheapest_path", "extract_min_cost",
    "label_correcting_search", "min_total_cost", "seed_states", "successors",
]
