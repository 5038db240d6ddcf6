# crucible_lab/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict

from .core.errors import InvalidConstraints

# ---- Tunables (overridable via environment variables) -----------------------
DEFAULT_STRATEGY = os.getenv("CRUCIBLE_STRATEGY", "fifo")   # "fifo" | "heap"
LOG_LEVEL        = os.getenv("CRUCIBLE_LOG_LEVEL", "WARNING")
BENCH_SIZE       = int(os.getenv("BENCH_SIZE", "40"))       # random benchmark grid side
BENCH_SEED       = int(os.getenv("BENCH_SEED", "17"))

STRATEGIES = ("fifo", "heap")


@dataclass(frozen=True)
class RunConstraints:
    """Straight-run bounds: turn only after min_run steps, never exceed max_run."""
    min_run: int
    max_run: int

    def __post_init__(self) -> None:
        if self.min_run < 1:
            raise InvalidConstraints(f"min_run must be >= 1, got {self.min_run}")
        if self.max_run < self.min_run:
            raise InvalidConstraints(
                f"max_run ({self.max_run}) must be >= min_run ({self.min_run})"
            )


VARIANT_A = RunConstraints(min_run=1, max_run=3)
VARIANT_B = RunConstraints(min_run=4, max_run=10)

# Part numbers follow the puzzle's two-part convention.
VARIANTS: Dict[str, RunConstraints] = {
    "1": VARIANT_A,
    "A": VARIANT_A,
    "2": VARIANT_B,
    "B": VARIANT_B,
}


def resolve_variant(name: str) -> RunConstraints:
    try:
        return VARIANTS[name.upper()]
    except KeyError:
        raise InvalidConstraints(
            f"unknown variant {name!r}; expected one of {', '.join(VARIANTS)}"
        ) from None
