# crucible_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional
import time, tracemalloc


@dataclass
class SearchResult:
    """One benchmark row: how a strategy fared on one grid/variant."""
    strategy: str
    variant: str
    success: bool
    cost: Optional[int]
    pops: int
    relaxations: int
    stale_skips: int
    peak_queue: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class MeasuredRun:
    """Wall time and tracemalloc peak of a with-block, read after it exits."""
    def __init__(self, trace_memory: bool = True) -> None:
        self.trace_memory = trace_memory
        self.elapsed = 0.0
        self.peak_kb = 0

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            tracemalloc.start()
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._t0
        if self.trace_memory:
            self.peak_kb = tracemalloc.get_traced_memory()[1] // 1024
            tracemalloc.stop()
        return False
