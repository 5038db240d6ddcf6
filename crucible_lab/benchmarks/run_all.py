# crucible_lab/benchmarks/run_all.py
# Runs both relaxation strategies over both variants and reports pops/relaxations/time/memory.
from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import numpy as np

from ..algorithms.extract import extract_min_cost
from ..algorithms.relaxation import label_correcting_search
from ..config import BENCH_SEED, BENCH_SIZE, STRATEGIES, VARIANT_A, VARIANT_B
from ..core.errors import CrucibleError
from ..core.grid import Grid
from ..core.metrics import MeasuredRun, SearchResult

logger = logging.getLogger(__name__)


def random_grid(size: int = BENCH_SIZE, seed: int = BENCH_SEED) -> Grid:
    rng = np.random.default_rng(seed)
    return Grid(rng.integers(1, 10, size=(size, size)))


def run_one(grid: Grid, strategy: str, variant: str, trace_memory: bool = True) -> SearchResult:
    constraints = VARIANT_A if variant == "A" else VARIANT_B
    error = None
    with MeasuredRun(trace_memory=trace_memory) as meter:
        try:
            result = label_correcting_search(grid, constraints, strategy)
            cost, _ = extract_min_cost(result)
        except CrucibleError as e:
            error = repr(e)
    if error is not None:
        return SearchResult(strategy, variant, False, None, 0, 0, 0, 0,
                            meter.elapsed, meter.peak_kb, error=error)
    return SearchResult(
        strategy, variant, True, cost,
        result.pops, result.relaxations, result.stale_skips, result.peak_queue,
        meter.elapsed, meter.peak_kb,
    )


def run_all(grid: Grid, trace_memory: bool = True) -> List[SearchResult]:
    rows = []
    for variant in ("A", "B"):
        for strategy in STRATEGIES:
            print(f"→ Running {strategy} on variant {variant} ...")
            r = run_one(grid, strategy, variant, trace_memory)
            print(
                f"  {strategy}/{variant}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"cost={r.cost} pops={r.pops} relaxations={r.relaxations} "
                f"time={r.time_s:.4f}s"
            )
            rows.append(r)
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare FIFO and heap relaxation on one grid.")
    ap.add_argument("--input", default="", help="digit grid file; default is a seeded random grid")
    ap.add_argument("--size", type=int, default=BENCH_SIZE, help="random grid side length")
    ap.add_argument("--seed", type=int, default=BENCH_SEED, help="random grid seed")
    ap.add_argument("--no-trace", action="store_true", help="skip tracemalloc (faster, no memory column)")
    ap.add_argument("--out", default="", help="path to write results JSON")
    ap.add_argument("--plot", default="", help="path to save a comparison bar chart PNG")
    args = ap.parse_args(argv)

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as fh:
                grid = Grid.from_lines(fh)
        else:
            grid = random_grid(args.size, args.seed)
    except OSError as e:
        print(f"{ap.prog}: cannot read {args.input}: {e.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"{ap.prog}: MalformedGrid: input is not UTF-8 text ({e.reason} at byte {e.start})",
              file=sys.stderr)
        return 1
    except CrucibleError as e:
        print(f"{ap.prog}: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    logger.info("benchmarking on %r", grid)

    rows = run_all(grid, trace_memory=not args.no_trace)
    out = {"grid": {"rows": grid.rows, "cols": grid.cols},
           "results": [r.to_dict() for r in rows], "ts": time.time()}
    print(json.dumps(out, indent=2))

    if args.out:
        Path(args.out).write_text(json.dumps(out, indent=2))
    if args.plot:
        from ..plots.plotting import bar_compare
        bar_compare(rows).savefig(args.plot, dpi=120)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
