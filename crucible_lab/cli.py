# crucible_lab/cli.py
# Reads a digit grid from stdin (or --input), prints the minimal constrained route cost.
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .algorithms.extract import extract_min_cost
from .algorithms.relaxation import label_correcting_search
from .config import DEFAULT_STRATEGY, LOG_LEVEL, STRATEGIES, RunConstraints, resolve_variant
from .core.errors import CrucibleError, InvalidConstraints
from .core.grid import Grid
from .core.utils import reconstruct_path, render_path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="crucible-lab",
        description="Minimum-cost grid route where the mover must go straight between "
                    "min_run and max_run steps before turning and may never reverse.",
    )
    ap.add_argument("part", nargs="?", default=None,
                    help="variant: 1/A (min_run=1, max_run=3) or 2/B (min_run=4, max_run=10)")
    ap.add_argument("--min-run", type=int, default=None, help="override minimum straight run")
    ap.add_argument("--max-run", type=int, default=None, help="override maximum straight run")
    ap.add_argument("--strategy", choices=STRATEGIES, default=DEFAULT_STRATEGY,
                    help="work queue order (default: %(default)s)")
    ap.add_argument("--input", default="", help="grid file (default: stdin)")
    ap.add_argument("--show-path", action="store_true", help="draw the chosen route on stderr")
    ap.add_argument("--plot", default="", help="path to save a cost heatmap PNG with the route")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    return ap


def _constraints(args: argparse.Namespace) -> RunConstraints:
    if args.part is not None:
        base = resolve_variant(args.part)
    elif args.min_run is not None and args.max_run is not None:
        return RunConstraints(args.min_run, args.max_run)
    else:
        raise InvalidConstraints("give a part (1|2|A|B) or both --min-run and --max-run")
    return RunConstraints(
        args.min_run if args.min_run is not None else base.min_run,
        args.max_run if args.max_run is not None else base.max_run,
    )


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)
    if args.strategy not in STRATEGIES:
        # only reachable through a bad CRUCIBLE_STRATEGY default
        ap.error(f"unknown strategy {args.strategy!r}; expected one of {', '.join(STRATEGIES)}")

    try:
        constraints = _constraints(args)
    except InvalidConstraints as e:
        ap.error(str(e))

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as fh:
                grid = Grid.from_lines(fh)
        else:
            grid = Grid.from_lines(sys.stdin)
        logger.info("loaded %dx%d grid", grid.rows, grid.cols)

        result = label_correcting_search(grid, constraints, args.strategy)
        cost, end = extract_min_cost(result)
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

    print(cost)

    if args.show_path or args.plot:
        path, _ = reconstruct_path(result.parents, end, grid)
        if args.show_path:
            print(render_path(grid, path), file=sys.stderr)
        if args.plot:
            from .plots.plotting import cost_heatmap
            cost_heatmap(grid, path, title=f"cost {cost} (min_run={constraints.min_run}, "
                                           f"max_run={constraints.max_run})").savefig(args.plot, dpi=120)
            logger.info("saved heatmap to %s", args.plot)
    return 0
