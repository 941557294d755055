"""
Run the river-crossing search with both frontier disciplines and print the trips.

Example:
    river-crossing --cannibals 3 --missionaries 3 --capacity 2

Defaults come from RIVER_CANNIBALS / RIVER_MISSIONARIES / RIVER_BOAT_CAPACITY
(10 / 20 / 3 when unset).
"""
from __future__ import annotations

import argparse
import os
from typing import List, Optional

from .display import print_result
from .open_policy.disciplines import Discipline
from .search import solve

DEFAULT_CANNIBALS = 10
DEFAULT_MISSIONARIES = 20
DEFAULT_BOAT_CAPACITY = 3

DISCIPLINE_LABELS = {
    Discipline.STACK: "StackOpen",
    Discipline.PRIORITY: "PriorityOpen",
}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    return int(raw) if raw.strip() else default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve the cannibals and missionaries river crossing.")
    parser.add_argument("--cannibals", type=int, default=_env_int("RIVER_CANNIBALS", DEFAULT_CANNIBALS),
                        help="Number of cannibals on the left bank")
    parser.add_argument("--missionaries", type=int, default=_env_int("RIVER_MISSIONARIES", DEFAULT_MISSIONARIES),
                        help="Number of missionaries on the left bank")
    parser.add_argument("--capacity", type=int, default=_env_int("RIVER_BOAT_CAPACITY", DEFAULT_BOAT_CAPACITY),
                        help="Boat capacity")
    parser.add_argument("--discipline", choices=["stack", "priority", "both"], default="both",
                        help="Frontier discipline to run")
    parser.add_argument("--max-iterations", type=int, default=None, help="Stop after expanding this many states")
    parser.add_argument("--verbose", action="store_true", help="Print search progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.discipline == "both":
        disciplines = [Discipline.STACK, Discipline.PRIORITY]
    else:
        disciplines = [Discipline(args.discipline)]

    for discipline in disciplines:
        history = solve(
            args.cannibals,
            args.missionaries,
            args.capacity,
            discipline=discipline,
            max_iterations=args.max_iterations,
            verbose=args.verbose,
        )
        print_result(history, DISCIPLINE_LABELS[discipline])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
