"""
Batch runner comparing the two frontier disciplines.

- Varies population (cannibals == missionaries / 2 .. missionaries) and boat capacity
- Runs stack (DFS) and priority (best-first) search on every puzzle
- Checks that both disciplines agree on solvability and replays every plan
- Saves one plot per boat capacity (path length vs missionaries) to the output directory
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from crossing.open_policy.disciplines import Discipline, make_open_policy
from crossing.replay import is_valid_plan
from crossing.search import RiverCrossingSearch
from crossing.state import Puzzle


# Configuration
MISSIONARY_COUNTS = list(range(1, 31))
CAPACITIES = [2, 3, 4]
DISCIPLINES = [Discipline.STACK, Discipline.PRIORITY]
OUTPUT_DIR = Path(os.environ.get("RIVER_BENCH_DIR", "bench_plots"))


def run_one(puzzle: Puzzle, discipline: Discipline) -> Dict:
    search = RiverCrossingSearch(puzzle=puzzle, open_policy=make_open_policy(discipline))
    moves = search.run()
    stats = search.get_statistics()
    if moves is not None and not is_valid_plan(puzzle, moves):
        raise AssertionError(f"{discipline.value} returned an invalid plan for {puzzle}")
    return {
        "solved": moves is not None,
        "path_length": len(moves) if moves is not None else None,
        "explored": stats["explored"],
        "runtime": stats["runtime_seconds"],
    }


def main() -> int:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    disagreements: List[Tuple[Puzzle, Dict[str, bool]]] = []

    for capacity in CAPACITIES:
        print(f"\n=== Boat capacity: {capacity} ===")
        lengths = {d: np.full(len(MISSIONARY_COUNTS), np.nan) for d in DISCIPLINES}
        explored = {d: np.zeros(len(MISSIONARY_COUNTS), dtype=int) for d in DISCIPLINES}

        for idx, missionaries in enumerate(MISSIONARY_COUNTS):
            puzzle = Puzzle(total_cannibals=(missionaries + 1) // 2, total_missionaries=missionaries,
                            boat_capacity=capacity)
            results = {d: run_one(puzzle, d) for d in DISCIPLINES}
            for d, res in results.items():
                if res["path_length"] is not None:
                    lengths[d][idx] = res["path_length"]
                explored[d][idx] = res["explored"]

            solved = {d.value: res["solved"] for d, res in results.items()}
            if len(set(solved.values())) != 1:
                disagreements.append((puzzle, solved))
            print(
                f"c={puzzle.total_cannibals} m={missionaries} -> "
                + ", ".join(
                    f"{d.value}: len={res['path_length']} explored={res['explored']} runtime={res['runtime']:.4f}s"
                    for d, res in results.items()
                )
            )

        for d in DISCIPLINES:
            solved_mask = ~np.isnan(lengths[d])
            if solved_mask.any():
                print(
                    f"{d.value}: solved={int(solved_mask.sum())}/{len(MISSIONARY_COUNTS)}, "
                    f"mean_len={np.nanmean(lengths[d]):.1f}, max_len={int(np.nanmax(lengths[d]))}, "
                    f"mean_explored={explored[d].mean():.1f}"
                )
            else:
                print(f"{d.value}: solved=0/{len(MISSIONARY_COUNTS)}")

        # build plot for this capacity
        plt.figure()
        for d in DISCIPLINES:
            plt.plot(MISSIONARY_COUNTS, lengths[d], marker="o", label=d.value)
        plt.xlabel("Missionaries (cannibals = ceil(m / 2))")
        plt.ylabel("Trips")
        plt.title(f"Boat capacity={capacity}")
        plt.grid(True, alpha=0.3)
        plt.legend()
        out_path = OUTPUT_DIR / f"capacity_{capacity}.png"
        plt.savefig(out_path, dpi=200, bbox_inches="tight")
        plt.close()
        print(f"Saved plot: {out_path}")

    if disagreements:
        for puzzle, solved in disagreements:
            print(f"Disciplines disagree on {puzzle}: {solved}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
