# graph_search/benchmarks/run_all.py
# Runs every frontier ordering under both GraphSearch and TreeSearch on the sample
# problems and writes results.json next to this file.
from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..algorithms.astar import a_star_search
from ..algorithms.bfs import breadth_first_search
from ..algorithms.dfs import depth_first_search
from ..algorithms.graph_search import GraphSearch
from ..algorithms.greedy import greedy_best_first_search
from ..algorithms.strategy import TreeSearch
from ..algorithms.ucs import uniform_cost_search
from ..config import SearchSettings, configure_logging, load_settings
from ..problems.grid import make_grid_problem
from ..problems.romania import romania_problem

logger = logging.getLogger(__name__)

ALGOS: List[Tuple[str, Callable[..., Any]]] = [
    ("BFS", breadth_first_search),
    ("DFS", depth_first_search),
    ("UCS", uniform_cost_search),
    ("Greedy", greedy_best_first_search),
    ("A*", a_star_search),
]

PROBLEMS: Dict[str, Callable[[], Any]] = {
    "romania": romania_problem,
    "grid": make_grid_problem,
}

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def run_benchmarks(settings: Optional[SearchSettings] = None) -> List[Dict[str, Any]]:
    """
    One row per (problem, algorithm, strategy). TreeSearch runs are capped at
    settings.tree_limit expansions because the sample maps are cyclic.
    """
    settings = settings or SearchSettings()
    rows: List[Dict[str, Any]] = []
    for pname, make in PROBLEMS.items():
        for name, fn in ALGOS:
            for strategy, limit in ((GraphSearch(), settings.max_expansions),
                                    (TreeSearch(), settings.tree_limit)):
                print(f"→ Running {name}/{strategy.name} on {pname} ...")
                r = fn(make(), strategy=strategy, max_expansions=limit,
                       early_goal_test=settings.early_goal_test)
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
                row = asdict(r)
                row["problem"] = pname
                row["strategy"] = strategy.name
                if not r.success:
                    row["cost"] = None  # inf is not valid JSON
                rows.append(row)
    return rows


def main():
    settings = load_settings()
    configure_logging(settings)
    rows = run_benchmarks(settings)

    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2, default=str))

    # Save JSON next to this script
    out_path = Path(__file__).with_name("results.json")
    try:
        out_path.write_text(json.dumps(out, indent=2, default=str))
    except OSError as e:
        logger.warning("could not write %s: %s", out_path, e)
    else:
        print(f"Wrote {out_path}")

if __name__ == "__main__":
    main()
