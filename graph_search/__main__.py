# graph_search/__main__.py
# Command line front end:  python -m graph_search romania --frontier ucs
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from typing import Callable, Dict, Optional

from .algorithms.astar import a_star_search
from .algorithms.bfs import breadth_first_search
from .algorithms.dfs import depth_first_search
from .algorithms.graph_search import GraphSearch
from .algorithms.greedy import greedy_best_first_search
from .algorithms.strategy import TreeSearch
from .algorithms.ucs import uniform_cost_search
from .config import configure_logging, load_settings
from .errors import SearchError, UnknownProblemError
from .problems.grid import make_grid_problem
from .problems.romania import romania_problem

FRONTIERS: Dict[str, Callable] = {
    "fifo": breadth_first_search,
    "lifo": depth_first_search,
    "ucs": uniform_cost_search,
    "greedy": greedy_best_first_search,
    "astar": a_star_search,
}

STRATEGIES = {"graph": GraphSearch, "tree": TreeSearch}


def _coord(text: str):
    r, c = text.split(",")
    return int(r), int(c)


def _romania(start: Optional[str], goal: Optional[str]):
    return romania_problem(start or "Arad", goal or "Bucharest")


def _grid(start: Optional[str], goal: Optional[str]):
    p = make_grid_problem()
    if start:
        p.start = _coord(start)
    if goal:
        p.goal = _coord(goal)
    return p


PROBLEMS: Dict[str, Callable] = {
    "romania": _romania,
    "grid": _grid,
}


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_problem(name: str, start: Optional[str], goal: Optional[str]):
    try:
        make = PROBLEMS[name]
    except KeyError:
        raise UnknownProblemError(name) from None
    return make(start, goal)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="graph_search", description="Run a frontier-driven search on a sample problem.")
    ap.add_argument("problem", choices=sorted(PROBLEMS), help="sample problem to solve")
    ap.add_argument("--start", help="start state (city name, or 'row,col' for grid)")
    ap.add_argument("--goal", help="goal state (city name, or 'row,col' for grid)")
    ap.add_argument("--frontier", choices=sorted(FRONTIERS), default="fifo", help="frontier ordering")
    ap.add_argument("--strategy", choices=sorted(STRATEGIES), default="graph",
                    help="graph: expand each state once; tree: no explored set")
    ap.add_argument("--max-expansions", type=_non_negative, default=None, help="give up after N expansions")
    ap.add_argument("--early-goal-test", action="store_true", help="goal-test nodes when generated")
    ap.add_argument("--json", action="store_true", help="print the result as JSON")
    args = ap.parse_args(argv)

    try:
        settings = load_settings()
    except SearchError as e:
        ap.error(str(e))
    configure_logging(settings)

    try:
        problem = build_problem(args.problem, args.start, args.goal)
    except (KeyError, ValueError) as e:
        ap.error(f"bad start/goal: {e}")

    max_expansions = args.max_expansions if args.max_expansions is not None else settings.max_expansions
    search = FRONTIERS[args.frontier]
    r = search(
        problem,
        strategy=STRATEGIES[args.strategy](),
        max_expansions=max_expansions,
        early_goal_test=args.early_goal_test or settings.early_goal_test,
    )

    if args.json:
        print(json.dumps(asdict(r), indent=2, default=str))
    else:
        status = "OK" if r.success else "FAIL"
        print(f"{r.algo}: {status} cost={r.cost} expanded={r.nodes_expanded} "
              f"max_frontier={r.max_frontier_size} time={r.time_s:.4f}s")
        if r.success:
            print("  actions: " + " -> ".join(str(a) for a in r.actions))
        elif r.error:
            print(f"  {r.error}")
    return 0 if r.success else 1


if __name__ == "__main__":
    sys.exit(main())
