# graph_search/algorithms/heuristics.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.node import Node

def heuristic_from_problem(problem) -> Optional[Callable[[Node], float]]:
    """Wrap problem.heuristic(state) as a node function, or None if the problem has none."""
    if hasattr(problem, "heuristic"):
        def h(n: Node) -> float:
            val = problem.heuristic(n.state)
            return 0.0 if val is None else float(val)
        return h
    return None
