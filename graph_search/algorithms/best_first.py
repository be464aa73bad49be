# graph_search/algorithms/best_first.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .graph_search import GraphSearch
from .queue_search import queue_search
from .strategy import SearchStrategy

def best_first_search(
    problem: Problem,
    f: Callable[[Node], float],
    name: Optional[str] = None,
    h: Optional[Callable[[Node], float]] = None,
    strategy: Optional[SearchStrategy] = None,
    label: str = "BestFirst",
    **kwargs,
) -> SearchResult:
    """
    Best-first search: priority frontier ordered by f(n) (+ h(n) if given).
    Equal-state duplicates may sit in the frontier; the cheapest one is popped
    first and the rest are purged by the strategy.

    The result is named `name` when given, otherwise "<label>/<strategy>".
    """
    def fscore(n: Node) -> float:
        base = float(f(n))
        if h is None:
            return base
        hv = h(n)
        return base + (0.0 if hv is None else float(hv))

    strategy = strategy or GraphSearch()
    return queue_search(problem, PriorityQueue(key=fscore), strategy,
                        name=name or f"{label}/{strategy.name}", **kwargs)
