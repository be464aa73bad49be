# graph_search/algorithms/dfs.py
# Depth-first order comes entirely from the LIFO frontier; with GraphSearch the
# explored set stands in for the old ancestor-window cycle check.
from __future__ import annotations
from typing import Optional
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .graph_search import GraphSearch
from .queue_search import queue_search
from .strategy import SearchStrategy

def depth_first_search(problem: Problem, strategy: Optional[SearchStrategy] = None, **kwargs) -> SearchResult:
    strategy = strategy or GraphSearch()
    kwargs.setdefault("name", f"DFS/{strategy.name}")
    return queue_search(problem, LIFOStack(), strategy, **kwargs)
