# graph_search/algorithms/bfs.py
from __future__ import annotations
from typing import Optional
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Problem
from .graph_search import GraphSearch
from .queue_search import queue_search
from .strategy import SearchStrategy

def breadth_first_search(problem: Problem, strategy: Optional[SearchStrategy] = None, **kwargs) -> SearchResult:
    strategy = strategy or GraphSearch()
    kwargs.setdefault("name", f"BFS/{strategy.name}")
    return queue_search(problem, FIFOQueue(), strategy, **kwargs)
