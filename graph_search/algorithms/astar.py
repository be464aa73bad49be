# graph_search/algorithms/astar.py
from __future__ import annotations
from typing import Callable, Optional
from .best_first import best_first_search
from .heuristics import heuristic_from_problem
from ..core.node import Node

def a_star_search(problem, heuristic: Optional[Callable[[Node], float]] = None, **kwargs):
    h = heuristic or heuristic_from_problem(problem)
    return best_first_search(problem, f=lambda n: n.path_cost, h=h, label="A*", **kwargs)
