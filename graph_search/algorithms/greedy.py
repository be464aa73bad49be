# graph_search/algorithms/greedy.py
from __future__ import annotations
from .best_first import best_first_search
from .heuristics import heuristic_from_problem

def greedy_best_first_search(problem, **kwargs):
    h = heuristic_from_problem(problem) or (lambda n: 0.0)
    # greedy: f = 0 + h
    return best_first_search(problem, f=lambda n: 0.0, h=h, label="Greedy", **kwargs)
