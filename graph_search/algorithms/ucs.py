# This code implements Uniform Cost Search (UCS) by reusing the generic best-first search function.
# graph_search/algorithms/ucs.py
from __future__ import annotations
from .best_first import best_first_search

def uniform_cost_search(problem, **kwargs):
    return best_first_search(problem, f=lambda n: n.path_cost, label="UCS", h=None, **kwargs)
