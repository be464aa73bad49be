# graph_search/core/utils.py
# Turns a goal node back into the action sequence that produced it.
from __future__ import annotations
from typing import List, Tuple
from .node import Node, SearchTree

def reconstruct_path(tree: SearchTree, node: Node) -> Tuple[List, float]:
    actions = [n.action for n in tree.path(node)[1:]]
    return actions, float(node.path_cost)
