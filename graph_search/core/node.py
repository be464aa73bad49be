# graph_search/core/node.py
# Search-tree nodes for one run. Nodes are immutable and refer to their parent by
# index into the owning SearchTree, so the tree is a flat list with no object cycles.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional
from .problem import Problem, State


@dataclass(frozen=True)
class Node:
    state: State
    index: int
    parent: Optional[int] = None
    action: Any = None
    path_cost: float = 0.0
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent is None


class SearchTree:
    """Arena of Nodes created during a single search run.

    Every node expand() generates stays here, including children a strategy
    later refuses to admit, so len(tree) counts generated nodes, not frontier
    entries. Drop the tree when the run ends.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def root(self, state: State) -> Node:
        if self._nodes:
            raise ValueError("search tree already has a root")
        node = Node(state=state, index=0)
        self._nodes.append(node)
        return node

    def child(self, parent: Node, action: Any, state: State, step_cost: float) -> Node:
        node = Node(
            state=state,
            index=len(self._nodes),
            parent=parent.index,
            action=action,
            path_cost=parent.path_cost + float(step_cost),
            depth=parent.depth + 1,
        )
        self._nodes.append(node)
        return node

    def parent_of(self, node: Node) -> Optional[Node]:
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def path(self, node: Node) -> List[Node]:
        """Nodes from the root down to `node`, inclusive."""
        out = [node]
        while node.parent is not None:
            node = self._nodes[node.parent]
            out.append(node)
        out.reverse()
        return out

    def expand(self, node: Node, problem: Problem) -> Iterator[Node]:
        """Generate child Nodes by applying ACTIONS(s), using RESULT and step_cost."""
        s = node.state
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(
                    f"step_cost returned None for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Check your problem's ACTIONS/RESULT/cost mapping."
                )
            yield self.child(node, a, s2, cost)
