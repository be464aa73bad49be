# graph_search/core/problem.py
# The problem model the search layer consumes. Nothing in graph_search looks
# inside a problem beyond these methods.
from __future__ import annotations
from typing import Hashable, Iterable, Protocol

Action = Hashable
State = Hashable


class Problem(Protocol):
    """Atomic state-space problem.

    States must be hashable and compare by value: GraphSearch keys its explored
    set on them. actions() fixes the order children are generated in, which is
    what FIFO/LIFO frontiers turn into breadth- or depth-first order.
    RESULT and step_cost are only called through SearchTree.expand.
    """

    def initial_state(self) -> State: ...

    def is_goal(self, s: State) -> bool: ...

    def actions(self, s: State) -> Iterable[Action]: ...

    def result(self, s: State, a: Action) -> State: ...

    def step_cost(self, s: State, a: Action, s2: State) -> float: ...

    def heuristic(self, s: State) -> float:
        """Estimated cost to a goal; informed searches use it, default 0."""
        return 0.0
