# graph_search/problems/graph.py
# A route-finding problem over an explicit adjacency map: states are vertex names,
# an action is the neighbour to move to, and the step cost is the edge weight.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, Iterable, Mapping, Optional, Tuple
from ..core.problem import Problem, State, Action

Vertex = Hashable


@dataclass
class GraphProblem(Problem):
    start: Vertex
    goal: Optional[Vertex]
    graph: Mapping[Vertex, Mapping[Vertex, float]]
    h: Optional[Callable[[Vertex], float]] = field(default=None, repr=False)

    def initial_state(self) -> State: return self.start
    def is_goal(self, s: State) -> bool: return s == self.goal
    def actions(self, s: State) -> Iterable[Action]:
        return self.graph.get(s, {}).keys()
    def result(self, s: State, a: Action) -> State:
        return a  # action is the neighbouring vertex
    def step_cost(self, s: State, a: Action, s2: State) -> float:
        return float(self.graph[s][s2])
    def heuristic(self, s: State) -> float:
        return 0.0 if self.h is None else float(self.h(s))


def from_edges(edges: Iterable[Tuple[Vertex, Vertex]], start: Vertex, goal: Optional[Vertex],
               cost: float = 1.0, undirected: bool = False) -> GraphProblem:
    """Build a GraphProblem from (u, v) pairs; insertion order fixes action order."""
    graph: Dict[Vertex, Dict[Vertex, float]] = {}
    for u, v in edges:
        graph.setdefault(u, {})[v] = cost
        graph.setdefault(v, {})
        if undirected:
            graph[v][u] = cost
    return GraphProblem(start=start, goal=goal, graph=graph)
