# graph_search/algorithms/graph_search.py
# GRAPH-SEARCH (AIMA Fig. 3.7) expressed as a strategy over any frontier ordering.
from __future__ import annotations
import logging
from typing import AbstractSet, Optional, Set

from ..core.frontiers import Frontier
from ..core.metrics import MetricsSink
from ..core.node import Node
from ..core.problem import State
from ..errors import EmptyFrontierError
from .strategy import prepare_run

logger = logging.getLogger(__name__)


class GraphSearchRun:
    """
    Frontier + explored set for one search run.

    Unlike the textbook pseudo-code, admit() does not look for an equal state
    already waiting in the frontier. Duplicates are allowed in, and whichever
    copy surfaces first (the cheapest one, with a priority frontier) is the one
    expanded; later copies are discarded by is_empty() once their state is
    explored. The invariant kept here: a node leaves the frontier through
    remove_next() only together with its state entering `explored`.
    """

    def __init__(self, frontier: Frontier, metrics: MetricsSink) -> None:
        self.frontier = frontier
        self.metrics = metrics
        self._explored: Set[State] = set()
        self.stale_discarded = 0

    @property
    def explored(self) -> AbstractSet[State]:
        return frozenset(self._explored)

    @property
    def explored_count(self) -> int:
        return len(self._explored)

    def is_explored(self, state: State) -> bool:
        return state in self._explored

    def admit(self, node: Node) -> None:
        """Push `node` unless its state was already explored."""
        if node.state in self._explored:
            logger.debug("drop %r: state already explored", node.state)
            return
        self.frontier.push(node)
        self.metrics.frontier_size(len(self.frontier))

    def is_empty(self) -> bool:
        """Discard stale heads (explored states), then report whether anything is left."""
        while len(self.frontier) and self.frontier.peek().state in self._explored:
            stale = self.frontier.pop()
            self.stale_discarded += 1
            logger.debug("purge stale frontier entry %r", stale.state)
            self.metrics.frontier_size(len(self.frontier))
        self.metrics.frontier_size(len(self.frontier))
        return len(self.frontier) == 0

    def remove_next(self) -> Node:
        """Pop the head and mark its state explored. Call only after is_empty() returned False."""
        if not len(self.frontier):
            raise EmptyFrontierError("remove_next() on an empty frontier; check is_empty() first")
        node = self.frontier.pop()
        self._explored.add(node.state)
        self.metrics.frontier_size(len(self.frontier))
        return node


class GraphSearch:
    """Strategy that expands each distinct state at most once per run.

    The instance itself holds no run state: initialize() returns a new
    GraphSearchRun each time, so one GraphSearch can be reused freely.
    """
    name = "graph"

    def initialize(self, frontier: Frontier, metrics: Optional[MetricsSink] = None) -> GraphSearchRun:
        logger.debug("graph search: new run, explored set empty")
        return GraphSearchRun(frontier, prepare_run(frontier, metrics))
