# graph_search/algorithms/strategy.py
# The three primitives a frontier-driven driver needs, plus the plain tree-search
# variant (no memory of visited states) for comparison with GraphSearch.
from __future__ import annotations
import logging
from typing import Optional, Protocol

from ..core.frontiers import Frontier
from ..core.metrics import MetricsSink, NullMetrics
from ..core.node import Node
from ..errors import EmptyFrontierError

logger = logging.getLogger(__name__)


class SearchRun(Protocol):
    """Per-run context handed out by a SearchStrategy."""
    def is_empty(self) -> bool: ...
    def remove_next(self) -> Node: ...
    def admit(self, node: Node) -> None: ...


class SearchStrategy(Protocol):
    name: str
    def initialize(self, frontier: Frontier, metrics: Optional[MetricsSink] = None) -> SearchRun: ...


def prepare_run(frontier: Frontier, metrics: Optional[MetricsSink]) -> MetricsSink:
    if len(frontier):
        raise ValueError(f"a search run needs an empty frontier, got {len(frontier)} node(s)")
    sink = metrics if metrics is not None else NullMetrics()
    sink.reset()
    return sink


class TreeSearchRun:
    def __init__(self, frontier: Frontier, metrics: MetricsSink) -> None:
        self.frontier = frontier
        self.metrics = metrics

    def admit(self, node: Node) -> None:
        self.frontier.push(node)
        self.metrics.frontier_size(len(self.frontier))

    def is_empty(self) -> bool:
        return len(self.frontier) == 0

    def remove_next(self) -> Node:
        if not len(self.frontier):
            raise EmptyFrontierError("remove_next() on an empty frontier")
        node = self.frontier.pop()
        self.metrics.frontier_size(len(self.frontier))
        return node


class TreeSearch:
    """Every generated node enters the frontier; states may be expanded many times."""
    name = "tree"

    def initialize(self, frontier: Frontier, metrics: Optional[MetricsSink] = None) -> TreeSearchRun:
        logger.debug("tree search: new run")
        return TreeSearchRun(frontier, prepare_run(frontier, metrics))
