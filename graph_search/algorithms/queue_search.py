# graph_search/algorithms/queue_search.py
# Generic frontier-driven driver. It knows nothing about how a strategy filters
# nodes; it only calls is_empty / remove_next / admit in the fixed loop below.
from __future__ import annotations
import logging
from typing import Optional

from ..core.frontiers import Frontier
from ..core.metrics import MeasuredRun, MetricsSink, SearchMetrics, SearchResult
from ..core.node import Node, SearchTree
from ..core.problem import Problem
from ..core.utils import reconstruct_path
from .strategy import SearchStrategy

logger = logging.getLogger(__name__)


def queue_search(
    problem: Problem,
    frontier: Frontier,
    strategy: SearchStrategy,
    *,
    metrics: Optional[MetricsSink] = None,
    early_goal_test: bool = False,
    max_expansions: Optional[int] = None,
    name: Optional[str] = None,
) -> SearchResult:
    """
    Run one search over `frontier` under `strategy`.

    With early_goal_test the goal predicate is applied when a node is generated
    rather than when it is removed from the frontier; this finds goals sooner
    with FIFO frontiers but gives up cost-optimality with priority frontiers.
    Hitting max_expansions ends the run as a failure with error set.
    """
    name = name or strategy.name
    metrics = metrics if metrics is not None else SearchMetrics()
    tree = SearchTree()
    expanded = 0

    def done(node: Optional[Node], meter: MeasuredRun, error: Optional[str] = None) -> SearchResult:
        max_size = getattr(metrics, "max_queue_size", 0)
        if node is None:
            logger.info("%s: no solution after %d expansions%s", name, expanded,
                        f" ({error})" if error else "")
            return SearchResult(name, False, [], float("inf"), expanded, meter.elapsed,
                                meter.peak_kb, error, max_size)
        actions, cost = reconstruct_path(tree, node)
        metrics.path_cost(cost)
        logger.info("%s: solution of %d step(s), cost %s, %d expansions",
                    name, len(actions), cost, expanded)
        return SearchResult(name, True, actions, cost, expanded, meter.elapsed,
                            meter.peak_kb, None, max_size)

    with MeasuredRun() as meter:
        root = tree.root(problem.initial_state())
        run = strategy.initialize(frontier, metrics)
        logger.info("%s: search from %r", name, root.state)

        if early_goal_test and problem.is_goal(root.state):
            return done(root, meter)
        run.admit(root)

        while not run.is_empty():
            if max_expansions is not None and expanded >= max_expansions:
                return done(None, meter, "expansion limit reached")

            node = run.remove_next()
            if not early_goal_test and problem.is_goal(node.state):
                return done(node, meter)

            expanded += 1
            metrics.node_expanded()
            for child in tree.expand(node, problem):
                if early_goal_test and problem.is_goal(child.state):
                    return done(child, meter)
                run.admit(child)

        return done(None, meter)
