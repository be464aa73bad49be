"""Frontier-driven state-space search with explored-set deduplication."""
from .algorithms.graph_search import GraphSearch, GraphSearchRun
from .algorithms.queue_search import queue_search
from .algorithms.strategy import SearchRun, SearchStrategy, TreeSearch
from .core.frontiers import FIFOQueue, LIFOStack, PriorityQueue
from .core.metrics import LoggingMetrics, NullMetrics, SearchMetrics, SearchResult
from .core.node import Node, SearchTree
from .errors import ConfigError, EmptyFrontierError, SearchError

__all__ = [
    "GraphSearch", "GraphSearchRun", "TreeSearch", "SearchRun", "SearchStrategy",
    "queue_search",
    "FIFOQueue", "LIFOStack", "PriorityQueue",
    "SearchMetrics", "NullMetrics", "LoggingMetrics", "SearchResult",
    "Node", "SearchTree",
    "SearchError", "EmptyFrontierError", "ConfigError",
]
