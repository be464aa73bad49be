# graph_search/core/metrics.py
from __future__ import annotations
import logging
import time, tracemalloc
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None
    max_frontier_size: int = 0


class MetricsSink(Protocol):
    """Receives search events. Implementations decide what, if anything, to keep."""
    def reset(self) -> None: ...
    def frontier_size(self, size: int) -> None: ...
    def node_expanded(self) -> None: ...
    def path_cost(self, cost: float) -> None: ...


class NullMetrics:
    def reset(self) -> None: pass
    def frontier_size(self, size: int) -> None: pass
    def node_expanded(self) -> None: pass
    def path_cost(self, cost: float) -> None: pass


class SearchMetrics:
    """Counters for one run; as_dict() uses the classic AIMA metric names."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.nodes_expanded = 0
        self.queue_size = 0
        self.max_queue_size = 0
        self.path_cost_value: Optional[float] = None
        self.size_updates = 0

    def frontier_size(self, size: int) -> None:
        self.queue_size = size
        self.max_queue_size = max(self.max_queue_size, size)
        self.size_updates += 1

    def node_expanded(self) -> None:
        self.nodes_expanded += 1

    def path_cost(self, cost: float) -> None:
        self.path_cost_value = float(cost)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "nodesExpanded": self.nodes_expanded,
            "queueSize": self.queue_size,
            "maxQueueSize": self.max_queue_size,
            "pathCost": self.path_cost_value,
        }


class LoggingMetrics:
    """Forwards every event to `inner` and logs it at DEBUG."""

    def __init__(self, inner: Optional[MetricsSink] = None, name: str = "search") -> None:
        self.inner = inner if inner is not None else SearchMetrics()
        self.name = name

    @property
    def max_queue_size(self) -> int:
        return getattr(self.inner, "max_queue_size", 0)

    def reset(self) -> None:
        logger.debug("%s: metrics reset", self.name)
        self.inner.reset()

    def frontier_size(self, size: int) -> None:
        logger.debug("%s: frontier size %d", self.name, size)
        self.inner.frontier_size(size)

    def node_expanded(self) -> None:
        logger.debug("%s: node expanded", self.name)
        self.inner.node_expanded()

    def path_cost(self, cost: float) -> None:
        logger.debug("%s: path cost %s", self.name, cost)
        self.inner.path_cost(cost)


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory

    def __enter__(self) -> "MeasuredRun":
        # tracemalloc is process-global; never stop a trace somebody else started
        if self._trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
