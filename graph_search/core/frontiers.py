# graph_search/core/frontiers.py
# Frontier containers. pop()/peek() on an empty frontier raise IndexError; search
# strategies rely on that and on __len__ being the number of waiting entries.
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Callable, Deque, List, Protocol, Tuple


class Frontier(Protocol):
    """What a search strategy needs from a frontier: insert, remove-head, peek, size."""
    def push(self, x: Any) -> None: ...
    def pop(self) -> Any: ...
    def peek(self) -> Any: ...
    def __len__(self) -> int: ...


class FIFOQueue:
    """Head is the oldest entry (breadth-first order)."""

    def __init__(self) -> None:
        self.q: Deque[Any] = deque()

    def push(self, x: Any) -> None:
        self.q.append(x)

    def pop(self) -> Any:
        return self.q.popleft()

    def peek(self) -> Any:
        return self.q[0]

    def __len__(self) -> int:
        return len(self.q)


class LIFOStack:
    """Head is the newest entry (depth-first order)."""

    def __init__(self) -> None:
        self.q: List[Any] = []

    def push(self, x: Any) -> None:
        self.q.append(x)

    def pop(self) -> Any:
        return self.q.pop()

    def peek(self) -> Any:
        return self.q[-1]

    def __len__(self) -> int:
        return len(self.q)


class PriorityQueue:
    """Head is the entry with the smallest key(x); equal keys leave in insertion order.

    key is evaluated once, at push time, so entries never need re-heapifying.
    """

    def __init__(self, key: Callable[[Any], float]) -> None:
        self.key = key
        self.h: List[Tuple[float, int, Any]] = []
        self.counter = 0

    def push(self, x: Any) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))

    def pop(self) -> Any:
        return heapq.heappop(self.h)[2]

    def peek(self) -> Any:
        if not self.h:
            raise IndexError("peek from an empty priority queue")
        return self.h[0][2]

    def __len__(self) -> int:
        return len(self.h)
