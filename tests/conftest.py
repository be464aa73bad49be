# tests/conftest.py
import pytest

from graph_search.problems.graph import from_edges


class RecordingRun:
    """Delegates to a real run and remembers the state of every removed node."""

    def __init__(self, run, removed):
        self.run = run
        self.removed = removed

    def is_empty(self):
        return self.run.is_empty()

    def admit(self, node):
        self.run.admit(node)

    def remove_next(self):
        node = self.run.remove_next()
        self.removed.append(node.state)
        return node


class RecordingStrategy:
    def __init__(self, inner):
        self.inner = inner
        self.name = inner.name
        self.removed = []
        self.runs = []

    def initialize(self, frontier, metrics=None):
        run = self.inner.initialize(frontier, metrics)
        self.runs.append(run)
        return RecordingRun(run, self.removed)


class RecordingSink:
    def __init__(self):
        self.sizes = []
        self.resets = 0
        self.expanded = 0
        self.cost = None

    def reset(self):
        self.resets += 1

    def frontier_size(self, size):
        self.sizes.append(size)

    def node_expanded(self):
        self.expanded += 1

    def path_cost(self, cost):
        self.cost = cost


@pytest.fixture
def diamond():
    """A->B, A->C, B->D, C->D with goal D."""
    return from_edges([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], start="A", goal="D")


@pytest.fixture
def diamond_no_goal():
    return from_edges([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")], start="A", goal=None)


@pytest.fixture
def cycle():
    """A->B->A with an unreachable goal C."""
    return from_edges([("A", "B"), ("B", "A")], start="A", goal="C")


@pytest.fixture
def recording():
    return RecordingStrategy


@pytest.fixture
def sink():
    return RecordingSink()
