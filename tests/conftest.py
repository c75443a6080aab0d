import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when running `pytest` from any working directory.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Pathstar.core.errors import NotAdjacent  # noqa: E402


class GraphPolicy:
    """
    Expansion policy over an explicit weighted digraph, for engine tests.

    `edges` maps a node to {neighbour: cost}; `heuristics` defaults to 0 per node.
    Every call to `expand` is recorded in `expanded`.
    """

    def __init__(
        self,
        edges,
        start,
        goal,
        heuristics=None,
        monotonic=False,
        zero=0,
        stop_criterion=None,
    ):
        self.edges = edges
        self.start = start
        self.goal = goal
        self.heuristics = heuristics or {}
        self.monotonic = monotonic
        self.zero = zero
        self.stop_criterion = stop_criterion
        self.expanded = []

    def start_node(self):
        return self.start

    def goal_node(self):
        return self.goal

    def expand(self, node):
        self.expanded.append(node)
        return list(self.edges.get(node, {}))

    def cost_between(self, from_node, to_node):
        if not self.adjacent(from_node, to_node):
            raise NotAdjacent(from_node, to_node)
        return self.edges[from_node][to_node]

    def heuristic(self, node):
        return self.heuristics.get(node, self.zero)

    def zero_cost(self):
        return self.zero

    def adjacent(self, node1, node2):
        return node2 in self.edges.get(node1, {})

    def monotonic_heuristic(self):
        return self.monotonic

    def stop_criterion_enabled(self):
        return self.stop_criterion is not None

    def stop_criterion_reached(self, nodes_expanded, cost, heuristic, path_length):
        return self.stop_criterion(nodes_expanded, cost, heuristic, path_length)


def undirected(*weighted_edges):
    edges = {}
    for a, b, cost in weighted_edges:
        edges.setdefault(a, {})[b] = cost
        edges.setdefault(b, {})[a] = cost
    return edges


@pytest.fixture
def graph_policy():
    return GraphPolicy


@pytest.fixture
def undirected_edges():
    return undirected
