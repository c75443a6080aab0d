from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable


class Policy(ABC):
    """
    Base class for expansion policies.

    Subclasses describe the graph (neighbours, edge costs, heuristic, adjacency); start
    and goal are fixed at construction. Monotonicity and the user stop criterion default
    to off.
    """

    def __init__(self, start: Hashable, goal: Hashable):
        self._start = start
        self._goal = goal

    def start_node(self) -> Hashable:
        return self._start

    def goal_node(self) -> Hashable:
        return self._goal

    @abstractmethod
    def expand(self, node: Hashable) -> Iterable[Hashable]:
        """
        This function should return every node reachable from `node` in one step.
        """
        pass

    @abstractmethod
    def heuristic(self, node: Hashable) -> Any:
        """
        This function should return an underestimate of the cost from `node` to the goal.

        Args:
            node: The node to estimate from.

        Returns:
            A cost comparable with and addable to `zero_cost()`.
        """
        pass

    @abstractmethod
    def cost_between(self, from_node: Hashable, to_node: Hashable) -> Any:
        """
        This function should return the cost of moving from `from_node` to the adjacent
        node `to_node`, and raise `NotAdjacent` if they are not adjacent.
        """
        pass

    @abstractmethod
    def zero_cost(self) -> Any:
        pass

    @abstractmethod
    def adjacent(self, node1: Hashable, node2: Hashable) -> bool:
        pass

    def monotonic_heuristic(self) -> bool:
        return False

    def stop_criterion_enabled(self) -> bool:
        return False

    def stop_criterion_reached(
        self, nodes_expanded: int, cost: Any, heuristic: Any, path_length: int
    ) -> bool:
        return False
