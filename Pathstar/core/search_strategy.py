"""
Pathstar Core Search Strategy Protocols
"""

from typing import Any, Hashable, Iterable, Protocol, runtime_checkable


@runtime_checkable
class ExpansionPolicy(Protocol):
    """
    Protocol for the domain side of a search.
    The calculator never inspects nodes or costs itself; everything it knows about the
    graph comes through these calls.
    """

    def start_node(self) -> Hashable:
        ...

    def goal_node(self) -> Hashable:
        ...

    def expand(self, node: Hashable) -> Iterable[Hashable]:
        """
        Return the neighbours of `node`. Duplicates collapse by equality.
        """
        ...

    def cost_between(self, from_node: Hashable, to_node: Hashable) -> Any:
        """
        Cost of the edge `from_node -> to_node`.
        Must raise `NotAdjacent` when `adjacent(from_node, to_node)` is false.
        """
        ...

    def heuristic(self, node: Hashable) -> Any:
        """
        Estimate of the remaining cost from `node` to the goal.
        Should never overestimate (admissible).
        """
        ...

    def zero_cost(self) -> Any:
        ...

    def adjacent(self, node1: Hashable, node2: Hashable) -> bool:
        ...

    def monotonic_heuristic(self) -> bool:
        ...

    def stop_criterion_enabled(self) -> bool:
        ...

    def stop_criterion_reached(
        self,
        nodes_expanded: int,
        cost: Any,
        heuristic: Any,
        path_length: int,
    ) -> bool:
        """
        Evaluated before every expansion against the node that would be expanded next.
        """
        ...
