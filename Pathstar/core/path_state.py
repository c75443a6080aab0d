"""
Pathstar Core Path State
"""

from typing import Any, Hashable, Iterator, Optional

from Pathstar.core.errors import ArchivedStateError


class PathState:
    """
    A node reached during search, annotated with its accumulated cost, heuristic value
    and the route that led to it.

    Path states form a tree rooted at the start state. The route is a persistent chain of
    `(node, rest)` pairs shared with the parent, so building a child costs O(1) and an
    archived parent's route stays alive only through the children that still reach it.
    Once a state leaves the open frontier it is archived: everything except the node and
    the path length is released and reading it raises `ArchivedStateError`.
    """

    __slots__ = (
        "_node",
        "_accumulated_cost",
        "_heuristic",
        "_previous",
        "_route",
        "_path_length",
        "_archived",
    )

    def __init__(
        self,
        node: Hashable,
        accumulated_cost: Any,
        heuristic: Any,
        previous: Optional["PathState"] = None,
    ):
        if node is None:
            raise ValueError("A PathState's node cannot be None")
        if accumulated_cost is None:
            raise ValueError("A PathState's cost cannot be None")
        if heuristic is None:
            raise ValueError("A PathState's heuristic value cannot be None")

        self._node = node
        self._accumulated_cost = accumulated_cost
        self._heuristic = heuristic
        self._previous = previous
        self._archived = False

        if previous is None:
            self._route = None
            self._path_length = 0
        else:
            previous._check_live("route")
            self._route = (previous.node, previous._route)
            self._path_length = previous.path_length + 1

    def _check_live(self, field: str):
        if self._archived:
            raise ArchivedStateError(f"Cannot read {field} of archived state for {self._node!r}.")

    def _walk_route(self) -> Iterator[Hashable]:
        # nearest ancestor first
        route = self._route
        while route is not None:
            node, route = route
            yield node

    @property
    def node(self) -> Hashable:
        return self._node

    @property
    def path_length(self) -> int:
        """Number of edges from the start state; 0 for the start state itself."""
        return self._path_length

    @property
    def is_archived(self) -> bool:
        return self._archived

    @property
    def accumulated_cost(self) -> Any:
        self._check_live("accumulated_cost")
        return self._accumulated_cost

    @property
    def heuristic(self) -> Any:
        self._check_live("heuristic")
        return self._heuristic

    @property
    def score(self) -> Any:
        """accumulated_cost + heuristic, recomputed on every access."""
        self._check_live("score")
        return self._accumulated_cost + self._heuristic

    @property
    def previous(self) -> Optional["PathState"]:
        """The state this one was expanded from; None for the start state."""
        self._check_live("previous")
        return self._previous

    @property
    def ancestry(self) -> tuple:
        """Nodes from the start up to, but excluding, this node."""
        self._check_live("ancestry")
        nodes = list(self._walk_route())
        nodes.reverse()
        return tuple(nodes)

    @property
    def ancestor_nodes(self) -> frozenset:
        self._check_live("ancestor_nodes")
        return frozenset(self._walk_route())

    def has_node_in_path(self, node: Hashable) -> bool:
        """
        Whether `node` lies on the route from the start to this state.
        This state's own node is not included.
        """
        self._check_live("ancestor_nodes")
        return any(ancestor == node for ancestor in self._walk_route())

    def path(self) -> tuple:
        """Nodes from the start to this state, inclusive."""
        return self.ancestry + (self._node,)

    def archive(self) -> None:
        self._accumulated_cost = None
        self._heuristic = None
        self._previous = None
        self._route = None
        self._archived = True

    def __repr__(self) -> str:
        if self._archived:
            return f"PathState(node={self._node!r})"
        return (
            f"PathState(node={self._node!r}; score={self.score!r}; "
            f"cost={self._accumulated_cost!r}; heuristic={self._heuristic!r})"
        )
