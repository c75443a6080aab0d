"""
Pathstar Core Result Structures
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from Pathstar.core.path_state import PathState


class ResultKind(Enum):
    SUCCESS = ("success", True)
    FAIL_ALL_NODES_EXPANDED = ("all nodes expanded", False)
    FAIL_MAX_NODES_EXPANDED = ("max nodes expanded", False)
    FAIL_USER_STOP_CRITERION = ("user stop criterion", False)

    def __init__(self, description: str, success: bool):
        self.description = description
        self.is_success = success


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of one calculator run.

    `cost` and `path` are defined only for a successful run; `path_length` is the number
    of edges of the path (0 when the run failed).
    """

    kind: ResultKind
    terminal_state: Optional[PathState]
    nodes_expanded: int
    elapsed_time: float

    def __post_init__(self):
        if self.kind.is_success and self.terminal_state is None:
            raise ValueError("A successful result needs a terminal state")
        if not self.kind.is_success and self.terminal_state is not None:
            raise ValueError(f"A {self.kind.name} result cannot carry a terminal state")

    @property
    def is_success(self) -> bool:
        return self.kind.is_success

    @property
    def cost(self) -> Optional[Any]:
        if not self.is_success:
            return None
        return self.terminal_state.accumulated_cost

    @property
    def path(self) -> Optional[tuple]:
        """Nodes from start to goal, both inclusive."""
        if not self.is_success:
            return None
        return self.terminal_state.path()

    @property
    def path_length(self) -> int:
        if not self.is_success:
            return 0
        return self.terminal_state.path_length

    def summary(self) -> dict:
        return {
            "kind": self.kind.name,
            "cost": self.cost,
            "path_length": self.path_length,
            "nodes_expanded": self.nodes_expanded,
            "elapsed_time": self.elapsed_time,
        }

    def __str__(self) -> str:
        if self.is_success:
            return (
                f"SearchResult(kind={self.kind.name}; end={self.terminal_state.node!r}; "
                f"cost={self.cost!r}; path_length={self.path_length})"
            )
        return f"SearchResult(kind={self.kind.name})"
