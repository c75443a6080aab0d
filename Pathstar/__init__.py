from Pathstar.astar import AstarCalculator, RunState
from Pathstar.core import (
    ArchivedStateError,
    ConfigurationError,
    ContractViolation,
    ExpansionPolicy,
    NotAdjacent,
    PathState,
    PathstarError,
    ResultKind,
    SearchResult,
)

__all__ = [
    "AstarCalculator",
    "RunState",
    "ExpansionPolicy",
    "PathState",
    "ResultKind",
    "SearchResult",
    "PathstarError",
    "ConfigurationError",
    "ContractViolation",
    "ArchivedStateError",
    "NotAdjacent",
]
