from .contracts import Cost, cost_compare, validate_policy
from .errors import (
    ArchivedStateError,
    ConfigurationError,
    ContractViolation,
    NotAdjacent,
    PathstarError,
)
from .expansion import expand_path_state, merge_children
from .frontier import Frontier
from .loop import termination_kind
from .path_state import PathState
from .result import ResultKind, SearchResult
from .search_strategy import ExpansionPolicy

__all__ = [
    # Contracts
    "Cost",
    "ExpansionPolicy",
    "cost_compare",
    "validate_policy",
    # Errors
    "PathstarError",
    "ConfigurationError",
    "ContractViolation",
    "ArchivedStateError",
    "NotAdjacent",
    # Search structures
    "PathState",
    "Frontier",
    "ResultKind",
    "SearchResult",
    "expand_path_state",
    "merge_children",
    "termination_kind",
]
