"""
Pathstar Core Loop Termination
"""

from typing import Optional

from Pathstar.core.frontier import Frontier
from Pathstar.core.result import ResultKind
from Pathstar.core.search_strategy import ExpansionPolicy


def termination_kind(
    frontier: Frontier,
    policy: ExpansionPolicy,
    goal,
    nodes_expanded: int,
    max_nodes_to_expand: int,
    stop_criterion_enabled: bool,
) -> Optional[ResultKind]:
    """
    Decide whether the search loop stops before the next expansion.

    Checks run in a fixed order: empty frontier, goal at the head of the frontier,
    expansion bound (0 means unbounded), then the policy's stop criterion evaluated on the
    state that would be expanded next.

    Returns:
        The result kind to finish with, or None to keep expanding.
    """
    if not frontier:
        return ResultKind.FAIL_ALL_NODES_EXPANDED

    best = frontier.peek()
    if best.node == goal:
        return ResultKind.SUCCESS

    if max_nodes_to_expand != 0 and nodes_expanded >= max_nodes_to_expand:
        return ResultKind.FAIL_MAX_NODES_EXPANDED

    if stop_criterion_enabled and policy.stop_criterion_reached(
        nodes_expanded,
        best.accumulated_cost,
        best.heuristic,
        best.path_length,
    ):
        return ResultKind.FAIL_USER_STOP_CRITERION

    return None
