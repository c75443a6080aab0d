"""
Pathstar Core Expansion

Turns a popped path state into child states and merges them into the frontier.
"""

import logging
from typing import Hashable

from Pathstar.core.frontier import Frontier
from Pathstar.core.path_state import PathState
from Pathstar.core.search_strategy import ExpansionPolicy

logger = logging.getLogger(__name__)


def expand_path_state(policy: ExpansionPolicy, parent: PathState) -> list[PathState]:
    """
    Wrap the policy's raw neighbours of `parent.node` into child path states.

    The immediate previous node is skipped. `NotAdjacent` from `cost_between` is not
    caught: a policy that reports a neighbour it cannot cost aborts the whole run.
    """
    previous = parent.previous
    previous_node = previous.node if previous is not None else None
    parent_cost = parent.accumulated_cost

    children = []
    for node in dict.fromkeys(policy.expand(parent.node)):
        if previous is not None and node == previous_node:
            continue
        step_cost = policy.cost_between(parent.node, node)
        children.append(
            PathState(
                node,
                parent_cost + step_cost,
                policy.heuristic(node),
                parent,
            )
        )
    return children


def merge_children(
    frontier: Frontier,
    children: list[PathState],
    monotonic: bool,
    closed: set[Hashable],
) -> int:
    """
    Insert `children` into `frontier`, keeping one best-score state per node.

    Args:
        frontier: Open set to update.
        children: States produced by `expand_path_state`.
        monotonic: Whether the policy's heuristic is monotone. If so, nodes in `closed`
            were reached optimally already and are dropped; otherwise children whose node
            already appears on their own route are dropped.
        closed: Nodes expanded so far in this run.

    Returns:
        Number of children that entered the frontier.
    """
    inserted = 0
    for child in children:
        node = child.node
        current = frontier.get(node)
        if current is not None:
            if child.score < current.score:
                frontier.replace(child)
                inserted += 1
            continue

        if monotonic:
            if node in closed:
                continue
        elif child.has_node_in_path(node):
            # loop back onto this route
            continue

        frontier.push(child)
        inserted += 1

    logger.debug("Merged %d of %d children into the frontier", inserted, len(children))
    return inserted
