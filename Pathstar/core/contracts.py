"""
Pathstar Core Contracts

Capability requirements for domain types and the one-time policy self-check that runs
before every search.
"""

import logging
from typing import Any, Protocol, TypeVar, runtime_checkable

from Pathstar.core.errors import ContractViolation
from Pathstar.core.search_strategy import ExpansionPolicy

logger = logging.getLogger(__name__)

C = TypeVar("C", bound="Cost")


@runtime_checkable
class Cost(Protocol):
    """
    Totally ordered, additive value with a zero element supplied by the policy.
    Plain ints and floats satisfy it.
    """

    def __add__(self: C, other: C) -> C:
        ...

    def __lt__(self: C, other: C) -> bool:
        ...


def cost_compare(cost1: Any, cost2: Any) -> int:
    """Three-way comparison using only `<`."""
    if cost1 < cost2:
        return -1
    if cost2 < cost1:
        return 1
    return 0


def _unique(nodes) -> list:
    # dict keeps first-seen order while collapsing equal nodes
    return list(dict.fromkeys(nodes))


def validate_policy(policy: ExpansionPolicy) -> None:
    """
    Check that `policy` honours its own contract.

    Raises:
        ContractViolation: if the goal heuristic of a monotone policy is not zero, if two
            expansions of the start node disagree, or if the edge costs out of the start
            node are inconsistent or not strictly positive.
    """
    zero = policy.zero_cost()
    start = policy.start_node()
    goal = policy.goal_node()

    if policy.monotonic_heuristic():
        goal_heuristic = policy.heuristic(goal)
        if goal_heuristic != zero:
            raise ContractViolation(
                f"Monotonic heuristic must be zero at the goal, got {goal_heuristic!r} "
                f"(zero cost is {zero!r})."
            )

    expansion1 = _unique(policy.expand(start))
    expansion2 = _unique(policy.expand(start))

    unmatched = list(expansion2)
    for node1 in expansion1:
        match_idx = None
        for idx, node2 in enumerate(unmatched):
            if node1 == node2 and hash(node1) == hash(node2):
                match_idx = idx
                break
        if match_idx is None:
            raise ContractViolation(
                f"Expanding the start node twice gave different neighbours: {node1!r} has no "
                "match. Node equality and hashing must be deterministic and consistent."
            )
        node2 = unmatched.pop(match_idx)

        cost1 = policy.cost_between(start, node1)
        cost2 = policy.cost_between(start, node2)
        if cost_compare(cost1, cost2) != 0:
            raise ContractViolation(
                f"Edge cost to {node1!r} is inconsistent between equal nodes: "
                f"{cost1!r} vs {cost2!r}."
            )
        if cost_compare(cost1, zero) <= 0:
            raise ContractViolation(
                f"Edge cost to {node1!r} must be strictly greater than zero cost {zero!r}, "
                f"got {cost1!r}."
            )

    if unmatched:
        raise ContractViolation(
            f"Expanding the start node twice gave different neighbours: {unmatched!r} "
            "appeared only in the second expansion."
        )

    logger.debug(
        "Policy %s passed validation (%d start neighbours).",
        type(policy).__name__,
        len(expansion1),
    )
