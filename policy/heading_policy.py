import math
from enum import IntEnum
from typing import NamedTuple, Optional

from Pathstar.core.errors import NotAdjacent
from policy.policy_base import Policy
from puzzle.grid_world import GridWorld

MOVE_COST = 1.0
TURN_COST = 0.5


class Heading(IntEnum):
    """Direction of travel; the origin is the top-left cell, x grows downwards."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def clockwise(self) -> "Heading":
        return Heading((self + 1) % 4)

    def counterclockwise(self) -> "Heading":
        return Heading((self - 1) % 4)

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Heading.UP: (-1, 0),
    Heading.RIGHT: (0, 1),
    Heading.DOWN: (1, 0),
    Heading.LEFT: (0, -1),
}


class HeadingNode(NamedTuple):
    x: int
    y: int
    heading: Heading

    @property
    def cell(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.heading.name})"


def as_heading_node(value) -> HeadingNode:
    x, y, heading = value
    return HeadingNode(int(x), int(y), Heading(heading))


class HeadingPolicy(Policy):
    """
    A vehicle on a GridWorld that can only drive forward or turn a quarter in place.

    Driving one cell forward costs 1, a quarter turn costs 0.5. The heuristic is the
    Euclidean distance between the cells, ignoring the heading.
    """

    def __init__(
        self,
        world: GridWorld,
        start: HeadingNode,
        goal: HeadingNode,
        monotonic: bool = False,
        max_cost: Optional[float] = None,
    ):
        super().__init__(as_heading_node(start), as_heading_node(goal))
        self.world = world
        self.monotonic = monotonic
        self.max_cost = max_cost

    def expand(self, node: HeadingNode) -> list[HeadingNode]:
        dx, dy = node.heading.delta
        candidates = [
            HeadingNode(node.x + dx, node.y + dy, node.heading),
            HeadingNode(node.x, node.y, node.heading.clockwise()),
            HeadingNode(node.x, node.y, node.heading.counterclockwise()),
        ]
        return [n for n in candidates if self.world.is_free(n.x, n.y)]

    def heuristic(self, node: HeadingNode) -> float:
        goal = self.goal_node()
        if node == goal:
            return self.zero_cost()
        return math.hypot(goal.x - node.x, goal.y - node.y)

    def cost_between(self, from_node: HeadingNode, to_node: HeadingNode) -> float:
        if not self.adjacent(from_node, to_node):
            raise NotAdjacent(from_node, to_node)
        if from_node.cell == to_node.cell:
            return TURN_COST
        return MOVE_COST

    def zero_cost(self) -> float:
        return 0.0

    def adjacent(self, node1: HeadingNode, node2: HeadingNode) -> bool:
        if node1.cell == node2.cell:
            return node2.heading in (node1.heading.clockwise(), node1.heading.counterclockwise())
        if node1.heading != node2.heading:
            return False
        return abs(node1.x - node2.x) + abs(node1.y - node2.y) == 1

    def monotonic_heuristic(self) -> bool:
        return self.monotonic

    def stop_criterion_enabled(self) -> bool:
        return self.max_cost is not None

    def stop_criterion_reached(
        self, nodes_expanded: int, cost: float, heuristic: float, path_length: int
    ) -> bool:
        return cost + heuristic > self.max_cost
