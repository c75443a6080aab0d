from typing import Optional

from Pathstar.core.errors import NotAdjacent
from policy.policy_base import Policy
from puzzle.grid_world import Cell, GridWorld

MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))


class GridPolicy(Policy):
    """
    Four-directional moves between free cells of a GridWorld with unit cost.
    The heuristic is the Manhattan distance to the goal, which is monotone on this graph.

    Args:
        world: The grid to search.
        start: Start cell.
        goal: Goal cell.
        monotonic: Report the heuristic as monotone to the calculator.
        max_cost: If set, stop once the best open score exceeds it.
    """

    def __init__(
        self,
        world: GridWorld,
        start: Cell,
        goal: Cell,
        monotonic: bool = False,
        max_cost: Optional[float] = None,
    ):
        super().__init__(tuple(start), tuple(goal))
        self.world = world
        self.monotonic = monotonic
        self.max_cost = max_cost

    def expand(self, node: Cell) -> list[Cell]:
        x, y = node
        return [(x + dx, y + dy) for dx, dy in MOVES if self.world.is_free(x + dx, y + dy)]

    def heuristic(self, node: Cell) -> int:
        goal_x, goal_y = self.goal_node()
        return abs(goal_x - node[0]) + abs(goal_y - node[1])

    def cost_between(self, from_node: Cell, to_node: Cell) -> int:
        if not self.adjacent(from_node, to_node):
            raise NotAdjacent(from_node, to_node)
        return 1

    def zero_cost(self) -> int:
        return 0

    def adjacent(self, node1: Cell, node2: Cell) -> bool:
        return abs(node1[0] - node2[0]) + abs(node1[1] - node2[1]) == 1

    def monotonic_heuristic(self) -> bool:
        return self.monotonic

    def stop_criterion_enabled(self) -> bool:
        return self.max_cost is not None

    def stop_criterion_reached(
        self, nodes_expanded: int, cost: int, heuristic: int, path_length: int
    ) -> bool:
        return cost + heuristic > self.max_cost
