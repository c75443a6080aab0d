from typing import Iterable, Optional, Sequence

import numpy as np
from termcolor import colored

Cell = tuple[int, int]


class GridWorld:
    """
    Rectangular world of free cells and walls, indexed as (x, y) = (row, column).
    Cells outside the array are invalid.
    """

    walls: np.ndarray

    def __init__(self, walls: np.ndarray):
        walls = np.asarray(walls, dtype=np.bool_)
        if walls.ndim != 2:
            raise ValueError(f"GridWorld needs a 2D wall array, got shape {walls.shape}")
        self.walls = walls

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "GridWorld":
        return cls(np.array(rows, dtype=np.int8) > 0)

    @property
    def shape(self) -> tuple[int, int]:
        return self.walls.shape

    def is_valid(self, x: int, y: int) -> bool:
        height, width = self.walls.shape
        return 0 <= x < height and 0 <= y < width

    def is_wall(self, x: int, y: int) -> bool:
        return bool(self.walls[x, y])

    def is_free(self, x: int, y: int) -> bool:
        return self.is_valid(x, y) and not self.is_wall(x, y)

    def render(
        self,
        path: Optional[Iterable[Cell]] = None,
        start: Optional[Cell] = None,
        goal: Optional[Cell] = None,
    ) -> str:
        path_cells = set(path) if path is not None else set()

        def to_char(x, y):
            if (x, y) == start:
                return colored("S", "green")
            if (x, y) == goal:
                return colored("G", "red")
            if self.walls[x, y]:
                return "■"
            if (x, y) in path_cells:
                return colored("●", "yellow")
            return " "

        height, width = self.walls.shape
        return "\n".join(
            " ".join(to_char(x, y) for y in range(width)) for x in range(height)
        )

    def __str__(self) -> str:
        return self.render()
