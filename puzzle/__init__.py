from puzzle.grid_world import Cell, GridWorld

__all__ = ["Cell", "GridWorld"]
