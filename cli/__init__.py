from .commands import grid, heading

__all__ = ["grid", "heading"]
