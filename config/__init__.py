from .pydantic_models import (
    SearchOptions,
    VisualizeOptions,
    WorldBundle,
    WorldOptions,
    parse_cell,
)
from .world_registry import world_bundles

__all__ = [
    "world_bundles",
    "SearchOptions",
    "VisualizeOptions",
    "WorldBundle",
    "WorldOptions",
    "parse_cell",
]
