from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_cell(value: str) -> Tuple[int, int]:
    """Parse "x,y" into a cell."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Invalid cell '{value}', expected 'x,y'")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid cell '{value}', expected integers 'x,y'")


class SearchOptions(BaseModel):
    max_nodes_to_expand: int = Field(
        0, ge=0, description="Maximum number of nodes to expand. 0 means unbounded."
    )
    monotonic: bool = Field(
        False, description="Treat the heuristic as monotone (no node is expanded twice)."
    )
    max_cost: Optional[float] = Field(
        None, description="Stop once the best open score exceeds this value."
    )
    log_level: str = Field("WARNING", description="Logging level of the search engine.")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}', choose from {', '.join(LOG_LEVELS)}")
        return value


class WorldOptions(BaseModel):
    world: str = "world-4"
    start: Optional[str] = None
    goal: Optional[str] = None

    def get_start(self, default: Tuple[int, int]) -> Tuple[int, int]:
        return parse_cell(self.start) if self.start else tuple(default)

    def get_goal(self, default: Tuple[int, int]) -> Tuple[int, int]:
        return parse_cell(self.goal) if self.goal else tuple(default)


class VisualizeOptions(BaseModel):
    visualize_terminal: bool = Field(False, description="Render the path in the terminal.")


class WorldBundle(BaseModel):
    layout: List[List[int]]
    start: Tuple[int, int] = (1, 1)
    goal: Tuple[int, int] = (8, 8)
    description: str = ""
    search_options: SearchOptions = Field(default_factory=SearchOptions)

    @model_validator(mode="after")
    def _check_layout(self):
        widths = {len(row) for row in self.layout}
        if len(widths) != 1:
            raise ValueError("World layout rows must all have the same length")
        return self
