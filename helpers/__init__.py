from .config_printer import print_config
from .formatting import (
    HUMAN_INT,
    cost_format,
    human_format,
    human_format_to_float,
)
from .log_utils import configure_logging
from .util import convert_to_serializable_dict
from .visualization import (
    PathStep,
    build_path_steps,
    build_result_table,
    build_solution_path_panel,
    build_world_setup_panel,
)

__all__ = [
    # Config
    "print_config",
    # Formatting
    "HUMAN_INT",
    "cost_format",
    "human_format",
    "human_format_to_float",
    # Logging
    "configure_logging",
    # Util
    "convert_to_serializable_dict",
    # Visualization
    "PathStep",
    "build_path_steps",
    "build_result_table",
    "build_solution_path_panel",
    "build_world_setup_panel",
]
