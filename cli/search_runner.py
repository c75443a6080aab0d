import logging

import click
from rich.console import Console

from config.pydantic_models import SearchOptions, VisualizeOptions
from helpers.config_printer import print_config
from helpers.log_utils import configure_logging
from helpers.visualization import (
    build_path_steps,
    build_result_table,
    build_solution_path_panel,
    build_world_setup_panel,
)
from Pathstar.astar import AstarCalculator
from Pathstar.core.errors import PathstarError
from Pathstar.core.result import SearchResult
from Pathstar.core.search_strategy import ExpansionPolicy
from puzzle.grid_world import GridWorld

from .config_utils import enrich_config

logger = logging.getLogger(__name__)


def run_search_command(
    world_name: str,
    world: GridWorld,
    policy: ExpansionPolicy,
    search_options: SearchOptions,
    visualize_options: VisualizeOptions,
    config_title: str,
    console: Console | None = None,
) -> SearchResult:
    console = console or Console()
    configure_logging(search_options.log_level)

    config = {
        "world_name": world_name,
        "policy": policy.__class__.__name__,
        "start": str(policy.start_node()),
        "goal": str(policy.goal_node()),
        "search_options": search_options,
        "visualize_options": visualize_options,
    }
    print_config(config_title, enrich_config(config), console=console)

    start = policy.start_node()
    console.print(
        build_world_setup_panel(
            world_name=world_name,
            world=world,
            start=start,
            goal=policy.goal_node(),
            start_heuristic=policy.heuristic(start),
        )
    )

    calculator = AstarCalculator.from_options(policy, search_options)
    try:
        result = calculator.run()
    except PathstarError as e:
        logger.debug("Search aborted", exc_info=True)
        raise click.ClickException(f"{type(e).__name__}: {e}")

    console.print(build_result_table(result))

    if result.is_success and visualize_options.visualize_terminal:
        path_steps = build_path_steps(policy, result.path)
        console.print(build_solution_path_panel(world, path_steps))

    return result
