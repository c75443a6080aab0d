import click

from config.pydantic_models import SearchOptions, VisualizeOptions
from policy.grid_policy import GridPolicy
from policy.heading_policy import Heading, HeadingNode, HeadingPolicy
from puzzle.grid_world import GridWorld

from .options import heading_options, search_options, visualize_options, world_options
from .search_runner import run_search_command


@click.command()
@world_options
@search_options
@visualize_options
def grid(
    world: GridWorld,
    world_name: str,
    start: tuple[int, int],
    goal: tuple[int, int],
    search_options: SearchOptions,
    visualize_options: VisualizeOptions,
    **kwargs,
):
    """Four-directional search with unit moves and a Manhattan heuristic."""
    policy = GridPolicy(
        world,
        start,
        goal,
        monotonic=search_options.monotonic,
        max_cost=search_options.max_cost,
    )
    run_search_command(
        world_name,
        world,
        policy,
        search_options,
        visualize_options,
        "Grid Search Configuration",
    )


@click.command()
@world_options
@search_options
@heading_options
@visualize_options
def heading(
    world: GridWorld,
    world_name: str,
    start: tuple[int, int],
    goal: tuple[int, int],
    start_heading: Heading,
    goal_heading: Heading,
    search_options: SearchOptions,
    visualize_options: VisualizeOptions,
    **kwargs,
):
    """Search over (x, y, heading) states: forward moves cost 1, quarter turns 0.5."""
    policy = HeadingPolicy(
        world,
        HeadingNode(*start, start_heading),
        HeadingNode(*goal, goal_heading),
        monotonic=search_options.monotonic,
        max_cost=search_options.max_cost,
    )
    run_search_command(
        world_name,
        world,
        policy,
        search_options,
        visualize_options,
        "Heading Search Configuration",
    )
