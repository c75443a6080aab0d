from functools import wraps

import click
from pydantic import ValidationError

from config import world_bundles
from config.pydantic_models import LOG_LEVELS, SearchOptions, VisualizeOptions, WorldOptions
from helpers.formatting import HUMAN_INT
from policy.heading_policy import Heading
from puzzle.grid_world import GridWorld


def world_options(func: callable) -> callable:
    @click.option(
        "-w",
        "--world",
        default="world-4",
        type=click.Choice(list(world_bundles.keys())),
        help="Registered world to search",
    )
    @click.option("--start", default=None, type=str, help="Start cell as 'x,y'")
    @click.option("--goal", default=None, type=str, help="Goal cell as 'x,y'")
    @wraps(func)
    def wrapper(*args, **kwargs):
        world_opts = WorldOptions(
            world=kwargs.pop("world"), start=kwargs.pop("start"), goal=kwargs.pop("goal")
        )
        world_bundle = world_bundles[world_opts.world]
        world = GridWorld.from_rows(world_bundle.layout)

        try:
            start = world_opts.get_start(world_bundle.start)
            goal = world_opts.get_goal(world_bundle.goal)
        except ValueError as e:
            raise click.BadParameter(str(e))
        for name, cell in (("start", start), ("goal", goal)):
            if not world.is_valid(*cell):
                raise click.BadParameter(
                    f"{name} cell {cell} is outside the {world.shape[0]}x{world.shape[1]} world"
                )
            if not world.is_free(*cell):
                raise click.BadParameter(f"{name} cell {cell} is a wall")

        kwargs["world"] = world
        kwargs["world_name"] = world_opts.world
        kwargs["world_bundle"] = world_bundle
        kwargs["start"] = start
        kwargs["goal"] = goal
        return func(*args, **kwargs)

    return wrapper


def search_options(func: callable) -> callable:
    @click.option(
        "-m",
        "--max_nodes",
        "max_nodes_to_expand",
        default=None,
        type=HUMAN_INT,
        help="Maximum number of nodes to expand (0 = unbounded, accepts 1K style values)",
    )
    @click.option(
        "--monotonic", is_flag=True, default=None, help="Treat the heuristic as monotone"
    )
    @click.option(
        "--max_cost",
        default=None,
        type=float,
        help="Stop once the best open score exceeds this value",
    )
    @click.option(
        "--log_level",
        default=None,
        type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
        help="Logging level of the search engine",
    )
    @wraps(func)
    def wrapper(*args, **kwargs):
        world_bundle = kwargs["world_bundle"]
        base_search_options = world_bundle.search_options

        overrides = {
            k: v for k, v in kwargs.items() if v is not None and k in SearchOptions.model_fields
        }
        try:
            search_opts = SearchOptions(**{**base_search_options.model_dump(), **overrides})
        except ValidationError as e:
            raise click.BadParameter(str(e))

        kwargs["search_options"] = search_opts
        for k in SearchOptions.model_fields:
            kwargs.pop(k, None)
        return func(*args, **kwargs)

    return wrapper


def visualize_options(func: callable) -> callable:
    @click.option(
        "-vt",
        "--visualize_terminal",
        is_flag=True,
        default=False,
        help="Render the solution path in the terminal",
    )
    @wraps(func)
    def wrapper(*args, **kwargs):
        kwargs["visualize_options"] = VisualizeOptions(
            visualize_terminal=kwargs.pop("visualize_terminal")
        )
        return func(*args, **kwargs)

    return wrapper


def heading_options(func: callable) -> callable:
    choices = click.Choice([h.name for h in Heading], case_sensitive=False)

    @click.option("--start_heading", default="UP", type=choices, help="Heading at the start")
    @click.option("--goal_heading", default="DOWN", type=choices, help="Heading at the goal")
    @wraps(func)
    def wrapper(*args, **kwargs):
        kwargs["start_heading"] = Heading[kwargs.pop("start_heading").upper()]
        kwargs["goal_heading"] = Heading[kwargs.pop("goal_heading").upper()]
        return func(*args, **kwargs)

    return wrapper
