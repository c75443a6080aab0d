from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from helpers.formatting import cost_format, human_format
from Pathstar.core.result import SearchResult
from puzzle.grid_world import GridWorld


def _cell_of(node) -> tuple[int, int]:
    return (int(node[0]), int(node[1]))


def build_world_setup_panel(
    world_name: str,
    world: GridWorld,
    start,
    goal,
    start_heuristic,
) -> Panel:
    grid = Table.grid(expand=False)
    grid.add_column()
    grid.add_row(Align.center(f"[bold blue]{world_name}[/bold blue]"))
    grid.add_row(Text.from_ansi(world.render(start=_cell_of(start), goal=_cell_of(goal))))
    grid.add_row(
        Text.assemble(
            ("Start ", "bold"),
            (str(start), "cyan"),
            ("  Goal ", "bold"),
            (str(goal), "cyan"),
            ("  h(start) ", "bold"),
            cost_format(start_heuristic),
        )
    )
    return Panel(grid, title="[bold blue]Search Setup[/bold blue]", expand=False)


def build_result_table(result: SearchResult) -> Table:
    result_table = Table(title="[bold]Search Result[/bold]")
    result_table.add_column("Metric", style="cyan")
    result_table.add_column("Value", justify="right")
    if result.is_success:
        result_table.add_row("Status", "[bold green]Solution Found[/bold green]")
        result_table.add_row("Cost", cost_format(result.cost))
        result_table.add_row("Path Length", str(result.path_length))
    else:
        result_table.add_row("Status", f"[bold red]{result.kind.name}[/bold red]")

    result_table.add_row("Nodes Expanded", human_format(result.nodes_expanded))
    result_table.add_row("Search Time", f"{result.elapsed_time:.4f} s")
    if result.elapsed_time > 0:
        result_table.add_row(
            "Expansions/s", human_format(result.nodes_expanded / result.elapsed_time)
        )
    return result_table


@dataclass
class PathStep:
    node: Any
    cost: Any
    dist: Any


def build_path_steps(policy, path) -> List[PathStep]:
    """Recompute g and h along a solved path."""
    steps = []
    cost = policy.zero_cost()
    for idx, node in enumerate(path):
        if idx > 0:
            cost = cost + policy.cost_between(path[idx - 1], node)
        steps.append(PathStep(node=node, cost=cost, dist=policy.heuristic(node)))
    return steps


def build_solution_path_panel(world: GridWorld, path_steps: List[PathStep]) -> Panel:
    cells = [_cell_of(step.node) for step in path_steps]
    world_view = Text.from_ansi(world.render(path=cells, start=cells[0], goal=cells[-1]))

    steps_table = Table(show_edge=False, header_style="bold yellow")
    steps_table.add_column("#", justify="right")
    steps_table.add_column("Node", style="cyan")
    steps_table.add_column("g", justify="right", style="red")
    steps_table.add_column("h", justify="right", style="blue")
    steps_table.add_column("f", justify="right", style="green")
    for idx, step in enumerate(path_steps):
        steps_table.add_row(
            str(idx),
            str(step.node),
            f"{step.cost:g}",
            f"{step.dist:g}",
            f"{step.cost + step.dist:g}",
        )

    return Panel(
        Group(Align.center(world_view), steps_table),
        title="[bold green]Solution Path[/bold green]",
        border_style="green",
        expand=False,
    )
