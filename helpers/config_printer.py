from numbers import Number

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from helpers.formatting import human_format
from helpers.util import convert_to_serializable_dict

TRUNCATE_LENGTH = 80


def _format_value(value):
    """Recursively apply human-friendly formatting to numeric values."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, Number):
        return human_format(value)
    if isinstance(value, dict):
        return {k: _format_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_format_value(v) for v in value]
    return value


def _maybe_truncate(value):
    s = str(value)
    if len(s) > TRUNCATE_LENGTH:
        return s[:TRUNCATE_LENGTH] + " ..."
    return value


def _add_node(parent: Tree, key: str, value):
    if isinstance(value, dict):
        branch = parent.add(f"[bold magenta]{key}[/bold magenta]")
        for k, v in value.items():
            _add_node(branch, k, v)
        return

    display_value = _maybe_truncate(value)
    item_grid = Table.grid(padding=(0, 1))
    item_grid.add_column(no_wrap=True)
    item_grid.add_column()
    if isinstance(display_value, str):
        value_renderable = Text(display_value)
    else:
        value_renderable = Pretty(display_value)
    item_grid.add_row(Text(f"{key}:", style="bold magenta"), value_renderable)
    parent.add(item_grid)


def print_config(title: str, config: dict, console: Console | None = None):
    """
    Prints a configuration as a tree wrapped in a panel.
    """
    console = console or Console()
    config = _format_value(convert_to_serializable_dict(config))

    if not config:
        layout = Text("Configuration is empty.", justify="center")
    else:
        layout = Tree("", guide_style="bright_blue")
        for key, value in config.items():
            _add_node(layout, key, value)

    panel = Panel(
        layout, title=f"[bold green]{title}[/bold green]", border_style="dim", expand=False
    )
    console.print(panel)
