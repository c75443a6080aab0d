import click

from .commands import grid, heading


@click.group()
def cli():
    """Pathstar: a best-first (A*) search engine over policy-defined graphs."""
    pass


cli.add_command(grid)
cli.add_command(heading)


if __name__ == "__main__":
    cli()
