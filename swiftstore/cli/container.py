"""
Container is a module that lists the containers of the storage account.
"""

import click
from rich.table import Table

from .util import console, click_group, get_client, sizeof_fmt


_SORT_KEYS = {
    # natural ordering of the records, i.e. binary order of the names
    "name": None,
    "count": lambda c: (-c.count, c.name),
    "bytes": lambda c: (-c.bytes, c.name),
}


@click_group()
def container():
    """
    Manage the containers of the storage account.
    """
    pass


@container.command(name="list")
@click.option(
    "--prefix",
    "-p",
    help="Only list containers whose name starts with this.",
    default=None,
)
@click.option(
    "--sort-by",
    "-s",
    type=click.Choice(sorted(_SORT_KEYS)),
    default="name",
    show_default=True,
    help="Sort by name, or by object count or size (largest first).",
)
def list_command(prefix, sort_by):
    """
    Lists all containers of the storage account.
    """
    client = get_client()
    containers = client.container.list(prefix=prefix)

    if not containers:
        console.print("No containers found.")
        return

    containers = sorted(containers, key=_SORT_KEYS[sort_by])
    table = Table(title="Containers", show_lines=True)
    table.add_column("name")
    table.add_column("objects")
    table.add_column("size")
    for c in containers:
        table.add_row(c.name, str(c.count), sizeof_fmt(c.bytes))
    console.print(table)


def add_command(cli_group):
    cli_group.add_command(container)
