"""
Account is a module that shows the usage of the storage account.
"""

from .util import console, click_group, get_client, sizeof_fmt


@click_group()
def account():
    """
    Inspect the storage account.
    """
    pass


@account.command()
def info():
    """
    Shows the number of containers, objects and bytes used by the account.
    """
    client = get_client()
    usage = client.info()
    console.print(f"Storage url: [green]{client.url}[/]")
    console.print(f"Containers:  {usage.container_count}")
    console.print(f"Objects:     {usage.object_count}")
    console.print(f"Bytes used:  {sizeof_fmt(usage.bytes_used)}")


def add_command(cli_group):
    cli_group.add_command(account)
