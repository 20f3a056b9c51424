import click

import swiftstore
from . import account
from . import container

from .util import click_group

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.version_option(swiftstore.__version__, "-v", "--version")
@click_group(context_settings=CONTEXT_SETTINGS)
def sws():
    """
    sws is the commandline interface of the swiftstore library. It inspects an
    object storage account and lists its containers. Point it at an account with

    `export SWIFTSTORE_STORAGE_URL=https://swift.example.com/v1/AUTH_account`
    `export SWIFTSTORE_AUTH_TOKEN=<token>`
    """
    pass


# Add subcommands
account.add_command(sws)
container.add_command(sws)


if __name__ == "__main__":
    sws()
