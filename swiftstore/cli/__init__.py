# flake8: noqa
"""
This implements the CLI for the swiftstore library. When you install the library,
you get a command line tool called `sws` that you can use to inspect a storage
account and list its containers.
"""

# Guard so that swiftstore.api never depends on things under swiftstore.cli.
import swiftstore.api as _

from .cli import sws
