# flake8: noqa
"""
The swiftstore python library.
"""

from ._version import __version__

# The api client and the container metadata record are the main classes that
# we want to expose.
from .api.client import APIClient
from .api.types.container import ContainerMetadata, ContainerMetadataBuilder
