"""
Overall configurations and constants for the swiftstore python library.
"""

import os
from pathlib import Path

# Cache directory for swiftstore's local storage, such as logs.
# In cases like unit testing, you can change this to a directory that is available
# via the environment variable `SWIFTSTORE_CACHE_DIR`, BEFORE IMPORTING SWIFTSTORE.
#
# Implementation note: cache directory is not always created. We create it when
# we need to write to it.
CACHE_DIR = Path(
    os.environ.get("SWIFTSTORE_CACHE_DIR", Path.home() / ".cache" / "swiftstore")
)
LOGS_DIR = CACHE_DIR / "logs"

################################################################################
# Configurations you can change to customize swiftstore's behavior.
################################################################################

# Timeout, in seconds, for every API call.
_DEFAULT_API_TIMEOUT = 120
try:
    API_TIMEOUT = int(
        os.environ.get("SWIFTSTORE_API_TIMEOUT", str(_DEFAULT_API_TIMEOUT))
    )
except ValueError:
    API_TIMEOUT = _DEFAULT_API_TIMEOUT
    print(
        "You have set an invalid value for SWIFTSTORE_API_TIMEOUT"
        f" {os.environ.get('SWIFTSTORE_API_TIMEOUT')}. Using default value of"
        f" {API_TIMEOUT} seconds."
    )


def _to_bool(s: str) -> bool:
    """
    Convert a string to a boolean value.
    """
    if not isinstance(s, str):
        raise TypeError(f"Expected a string, got {type(s)}")
    true_values = ("yes", "true", "t", "1", "y", "on")
    false_values = ("no", "false", "f", "0", "n", "off", "")
    s = s.lower()
    if s in true_values:
        return True
    elif s in false_values:
        return False
    else:
        raise ValueError(
            f"Invalid boolean value: {s}. Valid true values: {true_values}. Valid false"
            f" values: {false_values}."
        )

