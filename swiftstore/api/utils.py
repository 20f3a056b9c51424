"""
Utility functions and errors for the storage API.
"""

from typing import Optional
from urllib.parse import urlparse


class StorageError(RuntimeError):
    def __init__(self, message, storage_url=None, auth_token=None):
        super().__init__(message)
        self.storage_url = storage_url
        self.auth_token = auth_token

    def __str__(self):
        details = ", ".join(
            f"{key.replace('_', ' ').title()}: {value}"
            for key, value in vars(self).items()
            if value and key != "args"
        )
        return f"{self.args[0]} ({details})" if details else self.args[0]


class StorageUnauthorizedError(StorageError):
    def __init__(self, storage_url=None, auth_token=None):
        super().__init__(
            "Unauthorized access to the storage account", storage_url, auth_token
        )


class StorageNotFoundError(StorageError):
    def __init__(self, storage_url=None, auth_token=None):
        super().__init__(
            "Storage account not found. Check that the storage url points to an"
            " existing account.",
            storage_url,
            auth_token,
        )


def mask_token(auth_token: Optional[str]) -> str:
    """
    Returns a hint of the token that is safe to print, e.g. "ab****yz".
    """
    if not auth_token:
        return ""
    return auth_token[:2] + "****" + auth_token[-2:]


def is_valid_url(candidate_str: str) -> bool:
    parsed = urlparse(candidate_str)
    return parsed.scheme != "" and parsed.netloc != ""
