"""
The api/client module serves as the single entry point of all apis, holding
information such as the storage url and auth token, as well as caching runtime
objects such as http sessions.
"""

import os
import requests
from typing import Optional, Dict

from loguru import logger

from .. import config
from .._internal.logging import log as internal_log

from .api_resource import APIResource
from .container import ContainerAPI
from .types.account import AccountInfo
from .utils import (
    StorageUnauthorizedError,
    StorageNotFoundError,
    is_valid_url,
    mask_token,
)


class APIClient(object):
    """
    A storage API client that is associated with one account. This class holds
    all the apis callable by the user.
    """

    def __init__(
        self,
        storage_url: Optional[str] = None,
        auth_token: Optional[str] = None,
    ):
        """
        Creates an account api client. The storage url is resolved in the
        following order:
        - the given storage_url;
        - the environment variable SWIFTSTORE_STORAGE_URL.
        If neither is available, a RuntimeError is raised. The auth token is
        resolved the same way, from auth_token and SWIFTSTORE_AUTH_TOKEN, and is
        optional.
        """
        url = storage_url or os.environ.get("SWIFTSTORE_STORAGE_URL")
        if url is None:
            raise RuntimeError(
                "You must specify storage_url or set SWIFTSTORE_STORAGE_URL in the"
                " environment, e.g. https://swift.example.com/v1/AUTH_account."
            )
        if not is_valid_url(url):
            raise ValueError(
                f"Invalid storage url {url}: must be a full http(s) url."
            )
        auth_token = auth_token or os.environ.get("SWIFTSTORE_AUTH_TOKEN")
        self.url: str = url.rstrip("/")
        self.auth_token: Optional[str] = auth_token

        self._header = {}
        if self.auth_token:
            self._header["X-Auth-Token"] = self.auth_token
        self._timeout = config.API_TIMEOUT
        self._session = requests.Session()
        if os.environ.get("SWIFTSTORE_DEBUG_HEADERS"):
            # SWIFTSTORE_DEBUG_HEADERS should be in the format of comma separated
            # header_key=header_value pairs.
            try:
                header_pairs = os.environ["SWIFTSTORE_DEBUG_HEADERS"].split(",")
                for pair in header_pairs:
                    key, value = pair.split("=")
                    self._header.setdefault(key, value)
            except ValueError:
                raise RuntimeError(
                    "SWIFTSTORE_DEBUG_HEADERS should be in the format of comma"
                    " separated header_key=header_value pairs. Got"
                    f" {os.environ['SWIFTSTORE_DEBUG_HEADERS']}"
                )
        logger.trace(
            f"Created api client for {self.url} (token: {mask_token(self.auth_token)})"
        )

        # Add individual APIs
        self.container = ContainerAPI(self)

    def _safe_add(self, kwargs: Dict) -> Dict:
        """
        Internal utility function to add default values to the kwargs.
        """
        kwargs.setdefault("headers", dict(self._header))
        kwargs.setdefault("timeout", self._timeout)
        for k, v in self._header.items():
            kwargs["headers"].setdefault(k, v)
        return kwargs

    def _get(self, path: str, *args, **kwargs):
        internal_log(f"GET {self.url + path}")
        return self._session.get(self.url + path, *args, **self._safe_add(kwargs))

    def _head(self, path: str, *args, **kwargs):
        internal_log(f"HEAD {self.url + path}")
        return self._session.head(self.url + path, *args, **self._safe_add(kwargs))

    def info(self) -> AccountInfo:
        """
        Returns the account usage. Raises StorageUnauthorizedError if the token is
        rejected, and StorageNotFoundError if the account does not exist.
        """
        response = self._head("")
        if response.status_code == 401:
            raise StorageUnauthorizedError(
                storage_url=self.url, auth_token=mask_token(self.auth_token)
            )
        if response.status_code == 404:
            raise StorageNotFoundError(
                storage_url=self.url, auth_token=mask_token(self.auth_token)
            )
        APIResource(self).ensure_ok(response)
        headers = response.headers
        return AccountInfo(
            container_count=int(headers.get("X-Account-Container-Count", 0)),
            object_count=int(headers.get("X-Account-Object-Count", 0)),
            bytes_used=int(headers.get("X-Account-Bytes-Used", 0)),
        )

    def token(self) -> Optional[str]:
        """
        Returns the current auth token.
        """
        return self.auth_token
