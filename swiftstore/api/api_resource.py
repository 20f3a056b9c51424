from pydantic import BaseModel
from requests import Response
from typing import TYPE_CHECKING, List, TypeVar, Type, NoReturn

from loguru import logger

if TYPE_CHECKING:
    # only used for type hinting, but avoids circular imports
    from .client import APIClient


class ClientError(RuntimeError):
    def __init__(self, response: Response):
        super().__init__(
            f"Client error during API call: {response.status_code} {response.text}"
        )
        self.response = response


class ServerError(RuntimeError):
    def __init__(self, response: Response):
        super().__init__(
            f"Server error during API call: {response.status_code} {response.text}"
        )
        self.response = response


class APIResource(object):
    """
    APIResource is a base class for all api implementations. It is registered
    with the APIClient object and provides a set of utility functions to
    interact with the storage api. For example, for all container related
    operations, the ContainerAPI class is used which is a subclass of APIResource.

    Implementation note: if you are implementing a new set of API, subclass
    APIResource and register it in APIClient.__init__, e.g.
        self.magic = MagicAPI(self)
    See swiftstore/api/container.py for an example.
    """

    _client: "APIClient"

    def __init__(self, _client: "APIClient"):
        """
        Initializes the APIResource with the APIClient object. You should not
        need to explicitly call this method, as APIClient does it for you.
        """
        self._client = _client
        self._get = _client._get

    # A type variable to represent a subclass of BaseModel
    T = TypeVar("T", bound=BaseModel)

    def _raise_if_not_ok(self, response: Response):
        """
        Raise a ClientError or ServerError if the response is not ok.
        """
        if response.status_code >= 400 and response.status_code < 500:
            raise ClientError(response)
        elif response.status_code >= 500:
            raise ServerError(response)
        return response

    def _print_programming_error(self, response: Response, e: Exception) -> NoReturn:
        """
        Raises a programming error. This should not happen in production.
        """
        raise RuntimeError(
            "You encountered a programming error. Please report this, and include"
            " the following debug info:\n*** begin of debug info ***\nresponse"
            f" returned {response.status_code}, but the content cannot be decoded"
            f" as expected.\nresponse.text: {response.text}\n\nexception"
            f" details:\n{e}\n*** end of debug info ***"
        )

    def ensure_list(self, response: Response, EnsuredType: Type[T]) -> List[T]:
        """
        Utility function to ensure that the response is a list of the given type.
        A 204 No Content response is an empty list.
        """
        self._raise_if_not_ok(response)
        if response.status_code == 204 or not response.content:
            return []
        try:
            return [EnsuredType.model_validate(item) for item in response.json()]
        except Exception as e:
            logger.trace(f"Cannot decode response as a list: {response.text}")
            self._print_programming_error(response, e)

    def ensure_ok(self, response: Response) -> bool:
        """
        Utility function to ensure that the response is ok.
        """
        self._raise_if_not_ok(response)
        return True

