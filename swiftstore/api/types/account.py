from pydantic import BaseModel


class AccountInfo(BaseModel):
    """
    Account level usage, read from the X-Account-* headers of the storage url.
    """

    container_count: int = 0
    object_count: int = 0
    bytes_used: int = 0
