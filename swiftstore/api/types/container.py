from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ContainerMetadata(BaseModel):
    """
    The metadata of a single storage container, corresponding to one element of
    the account's container listing.

    Listings are ordered by name, using a binary comparison of the names
    regardless of text encoding. The natural ordering of this class follows the
    same rule and ignores count and bytes.

    Instances are immutable. Use ContainerMetadata.builder() or to_builder() to
    derive a modified copy, and ContainerMetadata.from_api() to build one from
    an api response element.
    """

    model_config = ConfigDict(frozen=True)

    # name of the container
    name: str
    # number of objects in the container
    count: int = 0
    # total bytes stored in the container
    bytes: int = 0

    def __init__(
        self, name: Optional[str] = None, count: int = 0, bytes: int = 0, **data: Any
    ):
        """
        Creates the metadata record. A None name raises a ValueError (pydantic's
        ValidationError). count and bytes are taken as given.
        """
        super().__init__(name=name, count=count, bytes=bytes, **data)

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "ContainerMetadata":
        """
        Validates one element of a json container listing. Keys other than name,
        count and bytes are ignored.
        """
        return cls.model_validate(payload)

    def to_api(self) -> Dict[str, Any]:
        return self.model_dump()

    @staticmethod
    def builder() -> "ContainerMetadataBuilder":
        return ContainerMetadataBuilder()

    def to_builder(self) -> "ContainerMetadataBuilder":
        return ContainerMetadataBuilder().from_existing(self)

    def compare_to(self, other: Optional["ContainerMetadata"]) -> int:
        """
        Returns a negative number, zero or a positive number as this record sorts
        before, together with or after the other one. Any record sorts after None.
        """
        if other is None:
            return 1
        if self is other:
            return 0
        # code point order of python strings equals the byte order of their utf-8
        # encoding, so this is the same binary comparison the server uses.
        return (self.name > other.name) - (self.name < other.name)

    def __lt__(self, other):
        if not isinstance(other, ContainerMetadata):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, ContainerMetadata):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, ContainerMetadata):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, ContainerMetadata):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ContainerMetadata):
            return False
        return (self.name, self.count, self.bytes) == (
            other.name,
            other.count,
            other.bytes,
        )

    def __hash__(self):
        return hash((self.name, self.count, self.bytes))

    def __str__(self):
        return f"{{name={self.name}, count={self.count}, bytes={self.bytes}}}"


class ContainerMetadataBuilder(object):
    """
    A mutable helper to assemble a ContainerMetadata field by field, e.g.

        ContainerMetadata.builder().name("images").count(42).bytes(1048576).build()

    A builder is meant to be used by one construction sequence at a time. It is
    not safe to mutate the same builder from multiple threads.
    """

    def __init__(self):
        self._name: Optional[str] = None
        self._count: int = 0
        self._bytes: int = 0

    def name(self, value: str) -> "ContainerMetadataBuilder":
        if value is None:
            raise ValueError("name must not be None.")
        self._name = value
        return self

    def count(self, value: int) -> "ContainerMetadataBuilder":
        self._count = value
        return self

    def bytes(self, value: int) -> "ContainerMetadataBuilder":
        self._bytes = value
        return self

    def from_existing(self, record: ContainerMetadata) -> "ContainerMetadataBuilder":
        return self.name(record.name).count(record.count).bytes(record.bytes)

    def build(self) -> ContainerMetadata:
        """
        Builds the record. Raises a ValueError if name was never set.
        """
        return ContainerMetadata(self._name, self._count, self._bytes)
