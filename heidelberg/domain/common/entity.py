"""
Base class for Entities.

Entities have an identity that runs through time. Two entities are equal if
they have the same identity, regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed entity identifiers.

    Reader sessions live only in memory, so identifiers wrap a UUID
    generated on creation rather than a database key.
    """

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build an identifier from its string form. Raises ValueError if malformed."""
        return cls(UUID(raw))

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
