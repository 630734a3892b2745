"""Base classes for domain layer.

Provides the entity abstraction shared by catalog domain objects.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID


# ============================================================================
# Entity Base
# ============================================================================


T = TypeVar("T", bound=UUID | str | None)


@dataclass(eq=False)
class Entity(ABC, Generic[T]):
    """Base class for entities.

    Entities have identity that persists across state changes.
    Two entities are equal if they have the same identity,
    regardless of their other attributes. An entity whose identity
    has not been assigned yet is only equal to itself.

    Attributes:
        id: Unique identifier for this entity.
    """

    id: T

    def __eq__(self, other: object) -> bool:
        """Compare entities by identity.

        Args:
            other: Object to compare with.

        Returns:
            True if other is same type with same id.
        """
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash entity by identity.

        Returns:
            Hash of the entity id.
        """
        if self.id is None:
            return object.__hash__(self)
        return hash(self.id)
