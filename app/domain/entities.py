"""Domain entities for the product catalog."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from app.domain.base import Entity


class CategoryOptions(str, Enum):
    """Closed set of product categories accepted by the catalog."""

    ELECTRONICS = "Electronics"
    HOME_APPLIANCES = "HomeAppliances"
    CLOTHING = "Clothing"
    ACCESSORIES = "Accessories"
    FURNITURE = "Furniture"

    @classmethod
    def values(cls) -> list[str]:
        """Get the string value of every category.

        Returns:
            Category values in declaration order.
        """
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: object) -> "CategoryOptions | None":
        """Look up a category by value, ignoring case.

        Args:
            value: Candidate category value.

        Returns:
            Matching category, or None if value names no category.
        """
        if not isinstance(value, str):
            return None
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        return None

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Check whether a value names a known category, ignoring case."""
        return cls.parse(value) is not None

    @classmethod
    def canonical(cls, value: str | None) -> str | None:
        """Get the declared spelling of a category value.

        Unknown values are returned unchanged.
        """
        member = cls.parse(value)
        return member.value if member is not None else value


@dataclass(eq=False)
class Product(Entity[UUID | None]):
    """A product in the catalog.

    The identity is assigned by the repository on insert; until then
    ``id`` is None. Category is stored as a plain string; membership in
    :class:`CategoryOptions` is enforced by request validation, not here.

    Attributes:
        id: Product identifier (``ProductID``).
        product_name: Display name.
        category: Category value.
        unit_price: Price per unit.
        quantity_in_stock: Units available.
    """

    id: UUID | None = None
    product_name: str | None = None
    category: str | None = None
    unit_price: float | None = None
    quantity_in_stock: int | None = None

    @property
    def product_id(self) -> UUID | None:
        """Alias for the entity identity."""
        return self.id
