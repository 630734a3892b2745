"""Product data transfer objects.

Request and response shapes exchanged with the catalog service.
Request fields are optional so that missing values reach validation
instead of failing at construction.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class ProductAddRequest:
    """Request to add a new product."""

    product_name: str | None = None
    category: str | None = None
    unit_price: float | None = None
    quantity_in_stock: int | None = None


@dataclass
class ProductUpdateRequest:
    """Request to replace an existing product."""

    product_id: UUID | None = None
    product_name: str | None = None
    category: str | None = None
    unit_price: float | None = None
    quantity_in_stock: int | None = None


@dataclass(frozen=True)
class ProductResponse:
    """Read-only view of a stored product."""

    product_id: UUID
    product_name: str | None
    category: str | None
    unit_price: float | None
    quantity_in_stock: int | None
