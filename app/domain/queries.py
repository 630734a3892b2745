"""Query specifications for selecting products.

A closed set of query shapes that repositories know how to evaluate.
Each specification can also test a single product in memory.
"""

from dataclasses import dataclass
from uuid import UUID

from app.domain.entities import Product


def _contains(value: str | None, text: str) -> bool:
    """Case-insensitive containment; missing values never match."""
    if value is None:
        return False
    return text.lower() in value.lower()


@dataclass(frozen=True)
class AllProducts:
    """Select every product."""

    def matches(self, product: Product) -> bool:
        return True


@dataclass(frozen=True)
class ProductById:
    """Select the product with the given identity.

    Attributes:
        product_id: Identity to match.
    """

    product_id: UUID

    def matches(self, product: Product) -> bool:
        return product.id == self.product_id


@dataclass(frozen=True)
class ProductNameContains:
    """Select products whose name contains text, ignoring case.

    Attributes:
        text: Substring to look for.
    """

    text: str

    def matches(self, product: Product) -> bool:
        return _contains(product.product_name, self.text)


@dataclass(frozen=True)
class CategoryContains:
    """Select products whose category contains text, ignoring case.

    Attributes:
        text: Substring to look for.
    """

    text: str

    def matches(self, product: Product) -> bool:
        return _contains(product.category, self.text)


ProductQuery = AllProducts | ProductById | ProductNameContains | CategoryContains
