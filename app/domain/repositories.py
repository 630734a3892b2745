"""Repository port for products.

The catalog service depends only on this interface; concrete storage
lives in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from uuid import UUID

from app.domain.entities import Product
from app.domain.queries import ProductQuery


class ProductRepository(ABC):
    """Abstract product storage.

    Write operations report failure through their return value
    (None or False) rather than raising.
    """

    @abstractmethod
    async def get_all(self) -> Sequence[Product]:
        """Get every product.

        Returns:
            All products, empty when none exist.
        """

    @abstractmethod
    async def get_many(self, query: ProductQuery) -> Sequence[Product]:
        """Get products matching a query.

        Args:
            query: Query specification.

        Returns:
            Matching products.
        """

    @abstractmethod
    async def get_one(self, query: ProductQuery) -> Product | None:
        """Get the first product matching a query.

        Args:
            query: Query specification.

        Returns:
            Product if found, None otherwise.
        """

    @abstractmethod
    async def insert(self, product: Product) -> Product | None:
        """Insert a new product and assign its identity.

        Args:
            product: Product without an identity.

        Returns:
            Stored product with identity, None on failure.
        """

    @abstractmethod
    async def replace(self, product: Product) -> Product | None:
        """Replace every attribute of an existing product.

        Args:
            product: Product carrying the identity to replace.

        Returns:
            Persisted product, None on failure.
        """

    @abstractmethod
    async def delete_by_id(self, product_id: UUID) -> bool:
        """Delete a product by identity.

        Args:
            product_id: Product identifier.

        Returns:
            True if a product was deleted.
        """
