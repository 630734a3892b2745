"""Catalog application service.

Orchestrates product operations:
- Listing, filtering and searching products
- Adding products after validation
- Replacing existing products
- Deleting products
"""

from uuid import UUID

import structlog

from app.application.dtos import ProductAddRequest, ProductResponse, ProductUpdateRequest
from app.application.mappers import (
    add_request_to_product,
    product_to_response,
    update_request_to_product,
)
from app.application.validators import (
    ProductAddRequestValidator,
    ProductUpdateRequestValidator,
)
from app.domain.entities import Product
from app.domain.exceptions import (
    ProductNotFoundError,
    ProductPersistenceError,
    ProductValidationError,
)
from app.domain.queries import (
    CategoryContains,
    ProductById,
    ProductNameContains,
    ProductQuery,
)
from app.domain.repositories import ProductRepository

logger = structlog.get_logger()


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Application service for the product catalog.

    Holds no state of its own; every operation is a short pipeline of
    validation, repository access and translation to response DTOs.

    Example usage:
        service = CatalogService(
            repository=InMemoryProductRepository(),
            add_validator=ProductAddRequestValidator(),
            update_validator=ProductUpdateRequestValidator(),
        )
        product = await service.add_product(
            ProductAddRequest(
                product_name="Widget",
                category="Electronics",
                unit_price=9.99,
                quantity_in_stock=5,
            )
        )
    """

    def __init__(
        self,
        repository: ProductRepository,
        add_validator: ProductAddRequestValidator,
        update_validator: ProductUpdateRequestValidator,
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            repository: Product repository.
            add_validator: Validator for add requests.
            update_validator: Validator for update requests.
            request_id: Request ID for correlation.
        """
        self.repository = repository
        self.add_validator = add_validator
        self.update_validator = update_validator
        self.request_id = request_id

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_products(self) -> list[ProductResponse]:
        """Get every product.

        Returns:
            All products, empty list when the catalog is empty.
        """
        products = await self.repository.get_all()
        return [product_to_response(p) for p in products]

    async def filter_products(self, query: ProductQuery) -> list[ProductResponse]:
        """Get products matching a query.

        Args:
            query: Query specification.

        Returns:
            Matching products.
        """
        products = await self.repository.get_many(query)
        return [product_to_response(p) for p in products]

    async def search_products(self, search_string: str) -> list[ProductResponse]:
        """Search products by name or category.

        Name matches and category matches are merged by product identity
        before conversion, name matches first.

        Args:
            search_string: Text to look for, case-insensitive.

        Returns:
            Products whose name or category contains the text.
        """
        by_name = await self.repository.get_many(ProductNameContains(search_string))
        by_category = await self.repository.get_many(CategoryContains(search_string))

        # dict keeps first occurrence order; Product hashes by identity
        merged: dict[Product, None] = dict.fromkeys([*by_name, *by_category])

        logger.debug(
            "Products searched",
            search_string=search_string,
            name_matches=len(by_name),
            category_matches=len(by_category),
            result_count=len(merged),
            request_id=self.request_id,
        )

        return [product_to_response(p) for p in merged]

    async def get_product(self, query: ProductQuery) -> ProductResponse | None:
        """Get the first product matching a query.

        Args:
            query: Query specification.

        Returns:
            Product if found, None otherwise.
        """
        product = await self.repository.get_one(query)
        if product is None:
            return None
        return product_to_response(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def add_product(self, request: ProductAddRequest) -> ProductResponse:
        """Add a new product.

        Args:
            request: Product to add.

        Returns:
            The stored product with its assigned identity.

        Raises:
            TypeError: If request is None.
            ProductValidationError: If the request breaks a validation rule.
            ProductPersistenceError: If the repository stored nothing.
        """
        if request is None:
            raise TypeError("request must not be None")

        failures = self.add_validator.validate(request)
        if failures:
            logger.info(
                "Product add rejected",
                fields=[f.field for f in failures],
                request_id=self.request_id,
            )
            raise ProductValidationError(failures)

        added = await self.repository.insert(add_request_to_product(request))
        if added is None:
            logger.error(
                "Repository returned no product on insert",
                product_name=request.product_name,
                request_id=self.request_id,
            )
            raise ProductPersistenceError("Error in adding product")

        logger.info(
            "Product added",
            product_id=str(added.id),
            category=added.category,
            request_id=self.request_id,
        )

        return product_to_response(added)

    async def update_product(self, request: ProductUpdateRequest) -> ProductResponse:
        """Replace an existing product.

        Existence is checked before validation, so an unknown ID is
        reported as not found even when the request is also invalid.

        Args:
            request: Full replacement of the product.

        Returns:
            The persisted product.

        Raises:
            TypeError: If request is None.
            ProductNotFoundError: If no product has the given ID.
            ProductValidationError: If the request breaks a validation rule.
            ProductPersistenceError: If the repository persisted nothing.
        """
        if request is None:
            raise TypeError("request must not be None")

        existing = None
        if request.product_id is not None:
            existing = await self.repository.get_one(ProductById(request.product_id))
        if existing is None:
            logger.info(
                "Product update for unknown product",
                product_id=str(request.product_id),
                request_id=self.request_id,
            )
            raise ProductNotFoundError(request.product_id)

        failures = self.update_validator.validate(request)
        if failures:
            logger.info(
                "Product update rejected",
                product_id=str(request.product_id),
                fields=[f.field for f in failures],
                request_id=self.request_id,
            )
            raise ProductValidationError(failures)

        updated = await self.repository.replace(update_request_to_product(request))
        if updated is None:
            logger.error(
                "Repository returned no product on replace",
                product_id=str(request.product_id),
                request_id=self.request_id,
            )
            raise ProductPersistenceError("Error in updating product")

        logger.info(
            "Product updated",
            product_id=str(updated.id),
            request_id=self.request_id,
        )

        return product_to_response(updated)

    async def delete_product(self, product_id: UUID) -> bool:
        """Delete a product.

        Args:
            product_id: Product identifier.

        Returns:
            True if the product existed and was deleted, False otherwise.
        """
        existing = await self.repository.get_one(ProductById(product_id))
        if existing is None:
            return False

        deleted = await self.repository.delete_by_id(product_id)

        logger.info(
            "Product deleted" if deleted else "Product delete failed",
            product_id=str(product_id),
            request_id=self.request_id,
        )

        return deleted


# ============================================================================
# Service Factory
# ============================================================================


def get_catalog_service(
    repository: ProductRepository,
    request_id: str | None = None,
) -> CatalogService:
    """Get catalog service instance with default validators.

    Args:
        repository: Product repository to use.
        request_id: Request ID for correlation.

    Returns:
        CatalogService instance.
    """
    return CatalogService(
        repository=repository,
        add_validator=ProductAddRequestValidator(),
        update_validator=ProductUpdateRequestValidator(),
        request_id=request_id,
    )
