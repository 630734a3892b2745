"""Domain layer - Entities, query specifications, repository port, exceptions.

This module exports the catalog domain building blocks:

- **Entities**: Objects with identity (Product)
- **Query Specifications**: Closed set of product selections
- **Repository Port**: Storage interface consumed by the catalog service
- **Exceptions**: Domain-specific errors

Example usage:
    from app.domain import CategoryContains, Product

    product = Product(product_name="Widget", category="Electronics")
    assert CategoryContains("elect").matches(product)
"""

# Base classes
from app.domain.base import Entity

# Entities
from app.domain.entities import CategoryOptions, Product

# Exceptions
from app.domain.exceptions import (
    CatalogError,
    DomainError,
    ProductNotFoundError,
    ProductPersistenceError,
    ProductValidationError,
    ValidationFailure,
)

# Query specifications
from app.domain.queries import (
    AllProducts,
    CategoryContains,
    ProductById,
    ProductNameContains,
    ProductQuery,
)

# Repository port
from app.domain.repositories import ProductRepository

__all__ = [
    # Base
    "Entity",
    # Entities
    "CategoryOptions",
    "Product",
    # Exceptions
    "CatalogError",
    "DomainError",
    "ProductNotFoundError",
    "ProductPersistenceError",
    "ProductValidationError",
    "ValidationFailure",
    # Queries
    "AllProducts",
    "CategoryContains",
    "ProductById",
    "ProductNameContains",
    "ProductQuery",
    # Repositories
    "ProductRepository",
]
