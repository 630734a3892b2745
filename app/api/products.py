"""Product API endpoints.

Provides CRUD and search endpoints over the product catalog.
"""

from collections.abc import AsyncGenerator
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.api.schemas import (
    ErrorResponse,
    ProductAddRequestSchema,
    ProductResponseSchema,
    ProductUpdateRequestSchema,
    ValidationErrorResponse,
)
from app.application.catalog_service import CatalogService, get_catalog_service
from app.application.dtos import ProductAddRequest, ProductResponse, ProductUpdateRequest
from app.domain.exceptions import (
    ProductNotFoundError,
    ProductPersistenceError,
    ProductValidationError,
)
from app.domain.queries import ProductById
from app.domain.repositories import ProductRepository
from app.infrastructure.config import settings
from app.infrastructure.database import session_scope
from app.infrastructure.product_repository import (
    SqlAlchemyProductRepository,
    get_memory_repository,
)

router = APIRouter(prefix="/api/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


async def get_repository() -> AsyncGenerator[ProductRepository, None]:
    """Get the product repository for the configured backend.

    The database backend opens one session per request, committed
    after the handler returns.
    """
    if settings.repository_backend == "memory":
        yield get_memory_repository()
        return

    async with session_scope() as session:
        yield SqlAlchemyProductRepository(session)


def get_service(
    request: Request,
    repository: Annotated[ProductRepository, Depends(get_repository)],
) -> CatalogService:
    """Get catalog service with request ID."""
    request_id = getattr(request.state, "request_id", None)
    return get_catalog_service(repository, request_id=request_id)


# ============================================================================
# Converters
# ============================================================================


def response_to_schema(product: ProductResponse) -> ProductResponseSchema:
    """Convert product response DTO to response schema."""
    return ProductResponseSchema(
        product_id=product.product_id,
        product_name=product.product_name,
        category=product.category,
        unit_price=product.unit_price,
        quantity_in_stock=product.quantity_in_stock,
    )


def schema_to_add_request(body: ProductAddRequestSchema) -> ProductAddRequest:
    """Convert add request schema to DTO."""
    return ProductAddRequest(
        product_name=body.product_name,
        category=body.category,
        unit_price=body.unit_price,
        quantity_in_stock=body.quantity_in_stock,
    )


def schema_to_update_request(body: ProductUpdateRequestSchema) -> ProductUpdateRequest:
    """Convert update request schema to DTO."""
    return ProductUpdateRequest(
        product_id=body.product_id,
        product_name=body.product_name,
        category=body.category,
        unit_price=body.unit_price,
        quantity_in_stock=body.quantity_in_stock,
    )


def validation_exception(error: ProductValidationError) -> HTTPException:
    """Build a 400 response from validation failures."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error_code": "VALIDATION_ERROR",
            "message": error.message,
            "details": [
                {"field": failure.field, "message": failure.message}
                for failure in error.failures
            ],
            "errors": error.details["errors"],
        },
    )


def persistence_exception(message: str) -> HTTPException:
    """Build a 500 problem response."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "error_code": "PERSISTENCE_ERROR",
            "message": message,
        },
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[ProductResponseSchema],
    summary="List products",
    description="Get every product in the catalog.",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_service)],
) -> list[ProductResponseSchema]:
    """List all products.

    Args:
        service: Catalog service.

    Returns:
        All products, possibly empty.
    """
    products = await service.list_products()
    return [response_to_schema(p) for p in products]


@router.get(
    "/search/product-id/{product_id}",
    response_model=ProductResponseSchema | None,
    summary="Get product by ID",
    description="Get a product by its identifier; returns null when it does not exist.",
)
async def get_product_by_id(
    product_id: UUID,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponseSchema | None:
    """Get a product by ID.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        Product details, or None if not found.
    """
    product = await service.get_product(ProductById(product_id))
    return response_to_schema(product) if product is not None else None


@router.get(
    "/search/{search_string}",
    response_model=list[ProductResponseSchema],
    summary="Search products",
    description="Find products whose name or category contains the search string, ignoring case.",
)
async def search_products(
    search_string: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> list[ProductResponseSchema]:
    """Search products by name or category.

    Args:
        search_string: Text to look for.
        service: Catalog service.

    Returns:
        Matching products without duplicates.
    """
    products = await service.search_products(search_string)
    return [response_to_schema(p) for p in products]


@router.post(
    "",
    response_model=ProductResponseSchema,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Add product",
    description="Add a new product to the catalog.",
)
async def add_product(
    body: ProductAddRequestSchema,
    response: Response,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponseSchema:
    """Add a product.

    Args:
        body: Product to add.
        response: Outgoing response, used to set the Location header.
        service: Catalog service.

    Returns:
        Created product.

    Raises:
        HTTPException: On validation or persistence error.
    """
    try:
        product = await service.add_product(schema_to_add_request(body))
    except ProductValidationError as e:
        raise validation_exception(e) from e
    except ProductPersistenceError as e:
        raise persistence_exception(e.message) from e

    response.headers["Location"] = f"/api/products/search/product-id/{product.product_id}"
    return response_to_schema(product)


@router.put(
    "",
    response_model=ProductResponseSchema,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update product",
    description="Replace every attribute of an existing product.",
)
async def update_product(
    body: ProductUpdateRequestSchema,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductResponseSchema:
    """Update a product.

    Args:
        body: Full replacement of the product.
        service: Catalog service.

    Returns:
        Updated product.

    Raises:
        HTTPException: If product not found, invalid, or not persisted.
    """
    try:
        product = await service.update_product(schema_to_update_request(body))
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "PRODUCT_NOT_FOUND",
                "message": e.message,
            },
        ) from e
    except ProductValidationError as e:
        raise validation_exception(e) from e
    except ProductPersistenceError as e:
        raise persistence_exception(e.message) from e

    return response_to_schema(product)


@router.delete(
    "/{product_id}",
    response_model=bool,
    responses={
        500: {"model": ErrorResponse},
    },
    summary="Delete product",
    description="Delete a product by its identifier.",
)
async def delete_product(
    product_id: UUID,
    service: Annotated[CatalogService, Depends(get_service)],
) -> bool:
    """Delete a product.

    Args:
        product_id: Product identifier.
        service: Catalog service.

    Returns:
        True when the product was deleted.

    Raises:
        HTTPException: If nothing was deleted.
    """
    deleted = await service.delete_product(product_id)
    if not deleted:
        raise persistence_exception("Error in deleting product")
    return True
