"""Conversions between product entities and DTOs."""

from app.application.dtos import ProductAddRequest, ProductResponse, ProductUpdateRequest
from app.domain.entities import CategoryOptions, Product


def product_to_response(product: Product) -> ProductResponse:
    """Convert Product entity to response DTO."""
    return ProductResponse(
        product_id=product.product_id,  # type: ignore[arg-type]
        product_name=product.product_name,
        category=product.category,
        unit_price=product.unit_price,
        quantity_in_stock=product.quantity_in_stock,
    )


def add_request_to_product(request: ProductAddRequest) -> Product:
    """Convert add request to a Product without identity.

    Category is stored in its declared spelling.
    """
    return Product(
        id=None,
        product_name=request.product_name,
        category=CategoryOptions.canonical(request.category),
        unit_price=request.unit_price,
        quantity_in_stock=request.quantity_in_stock,
    )


def update_request_to_product(request: ProductUpdateRequest) -> Product:
    """Convert update request to a Product carrying its identity."""
    return Product(
        id=request.product_id,
        product_name=request.product_name,
        category=CategoryOptions.canonical(request.category),
        unit_price=request.unit_price,
        quantity_in_stock=request.quantity_in_stock,
    )
