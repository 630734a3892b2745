"""API schemas for the product catalog API.

Pydantic models for request/response validation and serialization.
Field-level business rules are applied by the catalog service, so
request schemas only enforce JSON types.
"""

from uuid import UUID

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class ValidationErrorResponse(ErrorResponse):
    """Error response for rejected product requests."""

    errors: dict[str, list[str]] = Field(
        default_factory=dict, description="Validation messages keyed by field"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductAddRequestSchema(BaseModel):
    """Request to add a product."""

    product_name: str | None = Field(default=None, description="Product name")
    category: str | None = Field(
        default=None,
        description="One of Electronics, HomeAppliances, Clothing, Accessories, Furniture",
    )
    unit_price: float | None = Field(default=None, description="Price per unit")
    quantity_in_stock: int | None = Field(default=None, description="Units in stock")


class ProductUpdateRequestSchema(ProductAddRequestSchema):
    """Request to replace an existing product."""

    product_id: UUID | None = Field(default=None, description="Product identifier")


class ProductResponseSchema(BaseModel):
    """Response for a stored product."""

    product_id: UUID = Field(..., description="Product identifier")
    product_name: str | None = Field(default=None, description="Product name")
    category: str | None = Field(default=None, description="Product category")
    unit_price: float | None = Field(default=None, description="Price per unit")
    quantity_in_stock: int | None = Field(default=None, description="Units in stock")
