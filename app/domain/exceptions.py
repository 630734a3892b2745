"""Domain exceptions.

All domain-level errors raised by the catalog service. The API layer
maps each of them to an HTTP error response.
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


@dataclass(frozen=True)
class ValidationFailure:
    """A single field-level rule violation.

    Attributes:
        field: Name of the offending request field.
        message: Human-readable description of the violation.
    """

    field: str
    message: str


class CatalogError(DomainError):
    """Base class for product catalog errors."""

    pass


class ProductValidationError(CatalogError):
    """Raised when a product request breaks one or more validation rules."""

    def __init__(self, failures: list[ValidationFailure]) -> None:
        """Initialize product validation error.

        Args:
            failures: Field-level violations, in rule order.
        """
        self.failures = list(failures)
        super().__init__(
            ", ".join(failure.message for failure in self.failures),
            details={"errors": self.errors_by_field()},
        )

    def errors_by_field(self) -> dict[str, list[str]]:
        """Group violation messages by field name.

        Returns:
            Mapping of field name to its messages.
        """
        grouped: dict[str, list[str]] = {}
        for failure in self.failures:
            grouped.setdefault(failure.field, []).append(failure.message)
        return grouped


class ProductNotFoundError(CatalogError):
    """Raised when a referenced product does not exist."""

    def __init__(self, product_id: UUID | None) -> None:
        """Initialize product not found error.

        Args:
            product_id: Identifier that was looked up.
        """
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": str(product_id) if product_id else None},
        )
        self.product_id = product_id


class ProductPersistenceError(CatalogError):
    """Raised when the repository reports no result for a valid request."""

    pass
