"""Validation rules for product requests.

Validators never raise for bad input; they return the list of
violations, empty when the request is valid.
"""

import math
import sys
from uuid import UUID

from app.application.dtos import ProductAddRequest, ProductUpdateRequest
from app.domain.entities import CategoryOptions
from app.domain.exceptions import ValidationFailure

MAX_UNIT_PRICE = sys.float_info.max

# Largest value the quantity_in_stock INTEGER column can hold
MAX_QUANTITY_IN_STOCK = 2**31 - 1

NIL_UUID = UUID(int=0)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def _number_in_range(value: object, maximum: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return 0 <= value <= maximum


def _integer_in_range(value: object, maximum: int) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= maximum


class ProductAddRequestValidator:
    """Checks the fields shared by add and update requests."""

    def validate(self, request: ProductAddRequest | ProductUpdateRequest) -> list[ValidationFailure]:
        """Validate product attributes.

        Args:
            request: Add (or update) request to check.

        Returns:
            Violations in rule order.
        """
        failures: list[ValidationFailure] = []

        if _is_blank(request.product_name):
            failures.append(
                ValidationFailure("product_name", "Product Name can't be blank")
            )

        if not CategoryOptions.is_valid(request.category):
            failures.append(ValidationFailure("category", "Category isn't valid"))

        if not _number_in_range(request.unit_price, MAX_UNIT_PRICE):
            failures.append(
                ValidationFailure(
                    "unit_price",
                    f"Unit Price should be between 0 to {MAX_UNIT_PRICE}",
                )
            )

        if not _integer_in_range(request.quantity_in_stock, MAX_QUANTITY_IN_STOCK):
            failures.append(
                ValidationFailure(
                    "quantity_in_stock",
                    f"Quantity in Stock should be between 0 to {MAX_QUANTITY_IN_STOCK}",
                )
            )

        return failures


class ProductUpdateRequestValidator(ProductAddRequestValidator):
    """Add-request rules plus a required, non-nil product ID."""

    def validate(self, request: ProductUpdateRequest) -> list[ValidationFailure]:  # type: ignore[override]
        """Validate an update request.

        Args:
            request: Update request to check.

        Returns:
            Violations in rule order, product ID first.
        """
        failures: list[ValidationFailure] = []

        if request.product_id is None or request.product_id == NIL_UUID:
            failures.append(ValidationFailure("product_id", "Product ID can't be blank"))

        failures.extend(super().validate(request))
        return failures
