"""Application layer module.

Contains the catalog service (use cases) together with the request
validators and entity/DTO mappers it orchestrates.
"""

from app.application.catalog_service import (
    CatalogService,
    get_catalog_service,
)
from app.application.dtos import (
    ProductAddRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from app.application.validators import (
    ProductAddRequestValidator,
    ProductUpdateRequestValidator,
)

__all__ = [
    "CatalogService",
    "get_catalog_service",
    "ProductAddRequest",
    "ProductResponse",
    "ProductUpdateRequest",
    "ProductAddRequestValidator",
    "ProductUpdateRequestValidator",
]
