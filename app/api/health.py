"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.config import settings
from app.infrastructure.database import check_connection

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="product-service",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Check if service is ready to accept requests.

    The database is only probed when it backs the product repository.

    Returns:
        Readiness status, 503 when the database is unreachable.
    """
    if settings.repository_backend == "database":
        try:
            await check_connection()
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database not reachable", error=str(e))
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unavailable"},
            )

    return JSONResponse(content={"status": "ready"})
