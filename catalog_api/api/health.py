"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog_api.api.schemas import HealthResponse
from catalog_api.infrastructure.database import Database, get_database

router = APIRouter()
logger = structlog.get_logger()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=request.app.state.settings.api_version,
    )


@router.get("/ready", responses={503: {"description": "Store unreachable"}})
async def readiness_check(
    database: Annotated[Database, Depends(get_database)],
) -> JSONResponse:
    """Check if the catalog store accepts queries.

    Returns:
        Readiness status; 503 when the store cannot be reached.
    """
    try:
        await database.ping()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return JSONResponse(content={"status": "ready"})
