"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.api.products import router as products_router
from catalog_api.domain.exceptions import CatalogError, StoreError
from catalog_api.infrastructure.config import Settings, settings as default_settings
from catalog_api.infrastructure.database import Database
from catalog_api.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    settings: Settings = app.state.settings

    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    database = Database(settings.database_url, echo=settings.debug)
    if settings.create_tables_on_startup:
        await database.create_tables()
    app.state.database = database

    logger.info("Catalog store ready", dialect=database.dialect)

    try:
        yield
    finally:
        await database.dispose()
        logger.info("Shutting down Catalog API")


def _error_content(
    request: Request,
    error_code: str,
    message: str,
    details: dict | list | None = None,
) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "details": details if details is not None else [],
        "request_id": getattr(request.state, "request_id", None),
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Map exceptions to the standard error body."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle catalog errors with their own status and code."""
        if isinstance(exc, StoreError):
            logger.error(
                "Catalog store failure",
                path=request.url.path,
                method=request.method,
                operation=exc.operation,
                cause=repr(exc.__cause__),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(request, exc.error_code, exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report malformed requests as 400."""
        details = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", ""),
            }
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=_error_content(request, "VALIDATION_ERROR", "Invalid request", details),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent format."""
        detail = exc.detail
        if isinstance(detail, dict):
            error_code = detail.get("error_code", "ERROR")
            message = detail.get("message", str(detail))
            details = detail.get("details", [])
        else:
            error_code = "ERROR"
            message = str(detail)
            details = []

        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(request, error_code, message, details),
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to run with; the environment-derived ones by default.

    Returns:
        Configured application. The database is opened by its lifespan.
    """
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title="Catalog API",
        description="Demo product catalog: generation, filtered listing and statistics",
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    # CORS middleware (must be added before custom middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup custom middleware (request ID, error handling)
    setup_middleware(app)

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_router, tags=["Health"])
    app.include_router(products_router)

    return app


app = create_app()
