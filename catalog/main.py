"""FastAPI application entry point.

Catalog variant service: authoring of product variants for the admin tool
and the selection cascade for the storefront.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog import __version__
from catalog.config import settings
from catalog.core.taxonomy import TaxonomyMismatchError
from catalog.infra.database import close_db_engine, verify_db_connection
from catalog.infra.logging import get_logger, setup_logging
from catalog.schemas.common import ErrorResponse
from catalog.services.variant_repository import (
    CatalogNotFoundError,
    ProductConflictError,
    VariantStoreError,
)

# Import routers
from catalog.api.routes.health import router as health_router
from catalog.api.routes.products import router as products_router
from catalog.api.routes.storefront import router as storefront_router
from catalog.api.routes.variants import router as variants_router

# Setup logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Startup:
    - Verify database connection

    Shutdown:
    - Close database connections
    """
    logger.info("Catalog service starting", environment=settings.environment)

    db_ok = await verify_db_connection()
    if not db_ok:
        logger.warning("Database connection failed - will retry on first request")

    yield

    logger.info("Catalog service shutting down")
    await close_db_engine()
    logger.info("Cleanup complete")


app = FastAPI(
    title="Catalog Variant Service",
    description="Product variant authoring and storefront configurator",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "dev" else None,
    redoc_url=None,
)

# CORS middleware (admin tool served from another origin in local development)
if settings.environment == "dev":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log write requests with context."""
    if request.method in ("POST", "PUT", "DELETE"):
        logger.info("Write request received", method=request.method, path=request.url.path)

    response = await call_next(request)

    return response


# =============================================================================
# Exception Handlers
# =============================================================================


def _error(status_code: int, exc: Exception, message: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=message or str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(CatalogNotFoundError)
async def not_found_handler(request: Request, exc: CatalogNotFoundError) -> JSONResponse:
    return _error(404, exc)


@app.exception_handler(TaxonomyMismatchError)
async def taxonomy_mismatch_handler(request: Request, exc: TaxonomyMismatchError) -> JSONResponse:
    """Reject an authoring state whose shape does not match the product."""
    logger.warning("Taxonomy mismatch", error=str(exc), path=request.url.path)
    return _error(409, exc)


@app.exception_handler(ProductConflictError)
async def conflict_handler(request: Request, exc: ProductConflictError) -> JSONResponse:
    return _error(409, exc)


@app.exception_handler(VariantStoreError)
async def store_error_handler(request: Request, exc: VariantStoreError) -> JSONResponse:
    """Storage failed and was rolled back; the client may retry the save."""
    return _error(503, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        exc_info=True,
    )
    return _error(500, exc, message="Internal server error")


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix="/products", tags=["Products"])
app.include_router(variants_router, prefix="/products", tags=["Variants"])
app.include_router(storefront_router, prefix="/storefront", tags=["Storefront"])


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/")
async def root() -> dict:
    """Root endpoint - basic service info."""
    return {
        "service": "Catalog Variant Service",
        "version": __version__,
        "environment": settings.environment,
    }
