"""API routes module."""

from catalog.api.routes.health import router as health_router
from catalog.api.routes.products import router as products_router
from catalog.api.routes.storefront import router as storefront_router
from catalog.api.routes.variants import router as variants_router

__all__ = ["health_router", "products_router", "storefront_router", "variants_router"]
