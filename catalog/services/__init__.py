"""Services - storage boundary and use cases."""

from catalog.services.variant_repository import (
    CatalogNotFoundError,
    ProductConflictError,
    ProductNotFoundError,
    SubCategoryNotFoundError,
    VariantRepository,
    VariantStoreError,
)
from catalog.services.variant_service import VariantService, taxonomy_for

__all__ = [
    "CatalogNotFoundError",
    "ProductConflictError",
    "ProductNotFoundError",
    "SubCategoryNotFoundError",
    "VariantRepository",
    "VariantStoreError",
    "VariantService",
    "taxonomy_for",
]
