"""SQLAlchemy models for the catalog."""

from catalog.models.base import Base, TimestampMixin
from catalog.models.category import Category
from catalog.models.product import Product
from catalog.models.product_variant import ProductVariant
from catalog.models.sub_category import SubCategory

__all__ = [
    "Base",
    "TimestampMixin",
    "Category",
    "Product",
    "ProductVariant",
    "SubCategory",
]
