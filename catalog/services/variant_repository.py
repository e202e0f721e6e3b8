"""Storage boundary for products and their variant rows.

The variant set of a product is written as one unit: the product-level
image maps are updated, every existing row is deleted and the new rows
are inserted, then the transaction is committed. Any database error
rolls the whole unit back and surfaces as a single VariantStoreError.
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.variants import ImageMaps, VariantRow
from catalog.infra.logging import get_logger
from catalog.models.product import Product
from catalog.models.product_variant import ProductVariant
from catalog.models.sub_category import SubCategory

logger = get_logger(__name__)


class CatalogNotFoundError(Exception):
    """Base class for missing catalog records."""


class ProductNotFoundError(CatalogNotFoundError):
    """Raised when a product id or slug does not exist."""


class SubCategoryNotFoundError(CatalogNotFoundError):
    """Raised when a sub-category id does not exist."""


class ProductConflictError(Exception):
    """Raised when a product insert collides with an existing slug."""


class VariantStoreError(Exception):
    """Raised when a write to the catalog store fails and was rolled back."""


def to_variant_row(variant: ProductVariant) -> VariantRow:
    """Convert an ORM row to the core value type."""
    return VariantRow(
        diameter=variant.diameter or "",
        length=variant.length or "",
        unit="inch" if variant.unit == "inch" else "mm",
        type=variant.type or "",
        finish=variant.finish or "",
        image=variant.image or None,
        product_id=variant.product_id,
    )


def to_product_variant(product_id: int, row: VariantRow) -> ProductVariant:
    """Convert a core row to a new ORM row for `product_id`."""
    return ProductVariant(
        product_id=product_id,
        diameter=row.diameter,
        length=row.length,
        unit=row.unit,
        type=row.type,
        finish=row.finish,
        image=row.image,
    )


class VariantRepository:
    """Async repository over products, sub-categories and variant rows."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: Active database session
        """
        self._session = session

    async def get_product(self, product_id: int) -> Product:
        """Load a product by id.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = await self._session.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(f"Product not found: {product_id}")
        return product

    async def get_product_by_slug(self, slug: str, published_only: bool = False) -> Product:
        """Load a product by slug.

        Args:
            slug: Product slug
            published_only: Only match products with `active` set

        Raises:
            ProductNotFoundError: If no (published) product has this slug
        """
        query = select(Product).where(Product.slug == slug)
        if published_only:
            query = query.where(Product.active.is_(True))
        result = await self._session.execute(query)
        product = result.scalar_one_or_none()
        if product is None:
            raise ProductNotFoundError(f"Product not found: {slug}")
        return product

    async def get_sub_category(self, sub_category_id: int) -> SubCategory:
        """Load a sub-category by id.

        Raises:
            SubCategoryNotFoundError: If no sub-category has this id
        """
        sub_category = await self._session.get(SubCategory, sub_category_id)
        if sub_category is None:
            raise SubCategoryNotFoundError(f"Sub-category not found: {sub_category_id}")
        return sub_category

    async def list_variants(self, product_id: int) -> list[VariantRow]:
        """All variant rows of a product in insertion order."""
        result = await self._session.execute(
            select(ProductVariant)
            .where(ProductVariant.product_id == product_id)
            .order_by(ProductVariant.id)
        )
        return [to_variant_row(variant) for variant in result.scalars().all()]

    async def save_variant_set(
        self,
        product: Product,
        rows: list[VariantRow],
        image_maps: ImageMaps,
    ) -> int:
        """Replace every variant row of a product in one transaction.

        Args:
            product: Product whose rows are replaced
            rows: Flattened rows to insert
            image_maps: Derived finish/type image maps stored on the product

        Returns:
            Number of rows written

        Raises:
            VariantStoreError: If any statement or the commit fails
        """
        try:
            product.finish_images = dict(image_maps.finish_images)
            product.type_images = dict(image_maps.type_images)

            await self._session.execute(
                delete(ProductVariant).where(ProductVariant.product_id == product.id)
            )
            self._session.add_all([to_product_variant(product.id, row) for row in rows])
            await self._session.flush()
            await self._session.commit()

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                "Variant set write failed, rolled back",
                product_id=product.id,
                rows=len(rows),
                error=str(e),
            )
            raise VariantStoreError(f"Failed to save variants for product {product.id}") from e

        logger.info("Variant set saved", product_id=product.id, rows=len(rows))
        return len(rows)

    async def add_product(self, product: Product) -> Product:
        """Insert a new product and load its sub-category.

        Raises:
            ProductConflictError: If the slug is already taken
            VariantStoreError: If the insert or commit fails otherwise
        """
        try:
            self._session.add(product)
            await self._session.flush()
            await self._session.commit()
            await self._session.refresh(product, attribute_names=["sub_category"])

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning("Product insert rejected, slug taken", slug=product.slug, error=str(e))
            raise ProductConflictError(f"Product slug already exists: {product.slug}") from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Product insert failed, rolled back", slug=product.slug, error=str(e))
            raise VariantStoreError(f"Failed to save product {product.slug}") from e

        logger.info("Product created", product_id=product.id, slug=product.slug)
        return product

    async def set_active(self, product: Product, active: bool) -> None:
        """Publish or unpublish a product.

        Raises:
            VariantStoreError: If the update or commit fails
        """
        try:
            product.active = active
            await self._session.flush()
            await self._session.commit()

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Product publish flag update failed", product_id=product.id, error=str(e))
            raise VariantStoreError(f"Failed to update product {product.id}") from e

        logger.info("Product visibility changed", product_id=product.id, active=active)
