"""Variant configuration service.

Glues the pure core (classify, flatten, reconstruct, cascade) to the
storage boundary. Taxonomy is always computed through `taxonomy_for`, on
save and on load alike, so a product cannot change discipline between
the two.
"""

from dataclasses import dataclass

from catalog.core.authoring import AuthoringState
from catalog.core.flattener import flatten, summarize_images
from catalog.core.product_record import (
    MaterialRow,
    SpecItem,
    compose_material,
    merge_specifications,
    resolve_slug,
)
from catalog.core.publish import PublishIssue, completeness_issues
from catalog.core.reconstructor import reconstruct
from catalog.core.selection import Selection, SelectionCascade
from catalog.core.taxonomy import Taxonomy, classify
from catalog.core.variants import ImageMaps, VariantRow
from catalog.infra.logging import get_logger
from catalog.models.product import Product
from catalog.services.variant_repository import ProductNotFoundError, VariantRepository

logger = get_logger(__name__)


def taxonomy_for(product: Product) -> Taxonomy:
    """Taxonomy of a stored product, from its category/sub-category names."""
    return classify(product.category, product.sub_category_name)


@dataclass(frozen=True)
class LoadedConfiguration:
    """Authoring state reconstructed for one product."""

    product: Product
    taxonomy: Taxonomy
    state: AuthoringState


@dataclass(frozen=True)
class SavedConfiguration:
    """Outcome of a variant save."""

    product: Product
    taxonomy: Taxonomy
    rows: list[VariantRow]
    image_maps: ImageMaps


@dataclass(frozen=True)
class ConfiguratorView:
    """Storefront cascade evaluated for a requested selection."""

    product: Product
    taxonomy: Taxonomy
    cascade: SelectionCascade
    selection: Selection


class VariantService:
    """Use cases of the authoring tool and the storefront configurator."""

    def __init__(self, repository: VariantRepository, placeholder_image: str | None = None) -> None:
        """Initialize the service.

        Args:
            repository: Storage boundary
            placeholder_image: Gallery image used when a product has none
        """
        self._repository = repository
        self._placeholder_image = placeholder_image

    # =========================================================================
    # Authoring
    # =========================================================================

    async def load_configuration(self, product_id: int) -> LoadedConfiguration:
        """Reconstruct the editor state of a product from its stored rows."""
        product = await self._repository.get_product(product_id)
        taxonomy = taxonomy_for(product)
        rows = await self._repository.list_variants(product_id)

        state = reconstruct(
            taxonomy,
            rows,
            finish_images=product.finish_images,
            type_images=product.type_images,
        )

        logger.debug(
            "Variant configuration loaded",
            product_id=product_id,
            taxonomy=taxonomy.value,
            rows=len(rows),
        )
        return LoadedConfiguration(product=product, taxonomy=taxonomy, state=state)

    async def save_configuration(self, product_id: int, state: AuthoringState) -> SavedConfiguration:
        """Flatten an editor state and replace the product's rows with it.

        Raises:
            ProductNotFoundError: If the product does not exist
            TaxonomyMismatchError: If the state shape does not match the product
            VariantStoreError: If the replace failed (nothing was written)
        """
        product = await self._repository.get_product(product_id)
        taxonomy = taxonomy_for(product)

        rows = flatten(taxonomy, state, product_id=product.id)
        image_maps = summarize_images(state)

        await self._repository.save_variant_set(product, rows, image_maps)

        logger.info(
            "Variant configuration saved",
            product_id=product_id,
            taxonomy=taxonomy.value,
            rows=len(rows),
            finishes_with_images=len(image_maps.finish_images),
        )
        return SavedConfiguration(
            product=product,
            taxonomy=taxonomy,
            rows=rows,
            image_maps=image_maps,
        )

    async def list_rows(self, product_id: int) -> list[VariantRow]:
        """Stored rows of an existing product."""
        await self._repository.get_product(product_id)
        return await self._repository.list_variants(product_id)

    async def create_product(
        self,
        name: str,
        category: str = "",
        slug: str | None = None,
        sub_category_id: int | None = None,
        material_rows: list[MaterialRow] | None = None,
        short_description: str | None = None,
        long_description: str | None = None,
        images: list[str] | None = None,
        specifications: list[SpecItem] | None = None,
    ) -> Product:
        """Create a product record with no variants yet.

        When a sub-category is given and no category name is, the
        category name is taken from the sub-category's parent.
        """
        if sub_category_id is not None:
            sub_category = await self._repository.get_sub_category(sub_category_id)
            if not category and sub_category.category is not None:
                category = sub_category.category.name

        material = compose_material(material_rows or [])
        specs = merge_specifications(specifications or [])

        product = Product(
            name=name,
            slug=resolve_slug(name, slug),
            category=category,
            sub_category_id=sub_category_id,
            material=material or None,
            short_description=short_description,
            long_description=long_description,
            images=list(images or []),
            finish_images={},
            type_images={},
            specifications=[{"key": s.key, "value": s.value} for s in specs],
            active=False,
        )
        return await self._repository.add_product(product)

    async def get_product(self, product_id: int) -> Product:
        return await self._repository.get_product(product_id)

    # =========================================================================
    # Publishing
    # =========================================================================

    async def publish_check(self, product_id: int) -> tuple[Product, list[PublishIssue]]:
        """Completeness issues that block publishing a product."""
        product = await self._repository.get_product(product_id)
        rows = await self._repository.list_variants(product_id)
        return product, completeness_issues(taxonomy_for(product), rows)

    async def publish(self, product_id: int) -> tuple[Product, list[PublishIssue]]:
        """Publish a product if it passes the completeness check.

        Returns:
            The product and the blocking issues (empty when published)
        """
        product, issues = await self.publish_check(product_id)
        if issues:
            logger.info(
                "Publish rejected",
                product_id=product_id,
                issues=[issue.code for issue in issues],
            )
            return product, issues

        await self._repository.set_active(product, True)
        return product, []

    # =========================================================================
    # Storefront
    # =========================================================================

    async def configurator(
        self,
        slug: str,
        diameter: str | None = None,
        length: str | None = None,
        finish: str | None = None,
        image_index: int | None = None,
    ) -> ConfiguratorView:
        """Evaluate the selection cascade for a product page.

        Starts from the default selection and applies the requested
        choices in cascade order. Choices that are not on offer at their
        stage are ignored. Draft products are not visible.

        Raises:
            ProductNotFoundError: If no published product has this slug
        """
        product = await self._repository.get_product_by_slug(slug, published_only=True)
        if not product.active:
            raise ProductNotFoundError(f"Product not found: {slug}")
        rows = await self._repository.list_variants(product.id)

        default_images = list(product.images or [])
        if not default_images and self._placeholder_image:
            default_images = [self._placeholder_image]

        cascade = SelectionCascade(
            rows,
            finish_images=product.finish_images,
            default_images=default_images,
        )

        selection = cascade.initial_selection()
        if diameter and diameter in cascade.unique_diameters():
            selection = cascade.select_diameter(selection, diameter)
        if length:
            selection = cascade.select_length(selection, length)
        if finish and finish in cascade.available_finishes(selection.diameter, selection.length):
            selection = cascade.select_finish(selection, finish)
        if image_index is not None:
            selection = cascade.select_image(selection, image_index)

        return ConfiguratorView(
            product=product,
            taxonomy=taxonomy_for(product),
            cascade=cascade,
            selection=selection,
        )
