"""Storefront configurator endpoint.

Evaluates the diameter -> length -> finish cascade for a product page.
"""

from fastapi import APIRouter, Query

from catalog.api.deps import Service
from catalog.schemas.variants import (
    ConfiguratorResponse,
    SelectionSchema,
    VariantRowSchema,
)

router = APIRouter()

# Shown in place of the length control while no length can be offered
LENGTHS_EMPTY_MESSAGE = "Select a Diameter first"


@router.get(
    "/products/{slug}/configurator",
    response_model=ConfiguratorResponse,
    summary="Evaluate the variant selection cascade",
)
async def get_configurator(
    slug: str,
    service: Service,
    diameter: str | None = Query(default=None, description="Requested diameter"),
    length: str | None = Query(default=None, description="Requested length"),
    finish: str | None = Query(default=None, description="Requested finish"),
    image_index: int | None = Query(default=None, ge=0, description="Gallery position"),
) -> ConfiguratorResponse:
    view = await service.configurator(
        slug,
        diameter=diameter,
        length=length,
        finish=finish,
        image_index=image_index,
    )
    cascade, selection = view.cascade, view.selection
    lengths = cascade.available_lengths(selection.diameter)

    return ConfiguratorResponse(
        product_id=view.product.id,
        slug=view.product.slug,
        taxonomy=view.taxonomy,
        diameters=cascade.unique_diameters(),
        lengths=lengths,
        finishes=cascade.available_finishes(selection.diameter, selection.length),
        selection=SelectionSchema.from_selection(selection),
        images=cascade.display_images(selection),
        current_image=cascade.current_image(selection),
        orderable=cascade.is_orderable(selection),
        matching_rows=[VariantRowSchema.from_row(row) for row in cascade.matching_rows(selection)],
        lengths_empty_message=None if lengths else LENGTHS_EMPTY_MESSAGE,
    )
