"""Variant authoring endpoints used by the admin tool.

Load reconstructs the editor state from stored rows; save flattens it and
replaces all rows of the product in one transaction.
"""

from fastapi import APIRouter

from catalog.api.deps import Service
from catalog.infra.logging import get_logger
from catalog.schemas.variants import (
    VariantConfigurationResponse,
    VariantRowSchema,
    VariantRowsResponse,
    VariantSaveRequest,
    VariantSaveResponse,
    state_to_schema,
)

router = APIRouter()
logger = get_logger(__name__)


@router.get(
    "/{product_id}/variants",
    response_model=VariantConfigurationResponse,
    summary="Load the variant editor state of a product",
)
async def get_variant_configuration(
    product_id: int,
    service: Service,
) -> VariantConfigurationResponse:
    loaded = await service.load_configuration(product_id)
    return VariantConfigurationResponse(
        product_id=product_id,
        taxonomy=loaded.taxonomy,
        state=state_to_schema(loaded.state),
    )


@router.put(
    "/{product_id}/variants",
    response_model=VariantSaveResponse,
    summary="Replace all variants of a product",
)
async def save_variant_configuration(
    product_id: int,
    request: VariantSaveRequest,
    service: Service,
) -> VariantSaveResponse:
    """Flatten the submitted editor state and store it.

    The submitted `taxonomy` tag must match the taxonomy derived from the
    product's category, otherwise 409 is returned and nothing is written.
    """
    logger.info(
        "Variant save requested",
        product_id=product_id,
        taxonomy=request.state.taxonomy,
    )

    saved = await service.save_configuration(product_id, request.state.to_state())

    return VariantSaveResponse(
        product_id=product_id,
        taxonomy=saved.taxonomy,
        rows_written=len(saved.rows),
        finish_images=saved.image_maps.finish_images,
        type_images=saved.image_maps.type_images,
    )


@router.get(
    "/{product_id}/variants/rows",
    response_model=VariantRowsResponse,
    summary="List the stored variant rows of a product",
)
async def list_variant_rows(product_id: int, service: Service) -> VariantRowsResponse:
    rows = await service.list_rows(product_id)
    return VariantRowsResponse(
        product_id=product_id,
        rows=[VariantRowSchema.from_row(row) for row in rows],
    )
