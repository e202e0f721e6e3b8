"""Product record endpoints used by the admin tool."""

from fastapi import APIRouter, HTTPException, status

from catalog.api.deps import Service
from catalog.core.product_record import MaterialRow, SpecItem, parse_material
from catalog.infra.logging import get_logger
from catalog.models.product import Product
from catalog.schemas.product import (
    MaterialRowSchema,
    ProductCreateRequest,
    ProductResponse,
    PublishCheckResponse,
    PublishIssueSchema,
    SpecItemSchema,
)
from catalog.services.variant_service import taxonomy_for

router = APIRouter()
logger = get_logger(__name__)


def _to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        slug=product.slug,
        category=product.category or "",
        sub_category_id=product.sub_category_id,
        taxonomy=taxonomy_for(product),
        material=product.material,
        material_rows=[
            MaterialRowSchema(name=row.name, grades=row.grades)
            for row in parse_material(product.material)
        ],
        images=list(product.images or []),
        finish_images=dict(product.finish_images or {}),
        type_images=dict(product.type_images or {}),
        specifications=[
            SpecItemSchema(key=spec.get("key", ""), value=spec.get("value", ""))
            for spec in product.specifications or []
        ],
        active=bool(product.active),
    )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product record",
)
async def create_product(request: ProductCreateRequest, service: Service) -> ProductResponse:
    product = await service.create_product(
        name=request.name,
        slug=request.slug,
        category=request.category,
        sub_category_id=request.sub_category_id,
        material_rows=[MaterialRow(name=r.name, grades=r.grades) for r in request.material_rows],
        short_description=request.short_description,
        long_description=request.long_description,
        images=request.images,
        specifications=[SpecItem(key=s.key, value=s.value) for s in request.specifications],
    )
    return _to_response(product)


@router.get("/{product_id}", response_model=ProductResponse, summary="Get a product record")
async def get_product(product_id: int, service: Service) -> ProductResponse:
    return _to_response(await service.get_product(product_id))


@router.get(
    "/{product_id}/publish-check",
    response_model=PublishCheckResponse,
    summary="List what blocks publishing a product",
)
async def publish_check(product_id: int, service: Service) -> PublishCheckResponse:
    _, issues = await service.publish_check(product_id)
    return PublishCheckResponse(
        product_id=product_id,
        publishable=not issues,
        issues=[
            PublishIssueSchema(code=i.code, message=i.message, row_index=i.row_index)
            for i in issues
        ],
    )


@router.post(
    "/{product_id}/publish",
    response_model=ProductResponse,
    summary="Publish a product that passes the completeness check",
)
async def publish_product(product_id: int, service: Service) -> ProductResponse:
    product, issues = await service.publish(product_id)
    if issues:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": "Product is not ready to publish",
                "issues": [{"code": i.code, "message": i.message, "row_index": i.row_index} for i in issues],
            },
        )
    return _to_response(product)
