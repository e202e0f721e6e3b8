"""Pydantic schemas for request/response validation."""

from catalog.schemas.common import ErrorResponse, HealthResponse
from catalog.schemas.product import (
    MaterialRowSchema,
    ProductCreateRequest,
    ProductResponse,
    PublishCheckResponse,
    PublishIssueSchema,
    SpecItemSchema,
)
from catalog.schemas.variants import (
    AuthoringStateSchema,
    ConfiguratorResponse,
    FastenerStateSchema,
    FittingStateSchema,
    SelectionSchema,
    VariantConfigurationResponse,
    VariantRowSchema,
    VariantRowsResponse,
    VariantSaveRequest,
    VariantSaveResponse,
    state_to_schema,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MaterialRowSchema",
    "ProductCreateRequest",
    "ProductResponse",
    "PublishCheckResponse",
    "PublishIssueSchema",
    "SpecItemSchema",
    "AuthoringStateSchema",
    "ConfiguratorResponse",
    "FastenerStateSchema",
    "FittingStateSchema",
    "SelectionSchema",
    "VariantConfigurationResponse",
    "VariantRowSchema",
    "VariantRowsResponse",
    "VariantSaveRequest",
    "VariantSaveResponse",
    "state_to_schema",
]
