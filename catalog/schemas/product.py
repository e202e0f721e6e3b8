"""Product record schemas."""

from pydantic import BaseModel, Field, field_validator

from catalog.core.taxonomy import Taxonomy


class MaterialRowSchema(BaseModel):
    name: str = ""
    grades: str = ""

    model_config = {"extra": "forbid"}


class SpecItemSchema(BaseModel):
    key: str
    value: str = ""

    model_config = {"extra": "forbid"}


class ProductCreateRequest(BaseModel):
    """Product record submitted by the authoring tool."""

    name: str = Field(min_length=1, max_length=200, description="Product name")
    slug: str | None = Field(default=None, max_length=220, description="URL slug (derived from name if omitted)")
    category: str = Field(default="", max_length=200, description="Category name")
    sub_category_id: int | None = Field(default=None, description="Sub-category ID")
    material_rows: list[MaterialRowSchema] = Field(default_factory=list)
    short_description: str | None = None
    long_description: str | None = None
    images: list[str] = Field(default_factory=list, description="Gallery image URLs")
    specifications: list[SpecItemSchema] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()


class ProductResponse(BaseModel):
    """Product record as returned to the authoring tool."""

    id: int
    name: str
    slug: str
    category: str
    sub_category_id: int | None = None
    taxonomy: Taxonomy
    material: str | None = None
    material_rows: list[MaterialRowSchema] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    finish_images: dict[str, str] = Field(default_factory=dict)
    type_images: dict[str, str] = Field(default_factory=dict)
    specifications: list[SpecItemSchema] = Field(default_factory=list)
    active: bool = False


class PublishIssueSchema(BaseModel):
    code: str
    message: str
    row_index: int | None = None


class PublishCheckResponse(BaseModel):
    """Completeness check result for a product."""

    product_id: int
    publishable: bool
    issues: list[PublishIssueSchema] = Field(default_factory=list)
