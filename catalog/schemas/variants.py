"""Variant configuration schemas.

The authoring state travels as a discriminated union on `taxonomy`, so a
FASTENER payload can never be read as a FITTING one (and vice versa).
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from catalog.core.authoring import (
    AuthoringState,
    FastenerState,
    Finish,
    FittingFinish,
    FittingState,
    Size,
    TypeOption,
    VariantGroup,
)
from catalog.core.selection import Selection
from catalog.core.taxonomy import Taxonomy
from catalog.core.variants import VariantRow


class VariantRowSchema(BaseModel):
    """Flat variant row as stored."""

    diameter: str = Field(default="", description="Diameter or model code (free text)")
    length: str = Field(default="", description="Length, possibly comma-joined (\"10,12,16\")")
    unit: Literal["mm", "inch"] = Field(default="mm", description="Unit of diameter/length")
    type: str = Field(default="", description="Type name, empty when not applicable")
    finish: str = Field(default="", description="Finish name, empty when not applicable")
    image: str | None = Field(default=None, description="Image URL for this variant")

    model_config = {"extra": "forbid"}

    @classmethod
    def from_row(cls, row: VariantRow) -> "VariantRowSchema":
        return cls(
            diameter=row.diameter,
            length=row.length,
            unit=row.unit,
            type=row.type,
            finish=row.finish,
            image=row.image,
        )


# =============================================================================
# FASTENER authoring shape
# =============================================================================


class SizeSchema(BaseModel):
    diameter: str = ""
    length: str = ""
    unit: Literal["mm", "inch"] = "mm"

    model_config = {"extra": "forbid"}


class FinishSchema(BaseModel):
    name: str = ""
    image: str = ""

    model_config = {"extra": "forbid"}


class TypeOptionSchema(BaseModel):
    name: str = ""
    image: str = ""

    model_config = {"extra": "forbid"}


class FastenerStateSchema(BaseModel):
    """Independent size, finish and type lists."""

    taxonomy: Literal["FASTENER"] = "FASTENER"
    sizes: list[SizeSchema] = Field(default_factory=list)
    finishes: list[FinishSchema] = Field(default_factory=list)
    types: list[TypeOptionSchema] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_state(self) -> FastenerState:
        return FastenerState(
            sizes=tuple(Size(**s.model_dump()) for s in self.sizes),
            finishes=tuple(Finish(**f.model_dump()) for f in self.finishes),
            types=tuple(TypeOption(**t.model_dump()) for t in self.types),
        )

    @classmethod
    def from_state(cls, state: FastenerState) -> "FastenerStateSchema":
        return cls(
            sizes=[SizeSchema(diameter=s.diameter, length=s.length, unit=s.unit) for s in state.sizes],
            finishes=[FinishSchema(name=f.name, image=f.image) for f in state.finishes],
            types=[TypeOptionSchema(name=t.name, image=t.image) for t in state.types],
        )


# =============================================================================
# FITTING authoring shape
# =============================================================================


class FittingFinishSchema(BaseModel):
    name: str = ""
    type: str = ""
    image: str = ""

    model_config = {"extra": "forbid"}


class VariantGroupSchema(BaseModel):
    size_label: str = ""
    finishes: list[FittingFinishSchema] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class FittingStateSchema(BaseModel):
    """Size groups, each with its own finishes."""

    taxonomy: Literal["FITTING"] = "FITTING"
    groups: list[VariantGroupSchema] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    def to_state(self) -> FittingState:
        return FittingState(
            groups=tuple(
                VariantGroup(
                    size_label=g.size_label,
                    finishes=tuple(FittingFinish(**f.model_dump()) for f in g.finishes),
                )
                for g in self.groups
            )
        )

    @classmethod
    def from_state(cls, state: FittingState) -> "FittingStateSchema":
        return cls(
            groups=[
                VariantGroupSchema(
                    size_label=g.size_label,
                    finishes=[
                        FittingFinishSchema(name=f.name, type=f.type, image=f.image)
                        for f in g.finishes
                    ],
                )
                for g in state.groups
            ]
        )


AuthoringStateSchema = Annotated[
    Union[FastenerStateSchema, FittingStateSchema],
    Field(discriminator="taxonomy"),
]


def state_to_schema(state: AuthoringState) -> FastenerStateSchema | FittingStateSchema:
    """Convert a core authoring state to its wire schema."""
    if isinstance(state, FastenerState):
        return FastenerStateSchema.from_state(state)
    if isinstance(state, FittingState):
        return FittingStateSchema.from_state(state)
    raise TypeError(f"Unsupported authoring state: {type(state).__name__}")


# =============================================================================
# Requests / responses
# =============================================================================


class VariantConfigurationResponse(BaseModel):
    """Authoring state reconstructed for the editor."""

    product_id: int
    taxonomy: Taxonomy
    state: AuthoringStateSchema


class VariantSaveRequest(BaseModel):
    """Authoring state submitted by the editor on save."""

    state: AuthoringStateSchema

    model_config = {"extra": "forbid"}


class VariantSaveResponse(BaseModel):
    """Result of replacing a product's variant rows."""

    product_id: int
    taxonomy: Taxonomy
    rows_written: int
    finish_images: dict[str, str] = Field(default_factory=dict)
    type_images: dict[str, str] = Field(default_factory=dict)


class VariantRowsResponse(BaseModel):
    product_id: int
    rows: list[VariantRowSchema]


class SelectionSchema(BaseModel):
    diameter: str = ""
    length: str = ""
    finish: str = ""
    image_override: str | None = None
    image_index: int = 0

    @classmethod
    def from_selection(cls, selection: Selection) -> "SelectionSchema":
        return cls(
            diameter=selection.diameter,
            length=selection.length,
            finish=selection.finish,
            image_override=selection.image_override,
            image_index=selection.image_index,
        )


class ConfiguratorResponse(BaseModel):
    """Evaluated storefront cascade for one product and selection.

    Empty option lists are meaningful: the client renders an explicit
    "no options" state (see `lengths_empty_message`).
    """

    product_id: int
    slug: str
    taxonomy: Taxonomy
    diameters: list[str]
    lengths: list[str]
    finishes: list[str]
    selection: SelectionSchema
    images: list[str]
    current_image: str | None = None
    orderable: bool = False
    matching_rows: list[VariantRowSchema] = Field(default_factory=list)
    lengths_empty_message: str | None = None
