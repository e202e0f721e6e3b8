"""Tests for variant configuration schemas."""

import pytest
from pydantic import ValidationError

from catalog.core.authoring import (
    FastenerState,
    Finish,
    FittingFinish,
    FittingState,
    Size,
    VariantGroup,
)
from catalog.core.variants import VariantRow
from catalog.schemas.variants import (
    FastenerStateSchema,
    FittingStateSchema,
    VariantRowSchema,
    VariantSaveRequest,
    state_to_schema,
)


class TestVariantSaveRequest:
    """The authoring state is discriminated on `taxonomy`."""

    def test_fastener_payload(self):
        request = VariantSaveRequest.model_validate(
            {
                "state": {
                    "taxonomy": "FASTENER",
                    "sizes": [{"diameter": "4", "length": "10,12"}],
                    "finishes": [{"name": "Zinc", "image": "zinc.jpg"}],
                    "types": [],
                }
            }
        )

        assert isinstance(request.state, FastenerStateSchema)
        state = request.state.to_state()
        assert state.sizes == (Size(diameter="4", length="10,12"),)
        assert state.finishes == (Finish(name="Zinc", image="zinc.jpg"),)
        assert state.types == ()

    def test_fitting_payload(self):
        request = VariantSaveRequest.model_validate(
            {
                "state": {
                    "taxonomy": "FITTING",
                    "groups": [
                        {"size_label": "HG-100", "finishes": [{"name": "Nickel", "type": "Soft Close"}]}
                    ],
                }
            }
        )

        assert isinstance(request.state, FittingStateSchema)
        assert request.state.to_state() == FittingState(
            groups=(
                VariantGroup(
                    size_label="HG-100",
                    finishes=(FittingFinish(name="Nickel", type="Soft Close"),),
                ),
            )
        )

    def test_fitting_fields_rejected_under_fastener_tag(self):
        with pytest.raises(ValidationError):
            VariantSaveRequest.model_validate(
                {"state": {"taxonomy": "FASTENER", "groups": [{"size_label": "A"}]}}
            )

    def test_unknown_taxonomy_rejected(self):
        with pytest.raises(ValidationError):
            VariantSaveRequest.model_validate({"state": {"taxonomy": "WIDGET"}})

    def test_invalid_unit_rejected(self):
        with pytest.raises(ValidationError):
            FastenerStateSchema.model_validate({"sizes": [{"diameter": "4", "unit": "cm"}]})


class TestStateToSchema:
    def test_fastener(self):
        schema = state_to_schema(FastenerState())

        assert isinstance(schema, FastenerStateSchema)
        assert schema.model_dump()["taxonomy"] == "FASTENER"
        assert len(schema.sizes) == 1

    def test_fitting_roundtrip(self):
        state = FittingState(groups=(VariantGroup(size_label="A"),))

        schema = state_to_schema(state)

        assert isinstance(schema, FittingStateSchema)
        assert schema.to_state() == state


def test_variant_row_schema_from_row():
    schema = VariantRowSchema.from_row(
        VariantRow(diameter="4", length="10", finish="Zinc", image=None, product_id=9)
    )

    assert schema.model_dump() == {
        "diameter": "4",
        "length": "10",
        "unit": "mm",
        "type": "",
        "finish": "Zinc",
        "image": None,
    }
