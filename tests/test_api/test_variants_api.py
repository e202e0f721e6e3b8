"""Tests for the variant authoring endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from catalog.core.authoring import FastenerState, Finish, FittingState, Size
from catalog.core.flattener import flatten, summarize_images
from catalog.core.taxonomy import Taxonomy, TaxonomyMismatchError
from catalog.core.variants import VariantRow
from catalog.models import Product
from catalog.services.variant_repository import ProductNotFoundError, VariantStoreError
from catalog.services.variant_service import LoadedConfiguration, SavedConfiguration


@pytest.fixture
def screw() -> Product:
    return Product(id=1, name="Drywall Screw", slug="drywall-screw", category="Screws")


@pytest.fixture
def fastener_payload() -> dict:
    return {
        "state": {
            "taxonomy": "FASTENER",
            "sizes": [{"diameter": "4", "length": "10"}, {"diameter": "5", "length": "12"}],
            "finishes": [{"name": "Zinc", "image": "zinc.jpg"}, {"name": "Black"}],
            "types": [],
        }
    }


class TestGetConfiguration:
    @pytest.mark.asyncio
    async def test_returns_tagged_state(self, client: AsyncClient, service: AsyncMock, screw: Product):
        service.load_configuration.return_value = LoadedConfiguration(
            product=screw,
            taxonomy=Taxonomy.FASTENER,
            state=FastenerState(sizes=(Size(diameter="4", length="10"),)),
        )

        response = await client.get("/products/1/variants")

        assert response.status_code == 200
        data = response.json()
        assert data["taxonomy"] == "FASTENER"
        assert data["state"]["taxonomy"] == "FASTENER"
        assert data["state"]["sizes"] == [{"diameter": "4", "length": "10", "unit": "mm"}]
        service.load_configuration.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_unknown_product(self, client: AsyncClient, service: AsyncMock):
        service.load_configuration.side_effect = ProductNotFoundError("Product not found: 9")

        response = await client.get("/products/9/variants")

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error_type"] == "ProductNotFoundError"


class TestSaveConfiguration:
    @pytest.mark.asyncio
    async def test_save(
        self, client: AsyncClient, service: AsyncMock, screw: Product, fastener_payload: dict
    ):
        state = FastenerState(
            sizes=(Size(diameter="4", length="10"), Size(diameter="5", length="12")),
            finishes=(Finish(name="Zinc", image="zinc.jpg"), Finish(name="Black")),
            types=(),
        )
        service.save_configuration.return_value = SavedConfiguration(
            product=screw,
            taxonomy=Taxonomy.FASTENER,
            rows=flatten(Taxonomy.FASTENER, state, product_id=1),
            image_maps=summarize_images(state),
        )

        response = await client.put("/products/1/variants", json=fastener_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["rows_written"] == 4
        assert data["finish_images"] == {"Zinc": "zinc.jpg"}
        service.save_configuration.assert_awaited_once_with(1, state)

    @pytest.mark.asyncio
    async def test_taxonomy_mismatch(
        self, client: AsyncClient, service: AsyncMock, fastener_payload: dict
    ):
        service.save_configuration.side_effect = TaxonomyMismatchError(
            expected=Taxonomy.FITTING, actual=Taxonomy.FASTENER
        )

        response = await client.put("/products/2/variants", json=fastener_payload)

        assert response.status_code == 409
        assert response.json()["error_type"] == "TaxonomyMismatchError"

    @pytest.mark.asyncio
    async def test_store_failure(self, client: AsyncClient, service: AsyncMock, fastener_payload: dict):
        service.save_configuration.side_effect = VariantStoreError("Failed to save variants")

        response = await client.put("/products/1/variants", json=fastener_payload)

        assert response.status_code == 503

    @pytest.mark.asyncio
    async def test_invalid_payload(self, client: AsyncClient, service: AsyncMock):
        response = await client.put(
            "/products/1/variants",
            json={"state": {"taxonomy": "FITTING", "sizes": []}},
        )

        assert response.status_code == 422
        service.save_configuration.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fitting_payload_reaches_service(self, client: AsyncClient, service: AsyncMock):
        product = Product(id=2, name="Hinge", slug="hinge", category="Hinges")
        service.save_configuration.return_value = SavedConfiguration(
            product=product,
            taxonomy=Taxonomy.FITTING,
            rows=[VariantRow(diameter="HG-100", product_id=2)],
            image_maps=summarize_images(FittingState()),
        )

        response = await client.put(
            "/products/2/variants",
            json={"state": {"taxonomy": "FITTING", "groups": [{"size_label": "HG-100", "finishes": []}]}},
        )

        assert response.status_code == 200
        assert response.json()["taxonomy"] == "FITTING"
        _, state = service.save_configuration.await_args[0]
        assert isinstance(state, FittingState)


class TestListRows:
    @pytest.mark.asyncio
    async def test_rows(self, client: AsyncClient, service: AsyncMock):
        service.list_rows.return_value = [
            VariantRow(diameter="4", length="10,12", finish="Zinc", image="z.jpg", product_id=1)
        ]

        response = await client.get("/products/1/variants/rows")

        assert response.status_code == 200
        assert response.json()["rows"] == [
            {
                "diameter": "4",
                "length": "10,12",
                "unit": "mm",
                "type": "",
                "finish": "Zinc",
                "image": "z.jpg",
            }
        ]
