from collections.abc import AsyncGenerator, Generator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from pytest_mock import MockerFixture

from backoffice.domain.events import EventInfo, InventoryUpdateEvent
from backoffice.domain.models import InventoryItem
from backoffice.entrypoints.dependencies import inventory_handler, inventory_store
from backoffice.entrypoints.restapi import app
from backoffice.service_layer.queries import (
    InventoryInitializationError,
    InventoryQueryService,
    InventoryRetrievalError,
)


@pytest.fixture
def store() -> dict[str, InventoryItem]:
    return {
        "SKU12345": InventoryItem(id="SKU12345", name="Product A", quantity=50),
        "SKU67890": InventoryItem(id="SKU67890", name="Product B", quantity=20),
        "SKU54321": InventoryItem(id="SKU54321", name="Product C", quantity=75),
    }


@pytest.fixture(autouse=True)
def override_store(store: dict[str, InventoryItem]) -> Generator[None, Any, None]:
    app.dependency_overrides[inventory_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, Any]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
        headers={"Content-Type": "application/json"},
    ) as client:
        yield client


async def test_get_inventory_returns_200_and_items(client: AsyncClient) -> None:
    # When
    res = await client.get("/inventory")

    # Then
    assert res.status_code == 200
    assert res.json() == [
        {"id": "SKU12345", "name": "Product A", "quantity": 50},
        {"id": "SKU67890", "name": "Product B", "quantity": 20},
        {"id": "SKU54321", "name": "Product C", "quantity": 75},
    ]


async def test_retrieval_error_returns_400(client: AsyncClient, mocker: MockerFixture) -> None:
    # Given
    mocker.patch.object(
        InventoryQueryService,
        "get_inventory",
        side_effect=InventoryRetrievalError("Failed to retrieve inventory"),
    )

    # When
    res = await client.get("/inventory")

    # Then
    assert res.status_code == 400
    assert res.json() == {"message": "Inventory retrieval error: Failed to retrieve inventory"}


async def test_initialization_error_returns_500(client: AsyncClient, mocker: MockerFixture) -> None:
    # Given
    mocker.patch.object(
        InventoryQueryService,
        "get_inventory",
        side_effect=InventoryInitializationError("Failed to initialize inventory"),
    )

    # When
    res = await client.get("/inventory")

    # Then
    assert res.status_code == 500
    assert res.json() == {"message": "Inventory initialization error: Failed to initialize inventory"}


async def test_empty_store_returns_500_initialization_error(client: AsyncClient) -> None:
    # Given
    app.dependency_overrides[inventory_store] = lambda: {}

    # When
    res = await client.get("/inventory")

    # Then
    assert res.status_code == 500
    assert res.json() == {"message": "Inventory initialization error: Inventory is empty or not initialized."}


async def test_invalid_item_returns_400(client: AsyncClient, store: dict[str, InventoryItem]) -> None:
    # Given
    store["SKU67890"].quantity = -3

    # When
    res = await client.get("/inventory")

    # Then
    assert res.status_code == 400
    assert res.json() == {"message": "Inventory retrieval error: Item with negative quantity found: SKU67890"}


async def test_unexpected_error_returns_500(client: AsyncClient, mocker: MockerFixture) -> None:
    # Given
    mocker.patch.object(InventoryQueryService, "get_inventory", side_effect=Exception("Unexpected error"))

    # When
    res = await client.get("/inventory")

    # Then
    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}


async def test_default_store_reflects_applied_events(client: AsyncClient) -> None:
    # Given: the real dependency, backed by the process-wide event handler
    app.dependency_overrides.clear()
    handler = inventory_handler()
    handler.inventory["SKU1"] = InventoryItem(id="SKU1", name="Product A", quantity=1)
    handler.apply_update(InventoryUpdateEvent(EventInfo("api-1"), "SKU1", 4))

    # When
    res = await client.get("/inventory")
    inventory_handler.cache_clear()

    # Then
    assert res.status_code == 200
    assert res.json() == [{"id": "SKU1", "name": "Product A", "quantity": 5}]
