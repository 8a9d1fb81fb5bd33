import functools

from fastapi import Depends

from backoffice.domain import models
from backoffice.service_layer.inventory import InventoryEventHandler


@functools.lru_cache
def inventory_handler() -> InventoryEventHandler:
    return InventoryEventHandler([])


def inventory_store(
    handler: InventoryEventHandler = Depends(inventory_handler),
) -> dict[str, models.InventoryItem]:
    return handler.inventory
