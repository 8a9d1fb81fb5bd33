from collections.abc import Mapping

from backoffice.domain import models


class InventoryInitializationError(Exception):
    pass


class InventoryRetrievalError(Exception):
    pass


class InventoryQueryService:
    """Read-only, validated view over an inventory mapping."""

    def __init__(self, inventory: Mapping[str, models.InventoryItem] | None) -> None:
        if not inventory:
            raise InventoryInitializationError("Inventory is empty or not initialized.")
        self._inventory = inventory

    def get_inventory(self) -> list[models.InventoryItem]:
        if not self._inventory:
            raise InventoryRetrievalError("No items found in the inventory.")

        items = []
        for item in self._inventory.values():
            if not item.id or not item.name:
                raise InventoryRetrievalError(f"Invalid item in inventory: {item!r}")
            if item.quantity < 0:
                raise InventoryRetrievalError(f"Item with negative quantity found: {item.id}")
            items.append(item)
        return items
