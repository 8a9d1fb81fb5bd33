import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from backoffice.domain import events, models

logger = logging.getLogger(__name__)


class UpdateOutcome(enum.Enum):
    APPLIED = "applied"
    DUPLICATE = "duplicate"
    UNKNOWN_ITEM = "unknown_item"


@dataclass(frozen=True)
class UpdateResult:
    outcome: UpdateOutcome
    quantity: int | None = None

    @property
    def applied(self) -> bool:
        return self.outcome is UpdateOutcome.APPLIED


class InventoryEventHandler:
    """Applies quantity-change events to an in-memory inventory.

    Events are deduplicated by ``event_info.event_id``: two event objects
    carrying the same id are the same logical occurrence, so only the first
    one changes a quantity. Quantities are clamped at zero.
    """

    def __init__(self, initial_inventory: Iterable[models.InventoryItem]) -> None:
        self._inventory: dict[str, models.InventoryItem] = {item.id: item for item in initial_inventory}
        self._processed_events: set[str] = set()

    @property
    def inventory(self) -> dict[str, models.InventoryItem]:
        return self._inventory

    @property
    def processed_events(self) -> frozenset[str]:
        return frozenset(self._processed_events)

    def apply_update(self, event: events.InventoryUpdateEvent) -> UpdateResult:
        event_id = event.event_info.event_id
        if event_id in self._processed_events:
            logger.info("Event %s has already been processed. Skipping.", event_id)
            return UpdateResult(UpdateOutcome.DUPLICATE)

        item = self._inventory.get(event.item_id)
        if item is None:
            # the id is not recorded, a replay after the item is added still applies
            logger.warning("Item with ID %s not found. Skipping event %s.", event.item_id, event_id)
            return UpdateResult(UpdateOutcome.UNKNOWN_ITEM)

        item.quantity = max(0, item.quantity + event.quantity_change)
        self._processed_events.add(event_id)
        return UpdateResult(UpdateOutcome.APPLIED, item.quantity)

    def apply_updates(self, messages: Iterable[events.InventoryUpdateEvent]) -> list[UpdateResult]:
        return [self.apply_update(message) for message in messages]

    def get_inventory(self) -> list[models.InventoryItem]:
        return list(self._inventory.values())
