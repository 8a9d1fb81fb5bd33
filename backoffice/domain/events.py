from dataclasses import dataclass


class Event:
    pass


@dataclass(frozen=True)
class EventInfo:
    event_id: str


@dataclass(frozen=True)
class InventoryUpdateEvent(Event):
    event_info: EventInfo
    item_id: str
    quantity_change: int
