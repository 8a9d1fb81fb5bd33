from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(kw_only=True)
class InventoryItem:
    id: str
    name: str
    quantity: int


@dataclass(frozen=True, kw_only=True)
class Order:
    id: str
    amount: float
    start_date: date
    end_date: date

    @property
    def is_instant(self) -> bool:
        return self.start_date == self.end_date


@dataclass(kw_only=True)
class BudgetPeriod:
    start_date: date
    end_date: date
    budget: float
    total_amount: float = 0
    orders: list[Order] = field(default_factory=lambda: [])

    def __repr__(self) -> str:
        return f"<BudgetPeriod {self.start_date}..{self.end_date}>"

    def overlaps(self, start: date, end: date) -> bool:
        return start <= self.end_date and end >= self.start_date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    @property
    def remaining_budget(self) -> float:
        return self.budget - self.total_amount
