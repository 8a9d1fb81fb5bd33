"""Allocation of orders to date-bounded budget periods.

Periods are scanned in the order the caller supplies them. When periods
overlap in time, the earlier one in the sequence absorbs an order's amount
first and answers ``get_remaining_budget`` for dates it contains.
"""
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from backoffice.domain import models

logger = logging.getLogger(__name__)


class BudgetPeriodNotFound(Exception):
    pass


@dataclass(frozen=True)
class BudgetValidation:
    is_valid: bool
    remaining_budget: float
    exceeded_amount: float


def overlaps(start: date, end: date, period: models.BudgetPeriod) -> bool:
    return period.overlaps(start, end)


def _time_span(order: models.Order, period: models.BudgetPeriod) -> float:
    # a zero-duration order is a single instant and goes wholly to the first overlapping period
    if order.is_instant:
        return 1.0
    start = max(order.start_date, period.start_date)
    end = min(order.end_date, period.end_date)
    return (end - start).total_seconds() / (order.end_date - order.start_date).total_seconds()


def map_orders_to_budget_periods(
    orders: Sequence[models.Order],
    periods: list[models.BudgetPeriod],
) -> list[models.BudgetPeriod]:
    """Spread each order's amount over the periods it overlaps.

    Each overlapping period receives the order's amount in proportion to the
    share of the order's duration that falls inside it, capped by what is
    still unallocated. The periods are mutated in place and returned;
    accumulators are not reset, so callers pass fresh periods.
    """
    for order in orders:
        remaining = order.amount
        matched = False
        for period in periods:
            if not overlaps(order.start_date, order.end_date, period):
                continue
            matched = True
            amount = min(remaining, order.amount * _time_span(order, period))
            period.orders.append(order)
            period.total_amount += amount
            remaining -= amount
            if remaining <= 0:
                break
        if not matched:
            logger.debug("Order %s overlaps no budget period. Dropped.", order.id)
    return periods


def validate_order_against_budget(
    order: models.Order,
    periods: Sequence[models.BudgetPeriod],
) -> BudgetValidation:
    total_budget = 0.0
    total_amount_spent = 0.0
    for period in periods:
        if not overlaps(order.start_date, order.end_date, period):
            continue
        total_budget += period.remaining_budget
        total_amount_spent += min(order.amount, total_budget)
        if total_amount_spent >= order.amount:
            break

    exceeded_amount = max(0.0, order.amount - total_amount_spent)
    return BudgetValidation(
        is_valid=exceeded_amount == 0,
        remaining_budget=total_budget - total_amount_spent,
        exceeded_amount=exceeded_amount,
    )


def get_remaining_budget(day: date, periods: Sequence[models.BudgetPeriod]) -> float:
    try:
        period = next(p for p in periods if p.contains(day))
    except StopIteration:
        raise BudgetPeriodNotFound(f"No budget period found for {day}")
    return period.remaining_budget
