"""Expand recurring bill templates into dated occurrences."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from ..errors import validation_error
from ..models import Bill, FutureBill
from .pay_cycle import require_date, shift_period

SCHEDULE_TYPES: set[str] = {"fortnightly", "monthly", "yearly"}


def _occurrence(bill: Bill, due_date: date) -> FutureBill:
    data = bill.model_dump(exclude={"id", "due_date"})
    return FutureBill(**data, due_date=due_date)


def project_bill(bill: Bill, from_date: Any, to_date: Any) -> list[FutureBill]:
    """
    Every occurrence of `bill` due within [from_date, to_date], both ends inclusive.

    The bill's own due date is the anchor; an anchor before `from_date` is
    stepped forward until it enters the range.
    """
    anchor = getattr(bill, "due_date", None)
    if anchor is None:
        raise validation_error("Bill does not have a due date")

    schedule_type = getattr(bill, "schedule_type", None)
    if not schedule_type or schedule_type not in SCHEDULE_TYPES:
        raise validation_error(f"Bill schedule is missing or invalid: {schedule_type!r}")

    start = require_date(from_date, "window start")
    end = require_date(to_date, "window end")
    pointer = require_date(anchor, "bill due date")

    occurrences: list[FutureBill] = []
    while pointer <= end:
        if pointer >= start:
            occurrences.append(_occurrence(bill, pointer))
        pointer = shift_period(pointer, schedule_type)
    return occurrences


def project_bills(bills: Iterable[Bill] | None, from_date: Any, to_date: Any) -> list[FutureBill]:
    """Flatten projections for many bills, keeping bill order then date order."""
    occurrences: list[FutureBill] = []
    for bill in bills or []:
        occurrences.extend(project_bill(bill, from_date, to_date))
    return occurrences
