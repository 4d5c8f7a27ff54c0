from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Sequence

from ..errors import date_mapping_error
from .pay_cycle import require_date


@dataclass(frozen=True)
class WindowTotals:
    occurrences: list[Any] = field(default_factory=list)
    total_amount: Decimal = Decimal("0.00")


def bills_in_window(
    occurrences: Sequence[Any] | None,
    window_start: Any,
    window_end: Any,
) -> WindowTotals:
    """
    Occurrences due in [window_start, window_end) and their summed amount.

    Accepts Bill templates or projected FutureBills and keeps input order.
    A missing due date is an error; a due date that is not a date at all is
    skipped.
    """
    start = require_date(window_start, "window start")
    end = require_date(window_end, "window end")

    if not occurrences:
        return WindowTotals()

    included: list[Any] = []
    total = Decimal("0.00")
    for occurrence in occurrences:
        due_date = getattr(occurrence, "due_date", None)
        if due_date is None:
            raise date_mapping_error(f"Bill {getattr(occurrence, 'name', '?')!r} has no due date")
        if isinstance(due_date, datetime):
            due_date = due_date.date()
        elif not isinstance(due_date, date):
            continue
        if start <= due_date < end:
            included.append(occurrence)
            total += Decimal(str(occurrence.amount))

    return WindowTotals(occurrences=included, total_amount=total)
