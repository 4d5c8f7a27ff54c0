from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

from ..errors import date_mapping_error, validation_error

PAY_FREQUENCIES: set[str] = {"weekly", "fortnightly", "monthly"}

_DAY_STEPS: dict[str, int] = {
    "weekly": 7,
    "fortnightly": 14,
}

_MONTH_STEPS: dict[str, int] = {
    "monthly": 1,
    "yearly": 12,
}


def require_date(value: Any, field: str) -> date:
    """Return `value` as a plain date or raise a date-resolution error."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise date_mapping_error(f"{field} is not a valid date: {value!r}")


def add_months(value: date, offset: int) -> date:
    """
    Calendar month step that keeps the day number and rolls any excess forward.

    Jan 31 + 1 month -> Mar 3 (Feb 2026 has 28 days), Feb 29 + 12 months -> Mar 1.
    """
    absolute_index = (value.year * 12 + (value.month - 1)) + offset
    next_year, month_zero_based = divmod(absolute_index, 12)
    return date(next_year, month_zero_based + 1, 1) + timedelta(days=value.day - 1)


def shift_period(value: date, unit: str) -> date:
    """Advance `value` by one weekly/fortnightly/monthly/yearly step."""
    if unit in _DAY_STEPS:
        return value + timedelta(days=_DAY_STEPS[unit])
    if unit in _MONTH_STEPS:
        return add_months(value, _MONTH_STEPS[unit])
    raise validation_error(f"Unrecognized schedule: {unit!r}")


def _require_frequency(frequency: str | None) -> str:
    if not frequency:
        raise validation_error("Pay frequency is missing")
    if frequency not in PAY_FREQUENCIES:
        raise validation_error(
            f"Pay frequency must be one of: fortnightly, monthly, weekly (got {frequency!r})"
        )
    return frequency


def advance_by_cycle(value: Any, frequency: str | None) -> date:
    """Return the pay date one cycle after `value`."""
    current = require_date(value, "date")
    return shift_period(current, _require_frequency(frequency))


def next_pay_date_after(reference: Any, pay_schedule: Any) -> date:
    """
    First scheduled pay date strictly later than `reference`.

    Walks forward from the schedule's anchor `pay_date`; a pay date equal to
    `reference` does not count.
    """
    if pay_schedule is None:
        raise validation_error("Pay schedule is missing")
    reference_date = require_date(reference, "reference date")
    pay_date = require_date(getattr(pay_schedule, "pay_date", None), "pay date")
    frequency = _require_frequency(getattr(pay_schedule, "frequency", None))

    while pay_date <= reference_date:
        pay_date = advance_by_cycle(pay_date, frequency)
    return pay_date
