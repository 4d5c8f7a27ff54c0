from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from splurge.errors import ErrorKind, ForecastError
from splurge.models import PaySchedule
from splurge.services.pay_cycle import (
    add_months,
    advance_by_cycle,
    next_pay_date_after,
    shift_period,
)


def _schedule(pay_date: date, frequency: str = "weekly") -> PaySchedule:
    return PaySchedule(frequency=frequency, pay_date=pay_date, total_amount=Decimal("2000"))


def test_advance_by_cycle_steps_per_frequency() -> None:
    assert advance_by_cycle(date(2026, 1, 20), "weekly") == date(2026, 1, 27)
    assert advance_by_cycle(date(2026, 1, 20), "fortnightly") == date(2026, 2, 3)
    assert advance_by_cycle(date(2026, 1, 20), "monthly") == date(2026, 2, 20)


def test_monthly_step_rolls_short_month_forward() -> None:
    assert advance_by_cycle(date(2026, 1, 31), "monthly") == date(2026, 3, 3)
    assert advance_by_cycle(date(2024, 1, 31), "monthly") == date(2024, 3, 2)
    assert advance_by_cycle(date(2026, 12, 15), "monthly") == date(2027, 1, 15)


def test_yearly_step_from_leap_day() -> None:
    assert add_months(date(2024, 2, 29), 12) == date(2025, 3, 1)
    assert shift_period(date(2025, 5, 20), "yearly") == date(2026, 5, 20)


def test_advance_accepts_datetime_input() -> None:
    assert advance_by_cycle(datetime(2026, 1, 20, 9, 30), "weekly") == date(2026, 1, 27)


@pytest.mark.parametrize("frequency", ["weekly", "fortnightly", "monthly"])
@pytest.mark.parametrize(
    "start",
    [date(2026, 1, 31), date(2026, 2, 28), date(2024, 2, 29), date(2026, 12, 31)],
)
def test_advance_is_always_later(start: date, frequency: str) -> None:
    assert advance_by_cycle(start, frequency) > start


@pytest.mark.parametrize("frequency", [None, "", "daily", "yearly"])
def test_advance_rejects_unknown_frequency(frequency) -> None:
    with pytest.raises(ForecastError) as exc_info:
        advance_by_cycle(date(2026, 1, 20), frequency)
    assert exc_info.value.kind == ErrorKind.VALIDATION


def test_advance_rejects_non_date() -> None:
    with pytest.raises(ForecastError) as exc_info:
        advance_by_cycle("2026-01-20", "weekly")
    assert exc_info.value.kind == ErrorKind.DATE_RESOLUTION


def test_next_pay_date_when_anchor_is_ahead() -> None:
    assert next_pay_date_after(date(2026, 1, 15), _schedule(date(2026, 1, 20))) == date(2026, 1, 20)


def test_next_pay_date_skips_past_anchor() -> None:
    assert next_pay_date_after(date(2026, 1, 25), _schedule(date(2026, 1, 20))) == date(2026, 1, 27)


def test_next_pay_date_is_strictly_after_equal_reference() -> None:
    schedule = _schedule(date(2026, 1, 20), "fortnightly")
    assert next_pay_date_after(date(2026, 1, 20), schedule) == date(2026, 2, 3)


def test_next_pay_date_is_smallest_reachable_after_reference() -> None:
    schedule = _schedule(date(2025, 1, 1), "fortnightly")
    reference = date(2026, 3, 10)

    result = next_pay_date_after(reference, schedule)

    assert result > reference
    assert result - timedelta(days=14) <= reference
    assert (result - date(2025, 1, 1)).days % 14 == 0


def test_next_pay_date_monthly_anchor_in_prior_year() -> None:
    schedule = _schedule(date(2025, 11, 28), "monthly")
    assert next_pay_date_after(date(2026, 2, 10), schedule) == date(2026, 2, 28)


def test_next_pay_date_requires_schedule() -> None:
    with pytest.raises(ForecastError) as exc_info:
        next_pay_date_after(date(2026, 1, 20), None)
    assert exc_info.value.kind == ErrorKind.VALIDATION


def test_next_pay_date_rejects_invalid_reference() -> None:
    with pytest.raises(ForecastError) as exc_info:
        next_pay_date_after("yesterday", _schedule(date(2026, 1, 20)))
    assert exc_info.value.kind == ErrorKind.DATE_RESOLUTION
