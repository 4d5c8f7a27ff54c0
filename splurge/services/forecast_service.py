"""Dual-window safe-to-splurge forecast.

Window A ("now") runs from `today` up to the next pay date; window B
("if wait") runs from that pay date up to the one after it. Both windows are
charged the full commitments, baselines and buffer. Bills are projected once
over the whole horizon and split between the windows afterwards. Whatever
window A leaves over is carried into window B.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Iterable

from ..errors import validation_error
from ..models import (
    Baseline,
    Breakdown,
    Commitment,
    ForecastInput,
    ForecastOutput,
    WindowForecast,
)
from .pay_cycle import advance_by_cycle, next_pay_date_after, require_date
from .recurrence import project_bills
from .splurge_math import splurge_amount, splurge_status, to_decimal
from .windows import WindowTotals, bills_in_window

logger = logging.getLogger(__name__)


def total_commitments(commitments: Iterable[Commitment] | None) -> Decimal:
    return sum((to_decimal(c.savings_amount, "savings amount") for c in commitments or []), Decimal("0.00"))


def total_baselines(baselines: Iterable[Baseline] | None) -> Decimal:
    return sum((to_decimal(b.amount, "baseline amount") for b in baselines or []), Decimal("0.00"))


def _breakdown(
    payload: ForecastInput,
    window_start: date,
    window_end: date,
    window: WindowTotals,
    commitments_total: Decimal,
    baselines_total: Decimal,
    carry_over: Decimal,
) -> Breakdown:
    return Breakdown(
        window_start=window_start,
        window_end=window_end,
        income=payload.pay_schedule.total_amount,
        commitments=list(payload.commitments),
        total_commitments=commitments_total,
        baselines=list(payload.baselines),
        total_baselines=baselines_total,
        buffer=payload.buffer,
        total_bill_amount=window.total_amount,
        all_bills=window.occurrences,
        carry_over=carry_over,
    )


def compute_forecast(payload: ForecastInput, today: Any) -> ForecastOutput:
    """
    Build the "now" and "if wait" forecasts for `payload` as of `today`.

    `today` must be passed in; the engine never reads the clock.
    """
    if payload is None or getattr(payload, "pay_schedule", None) is None:
        raise validation_error("Forecast input requires a pay schedule")
    today = require_date(today, "today")
    pay_schedule = payload.pay_schedule

    active_pay_day = next_pay_date_after(today, pay_schedule)
    following_pay_day = advance_by_cycle(active_pay_day, pay_schedule.frequency)
    logger.debug(
        "Forecast windows: now=[%s, %s) if_wait=[%s, %s)",
        today, active_pay_day, active_pay_day, following_pay_day,
    )

    # One projection over the whole horizon; the windows split it below.
    occurrences = project_bills(payload.bills, today, following_pay_day)
    window_a = bills_in_window(occurrences, today, active_pay_day)
    window_b = bills_in_window(occurrences, active_pay_day, following_pay_day)
    logger.debug(
        "Projected %d bill occurrences: %d now, %d if waiting",
        len(occurrences), len(window_a.occurrences), len(window_b.occurrences),
    )

    income = to_decimal(pay_schedule.total_amount, "income")
    buffer = to_decimal(payload.buffer, "buffer")
    commitments_total = total_commitments(payload.commitments)
    baselines_total = total_baselines(payload.baselines)
    fixed_charges = commitments_total + baselines_total + buffer

    splurge_a = splurge_amount(income, window_a.total_amount + fixed_charges)
    splurge_b = splurge_amount(income, window_b.total_amount + fixed_charges) + splurge_a

    return ForecastOutput(
        now=WindowForecast(
            safe_to_splurge=splurge_a,
            status=splurge_status(splurge_a),
            breakdown=_breakdown(
                payload, today, active_pay_day, window_a,
                commitments_total, baselines_total, Decimal("0.00"),
            ),
        ),
        if_wait=WindowForecast(
            safe_to_splurge=splurge_b,
            status=splurge_status(splurge_b),
            breakdown=_breakdown(
                payload, active_pay_day, following_pay_day, window_b,
                commitments_total, baselines_total, splurge_a,
            ),
        ),
    )
