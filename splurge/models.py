"""Typed records for the forecast input and output contracts.

JSON uses camelCase keys (``payDate``, ``safeToSplurge``); Python code uses the
snake_case attribute names. Money is carried as ``Decimal`` and written to JSON
as a number rounded to cents.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from .config import settings

PayFrequency = Literal["weekly", "fortnightly", "monthly"]
ScheduleType = Literal["fortnightly", "monthly", "yearly"]
SplurgeStatus = Literal["green", "amber", "frugal", "insolvent"]


def _money(value: Decimal) -> float:
    """Serialize Decimal values as 2-decimal JSON numbers."""
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


Money = Annotated[Decimal, PlainSerializer(_money, return_type=float, when_used="json")]


class ForecastModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PaySchedule(ForecastModel):
    frequency: PayFrequency
    pay_date: date
    total_amount: Money
    # Carried through for clients; the engine does not read it.
    optional_split: bool = False


class Bill(ForecastModel):
    """Recurring bill template anchored on its first known due date."""
    id: int | str
    name: str
    amount: Money
    due_date: date
    schedule_type: ScheduleType
    pay_rail: str


class FutureBill(ForecastModel):
    """One projected occurrence of a Bill."""
    name: str
    amount: Money
    due_date: date
    schedule_type: ScheduleType
    pay_rail: str


class Commitment(ForecastModel):
    savings_amount: Money


class Baseline(ForecastModel):
    name: str
    amount: Money


class ForecastInput(ForecastModel):
    pay_schedule: PaySchedule
    bills: list[Bill] = Field(default_factory=list)
    commitments: list[Commitment] = Field(default_factory=list)
    baselines: list[Baseline] = Field(default_factory=list)
    buffer: Money = Field(default_factory=lambda: settings.default_buffer)

    @field_validator("buffer", mode="before")
    @classmethod
    def default_missing_buffer(cls, value: Any) -> Any:
        if value is None:
            return settings.default_buffer
        return value


class Breakdown(ForecastModel):
    """Inputs and intermediate totals behind one window's result."""
    window_start: date
    window_end: date
    income: Money
    commitments: list[Commitment]
    total_commitments: Money
    baselines: list[Baseline]
    total_baselines: Money
    buffer: Money
    total_bill_amount: Money
    all_bills: list[FutureBill]
    carry_over: Money


class WindowForecast(ForecastModel):
    safe_to_splurge: Money
    status: SplurgeStatus
    breakdown: Breakdown


class ForecastOutput(ForecastModel):
    now: WindowForecast
    if_wait: WindowForecast
