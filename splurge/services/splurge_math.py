from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

from ..errors import validation_error

CENT = Decimal("0.01")

GREEN_THRESHOLD = Decimal("100")
AMBER_THRESHOLD = Decimal("50")


def to_decimal(value: Any, field: str) -> Decimal:
    """Convert a finite int/float/Decimal to Decimal; reject anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise validation_error(f"{field} must be a number, got {value!r}")
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise validation_error(f"{field} must be a finite number, got {value!r}")
    return amount


def to_cents(value: Decimal) -> int:
    return int((value / CENT).to_integral_value(rounding=ROUND_HALF_UP))


def splurge_amount(income: Any, total_obligations: Any) -> Decimal:
    """Income minus obligations, both rounded to whole cents before subtracting."""
    income_cents = to_cents(to_decimal(income, "income"))
    obligation_cents = to_cents(to_decimal(total_obligations, "total obligations"))
    return (Decimal(income_cents - obligation_cents) * CENT).quantize(CENT)


def splurge_status(amount: Any) -> str:
    value = to_decimal(amount, "splurge amount")
    if value >= GREEN_THRESHOLD:
        return "green"
    if value >= AMBER_THRESHOLD:
        return "amber"
    if value >= 0:
        return "frugal"
    return "insolvent"
