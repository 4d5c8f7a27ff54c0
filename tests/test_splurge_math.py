from decimal import Decimal

import pytest

from splurge.errors import ErrorKind, ForecastError
from splurge.services.splurge_math import CENT, splurge_amount, splurge_status


def test_splurge_amount_positive() -> None:
    assert splurge_amount(3052.74, 2154.75) == Decimal("897.99")


def test_splurge_amount_negative() -> None:
    assert splurge_amount(3052.74, 4000.45) == Decimal("-947.71")


def test_splurge_amount_rounds_operands_to_cents_first() -> None:
    assert splurge_amount(3052.746, 4000.455) == Decimal("-947.71")


def test_splurge_amount_avoids_float_artifacts() -> None:
    assert splurge_amount(0.3, 0.1) == Decimal("0.20")
    assert splurge_amount(Decimal("3704.32"), Decimal("1575")) == Decimal("2129.32")


@pytest.mark.parametrize("value", [0, 12.345, 3704.32, Decimal("-19.99"), 1_000_000])
def test_splurge_amount_of_equal_values_is_zero(value) -> None:
    assert splurge_amount(value, value) == Decimal("0")


def test_splurge_amount_is_stable_under_rerounding() -> None:
    result = splurge_amount(4000.455, 3092.79)
    assert result.quantize(CENT) == result


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("100"), "green"),
        (Decimal("2129.32"), "green"),
        (Decimal("99.99"), "amber"),
        (Decimal("50"), "amber"),
        (Decimal("49.99"), "frugal"),
        (Decimal("0"), "frugal"),
        (Decimal("-0.01"), "insolvent"),
        (-947.71, "insolvent"),
    ],
)
def test_splurge_status_bands(amount, expected) -> None:
    assert splurge_status(amount) == expected


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "100", None, True, Decimal("NaN")])
def test_non_finite_inputs_are_rejected(bad) -> None:
    with pytest.raises(ForecastError) as exc_info:
        splurge_status(bad)
    assert exc_info.value.kind == ErrorKind.VALIDATION

    with pytest.raises(ForecastError):
        splurge_amount(bad, 10)
    with pytest.raises(ForecastError):
        splurge_amount(10, bad)
