"""Forecast API router."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Query

from .errors import ForecastError
from .models import ForecastOutput
from .services.forecast_service import compute_forecast
from .services.input_mapper import parse_forecast_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/forecast", tags=["forecast"])


def _today() -> date:
    """Wrapper for deterministic tests."""
    return date.today()


@router.post("", response_model=ForecastOutput)
def create_forecast(
    payload: Any = Body(default=None),
    today: date | None = Query(default=None, description="YYYY-MM-DD, defaults to the server date"),
) -> ForecastOutput:
    """
    Compute "now" and "if wait" safe-to-splurge amounts.

    Example request:
    {
      "paySchedule": {"frequency": "fortnightly", "payDate": "2026-02-04", "totalAmount": 3704.32},
      "bills": [
        {"id": 1, "name": "Internet", "amount": 55, "dueDate": "2026-02-02",
         "scheduleType": "monthly", "payRail": "AMEX"}
      ],
      "commitments": [{"savingsAmount": 1100}],
      "baselines": [{"name": "groceries", "amount": 300}],
      "buffer": 50
    }
    """
    try:
        forecast_input = parse_forecast_input(payload)
        return compute_forecast(forecast_input, today or _today())
    except ForecastError as exc:
        logger.warning("Forecast rejected (%s): %s", exc.kind.value, exc.message)
        raise HTTPException(status_code=422, detail=exc.to_detail()) from exc
