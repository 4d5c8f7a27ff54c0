from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import date_mapping_error, empty_input_error, validation_error
from ..models import ForecastInput


def _format_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "body"
        parts.append(f"{loc}: {error.get('msg')}")
    return "; ".join(parts)


def parse_forecast_input(raw: Any) -> ForecastInput:
    """
    Validate a raw request payload into a ForecastInput.

    ISO date strings become dates here and the buffer default is applied here;
    nothing downstream re-parses or re-defaults.
    """
    if isinstance(raw, ForecastInput):
        return raw
    if raw is None or (isinstance(raw, Mapping) and not raw):
        raise empty_input_error("Forecast input is empty")
    if not isinstance(raw, Mapping):
        raise validation_error(f"Validation failed: expected an object, got {type(raw).__name__}")

    try:
        return ForecastInput.model_validate(raw)
    except ValidationError as exc:
        if all(error["type"].startswith("date_") for error in exc.errors()):
            raise date_mapping_error(f"Date mapping failed: {_format_errors(exc)}") from exc
        raise validation_error(f"Validation failed: {_format_errors(exc)}") from exc
