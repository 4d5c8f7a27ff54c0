"""Error type shared by the forecast engine and its input boundary."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    DATE_RESOLUTION = "date_resolution"
    EMPTY_INPUT = "empty_input"


class ForecastError(ValueError):
    """Raised for any input-shaped failure; `kind` tells callers which one."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_detail(self) -> dict[str, str]:
        return {"error": self.message, "type": self.kind.value}


def validation_error(message: str) -> ForecastError:
    return ForecastError(ErrorKind.VALIDATION, message)


def date_mapping_error(message: str) -> ForecastError:
    return ForecastError(ErrorKind.DATE_RESOLUTION, message)


def empty_input_error(message: str) -> ForecastError:
    return ForecastError(ErrorKind.EMPTY_INPUT, message)
