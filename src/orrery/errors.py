"""Typed errors raised by the orrery package."""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """What went wrong with a request."""

    UNKNOWN_BODY = "UnknownBody"
    INVALID_DATE = "InvalidDate"


class OrreryError(Exception):
    """Base class for errors carrying the kind and the offending input."""

    kind: ErrorKind

    def __init__(self, value: Any, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownBodyError(OrreryError, KeyError):
    """Raised when a body name is not in the catalog."""

    kind = ErrorKind.UNKNOWN_BODY

    def __init__(self, name: Any) -> None:
        super().__init__(name, f"Planet, {name}, does not exist")


class InvalidDateError(OrreryError, ValueError):
    """Raised when a date string cannot be parsed."""

    kind = ErrorKind.INVALID_DATE

    def __init__(self, date_string: Any) -> None:
        super().__init__(date_string, f"Invalid date format: {date_string}")
