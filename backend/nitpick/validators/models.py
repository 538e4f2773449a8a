"""Validation models — severity levels, diagnostic codes and the result record."""

from enum import Enum, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class LogLevel(IntEnum):
    """Logger noise levels. Anything above VERBOSE behaves like VERBOSE."""

    SILENT = 0    # No messages at all
    ERRORS = 1    # Only errors
    WARNINGS = 2  # Warnings and errors
    VERBOSE = 3   # Every message, including log/info


DEFAULT_LOG_LEVEL = LogLevel.VERBOSE


class ErrorCode(str, Enum):
    """Diagnostic codes, emitted as the structlog event name.

    Naming convention: PROP_SPECIFIC_ISSUE
    """

    # Presence
    PROP_REQUIRED_MISSING = "prop_required_missing"
    PROP_OPTIONAL_MISSING = "prop_optional_missing"

    # Type mismatches
    PROP_NOT_STRING = "prop_not_string"
    PROP_NOT_BOOLEAN = "prop_not_boolean"
    PROP_NOT_NUMBER = "prop_not_number"
    PROP_NOT_OBJECT = "prop_not_object"


class ValidationResult(BaseModel):
    """Outcome of a single property check.

    ``value`` is the (possibly coerced) input and is always safe to consume,
    whether or not the check passed.
    """

    model_config = ConfigDict(frozen=True)

    result: bool
    value: Any = None

    @classmethod
    def passed(cls, value: Any) -> "ValidationResult":
        return cls(result=True, value=value)

    @classmethod
    def failed(cls, value: Any) -> "ValidationResult":
        return cls(result=False, value=value)
