"""Object Validator — JSON objects and arrays, given directly or as JSON strings."""

from typing import Any, Optional

from nitpick.validators.base import BasePropValidator
from nitpick.validators.coercion import is_defined, is_json_object, parse_json
from nitpick.validators.models import ErrorCode, ValidationResult


class ObjectValidator(BasePropValidator):
    """Parses JSON strings, then accepts dict and list values.

    Strings that are not valid JSON are returned unchanged and fail.
    """

    @property
    def name(self) -> str:
        return "ObjectValidator"

    def is_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        # Presence is judged on the raw value, before any parsing
        self._require_presence(value, name, element)

        parsed = parse_json(value)
        if not is_json_object(parsed):
            self._mismatch(ErrorCode.PROP_NOT_OBJECT, value, name, element)
            return ValidationResult.failed(parsed)

        return ValidationResult.passed(parsed)

    def is_optional(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        parsed = parse_json(value)
        if is_defined(value) and not is_json_object(parsed):
            self._mismatch(ErrorCode.PROP_NOT_OBJECT, value, name, element)
            return ValidationResult.failed(parsed)

        return ValidationResult.passed(parsed)
