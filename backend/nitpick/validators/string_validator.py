"""String Validator — plain text props, no coercion."""

from typing import Any, Optional

from nitpick.validators.base import BasePropValidator
from nitpick.validators.coercion import is_string
from nitpick.validators.models import ErrorCode, ValidationResult


class StringValidator(BasePropValidator):
    """Accepts str values only."""

    @property
    def name(self) -> str:
        return "StringValidator"

    def is_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        self._require_presence(value, name, element)
        return self._check(value, name, element)

    def is_optional(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        # None fails here too: an optional string that is absent is not a string
        return self._check(value, name, element)

    def _check(self, value: Any, name: str, element: Optional[Any]) -> ValidationResult:
        if not is_string(value):
            self._mismatch(ErrorCode.PROP_NOT_STRING, value, name, element)
            return ValidationResult.failed(value)
        return ValidationResult.passed(value)
