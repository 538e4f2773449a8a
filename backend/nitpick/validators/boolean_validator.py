"""Boolean Validator — real booleans plus the "true" / "false" attribute strings."""

from typing import Any, Optional

from nitpick.validators.base import BasePropValidator
from nitpick.validators.coercion import convert_string_boolean, is_boolean_like
from nitpick.validators.models import ErrorCode, ValidationResult


class BooleanValidator(BasePropValidator):
    """Accepts bool, "true" and "false". The strings come back as real booleans."""

    @property
    def name(self) -> str:
        return "BooleanValidator"

    def is_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        self._require_presence(value, name, element)
        return self._check(value, name, element)

    def is_optional(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        return self._check(value, name, element)

    def _check(self, value: Any, name: str, element: Optional[Any]) -> ValidationResult:
        passed = is_boolean_like(value)
        if not passed:
            self._mismatch(ErrorCode.PROP_NOT_BOOLEAN, value, name, element)

        return ValidationResult(result=passed, value=convert_string_boolean(value))
