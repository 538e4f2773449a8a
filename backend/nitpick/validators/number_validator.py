"""Number Validator — numeric props, normalized to their absolute value."""

from typing import Any, Optional

from nitpick.validators.base import BasePropValidator
from nitpick.validators.coercion import absolute, is_nan, is_numeric, is_truthy
from nitpick.validators.models import ErrorCode, ValidationResult


class NumberValidator(BasePropValidator):
    """Accepts anything with a numeric reading ("12", 3.5, True, ...).

    The returned value is always the absolute value of the coerced number.
    """

    @property
    def name(self) -> str:
        return "NumberValidator"

    def is_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        # The prop is required, so check for its presence first
        self._require_presence(value, name, element)

        if not is_numeric(value):
            self._mismatch(ErrorCode.PROP_NOT_NUMBER, value, name, element)
            return ValidationResult.failed(value)

        return ValidationResult.passed(absolute(value))

    def is_optional(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        """Only truthy values are type checked.

        Falsy values without a numeric reading (None, NaN, empty containers)
        come back as None without any diagnostic.
        """
        passed = True
        if is_truthy(value) and not is_numeric(value):
            self._mismatch(ErrorCode.PROP_NOT_NUMBER, value, name, element)
            passed = False

        normalized = absolute(value)
        return ValidationResult(result=passed, value=None if is_nan(normalized) else normalized)
