"""Base prop validator — abstract class implementing the Strategy Pattern.

Each type validator is a standalone, independently testable unit that shares
one injected logger. New types are added without modifying PropTypes.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from nitpick.services.logger import PropLogger
from nitpick.validators.coercion import is_defined
from nitpick.validators.errors import MissingRequiredProperty
from nitpick.validators.models import ErrorCode, ValidationResult


class RecoverableRequiredMixin:
    """Adds check_required() to anything exposing is_required()."""

    def check_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        """Like is_required(), but returns the failed result instead of raising."""
        try:
            return self.is_required(value, name, element)
        except MissingRequiredProperty as e:
            return e.result


class BasePropValidator(RecoverableRequiredMixin, ABC):
    """Abstract base for all typed prop validators.

    Contract:
        - is_required() raises MissingRequiredProperty when the value is None
        - type mismatches never raise: they are logged and result is False
        - the returned value is always usable, coerced where possible
    """

    def __init__(self, logger: PropLogger):
        self.logger = logger

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def is_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        """Validate a property that must be present.

        Args:
            value: Raw property value
            name: Property name, used in diagnostics
            element: Element the property was expected on

        Returns:
            ValidationResult with the (possibly coerced) value

        Raises:
            MissingRequiredProperty: value is None
        """
        ...

    @abstractmethod
    def is_optional(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        """Validate a property that may be absent."""
        ...

    # ── Helper Methods ──

    def _require_presence(self, value: Any, name: str, element: Optional[Any]) -> ValidationResult:
        """General required check. Logs and raises when the value is None."""
        return require_presence(self.logger, value, name, element)

    def _mismatch(self, code: ErrorCode, value: Any, name: str, element: Optional[Any]) -> None:
        self.logger.warn(code.value, element, prop=name, value=value, validator=self.name)


def require_presence(logger: PropLogger, value: Any, name: str, element: Optional[Any]) -> ValidationResult:
    """Shared by PropTypes.is_required and every typed is_required."""
    if not is_defined(value):
        logger.error(
            ErrorCode.PROP_REQUIRED_MISSING.value,
            element,
            error=MissingRequiredProperty(name, element),
            prop=name,
        )
    return ValidationResult.passed(value)


def note_absence(logger: PropLogger, value: Any, name: str, element: Optional[Any]) -> ValidationResult:
    """General optional check. Absence is only worth an info message."""
    if not is_defined(value):
        logger.info(ErrorCode.PROP_OPTIONAL_MISSING.value, element, prop=name)
    return ValidationResult.passed(value)
