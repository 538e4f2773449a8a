"""Exceptions raised by the validators and the logger."""

from typing import Any, Optional

from nitpick.validators.models import ValidationResult

FATAL_MESSAGE = "@reduct/component Error: Details are posted above."


class PropTypesError(Exception):
    """Base class for every nitpick exception."""


class FatalPropError(PropTypesError):
    """Raised by ``PropLogger.error`` after the diagnostic has been written."""

    def __init__(self, message: str = FATAL_MESSAGE):
        super().__init__(message)


class MissingRequiredProperty(FatalPropError):
    """Raised when a required property is ``None``.

    Carries the failed ``ValidationResult`` so callers that want to recover
    can keep going with it instead of aborting.
    """

    def __init__(self, prop_name: str, element: Optional[Any] = None):
        super().__init__()
        self.prop_name = prop_name
        self.element = element
        self.result = ValidationResult.failed(None)
