"""PropTypes — the validator set handed to the component framework.

Usage:
    prop_types = create_prop_types(package_version="1.2.0")

    enabled = prop_types.is_boolean.is_required(raw, "enabled", element)
    if not enabled.result:
        # fall back to a default, skip rendering, ...
"""

from functools import lru_cache
from typing import Any, Optional

import structlog

from nitpick.config import Settings, get_settings
from nitpick.services.logger import PropLogger, configure_logging
from nitpick.validators.base import (
    BasePropValidator,
    RecoverableRequiredMixin,
    note_absence,
    require_presence,
)
from nitpick.validators.boolean_validator import BooleanValidator
from nitpick.validators.models import LogLevel, ValidationResult
from nitpick.validators.number_validator import NumberValidator
from nitpick.validators.object_validator import ObjectValidator
from nitpick.validators.string_validator import StringValidator


class PropTypes(RecoverableRequiredMixin):
    """General presence checks plus one typed validator per supported type.

    All validators share the injected logger, so a single set_level() call
    adjusts the noise of the whole set.
    """

    def __init__(self, logger: PropLogger, version: Optional[str] = None):
        self.logger = logger
        self._version = version

        self.is_string = StringValidator(logger)
        self.is_boolean = BooleanValidator(logger)
        self.is_number = NumberValidator(logger)
        self.is_object = ObjectValidator(logger)

    @property
    def version(self) -> Optional[str]:
        """Version of the validation ruleset, as given at construction."""
        return self._version

    @property
    def validators(self) -> list[BasePropValidator]:
        return [self.is_string, self.is_boolean, self.is_number, self.is_object]

    def is_required(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        """General required check against a value of any type.

        Raises:
            MissingRequiredProperty: value is None
        """
        return require_presence(self.logger, value, name, element)

    def is_optional(self, value: Any, name: str, element: Optional[Any] = None) -> ValidationResult:
        """General optional check. Always passes."""
        return note_absence(self.logger, value, name, element)


def create_prop_types(
    is_testing_env: Optional[bool] = None,
    package_version: Optional[str] = None,
    logger: Optional[PropLogger] = None,
    settings: Optional[Settings] = None,
) -> PropTypes:
    """Build a PropTypes set from settings, with explicit arguments taking precedence.

    Args:
        is_testing_env: Silence the logger (level 0). Defaults to settings.TESTING.
        package_version: Exposed as PropTypes.version. Defaults to settings.PACKAGE_VERSION.
        logger: Pre-built logger to inject. Its level is still forced to 0 in testing.
        settings: Settings to read defaults from. Defaults to get_settings().
    """
    settings = settings or get_settings()

    if not structlog.is_configured():
        configure_logging(settings.DEBUG)

    if logger is None:
        logger = PropLogger(level=settings.LOG_LEVEL, prefix=settings.LOG_PREFIX)

    testing = settings.TESTING if is_testing_env is None else is_testing_env
    if testing:
        # Reduce the logging noise for unit tests
        logger.set_level(LogLevel.SILENT)

    version = settings.PACKAGE_VERSION if package_version is None else package_version

    return PropTypes(logger, version=version)


@lru_cache
def get_prop_types() -> PropTypes:
    """Process-wide PropTypes built from the environment settings."""
    return create_prop_types()
