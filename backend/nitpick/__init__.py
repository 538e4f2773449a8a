"""nitpick — runtime prop validation and leveled diagnostics for UI components."""

__version__ = "1.0.0"

# validators must load before services: the logger imports validator helpers
from nitpick.validators import (
    PropTypes,
    create_prop_types,
    get_prop_types,
    ValidationResult,
    LogLevel,
    ErrorCode,
    PropTypesError,
    FatalPropError,
    MissingRequiredProperty,
)
from nitpick.services.logger import PropLogger

__all__ = [
    "__version__",
    "PropLogger",
    "PropTypes",
    "create_prop_types",
    "get_prop_types",
    "ValidationResult",
    "LogLevel",
    "ErrorCode",
    "PropTypesError",
    "FatalPropError",
    "MissingRequiredProperty",
]
