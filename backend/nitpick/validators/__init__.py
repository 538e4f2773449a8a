"""Prop validators — presence and type checks for component properties.

Usage:
    from nitpick.validators import create_prop_types

    prop_types = create_prop_types()
    label = prop_types.is_string.is_required(raw_label, "label", element)
"""

from nitpick.validators.prop_types import PropTypes, create_prop_types, get_prop_types
from nitpick.validators.models import ValidationResult, LogLevel, ErrorCode
from nitpick.validators.errors import PropTypesError, FatalPropError, MissingRequiredProperty

__all__ = [
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
