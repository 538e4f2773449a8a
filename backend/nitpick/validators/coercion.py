"""Normalization helpers — turn accepted alternate representations into typed values.

These run before the structural type checks. None of them raise: a value that
cannot be normalized is handed back unchanged (or as NaN for numbers) and the
type check decides what to report.
"""

import json
import math
import re
from typing import Any, Union

Number = Union[int, float]

# Decimal literals: "12", "-1.5", ".5", "1e3"
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")
_RADIX_LITERALS = [
    (re.compile(r"^0[xX]([0-9a-fA-F]+)$"), 16),
    (re.compile(r"^0[oO]([0-7]+)$"), 8),
    (re.compile(r"^0[bB]([01]+)$"), 2),
]


def is_defined(value: Any) -> bool:
    """A value counts as provided unless it is None."""
    return value is not None


def to_number(value: Any) -> Number:
    """Coerce a value to a number.

    Returns NaN when the value has no numeric reading.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if text == "":
        return 0

    if _DECIMAL_RE.match(text):
        try:
            return int(text)
        except ValueError:
            return float(text)

    if _INFINITY_RE.match(text):
        return -math.inf if text.startswith("-") else math.inf

    for pattern, base in _RADIX_LITERALS:
        match = pattern.match(text)
        if match:
            return int(match.group(1), base)

    return math.nan


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_numeric(value: Any) -> bool:
    """True when the value coerces to something other than NaN."""
    return not is_nan(to_number(value))


def absolute(value: Any) -> Number:
    """Absolute value after numeric coercion; NaN stays NaN."""
    return abs(to_number(value))


def is_boolean_like(value: Any) -> bool:
    """Real booleans and the literal strings "true" / "false"."""
    return isinstance(value, bool) or value == "true" or value == "false"


def convert_string_boolean(value: Any) -> Any:
    """Turn "true" / "false" into real booleans, leave anything else alone."""
    if value == "false":
        return False
    if value == "true":
        return True
    return value


def parse_json(value: Any) -> Any:
    """Parse JSON strings; non-strings and unparseable strings are returned as-is."""
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the interpreter's recursion limit
        return value


def is_json_object(value: Any) -> bool:
    """Objects in the JSON sense: mappings and arrays."""
    # JSON null, tuples and other instances do not count
    return isinstance(value, (dict, list))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_truthy(value: Any) -> bool:
    """Python truthiness, except that NaN counts as falsy."""
    return not is_nan(value) and bool(value)
