"""
Best-effort coercion of raw values into builtin kinds.

Coercion is a pre-pass only: values that don't match an accepted form are
returned unchanged and the target's constructor decides whether to reject
them.
"""

import math
import re
from typing import Any

_INT_PATTERN = re.compile(r"-?\d+")
_FLOAT_PATTERN = re.compile(r"-?(\d+|\d*\.\d+)")

_BOOL_STRINGS = {"true": True, "false": False, "1": True, "0": False}


def _parse_int(text: str) -> int | str:
    """Parse an integer string; past the interpreter's digit limit the text is returned as is."""
    try:
        return int(text)
    except ValueError:
        return text


def cast(value: Any, kind: Any) -> Any:
    """
    Coerce a raw value into a builtin kind.

    Accepted conversions:
        str:   int or float -> decimal representation
        bool:  0/1, "true"/"false", "0"/"1"
        float: numeric string ("3", "-0.5", ".5")
        int:   integer string ("42", "-7")

    Args:
        value: Raw value from the input data.
        kind: Target builtin type. Other kinds leave the value untouched.

    Returns:
        The coerced value, or value itself when no rule applies.

    Example:
        >>> cast("3.12", float)
        3.12
        >>> cast(1, bool)
        True
        >>> cast("yes", bool)
        'yes'
    """
    if type(value) is kind:
        return value

    if kind is str:
        if type(value) in (int, float):
            return str(value)
    elif kind is bool:
        if type(value) is int and value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value in _BOOL_STRINGS:
            return _BOOL_STRINGS[value]
    elif kind is float:
        if isinstance(value, str) and _FLOAT_PATTERN.fullmatch(value):
            return float(value)
    elif kind is int:
        if isinstance(value, str) and _INT_PATTERN.fullmatch(value):
            return _parse_int(value)

    return value


def coerce_number(value: Any, kind: type) -> Any:
    """
    Coerce a scalar into the quantity a numeric value object stores.

    Unlike cast(), a float kind accepts ints, and an int kind truncates
    floats and fractional numeric strings ("3.7" -> 3).

    Args:
        value: int, float or str from the input data.
        kind: float or int.

    Returns:
        The number, or value unchanged when it isn't numeric.
    """
    if isinstance(value, str):
        if kind is int and _INT_PATTERN.fullmatch(value):
            return _parse_int(value)
        if not _FLOAT_PATTERN.fullmatch(value):
            return value
        value = float(value)

    if type(value) not in (int, float):
        return value

    if kind is int:
        if type(value) is float and not math.isfinite(value):
            return value
        return int(value)
    return float(value)
