"""
Numeric value objects.

Bounds and step are declared as class variables on each concrete type:

    >>> class Rating(NumberValueObject):
    ...     minimum_value = 0
    ...     maximum_value = 5
    ...     multiple_of = 0.5
    >>> Rating(4.5).value
    4.5
"""

import math
from typing import ClassVar

from pydantic import field_validator

from vohydrator.core.values.base import ValueObject

# Tolerance when checking multiple_of against binary floats (e.g. 3.12 / 0.01)
_STEP_PRECISION = 9


class NumberValueObject(ValueObject):
    """A float quantity within [minimum_value, maximum_value]."""

    value: float

    minimum_value: ClassVar[int | float] = -math.inf
    maximum_value: ClassVar[int | float] = math.inf
    multiple_of: ClassVar[int | float | None] = None

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: int | float) -> int | float:
        """Validate range and step."""
        if math.isnan(v):
            raise ValueError("Value must be a number")
        if v < cls.minimum_value:
            raise ValueError(f"Value must be >= {cls.minimum_value}, got {v}")
        if v > cls.maximum_value:
            raise ValueError(f"Value must be <= {cls.maximum_value}, got {v}")
        if cls.multiple_of is not None:
            steps = round(v / cls.multiple_of, _STEP_PRECISION)
            if steps != int(steps):
                raise ValueError(f"Value must be a multiple of {cls.multiple_of}, got {v}")
        return v

    def __str__(self) -> str:
        return str(self.value)


class IntValueObject(NumberValueObject):
    """An integer quantity within [minimum_value, maximum_value]."""

    value: int


class Positive(IntValueObject):
    """Strictly positive integer."""

    minimum_value = 1


class Page(IntValueObject):
    """1-based page number."""

    minimum_value = 1


class PerPage(IntValueObject):
    """Page size for paginated listings."""

    minimum_value = 1
    maximum_value = 100
