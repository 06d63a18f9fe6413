"""
Enumerated value objects.

Cases are backed by string values and resolved by value:

    >>> class Color(EnumValueObject):
    ...     RED = "red"
    ...     BLUE = "blue"
    >>> Color("red") is Color.RED
    True
"""

from enum import Enum


class EnumValueObject(str, Enum):
    """Base for string-backed enumerations."""

    def __str__(self) -> str:
        return str(self.value)
