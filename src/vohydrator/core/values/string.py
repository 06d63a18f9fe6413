"""
String value objects.
"""

from typing import ClassVar

from pydantic import field_validator

from vohydrator.core.values.base import ValueObject


class StringValueObject(ValueObject):
    """A string whose length lies within [minimum_length, maximum_length]."""

    value: str

    minimum_length: ClassVar[int] = 0
    maximum_length: ClassVar[int] = 255

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Validate length bounds."""
        if len(v) < cls.minimum_length:
            raise ValueError(
                f"Value must be at least {cls.minimum_length} characters, got {len(v)}"
            )
        if len(v) > cls.maximum_length:
            raise ValueError(
                f"Value must be at most {cls.maximum_length} characters, got {len(v)}"
            )
        return v

    def __str__(self) -> str:
        return self.value


class SearchTerm(StringValueObject):
    """Free-text search input. Must contain something besides whitespace."""

    minimum_length = 1
    maximum_length = 255

    @field_validator("value")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Search term must not be blank")
        return v
