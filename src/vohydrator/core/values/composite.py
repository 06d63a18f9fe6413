"""
Composite value objects.

A composite is built from named, typed fields, each of which is either a
builtin (str, int, float, bool) or another value object:

    >>> from vohydrator.core.values.number import Page, PerPage
    >>> class Paginate(CompositeValueObject):
    ...     per_page: PerPage
    ...     page: Page
    >>> Paginate(PerPage(10), Page(1)).page.value
    1

DynamicCompositeValueObject holds an arbitrary mapping verbatim, for payloads
whose shape is not known up front.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import field_validator

from vohydrator.core.values.base import ValueObject


class CompositeValueObject(ValueObject):
    """Base for value objects with named, typed fields."""


class DynamicCompositeValueObject(ValueObject):
    """Pass-through container for an untyped mapping."""

    data: dict[str, Any]

    @field_validator("data", mode="before")
    @classmethod
    def coerce_mapping(cls, v: Any) -> Any:
        """Accept any Mapping, stored as a plain dict."""
        if isinstance(v, Mapping) and not isinstance(v, dict):
            return dict(v)
        return v

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
