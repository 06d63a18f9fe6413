"""
Value object type system.

Frozen, self-validating Pydantic models that the hydration engine builds, plus
the metadata query (describe) it uses to discover how to build them.

Public API:
    Base types:
        - ValueObject: Base for all value objects
        - CompositeValueObject: Named, typed fields
        - DynamicCompositeValueObject: Untyped mapping held verbatim
        - CollectionValueObject: Bounded sequence of one item type
        - EnumValueObject: String-backed enumeration
        - NumberValueObject / IntValueObject: Bounded numeric quantities
        - StringValueObject: Length-bounded string

    Concrete types:
        - Positive, Page, PerPage, SearchTerm

    Metadata:
        - describe: Build a TypeDescriptor for a target type
        - classify: Determine a target's TypeCategory
"""

from vohydrator.core.values.base import ValueObject
from vohydrator.core.values.collection import CollectionValueObject
from vohydrator.core.values.composite import CompositeValueObject, DynamicCompositeValueObject
from vohydrator.core.values.enums import EnumValueObject
from vohydrator.core.values.introspect import (
    PRIMITIVE_TYPES,
    ParameterSpec,
    TypeCategory,
    TypeDescriptor,
    classify,
    describe,
)
from vohydrator.core.values.number import (
    IntValueObject,
    NumberValueObject,
    Page,
    PerPage,
    Positive,
)
from vohydrator.core.values.string import SearchTerm, StringValueObject

__all__ = [
    # Base types
    "ValueObject",
    "CompositeValueObject",
    "DynamicCompositeValueObject",
    "CollectionValueObject",
    "EnumValueObject",
    "NumberValueObject",
    "IntValueObject",
    "StringValueObject",
    # Concrete types
    "Positive",
    "Page",
    "PerPage",
    "SearchTerm",
    # Metadata
    "PRIMITIVE_TYPES",
    "ParameterSpec",
    "TypeCategory",
    "TypeDescriptor",
    "classify",
    "describe",
]
