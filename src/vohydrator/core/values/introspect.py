"""
Type metadata for value objects.

Classifies a target type into a closed set of categories and exposes its
construction parameters as plain data, so consumers never have to inspect
Pydantic internals themselves.

Example:
    >>> from vohydrator.core.values import Page, describe
    >>> descriptor = describe(Page)
    >>> descriptor.category
    <TypeCategory.INT: 'int'>
    >>> [p.name for p in descriptor.parameters]
    ['value']
"""

import types
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union, get_args, get_origin

from pydantic.fields import FieldInfo

from vohydrator.core.values.base import ValueObject
from vohydrator.core.values.collection import CollectionValueObject
from vohydrator.core.values.composite import CompositeValueObject, DynamicCompositeValueObject
from vohydrator.core.values.enums import EnumValueObject
from vohydrator.core.values.number import IntValueObject, NumberValueObject

# Builtin kinds a raw value can be coerced into before construction
PRIMITIVE_TYPES: tuple[type, ...] = (str, int, float, bool)


class TypeCategory(str, Enum):
    """Closed classification of hydration targets."""

    COMPOSITE = "composite"
    DYNAMIC_COMPOSITE = "dynamic_composite"
    COLLECTION = "collection"
    ENUM = "enum"
    NUMBER = "number"
    INT = "int"
    SCALAR = "scalar"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ParameterSpec:
    """One construction parameter of a value object."""

    name: str
    position: int
    declared_type: Any
    """Declared type with any Optional wrapper removed."""

    is_primitive: bool
    """True for builtin types, which are cast rather than hydrated."""

    nullable: bool
    has_default: bool
    default: Any = None


@dataclass(frozen=True)
class TypeDescriptor:
    """Classification and construction metadata for a target type."""

    target: Any
    category: TypeCategory
    parameters: tuple[ParameterSpec, ...] = ()
    item_type: type | None = None

    @property
    def name(self) -> str:
        return getattr(self.target, "__qualname__", repr(self.target))


def classify(target: Any) -> TypeCategory:
    """
    Determine the category of a target type.

    Order matters: Int is checked before Number, and the dynamic composite
    before general value objects.
    """
    if not isinstance(target, type):
        return TypeCategory.UNSUPPORTED
    if issubclass(target, EnumValueObject):
        return TypeCategory.ENUM
    if not issubclass(target, ValueObject):
        return TypeCategory.UNSUPPORTED
    if issubclass(target, CollectionValueObject):
        return TypeCategory.COLLECTION
    if issubclass(target, DynamicCompositeValueObject):
        return TypeCategory.DYNAMIC_COMPOSITE
    if issubclass(target, IntValueObject):
        return TypeCategory.INT
    if issubclass(target, NumberValueObject):
        return TypeCategory.NUMBER
    if issubclass(target, CompositeValueObject):
        return TypeCategory.COMPOSITE
    return TypeCategory.SCALAR


def describe(target: Any) -> TypeDescriptor:
    """
    Build the descriptor for a target type.

    Args:
        target: Any object; non value object types yield UNSUPPORTED.

    Returns:
        TypeDescriptor with parameters for every value object and the
        element type for collections.
    """
    category = classify(target)
    if category in (TypeCategory.ENUM, TypeCategory.UNSUPPORTED):
        return TypeDescriptor(target=target, category=category)

    parameters = tuple(
        _parameter_spec(position, name, field)
        for position, (name, field) in enumerate(target.model_fields.items())
    )
    item_type = getattr(target, "item_type", None) if category is TypeCategory.COLLECTION else None

    return TypeDescriptor(
        target=target,
        category=category,
        parameters=parameters,
        item_type=item_type,
    )


def _parameter_spec(position: int, name: str, field: FieldInfo) -> ParameterSpec:
    declared_type, nullable = _unwrap_optional(field.annotation)
    has_default = not field.is_required()

    return ParameterSpec(
        name=name,
        position=position,
        declared_type=declared_type,
        is_primitive=_is_builtin(declared_type),
        nullable=nullable,
        has_default=has_default,
        default=field.get_default(call_default_factory=True) if has_default else None,
    )


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Split X | None (or Optional[X]) into (X, True)."""
    if get_origin(annotation) not in (Union, types.UnionType):
        return annotation, annotation is Any

    args = get_args(annotation)
    remaining = tuple(arg for arg in args if arg is not type(None))
    nullable = len(remaining) != len(args)
    if len(remaining) == 1:
        return remaining[0], nullable
    # Unions of several types are opaque to hydration
    return Union[remaining], nullable  # type: ignore[return-value]


def _is_builtin(declared_type: Any) -> bool:
    """Builtins and typing constructs (Any, list[str], unions) are not hydrated."""
    if declared_type is Any or isinstance(declared_type, types.GenericAlias):
        return True
    if not isinstance(declared_type, type):
        return True
    return declared_type.__module__ == "builtins"
