"""
Core hydration engine.

Builds value objects from untyped data: mappings, lists, and scalars, possibly
mixed with value objects that have already been built.

Dispatch is on the shape of the data first (mapping/list vs. scalar), then on
the category of the target type as reported by describe(). Every instance is
created through the target's own constructor, so whatever the engine returns
has passed the target's validation.

Example:
    >>> from vohydrator.core.values import CompositeValueObject, Page, PerPage
    >>> class Paginate(CompositeValueObject):
    ...     per_page: PerPage
    ...     page: Page
    >>> hydrate(Paginate, {"per_page": "25", "page": 2}).per_page.value
    25
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from vohydrator.core.config.models import HydrationConfig
from vohydrator.core.hydrate.cast import cast, coerce_number
from vohydrator.core.hydrate.errors import (
    ConstructionError,
    DataPath,
    EnumLookupError,
    InvalidShape,
    MissingValue,
    format_path,
)
from vohydrator.core.values import ParameterSpec, TypeCategory, TypeDescriptor, describe

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_raw_datum(value: Any) -> bool:
    """Check that a value is a mapping, list/tuple, int, float or str."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (Mapping, list, tuple, int, float, str))


class Hydrator:
    """
    Recursive builder of value objects from raw data.

    Holds no state between calls besides its configuration, so one instance
    can be shared across threads.

    Example:
        >>> hydrator = Hydrator(HydrationConfig(max_depth=8))
        >>> hydrator.hydrate(Page, "3").value
        3
    """

    def __init__(self, config: HydrationConfig | None = None) -> None:
        self.config = config or HydrationConfig()

    def hydrate(self, target: type[T], data: Any) -> T:
        """
        Build an instance of target from raw data.

        Args:
            target: Value object type to build.
            data: Mapping, list/tuple, int, float or str.

        Returns:
            A validated instance of target.

        Raises:
            MissingValue: A required parameter has no value.
            ConstructionError: The target can't be built from data
                (including InvalidShape and EnumLookupError).
        """
        return self._hydrate(target, data, ())

    def _hydrate(self, target: Any, data: Any, path: DataPath) -> Any:
        max_depth = self.config.max_depth
        if max_depth is not None and len(path) > max_depth:
            raise ConstructionError(f"Maximum hydration depth of {max_depth} exceeded", path=path)

        descriptor = describe(target)
        logger.debug(
            f"Hydrating {descriptor.name} ({descriptor.category.value}) "
            f"from {type(data).__name__} at '{format_path(path)}'"
        )

        if isinstance(data, (Mapping, list, tuple)):
            return self._from_array(descriptor, data, path)
        if is_raw_datum(data):
            return self._from_scalar(descriptor, data, path)
        raise InvalidShape(
            f"Cannot hydrate {descriptor.name} from {type(data).__name__}", path=path
        )

    # ------------------------------------------------------------------
    # Mappings and sequences
    # ------------------------------------------------------------------

    def _from_array(self, descriptor: TypeDescriptor, data: Any, path: DataPath) -> Any:
        match descriptor.category:
            case TypeCategory.COLLECTION:
                return self._hydrate_collection(descriptor, data, path)
            case TypeCategory.DYNAMIC_COMPOSITE:
                if not isinstance(data, Mapping):
                    raise InvalidShape(f"{descriptor.name} requires a mapping", path=path)
                return self._construct(descriptor, [data], path)
            case (
                TypeCategory.COMPOSITE
                | TypeCategory.NUMBER
                | TypeCategory.INT
                | TypeCategory.SCALAR
            ):
                return self._hydrate_composite(descriptor, data, path)
            case TypeCategory.ENUM | TypeCategory.UNSUPPORTED:
                raise ConstructionError(
                    f"{descriptor.name} cannot be constructed from named fields", path=path
                )

    def _hydrate_collection(
        self, descriptor: TypeDescriptor, data: Any, path: DataPath
    ) -> Any:
        if not isinstance(data, (list, tuple)):
            raise InvalidShape(f"{descriptor.name} requires a sequence", path=path)

        item_type = descriptor.item_type
        if item_type is None:
            raise ConstructionError(f"{descriptor.name} declares no item type", path=path)

        items = []
        for index, item in enumerate(data):
            item_path = path + (index,)
            if isinstance(item, item_type):
                items.append(item)
                continue
            if not is_raw_datum(item):
                raise InvalidShape(
                    f"Invalid item for {descriptor.name}: {type(item).__name__}", path=item_path
                )
            items.append(self._hydrate(item_type, item, item_path))

        return self._construct(descriptor, [items], path)

    def _hydrate_composite(
        self, descriptor: TypeDescriptor, data: Any, path: DataPath
    ) -> Any:
        if not isinstance(data, Mapping):
            raise InvalidShape(f"{descriptor.name} requires a mapping", path=path)
        if not descriptor.parameters:
            raise ConstructionError(
                f"{descriptor.name} must declare at least one parameter", path=path
            )

        arguments = [self._resolve(parameter, data, path) for parameter in descriptor.parameters]
        return self._construct(descriptor, arguments, path)

    def _resolve(self, parameter: ParameterSpec, data: Mapping[str, Any], path: DataPath) -> Any:
        """Resolve one constructor argument from the raw mapping."""
        field_path = path + (parameter.name,)
        present = parameter.name in data
        value = data.get(parameter.name)

        if not present and parameter.has_default:
            value = parameter.default

        if value is None:
            if present and not parameter.nullable and not self.config.null_as_missing:
                raise InvalidShape(
                    f"Explicit null for non-nullable parameter '{parameter.name}'",
                    path=field_path,
                )
            if parameter.nullable:
                return None
            raise MissingValue(parameter.name, path=field_path)

        if parameter.is_primitive:
            return cast(value, parameter.declared_type)

        declared = parameter.declared_type
        if isinstance(value, declared):
            logger.debug(f"Passing through existing {declared.__name__} at '{format_path(field_path)}'")
            return value

        if not is_raw_datum(value):
            raise InvalidShape(
                f"Invalid value for '{parameter.name}': {type(value).__name__}", path=field_path
            )
        return self._hydrate(declared, value, field_path)

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def _from_scalar(self, descriptor: TypeDescriptor, data: Any, path: DataPath) -> Any:
        match descriptor.category:
            case TypeCategory.NUMBER:
                return self._construct(descriptor, [coerce_number(data, float)], path)
            case TypeCategory.INT:
                return self._construct(descriptor, [coerce_number(data, int)], path)
            case TypeCategory.ENUM:
                return self._hydrate_enum(descriptor, data, path)
            case TypeCategory.COLLECTION:
                raise InvalidShape(f"{descriptor.name} requires a sequence", path=path)
            case TypeCategory.DYNAMIC_COMPOSITE:
                raise InvalidShape(f"{descriptor.name} requires a mapping", path=path)
            case TypeCategory.COMPOSITE | TypeCategory.SCALAR:
                return self._construct(descriptor, [data], path)
            case TypeCategory.UNSUPPORTED:
                raise ConstructionError(f"{descriptor.name} is not a value object", path=path)

    def _hydrate_enum(self, descriptor: TypeDescriptor, data: Any, path: DataPath) -> Any:
        if not isinstance(data, str):
            raise InvalidShape(
                f"{descriptor.name} requires a string, got {type(data).__name__}", path=path
            )
        try:
            return descriptor.target(data)
        except ValueError as e:
            raise EnumLookupError(descriptor.target, data, path=path) from e

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _construct(self, descriptor: TypeDescriptor, arguments: Sequence[Any], path: DataPath) -> Any:
        """Call the target's constructor positionally; its validation errors become ConstructionError."""
        try:
            return descriptor.target(*arguments)
        except (TypeError, ValueError) as e:
            logger.debug(f"Constructor of {descriptor.name} rejected arguments: {e}")
            raise ConstructionError(f"Could not construct {descriptor.name}: {e}", path=path) from e


def hydrate(target: type[T], data: Any, config: HydrationConfig | None = None) -> T:
    """
    Build an instance of target from raw data.

    Shortcut for Hydrator(config).hydrate(target, data).
    """
    return Hydrator(config).hydrate(target, data)
