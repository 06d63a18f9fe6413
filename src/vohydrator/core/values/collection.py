"""
Collection value objects.

A collection wraps an ordered, bounded sequence of a single element type:

    >>> from vohydrator.core.values.number import Page
    >>> class Pages(CollectionValueObject):
    ...     item_type = Page
    ...     maximum_size = 3
    >>> [p.value for p in Pages([Page(1), Page(2)])]
    [1, 2]
"""

from collections.abc import Iterator
from typing import Any, ClassVar

from pydantic import field_validator

from vohydrator.core.values.base import ValueObject


class CollectionValueObject(ValueObject):
    """Ordered, bounded-size sequence of item_type instances."""

    items: tuple[Any, ...]

    item_type: ClassVar[type]
    minimum_size: ClassVar[int] = 0
    maximum_size: ClassVar[int] = 100

    @field_validator("items", mode="before")
    @classmethod
    def coerce_sequence(cls, v: Any) -> Any:
        """Accept lists as well as tuples."""
        if isinstance(v, list):
            return tuple(v)
        return v

    @field_validator("items")
    @classmethod
    def validate_items(cls, v: tuple[Any, ...]) -> tuple[Any, ...]:
        """Validate size bounds and element types."""
        if len(v) < cls.minimum_size:
            raise ValueError(f"Collection must hold at least {cls.minimum_size} items, got {len(v)}")
        if len(v) > cls.maximum_size:
            raise ValueError(f"Collection must hold at most {cls.maximum_size} items, got {len(v)}")
        for index, item in enumerate(v):
            if not isinstance(item, cls.item_type):
                raise ValueError(
                    f"Item {index} must be {cls.item_type.__name__}, got {type(item).__name__}"
                )
        return v

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]
