"""
Exceptions raised by the hydration engine.

MissingValue is the only failure callers are expected to handle specifically.
Everything else is a ConstructionError: the target could not be built from the
given data. InvalidShape and EnumLookupError narrow that down but remain
ConstructionErrors.

Every error carries the path from the root datum to the offending field.
"""

from typing import Any

PathSegment = str | int
DataPath = tuple[PathSegment, ...]


def format_path(path: DataPath) -> str:
    """
    Render a data path for messages.

    Example:
        >>> format_path(("filters", "tags", 2, "name"))
        'filters.tags[2].name'
    """
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


class HydrationError(Exception):
    """
    Base class for hydration failures.

    Attributes:
        message: Description of the failure without location
        path: Keys and indices leading to the offending field
    """

    def __init__(self, message: str, *, path: DataPath = ()) -> None:
        self.message = message
        self.path = path
        location = format_path(path)
        super().__init__(f"{location}: {message}" if location else message)


class MissingValue(HydrationError):
    """Raised when a required, non-nullable parameter has no value and no default."""

    def __init__(self, parameter: str, *, path: DataPath = ()) -> None:
        self.parameter = parameter
        super().__init__(f"Missing value for required parameter '{parameter}'", path=path)


class ConstructionError(HydrationError):
    """Raised when the target cannot be built from the given data."""

    pass


class InvalidShape(ConstructionError):
    """Raised when a datum is not a shape the target can be hydrated from."""

    pass


class EnumLookupError(ConstructionError):
    """Raised when no enum case is backed by the given value."""

    def __init__(self, target: type, value: Any, *, path: DataPath = ()) -> None:
        self.target = target
        self.value = value
        super().__init__(f"{target.__name__} has no case backed by {value!r}", path=path)
