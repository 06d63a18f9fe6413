"""
Hydration engine for value objects.

Turns untyped data (mappings, lists and scalars, as produced by a JSON
decoder or a form parser) into validated value objects, recursing into
nested value object fields.
"""

from vohydrator.core.hydrate.cast import cast, coerce_number
from vohydrator.core.hydrate.engine import Hydrator, hydrate, is_raw_datum
from vohydrator.core.hydrate.errors import (
    ConstructionError,
    EnumLookupError,
    HydrationError,
    InvalidShape,
    MissingValue,
    format_path,
)

__all__ = [
    "ConstructionError",
    "EnumLookupError",
    "HydrationError",
    "Hydrator",
    "InvalidShape",
    "MissingValue",
    "cast",
    "coerce_number",
    "format_path",
    "hydrate",
    "is_raw_datum",
]
