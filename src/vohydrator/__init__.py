"""
vohydrator - Value Object Hydration

Builds validated value objects from untyped data: mappings, lists and
scalars, recursing into nested value object fields.
"""

__version__ = "0.3.0"

# Re-export the engine entry points for convenience
from vohydrator.core.hydrate import ConstructionError, Hydrator, MissingValue, hydrate

__all__ = ["ConstructionError", "Hydrator", "MissingValue", "hydrate", "__version__"]
