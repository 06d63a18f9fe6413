"""
Base value object model.

Value objects are frozen, strictly validated Pydantic models. Every concrete
type enforces its own invariants at construction time, so an instance that
exists is always valid.

Unlike plain Pydantic models, value objects accept positional arguments,
mapped onto fields in declaration order:

    >>> class Money(ValueObject):
    ...     amount: int
    ...     currency: str
    >>> Money(5, "EUR") == Money(amount=5, currency="EUR")
    True
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, self-validating value."""

    model_config = ConfigDict(frozen=True, strict=True)

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            names = list(type(self).model_fields)
            if len(args) > len(names):
                raise TypeError(
                    f"{type(self).__name__} takes {len(names)} positional "
                    f"argument(s) but {len(args)} were given"
                )
            for name, value in zip(names, args):
                if name in data:
                    raise TypeError(
                        f"{type(self).__name__} got multiple values for argument '{name}'"
                    )
                data[name] = value
        super().__init__(**data)
