# MIT License (see LICENSE)
"""
Optional-field representation for the engine.

The target point and the chirality coefficients are each either absent or
present. They are modelled as a closed two-variant union so update() can
dispatch on them with isinstance, the same way shapes are dispatched:

    Absent()                  -> feature disabled
    Present(np.array([...]))  -> feature enabled with the given values
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .util import f64


@dataclass(frozen=True)
class Absent:
    """Marker for a disabled optional field."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True, eq=False)
class Present:
    """
    An enabled optional field.

    Attributes:
        value: Float64 array holding the field's values. Stored as a private
               copy so callers cannot alias engine state.
    """
    value: np.ndarray

    def __post_init__(self) -> None:
        """Ensure value is a float64 copy."""
        object.__setattr__(self, "value", f64(self.value))

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Present):
            return NotImplemented
        return bool(np.array_equal(self.value, other.value, equal_nan=True))

    def __len__(self) -> int:
        return len(self.value)


# Union type for optional-field dispatch
Maybe = Absent | Present


def maybe(value) -> Maybe:
    """Wrap None as Absent() and anything else as Present(value)."""
    if value is None:
        return Absent()
    if isinstance(value, Absent):
        return value
    if isinstance(value, Present):
        return Present(value.value)
    return Present(value)


def unwrap(field: Maybe) -> np.ndarray | None:
    """Return a copy of a Present field's values, or None when Absent."""
    if isinstance(field, Present):
        return field.value.copy()
    if isinstance(field, Absent):
        return None
    raise TypeError(f"Unknown optional field type: {type(field)}")
