# MIT License (see LICENSE)
"""
Utility functions for array conversion and validation.

The engine stores every array as a flat float64 numpy array. Positions and
velocities are interleaved (x0, y0, x1, y1, ...).
"""
from __future__ import annotations

import numpy as np

from .errors import LengthMismatch


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a flat float64 numpy array.

    Always copies, so the result never aliases caller-owned memory.
    """
    return np.array(x, dtype=np.float64).reshape(-1)


def check_length(field: str, values: np.ndarray, expected: int) -> np.ndarray:
    """
    Raise LengthMismatch if values does not hold exactly `expected` elements.

    Returns values unchanged so the call can be used inline.
    """
    if len(values) != expected:
        raise LengthMismatch(field, expected, len(values))
    return values


def as_xy(flat: np.ndarray) -> np.ndarray:
    """View an interleaved (2N,) array as shape (N, 2) rows of (x, y)."""
    return flat.reshape(-1, 2)


def map_range(value, in_min: float, in_max: float, out_min: float, out_max: float):
    """Linearly map value from [in_min, in_max] onto [out_min, out_max]."""
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min
