# MIT License (see LICENSE)
"""
Exception types raised by the swarmalator engine.

Length violations are always reported. Degenerate geometry (coincident
agents, a target equidistant from every agent, zero natural frequency
under chirality) is only reported by engines created with strict=True;
otherwise it propagates silently as NaN/Inf.
"""
from __future__ import annotations


class SwarmalatorError(Exception):
    """Base class for all errors raised by swarmalator_sim."""


class LengthMismatch(SwarmalatorError, ValueError):
    """
    An array's length violates its invariant.

    Attributes:
        field: Name of the offending field (e.g. "positions").
        expected: Required length.
        actual: Length that was supplied.
    """

    def __init__(self, field: str, expected: int, actual: int) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{field} must have {expected} elements, got {actual}"
        )


class DegenerateGeometry(SwarmalatorError, ArithmeticError):
    """
    The ensemble is in a configuration where update() would divide by zero.

    Attributes:
        kind: One of "coincident_agents", "equidistant_target",
              "zero_frequency".
        indices: Agent indices involved (a pair for coincident agents,
                 the zero-frequency agents, or every agent for the target case).
    """

    def __init__(self, kind: str, indices: tuple[int, ...] = ()) -> None:
        self.kind = kind
        self.indices = tuple(indices)
        super().__init__(f"degenerate geometry ({kind}) at agents {list(self.indices)}")
