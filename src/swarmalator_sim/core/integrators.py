# MIT License (see LICENSE)
"""
Time stepping for the swarmalator ensemble.

Only first-order explicit (forward) Euler is provided:

    θ(t+dt) = fmod(θ(t) + dθ/dt * dt, 2π)
    r(t+dt) = r(t) + v(t) * dt

The rates are evaluated from the pre-step state for every agent before any
agent is advanced, so the step is order independent.

Reference:
    https://en.wikipedia.org/wiki/Euler_method
"""
from __future__ import annotations

import numpy as np

from ..constants import TWO_PI


def wrap_phase(phases: np.ndarray) -> np.ndarray:
    """
    Reduce phases modulo 2π with C fmod semantics.

    The result takes the sign of the input, so it lies in (-2π, 2π) rather
    than [0, 2π). Negative phases stay negative.
    """
    return np.fmod(phases, TWO_PI)


def euler_step(
    positions: np.ndarray,
    phases: np.ndarray,
    velocities: np.ndarray,
    delta_phases: np.ndarray,
    dt: float,
) -> None:
    """
    Advance positions and phases in-place by one explicit Euler step.

    Args:
        positions: Interleaved positions, shape (2N,). Modified in-place.
        phases: Phases, shape (N,). Modified in-place and wrapped.
        velocities: Interleaved velocities, shape (2N,).
        delta_phases: Phase rates, shape (N,).
        dt: Timestep.
    """
    phases += delta_phases * dt
    phases[:] = wrap_phase(phases)
    positions += velocities * dt
