# MIT License (see LICENSE)
"""
Summary observables for a swarmalator ensemble.

Used to classify the collective state reached by a run and to sanity-check
the dynamics in tests:

- phase_order_parameter: Kuramoto R = |<e^{iθ}>|, 1 when all phases agree.
- mixed_order_parameters: S± = |<e^{i(φ ± θ)}>| where φ is each agent's
  polar angle about the centroid. A static async ring has S± ≈ 0, phase
  waves have one of S± ≈ 1.
- mean_speed, centroid: plain kinematic summaries.

Reference:
    O'Keeffe, Ceron, Petersen (2017), "Oscillators that sync and swarm",
    Nature Communications 8, 1504.
"""
from __future__ import annotations

import numpy as np

from ..util import as_xy


def centroid(positions: np.ndarray) -> np.ndarray:
    """Mean position [x, y] of the ensemble."""
    xy = as_xy(positions)
    if len(xy) == 0:
        return np.zeros(2, dtype=np.float64)
    return xy.mean(axis=0)


def phase_order_parameter(phases: np.ndarray) -> float:
    """
    Kuramoto order parameter in [0, 1].

    Returns 0.0 for an empty ensemble.
    """
    if len(phases) == 0:
        return 0.0
    return float(np.abs(np.exp(1j * phases).mean()))


def mixed_order_parameters(positions: np.ndarray, phases: np.ndarray) -> tuple[float, float]:
    """
    Space-phase order parameters (S+, S-).

    Args:
        positions: Interleaved positions, shape (2N,).
        phases: Phases, shape (N,).

    Returns:
        Tuple (S_plus, S_minus), each in [0, 1].
    """
    if len(phases) == 0:
        return 0.0, 0.0
    rel = as_xy(positions) - centroid(positions)
    phi = np.arctan2(rel[:, 1], rel[:, 0])
    s_plus = float(np.abs(np.exp(1j * (phi + phases)).mean()))
    s_minus = float(np.abs(np.exp(1j * (phi - phases)).mean()))
    return s_plus, s_minus


def mean_speed(velocities: np.ndarray) -> float:
    """Average speed |v| over agents. Returns 0.0 for an empty ensemble."""
    v = as_xy(velocities)
    if len(v) == 0:
        return 0.0
    return float(np.sqrt((v * v).sum(axis=1)).mean())
