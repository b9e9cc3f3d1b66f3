# MIT License (see LICENSE)
"""
Pairwise coupling terms for the swarmalator model.

For every ordered pair (i, j), i != j, agent i receives

    velocity:  (1/N) * [ (r_j - r_i)/|r_j - r_i| * (A + J_i cos(θ_j - θ_i - Δ_xy))
                         - B (r_j - r_i)/|r_j - r_i|² ]
    phase:     (K/N) * sin(θ_j - θ_i - Δ_θ) / |r_j - r_i|

on top of its base terms (chiral drift for velocity, natural frequency for
phase). Δ_xy and Δ_θ are frequency-direction offsets, nonzero only when
chirality is enabled.

The pair terms are evaluated as (N, N) arrays, but the per-agent sums are
accumulated sequentially in ascending j starting from the base term, so the
result is bit-identical to the nested loop

    for i in range(N):
        v[i] = base[i]
        for j in range(N):
            if j != i:
                v[i] += term[i, j]

Floating point addition is not associative; np.sum would use pairwise
summation and drift from that order.

Complexity: O(N²) time and memory. No spatial acceleration is attempted.

Callers are expected to run these under np.errstate if they want the
division-by-zero cases to stay silent (see Swarmalator.update).
"""
from __future__ import annotations

import numpy as np

from ..constants import HALF_PI
from ..types import Absent, Maybe, Present
from ..util import as_xy


def target_distances(positions: np.ndarray, target: np.ndarray) -> np.ndarray:
    """Euclidean distance from each agent to the target point, shape (N,)."""
    xy = as_xy(positions)
    dx = xy[:, 0] - target[0]
    dy = xy[:, 1] - target[1]
    return np.sqrt(dx * dx + dy * dy)


def coupling_strengths(
    positions: np.ndarray,
    target: Maybe,
    J: float,
    A: float,
) -> np.ndarray:
    """
    Per-agent spatial-phase coupling strength J_i.

    Without a target every agent uses the global J. With a target, distances
    to it are rescaled linearly onto [0, A]:

        J_i = A * |d_i - min(d)| / (max(d) - min(d))

    so the nearest agent gets 0 and the farthest gets A. NaN distances are
    ignored when taking the extrema. If every distance is equal the
    denominator is zero and J_i is NaN.

    Args:
        positions: Interleaved positions, shape (2N,).
        target: Absent() or Present([tx, ty]).
        J: Global spatial-phase interaction gain.
        A: Attraction gain (upper bound of the rescaled strengths).
    """
    n = len(positions) // 2
    if isinstance(target, Absent):
        return np.full(n, J, dtype=np.float64)
    if isinstance(target, Present):
        d = target_distances(positions, target.value)
        d_max = np.fmax.reduce(d)
        d_min = np.fmin.reduce(d)
        return A * np.abs(d - d_min) / (d_max - d_min)
    raise TypeError(f"Unknown target type: {type(target)}")


def frequency_offsets(
    natural_frequencies: np.ndarray,
    chirality: Maybe,
) -> tuple[np.ndarray | float, np.ndarray | float]:
    """
    Frequency-direction offsets (Δ_xy, Δ_θ) for every ordered pair.

    With chirality enabled:
        Δ_xy[i, j] = (π/2) * |sgn(ω_j) - sgn(ω_i)|,   Δ_θ = Δ_xy / 2
    where sgn(x) = x/|x|, which is NaN for x == 0. Agents rotating the same
    way get no offset; opposite rotators are offset by π (space) and π/2
    (phase).

    Without chirality both offsets are the scalar 0.0.
    """
    if isinstance(chirality, Absent):
        return 0.0, 0.0
    if isinstance(chirality, Present):
        sgn = natural_frequencies / np.abs(natural_frequencies)
        diff_xy = HALF_PI * np.abs(sgn[None, :] - sgn[:, None])
        return diff_xy, diff_xy / 2.0
    raise TypeError(f"Unknown chirality type: {type(chirality)}")


def chiral_velocities(phases: np.ndarray, chirality: Maybe) -> np.ndarray:
    """
    Base velocity of each agent before pairwise coupling, shape (2N,).

    With chirality each agent drifts at speed |c_i| along the direction
    orthogonal to its phase angle: c_i * (cos(θ_i + π/2), sin(θ_i + π/2)).
    Without chirality agents have no self-propulsion.
    """
    n = len(phases)
    if isinstance(chirality, Absent):
        return np.zeros(2 * n, dtype=np.float64)
    if isinstance(chirality, Present):
        c = chirality.value
        out = np.empty(2 * n, dtype=np.float64)
        out[0::2] = c * np.cos(phases + HALF_PI)
        out[1::2] = c * np.sin(phases + HALF_PI)
        return out
    raise TypeError(f"Unknown chirality type: {type(chirality)}")


def _off_diagonal(m: np.ndarray) -> np.ndarray:
    """Drop the diagonal of an (N, N) array, keeping row order: (N, N-1)."""
    n = m.shape[0]
    return m[~np.eye(n, dtype=bool)].reshape(n, n - 1)


def _ordered_sum(base: np.ndarray, terms: np.ndarray) -> np.ndarray:
    """base[i] + terms[i, 0] + terms[i, 1] + ..., added strictly left to right."""
    stacked = np.concatenate([base[:, None], terms], axis=1)
    return np.add.accumulate(stacked, axis=1)[:, -1]


def pairwise_rates(
    positions: np.ndarray,
    phases: np.ndarray,
    natural_frequencies: np.ndarray,
    chirality: Maybe,
    strengths: np.ndarray,
    A: float,
    B: float,
    K: float,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Compute velocities and phase rates for the whole ensemble.

    Reads only the given (pre-update) positions and phases; nothing is
    mutated.

    Args:
        positions: Interleaved positions, shape (2N,).
        phases: Phases in radians, shape (N,).
        natural_frequencies: Intrinsic phase drift, shape (N,).
        chirality: Absent() or Present(coefficients of shape (N,)).
        strengths: Per-agent J_i from coupling_strengths().
        A, B: Attraction and repulsion gains.
        K: Phase coupling gain.

    Returns:
        Tuple (velocities, delta_phases) of shapes (2N,) and (N,).
    """
    n = len(phases)
    base_v = chiral_velocities(phases, chirality)
    if n < 2:
        return base_v, natural_frequencies.copy()

    xy = as_xy(positions)
    # dx[i, j] = x_j - x_i
    dx = xy[None, :, 0] - xy[:, None, 0]
    dy = xy[None, :, 1] - xy[:, None, 1]
    dist = np.sqrt(dx * dx + dy * dy)
    dist2 = dist * dist

    diff_xy, diff_phase = frequency_offsets(natural_frequencies, chirality)
    dtheta = phases[None, :] - phases[:, None]

    attraction = A + strengths[:, None] * np.cos(dtheta - diff_xy)
    vx = (dx / dist) * attraction - (B * dx / dist2)
    vy = (dy / dist) * attraction - (B * dy / dist2)

    inv_n = 1.0 / n
    velocities = np.empty(2 * n, dtype=np.float64)
    velocities[0::2] = _ordered_sum(base_v[0::2], _off_diagonal(inv_n * vx))
    velocities[1::2] = _ordered_sum(base_v[1::2], _off_diagonal(inv_n * vy))

    dphase = (K / n) * np.sin(dtheta - diff_phase) / dist
    delta_phases = _ordered_sum(natural_frequencies, _off_diagonal(dphase))

    return velocities, delta_phases
