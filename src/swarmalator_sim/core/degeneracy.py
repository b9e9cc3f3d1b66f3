# MIT License (see LICENSE)
"""
Detection of configurations where the update divides by zero.

Three geometries make Swarmalator.update() produce NaN/Inf:

1. Two agents share a position, or sit so close that their pair distance
   (or its square) rounds to 0.
2. A target is set and every agent is the same distance from it
   (including a single agent); the J rescaling divides by max - min = 0.
3. Chirality is enabled and an agent's natural frequency is exactly 0;
   its sign x/|x| is 0/0.

These checks are used by strict engines before a step and are also handy
for callers that want to validate initial conditions themselves.
"""
from __future__ import annotations

import numpy as np

from ..errors import DegenerateGeometry
from ..types import Absent, Maybe, Present
from ..util import as_xy
from .coupling import target_distances


def coincident_pair(positions: np.ndarray) -> tuple[int, int] | None:
    """
    Return the first (i, j), i < j, of agents whose pair distance vanishes.

    The distance is computed exactly as the update computes it, so agents
    that are distinct but so close that sqrt(dx² + dy²) or its square
    underflows to 0 are reported too. Pairs are scanned in ascending i
    then j. Returns None if every pair is separated.
    """
    xy = as_xy(positions)
    n = len(xy)
    if n < 2:
        return None
    dx = xy[None, :, 0] - xy[:, None, 0]
    dy = xy[None, :, 1] - xy[:, None, 1]
    with np.errstate(over="ignore", under="ignore", invalid="ignore"):
        dist = np.sqrt(dx * dx + dy * dy)
        touching = np.triu(dist * dist == 0.0, k=1)
    hits = np.argwhere(touching)
    if len(hits) == 0:
        return None
    i, j = hits[0]
    return int(i), int(j)


def equidistant_target(positions: np.ndarray, target: Maybe) -> bool:
    """True if a target is set and no two agents differ in distance to it."""
    if isinstance(target, Absent):
        return False
    if isinstance(target, Present):
        d = target_distances(positions, target.value)
        if len(d) == 0:
            return False
        return bool(np.fmax.reduce(d) == np.fmin.reduce(d))
    raise TypeError(f"Unknown target type: {type(target)}")


def zero_frequency_agents(natural_frequencies: np.ndarray, chirality: Maybe) -> tuple[int, ...]:
    """Indices with ω_i == 0 when chirality is enabled, else ()."""
    if isinstance(chirality, Absent):
        return ()
    if isinstance(chirality, Present):
        return tuple(int(i) for i in np.flatnonzero(natural_frequencies == 0.0))
    raise TypeError(f"Unknown chirality type: {type(chirality)}")


def check_geometry(
    positions: np.ndarray,
    natural_frequencies: np.ndarray,
    chirality: Maybe,
    target: Maybe,
) -> None:
    """
    Raise DegenerateGeometry for the first degenerate case found.

    Checked in the order: coincident agents, equidistant target,
    zero natural frequency under chirality.
    """
    pair = coincident_pair(positions)
    if pair is not None:
        raise DegenerateGeometry("coincident_agents", pair)
    if equidistant_target(positions, target):
        raise DegenerateGeometry("equidistant_target", tuple(range(len(positions) // 2)))
    zeros = zero_frequency_agents(natural_frequencies, chirality)
    if zeros:
        raise DegenerateGeometry("zero_frequency", zeros)
