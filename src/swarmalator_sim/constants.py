# MIT License (see LICENSE)
"""
Fixed coefficients and angular constants used by the swarmalator model.

The attraction and repulsion gains are fixed at construction; only the
phase coupling K and the spatial-phase interaction J are tunable.
"""
from __future__ import annotations

import numpy as np

# Base spatial attraction gain. Also the upper bound of the per-agent
# coupling strength when a target point is active.
DEFAULT_A: float = 1.0

# Base spatial repulsion gain (inverse-distance repulsion).
DEFAULT_B: float = 1.0

HALF_PI: float = np.pi / 2.0
TWO_PI: float = 2.0 * np.pi
