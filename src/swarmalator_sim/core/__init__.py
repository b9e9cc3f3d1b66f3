# MIT License (see LICENSE)
"""
Core swarmalator dynamics.

This subpackage provides:
    - Coupling: per-agent J strengths, frequency offsets, pairwise rates.
    - Integrators: explicit Euler step with signed phase wrapping.
    - Degeneracy: detection of the divide-by-zero geometries.
    - Observables: order parameters and kinematic summaries.

Typical usage:
    from swarmalator_sim.core import pairwise_rates, euler_step

    v, dtheta = pairwise_rates(pos, ph, omega, Absent(), Js, 1.0, 1.0, K)
    euler_step(pos, ph, v, dtheta, dt=0.05)
"""
from .coupling import (
    target_distances,
    coupling_strengths,
    frequency_offsets,
    chiral_velocities,
    pairwise_rates,
)
from .integrators import euler_step, wrap_phase
from .degeneracy import (
    coincident_pair,
    equidistant_target,
    zero_frequency_agents,
    check_geometry,
)
from .observables import (
    centroid,
    phase_order_parameter,
    mixed_order_parameters,
    mean_speed,
)

__all__ = [
    # Coupling
    "target_distances",
    "coupling_strengths",
    "frequency_offsets",
    "chiral_velocities",
    "pairwise_rates",
    # Integrators
    "euler_step",
    "wrap_phase",
    # Degeneracy
    "coincident_pair",
    "equidistant_target",
    "zero_frequency_agents",
    "check_geometry",
    # Observables
    "centroid",
    "phase_order_parameter",
    "mixed_order_parameters",
    "mean_speed",
]
