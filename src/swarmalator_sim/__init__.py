# MIT License (see LICENSE)
"""
swarmalator_sim - A 2D swarmalator ensemble simulator.

Swarmalators are agents that both swarm in space and oscillate in phase:
spatial attraction is modulated by phase similarity and phase
synchronization is modulated by spatial proximity. Agents may carry a
chirality (fixed orbital drift) and an optional target point reshapes the
coupling strength by distance.

Main entry points:
    - Swarmalator: The engine owning the ensemble state; update(dt) steps it.
    - SwarmConfig: Initial conditions and parameters for a session.
    - Simulation: Host tick loop (update, render, timing).

Submodules:
    - core: Pairwise coupling, Euler integration, degeneracy checks, observables.
    - io: JSON scenario files.
    - renderer: Optional visualization adapters and phase colouring.

Example:
    from swarmalator_sim import Swarmalator

    engine = Swarmalator(2, [0, 0, 1, 0], [0, 0], [0, 0], K=1.0, J=1.0)
    engine.update(0.1)
    print(engine.positions)
"""
from .engine import Swarmalator
from .config import SwarmConfig, demo_config, chiral_demo_config
from .errors import SwarmalatorError, LengthMismatch, DegenerateGeometry
from .runner import Simulation
from .types import Absent, Present

__all__ = [
    # Core simulation
    "Swarmalator",
    "Simulation",
    # Configuration
    "SwarmConfig",
    "demo_config",
    "chiral_demo_config",
    # Errors
    "SwarmalatorError",
    "LengthMismatch",
    "DegenerateGeometry",
    # Optional fields
    "Absent",
    "Present",
]
