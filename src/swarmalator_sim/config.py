# MIT License (see LICENSE)
"""
Simulation configuration and initial-condition builders.

A SwarmConfig holds everything needed to start a run: initial arrays,
coupling gains, optional chirality/target, the host timestep and whether
the engine is strict about degenerate geometry. SwarmConfig.build()
returns a ready Swarmalator.

Builders reproduce the usual starting layouts:
    - random_positions: uniform scatter in a square.
    - linspace_phases: phases evenly spread over [0, 2π).
    - split_values: first half one value, second half another
      (e.g. counter-rotating chirality).
    - demo_config: the 200-agent rainbow demo steered by a target at (2, 0).
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import TWO_PI
from .engine import Swarmalator
from .profiler import Profiler
from .util import f64


def random_positions(agents: int, extent: float = 3.0, rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Interleaved positions drawn uniformly from [-extent, extent]².

    Args:
        agents: Number of agents.
        extent: Half-width of the square.
        rng: Random generator (a fresh default_rng() if None).
    """
    rng = rng if rng is not None else np.random.default_rng()
    return rng.uniform(-extent, extent, size=2 * agents)


def linspace_phases(agents: int) -> np.ndarray:
    """Phases i/agents * 2π for i in 0..agents."""
    return np.arange(agents, dtype=np.float64) / max(agents, 1) * TWO_PI


def split_values(agents: int, first: float, second: float) -> np.ndarray:
    """Array whose agents with i < agents/2 get `first` and the rest `second`."""
    i = np.arange(agents)
    return np.where(i < agents / 2, first, second).astype(np.float64)


@dataclass
class SwarmConfig:
    """
    Initial conditions and parameters for one simulation session.

    Attributes:
        agents: Number of agents.
        positions: Interleaved initial positions, length 2*agents.
        phases: Initial phases, length agents.
        natural_frequencies: Natural frequencies, length agents.
        K: Phase coupling gain (default 1.0).
        J: Spatial-phase interaction gain (default 0.0).
        chirality: Optional chiral coefficients, length agents.
        target: Optional target point (x, y).
        dt: Host timestep per tick (default 0.05).
        strict: Engine raises on degenerate geometry instead of producing NaN.
    """
    agents: int
    positions: np.ndarray
    phases: np.ndarray
    natural_frequencies: np.ndarray
    K: float = 1.0
    J: float = 0.0
    chirality: np.ndarray | None = None
    target: tuple[float, float] | None = None
    dt: float = 0.05
    strict: bool = False

    def __post_init__(self) -> None:
        """Normalize arrays to float64 so configs compare and serialize cleanly."""
        self.positions = f64(self.positions)
        self.phases = f64(self.phases)
        self.natural_frequencies = f64(self.natural_frequencies)
        if self.chirality is not None:
            self.chirality = f64(self.chirality)
        if self.target is not None:
            self.target = tuple(float(v) for v in self.target)
        if self.dt < 0:
            raise ValueError(f"dt must be non-negative, got {self.dt}")

    def build(self, profiler: Profiler | None = None) -> Swarmalator:
        """
        Construct a Swarmalator from this configuration.

        Raises:
            LengthMismatch: If any array disagrees with `agents`.
        """
        return Swarmalator(
            self.agents,
            self.positions,
            self.phases,
            self.natural_frequencies,
            self.K,
            self.J,
            chirality=self.chirality,
            target=self.target,
            strict=self.strict,
            profiler=profiler,
        )


def demo_config(agents: int = 200, seed: int | None = None) -> SwarmConfig:
    """
    The rainbow demo: random scatter in ±3, phases spread around the circle,
    zero natural frequencies, K=1, J=0, and a target at (2, 0) that
    strengthens coupling for agents far from it.
    """
    rng = np.random.default_rng(seed)
    return SwarmConfig(
        agents=agents,
        positions=random_positions(agents, 3.0, rng),
        phases=linspace_phases(agents),
        natural_frequencies=np.zeros(agents),
        K=1.0,
        J=0.0,
        chirality=None,
        target=(2.0, 0.0),
        dt=0.05,
    )


def chiral_demo_config(agents: int = 200, seed: int | None = None) -> SwarmConfig:
    """
    Counter-rotating populations: chirality +1 / -1 and natural frequency
    +1 / -1 for the two halves, no target.
    """
    rng = np.random.default_rng(seed)
    return SwarmConfig(
        agents=agents,
        positions=random_positions(agents, 3.0, rng),
        phases=rng.uniform(0.0, TWO_PI, size=agents),
        natural_frequencies=split_values(agents, 1.0, -1.0),
        K=1.0,
        J=0.0,
        chirality=split_values(agents, 1.0, -1.0),
        target=None,
        dt=0.05,
    )
