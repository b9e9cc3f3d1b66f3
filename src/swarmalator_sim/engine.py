# MIT License (see LICENSE)
"""
The swarmalator engine.

A Swarmalator owns the full state of N agents, each with a 2-D position and
a scalar phase, and advances them with update(dt):

    1. Per-agent coupling strength J_i (global J, or rescaled by distance to
       an optional target point).
    2. Velocities and phase rates from the O(N²) pairwise interaction,
       plus optional chiral drift and natural frequencies.
    3. One explicit Euler step of phases (wrapped with fmod 2π) and positions.

The caller drives the loop: update once per tick, read positions/phases/
velocities back for rendering, and call setters between ticks to retune
K, J, chirality or the target.

Structure:
    - User creates a Swarmalator with initial arrays.
    - User calls engine.update(dt) in a loop.
    - User reads engine.positions, engine.phases, engine.velocities.

Example:
    engine = Swarmalator(
        agents=2,
        positions=[0.0, 0.0, 1.0, 0.0],
        phases=[0.0, 0.0],
        natural_frequencies=[0.0, 0.0],
        K=1.0,
        J=1.0,
    )
    engine.update(0.1)
"""
from __future__ import annotations
from contextlib import nullcontext
import logging

import numpy as np

from .constants import DEFAULT_A, DEFAULT_B
from .core.coupling import coupling_strengths, pairwise_rates
from .core.degeneracy import check_geometry
from .core.integrators import euler_step
from .profiler import Profiler
from .types import Maybe, Present, maybe, unwrap
from .util import f64, check_length, as_xy

logger = logging.getLogger(__name__)


class Swarmalator:
    """
    Swarmalator ensemble with explicit Euler time stepping.

    Attributes (read-only views return copies):
        agents: Number of agents, fixed at construction.
        positions: Interleaved positions (x0, y0, x1, y1, ...), length 2N.
        phases: Phases in radians, length N. Wrapped with a signed
                remainder, so values lie in (-2π, 2π).
        velocities: Interleaved velocities from the last update, length 2N.
        delta_phases: Phase rates from the last update, length N.
        natural_frequencies: Intrinsic phase drift, length N.
        chirality: Chiral coefficients (length N) or None.
        target: Target point [x, y] or None.
        A, B: Attraction and repulsion gains, fixed at 1.0.
        K: Phase coupling gain.
        J: Spatial-phase interaction gain (ignored while a target is set).
        strict: If True, update() raises DegenerateGeometry instead of
                producing NaN/Inf.

    Note:
        Not thread-safe. One caller must serialize update() and setter calls.
    """

    def __init__(
        self,
        agents: int,
        positions,
        phases,
        natural_frequencies,
        K: float,
        J: float,
        chirality=None,
        target=None,
        *,
        strict: bool = False,
        profiler: Profiler | None = None,
    ) -> None:
        """
        Create an engine from initial conditions.

        All arrays are copied. Agents start at rest (zero velocities and
        phase rates).

        Args:
            agents: Number of agents (non-negative integer).
            positions: 2*agents interleaved coordinates, or an (agents, 2) array.
            phases: agents initial phases in radians.
            natural_frequencies: agents intrinsic phase drift rates.
            K: Phase coupling gain.
            J: Spatial-phase interaction gain.
            chirality: Optional agents chiral coefficients (None disables).
            target: Optional target point [x, y] (None disables).
            strict: Raise DegenerateGeometry from update() on divide-by-zero
                    geometry instead of propagating NaN/Inf.
            profiler: Optional Profiler timing each update phase.

        Raises:
            LengthMismatch: If any array has the wrong length.
            ValueError: If agents is not a non-negative integer.
        """
        if isinstance(agents, bool) or not isinstance(agents, (int, np.integer)) or agents < 0:
            raise ValueError(f"agents must be a non-negative integer, got {agents!r}")
        n = int(agents)

        # Validate everything before storing anything
        pos = check_length("positions", f64(positions), 2 * n)
        ph = check_length("phases", f64(phases), n)
        omega = check_length("natural_frequencies", f64(natural_frequencies), n)
        chiral = maybe(chirality)
        if isinstance(chiral, Present):
            check_length("chirality", chiral.value, n)
        tgt = maybe(target)
        if isinstance(tgt, Present):
            check_length("target", tgt.value, 2)

        self._agents = n
        self._A = DEFAULT_A
        self._B = DEFAULT_B
        self._K = float(K)
        self._J = float(J)
        self._positions = pos
        self._phases = ph
        self._natural_frequencies = omega
        self._chirality: Maybe = chiral
        self._target: Maybe = tgt
        self._velocities = np.zeros(2 * n, dtype=np.float64)
        self._delta_phases = np.zeros(n, dtype=np.float64)
        self.strict = bool(strict)
        self.profiler = profiler

        logger.debug(
            f"Created swarmalator: agents={n} K={self._K} J={self._J} "
            f"chiral={bool(chiral)} target={bool(tgt)} strict={self.strict}"
        )

    # -------------------------------------------------------------------------
    # Simulation step
    # -------------------------------------------------------------------------

    def _section(self, name: str):
        """Profiler section if profiling, else a no-op context."""
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def update(self, dt: float) -> None:
        """
        Advance the ensemble by one explicit Euler step of length dt.

        Velocities and phase rates are recomputed from scratch from the
        current (pre-step) state of every agent, then all agents are
        advanced together. Summation runs in ascending agent order, so the
        result is reproducible bit for bit.

        Division by zero (coincident agents, a target equidistant from all
        agents, zero natural frequency with chirality) yields NaN/Inf
        silently unless the engine is strict.

        Args:
            dt: Timestep. dt == 0 recomputes rates but leaves positions and
                phases unchanged.

        Raises:
            DegenerateGeometry: Only when strict=True; state is left untouched.
        """
        dt = float(dt)
        if self._agents == 0:
            return

        if self.strict:
            check_geometry(
                self._positions, self._natural_frequencies, self._chirality, self._target
            )

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            with self._section("coupling"):
                strengths = coupling_strengths(self._positions, self._target, self._J, self._A)

            with self._section("pairwise"):
                velocities, delta_phases = pairwise_rates(
                    self._positions,
                    self._phases,
                    self._natural_frequencies,
                    self._chirality,
                    strengths,
                    self._A,
                    self._B,
                    self._K,
                )
            self._velocities[:] = velocities
            self._delta_phases[:] = delta_phases

            with self._section("integrate"):
                euler_step(
                    self._positions, self._phases, self._velocities, self._delta_phases, dt
                )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def agents(self) -> int:
        return self._agents

    @property
    def positions(self) -> np.ndarray:
        """Copy of the interleaved positions, shape (2N,)."""
        return self._positions.copy()

    @property
    def positions_xy(self) -> np.ndarray:
        """Copy of the positions as (N, 2) rows, convenient for plotting."""
        return as_xy(self._positions).copy()

    @property
    def phases(self) -> np.ndarray:
        """Copy of the phases, shape (N,)."""
        return self._phases.copy()

    @property
    def velocities(self) -> np.ndarray:
        """Copy of the velocities computed by the last update, shape (2N,)."""
        return self._velocities.copy()

    @property
    def delta_phases(self) -> np.ndarray:
        """Copy of the phase rates computed by the last update, shape (N,)."""
        return self._delta_phases.copy()

    @property
    def natural_frequencies(self) -> np.ndarray:
        return self._natural_frequencies.copy()

    @property
    def chirality(self) -> np.ndarray | None:
        return unwrap(self._chirality)

    @property
    def target(self) -> np.ndarray | None:
        return unwrap(self._target)

    @property
    def A(self) -> float:
        return self._A

    @property
    def B(self) -> float:
        return self._B

    @property
    def K(self) -> float:
        return self._K

    @property
    def J(self) -> float:
        return self._J

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def set_target(self, target) -> None:
        """
        Set the target point, or clear it with None.

        While a target is set, the per-agent coupling strength is rescaled by
        distance to it and the global J is ignored.

        Raises:
            LengthMismatch: If target does not have exactly 2 elements.
        """
        tgt = maybe(target)
        if isinstance(tgt, Present):
            check_length("target", tgt.value, 2)
        self._target = tgt
        logger.debug(f"Target set to {unwrap(tgt)}")

    def set_K(self, K: float) -> None:
        """Set the phase coupling gain."""
        self._K = float(K)
        logger.debug(f"K set to {self._K}")

    def set_J(self, J: float) -> None:
        """Set the spatial-phase interaction gain."""
        self._J = float(J)
        logger.debug(f"J set to {self._J}")

    def set_chiral(self, chirality) -> None:
        """
        Set the chiral coefficients, or disable chirality with None.

        Raises:
            LengthMismatch: If chirality does not have exactly `agents` elements.
        """
        chiral = maybe(chirality)
        if isinstance(chiral, Present):
            check_length("chirality", chiral.value, self._agents)
        self._chirality = chiral
        logger.debug(f"Chirality {'enabled' if chiral else 'disabled'}")

    def set_natural_frequencies(self, natural_frequencies) -> None:
        """
        Replace the natural frequencies.

        Raises:
            LengthMismatch: If the array does not have exactly `agents` elements.
        """
        omega = check_length("natural_frequencies", f64(natural_frequencies), self._agents)
        self._natural_frequencies = omega
        logger.debug("Natural frequencies replaced")

    def set_phases(self, phases) -> None:
        """
        Replace the phases. Values are stored as given (not wrapped).

        Raises:
            LengthMismatch: If the array does not have exactly `agents` elements.
        """
        ph = check_length("phases", f64(phases), self._agents)
        self._phases = ph
        logger.debug("Phases replaced")

    def is_finite(self) -> bool:
        """True if positions, phases, velocities and phase rates are all finite."""
        return bool(
            np.isfinite(self._positions).all()
            and np.isfinite(self._phases).all()
            and np.isfinite(self._velocities).all()
            and np.isfinite(self._delta_phases).all()
        )

    def __repr__(self) -> str:
        return (
            f"Swarmalator(agents={self._agents}, K={self._K}, J={self._J}, "
            f"chiral={bool(self._chirality)}, target={unwrap(self._target)})"
        )
