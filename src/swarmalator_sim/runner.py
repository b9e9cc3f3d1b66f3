# MIT License (see LICENSE)
"""
Host-side tick loop around a Swarmalator.

Each tick does what an animation frame does in an interactive viewer:

    1. engine.update(dt)
    2. advance the simulation clock
    3. read state back and hand it to the renderer
    4. record frame timing

Setters on the engine (set_target, set_K, ...) may be called between ticks,
for example to follow the mouse with the target point.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .engine import Swarmalator
from .profiler import FrameRateMeter, Profiler
from .renderer.adapter import RendererAdapter

if TYPE_CHECKING:
    from .config import SwarmConfig

logger = logging.getLogger(__name__)


class Simulation:
    """
    Drives one engine with a fixed timestep.

    Attributes:
        engine: The swarmalator being advanced.
        dt: Timestep passed to every update.
        renderer: Optional renderer called after each update.
        profiler: Optional profiler; ticks are timed under "tick" and
                  rendering under "render".
        fps: Frame-rate meter updated every tick.
        time: Simulation time (sum of dt over completed ticks).
        ticks: Number of completed ticks.
    """

    def __init__(
        self,
        engine: Swarmalator,
        dt: float = 0.05,
        renderer: RendererAdapter | None = None,
        profiler: Profiler | None = None,
    ) -> None:
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self.engine = engine
        self.dt = float(dt)
        self.renderer = renderer
        self.profiler = profiler
        self.fps = FrameRateMeter()
        self.time = 0.0
        self.ticks = 0
        self._warned_non_finite = False

    @classmethod
    def from_config(
        cls,
        config: "SwarmConfig",
        renderer: RendererAdapter | None = None,
        profiler: Profiler | None = None,
    ) -> "Simulation":
        """Build the engine described by config and run it at config.dt."""
        return cls(config.build(profiler=profiler), config.dt, renderer, profiler)

    def tick(self) -> None:
        """Advance one timestep, then render."""
        prof = self.profiler
        if prof:
            with prof.section("tick"):
                self.engine.update(self.dt)
        else:
            self.engine.update(self.dt)

        self.time += self.dt
        self.ticks += 1

        if self.renderer is not None:
            if prof:
                with prof.section("render"):
                    self.renderer.render_swarm(self.engine, self.time)
            else:
                self.renderer.render_swarm(self.engine, self.time)

        self.fps.tick()

        if not self._warned_non_finite and not self.engine.is_finite():
            self._warned_non_finite = True
            logger.warning(
                f"Non-finite swarm state after tick {self.ticks} (t={self.time:.4f}); "
                "check for coincident agents, an equidistant target or zero "
                "natural frequencies under chirality"
            )

    def run(self, steps: int) -> None:
        """Run `steps` ticks."""
        logger.info(f"Running {steps} ticks of dt={self.dt} for {self.engine.agents} agents")
        for _ in range(steps):
            self.tick()
        logger.info(f"Finished at t={self.time:.4f} after {self.ticks} ticks")

    def run_until(self, t_end: float) -> None:
        """Tick until the simulation time reaches t_end."""
        if self.dt == 0:
            raise ValueError("run_until needs a positive dt")
        while self.time < t_end - 1e-12:
            self.tick()

    def is_finite(self) -> bool:
        """True if the engine state is all finite."""
        return self.engine.is_finite()
