# MIT License (see LICENSE)
"""
Renderer adapters for swarmalator visualization.

This module provides an abstract base class for rendering and concrete
text, no-op and buffering implementations. The engine has no rendering
dependency; a host reads positions and phases back after each update and
hands them to one of these adapters.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from .color import phase_to_fill_style

if TYPE_CHECKING:
    from ..engine import Swarmalator


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods for a graphics backend
    (matplotlib, a web canvas, a terminal, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(time)
        for i in range(engine.agents):
            renderer.draw_agent(i, x, y, phase)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_swarm(engine, time)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_agent(self, index: int, x: float, y: float, phase: float) -> None:
        """
        Draw one agent.

        Args:
            index: Agent index.
            x, y: World position.
            phase: Phase in radians (usually mapped to hue).
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_swarm(self, engine: "Swarmalator", time: float = 0.0) -> None:
        """
        Read the engine's state once and draw every agent.

        Args:
            engine: The engine to render.
            time: Simulation time for the frame header.
        """
        xy = engine.positions_xy
        phases = engine.phases
        self.begin_frame(time)
        for i in range(engine.agents):
            self.draw_agent(i, float(xy[i, 0]), float(xy[i, 1]), float(phases[i]))
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Writes one line per agent to a stream (stdout by default).

    Output:
        === Frame t=0.0500 ===
        [0] @ (-1.23, 0.45) θ=0.31 rgb(255, 79, 0)
        [1] @ (0.98, -2.10) θ=3.45 rgb(0, 150, 255)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include the fill colour.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_agent(self, index: int, x: float, y: float, phase: float) -> None:
        line = f"[{index}] @ ({x:.2f}, {y:.2f}) θ={phase:.2f}"
        if self.verbose:
            line += f" {phase_to_fill_style(phase)}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarking the update loop alone."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_agent(self, index: int, x: float, y: float, phase: float) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame for later inspection or export.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            engine.update(0.05)
            renderer.render_swarm(engine)

        for frame in renderer.frames:
            print(frame["time"], len(frame["agents"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "agents": []}

    def draw_agent(self, index: int, x: float, y: float, phase: float) -> None:
        if self._current_frame is None:
            return
        self._current_frame["agents"].append({
            "index": index,
            "position": [x, y],
            "phase": phase,
            "color": phase_to_fill_style(phase),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Drop all recorded frames."""
        self.frames.clear()
