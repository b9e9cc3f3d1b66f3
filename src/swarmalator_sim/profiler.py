# MIT License (see LICENSE)
"""
Lightweight timing instrumentation for the update loop.

Two tools:
- Profiler: wall-clock samples for named sections of a step
  ("coupling", "pairwise", "integrate") and of a host tick ("tick", "render").
- FrameRateMeter: frames-per-second over a sliding window of recent ticks,
  the numbers a host displays next to the animation.

Example:
    profiler = Profiler()
    engine = Swarmalator(..., profiler=profiler)
    engine.update(0.05)
    print(profiler.summary()["pairwise"]["mean_ms"])
"""
from __future__ import annotations
import time
from collections import defaultdict, deque
from contextlib import contextmanager
from typing import Iterator


class Profiler:
    """
    Section timer keyed by name.

    Attributes:
        samples: Elapsed seconds per section, one entry per timed block.
    """

    def __init__(self, clock=time.perf_counter) -> None:
        self._clock = clock
        self.samples: defaultdict[str, list[float]] = defaultdict(list)

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block; the sample is kept even if it raises."""
        start = self._clock()
        try:
            yield
        finally:
            self.samples[name].append(self._clock() - start)

    def summary(self) -> dict[str, dict[str, float]]:
        """Per-section sample count plus total, mean and max in milliseconds."""
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out

    def reset(self) -> None:
        self.samples.clear()


class FrameRateMeter:
    """
    Frames-per-second over the most recent ticks.

    Call tick() once per rendered frame. The first tick only sets the
    reference time.

    Attributes:
        window: Number of recent frame rates kept (default 100).
    """

    def __init__(self, window: int = 100, clock=time.perf_counter) -> None:
        self.window = window
        self._clock = clock
        self._frames: deque[float] = deque(maxlen=window)
        self._last: float | None = None

    def tick(self) -> float | None:
        """
        Record a frame and return its instantaneous fps.

        Returns None on the first call, or if the clock has not advanced.
        """
        now = self._clock()
        last, self._last = self._last, now
        if last is None or now <= last:
            return None
        fps = 1.0 / (now - last)
        self._frames.append(fps)
        return fps

    def summary(self) -> dict[str, float]:
        """Latest, mean, min and max fps over the window (empty dict before two ticks)."""
        if not self._frames:
            return {}
        frames = list(self._frames)
        return {
            "latest": frames[-1],
            "mean": sum(frames) / len(frames),
            "min": min(frames),
            "max": max(frames),
        }

    def render(self) -> str:
        """Human-readable block of the summary, rounded to whole frames."""
        s = self.summary()
        if not s:
            return "Frames per Second: n/a"
        n = len(self._frames)
        return (
            "Frames per Second:\n"
            f"         latest = {round(s['latest'])}\n"
            f"avg of last {n} = {round(s['mean'])}\n"
            f"min of last {n} = {round(s['min'])}\n"
            f"max of last {n} = {round(s['max'])}"
        )
