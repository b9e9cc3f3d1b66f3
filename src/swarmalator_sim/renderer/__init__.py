# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames for playback or export.
    - Colour helpers mapping phase to hue and world to canvas coordinates.

The engine has no rendering dependency; these adapters are optional.

Typical usage:
    from swarmalator_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_swarm(engine)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)
from .color import (
    phase_to_hsv,
    hsv_to_rgb,
    phase_to_rgb,
    phase_to_fill_style,
    to_canvas,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "phase_to_hsv",
    "hsv_to_rgb",
    "phase_to_rgb",
    "phase_to_fill_style",
    "to_canvas",
]
