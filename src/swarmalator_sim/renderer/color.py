# MIT License (see LICENSE)
"""
Phase-to-colour mapping and canvas coordinates.

Each agent is drawn with a hue equal to its phase angle, so synchronized
clusters share a colour and phase waves show up as rainbows.
"""
from __future__ import annotations

import numpy as np

from ..util import map_range


def phase_to_hsv(phase: float) -> tuple[float, float, float]:
    """
    Hue in degrees [0, 360) from a phase in radians; saturation and value 1.

    Negative phases wrap around (-π/2 -> 270°).
    """
    degrees = phase * (180.0 / np.pi)
    hue = ((degrees % 360.0) + 360.0) % 360.0
    return hue, 1.0, 1.0


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """
    Convert HSV (h in degrees, s and v in [0, 1]) to 0-255 RGB.

    Reference:
        https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB
    """
    c = v * s
    x = c * (1 - abs(((h / 60.0) % 2) - 1))
    m = v - c

    if 0 <= h < 60:
        r, g, b = c, x, 0.0
    elif 60 <= h < 120:
        r, g, b = x, c, 0.0
    elif 120 <= h < 180:
        r, g, b = 0.0, c, x
    elif 180 <= h < 240:
        r, g, b = 0.0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        int(np.floor((r + m) * 255 + 0.5)),
        int(np.floor((g + m) * 255 + 0.5)),
        int(np.floor((b + m) * 255 + 0.5)),
    )


# Drawn for agents whose phase has become NaN/Inf
NON_FINITE_RGB: tuple[int, int, int] = (128, 128, 128)


def phase_to_rgb(phase: float) -> tuple[int, int, int]:
    """Fully saturated RGB colour for a phase; grey if the phase is not finite."""
    if not np.isfinite(phase):
        return NON_FINITE_RGB
    return hsv_to_rgb(*phase_to_hsv(phase))


def phase_to_fill_style(phase: float) -> str:
    """CSS-style fill string, e.g. 'rgb(255, 0, 0)' for phase 0."""
    r, g, b = phase_to_rgb(phase)
    return f"rgb({r}, {g}, {b})"


def to_canvas(
    x: float,
    y: float,
    size: float,
    extent: float = 3.0,
    margin: float = 0.1,
) -> tuple[float, float]:
    """
    Map world coordinates in [-extent, extent]² to canvas pixels.

    The world square fills the canvas minus a `margin` fraction on each side.
    Canvas y grows downward, so world y is flipped.
    """
    lo, hi = margin * size, (1.0 - margin) * size
    cx = map_range(x, -extent, extent, lo, hi)
    cy = map_range(y, -extent, extent, hi, lo)
    return float(cx), float(cy)
