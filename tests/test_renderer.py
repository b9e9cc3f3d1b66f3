# MIT License (see LICENSE)
import io

import numpy as np
import pytest
from swarmalator_sim.engine import Swarmalator
from swarmalator_sim.renderer import (
    BufferedRenderer,
    DebugRenderer,
    NullRenderer,
    hsv_to_rgb,
    phase_to_fill_style,
    phase_to_hsv,
    to_canvas,
)


def make_engine():
    return Swarmalator(3, [0, 0, 1, 0, 0, 1], [0.0, 2 * np.pi / 3, np.pi], [0, 0, 0], K=1.0, J=1.0)


def test_phase_colours():
    assert phase_to_fill_style(0.0) == "rgb(255, 0, 0)"
    assert phase_to_fill_style(2 * np.pi / 3) == "rgb(0, 255, 0)"
    assert phase_to_fill_style(np.pi) == "rgb(0, 255, 255)"
    assert phase_to_fill_style(float("nan")) == "rgb(128, 128, 128)"


def test_hue_wraps_negative_phase():
    hue, s, v = phase_to_hsv(-np.pi / 2)
    assert hue == pytest.approx(270.0)
    assert (s, v) == (1.0, 1.0)
    assert 0.0 <= phase_to_hsv(4 * np.pi)[0] < 360.0


def test_hsv_sectors():
    assert hsv_to_rgb(60.0, 1.0, 1.0) == (255, 255, 0)
    assert hsv_to_rgb(240.0, 1.0, 1.0) == (0, 0, 255)
    assert hsv_to_rgb(300.0, 1.0, 1.0) == (255, 0, 255)
    assert hsv_to_rgb(0.0, 0.0, 1.0) == (255, 255, 255)
    assert hsv_to_rgb(0.0, 1.0, 0.0) == (0, 0, 0)


def test_to_canvas():
    """World square [-3, 3]² fills the middle 80% of the canvas, y flipped."""
    assert to_canvas(-3.0, -3.0, 800) == pytest.approx((80.0, 720.0))
    assert to_canvas(3.0, 3.0, 800) == pytest.approx((720.0, 80.0))
    assert to_canvas(0.0, 0.0, 800) == pytest.approx((400.0, 400.0))


def test_debug_renderer_output():
    out = io.StringIO()
    DebugRenderer(output=out).render_swarm(make_engine(), time=0.05)
    text = out.getvalue()
    assert text.startswith("=== Frame t=0.0500 ===")
    assert "[0] @ (0.00, 0.00)" in text
    assert "rgb(255, 0, 0)" in text
    assert text.count("\n") == 5


def test_debug_renderer_quiet():
    out = io.StringIO()
    DebugRenderer(output=out, verbose=False).render_swarm(make_engine())
    assert "rgb" not in out.getvalue()


def test_buffered_renderer_records_frames():
    engine = make_engine()
    renderer = BufferedRenderer()
    for k in range(3):
        engine.update(0.05)
        renderer.render_swarm(engine, time=0.05 * (k + 1))
    assert len(renderer.frames) == 3
    frame = renderer.frames[-1]
    assert frame["time"] == pytest.approx(0.15)
    assert [a["index"] for a in frame["agents"]] == [0, 1, 2]
    assert np.allclose(frame["agents"][1]["position"], engine.positions_xy[1])
    assert frame["agents"][0]["phase"] == engine.phases[0]

    renderer.clear()
    assert renderer.frames == []


def test_buffered_renderer_ignores_draw_outside_frame():
    renderer = BufferedRenderer()
    renderer.draw_agent(0, 0.0, 0.0, 0.0)
    renderer.end_frame()
    assert renderer.frames == []


def test_null_renderer():
    NullRenderer().render_swarm(make_engine())
