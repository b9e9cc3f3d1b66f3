# MIT License (see LICENSE)
import numpy as np
import pytest
from swarmalator_sim.engine import Swarmalator
from swarmalator_sim.core.coupling import coupling_strengths, target_distances
from swarmalator_sim.types import Absent, Present


def test_strengths_without_target_use_global_j():
    pos = np.array([0.0, 0.0, 1.0, 0.0, 5.0, 5.0])
    assert np.array_equal(coupling_strengths(pos, Absent(), 0.25, 1.0), [0.25, 0.25, 0.25])


def test_strengths_rescale_by_distance():
    """
    Agents at distance 0, 1 and 3 from the target get
    J = A * (d - 0) / (3 - 0) = 0, 1/3, 1.
    """
    pos = np.array([0.0, 0.0, 1.0, 0.0, 0.0, 3.0])
    Js = coupling_strengths(pos, Present([0.0, 0.0]), J=5.0, A=1.0)
    assert np.allclose(Js, [0.0, 1.0 / 3.0, 1.0])


def test_strengths_nearest_zero_farthest_a():
    rng = np.random.default_rng(5)
    pos = rng.uniform(-3, 3, 2 * 25)
    target = np.array([2.0, 0.0])
    Js = coupling_strengths(pos, Present(target), J=0.0, A=1.0)
    d = target_distances(pos, target)

    assert Js[np.argmin(d)] == 0.0
    assert Js[np.argmax(d)] == 1.0
    # Linear in distance between the extremes
    expected = (d - d.min()) / (d.max() - d.min())
    assert np.allclose(Js, expected, atol=1e-12)


def test_strengths_scale_with_a():
    pos = np.array([0.0, 0.0, 2.0, 0.0])
    Js = coupling_strengths(pos, Present([0.0, 0.0]), J=0.0, A=2.5)
    assert np.allclose(Js, [0.0, 2.5])


def test_target_overrides_global_j():
    """
    Pair at (1, 0) and (3, 0) with target at the origin: J0 = 0, J1 = 1.
    In phase at distance 2:
      v0 = (1/2) * (1 * (1 + 0) - 1 * 2 / 4) = 0.25
      v1 = (1/2) * (-1 * (1 + 1) - 1 * (-2) / 4) = -0.75
    The global J (here 100) plays no part.
    """
    engine = Swarmalator(2, [1, 0, 3, 0], [0, 0], [0, 0], K=1.0, J=100.0, target=(0.0, 0.0))
    engine.update(0.0)
    assert np.allclose(engine.velocities, [0.25, 0.0, -0.75, 0.0], atol=1e-12)


def test_set_target_and_clear():
    engine = Swarmalator(2, [1, 0, 3, 0], [0, 0], [0, 0], K=1.0, J=1.0)
    engine.update(0.0)
    v_global = engine.velocities

    engine.set_target([0.0, 0.0])
    assert np.array_equal(engine.target, [0.0, 0.0])
    engine.update(0.0)
    assert not np.allclose(engine.velocities, v_global)

    engine.set_target(None)
    assert engine.target is None
    engine.update(0.0)
    assert np.allclose(engine.velocities, v_global)


def test_live_target_repositioning():
    """Moving the target flips which agent has the strong coupling."""
    engine = Swarmalator(2, [1, 0, 3, 0], [0, 0], [0, 0], K=1.0, J=0.0, target=(0.0, 0.0))
    engine.update(0.0)
    v_near_left = engine.velocities
    engine.set_target((4.0, 0.0))
    engine.update(0.0)
    v_near_right = engine.velocities
    # Mirror image: agent 1 is now the nearest one
    assert v_near_right[2] == pytest.approx(-v_near_left[0])
    assert v_near_right[0] == pytest.approx(-v_near_left[2])
