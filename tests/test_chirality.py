# MIT License (see LICENSE)
import numpy as np
import pytest
from swarmalator_sim.engine import Swarmalator
from swarmalator_sim.core.coupling import frequency_offsets, chiral_velocities
from swarmalator_sim.types import Absent, Present


def test_offsets_zero_without_chirality():
    assert frequency_offsets(np.array([1.0, -1.0]), Absent()) == (0.0, 0.0)


def test_offsets_by_rotation_sense():
    """
    Same sign: no offset. Opposite signs: Δ_xy = (π/2)|±1 ∓ 1| = π and
    Δ_θ = π/2.
    """
    omega = np.array([2.0, 0.5, -3.0])
    diff_xy, diff_phase = frequency_offsets(omega, Present([1.0, 1.0, 1.0]))
    assert diff_xy[0, 1] == 0.0
    assert diff_xy[0, 2] == pytest.approx(np.pi)
    assert diff_xy[2, 1] == pytest.approx(np.pi)
    assert np.allclose(diff_phase, diff_xy / 2)


def test_chiral_base_velocity():
    phases = np.array([0.0, np.pi / 2])
    v = chiral_velocities(phases, Present([1.0, -2.0]))
    # Agent 0: (cos π/2, sin π/2) = (0, 1); agent 1: -2 (cos π, sin π) = (2, 0)
    assert np.allclose(v, [0.0, 1.0, 2.0, 0.0], atol=1e-12)
    assert np.array_equal(chiral_velocities(phases, Absent()), np.zeros(4))


def test_opposite_rotators_phase_rate():
    """
    Two in-phase agents with opposite natural frequency signs: the phase
    coupling term is (K/2) sin(0 - π/2) / 1 = -K/2 on top of ω.
    """
    K = 1.0
    engine = Swarmalator(2, [0, 0, 1, 0], [0, 0], [1.0, -1.0], K=K, J=0.0,
                         chirality=[1.0, -1.0])
    engine.update(0.0)
    assert np.allclose(engine.delta_phases, [1.0 - K / 2, -1.0 - K / 2], atol=1e-12)


def test_set_chiral_toggles():
    engine = Swarmalator(1, [0.0, 0.0], [0.0], [1.0], K=1.0, J=1.0)
    engine.update(0.0)
    assert np.array_equal(engine.velocities, [0.0, 0.0])

    engine.set_chiral([3.0])
    engine.update(0.0)
    assert np.linalg.norm(engine.velocities) == pytest.approx(3.0)

    engine.set_chiral(None)
    assert engine.chirality is None
    engine.update(0.0)
    assert np.array_equal(engine.velocities, [0.0, 0.0])


def test_chiral_agents_orbit():
    """A lone chiral agent with constant phase speed traces a circle."""
    omega, c, dt = 1.0, 1.0, 0.001
    engine = Swarmalator(1, [0.0, 0.0], [0.0], [omega], K=0.0, J=0.0, chirality=[c])
    steps = int(round(2 * np.pi / (omega * dt)))
    xs = []
    for _ in range(steps):
        engine.update(dt)
        xs.append(engine.positions.copy())
    xs = np.array(xs)
    # Orbit radius c / ω, centred at (-c/ω, 0) for this start
    r = np.linalg.norm(xs - np.array([-c / omega, 0.0]), axis=1)
    assert np.allclose(r, c / omega, atol=1e-2)
