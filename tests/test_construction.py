# MIT License (see LICENSE)
import numpy as np
import pytest
from swarmalator_sim.engine import Swarmalator
from swarmalator_sim.errors import LengthMismatch


def _valid(n=3):
    return dict(
        agents=n,
        positions=np.arange(2 * n, dtype=float),
        phases=np.zeros(n),
        natural_frequencies=np.ones(n),
        K=1.0,
        J=0.5,
    )


@pytest.mark.parametrize(
    "field, bad",
    [
        ("positions", np.zeros(5)),
        ("positions", np.zeros(7)),
        ("phases", np.zeros(2)),
        ("phases", np.zeros(4)),
        ("natural_frequencies", np.zeros(0)),
        ("chirality", np.ones(2)),
        ("target", [1.0, 2.0, 3.0]),
        ("target", [1.0]),
    ],
)
def test_length_mismatch_names_field(field, bad):
    """Every malformed array length is rejected with the offending field named."""
    kwargs = _valid()
    kwargs[field] = bad
    with pytest.raises(LengthMismatch) as exc:
        Swarmalator(**kwargs)
    assert exc.value.field == field
    assert exc.value.actual == len(bad)
    assert field in str(exc.value)


def test_length_mismatch_is_value_error():
    """LengthMismatch can be caught as a plain ValueError."""
    kwargs = _valid()
    kwargs["phases"] = [0.0]
    with pytest.raises(ValueError):
        Swarmalator(**kwargs)


def test_positions_checked_before_phases():
    """When several arrays are wrong, positions is reported first."""
    with pytest.raises(LengthMismatch) as exc:
        Swarmalator(2, [0.0], [0.0], [0.0], 1.0, 1.0)
    assert exc.value.field == "positions"
    assert exc.value.expected == 4


@pytest.mark.parametrize("agents", [-1, 2.5, True, "3"])
def test_bad_agent_count(agents):
    with pytest.raises(ValueError):
        Swarmalator(agents, [], [], [], 1.0, 1.0)


def test_initial_state():
    """Agents start at rest, A = B = 1, inputs are copied."""
    kwargs = _valid()
    pos = kwargs["positions"]
    engine = Swarmalator(**kwargs)

    assert engine.agents == 3
    assert engine.A == 1.0 and engine.B == 1.0
    assert engine.K == 1.0 and engine.J == 0.5
    assert np.array_equal(engine.velocities, np.zeros(6))
    assert np.array_equal(engine.delta_phases, np.zeros(3))
    assert engine.chirality is None
    assert engine.target is None

    # No aliasing with the caller's array
    pos[0] = 99.0
    assert engine.positions[0] == 0.0


def test_accessors_return_copies():
    engine = Swarmalator(**_valid())
    p = engine.positions
    p[:] = 123.0
    ph = engine.phases
    ph[:] = 4.0
    v = engine.velocities
    v[:] = 5.0
    assert not np.any(engine.positions == 123.0)
    assert not np.any(engine.phases == 4.0)
    assert not np.any(engine.velocities == 5.0)


def test_positions_accept_pairs():
    """An (N, 2) array is accepted and stored interleaved."""
    engine = Swarmalator(2, [[0.0, 1.0], [2.0, 3.0]], [0, 0], [0, 0], 1.0, 1.0)
    assert np.array_equal(engine.positions, [0.0, 1.0, 2.0, 3.0])
    assert np.array_equal(engine.positions_xy, [[0.0, 1.0], [2.0, 3.0]])


def test_optional_fields_stored():
    engine = Swarmalator(2, [0, 0, 1, 0], [0, 0], [1, -1], 1.0, 1.0,
                         chirality=[1.0, -1.0], target=(2.0, 0.0))
    assert np.array_equal(engine.chirality, [1.0, -1.0])
    assert np.array_equal(engine.target, [2.0, 0.0])


def test_empty_ensemble():
    """Zero agents is allowed and update is a no-op."""
    engine = Swarmalator(0, [], [], [], 1.0, 1.0, target=(0.0, 0.0))
    engine.update(0.1)
    assert engine.positions.size == 0


def test_explicit_optional_variants():
    """Absent()/Present(...) are accepted wherever None/arrays are."""
    from swarmalator_sim.types import Absent, Present

    values = np.array([1.0, -1.0])
    engine = Swarmalator(2, [0, 0, 1, 0], [0, 0], [1, -1], 1.0, 1.0,
                         chirality=Present(values), target=Absent())
    values[0] = 50.0
    assert np.array_equal(engine.chirality, [1.0, -1.0])
    assert engine.target is None
    assert Present([1.0, 2.0]) == Present(np.array([1.0, 2.0]))
    assert not Absent()
