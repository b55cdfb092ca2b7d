import numpy as np
import numpy.random as rnd
import pytest

import occupancyabc as occ

T = 200


@pytest.mark.parametrize("e, c", [(0.0, 0.0), (0.2, 0.3), (1.0, 1.0), (0.5, 0.0), (0.0, 1.0)])
def test_true_state_shape(e, c):
    rg = rnd.default_rng(1)
    state = occ.simulate_true_state(rg, e, c, T)
    assert state.dtype == np.bool_
    assert len(state) == T
    assert not state[0]


def test_default_length():
    rg = rnd.default_rng(1)
    assert len(occ.simulate_true_state(rg, 0.1, 0.1)) == 200
    assert len(occ.simulate(rg, 0.1, 0.1, 0.1)) == 200


def test_single_time_step():
    rg = rnd.default_rng(1)
    np.testing.assert_array_equal(occ.simulate_true_state(rg, 0.5, 0.5, 1), [False])


def test_no_extinction():
    rg = rnd.default_rng(2)
    for _ in range(20):
        state = occ.simulate_true_state(rg, 0.0, 0.1, T)
        if state.any():
            first = np.argmax(state)
            assert state[first:].all()


def test_no_colonization():
    rg = rnd.default_rng(3)
    for e in (0.0, 0.5, 1.0):
        state = occ.simulate_true_state(rg, e, 0.0, T)
        assert not state.any()


def test_certain_colonization_and_extinction():
    rg = rnd.default_rng(4)
    state = occ.simulate_true_state(rg, 1.0, 1.0, 10)
    np.testing.assert_array_equal(state, np.arange(10) % 2 == 1)

    state = occ.simulate_true_state(rg, 0.0, 1.0, 10)
    np.testing.assert_array_equal(state, np.arange(10) >= 1)


def test_no_false_positives():
    rg = rnd.default_rng(5)
    state = occ.simulate_true_state(rg, 0.3, 0.4, T)
    for m in (0.0, 0.25, 0.5, 1.0):
        measured = occ.simulate_measured_state(rg, state, m)
        assert len(measured) == len(state)
        assert not np.any(measured & ~state)


def test_perfect_measurement():
    rg = rnd.default_rng(6)
    state = occ.simulate_true_state(rg, 0.3, 0.4, T)
    np.testing.assert_array_equal(occ.simulate_measured_state(rg, state, 0.0), state)


def test_every_presence_missed():
    rg = rnd.default_rng(7)
    state = occ.simulate_true_state(rg, 0.0, 1.0, T)
    assert not occ.simulate_measured_state(rg, state, 1.0).any()


def test_measured_state_accepts_lists():
    rg = rnd.default_rng(8)
    measured = occ.simulate_measured_state(rg, [False, True, True], 0.0)
    np.testing.assert_array_equal(measured, [False, True, True])


def test_number_of_random_draws():
    n = 50
    rg = rnd.default_rng(9)
    occ.simulate(rg, 0.2, 0.3, 0.1, n)

    rgCopy = rnd.default_rng(9)
    rgCopy.random(2 * n - 1)

    assert rg.random() == rgCopy.random()


def test_same_seed_same_data():
    x1 = occ.simulate(rnd.default_rng(10), 0.2, 0.3, 0.1)
    x2 = occ.simulate(rnd.default_rng(10), 0.2, 0.3, 0.1)
    np.testing.assert_array_equal(x1, x2)


def test_occupancy_model_unpacks_theta():
    x1 = occ.simulate_occupancy_model(rnd.default_rng(11), np.array([0.2, 0.3, 0.1]), 30)
    x2 = occ.simulate(rnd.default_rng(11), 0.2, 0.3, 0.1, 30)
    np.testing.assert_array_equal(x1, x2)


@pytest.mark.parametrize("e, c", [(-0.1, 0.5), (0.5, 1.1), (np.nan, 0.5), (2.0, -1.0)])
def test_invalid_rates(e, c):
    rg = rnd.default_rng(12)
    with pytest.raises(occ.InvalidParameter):
        occ.simulate_true_state(rg, e, c, T)


def test_invalid_measurement_error():
    rg = rnd.default_rng(13)
    state = occ.simulate_true_state(rg, 0.2, 0.2, T)
    with pytest.raises(occ.InvalidParameter):
        occ.simulate_measured_state(rg, state, 1.5)
    with pytest.raises(occ.InvalidParameter):
        occ.simulate(rg, 0.2, 0.2, -0.5)


def test_invalid_length():
    rg = rnd.default_rng(14)
    with pytest.raises(occ.InvalidParameter):
        occ.simulate_true_state(rg, 0.2, 0.2, 0)


def test_measured_state_of_read_only_record():
    rg = rnd.default_rng(15)
    measured = occ.simulate_measured_state(rg, occ.OBSERVED_PRESENCE, 0.0)
    np.testing.assert_array_equal(measured, occ.OBSERVED_PRESENCE)

    measured = occ.simulate_measured_state(rg, occ.OBSERVED_PRESENCE, 0.5)
    assert not np.any(measured & ~occ.OBSERVED_PRESENCE)
    assert not occ.OBSERVED_PRESENCE.flags.writeable
