import numpy as np
import pytest

from LFSR import LFSR
from lfsr_period import cycle_states, is_maximal, period


@pytest.mark.parametrize("size", range(2, 17))
def test_table_taps_are_maximal(size):
    assert is_maximal(size)


def test_explicit_taps_are_maximal():
    assert is_maximal([16, 14, 13, 11])


def test_short_cycle():
    assert period(LFSR(1, [4, 2])) == 6
    assert not is_maximal([4, 2])


def test_period_gives_up():
    assert period(LFSR(1, 16), max_steps=10) is None


def test_period_wide_register():
    assert period(LFSR(1, 64), max_steps=100) is None
    assert period(LFSR(1, [64, 63, 61, 60]), max_steps=100) is None


def test_period_does_not_advance():
    lfsr = LFSR(3, 8)
    assert period(lfsr) == 255
    assert lfsr.state == 3


def test_cycle_states_cover_nonzero_values():
    states = cycle_states(LFSR(1, 10))
    assert states.dtype == np.int64
    assert len(states) == 1023
    assert np.array_equal(np.sort(states), np.arange(1, 1024))


def test_cycle_states_match_stepping():
    lfsr = LFSR(1, 16)
    states = cycle_states(lfsr, 5)
    expected = []
    for _ in range(5):
        expected.append(lfsr.state)
        lfsr = lfsr.next()
    assert states.tolist() == expected
    assert states[1] == 46080


def test_cycle_states_too_wide():
    with pytest.raises(ValueError):
        cycle_states(LFSR(1, 64), 4)


def test_full_cycle_matches_stepping():
    lfsr = LFSR(1, 12)
    states = cycle_states(lfsr)
    expected = []
    for _ in range(4095):
        expected.append(lfsr.state)
        lfsr = lfsr.next()
    assert states.tolist() == expected
    assert lfsr.state == 1


def test_state_from_cycle_states():
    state = cycle_states(LFSR(1, 16), 3)[2]
    lfsr = LFSR(state, 16)
    assert type(lfsr.state) is int
    assert type(lfsr.next().state) is int
    assert lfsr.state == LFSR(1, 16).next().next().state
