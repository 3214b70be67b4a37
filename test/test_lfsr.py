import numpy as np
import pytest

from LFSR import LFSR, InvalidStateError, derive_mask
from lfsr_taps import UnsupportedSizeError


def test_maximum_length_sequence():
    lfsr = LFSR(1, 4)
    sequence = []
    for _ in range(15):
        sequence.append(lfsr.state)
        lfsr = lfsr.next()

    assert sorted(sequence) == list(range(1, 16))
    assert lfsr.state == 1


@pytest.mark.parametrize("start", [1, 7, 15])
def test_cycle_returns_to_any_start(start):
    lfsr = LFSR(start, 4)
    for _ in range(15):
        lfsr.step()
    assert lfsr.state == start


def test_mask_from_taps():
    assert derive_mask(16, [16, 14, 13, 11]) == 0xB400
    assert LFSR(1, [16, 14, 13, 11]).mask == 0xB400


def test_default_mask_from_size():
    assert LFSR(1, 16).mask == 0xB400
    assert LFSR(1, 8).mask == 184


def test_next_state():
    assert LFSR(1, 16).next().state == 46080
    assert LFSR(1, 8).next().state == 184


def test_next_leaves_register_untouched():
    lfsr = LFSR(1, 16)
    advanced = lfsr.next()
    assert lfsr.state == 1
    assert advanced.mask == lfsr.mask
    assert advanced.size == 16


def test_step_updates_in_place():
    lfsr = LFSR(1, 16)
    assert lfsr.step() == 46080
    assert lfsr.state == 46080


def test_state_read_is_idempotent():
    lfsr = LFSR(5, 8)
    assert lfsr.state == lfsr.state == 5


def test_smallest_register():
    lfsr = LFSR(1, 2)
    seen = set()
    for _ in range(3):
        seen.add(lfsr.state)
        lfsr = lfsr.next()
    assert seen == {1, 2, 3}
    assert lfsr.state == 1


@pytest.mark.parametrize("state", [0, -1, 256])
def test_state_out_of_range(state):
    with pytest.raises(InvalidStateError) as e:
        LFSR(state, 8)
    assert e.value.state == state
    assert (e.value.low, e.value.high) == (1, 255)


def test_state_out_of_range_message():
    with pytest.raises(InvalidStateError, match="initial state must be between 1 and 255"):
        LFSR(256, [8, 6, 5, 4])


def test_size_not_in_taps_table():
    with pytest.raises(UnsupportedSizeError) as e:
        LFSR(1, 900)
    assert e.value.size == 900


def test_explicit_taps_beyond_table():
    lfsr = LFSR(1, [900, 899, 897, 896])
    assert lfsr.size == 900
    assert lfsr.mask >> 899 == 1
    assert lfsr.next().state == lfsr.mask


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        LFSR(0, 8)
    with pytest.raises(ValueError):
        LFSR(1, 1)


@pytest.mark.parametrize("taps", [[4, 0], [4, 5]])
def test_tap_outside_register(taps):
    with pytest.raises(ValueError):
        LFSR(1, taps)


def test_empty_taps():
    with pytest.raises(ValueError):
        LFSR(1, [])


def test_registers_are_independent():
    a = LFSR(1, 8)
    b = LFSR(1, 8)
    a.step()
    assert b.state == 1
    assert a != b
    assert a == b.next()


def test_repr():
    assert repr(LFSR(1, 8)) == "LFSR(state=1, mask=184)"


def test_float_state_rejected_at_construction():
    with pytest.raises(TypeError):
        LFSR(1.0, 8)


def test_float_taps_rejected():
    with pytest.raises(TypeError):
        LFSR(1, [8.0, 6, 5, 4])


def test_registers_are_unhashable():
    lfsr = LFSR(1, 8)
    with pytest.raises(TypeError):
        hash(lfsr)
    with pytest.raises(TypeError):
        set([lfsr])


def test_numpy_size():
    lfsr = LFSR(1, np.int64(16))
    assert lfsr.mask == 0xB400
    assert type(lfsr.size) is int


def test_numpy_taps():
    lfsr = LFSR(1, np.array([16, 14, 13, 11]))
    assert lfsr.mask == 0xB400
    assert type(lfsr.mask) is int
    assert all(type(t) is int for t in lfsr.taps)


def test_numpy_state_becomes_int():
    lfsr = LFSR(np.int64(1), 16)
    assert type(lfsr.state) is int
    assert type(lfsr.next().state) is int
    assert lfsr.next().state == 46080
