import pytest

from lfsr_taps import TAPS, UnsupportedSizeError, lookup_taps, supported_sizes


def test_table_domain():
    sizes = supported_sizes()
    assert sizes[:3] == [2, 3, 4]
    assert set(range(2, 787)) <= set(sizes)
    assert sizes[-3:] == [1024, 2048, 4096]
    assert len(sizes) == 788


def test_lookup():
    assert lookup_taps(16) == (16, 14, 13, 11)
    assert lookup_taps(2) == (2, 1)
    assert lookup_taps(4096) == (4096, 4095, 4081, 4069)


def test_entries_start_with_size_and_descend():
    for size, taps in TAPS.items():
        assert taps[0] == size
        assert 2 <= len(taps) <= 4
        assert list(taps) == sorted(taps, reverse=True)
        assert taps[-1] >= 1


@pytest.mark.parametrize("size", [0, 1, 787, 900, 1023])
def test_unsupported_size(size):
    with pytest.raises(UnsupportedSizeError) as e:
        lookup_taps(size)
    assert e.value.size == size
