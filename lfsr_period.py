# Cycle measurement for Galois LFSRs, used to check tap configurations
from LFSR import LFSR
import numpy as np
from numba import jit

# Widest register the kernels handle, numba works on int64
MAX_JIT_SIZE = 62

# JIT-compiled kernels for high performance
@jit(nopython=True)
def _period_jit(state, mask, max_steps):
    start = state
    for i in range(1, max_steps + 1):
        lsb = state & 1
        state >>= 1
        if lsb:
            state ^= mask
        if state == start:
            return i
    return -1

@jit(nopython=True)
def _cycle_jit(state, mask, count):
    out = np.empty(count, dtype=np.int64)
    for i in range(count):
        out[i] = state
        lsb = state & 1
        state >>= 1
        if lsb:
            state ^= mask
    return out, state


def period(lfsr, max_steps=None):
    """
    Counts the steps until `lfsr` comes back to its current state.
    Returns None if that does not happen within `max_steps`, which defaults
    to the maximum cycle length 2^n - 1. The register is not advanced.
    """
    if max_steps is None:
        max_steps = (1 << lfsr.size) - 1

    if lfsr.size <= MAX_JIT_SIZE:
        result = _period_jit(lfsr.state, lfsr.mask, max_steps)
        return None if result < 0 else result

    # Python ints for registers wider than the kernel supports
    current = lfsr
    for i in range(1, max_steps + 1):
        current = current.next()
        if current.state == lfsr.state:
            return i
    return None


def is_maximal(size_or_taps) -> bool:
    lfsr = LFSR(1, size_or_taps)
    return period(lfsr) == (1 << lfsr.size) - 1


def cycle_states(lfsr, count=None):
    """
    Returns `count` successive states as an int64 array, starting with the
    current one. Defaults to one full maximum-length cycle.
    """
    if lfsr.size > MAX_JIT_SIZE:
        raise ValueError(f"register of size {lfsr.size} is wider than {MAX_JIT_SIZE} bits")
    if count is None:
        count = (1 << lfsr.size) - 1
    states, _ = _cycle_jit(lfsr.state, lfsr.mask, count)
    return states


if __name__ == "__main__":
    from lfsr_taps import supported_sizes
    from time import time

    # Check the table entries small enough to walk completely
    start_time = time()
    for size in supported_sizes():
        if size > 20:
            break
        assert is_maximal(size), f"Taps for size {size} do not give a maximum-length cycle"
    end_time = time()
    print(f"Table entries 2..20 verified in {end_time - start_time:.2f} seconds.")

    states = cycle_states(LFSR(1, 16))
    assert len(np.unique(states)) == len(states) == 65535
    print("All 65535 states of the 16-bit register are distinct!")

    # Taps that are not maximal fall into a shorter cycle
    short = period(LFSR(1, [4, 2]))
    print(f"Period of taps [4, 2]: {short}")
