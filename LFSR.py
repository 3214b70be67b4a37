import copy
import operator
from numbers import Integral

from lfsr_taps import lookup_taps


class InvalidStateError(ValueError):
    def __init__(self, state, low, high):
        self.state = state
        self.low = low
        self.high = high
        super().__init__(f"initial state must be between {low} and {high}")


def derive_mask(size: int, taps) -> int:
    """
    Builds the feedback mask for a register of `size` bits.
    Tap t is bit (size - t) counted from the MSB, i.e. bit (t - 1) from the LSB.
    """
    mask = 0
    for t in taps:
        if t < 1 or t > size:
            raise ValueError(f"tap {t} is outside a register of size {size}")
        mask |= 1 << (t - 1)
    return mask


class LFSR:
    """
    Binary Galois LFSR of arbitrary size.

    `size_or_taps` is either the register size, in which case the default
    maximum-cycle taps are looked up, or a list of taps whose first element
    is the size. Not every tap list produces the maximum cycle.
    """

    # Mutable through step(), so not hashable
    __hash__ = None

    def __init__(self, state: int, size_or_taps):
        # Plain ints only: numpy integers are converted, floats rejected
        state = operator.index(state)
        if isinstance(size_or_taps, Integral):
            taps = lookup_taps(operator.index(size_or_taps))
        else:
            taps = tuple(operator.index(t) for t in size_or_taps)
            if not taps:
                raise ValueError("tap list must not be empty")

        size = taps[0]
        limit = 1 << size
        if state <= 0 or state >= limit:
            raise InvalidStateError(state, 1, limit - 1)

        self.size = size
        self.taps = taps
        # Fixed for the lifetime of the register
        self.mask = derive_mask(size, taps)
        self.state = state

    def _transition(self) -> int:
        state = self.state
        lsb = state & 1
        state >>= 1
        if lsb:
            state ^= self.mask
        return state

    def next(self) -> "LFSR":
        """Returns a new register in the next state, leaving this one untouched."""
        new = copy.copy(self)
        new.state = self._transition()
        return new

    def step(self) -> int:
        # Single assignment, so readers never see a half-applied transition
        self.state = self._transition()
        return self.state

    def __eq__(self, other):
        if not isinstance(other, LFSR):
            return NotImplemented
        return (self.state, self.mask, self.size) == (other.state, other.mask, other.size)

    def __repr__(self):
        return f"LFSR(state={self.state}, mask={self.mask})"


if __name__ == "__main__":
    # Simple test
    lfsr = LFSR(1, 8)
    print(lfsr)
    assert lfsr.mask == 184
    assert lfsr == LFSR(1, [8, 6, 5, 4])
    assert lfsr.next().state == 184
    assert lfsr.state == 1, "next() must not modify the register"

    # Walk a full 4-bit cycle
    lfsr = LFSR(1, 4)
    seen = []
    for _ in range(15):
        seen.append(lfsr.state)
        lfsr.step()
    assert lfsr.state == 1
    assert sorted(seen) == list(range(1, 16))
    print("Maximum-length 4-bit cycle verified!")

    try:
        LFSR(256, 8)
    except InvalidStateError as e:
        print(f"Rejected out of range state: {e}")
